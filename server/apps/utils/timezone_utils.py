import datetime
import logging

import pytz
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)


# dt is a datetime object
def convert_to_utc(dt):
    if dt.tzinfo:
        dt_utc = dt.astimezone(pytz.utc)
    else:
        # Policy documents are always expressed in UTC
        dt_utc = pytz.utc.localize(dt)
    return dt_utc


def str_to_dt_utc(str):
    """
    Parse an ISO-8601 string into a timezone-aware UTC datetime

    :param str: string like '2007-12-01T12:00:00.000Z'
    :return: DateTime (UTC) or None if the string is not a date
    """
    try:
        dt = parse_datetime(str)
    except ValueError as e:
        logger.debug('Illegal datetime {0}: {1}'.format(str, e))
        return None
    if not dt:
        # Try to convert a date to datetime
        try:
            d = parse_date(str)
        except ValueError:
            d = None
        if not d:
            return None
        dt = datetime.datetime(d.year, d.month, d.day)
    try:
        return convert_to_utc(dt)
    except OverflowError as e:
        # Valid ISO-8601, but out of range once moved to UTC
        logger.debug('Illegal datetime {0}: {1}'.format(str, e))
        return None


def formatted_ts(dt):
    return dt.strftime('%Y-%m-%dT%H:%M:%SZ')


def str_utc(dt):
    dt_utc = convert_to_utc(dt)
    if dt_utc:
        return formatted_ts(dt_utc)
    else:
        logger.error("Fail to convert to datetime utc string")
        return None
