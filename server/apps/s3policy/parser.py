import json
import logging
import numbers

from apps.utils.timezone_utils import str_to_dt_utc

from .conditions import ConditionEq, ConditionRange, ConditionStartsWith
from .exceptions import InvalidPrefixKey, MalformedDocument, MissingField, MissingRequiredCondition
from .policy import Policy

logger = logging.getLogger(__name__)

REQUIRED_CONDITIONS = ['bucket', '$key']


def _is_number(value):
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def _reject_constant(name):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError('Illegal constant: {}'.format(name))


class PolicyParser(object):
    """
    Decode a JSON policy document into a Policy, keeping the exact bytes
    the document came in as its raw form
    """

    def _load(self, raw):
        try:
            doc = json.loads(raw.decode('utf-8'), parse_constant=_reject_constant)
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedDocument('Illegal JSON: {}'.format(e))
        if not isinstance(doc, dict):
            raise MalformedDocument('Policy document must be a JSON object')
        return doc

    def parse_expiration(self, doc):
        value = doc.get('expiration', None)
        if value is None:
            raise MissingField('expiration')
        expiration = str_to_dt_utc(value) if isinstance(value, str) else None
        if expiration is None:
            raise MalformedDocument('Illegal expiration: {}'.format(value))
        return expiration

    def parse_condition(self, entry):
        """
        Build one Condition from a conditions entry. The shape of the entry
        (object or list, then the first list element) decides the type.

        :param entry: decoded JSON value
        :return: Condition
        """
        if isinstance(entry, dict):
            if len(entry) != 1:
                raise MalformedDocument('Condition object must have exactly one element: {}'.format(entry))
            key, value = list(entry.items())[0]
            if not isinstance(value, str):
                raise MalformedDocument('Condition value must be a string: {}'.format(entry))
            return ConditionEq(key, value)

        if isinstance(entry, list):
            if len(entry) != 3 or not isinstance(entry[0], str):
                raise MalformedDocument('Illegal condition: {}'.format(entry))
            op, arg1, arg2 = entry
            if op == 'eq' or op == 'starts-with':
                if not isinstance(arg1, str) or not isinstance(arg2, str):
                    raise MalformedDocument('Illegal {0} condition: {1}'.format(op, entry))
                if op == 'eq':
                    return ConditionEq(arg1, arg2)
                if not arg1.startswith('$'):
                    raise InvalidPrefixKey(arg1)
                return ConditionStartsWith(arg1, arg2)
            # Anything else is taken as a range, like content-length-range
            if not _is_number(arg1) or not _is_number(arg2):
                raise MalformedDocument('Illegal range condition: {}'.format(entry))
            return ConditionRange(op, arg1, arg2)

        raise MalformedDocument('Illegal condition: {}'.format(entry))

    def parse_conditions(self, doc):
        entries = doc.get('conditions', None)
        if entries is None:
            raise MissingField('conditions')
        if not isinstance(entries, list):
            raise MalformedDocument('conditions must be a list')
        return [self.parse_condition(entry) for entry in entries]

    def check_for_required_fields(self, conditions):
        names = set([condition.name() for condition in conditions])
        for field in REQUIRED_CONDITIONS:
            if field not in names:
                raise MissingRequiredCondition(field)

    def parse(self, raw):
        if raw is None:
            raise MalformedDocument('Empty policy document')
        if isinstance(raw, str):
            raw = raw.encode('utf-8')
        raw = bytes(raw)

        doc = self._load(raw)
        expiration = self.parse_expiration(doc)
        conditions = self.parse_conditions(doc)
        self.check_for_required_fields(conditions)

        logger.debug('Parsed policy: expiration={0}, {1} conditions'.format(expiration, len(conditions)))
        return Policy(expiration, conditions=conditions, raw=raw)


def parse_policy(raw):
    return PolicyParser().parse(raw)
