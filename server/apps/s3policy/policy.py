import json
import logging

from apps.utils.timezone_utils import convert_to_utc, str_utc

from .conditions import ConditionEq, ConditionRange, ConditionStartsWith

logger = logging.getLogger(__name__)


class Policy(object):
    """
    Policy contains the expiration and set of conditions.

    See http://docs.aws.amazon.com/AmazonS3/latest/dev/HTTPPOSTForms.html#HTTPPOSTConstructPolicy

    A Policy built with the add_condition_* methods has no raw form. Only a
    parsed Policy keeps the exact bytes it was parsed from, and those bytes
    are what gets signed.
    """
    expiration = None
    conditions = []

    def __init__(self, expiration, conditions=None, raw=None):
        self.expiration = convert_to_utc(expiration)
        self.conditions = list(conditions) if conditions else []
        self._raw = raw

    def __repr__(self):
        return 'Policy({0}, {1} conditions)'.format(str_utc(self.expiration), len(self.conditions))

    @property
    def raw(self):
        return self._raw

    def add_condition_eq(self, field, value):
        self.conditions.append(ConditionEq(field, value))

    def add_condition_starts_with(self, field, value):
        self.conditions.append(ConditionStartsWith(field, value))

    def add_condition_range(self, field, min, max):
        self.conditions.append(ConditionRange(field, min, max))

    def condition(self, key):
        """
        First condition with the given name

        :param key: condition name, like 'bucket' or '$key'
        :return: Condition or None
        """
        for condition in self.conditions:
            if condition.name() == key:
                return condition
        return None

    def condition_matches(self, key, value):
        for condition in self.conditions:
            if condition.matches(key, value):
                return True
        return False

    def to_json(self):
        return {
            'expiration': str_utc(self.expiration),
            'conditions': [condition.to_json() for condition in self.conditions],
        }

    def serialize(self):
        """
        Canonical form of a built policy: compact JSON, expiration first,
        conditions in insertion order.

        Always a fresh encoding of the model. It never returns self.raw
        """
        data = json.dumps(self.to_json(), separators=(',', ':'), allow_nan=False)
        logger.debug('Serialized policy with {} conditions'.format(len(self.conditions)))
        return data.encode('utf-8')
