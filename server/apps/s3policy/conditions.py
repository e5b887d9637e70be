"""
Conditions of an S3 POST policy.

See http://docs.aws.amazon.com/AmazonS3/latest/dev/HTTPPOSTForms.html#ConditionMatching
"""


def natural_number(num):
    """ 10.0 is written as 10 """
    if isinstance(num, float) and num.is_integer():
        return int(num)
    return num


class Condition(object):
    key = ''

    def __init__(self, key):
        self.key = key

    def __eq__(self, other):
        return type(self) is type(other) and self._fields() == other._fields()

    def __hash__(self):
        return hash((type(self).__name__,) + self._fields())

    def __repr__(self):
        return '{0}({1})'.format(type(self).__name__, ', '.join([repr(f) for f in self._fields()]))

    def _fields(self):
        return (self.key,)

    def name(self):
        return self.key

    def matches(self, key, value):
        raise NotImplementedError

    def value_string(self):
        raise NotImplementedError

    def to_json(self):
        raise NotImplementedError


class KeyValueCondition(Condition):
    value = ''

    def __init__(self, key, value):
        super(KeyValueCondition, self).__init__(key)
        self.value = value

    def _fields(self):
        return (self.key, self.value)

    def matches(self, key, value):
        return self.key == key and self.value == value

    def value_string(self):
        return self.value


class ConditionEq(KeyValueCondition):
    """
    Exact match: {"acl": "public-read"} or ["eq", "$acl", "public-read"]
    """

    def to_json(self):
        return {self.key: self.value}


class ConditionStartsWith(KeyValueCondition):
    """
    Starts With: ["starts-with", "$key", "user/eric/"]

    The prefix is applied by S3. matches() is still an exact match.
    """

    def to_json(self):
        return ['starts-with', self.key, self.value]


class ConditionRange(Condition):
    """
    Range for fields that accept ranges: ["content-length-range", 1048579, 10485760]
    """
    min = 0
    max = 0

    def __init__(self, key, min, max):
        super(ConditionRange, self).__init__(key)
        self.min = min
        self.max = max

    def _fields(self):
        return (self.key, self.min, self.max)

    def matches(self, key, value):
        # Only the field is checked. The value is bound by S3
        return self.key == key

    def value_string(self):
        return '{0} {1}'.format(natural_number(self.min), natural_number(self.max))

    def to_json(self):
        return [self.key, natural_number(self.min), natural_number(self.max)]
