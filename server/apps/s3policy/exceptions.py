"""
Errors raised while building, parsing or signing an S3 POST policy.

Document errors (PolicyDocumentException) describe a policy that does not
follow the S3 grammar. Signer errors (PolicySignerException) describe a
signer that is not in a state to sign.
"""


class PolicyException(Exception):
    default_detail = 'Illegal S3 POST policy'

    def __init__(self, msg=None):
        super(PolicyException, self).__init__(msg or self.default_detail)


class PolicyDocumentException(PolicyException):
    default_detail = 'Illegal policy document'


class MalformedDocument(PolicyDocumentException):
    default_detail = 'Malformed policy document'


class MissingField(PolicyDocumentException):

    def __init__(self, field):
        self.field = field
        super(MissingField, self).__init__('Missing {} element.'.format(field))


class MissingRequiredCondition(PolicyDocumentException):

    def __init__(self, field):
        self.field = field
        super(MissingRequiredCondition, self).__init__('Missing required condition: {}'.format(field))


class InvalidPrefixKey(PolicyDocumentException):

    def __init__(self, key):
        self.key = key
        super(InvalidPrefixKey, self).__init__(
            'starts-with condition key must start with "$": {}'.format(key)
        )


class PolicySignerException(PolicyException):
    default_detail = 'Unable to sign policy'


class NilPolicy(PolicySignerException):
    default_detail = 'Missing policy'


class NoPolicyAttached(PolicySignerException):
    default_detail = 'Missing policy. Use add_policy(...) to add a policy.'


class NoRawForm(PolicySignerException):
    default_detail = 'Policy has no raw form. Serialize and parse the policy before signing it.'
