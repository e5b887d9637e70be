import logging

from apps.utils.aws.s3 import get_s3_post_endpoint

from .conditions import ConditionEq
from .exceptions import MissingRequiredCondition

logger = logging.getLogger(__name__)


def _required_value(policy, name):
    condition = policy.condition(name)
    if condition is None:
        raise MissingRequiredCondition(name)
    return condition.value_string()


def get_policy_post_form(policy, signer):
    """
    Everything a browser based upload needs, except for the file itself.
    Same format as boto3's generate_presigned_post

    :param policy: parsed Policy
    :param signer: PolicySigner
    :return: {'url': ..., 'fields': {...}}
    """
    bucket = _required_value(policy, 'bucket')
    key = _required_value(policy, '$key')

    signer.add_policy(policy)
    encoded_policy, signature = signer.sign()

    fields = {}
    for condition in policy.conditions:
        # Exact matches must be sent as is. 'bucket' is part of the URL
        if type(condition) is ConditionEq and condition.name() != 'bucket':
            fields[condition.name().lstrip('$')] = condition.value_string()
    fields.update({
        'key': key,
        'AWSAccessKeyId': signer.access_key_id,
        'policy': encoded_policy.decode(),
        'signature': signature.decode(),
    })

    return {
        'url': get_s3_post_endpoint(bucket),
        'fields': fields
    }
