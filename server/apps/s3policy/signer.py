import logging

from apps.utils.aws.s3 import encode_policy_document, sign_encoded_policy

from .exceptions import NilPolicy, NoPolicyAttached, NoRawForm

logger = logging.getLogger(__name__)


class PolicySigner(object):
    """
    Signer provide the ability to create the base64 encoded policy and
    the hmac signed by the AWS Credentials.

    Only the raw bytes a policy was parsed from are signed, so the signature
    always covers exactly what will be sent. One signer holds one policy
    and is not meant to be shared between threads.
    """
    policy = None

    def __init__(self, secret_key, access_key_id=''):
        self.policy = None
        self.access_key_id = access_key_id
        self._secret_key = secret_key

    def add_policy(self, policy):
        """
        Add a policy to be signed. This will replace any existing policy.
        """
        if policy is None:
            raise NilPolicy()
        self.policy = policy

    def sign(self):
        """
        Sign the policy

        :return: (base64 encoded policy, base64 HMAC-SHA1 signature) as bytes
        """
        if self.policy is None:
            raise NoPolicyAttached()
        if self.policy.raw is None:
            raise NoRawForm()

        encoded_policy = encode_policy_document(self.policy.raw)
        signature = sign_encoded_policy(encoded_policy, self._secret_key)
        logger.debug('Signed policy ({} bytes)'.format(len(self.policy.raw)))
        return encoded_policy, signature
