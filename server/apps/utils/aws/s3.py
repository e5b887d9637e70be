import base64
import hashlib
import hmac

S3_POST_ENDPOINT_FORMAT = 'https://{bucket}.s3.amazonaws.com/'


def get_s3_post_endpoint(bucket_name):
    """ URL a browser based (POST) upload must be sent to """
    return S3_POST_ENDPOINT_FORMAT.format(bucket=bucket_name)


def encode_policy_document(raw):
    """ Standard base64 of the exact policy bytes """
    return base64.b64encode(raw)


def sign_encoded_policy(encoded_policy, private_key):
    """ Sign a base64 encoded policy document for a simple upload.
    http://aws.amazon.com/articles/1434/#signyours3postform

    The HMAC-SHA1 is computed over the base64 text, not over the JSON
    """
    if isinstance(private_key, str):
        private_key = private_key.encode()
    return base64.b64encode(hmac.new(private_key, encoded_policy, hashlib.sha1).digest())
