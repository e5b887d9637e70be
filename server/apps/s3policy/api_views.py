import logging

from django.conf import settings

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.utils.rest.exceptions import ApiIllegalPolicyException, ApiPolicyNotAllowedException

from .exceptions import PolicyException
from .parser import parse_policy
from .serializers import S3PolicyDocumentSerializer, S3PolicyPostFormSerializer, S3PolicySignatureSerializer
from .signer import PolicySigner
from .utils import get_policy_post_form

logger = logging.getLogger(__name__)


class S3PolicySignMixin(object):
    """
    Parse the policy document in the request body and build a signer for it.
    The exact request body is what gets signed.
    """

    def get_signer(self):
        return PolicySigner(
            secret_key=settings.S3DROPBOX_PRIVATE_KEY,
            access_key_id=settings.S3DROPBOX_PUBLIC_KEY
        )

    def _check_bucket(self, policy):
        bucket_name = getattr(settings, 'S3DROPBOX_BUCKET_NAME', '')
        if not bucket_name:
            return
        for condition in policy.conditions:
            if condition.name() != 'bucket':
                continue
            if condition.value_string() != bucket_name:
                logger.info('Policy bucket(%s) != settings.bucket(%s)' % (condition.value_string(), bucket_name))
                raise ApiPolicyNotAllowedException('Bucket not allowed: {}'.format(condition.value_string()))

    def get_policy(self, request):
        raw = request.body
        serializer = S3PolicyDocumentSerializer(data=request.data)
        if not serializer.is_valid():
            logger.error('Invalid Policy: {}'.format(serializer.errors))
            return None, Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            policy = parse_policy(raw)
        except PolicyException as e:
            logger.error('Invalid Policy: {}'.format(e))
            raise ApiIllegalPolicyException(str(e))

        self._check_bucket(policy)
        return policy, None


class APIS3PolicySignViewSet(S3PolicySignMixin, APIView):
    """
    Sign an S3 POST policy document.

    Returns the base64 encoded policy and its signature
    """
    permission_classes = (IsAuthenticated,)

    def post(self, request, format=None):
        policy, error_response = self.get_policy(request)
        if error_response is not None:
            return error_response

        signer = self.get_signer()
        try:
            signer.add_policy(policy)
            encoded_policy, signature = signer.sign()
        except PolicyException as e:
            raise ApiIllegalPolicyException(str(e))

        serializer = S3PolicySignatureSerializer({
            'policy': encoded_policy.decode(),
            'signature': signature.decode()
        })
        return Response(serializer.data, status=status.HTTP_200_OK)


class APIS3PolicyPostFormViewSet(S3PolicySignMixin, APIView):
    """
    Sign an S3 POST policy document and return the URL and form fields
    to upload a file with it.
    """
    permission_classes = (IsAuthenticated,)

    def post(self, request, format=None):
        policy, error_response = self.get_policy(request)
        if error_response is not None:
            return error_response

        try:
            form = get_policy_post_form(policy, self.get_signer())
        except PolicyException as e:
            raise ApiIllegalPolicyException(str(e))

        logger.info('Signed upload form for {}'.format(form['url']))
        serializer = S3PolicyPostFormSerializer(form)
        return Response(serializer.data, status=status.HTTP_200_OK)
