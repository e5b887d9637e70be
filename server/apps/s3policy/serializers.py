"""
{
   'expiration': '2007-12-01T12:00:00.000Z',
   'conditions': [
      {"bucket": "johnsmith"},
      ["starts-with", "$key", "user/eric/"],
      {"acl": "public-read"},
      ["content-length-range", 0, 4096000]
   ]
}
"""

from rest_framework import serializers

from apps.utils.timezone_utils import str_to_dt_utc


class S3PolicyDocumentSerializer(serializers.Serializer):
    # Same expiration rules as the policy parser
    expiration = serializers.CharField()
    conditions = serializers.ListField(child=serializers.JSONField(), allow_empty=True)

    def validate_expiration(self, value):
        if str_to_dt_utc(value) is None:
            raise serializers.ValidationError('Illegal expiration: {}'.format(value))
        return value


class S3PolicySignatureSerializer(serializers.Serializer):
    policy = serializers.CharField()
    signature = serializers.CharField()


class S3PolicyPostFormSerializer(serializers.Serializer):
    url = serializers.URLField()
    fields = serializers.DictField(child=serializers.CharField(allow_blank=True))
