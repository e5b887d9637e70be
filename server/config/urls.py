"""s3dropbox server URL Configuration

"""
from django.urls import path

from apps.s3policy.api_views import APIS3PolicyPostFormViewSet, APIS3PolicySignViewSet

urlpatterns = [

    # S3 Policy APIs
    path('api/v1/s3policy/sign/', APIS3PolicySignViewSet.as_view(), name='api-s3policy-sign'),
    path('api/v1/s3policy/form/', APIS3PolicyPostFormViewSet.as_view(), name='api-s3policy-form'),
]
