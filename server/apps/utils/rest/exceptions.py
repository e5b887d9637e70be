from rest_framework.exceptions import APIException


class ApiIllegalPolicyException(APIException):
    status_code = 400
    default_detail = 'Bad Request: Illegal S3 POST policy'
    default_code = 'bad_request'


class ApiPolicyNotAllowedException(APIException):
    status_code = 400
    default_detail = 'Bad Request: Policy does not match server settings'
    default_code = 'bad_request'
