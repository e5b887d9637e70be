# In production set the environment variable like this:
#    DJANGO_SETTINGS_MODULE=config.settings.production
from .base import *             # NOQA

# For security and performance reasons, DEBUG is turned off
DEBUG = False
TEMPLATES[0]['OPTIONS'].update({'debug': False})

TIME_ZONE = 'UTC'

print('**********************************')
print('INFO: Production Settings')
print('INFO: Debug = {0}'.format(DEBUG))
print('**********************************')

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Lax'
CSRF_COOKIE_SECURE = True
CSRF_COOKIE_HTTPONLY = True
CSRF_COOKIE_SAMESITE = 'Strict'

SECURE_HSTS_SECONDS = 15768000  # 6 months
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# Must mention ALLOWED_HOSTS in production!
ALLOWED_HOSTS = env.list('DJANGO_ALLOWED_HOSTS', default=['.amazonaws.com'])

if not S3DROPBOX_PRIVATE_KEY:
    from django.core.exceptions import ImproperlyConfigured
    raise ImproperlyConfigured('S3DROPBOX_PRIVATE_KEY is required to sign policies')
