from .base import *             # NOQA

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False
TEMPLATES[0]['OPTIONS'].update({'debug': DEBUG})
TESTING = True

TIME_ZONE = 'UTC'

LOGGING['loggers']['']['level'] = 'ERROR'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Remove overhead to speed up tests
# See http://nemesisdesign.net/blog/coding/how-to-speed-up-tests-django-postgresql/
MIDDLEWARE = [
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
]
# No need for fancy passports for testing. Make it fast instead
PASSWORD_HASHERS = (
    'django.contrib.auth.hashers.MD5PasswordHasher',
)

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

# Same secret as the AWS documentation examples
S3DROPBOX_PUBLIC_KEY = 'foobar'
S3DROPBOX_PRIVATE_KEY = 'this_is_a_secret_key_and_the_hmac_depend_on_it'
S3DROPBOX_BUCKET_NAME = ''
