"""
Django settings for the s3dropbox server.
For more information on this file, see
https://docs.djangoproject.com/en/dev/topics/settings/
For the full list of settings and their values, see
https://docs.djangoproject.com/en/dev/ref/settings/
"""
import os

import boto3
# Use 12factor inspired environment variables or from a file
import environ

from apps.utils.aws.common import AWS_REGION

# Build paths inside the project like this: join(BASE_DIR, "directory")
BASE_PATH = environ.Path(__file__) - 3
BASE_DIR = str(BASE_PATH)

# List of keys stored on EC2's Parameter Store as:
#       s3dropbox.prod.xxx where xxx is the value in the following MAP
SECRET_MAP = {
    'SECRET_KEY': 'SecretKey',
    'S3DROPBOX_PUBLIC_KEY': 'DropboxPublicKey',
    'S3DROPBOX_PRIVATE_KEY': 'DropboxPrivateKey',
}

env = environ.Env(
    DJANGO_DEBUG=(bool, False),
    SERVER_TYPE=(str, 'dev'),
    PRODUCTION=(bool, False),
    DOCKER=(bool, False),
    SECRET_KEY=(str, 'Changeme'),
    S3DROPBOX_PUBLIC_KEY=(str, ''),
    S3DROPBOX_PRIVATE_KEY=(str, ''),
    S3DROPBOX_BUCKET_NAME=(str, ''),
)

# Ideally move env file should be outside the git repo
# i.e. BASE_DIR.parent.parent
env_file = None
if not env('PRODUCTION') and not env('DOCKER'):
    os.environ.setdefault('DJANGO_ENV_FILE', '.local.env')
if 'DJANGO_ENV_FILE' in os.environ:
    env_file = os.path.join(os.path.dirname(__file__), os.environ['DJANGO_ENV_FILE'])
    if os.path.isfile(env_file):
        print('Reading Env file: {0}'.format(env_file))
        environ.Env.read_env(env_file)

PRODUCTION = env('PRODUCTION')
SERVER_TYPE = env('SERVER_TYPE')
DOCKER = env('DOCKER')
DEBUG = env('DJANGO_DEBUG')

if PRODUCTION:
    # For Production, all secret keys are stored on EC2's Parameter Store
    ssm = boto3.client('ssm', region_name=AWS_REGION)

    def get_secret(key):
        ssm_key = '.'.join(['s3dropbox', SERVER_TYPE, SECRET_MAP[key]])
        resp = ssm.get_parameter(
            Name=ssm_key,
            WithDecryption=True
        )
        secret = resp['Parameter']['Value']
        return secret
else:
    # For all other cases, secrets are stored on env variables
    def get_secret(key):
        return env(key)

SECRET_KEY = get_secret('SECRET_KEY')
ALLOWED_HOSTS = []

# Application definition

DJANGO_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
)

THIRD_PARTY_APPS = (
    'rest_framework',
)

# Apps specific for this project go here.
COMMON_APPS = (
    'apps.s3policy',
)

INSTALLED_APPS = DJANGO_APPS + COMMON_APPS + THIRD_PARTY_APPS

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.contrib.auth.context_processors.auth',
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# Database
# https://docs.djangoproject.com/en/dev/ref/settings/#databases
DATABASES = {
    # Only used for API users and sessions
    'default': env.db('DATABASE_DEFAULT_URL', default='sqlite:///{}'.format(os.path.join(BASE_DIR, 'db.sqlite3'))),
}

# Internationalization
# https://docs.djangoproject.com/en/dev/topics/i18n/

LANGUAGE_CODE = 'en-us'

USE_I18N = True

USE_TZ = True

TIME_ZONE = 'UTC'

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

CSRF_COOKIE_HTTPONLY = True
SESSION_COOKIE_HTTPONLY = True

# http://www.django-rest-framework.org/
REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),

    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework.authentication.BasicAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),

    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),

    'TEST_REQUEST_RENDERER_CLASSES': (
        'rest_framework.renderers.MultiPartRenderer',
        'rest_framework.renderers.JSONRenderer',
    ),

    'DATETIME_INPUT_FORMATS': ['iso-8601', '%Y-%m-%dT%H:%M:%SZ']
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': "[%(asctime)s] %(levelname)s [%(name)s:%(lineno)s] %(message)s",
            'datefmt': "%d/%b/%Y %H:%M:%S"
        },
        'simple': {
            'format': '%(levelname)s %(message)s'
        },
    },
    'handlers': {
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose'
        },
    },
    'loggers': {
        '': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True
        },
        'django': {
            'handlers': ['console'],
            'propagate': False,
        },
        'boto3': {
            'handlers': ['console'],
            'level': 'ERROR'
        },
        'botocore': {
            'handlers': ['console'],
            'level': 'ERROR'
        },
    }
}

TEST_RUNNER = 'config.runner.AppsTestSuiteRunner'

# S3 Dropbox
# ----------
# S3DROPBOX_PUBLIC_KEY is the AWS Access Key ID sent with the upload form.
# S3DROPBOX_PRIVATE_KEY is the AWS Secret Key used to sign policies.
# When set, S3DROPBOX_BUCKET_NAME is the only bucket policies can target.
S3DROPBOX_PUBLIC_KEY = get_secret('S3DROPBOX_PUBLIC_KEY')
S3DROPBOX_PRIVATE_KEY = get_secret('S3DROPBOX_PRIVATE_KEY')
S3DROPBOX_BUCKET_NAME = env('S3DROPBOX_BUCKET_NAME')
