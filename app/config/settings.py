"""
Settings for the manifest ledger.

Everything deployment-specific comes from the environment; a .env file next to
manage.py is loaded first when present.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dev-only-insecure-key')
DEBUG = env_bool('DJANGO_DEBUG', False)
ALLOWED_HOSTS = [host for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if host]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'ingest',
    'pipeline',
]

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
WSGI_APPLICATION = 'config.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': os.environ.get('MANIFEST_DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('MANIFEST_DB_NAME', str(BASE_DIR / 'manifest_ledger.sqlite3')),
        'USER': os.environ.get('MANIFEST_DB_USER', ''),
        'PASSWORD': os.environ.get('MANIFEST_DB_PASSWORD', ''),
        'HOST': os.environ.get('MANIFEST_DB_HOST', ''),
        'PORT': os.environ.get('MANIFEST_DB_PORT', ''),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('MANIFEST_TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# Master list writes go out in chunks of this many entries
MASTER_LIST_BATCH_SIZE = int(os.environ.get('MASTER_LIST_BATCH_SIZE', '1000'))

# What deleting an upload does to entries first seen in it: 'delete' or 'nullify'
MASTER_LIST_DELETE_POLICY = os.environ.get('MASTER_LIST_DELETE_POLICY', 'delete')

MANIFEST_LOG_LEVEL = os.environ.get('MANIFEST_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'manifest': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'manifest',
        },
    },
    'loggers': {
        'ingest': {
            'handlers': ['console'],
            'level': MANIFEST_LOG_LEVEL,
            'propagate': False,
        },
        'pipeline': {
            'handlers': ['console'],
            'level': MANIFEST_LOG_LEVEL,
            'propagate': False,
        },
    },
}
