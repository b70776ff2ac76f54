# config/settings/test.py

from .base import *

# === TESTS ===

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

# Fast hashing
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

BASE_URL = 'http://testserver'

# Quiet logs during tests
LOGGING['handlers'] = {
    'null': {
        'class': 'logging.NullHandler',
    },
}
LOGGING['root']['handlers'] = ['null']
LOGGING['loggers'] = {}
