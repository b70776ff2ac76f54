# config/settings/development.py

from .base import *

# === DEVELOPMENT ===

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# Debug Toolbar only when available
try:
    import debug_toolbar

    INSTALLED_APPS += ['debug_toolbar']
    MIDDLEWARE = ['debug_toolbar.middleware.DebugToolbarMiddleware'] + MIDDLEWARE

    DEBUG_TOOLBAR_CONFIG = {
        'SHOW_TOOLBAR_CALLBACK': lambda request: DEBUG,
        'SHOW_COLLAPSED': True,
    }

    INTERNAL_IPS = [
        '127.0.0.1',
        'localhost',
    ]

except ImportError:
    pass

# === DATABASE ===

# PostgreSQL by default (same as production)
if env('DATABASE_URL', default=None):
    import dj_database_url

    DATABASES['default'] = dj_database_url.parse(env('DATABASE_URL'), conn_max_age=600)
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': env('DB_NAME', default='taskdesk'),
            'USER': env('DB_USER', default='taskdesk'),
            'PASSWORD': env('DB_PASSWORD', default='taskdesk'),
            'HOST': env('DB_HOST', default='localhost'),
            'PORT': env('DB_PORT', default='5432'),
            'OPTIONS': {
                'sslmode': 'prefer',
            },
            'CONN_MAX_AGE': 60,
        }
    }

# SQLite only when explicitly requested
if env('USE_SQLITE', cast=bool, default=False):
    print("🔄 Using SQLite for development")
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
else:
    print(f"🐘 Using PostgreSQL: {DATABASES['default']['NAME']}@{DATABASES['default']['HOST']}")

# One transaction per request
DATABASES['default']['ATOMIC_REQUESTS'] = True

# === EMAIL ===

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# === VERBOSE LOGGING ===

LOGGING['handlers']['console']['level'] = 'DEBUG'
LOGGING['root']['level'] = 'DEBUG'

LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'DEBUG',
    'propagate': False,
}

# Relaxed cookies for local http
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Plain static storage, no manifest needed while developing
STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

# shell_plus
SHELL_PLUS_IMPORTS = [
    'from apps.core.models import *',
    'from apps.tasks.models import *',
    'from apps.tasks.panels import *',
]

print("🚀 DEVELOPMENT settings loaded")
print(f"📁 BASE_DIR: {BASE_DIR}")
print(f"🔑 DEBUG: {DEBUG}")
print(f"🌐 ALLOWED_HOSTS: {ALLOWED_HOSTS}")
