"""
Common Django settings for gradeposting.

Environment specific settings modules (``test``, deployment overrides) should
import everything from here and override what they need.
"""
import os

from path import Path as path

from gradeposting.envs.logsettings import get_logger_config

############################# PATHS #############################

PROJECT_ROOT = path(os.path.abspath(__file__)).parent.parent
REPO_ROOT = PROJECT_ROOT.parent
ENV_ROOT = REPO_ROOT.parent

############################# DJANGO CORE #############################

DEBUG = False
SECRET_KEY = os.environ.get('GRADEPOSTING_SECRET_KEY', 'dev key')
ALLOWED_HOSTS = []
USE_TZ = True
TIME_ZONE = 'UTC'
LANGUAGE_CODE = 'en'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

ROOT_URLCONF = 'gradeposting.urls'

STATIC_URL = '/static/'

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',

    # Audit trail for durable settings
    'simple_history',

    'gradeposting.djangoapps.coursework.apps.CourseworkConfig',
    'gradeposting.djangoapps.site_settings.apps.SiteSettingsConfig',
    'gradeposting.djangoapps.post_policies.apps.PostPoliciesConfig',
]

MIDDLEWARE = [
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'simple_history.middleware.HistoryRequestMiddleware',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
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
        'ENGINE': os.environ.get('GRADEPOSTING_DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('GRADEPOSTING_DB_NAME', ENV_ROOT / 'db' / 'gradeposting.db'),
        'USER': os.environ.get('GRADEPOSTING_DB_USER', 'root'),
        'PASSWORD': os.environ.get('GRADEPOSTING_DB_PASSWORD', ''),
        'HOST': os.environ.get('GRADEPOSTING_DB_HOST', 'localhost'),
        'PORT': os.environ.get('GRADEPOSTING_DB_PORT', '3306'),
        'ATOMIC_REQUESTS': True,
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.memcached.PyMemcacheCache',
        'KEY_PREFIX': 'gradeposting',
        'LOCATION': os.environ.get('GRADEPOSTING_MEMCACHE', 'localhost:11211'),
    },
}

############################# LOGGING #############################

LOGGING_ENV = 'sandbox'
LOGGING = get_logger_config(
    logging_env=LOGGING_ENV,
    use_syslog=os.environ.get('GRADEPOSTING_USE_SYSLOG') == 'true',
)

############################# SITE SETTINGS #############################

# Django cache alias used to hold Setting values between reads
SITE_SETTINGS_CACHE_NAME = 'default'

# Number of seconds a Setting value may be served from the cache
SITE_SETTINGS_CACHE_TIMEOUT = 600

############################# POST POLICIES #############################

# Number of times the create-if-absent path re-reads after losing a race
# on the one-default-per-course or one-override-per-assignment constraint.
POST_POLICIES_MAX_CREATE_ATTEMPTS = 3
