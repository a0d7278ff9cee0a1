"""
Test settings.
"""
import copy

from .base import *  # noqa: F401,F403

SECRET_KEY = 'test-secret-key'
DEBUG = False
ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

CELERY_BROKER_URL = 'memory://'
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False

# Application records reach caplog through the root logger only
LOGGING = copy.deepcopy(LOGGING)  # noqa: F405
for _name in ('apps', 'shared'):
    LOGGING['loggers'][_name] = {'level': 'DEBUG', 'propagate': True}
