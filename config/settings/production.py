"""
Production settings. Default for the WSGI and Celery entrypoints.
"""
from .base import *  # noqa: F401,F403
from .base import env_bool, env_list

DEBUG = False

ALLOWED_HOSTS = [host for host in env_list('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1') if host != '*']

# Deferred work always goes through the broker
CELERY_TASK_ALWAYS_EAGER = False

SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = env_bool('DJANGO_SECURE_COOKIES', True)
CSRF_COOKIE_SECURE = env_bool('DJANGO_SECURE_COOKIES', True)
