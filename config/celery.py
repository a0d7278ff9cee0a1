"""
Celery application.
"""
import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

app = Celery('registration')

# CELERY_* keys in the Django settings configure the app
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
