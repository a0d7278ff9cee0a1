"""
Users app configuration.
"""
from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.users'
    label = 'users'
    verbose_name = 'Users'

    def ready(self):
        from shared.infrastructure.events import event_bus
        from .subscribers import register_subscribers

        register_subscribers(event_bus)
