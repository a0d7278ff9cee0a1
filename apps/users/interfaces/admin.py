"""
Users admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.user_model import UserModel


@admin.register(UserModel)
class UserAdmin(admin.ModelAdmin):
    """Admin configuration for User model."""
    list_display = ('id', 'username', 'email', 'has_password', 'created_at')
    search_fields = ('username', 'email')
    ordering = ('-created_at',)
    # Hashes are never shown or edited here
    exclude = ('password',)
    readonly_fields = ('id', 'created_at', 'updated_at')

    @admin.display(boolean=True, description='Password set')
    def has_password(self, obj):
        return bool(obj.password)
