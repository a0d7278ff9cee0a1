"""
User storage model.
"""
from django.db import models


class UserModel(models.Model):
    """
    Stored user record.

    Email is indexed for lookups but deliberately not unique; uniqueness is
    checked by the registration workflow.
    """
    id = models.CharField(primary_key=True, max_length=64, editable=False)
    username = models.CharField(max_length=30)
    email = models.EmailField(max_length=254, db_index=True)
    password = models.CharField(max_length=255, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'users'
        db_table = 'users'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.username} <{self.email}>"
