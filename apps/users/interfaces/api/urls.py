"""
Users API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('v1/users/', include('apps.users.interfaces.api.v1.urls')),
]
