# Django model discovery
from .infrastructure.models import UserModel  # noqa: F401
