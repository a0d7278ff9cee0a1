# Admin registrations live in the interfaces layer
from .interfaces.admin import UserAdmin  # noqa: F401
