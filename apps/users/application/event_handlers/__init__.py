# Users event handlers
from .deferred_password import DeferredPasswordHandler, PasswordAssignment

__all__ = ['DeferredPasswordHandler', 'PasswordAssignment']
