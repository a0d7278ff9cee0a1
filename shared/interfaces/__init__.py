# Shared interfaces module
from .exception_handlers import custom_exception_handler, domain_error_response

__all__ = ['custom_exception_handler', 'domain_error_response']
