"""
Custom exception handlers for DRF.

Every error leaves the API in the same envelope:
``{statusCode, error, message, timestamp}``.
"""
import logging
from http import HTTPStatus

from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


def status_phrase(status_code: int) -> str:
    """Reason phrase for an HTTP status; 'Error' for unregistered codes."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return 'Error'


def error_body(status_code: int, message) -> dict:
    """Build the error envelope."""
    return {
        'statusCode': status_code,
        'error': status_phrase(status_code),
        'message': message,
        'timestamp': timezone.now().isoformat(),
    }


def domain_status_code(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status."""
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def domain_error_response(exc: DomainException) -> Response:
    """Render a domain exception."""
    status_code = domain_status_code(exc)
    return Response(error_body(status_code, exc.message), status=status_code)


def _flatten_validation_detail(detail, prefix: str = '') -> list:
    """Turn DRF's nested validation detail into ``"field: reason"`` strings."""
    if isinstance(detail, dict):
        messages = []
        for field_name, value in detail.items():
            name = field_name if not prefix else f"{prefix}.{field_name}"
            if field_name == 'non_field_errors':
                name = prefix
            messages.extend(_flatten_validation_detail(value, name))
        return messages
    if isinstance(detail, list):
        messages = []
        for value in detail:
            messages.extend(_flatten_validation_detail(value, prefix))
        return messages
    return [f"{prefix}: {detail}" if prefix else str(detail)]


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    if isinstance(exc, DomainException):
        return domain_error_response(exc)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, exceptions.ValidationError):
        response.data = error_body(
            response.status_code,
            _flatten_validation_detail(exc.detail),
        )
        return response

    if response is not None:
        detail = response.data.get('detail', response.data) if isinstance(response.data, dict) else response.data
        response.data = error_body(response.status_code, str(detail))
        return response

    view = context.get('view') if context else None
    logger.error(
        "Unhandled error in %s",
        view.__class__.__name__ if view is not None else "unknown view",
        exc_info=exc,
    )
    return Response(
        error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error'),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
