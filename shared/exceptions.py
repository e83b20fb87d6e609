"""
Shared exceptions and custom exception handler.
Consolidates all domain exceptions for the application.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


# === Base Exceptions ===

class AppException(Exception):
    """Base exception for application."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(AppException):
    """Validation failed (invalid input)."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: str = None, code: str = None):
        super().__init__(message=message, code=code or "INVALID_INPUT")
        self.field = field


class NotFoundError(AppException):
    """Entity not found or not visible to the acting user."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity_name: str, entity_id=None, code: str = None):
        if entity_id is None:
            message = f"{entity_name} not found"
        else:
            message = f"{entity_name} with id '{entity_id}' not found"
        super().__init__(message=message, code=code or "NOT_FOUND")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ConflictError(AppException):
    """Uniqueness violation or an operation blocked by dependent rows."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "CONFLICT")


class ForbiddenError(AppException):
    """Attempted mutation of a row the user may see but not change."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "FORBIDDEN")


class InternalError(AppException):
    """Storage or unexpected failure. The cause is kept for logging only."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message=message, code="INTERNAL_SERVER_ERROR")
        self.cause = cause


# === Exception Handler ===

def custom_exception_handler(exc, context):
    """Handle custom application exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    from rest_framework.exceptions import NotAuthenticated, AuthenticationFailed
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return Response(
            {
                'status': 401,
                'message': 'Authentication required.',
            },
            status=status.HTTP_401_UNAUTHORIZED
        )

    from rest_framework.exceptions import PermissionDenied
    if isinstance(exc, PermissionDenied):
        return Response(
            {
                'status': 403,
                'message': 'You do not have permission to perform this action.',
            },
            status=status.HTTP_403_FORBIDDEN
        )

    # Serializer errors ({"field": ["error message"]})
    from rest_framework.exceptions import ValidationError as DRFValidationError
    if isinstance(exc, DRFValidationError) and response is not None:
        if isinstance(response.data, dict) and 'detail' not in response.data:
            first_error = next(iter(response.data.values()), [])
            if isinstance(first_error, list) and first_error:
                error_message = str(first_error[0])
            else:
                error_message = 'Invalid request data.'
            return Response(
                {
                    'status': response.status_code,
                    'message': error_message,
                    'code': 'INVALID_INPUT',
                    'errors': response.data,
                },
                status=response.status_code
            )

    # Convert DRF's default error format to our format
    if response is not None and isinstance(response.data, dict) and 'detail' in response.data:
        return Response(
            {
                'status': response.status_code,
                'message': response.data['detail'],
            },
            status=response.status_code
        )

    if isinstance(exc, InternalError):
        logger.error(f"Internal error: {exc.message}", exc_info=exc.cause or exc)
        return Response(
            {
                'status': 500,
                'message': 'Internal server error.',
                'code': exc.code,
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, AppException):
        body = {
            'status': exc.status_code,
            'message': exc.message,
            'code': exc.code,
        }
        if isinstance(exc, ValidationError) and exc.field:
            body['field'] = exc.field
        return Response(body, status=exc.status_code)

    return response
