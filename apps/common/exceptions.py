"""
Custom exception handler so every DRF error uses the response envelope
"""
import logging

from rest_framework import status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: 'Validation error',
    status.HTTP_401_UNAUTHORIZED: 'Authentication required',
    status.HTTP_403_FORBIDDEN: 'Permission denied',
    status.HTTP_404_NOT_FOUND: 'Resource not found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'Method not allowed',
    status.HTTP_409_CONFLICT: 'Conflict',
}


def _message_for(response):
    if response.status_code >= 500:
        return 'Internal server error'
    # Loyalty gate denials carry their own explanation
    if isinstance(response.data, dict) and 'required_tier' in response.data:
        return str(response.data.get('detail') or STATUS_MESSAGES[status.HTTP_403_FORBIDDEN])
    return STATUS_MESSAGES.get(response.status_code, 'An error occurred')


def custom_exception_handler(exc, context):
    """
    Wrap DRF's default handling in {"code", "msg", "errors"}
    """
    response = exception_handler(exc, context)
    if response is None:
        return response

    if response.status_code >= 500:
        logger.error(f"API Exception: {exc}", exc_info=True)
    else:
        logger.warning(f"API Exception ({response.status_code}): {exc}")

    errors = response.data
    if response.status_code >= 500:
        # Don't expose internal errors to non-staff callers
        request = context.get('request')
        if request is None or not getattr(request.user, 'is_staff', False):
            errors = {'detail': 'Internal server error'}

    response.data = {
        'code': response.status_code,
        'msg': _message_for(response),
        'errors': errors,
    }
    return response
