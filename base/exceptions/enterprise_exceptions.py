"""
API exception handling.

Structured error responses and logging shared by every endpoint, plus the
domain exceptions raised by the generation and AI services.
"""

import logging
import uuid

from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    MethodNotAllowed,
    NotFound,
    ParseError,
    ValidationError,
)
from rest_framework.views import exception_handler

logger = logging.getLogger('enterprise_exceptions')


class EnterpriseAPIException(APIException):
    """Base exception for API errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An error occurred processing your request.'
    default_code = 'enterprise_error'


class DiagramValidationException(EnterpriseAPIException):
    """The posted diagram cannot be turned into a generation input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'The diagram is invalid.'
    default_code = 'diagram_validation_error'


class DiagramGenerationError(EnterpriseAPIException):
    """The AI provider answered with something that is not a diagram."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'Failed to parse AI response.'
    default_code = 'diagram_generation_error'


class AIServiceUnavailableException(EnterpriseAPIException):
    """AI diagram generation is disabled, unconfigured or unreachable."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'AI diagram generation is not available.'
    default_code = 'ai_service_unavailable'


def enterprise_exception_handler(exc, context):
    """
    DRF exception handler with structured responses.

    Every handled error is returned as::

        {"error": true, "error_code", "message", "status_code",
         "timestamp", "request_id", "details"}
    """

    response = exception_handler(exc, context)

    if response is not None:

        request = context.get('request')
        view = context.get('view')

        custom_response_data = {
            'error': True,
            'error_code': _get_error_code(exc),
            'message': _get_error_message(exc, response),
            'status_code': response.status_code,
            'timestamp': timezone.now().isoformat(),
            'request_id': _generate_request_id(request),
            'details': _get_error_details(exc, response)
        }

        if view:
            custom_response_data['resource'] = view.__class__.__name__

        _log_exception(exc, context, custom_response_data)

        response.data = custom_response_data

    return response


def _get_error_code(exc):
    if isinstance(exc, EnterpriseAPIException):
        return exc.default_code
    return getattr(exc, 'default_code', 'unknown_error')


def _get_error_message(exc, response):
    """Extract appropriate error message from exception."""

    if isinstance(exc, ValidationError):

        if isinstance(response.data, dict):

            for field, errors in response.data.items():
                if isinstance(errors, list) and errors:
                    if field == 'non_field_errors':
                        return str(errors[0])
                    return f"Validation error in {field}: {errors[0]}"
            return "Validation error occurred"
        elif isinstance(response.data, list) and response.data:
            return str(response.data[0])

    elif isinstance(exc, ParseError):
        return "Malformed request body"

    elif isinstance(exc, NotFound):
        return "Resource not found"

    elif isinstance(exc, MethodNotAllowed):
        return f"Method {getattr(exc, 'method', 'UNKNOWN')} not allowed"

    if hasattr(exc, 'detail'):
        if isinstance(exc.detail, dict):
            return str(exc.detail.get('detail', exc.detail))
        return str(exc.detail)

    return str(exc)


def _get_error_details(exc, response):
    """Extract detailed error information for debugging."""

    details = {}

    if isinstance(exc, ValidationError) and response:
        details['validation_errors'] = response.data

    details['exception_type'] = exc.__class__.__name__

    return details


def _generate_request_id(request):
    """Generate or extract request ID for tracing."""
    if request:

        request_id = request.META.get('HTTP_X_REQUEST_ID')
        if request_id:
            return request_id

    return str(uuid.uuid4())[:8]


def _log_exception(exc, context, error_data):
    """Log exception details for monitoring and debugging."""

    request = context.get('request')
    view = context.get('view')

    log_data = {
        'exception_type': exc.__class__.__name__,
        'error_code': error_data.get('error_code'),
        'status_code': error_data.get('status_code'),
        'request_id': error_data.get('request_id'),
    }

    if request:
        log_data.update({
            'method': request.method,
            'path': request.path,
            'ip_address': _get_client_ip(request)
        })

    if view:
        log_data['view'] = view.__class__.__name__
        log_data['action'] = getattr(view, 'action', 'unknown')

    if error_data.get('status_code', 500) >= 500:
        logger.error(f"Server error: {exc}", extra=log_data, exc_info=True)
    elif error_data.get('status_code', 400) >= 400:
        logger.warning(f"Client error: {exc}", extra=log_data)
    else:
        logger.info(f"Exception handled: {exc}", extra=log_data)


def _get_client_ip(request):
    """Extract client IP address from request."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0]
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip or '127.0.0.1'
