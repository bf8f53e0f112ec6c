"""
Workflow error taxonomy and the helpers that turn it into HTTP responses.

Services raise one of the ``WorkflowError`` subclasses; views never build
error payloads by hand. ``json_endpoint`` wraps function views and DRF views
go through ``api_exception_handler``.
"""
import json
import logging
from functools import wraps

from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger('swifthire')

GENERIC_FAILURE_MESSAGE = 'An unexpected error occurred. Please try again later.'


class WorkflowError(Exception):
    """Base class for every user-visible failure raised by the workflow core."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFound(WorkflowError):
    status_code = 404


class Unauthorized(WorkflowError):
    status_code = 403


class ValidationFailure(WorkflowError):
    status_code = 400


class ExternalServiceFailure(WorkflowError):
    status_code = 502


def error_response(message, status_code=400):
    return JsonResponse({'success': False, 'error': message}, status=status_code)


def json_endpoint(view_func):
    """
    Decorator for JSON function views.

    Workflow errors become ``{'success': False, 'error': ...}`` with the
    error's status code. Anything else is logged and reported as a generic 500.
    """
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except WorkflowError as e:
            logger.warning(f"{view_func.__name__} refused for user {request.user.pk}: {e.message}")
            return error_response(e.message, e.status_code)
        except Exception:
            logger.exception(f"Unexpected error in {view_func.__name__}")
            return error_response(GENERIC_FAILURE_MESSAGE, 500)
    return _wrapped_view


def read_payload(request):
    """Return the request body as a dict, accepting JSON bodies and form posts."""
    if request.content_type == 'application/json':
        if not request.body:
            return {}
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationFailure('Invalid JSON payload.')
        if not isinstance(data, dict):
            raise ValidationFailure('Invalid JSON payload.')
        return data
    return request.POST.dict()


def api_exception_handler(exc, context):
    """DRF exception handler that understands the workflow taxonomy."""
    if isinstance(exc, WorkflowError):
        return Response({'success': False, 'error': exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        logger.exception(f"Unhandled API error in {context.get('view').__class__.__name__}", exc_info=exc)
        return Response(
            {'success': False, 'error': GENERIC_FAILURE_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return response
