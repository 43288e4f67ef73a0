"""DRF exception handler mapping service errors to HTTP responses."""

import logging

from django.http import Http404
from django.utils.http import http_date
from rest_framework import status
from rest_framework.response import Response
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.views import exception_handler

from .exceptions import (
    ServiceError,
    ServiceValidationError,
    ResourceNotFoundError,
    ActionForbiddenError,
    RateLimitExceededError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY = [
    (ServiceValidationError, status.HTTP_400_BAD_REQUEST),
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (ActionForbiddenError, status.HTTP_403_FORBIDDEN),
    (RateLimitExceededError, status.HTTP_429_TOO_MANY_REQUESTS),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(exc: ServiceError) -> int:
    for category, status_code in STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def service_exception_handler(exc, context):
    """
    Render ServiceError subclasses as ``{"error": ..., "code": ...}``.

    DRF's own not-found and permission-denied errors get the same body.
    Everything else goes through DRF's default handler.
    """
    if not isinstance(exc, ServiceError):
        response = exception_handler(exc, context)
        if response is not None and isinstance(exc, (Http404, NotFound, PermissionDenied)):
            code = 'forbidden' if isinstance(exc, PermissionDenied) else 'not_found'
            response.data = {'error': str(response.data.get('detail', '')) or 'Request failed', 'code': code}
        return response

    status_code = status_for(exc)
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else 'unknown'

    if status_code >= 500:
        logger.error("%s in %s: %s", type(exc).__name__, view_name, exc)
    else:
        logger.info("%s in %s: %s", type(exc).__name__, view_name, exc)

    data = {'error': str(exc) or 'Request failed', 'code': exc.code}
    headers = {}

    if isinstance(exc, RateLimitExceededError):
        data['error'] = 'Rate limit exceeded'
        data['message'] = str(exc)
        if exc.retry_after is not None:
            data['retry_after'] = exc.retry_after.isoformat()
            headers['Retry-After'] = http_date(exc.retry_after.timestamp())

    if isinstance(exc, StoreUnavailableError):
        headers['Retry-After'] = '5'

    return Response(data, status=status_code, headers=headers)
