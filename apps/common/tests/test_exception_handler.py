import pytest
from datetime import datetime, timezone as dt_timezone
from django.db import InterfaceError, IntegrityError, OperationalError
from rest_framework import status
from django.http import Http404
from rest_framework.exceptions import PermissionDenied, ValidationError

from apps.common.exception_handler import service_exception_handler, status_for
from apps.common.exceptions import (
    ServiceError,
    ServiceValidationError,
    ResourceNotFoundError,
    ActionForbiddenError,
    RateLimitExceededError,
    StoreUnavailableError,
)
from apps.common.store import translate_store_errors


class TestStatusMapping:

    @pytest.mark.parametrize('exc_class, expected', [
        (ServiceValidationError, status.HTTP_400_BAD_REQUEST),
        (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
        (ActionForbiddenError, status.HTTP_403_FORBIDDEN),
        (RateLimitExceededError, status.HTTP_429_TOO_MANY_REQUESTS),
        (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
        (ServiceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    ])
    def test_status_for(self, exc_class, expected):
        assert status_for(exc_class('boom')) == expected

    def test_domain_subclass_uses_category(self):
        class DomainNotFound(Exception):
            pass

        class WorkshopNotFound(DomainNotFound, ResourceNotFoundError):
            pass

        assert status_for(WorkshopNotFound('gone')) == status.HTTP_404_NOT_FOUND


class TestServiceExceptionHandler:

    def test_service_error_body(self):
        response = service_exception_handler(ResourceNotFoundError('Review not found'), {})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Review not found', 'code': 'not_found'}

    def test_rate_limit_body_and_header(self):
        retry_after = datetime(2026, 1, 8, 12, 0, tzinfo=dt_timezone.utc)
        exc = RateLimitExceededError('You can only submit one review per week', retry_after=retry_after)

        response = service_exception_handler(exc, {})

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.data['error'] == 'Rate limit exceeded'
        assert response.data['message'] == 'You can only submit one review per week'
        assert response.data['retry_after'] == retry_after.isoformat()
        assert response['Retry-After'] == 'Thu, 08 Jan 2026 12:00:00 GMT'

    def test_store_unavailable_retry_after(self):
        response = service_exception_handler(StoreUnavailableError('down'), {})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response['Retry-After'] == '5'

    def test_non_service_error_uses_default_handler(self):
        response = service_exception_handler(ValidationError({'rating': ['bad']}), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'rating': ['bad']}

    def test_unhandled_exception_returns_none(self):
        assert service_exception_handler(RuntimeError('bug'), {}) is None

    def test_django_404_uses_service_body(self):
        response = service_exception_handler(Http404('No Review matches the given query.'), {})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'No Review matches the given query.', 'code': 'not_found'}

    def test_permission_denied_uses_service_body(self):
        response = service_exception_handler(PermissionDenied('Not yours'), {})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'error': 'Not yours', 'code': 'forbidden'}

    def test_rate_limit_message_comes_from_exception(self):
        exc = RateLimitExceededError('You can only submit one review every 3 day(s)')

        response = service_exception_handler(exc, {})

        assert response.data['message'] == 'You can only submit one review every 3 day(s)'
        assert 'retry_after' not in response.data


class TestTranslateStoreErrors:

    @pytest.mark.parametrize('error', [OperationalError('timeout'), InterfaceError('closed')])
    def test_connectivity_errors_translated(self, error):
        @translate_store_errors
        def read():
            raise error

        with pytest.raises(StoreUnavailableError) as exc_info:
            read()

        assert exc_info.value.__cause__ is error

    def test_integrity_error_propagates(self):
        @translate_store_errors
        def write():
            raise IntegrityError('duplicate')

        with pytest.raises(IntegrityError):
            write()

    def test_return_value_passed_through(self):
        @translate_store_errors
        def read(value):
            return value * 2

        assert read(21) == 42
        assert read.__name__ == 'read'
