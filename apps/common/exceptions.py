"""
Shared error taxonomy for the service layer.

Every app declares its own domain exceptions in ``services/exceptions.py``.
Each of those also derives from exactly one category below, which is what
the API layer uses to pick an HTTP status.

Exception Hierarchy:
    ServiceError (base)
    ├── ServiceValidationError    -> 400
    ├── ResourceNotFoundError     -> 404
    ├── ActionForbiddenError      -> 403
    ├── RateLimitExceededError    -> 429
    └── StoreUnavailableError     -> 503

Usage:
    class ReviewNotFoundError(ReviewsServiceError, ResourceNotFoundError):
        pass
"""


class ServiceError(Exception):
    """Base exception for all service layer errors."""

    code = 'service_error'


class ServiceValidationError(ServiceError):
    """Malformed input. Raised before any store mutation is attempted."""

    code = 'validation_error'


class ResourceNotFoundError(ServiceError):
    """Referenced review, business or user does not exist."""

    code = 'not_found'


class ActionForbiddenError(ServiceError):
    """Caller is not allowed to act on the resource."""

    code = 'forbidden'


class RateLimitExceededError(ServiceError):
    """
    A submission limit blocks the request.

    Recoverable by retrying later. ``retry_after`` is the earliest moment
    the request would be accepted, when known.
    """

    code = 'rate_limited'

    def __init__(self, message='', *, retry_after=None):
        super().__init__(message)
        self.retry_after = retry_after


class StoreUnavailableError(ServiceError):
    """The database could not be reached or timed out. Retryable."""

    code = 'store_unavailable'
