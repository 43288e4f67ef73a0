"""Domain-specific exceptions for businesses services."""

from apps.common.exceptions import ResourceNotFoundError


class BusinessesServiceError(Exception):
    """Base exception for businesses services."""
    pass


class BusinessNotFoundError(BusinessesServiceError, ResourceNotFoundError):
    """Raised when business does not exist."""
    pass
