"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import ResourceNotFoundError


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class FavoriteBusinessNotFoundError(AccountsServiceError, ResourceNotFoundError):
    """Raised when favoriting a business that does not exist."""
    pass
