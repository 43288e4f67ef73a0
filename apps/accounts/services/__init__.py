"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    FavoriteBusinessNotFoundError,
)
from .favorites_management import (
    add_favorite,
    remove_favorite,
    get_favorite_ids,
    list_favorites,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'FavoriteBusinessNotFoundError',
    # Favorites
    'add_favorite',
    'remove_favorite',
    'get_favorite_ids',
    'list_favorites',
]
