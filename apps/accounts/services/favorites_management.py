"""
Favorites management service - a user's set of favorite businesses.

Add and remove are each a single set operation against the store (an
insert that ignores the unique-constraint conflict, a filtered delete), so
rapid concurrent toggles never read-modify-write the set.
"""

import logging
from uuid import UUID

from apps.businesses.models import Business
from apps.common.store import translate_store_errors
from ..models import User, FavoriteBusiness
from .exceptions import FavoriteBusinessNotFoundError

logger = logging.getLogger(__name__)


@translate_store_errors
def add_favorite(*, user: User, business_id: UUID) -> None:
    """
    Add a business to the user's favorites. Adding twice is a no-op.

    Raises:
        FavoriteBusinessNotFoundError: If business doesn't exist
    """
    if not Business.objects.filter(id=business_id).exists():
        raise FavoriteBusinessNotFoundError("Business not found")

    FavoriteBusiness.objects.bulk_create(
        [FavoriteBusiness(user=user, business_id=business_id)],
        ignore_conflicts=True,
    )
    logger.info("User %s favorited business %s", user.id, business_id)


@translate_store_errors
def remove_favorite(*, user: User, business_id: UUID) -> None:
    """Remove a business from the user's favorites. Removing an absent id is a no-op."""
    deleted, _ = FavoriteBusiness.objects.filter(user=user, business_id=business_id).delete()
    if deleted:
        logger.info("User %s unfavorited business %s", user.id, business_id)


@translate_store_errors
def get_favorite_ids(*, user: User) -> list[UUID]:
    return list(
        FavoriteBusiness.objects
        .filter(user=user)
        .order_by('-created_at')
        .values_list('business_id', flat=True)
    )


@translate_store_errors
def list_favorites(*, user: User) -> list[Business]:
    """
    Resolve the user's favorites to businesses, most recently added first.

    Ids whose business no longer exists are skipped, not pruned.
    """
    favorite_ids = get_favorite_ids(user=user)
    businesses = Business.objects.in_bulk(favorite_ids)
    return [businesses[business_id] for business_id in favorite_ids if business_id in businesses]
