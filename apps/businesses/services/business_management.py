"""Business lookup service."""

from django.db.models import QuerySet
from uuid import UUID

from apps.common.store import translate_store_errors
from ..models import Business
from .exceptions import BusinessNotFoundError


@translate_store_errors
def get_business_by_id(*, business_id: UUID) -> Business:
    """
    Retrieve a business by ID.

    Raises:
        BusinessNotFoundError: If business doesn't exist
    """
    try:
        return Business.objects.get(id=business_id)
    except Business.DoesNotExist:
        raise BusinessNotFoundError(f"Business {business_id} not found")


def list_businesses() -> QuerySet[Business]:
    """Directory listing, best rated first."""
    return Business.objects.order_by('-rating', '-review_count', 'name')
