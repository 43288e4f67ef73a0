"""Services for businesses business logic."""

from .exceptions import (
    BusinessesServiceError,
    BusinessNotFoundError,
)
from .business_management import (
    get_business_by_id,
    list_businesses,
)
from .rating_aggregation import (
    RatingSummary,
    summarize_reviews,
    recompute_business_rating,
    recompute_all_business_ratings,
)

__all__ = [
    # Exceptions
    'BusinessesServiceError',
    'BusinessNotFoundError',
    # Business Management
    'get_business_by_id',
    'list_businesses',
    # Rating Aggregation
    'RatingSummary',
    'summarize_reviews',
    'recompute_business_rating',
    'recompute_all_business_ratings',
]
