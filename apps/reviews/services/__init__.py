"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review lifecycle (create, update, delete, like)
- Weekly per-user review rate limiting
"""

from .review_management import (
    create_review,
    get_review_by_id,
    update_review,
    delete_review,
    like_review,
    get_business_reviews,
    get_user_reviews,
)

from .rate_limiting import (
    WeeklyReviewRateLimiter,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    InvalidRatingError,
    InvalidCommentError,
    BusinessNotFoundError,
    UnauthorizedReviewActionError,
    ReviewRateLimitError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'update_review',
    'delete_review',
    'like_review',
    'get_business_reviews',
    'get_user_reviews',
    # Rate Limiting
    'WeeklyReviewRateLimiter',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'InvalidRatingError',
    'InvalidCommentError',
    'BusinessNotFoundError',
    'UnauthorizedReviewActionError',
    'ReviewRateLimitError',
]
