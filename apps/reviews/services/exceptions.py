"""Domain exceptions for reviews app."""

from apps.common.exceptions import (
    ServiceValidationError,
    ResourceNotFoundError,
    ActionForbiddenError,
    RateLimitExceededError,
)


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError, ResourceNotFoundError):
    """Review does not exist."""
    pass


class InvalidRatingError(ReviewsServiceError, ServiceValidationError):
    """Rating must be an integer between 1 and 5."""
    pass


class InvalidCommentError(ReviewsServiceError, ServiceValidationError):
    """Comment must not be blank."""
    pass


class BusinessNotFoundError(ReviewsServiceError, ResourceNotFoundError):
    """Reviewed business does not exist."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError, ActionForbiddenError):
    """User cannot modify this review."""
    pass


class ReviewRateLimitError(ReviewsServiceError, RateLimitExceededError):
    """User already submitted a review within the rate limit window."""
    pass
