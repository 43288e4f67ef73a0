"""
Review management service - lifecycle operations for reviews.

Every change to a business's set of reviews (create, rating update, delete)
is followed by a full recompute of that business's aggregate rating. The
review write is committed first; if the recompute then fails because the
store is unavailable, the review is kept and the aggregate stays stale until
the next change to that business.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.businesses.models import Business
from apps.businesses.services import recompute_business_rating
from apps.common.exceptions import StoreUnavailableError
from apps.common.store import translate_store_errors
from apps.reviews.models import Review
from .exceptions import (
    ReviewNotFoundError,
    InvalidRatingError,
    InvalidCommentError,
    BusinessNotFoundError,
    UnauthorizedReviewActionError,
    ReviewRateLimitError,
)
from .rate_limiting import WeeklyReviewRateLimiter

logger = logging.getLogger(__name__)


def validate_rating(rating) -> int:
    # bool is an int subclass but never a valid rating
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRatingError("Rating must be a whole number between 1 and 5")
    if not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")
    return rating


def validate_comment(comment) -> str:
    if not isinstance(comment, str) or not comment.strip():
        raise InvalidCommentError("Comment must not be empty")
    return comment.strip()


def refresh_business_rating(*, business_id: UUID, now: Optional[datetime] = None) -> None:
    """Recompute the business aggregate after a committed review change."""
    try:
        recompute_business_rating(business_id=business_id, now=now)
    except StoreUnavailableError:
        logger.exception(
            "Rating recompute failed for business %s; aggregate is stale until its next review change",
            business_id,
        )


@translate_store_errors
def create_review(
    *,
    author: User,
    business_id: UUID,
    rating: int,
    comment: str,
    now: Optional[datetime] = None,
    rate_limiter: Optional[WeeklyReviewRateLimiter] = None,
) -> Review:
    """
    Create a new review for a business.

    This operation:
    1. Validates rating and comment (no store access)
    2. Checks the business exists
    3. Applies the weekly rate limit for the author
    4. Inserts the review with likes=0, is_verified=False
    5. Recomputes the business's rating and review count

    Args:
        author: User submitting the review
        business_id: UUID of business being reviewed
        rating: Overall rating (1-5)
        comment: Review text, must not be blank
        now: Submission time (defaults to current time)
        rate_limiter: Limiter to apply (defaults to the weekly limiter)

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not an integer in 1-5 range
        InvalidCommentError: If comment is blank
        BusinessNotFoundError: If business doesn't exist
        ReviewRateLimitError: If author reviewed anything within the window
    """
    rating = validate_rating(rating)
    comment = validate_comment(comment)
    now = now or timezone.now()
    rate_limiter = rate_limiter or WeeklyReviewRateLimiter()

    try:
        business = Business.objects.get(id=business_id)
    except Business.DoesNotExist:
        raise BusinessNotFoundError("Business not found")

    try:
        rate_limiter.ensure_may_review(user_id=author.id, now=now)
    except ReviewRateLimitError as e:
        logger.warning("Review by user %s for business %s rate limited until %s", author.id, business.id, e.retry_after)
        raise

    with transaction.atomic():
        review = Review.objects.create(
            business=business,
            author=author,
            rating=rating,
            comment=comment,
            likes=0,
            is_verified=False,
            created_at=now,
            updated_at=now,
        )

    logger.info("Review %s created by user %s for business %s", review.id, author.id, business.id)

    refresh_business_rating(business_id=business.id, now=now)

    return review


@translate_store_errors
def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Retrieve a review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        review = Review.objects.select_related('author', 'business').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    return review


@translate_store_errors
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating: Optional[int] = None,
    comment: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. Business and author
    cannot be changed. The business rating is recomputed only when
    ``rating`` is part of the update.

    Args:
        review_id: UUID of review to update
        user: User making the update (must be author)
        rating: New overall rating (1-5)
        comment: New review text
        now: Update time (defaults to current time)

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidRatingError: If rating not in 1-5 range
        InvalidCommentError: If comment is blank
    """
    if rating is not None:
        rating = validate_rating(rating)
    if comment is not None:
        comment = validate_comment(comment)
    now = now or timezone.now()

    with transaction.atomic():
        # Get review with row lock
        try:
            review = (
                Review.objects
                .select_for_update()
                .get(id=review_id)
            )
        except Review.DoesNotExist:
            raise ReviewNotFoundError("Review not found")

        if review.author_id != user.id:
            logger.warning("User %s attempted to update review %s owned by %s", user.id, review.id, review.author_id)
            raise UnauthorizedReviewActionError(
                "You can only update your own reviews"
            )

        update_fields = ['updated_at']
        if rating is not None:
            review.rating = rating
            update_fields.append('rating')
        if comment is not None:
            review.comment = comment
            update_fields.append('comment')
        review.updated_at = now

        review.save(update_fields=update_fields)

    logger.info("Review %s updated by user %s (%s)", review.id, user.id, ', '.join(update_fields))

    if rating is not None:
        refresh_business_rating(business_id=review.business_id, now=now)

    return review


@translate_store_errors
def delete_review(*, review_id: UUID, user: User, now: Optional[datetime] = None) -> None:
    """
    Delete a review.

    Only the review author can delete their review. Deleting the last
    review of a business resets its rating and review count to 0.

    Args:
        review_id: UUID of review to delete
        user: User making the deletion (must be author)
        now: Deletion time (defaults to current time)

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    now = now or timezone.now()

    with transaction.atomic():
        # Get review with row lock
        try:
            review = (
                Review.objects
                .select_for_update()
                .get(id=review_id)
            )
        except Review.DoesNotExist:
            raise ReviewNotFoundError("Review not found")

        if review.author_id != user.id:
            logger.warning("User %s attempted to delete review %s owned by %s", user.id, review.id, review.author_id)
            raise UnauthorizedReviewActionError(
                "You can only delete your own reviews"
            )

        business_id = review.business_id
        review.delete()

    logger.info("Review %s deleted by user %s", review_id, user.id)

    refresh_business_rating(business_id=business_id, now=now)


@translate_store_errors
def like_review(*, review_id: UUID) -> Review:
    """
    Increment a review's like counter by one.

    Any authenticated user may like; the business rating is unaffected.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    updated = Review.objects.filter(id=review_id).update(likes=F('likes') + 1)
    if not updated:
        raise ReviewNotFoundError("Review not found")

    return get_review_by_id(review_id=review_id)


@translate_store_errors
def get_business_reviews(*, business_id: UUID) -> QuerySet[Review]:
    """
    Get all reviews of a business, newest first.

    Raises:
        BusinessNotFoundError: If business doesn't exist
    """
    if not Business.objects.filter(id=business_id).exists():
        raise BusinessNotFoundError("Business not found")

    return (
        Review.objects
        .filter(business_id=business_id)
        .select_related('author', 'business')
        .order_by('-created_at')
    )


def get_user_reviews(*, user: User) -> QuerySet[Review]:
    """Get all reviews written by a user, newest first."""
    return (
        Review.objects
        .filter(author=user)
        .select_related('author', 'business')
        .order_by('-created_at')
    )
