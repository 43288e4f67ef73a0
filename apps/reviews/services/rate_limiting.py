"""
Weekly review rate limiter.

Policy: at most one review submission per user per rolling window (seven
days by default), regardless of which business is being reviewed.

The check and the subsequent insert are not atomic. Two near-simultaneous
submissions from the same user can both pass; at worst one extra review
lands inside the window.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from django.conf import settings

from apps.common.store import translate_store_errors
from apps.reviews.models import Review
from .exceptions import ReviewRateLimitError


class WeeklyReviewRateLimiter:
    """
    Decides whether a user may submit a new review at a given moment.

    Args:
        window: Length of the rolling window. Defaults to
            ``settings.REVIEW_RATE_LIMIT_WINDOW``.
    """

    def __init__(self, window: Optional[timedelta] = None):
        self.window = window if window is not None else settings.REVIEW_RATE_LIMIT_WINDOW

    @translate_store_errors
    def latest_blocking_review(self, *, user_id: UUID, now: datetime) -> Optional[Review]:
        """User's most recent review created at or after ``now - window``, if any."""
        return (
            Review.objects
            .filter(author_id=user_id, created_at__gte=now - self.window)
            .order_by('-created_at')
            .first()
        )

    def may_review(self, *, user_id: UUID, now: datetime) -> bool:
        return self.latest_blocking_review(user_id=user_id, now=now) is None

    def next_allowed_at(self, *, user_id: UUID, now: datetime) -> Optional[datetime]:
        """
        Moment after which the user may submit again, or None if allowed now.

        A review created at ``t`` blocks up to and including ``t + window``.
        """
        blocking = self.latest_blocking_review(user_id=user_id, now=now)
        if blocking is None:
            return None
        return blocking.created_at + self.window

    def ensure_may_review(self, *, user_id: UUID, now: datetime) -> None:
        """
        Raises:
            ReviewRateLimitError: If a review inside the window exists
        """
        retry_after = self.next_allowed_at(user_id=user_id, now=now)
        if retry_after is not None:
            raise ReviewRateLimitError(self.policy_message(), retry_after=retry_after)

    def policy_message(self) -> str:
        if self.window == timedelta(days=7):
            return "You can only submit one review per week"
        return f"You can only submit one review every {self.window.days} day(s)"
