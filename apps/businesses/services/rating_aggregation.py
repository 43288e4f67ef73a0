"""
Rating aggregation service.

A business's ``rating`` and ``review_count`` are a pure function of its
current reviews and are recomputed from scratch after every change to that
set, never patched incrementally.

Concurrency: there is no per-business lock. Two recomputes racing on the
same business may each miss the other's freshly written review; the last
write wins and the next mutation of that business corrects it. Run the
``recompute_business_ratings`` command to repair drift explicitly.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Avg, Count
from django.utils import timezone

from apps.common.store import translate_store_errors
from apps.reviews.models import Review
from ..models import Business

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatingSummary:
    rating: float
    review_count: int


def summarize_reviews(*, business_id: UUID) -> RatingSummary:
    """Mean rating and count over the business's current reviews (0.0 when none)."""
    aggregates = Review.objects.filter(business_id=business_id).aggregate(
        avg=Avg('rating'),
        count=Count('id'),
    )
    count = aggregates['count'] or 0
    if count == 0:
        return RatingSummary(rating=0.0, review_count=0)
    # No rounding here; presentation rounds for display
    return RatingSummary(rating=float(aggregates['avg']), review_count=count)


@translate_store_errors
@transaction.atomic
def recompute_business_rating(*, business_id: UUID, now: Optional[datetime] = None) -> RatingSummary:
    """
    Recalculate and persist a business's aggregate rating.

    Idempotent: with no intervening review change, repeated calls persist
    the same ``rating`` and ``review_count``.

    Args:
        business_id: Business UUID
        now: Timestamp written to ``updated_at`` (defaults to current time)

    Returns:
        RatingSummary that was computed. When the business no longer
        exists nothing is written and the summary is still returned.

    Raises:
        StoreUnavailableError: If the database cannot be reached
    """
    summary = summarize_reviews(business_id=business_id)

    updated = Business.objects.filter(id=business_id).update(
        rating=summary.rating,
        review_count=summary.review_count,
        updated_at=now or timezone.now(),
    )

    if not updated:
        logger.warning("Rating recompute skipped, business %s not found", business_id)
    else:
        logger.debug(
            "Business %s rating recomputed: rating=%s review_count=%s",
            business_id, summary.rating, summary.review_count,
        )

    return summary


def recompute_all_business_ratings(*, dry_run: bool = False) -> list[tuple[Business, RatingSummary]]:
    """
    Recompute every business and return the ones whose stored aggregate drifted.

    Args:
        dry_run: Only report drift, write nothing

    Returns:
        List of (business as stored before repair, correct summary)
    """
    drifted = []
    for business in Business.objects.order_by('name').iterator():
        expected = summarize_reviews(business_id=business.id)
        if business.rating == expected.rating and business.review_count == expected.review_count:
            continue
        drifted.append((business, expected))
        if not dry_run:
            recompute_business_rating(business_id=business.id)

    if drifted:
        logger.info("Found %d business(es) with drifted ratings (dry_run=%s)", len(drifted), dry_run)
    return drifted
