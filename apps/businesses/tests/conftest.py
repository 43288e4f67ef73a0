import pytest
from django.utils import timezone
from datetime import timedelta
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.businesses.models import Business
from apps.reviews.models import Review


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def business(db):
    """Create and return a business."""
    return Business.objects.create(
        name='Auto Servis Plus',
        categories=['Servisler'],
        address='Kadıköy, İstanbul',
        city='İstanbul',
        district='Kadıköy',
        phone='+90 555 123 4567',
        latitude=40.983013,
        longitude=29.028961,
    )


@pytest.fixture
def other_business(db):
    """Create and return another business."""
    return Business.objects.create(
        name='Hızlı Lastik',
        categories=['Lastikçiler'],
        city='Ankara',
    )


@pytest.fixture
def reviewers(db):
    """Create and return three reviewers."""
    return [
        User.objects.create_user(email=f'reviewer{i}@example.com', password='TestPass123!')
        for i in range(3)
    ]


@pytest.fixture
def make_review():
    """Insert a review directly, bypassing the service layer."""
    def _make_review(business, author, rating, days_ago=10):
        created = timezone.now() - timedelta(days=days_ago)
        return Review.objects.create(
            business=business,
            author=author,
            rating=rating,
            comment='Review text',
            created_at=created,
            updated_at=created,
        )
    return _make_review
