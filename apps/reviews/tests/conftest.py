import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.businesses.models import Business
from apps.businesses.services import recompute_business_rating
from apps.reviews.models import Review


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        full_name='Ayşe Yılmaz',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        full_name='Mehmet Demir',
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as review user."""
    client = APIClient()
    refresh = RefreshToken.for_user(review_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as other user."""
    client = APIClient()
    refresh = RefreshToken.for_user(review_other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def review_business(db):
    """Create and return a business to review."""
    return Business.objects.create(
        name='Auto Servis Plus',
        categories=['Servisler'],
        address='Kadıköy, İstanbul',
        city='İstanbul',
        district='Kadıköy',
        phone='+90 555 123 4567',
    )


@pytest.fixture
def review_another_business(db):
    """Create and return another business to review."""
    return Business.objects.create(
        name='Usta Kaportacı',
        categories=['Kaportacılar'],
        address='Beşiktaş, İstanbul',
        city='İstanbul',
        district='Beşiktaş',
    )


@pytest.fixture
def review(db, review_user, review_business):
    """Create and return a review by review_user written ten days ago (outside the weekly window)."""
    created = timezone.now() - timedelta(days=10)
    review = Review.objects.create(
        business=review_business,
        author=review_user,
        rating=5,
        comment='Çok hızlı ve temiz iş çıkardılar.',
        created_at=created,
        updated_at=created,
    )
    recompute_business_rating(business_id=review_business.id)
    return review


@pytest.fixture
def other_review(db, review_other_user, review_business):
    """Create and return a review by the other user written twenty days ago."""
    created = timezone.now() - timedelta(days=20)
    review = Review.objects.create(
        business=review_business,
        author=review_other_user,
        rating=3,
        comment='Fiyatlar biraz yüksek.',
        created_at=created,
        updated_at=created,
    )
    recompute_business_rating(business_id=review_business.id)
    return review
