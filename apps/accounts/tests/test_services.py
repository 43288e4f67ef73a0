"""Service layer tests for user favorites."""

import pytest
from datetime import timedelta
from unittest import mock
from uuid import uuid4
from django.db import OperationalError
from django.utils import timezone

from apps.accounts.models import FavoriteBusiness
from apps.accounts.services import (
    add_favorite,
    remove_favorite,
    get_favorite_ids,
    list_favorites,
)
from apps.accounts.services.exceptions import FavoriteBusinessNotFoundError
from apps.common.exceptions import ResourceNotFoundError, StoreUnavailableError


@pytest.mark.django_db
class TestAddFavorite:

    def test_add_favorite(self, user, business):
        add_favorite(user=user, business_id=business.id)

        assert get_favorite_ids(user=user) == [business.id]

    def test_add_twice_is_idempotent(self, user, business):
        add_favorite(user=user, business_id=business.id)
        add_favorite(user=user, business_id=business.id)

        assert FavoriteBusiness.objects.filter(user=user).count() == 1

    def test_add_unknown_business(self, user):
        with pytest.raises(FavoriteBusinessNotFoundError) as exc_info:
            add_favorite(user=user, business_id=uuid4())

        assert isinstance(exc_info.value, ResourceNotFoundError)
        assert FavoriteBusiness.objects.count() == 0

    def test_favorites_are_per_user(self, user, other_user, business):
        add_favorite(user=user, business_id=business.id)

        assert get_favorite_ids(user=other_user) == []

    def test_store_down(self, user, business):
        with mock.patch.object(
            FavoriteBusiness.objects, 'bulk_create', side_effect=OperationalError('timeout')
        ):
            with pytest.raises(StoreUnavailableError):
                add_favorite(user=user, business_id=business.id)


@pytest.mark.django_db
class TestRemoveFavorite:

    def test_remove_favorite(self, user, business, other_business):
        add_favorite(user=user, business_id=business.id)
        add_favorite(user=user, business_id=other_business.id)

        remove_favorite(user=user, business_id=business.id)

        assert get_favorite_ids(user=user) == [other_business.id]

    def test_remove_absent_is_noop(self, user, business):
        remove_favorite(user=user, business_id=business.id)
        remove_favorite(user=user, business_id=uuid4())

        assert get_favorite_ids(user=user) == []

    def test_remove_keeps_other_users(self, user, other_user, business):
        add_favorite(user=user, business_id=business.id)
        add_favorite(user=other_user, business_id=business.id)

        remove_favorite(user=user, business_id=business.id)

        assert get_favorite_ids(user=other_user) == [business.id]


@pytest.mark.django_db
class TestListFavorites:

    def test_most_recent_first(self, user, business, other_business):
        add_favorite(user=user, business_id=business.id)
        add_favorite(user=user, business_id=other_business.id)
        FavoriteBusiness.objects.filter(user=user, business_id=business.id).update(
            created_at=timezone.now() - timedelta(days=1)
        )

        assert list_favorites(user=user) == [other_business, business]

    def test_skips_removed_businesses(self, user, business, other_business):
        add_favorite(user=user, business_id=business.id)
        add_favorite(user=user, business_id=other_business.id)
        other_business.delete()

        assert list_favorites(user=user) == [business]
        # Stale id is kept
        assert len(get_favorite_ids(user=user)) == 2

    def test_empty(self, user):
        assert list_favorites(user=user) == []
