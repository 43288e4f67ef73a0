import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import FavoriteBusiness
from apps.accounts.services import add_favorite


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, auth_client, user, business):
        add_favorite(user=user, business_id=business.id)

        url = reverse('users:current-user')
        response = auth_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['fullName'] == 'Test User'
        assert response.data['role'] == 'customer'
        assert response.data['favorites'] == [str(business.id)]

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Token Tests
# =============================================================================

@pytest.mark.django_db
class TestToken:
    """Tests for POST /api/auth/token/"""

    def test_obtain_token(self, api_client, user):
        url = reverse('token_obtain_pair')
        response = api_client.post(url, {'email': user.email, 'password': 'TestPass123!'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data

    def test_obtain_token_wrong_password(self, api_client, user):
        url = reverse('token_obtain_pair')
        response = api_client.post(url, {'email': user.email, 'password': 'wrong'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Favorites Tests
# =============================================================================

@pytest.mark.django_db
class TestFavorites:
    """Tests for /api/auth/favorites/"""

    def test_add_favorite(self, auth_client, user, business):
        url = reverse('users:favorites-add')
        response = auth_client.post(url, {'businessId': str(business.id)}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['favorites'] == [business.id]
        assert FavoriteBusiness.objects.filter(user=user, business_id=business.id).exists()

    def test_add_favorite_twice(self, auth_client, user, business):
        url = reverse('users:favorites-add')
        auth_client.post(url, {'businessId': str(business.id)}, format='json')
        response = auth_client.post(url, {'businessId': str(business.id)}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert FavoriteBusiness.objects.filter(user=user).count() == 1

    def test_add_favorite_unknown_business(self, auth_client):
        url = reverse('users:favorites-add')
        response = auth_client.post(url, {'businessId': str(uuid4())}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'not_found'

    def test_add_favorite_invalid_id(self, auth_client):
        url = reverse('users:favorites-add')
        response = auth_client.post(url, {'businessId': 'nope'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_remove_favorite(self, auth_client, user, business):
        add_favorite(user=user, business_id=business.id)

        url = reverse('users:favorites-remove')
        response = auth_client.post(url, {'businessId': str(business.id)}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['favorites'] == []

    def test_remove_absent_favorite(self, auth_client):
        url = reverse('users:favorites-remove')
        response = auth_client.post(url, {'businessId': str(uuid4())}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['favorites'] == []

    def test_list_favorites(self, auth_client, user, business, other_business):
        add_favorite(user=user, business_id=business.id)
        add_favorite(user=user, business_id=other_business.id)
        other_business.delete()

        url = reverse('users:favorites')
        response = auth_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data['favorites']] == [str(business.id)]

    def test_favorites_unauthenticated(self, api_client, business):
        url = reverse('users:favorites-add')
        response = api_client.post(url, {'businessId': str(business.id)}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
