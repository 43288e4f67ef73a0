import pytest
from unittest import mock
from django.db import OperationalError
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_health_ok(self, client):
        response = client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': 'up'}

    def test_health_database_down(self, client):
        with mock.patch('config.views.connection') as connection:
            connection.cursor.side_effect = OperationalError('connection refused')
            response = client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    def test_unknown_path_returns_json_404(self, client):
        response = client.get('/api/does-not-exist/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Not found'
        assert response.json()['code'] == 'not_found'
