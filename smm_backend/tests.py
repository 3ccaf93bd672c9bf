"""
Tests for project-level routing - health check, JSON error handlers, slash handling.
"""
import pytest
from django.test import RequestFactory
from rest_framework.test import APIClient

from scraping.html_rules import RULESET_VERSION
from smm_backend.views import server_error


@pytest.fixture
def api_client():
    return APIClient()


class TestHealth:

    def test_health_ok(self, api_client):
        response = api_client.get('/api/v1/health/')
        assert response.status_code == 200
        assert response.json() == {'status': 'ok', 'service': 'smm-backend', 'ruleset': RULESET_VERSION}

    def test_health_is_get_only(self, api_client):
        assert api_client.post('/api/v1/health/').status_code == 405


@pytest.mark.django_db
class TestErrorHandlers:

    def test_unknown_api_path_is_json_404(self, api_client, settings):
        settings.DEBUG = False
        response = api_client.get('/api/v1/nothing-here/')
        assert response.status_code == 404
        assert response['Content-Type'] == 'application/json'
        assert response.json() == {'error': 'not found', 'path': '/api/v1/nothing-here/'}

    def test_server_error_body(self):
        request = RequestFactory().get('/api/v1/plans/')
        response = server_error(request)
        assert response.status_code == 500
        assert response.content == b'{"error": "internal server error"}'


@pytest.mark.django_db
class TestSlashHandling:

    def test_slashless_api_post_is_not_redirected(self, api_client, settings):
        settings.DEBUG = False
        response = api_client.post('/api/v1/ingest', {'company_id': 1}, format='json')
        assert response.status_code == 404
        assert response.json()['error'] == 'not found'

    def test_slashless_admin_path_still_redirects(self, client):
        response = client.get('/admin')
        assert response.status_code == 301
        assert response['Location'] == '/admin/'
