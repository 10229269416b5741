"""
Unit Tests for Base System Endpoints

Tests for health checks, API documentation endpoints and the JSON error
handlers.
"""

from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APIClient, APISimpleTestCase
from rest_framework import status


class SystemEndpointsTestCase(APISimpleTestCase):
    """Test cases for base system endpoints."""

    def setUp(self):
        """Set up test client."""
        self.client = APIClient()

    def test_api_health_check_success(self):
        """Test GET /api/health/ returns healthy status."""
        url = reverse('api_health_check')
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'healthy')
        self.assertEqual(response.data['version'], '1.0.0')
        self.assertIn('timestamp', response.data)

    @override_settings(API_VERSION='2.1.0')
    def test_api_health_check_reports_configured_version(self):
        response = self.client.get(reverse('api_health_check'))

        self.assertEqual(response.data['version'], '2.1.0')

    def test_api_schema_lists_generation_endpoints(self):
        """Test GET /api/schema/ documents every public endpoint."""
        response = self.client.get(reverse('schema'), {'format': 'json'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        paths = response.json()['paths']
        for path in ('/api/code-generation/springboot/', '/api/code-generation/sql/',
                     '/api/code-generation/download/', '/api/ai-assistant/generate-uml/',
                     '/api/health/'):
            with self.subTest(path=path):
                self.assertIn(path, paths)

    def test_swagger_ui(self):
        response = self.client.get(reverse('swagger-ui'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_unknown_path_returns_json_404(self):
        response = self.client.get('/api/does-not-exist/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['error_code'], 'not_found')
