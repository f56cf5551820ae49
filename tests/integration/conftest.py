"""
Pytest configuration and fixtures for integration tests.

Integration tests drive the Flask app through its test client. The upstream
SerpAPI client is replaced with a mock, so no network access is needed.
All tests in this directory should be marked with @pytest.mark.integration
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def make_app():
    """Factory for Flask apps with config overrides; releases their resources afterwards."""
    from app import create_app
    from utils.services import shutdown_app_resources

    apps = []

    def _make(**overrides):
        flask_app = create_app({"TESTING": True, "SERPAPI_KEY": "test-key", **overrides})
        apps.append(flask_app)
        return flask_app

    yield _make

    for flask_app in apps:
        shutdown_app_resources(flask_app)


@pytest.fixture
def mock_upstream(serpapi_response):
    """Mock SerpAPI client returned by the service factory."""
    client = MagicMock()
    client.search_jobs.return_value = serpapi_response
    with patch("utils.services.get_serpapi_client", return_value=client):
        yield client


@pytest.fixture
def test_client(make_app, mock_upstream):
    """Flask test client with a configured key and mocked upstream."""
    return make_app().test_client()
