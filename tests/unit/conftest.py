"""
Pytest configuration and fixtures for unit tests.

Unit tests are fast, isolated tests that don't require external dependencies.
"""

from unittest.mock import MagicMock

import pytest

from services.shared import ResultCache


@pytest.fixture
def cache(fake_clock):
    """ResultCache driven by the fake clock, without the sweeper thread."""
    result_cache = ResultCache(default_ttl=3600, clock=fake_clock)
    yield result_cache
    result_cache.shutdown()


@pytest.fixture
def mock_client(serpapi_response):
    """Upstream client returning the sample SerpAPI response."""
    client = MagicMock()
    client.search_jobs.return_value = serpapi_response
    return client
