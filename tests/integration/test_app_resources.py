"""Integration tests for the per-app cache and upstream client lifecycle."""

from __future__ import annotations

from unittest.mock import patch

import pytest

# Mark all tests in this module as integration tests
pytestmark = pytest.mark.integration


class TestAppResources:
    """Test that the app owns one cache and one upstream client."""

    def test_client_built_once_and_reused(self, make_app, serpapi_response):
        from utils.services import SERPAPI_CLIENT_EXTENSION, get_serpapi_client

        flask_app = make_app()
        client = flask_app.extensions[SERPAPI_CLIENT_EXTENSION]

        with patch.object(client, "search_jobs", return_value=serpapi_response) as search:
            test_client = flask_app.test_client()
            test_client.get("/scrape-jobs?keyword=nurse&location=Texas")
            test_client.get("/scrape-jobs?keyword=nurse&location=Ohio")
            test_client.get("/scrape-jobs?keyword=nurse&location=Texas")

        assert search.call_count == 2
        with flask_app.app_context():
            assert get_serpapi_client() is client

    def test_no_client_without_api_key(self, make_app):
        from utils.services import SERPAPI_CLIENT_EXTENSION

        flask_app = make_app(SERPAPI_KEY="")

        assert flask_app.extensions[SERPAPI_CLIENT_EXTENSION] is None

    def test_client_settings_come_from_config(self, make_app):
        from utils.services import SERPAPI_CLIENT_EXTENSION

        flask_app = make_app(
            SERPAPI_RATE_LIMIT_DELAY=1.5, SERPAPI_MAX_RETRIES=2, SERPAPI_TIMEOUT=10
        )
        client = flask_app.extensions[SERPAPI_CLIENT_EXTENSION]

        assert client.rate_limit_delay == 1.5
        assert client.max_retries == 2
        assert client.timeout == 10

    def test_cache_sweeper_runs_while_app_is_live(self, make_app):
        from utils.services import RESULT_CACHE_EXTENSION

        flask_app = make_app()

        assert flask_app.extensions[RESULT_CACHE_EXTENSION].running

    def test_shutdown_closes_session_and_stops_cache(self, make_app):
        from utils.services import (
            RESULT_CACHE_EXTENSION,
            SERPAPI_CLIENT_EXTENSION,
            shutdown_app_resources,
        )

        flask_app = make_app()
        cache = flask_app.extensions[RESULT_CACHE_EXTENSION]
        client = flask_app.extensions[SERPAPI_CLIENT_EXTENSION]

        with patch.object(client.session, "close") as close_session:
            shutdown_app_resources(flask_app)
            shutdown_app_resources(flask_app)

        close_session.assert_called_once()
        assert cache.closed
        assert not cache.running

    def test_create_app_registers_no_exit_hook(self, make_app):
        with patch("atexit.register") as register:
            make_app()
            make_app()

        register.assert_not_called()

    def test_exit_hook_releases_every_live_app(self, make_app):
        from utils.services import RESULT_CACHE_EXTENSION, _shutdown_live_apps

        first, second = make_app(), make_app()

        _shutdown_live_apps()

        assert first.extensions[RESULT_CACHE_EXTENSION].closed
        assert second.extensions[RESULT_CACHE_EXTENSION].closed
