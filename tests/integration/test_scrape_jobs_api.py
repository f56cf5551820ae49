"""Integration tests for the /scrape-jobs and system routes."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
import requests

# Mark all tests in this module as integration tests
pytestmark = pytest.mark.integration


class TestScrapeJobsRoute:
    """Test the job search route end to end with a mocked upstream."""

    def test_get_success(self, test_client, mock_upstream):
        response = test_client.get("/scrape-jobs?keyword=nurse&location=Texas")

        assert response.status_code == 200
        data = response.get_json()
        assert data["total_results"] == 120
        assert data["next_page_token"] == "page-2-token"
        assert len(data["jobs"]) == 1
        job = data["jobs"][0]
        assert job["company"] == "Austin Community College"
        assert job["role"] == "Adjunct Professor of Mathematics"
        assert job["url"] == "https://careers.austincc.edu/apply/123"
        assert job["ats_keywords"][:2] == ["adjunct", "faculty"]
        mock_upstream.search_jobs.assert_called_once_with(
            query="nurse", location="Texas", next_page_token=None
        )

    def test_post_json_body(self, test_client, mock_upstream):
        response = test_client.post(
            "/scrape-jobs",
            json={"keyword": "adjunct", "location": "Ohio", "next_page_token": "tok"},
        )

        assert response.status_code == 200
        mock_upstream.search_jobs.assert_called_once_with(
            query="adjunct", location="Ohio", next_page_token="tok"
        )

    def test_default_location(self, test_client, mock_upstream):
        test_client.get("/scrape-jobs?keyword=nurse")

        assert mock_upstream.search_jobs.call_args.kwargs["location"] == "United States"

    def test_repeat_query_served_from_cache(self, test_client, mock_upstream):
        first = test_client.get("/scrape-jobs?keyword=nurse&location=Texas")
        second = test_client.get("/scrape-jobs?keyword=nurse&location=Texas")

        assert mock_upstream.search_jobs.call_count == 1
        assert second.get_json()["jobs"] == first.get_json()["jobs"]

    def test_different_location_is_a_new_query(self, test_client, mock_upstream):
        test_client.get("/scrape-jobs?keyword=nurse&location=Texas")
        test_client.get("/scrape-jobs?keyword=nurse&location=Ohio")

        assert mock_upstream.search_jobs.call_count == 2

    def test_missing_keyword(self, test_client, mock_upstream):
        response = test_client.get("/scrape-jobs?location=Texas")

        assert response.status_code == 400
        assert response.get_json() == {"error": "Keyword is required"}
        mock_upstream.search_jobs.assert_not_called()

    def test_missing_api_key(self, make_app):
        client = make_app(SERPAPI_KEY="").test_client()

        response = client.get("/scrape-jobs?keyword=nurse")

        assert response.status_code == 500
        assert response.get_json() == {"error": "Server configuration error: Missing API key"}

    def test_upstream_failure(self, test_client, mock_upstream):
        upstream_response = MagicMock()
        upstream_response.json.return_value = {"error": "Invalid API key."}
        mock_upstream.search_jobs.side_effect = requests.HTTPError(
            "401 Client Error: Unauthorized for url: "
            "https://serpapi.com/search?engine=google_jobs&q=nurse&api_key=super-secret",
            response=upstream_response,
        )

        response = test_client.get("/scrape-jobs?keyword=nurse")

        assert response.status_code == 500
        data = response.get_json()
        assert data["error"] == "Invalid API key."
        assert "401 Client Error" in data["details"]
        assert "super-secret" not in data["details"]

    def test_upstream_failure_without_provider_message(self, test_client, mock_upstream):
        mock_upstream.search_jobs.side_effect = requests.ConnectionError("connection refused")

        response = test_client.get("/scrape-jobs?keyword=nurse")

        assert response.status_code == 500
        assert response.get_json() == {
            "error": "Failed to fetch jobs",
            "details": "connection refused",
        }

    def test_failed_query_is_not_cached(self, test_client, mock_upstream, serpapi_response):
        mock_upstream.search_jobs.side_effect = [requests.Timeout("timed out"), serpapi_response]

        assert test_client.get("/scrape-jobs?keyword=nurse").status_code == 500
        assert test_client.get("/scrape-jobs?keyword=nurse").status_code == 200
        assert mock_upstream.search_jobs.call_count == 2

    def test_request_is_logged_with_query_context(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="blueprints.jobs")

        test_client.get("/scrape-jobs?keyword=nurse&location=Texas")

        assert "[method=GET | keyword=nurse | location=Texas] Request to /scrape-jobs" in caplog.text

    def test_cors_headers(self, test_client):
        response = test_client.get(
            "/scrape-jobs?keyword=nurse",
            headers={"Origin": "https://google-job-scraper.vercel.app"},
        )

        assert (
            response.headers["Access-Control-Allow-Origin"]
            == "https://google-job-scraper.vercel.app"
        )


class TestSystemRoutes:
    """Test liveness and health routes."""

    def test_root(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.get_data(as_text=True) == "Google Jobs API is running..."

    def test_health_reports_cache_entries(self, test_client):
        test_client.get("/scrape-jobs?keyword=nurse")

        data = test_client.get("/api/health").get_json()

        assert data["status"] == "healthy"
        assert data["cache"] == {"entries": 1, "closed": False}
