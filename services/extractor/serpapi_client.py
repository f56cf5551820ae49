"""
SerpAPI Client

Client for the SerpAPI Google Jobs engine.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://serpapi.com"


class SerpApiClient(BaseAPIClient):
    """
    Client for SerpAPI's google_jobs search.

    The API key travels as the ``api_key`` query parameter.
    """

    engine = "google_jobs"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        rate_limit_delay: float = 0.0,
        max_retries: int = 0,
        retry_backoff_factor: float = 2.0,
        timeout: float = 30,
    ):
        """
        Initialize SerpAPI client.

        Args:
            api_key: SerpAPI key
            base_url: SerpAPI base URL
            rate_limit_delay: Minimum delay between requests (seconds)
            max_retries: Transport-level retry attempts
            retry_backoff_factor: Multiplier for exponential backoff
            timeout: Request timeout in seconds
        """
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            rate_limit_delay=rate_limit_delay,
            max_retries=max_retries,
            retry_backoff_factor=retry_backoff_factor,
            timeout=timeout,
        )

    def _make_request(
        self, endpoint: str, params: dict[str, Any] | None = None, method: str = "GET"
    ) -> dict[str, Any]:
        """
        Make a request to SerpAPI.

        Args:
            endpoint: API endpoint (e.g., "/search")
            params: Query parameters, without the API key
            method: HTTP method (only GET is supported)

        Returns:
            Parsed JSON response

        Raises:
            ValueError: For unsupported HTTP methods
            requests.RequestException: If the request fails
        """
        if method.upper() != "GET":
            raise ValueError(f"Unsupported HTTP method: {method}")

        self._enforce_rate_limit()

        url = f"{self.base_url}{endpoint}"
        request_params = {**(params or {}), "api_key": self.api_key}

        try:
            response = self.session.get(
                url, headers=self._get_headers(), params=request_params, timeout=self.timeout
            )
            self._log_request(endpoint, request_params, response.status_code)
            return self._handle_response(response)

        except requests.RequestException as e:
            logger.error(f"SerpAPI request failed: {type(e).__name__}")
            if e.response is not None:
                logger.error(f"Response status: {e.response.status_code}")
                logger.error(f"Response text: {e.response.text[:500]}")
            raise

    def search_jobs(
        self,
        query: str,
        location: str | None = None,
        next_page_token: str | None = None,
        **kwargs,
    ) -> dict[str, Any]:
        """
        Search Google Jobs through SerpAPI.

        Args:
            query: Search keywords (e.g., "adjunct professor")
            location: Location to search in (e.g., "Texas")
            next_page_token: Token from a previous response's serpapi_pagination
            **kwargs: Additional query parameters

        Returns:
            API response with jobs_results, search_information and serpapi_pagination
        """
        params: dict[str, Any] = {"engine": self.engine, "q": query}

        if location:
            params["location"] = location
        if next_page_token:
            params["next_page_token"] = next_page_token

        params.update(kwargs)

        return self._make_request("/search", params=params)
