"""
Base API Client

Abstract base class for upstream search API clients with common functionality:
- Optional rate limiting
- Transport retries with exponential backoff (off unless configured)
- JSON response handling
- Request logging that never includes credentials
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

# Query parameters never written to logs
SENSITIVE_PARAMS = frozenset({"api_key", "token", "key"})


class BaseAPIClient(ABC):
    """
    Abstract base class for API clients.

    Provides the HTTP session, rate limiting and response handling.
    Subclasses implement _make_request for API-specific authentication and URLs.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        rate_limit_delay: float = 0.0,
        max_retries: int = 0,
        retry_backoff_factor: float = 2.0,
        timeout: float = 30,
    ):
        """
        Initialize the API client.

        Args:
            api_key: API key for authentication
            base_url: Base URL for the API
            rate_limit_delay: Minimum delay between requests (seconds)
            max_retries: Transport-level retry attempts for 429/5xx responses
            retry_backoff_factor: Multiplier for exponential backoff
            timeout: Request timeout in seconds

        Raises:
            ValueError: If api_key or base_url is empty
        """
        if not api_key:
            raise ValueError("API key is required")
        if not base_url:
            raise ValueError("Base URL is required")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.rate_limit_delay = rate_limit_delay
        self.max_retries = max_retries
        self.retry_backoff_factor = retry_backoff_factor
        self.timeout = timeout
        self.last_request_time = 0.0
        self._rate_limit_lock = threading.Lock()

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=retry_backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def _enforce_rate_limit(self) -> None:
        """Wait until rate_limit_delay has passed since the previous request."""
        if self.rate_limit_delay <= 0:
            return

        # One client serves concurrent requests; space them out one at a time
        with self._rate_limit_lock:
            elapsed = time.time() - self.last_request_time
            if elapsed < self.rate_limit_delay:
                sleep_time = self.rate_limit_delay - elapsed
                logger.debug(f"Rate limiting: sleeping for {sleep_time:.2f} seconds")
                time.sleep(sleep_time)

            self.last_request_time = time.time()

    def close(self) -> None:
        """Close the HTTP session and its pooled connections."""
        self.session.close()
        logger.info(f"Closed API client session for {self.base_url}")

    def _get_headers(self) -> dict[str, str]:
        """
        Get default headers for API requests.

        Subclasses can override this to add API-specific headers.
        """
        return {"Accept": "application/json"}

    @abstractmethod
    def _make_request(
        self, endpoint: str, params: dict[str, Any] | None = None, method: str = "GET"
    ) -> dict[str, Any]:
        """
        Make an API request.

        Args:
            endpoint: API endpoint (relative to base_url)
            params: Query parameters
            method: HTTP method

        Returns:
            Parsed JSON response

        Raises:
            requests.RequestException: If the request fails
        """

    def _handle_response(self, response: requests.Response) -> dict[str, Any]:
        """
        Raise for HTTP errors and return the parsed JSON body.

        Raises:
            requests.HTTPError: For 4xx/5xx responses
            requests.RequestException: If the body is not valid JSON
        """
        response.raise_for_status()

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            logger.error(f"Response text: {response.text[:500]}")
            raise requests.RequestException(f"Invalid JSON response: {e}") from e

    def _log_request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        """Log API request details without credentials."""
        if params:
            safe_params = {k: v for k, v in params.items() if k not in SENSITIVE_PARAMS}
            logger.info(f"API request: {endpoint} with params: {safe_params}")
        else:
            logger.info(f"API request: {endpoint}")

        if status_code:
            logger.debug(f"Response status: {status_code}")
