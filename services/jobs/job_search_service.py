"""Job Search Service.

Answers keyword/location queries from the result cache, falling back to the
upstream provider on a miss.
"""

from __future__ import annotations

from typing import Any, Protocol

import requests

from services.shared import ResultCache, get_structured_logger

from .exceptions import ConfigurationError, UpstreamError
from .job_record_mapper import JobRecordMapper
from .models import SearchResult
from .query_normalizer import DEFAULT_SEARCH_LOCATION, build_cache_key, resolve_location

logger = get_structured_logger(__name__)


class JobSearchClient(Protocol):
    """Upstream provider interface used by JobSearchService."""

    def search_jobs(
        self, query: str, location: str | None = None, next_page_token: str | None = None
    ) -> dict[str, Any]: ...


def _provider_error(error: requests.RequestException) -> str | None:
    """Pull the provider's own error message out of a failed response, if any."""
    response = getattr(error, "response", None)
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


class JobSearchService:
    """
    Orchestrates one job search: cache lookup, upstream fetch, mapping, cache store.

    Concurrent misses for the same key are not coalesced. Each one calls the
    provider and the last store wins.
    """

    def __init__(
        self,
        cache: ResultCache,
        client: JobSearchClient | None,
        mapper: JobRecordMapper | None = None,
        ttl: float | None = None,
        default_location: str = DEFAULT_SEARCH_LOCATION,
    ):
        """
        Initialize the job search service.

        Args:
            cache: Process-scoped result cache
            client: Upstream client, or None when no API key is configured
            mapper: Posting mapper; a default one is built if omitted
            ttl: Cache lifetime for stored results, defaults to the cache's default
            default_location: Location used when a query has none

        Raises:
            ValueError: If cache is None
        """
        if cache is None:
            raise ValueError("ResultCache is required")

        self.cache = cache
        self.client = client
        self.mapper = mapper or JobRecordMapper()
        self.ttl = ttl
        self.default_location = default_location

    def search(
        self,
        keyword: str | None,
        location: str | None = None,
        next_page_token: str | None = None,
    ) -> SearchResult:
        """
        Return job records for a query.

        Args:
            keyword: Search keywords (required)
            location: Search location, defaults to default_location
            next_page_token: Upstream pagination token

        Returns:
            SearchResult with records and pagination metadata

        Raises:
            ValidationError: If keyword is missing
            ConfigurationError: If no upstream client is configured and the cache misses
            UpstreamError: If the upstream request fails
        """
        location = resolve_location(location, self.default_location)
        cache_key = build_cache_key(keyword, location)
        log = logger.bind(cache_key=cache_key)

        cached = self.cache.get(cache_key)
        if cached is not None:
            log.info(f"Serving {len(cached)} job(s) from cache")
            return SearchResult(
                jobs=list(cached), total_results=len(cached), next_page_token=None, cached=True
            )

        log.info("Cache miss")
        if self.client is None:
            log.error("SerpAPI key is not configured")
            raise ConfigurationError("Server configuration error: Missing API key")

        try:
            data = self.client.search_jobs(
                query=keyword, location=location, next_page_token=next_page_token
            )
        except requests.RequestException as e:
            log.error(f"Upstream job search failed: {type(e).__name__}")
            raise UpstreamError(
                "Failed to fetch jobs", provider_error=_provider_error(e), details=str(e)
            ) from e

        raw_jobs = data.get("jobs_results") or []
        jobs = self.mapper.map_postings(raw_jobs)
        log.info(f"Extracted {len(jobs)} of {len(raw_jobs)} posting(s)")

        self.cache.put(cache_key, jobs, ttl=self.ttl)

        search_information = data.get("search_information") or {}
        pagination = data.get("serpapi_pagination") or {}
        return SearchResult(
            jobs=jobs,
            total_results=search_information.get("total_results") or len(jobs),
            next_page_token=pagination.get("next_page_token") or None,
        )
