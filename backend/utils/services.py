import atexit
import logging
import sys
import weakref
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from flask import Flask, current_app

# Make the services package importable when running from the backend directory
if Path("/app/services").exists():
    sys.path.insert(0, "/app")
else:
    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from services.extractor import SerpApiClient
from services.jobs import JobSearchService
from services.shared import ResultCache

logger = logging.getLogger(__name__)

RESULT_CACHE_EXTENSION = "result_cache"
SERPAPI_CLIENT_EXTENSION = "serpapi_client"

# Apps whose resources are released on process exit
_live_apps: weakref.WeakSet[Flask] = weakref.WeakSet()


def create_result_cache(config: Mapping[str, Any]) -> ResultCache:
    """
    Build the process-scoped result cache.

    Args:
        config: App config providing CACHE_TTL_SECONDS

    Returns:
        ResultCache instance
    """
    return ResultCache(default_ttl=float(config.get("CACHE_TTL_SECONDS", 3600)))


def create_serpapi_client(config: Mapping[str, Any]) -> SerpApiClient | None:
    """
    Build the upstream client from app config.

    Returns:
        SerpApiClient instance or None if SERPAPI_KEY is not set
    """
    api_key = config.get("SERPAPI_KEY")
    if not api_key:
        return None

    return SerpApiClient(
        api_key=api_key,
        base_url=config.get("SERPAPI_BASE_URL", "https://serpapi.com"),
        rate_limit_delay=float(config.get("SERPAPI_RATE_LIMIT_DELAY", 0.0)),
        max_retries=int(config.get("SERPAPI_MAX_RETRIES", 0)),
        timeout=float(config.get("SERPAPI_TIMEOUT", 30)),
    )


def init_app_resources(app: Flask) -> None:
    """Create the cache and upstream client once per app and start the cache sweeper."""
    cache = create_result_cache(app.config)
    cache.start()
    app.extensions[RESULT_CACHE_EXTENSION] = cache
    app.extensions[SERPAPI_CLIENT_EXTENSION] = create_serpapi_client(app.config)
    _live_apps.add(app)


def shutdown_app_resources(app: Flask) -> None:
    """Stop the app's cache and close its upstream session. Safe to call twice."""
    cache = app.extensions.get(RESULT_CACHE_EXTENSION)
    if cache is not None:
        cache.shutdown()

    client = app.extensions.pop(SERPAPI_CLIENT_EXTENSION, None)
    if client is not None:
        client.close()

    _live_apps.discard(app)


def _shutdown_live_apps() -> None:
    for app in list(_live_apps):
        try:
            shutdown_app_resources(app)
        except Exception as e:
            logger.warning(f"Failed to release resources for {app.name}: {e}")


# Registered once per process, however many apps are created
atexit.register(_shutdown_live_apps)


def get_result_cache() -> ResultCache:
    """
    Get the result cache owned by the current app.

    Returns:
        ResultCache instance
    """
    return current_app.extensions[RESULT_CACHE_EXTENSION]


def get_serpapi_client() -> SerpApiClient | None:
    """
    Get the current app's SerpApiClient.

    Returns:
        SerpApiClient instance or None if SERPAPI_KEY is not set
    """
    return current_app.extensions.get(SERPAPI_CLIENT_EXTENSION)


def get_job_search_service() -> JobSearchService:
    """
    Get JobSearchService instance wired to the app's cache and upstream client.

    Returns:
        JobSearchService instance
    """
    return JobSearchService(
        cache=get_result_cache(),
        client=get_serpapi_client(),
        ttl=current_app.config.get("CACHE_TTL_SECONDS"),
        default_location=current_app.config.get("DEFAULT_LOCATION", "United States"),
    )
