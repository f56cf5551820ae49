"""Job search query handling: cache keys, record mapping and the search service."""

from .exceptions import ConfigurationError, JobSearchError, UpstreamError, ValidationError
from .job_record_mapper import JobRecordMapper
from .job_search_service import JobSearchService
from .models import JobRecord, SearchResult
from .query_normalizer import build_cache_key, resolve_location

__all__ = [
    "ConfigurationError",
    "JobRecord",
    "JobRecordMapper",
    "JobSearchError",
    "JobSearchService",
    "SearchResult",
    "UpstreamError",
    "ValidationError",
    "build_cache_key",
    "resolve_location",
]
