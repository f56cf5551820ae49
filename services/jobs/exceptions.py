"""Error taxonomy for job search queries.

Each error maps to one HTTP status at the API boundary:
ValidationError -> 400, ConfigurationError and UpstreamError -> 500.
"""

from __future__ import annotations


class JobSearchError(Exception):
    """Base class for errors raised while answering a job search query."""

    status_code = 500


class ValidationError(JobSearchError):
    """Raised when a required query field is missing or empty."""

    status_code = 400


class ConfigurationError(JobSearchError):
    """Raised when a required server credential is not configured."""

    pass


class UpstreamError(JobSearchError):
    """Raised when the upstream job search provider cannot be reached or fails.

    Attributes:
        provider_error: Error message returned by the provider, if it sent one
        details: Underlying exception message
    """

    def __init__(self, message: str, provider_error: str | None = None, details: str | None = None):
        super().__init__(message)
        self.provider_error = provider_error
        self.details = details
