"""Cache key derivation for job search queries."""

from __future__ import annotations

from .exceptions import ValidationError

DEFAULT_SEARCH_LOCATION = "United States"
KEY_SEPARATOR = "-"


def resolve_location(location: str | None, default: str = DEFAULT_SEARCH_LOCATION) -> str:
    """Return location, or the default when it is missing or empty."""
    return location or default


def validate_keyword(keyword: str | None) -> str:
    """
    Ensure the search keyword is present.

    Raises:
        ValidationError: If keyword is None, empty or whitespace
    """
    if keyword is None or not str(keyword).strip():
        raise ValidationError("Keyword is required")
    return keyword


def build_cache_key(keyword: str | None, location: str | None = None) -> str:
    """
    Build the cache key for a keyword/location query.

    Case and whitespace are kept as given, so "Nurse" and "nurse" are different
    keys. The pagination token is not part of the key.

    Args:
        keyword: Search keywords (required)
        location: Search location, defaults to DEFAULT_SEARCH_LOCATION

    Returns:
        Cache key such as "nurse-Texas"

    Raises:
        ValidationError: If keyword is missing or empty
    """
    keyword = validate_keyword(keyword)
    return f"{keyword}{KEY_SEPARATOR}{resolve_location(location)}"
