"""
Extractor Services Package

Clients for the upstream job search provider:
- Base API client abstraction
- SerpAPI Google Jobs client
"""

from .base_client import BaseAPIClient
from .serpapi_client import SerpApiClient

__all__ = [
    "BaseAPIClient",
    "SerpApiClient",
]
