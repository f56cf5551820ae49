"""Enricher service package.

This package contains the ATS keyword extraction used to enrich job postings.
"""

from .keyword_extractor import KeywordExtractor, extract_keywords

__all__ = ["KeywordExtractor", "extract_keywords"]
