"""Maps raw Google Jobs postings to JobRecord objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from services.enricher import KeywordExtractor

from .models import DEFAULT_LOCATION_LABEL, DEFAULT_SALARY_LABEL, JobRecord

logger = logging.getLogger(__name__)

APPLY_LINK_MARKERS = ("apply", "job posting")
FALLBACK_SEARCH_URL = "https://www.google.com/search?q="
FALLBACK_SITE_FILTERS = "site:higheredjobs.com OR site:linkedin.com OR site:edjoin.org"


def find_apply_link(related_links: Iterable[dict[str, Any]] | None) -> str | None:
    """
    Return the first related link whose text mentions applying or the posting.

    Matching is a case-insensitive substring check against APPLY_LINK_MARKERS.
    """
    for link in related_links or []:
        if not isinstance(link, dict):
            continue
        text = link.get("text")
        target = link.get("link")
        if not isinstance(text, str) or not isinstance(target, str) or not target:
            continue
        if any(marker in text.lower() for marker in APPLY_LINK_MARKERS):
            return target
    return None


def build_fallback_url(role: str | None, company: str | None) -> str:
    """Build a web search URL for the role at the company on the job boards we trust."""
    query = f"{role or ''} {company or ''} {FALLBACK_SITE_FILTERS}"
    # Same escaping as JavaScript's encodeURIComponent
    return FALLBACK_SEARCH_URL + quote(query, safe="!~*'()")


class JobRecordMapper:
    """
    Converts upstream postings into JobRecords with ATS keywords and an apply URL.

    Postings without a description are dropped rather than returned with empty
    keywords.
    """

    def __init__(self, keyword_extractor: KeywordExtractor | None = None):
        """
        Initialize the mapper.

        Args:
            keyword_extractor: Extractor for ATS keywords; a default one is built if omitted
        """
        self.keyword_extractor = keyword_extractor or KeywordExtractor()

    def map_posting(self, raw: dict[str, Any] | None) -> JobRecord | None:
        """
        Map one raw posting.

        Args:
            raw: Item from the upstream jobs_results list

        Returns:
            JobRecord, or None when the posting is malformed or has no description
        """
        if not isinstance(raw, dict):
            return None
        description = raw.get("description")
        if not description or not isinstance(description, str):
            return None

        role = raw.get("title")
        company = raw.get("company_name")
        extensions = raw.get("detected_extensions")
        if not isinstance(extensions, dict):
            extensions = {}
        related_links = raw.get("related_links")
        if not isinstance(related_links, list):
            related_links = None

        return JobRecord(
            company=company,
            role=role,
            location=raw.get("location") or DEFAULT_LOCATION_LABEL,
            salary=raw.get("salary") or extensions.get("salary") or DEFAULT_SALARY_LABEL,
            apply_url=find_apply_link(related_links) or build_fallback_url(role, company),
            ats_keywords=tuple(self.keyword_extractor.extract(description)),
        )

    def map_postings(self, raws: Iterable[dict[str, Any] | None]) -> list[JobRecord]:
        """Map a list of postings, skipping the ones map_posting rejects."""
        records = []
        dropped = 0
        for raw in raws:
            record = self.map_posting(raw)
            if record is None:
                dropped += 1
                continue
            records.append(record)

        if dropped:
            logger.debug(f"Dropped {dropped} posting(s) that were malformed or had no description")
        return records
