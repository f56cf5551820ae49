"""Normalized job records returned to API clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_LOCATION_LABEL = "Not specified"
DEFAULT_SALARY_LABEL = "Not provided"


@dataclass(frozen=True)
class JobRecord:
    """One normalized job posting.

    Serialized with ``url`` and ``ats_keywords`` keys, which is what the
    frontend reads.
    """

    company: str | None
    role: str | None
    apply_url: str
    location: str = DEFAULT_LOCATION_LABEL
    salary: str = DEFAULT_SALARY_LABEL
    ats_keywords: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "company": self.company,
            "role": self.role,
            "location": self.location,
            "salary": self.salary,
            "url": self.apply_url,
            "ats_keywords": list(self.ats_keywords),
        }


@dataclass
class SearchResult:
    """Records for one query plus the pagination metadata sent back to clients."""

    jobs: list[JobRecord] = field(default_factory=list)
    total_results: int = 0
    next_page_token: str | None = None
    cached: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobs": [job.to_dict() for job in self.jobs],
            "total_results": self.total_results,
            "next_page_token": self.next_page_token,
        }
