"""
Root pytest configuration and shared fixtures.

This file contains configuration and fixtures shared across all test types.
Directory-specific conftest.py files can override or extend these fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repo root and backend directory to the Python path for tests.
# This allows "from services.jobs import ..." and "from app import create_app".
project_root = Path(__file__).parent.parent
for path in (project_root, project_root / "backend"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    """Clock the test advances explicitly."""
    return FakeClock()


@pytest.fixture
def sample_posting():
    """A Google Jobs posting with a description and an apply link."""
    return {
        "title": "Adjunct Professor of Mathematics",
        "company_name": "Austin Community College",
        "location": "Austin, TX",
        "salary": "$3,000 per course",
        "description": (
            "The adjunct faculty member will deliver curriculum aligned to learning "
            "outcomes. Teaching experience in mathematics required. Adjunct "
            "faculty support student research and assessment."
        ),
        "related_links": [
            {"link": "https://www.austincc.edu", "text": "austincc.edu"},
            {"link": "https://careers.austincc.edu/apply/123", "text": "Apply on ACC Careers"},
        ],
    }


@pytest.fixture
def serpapi_response(sample_posting):
    """SerpAPI google_jobs response with one usable and one description-less posting."""
    return {
        "jobs_results": [
            sample_posting,
            {"title": "Registrar", "company_name": "Texas State University"},
        ],
        "search_information": {"total_results": 120},
        "serpapi_pagination": {"next_page_token": "page-2-token"},
    }
