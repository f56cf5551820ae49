"""
Job Search Keyword Services

This package contains the core Python services:
- extractor: Upstream job search API clients
- enricher: ATS keyword extraction
- jobs: Query normalization, record mapping and the search service
- shared: Result cache and logging helpers
"""
