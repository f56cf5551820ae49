"""Keyword Extractor Service.

Derives a short list of ATS keywords from a job description by combining the
most frequent words in the text with matches against a curated vocabulary.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable

from .ats_vocabulary import ATS_VOCABULARY, STOPWORDS

logger = logging.getLogger(__name__)

# Alphanumeric runs; an apostrophe between two runs keeps a contraction whole.
WORD_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


class KeywordExtractor:
    """
    Extracts a bounded, deduplicated keyword list from free text.

    Output order is deterministic: the most frequent words first (ties in order
    of first appearance), then curated vocabulary hits in the order they occur.
    """

    def __init__(
        self,
        vocabulary: Iterable[str] = ATS_VOCABULARY,
        stopwords: Iterable[str] = STOPWORDS,
        max_dynamic: int = 5,
        max_keywords: int = 10,
        min_length: int = 3,
    ):
        """
        Initialize the keyword extractor.

        Args:
            vocabulary: Curated terms matched against individual tokens
            stopwords: Tokens excluded from frequency ranking
            max_dynamic: Number of frequency-ranked keywords to keep
            max_keywords: Maximum length of the final keyword list
            min_length: Shortest token considered for frequency ranking

        Raises:
            ValueError: If any of the limits is not a positive integer
        """
        for name, value in (
            ("max_dynamic", max_dynamic),
            ("max_keywords", max_keywords),
            ("min_length", min_length),
        ):
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got: {value}")

        self.vocabulary = frozenset(vocabulary)
        self.stopwords = frozenset(stopwords)
        self.max_dynamic = max_dynamic
        self.max_keywords = max_keywords
        self.min_length = min_length

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """Lowercase text and split it into word tokens."""
        return WORD_PATTERN.findall(text.lower())

    def rank_tokens(self, tokens: list[str]) -> list[str]:
        """
        Return the most frequent meaningful tokens.

        Tokens shorter than min_length and stopwords are ignored. Counter keeps
        insertion order, so most_common breaks ties by first occurrence.
        """
        counts = Counter(
            token
            for token in tokens
            if len(token) >= self.min_length and token not in self.stopwords
        )
        return [token for token, _ in counts.most_common(self.max_dynamic)]

    def match_vocabulary(self, tokens: list[str]) -> list[str]:
        """Return tokens found in the curated vocabulary, in scan order."""
        return [token for token in tokens if token in self.vocabulary]

    def extract(self, description: str | None) -> list[str]:
        """
        Extract ATS keywords from a job description.

        Args:
            description: Job description text, may be empty or None

        Returns:
            Up to max_keywords distinct keywords, frequency-ranked words first
        """
        if not description:
            return []

        tokens = self.tokenize(description)
        candidates = self.rank_tokens(tokens) + self.match_vocabulary(tokens)

        # dict.fromkeys dedupes while keeping first occurrence
        keywords = list(dict.fromkeys(candidates))[: self.max_keywords]
        logger.debug(f"Extracted {len(keywords)} keyword(s) from {len(tokens)} token(s)")
        return keywords


_default_extractor = KeywordExtractor()


def extract_keywords(description: str | None) -> list[str]:
    """Extract ATS keywords using the default vocabulary and limits."""
    return _default_extractor.extract(description)
