"""
Response scorer - deterministic rubric for free-text and spoken answers.

The rubric has three parts, each capped:
- Length (0-10): word count measured against the task's minimum
- Keywords (0-8): 2 points per task keyword found anywhere in the text
- Cohesion (0-7): 1 point per German connector used

The text is never parsed beyond whitespace splitting and lowercase
substring search, so "und" inside "Grund" counts as a connector.
"""

from dataclasses import dataclass
from typing import Iterable


KEYWORD_POINTS = 2
KEYWORD_CAP = 8
COHESION_CAP = 7
TOTAL_CAP = 25

CONNECTORS = (
    "weil", "deshalb", "obwohl", "zuerst", "danach", "schließlich",
    "aber", "und", "oder", "denn", "dass",
)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores of one scored response."""
    word_count: int
    length: int
    keyword: int
    cohesion: int

    @property
    def total(self) -> int:
        return min(self.length + self.keyword + self.cohesion, TOTAL_CAP)


def count_words(text: str) -> int:
    return len(text.split())


def length_score(word_count: int, min_words: int) -> int:
    """Length band: +40 words over the minimum scores 10, +20 scores 8."""
    if word_count >= min_words + 40:
        return 10
    if word_count >= min_words + 20:
        return 8
    if word_count >= min_words:
        return 6
    if word_count >= min_words // 2:
        return 3
    return 0


def keyword_hits(text: str, keywords: Iterable[str]) -> int:
    """Distinct keywords found in the text, ignoring case."""
    lower = text.lower()
    distinct = {keyword.lower() for keyword in keywords}
    return sum(1 for keyword in distinct if keyword in lower)


def connector_hits(text: str) -> int:
    lower = text.lower()
    return sum(1 for connector in CONNECTORS if connector in lower)


def score_breakdown(text: str, keywords: Iterable[str], min_words: int) -> ScoreBreakdown:
    word_count = count_words(text)
    return ScoreBreakdown(
        word_count=word_count,
        length=length_score(word_count, min_words),
        keyword=min(keyword_hits(text, keywords) * KEYWORD_POINTS, KEYWORD_CAP),
        cohesion=min(connector_hits(text), COHESION_CAP),
    )


def score_response(text: str, keywords: Iterable[str], min_words: int) -> int:
    """
    Score a written or transcribed answer.

    Args:
        text: Learner's answer; an empty transcript scores like empty text
        keywords: Task keywords, matched case-insensitively
        min_words: Task minimum word count

    Returns:
        Score in [0, 25]
    """
    return score_breakdown(text, keywords, min_words).total
