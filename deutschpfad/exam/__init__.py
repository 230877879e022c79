"""
deutschpfad Exam - B1 mock exam scoring.

This module provides:
- score_response: deterministic rubric for written and spoken answers
- ExamEngine: four-section exam state machine
"""

from .scorer import (
    CONNECTORS,
    ScoreBreakdown,
    count_words,
    length_score,
    score_breakdown,
    score_response,
)

from .engine import (
    ExamEngine,
    ExamStage,
    POINTS_PER_QUESTION,
    score_objective,
)

__all__ = [
    # Scorer
    "CONNECTORS",
    "ScoreBreakdown",
    "count_words",
    "length_score",
    "score_breakdown",
    "score_response",
    # Engine
    "ExamEngine",
    "ExamStage",
    "POINTS_PER_QUESTION",
    "score_objective",
]
