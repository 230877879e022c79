"""
Progress tracking schemas for deutschpfad.

Defines Pydantic models for learner state derived from lesson play:
- ProgressState: XP and day streak
- ReviewEntry: one missed prompt waiting in the review pool
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


MAX_REVIEW_LEVEL = 2


class ProgressState(BaseModel):
    xp: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    last_active_day: Optional[date] = None


class ReviewEntry(BaseModel):
    level: int = Field(default=0, ge=0, le=MAX_REVIEW_LEVEL)
    prompt_native: str
    correct_answer: str

    @property
    def mastered_on_next_hit(self) -> bool:
        """A correct recall at this level removes the entry instead of promoting it."""
        return self.level >= MAX_REVIEW_LEVEL
