"""
Mock exam schemas for deutschpfad.

Defines Pydantic models for:
- Objective questions (Reading, Listening)
- Free-response tasks (Writing, Speaking)
- The mock exam definition
- The final exam report and verdict
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, computed_field

from .lesson import ContentModel


SECTION_MAX = 25
PASS_TOTAL = 60
PASS_SECTION_MIN = 10


class ExamQuestion(ContentModel):
    """Reading or listening question; for listening the prompt is played aloud."""
    prompt: str
    options: list[str] = Field(..., min_length=1)
    answer: str


class ExamTask(ContentModel):
    """Writing or speaking task scored by keyword, length and cohesion."""
    prompt: str
    keywords: list[str] = []
    min_words: int = Field(..., ge=0, validation_alias=AliasChoices("min_words", "minWords"))


class MockExam(ContentModel):
    reading: list[ExamQuestion] = []
    listening: list[ExamQuestion] = []
    writing: list[ExamTask] = Field(..., min_length=1)
    speaking: list[ExamTask] = Field(..., min_length=1)

    @property
    def writing_task(self) -> ExamTask:
        return self.writing[0]

    @property
    def speaking_task(self) -> ExamTask:
        return self.speaking[0]


# -----------------------------------------------------------------------------
# Report
# -----------------------------------------------------------------------------

class Verdict(str, Enum):
    PASS = "pass"
    BORDERLINE_OR_BELOW = "borderline_or_below"

    @property
    def label(self) -> str:
        if self is Verdict.PASS:
            return "Likely Pass (B1 range)"
        return "Borderline/Below B1"


class ExamReport(BaseModel):
    reading: int = Field(..., ge=0, le=SECTION_MAX)
    listening: int = Field(..., ge=0, le=SECTION_MAX)
    writing: int = Field(..., ge=0, le=SECTION_MAX)
    speaking: int = Field(..., ge=0, le=SECTION_MAX)

    @computed_field
    @property
    def total(self) -> int:
        return self.reading + self.listening + self.writing + self.speaking

    @computed_field
    @property
    def verdict(self) -> Verdict:
        sections = (self.reading, self.listening, self.writing, self.speaking)
        if self.total >= PASS_TOTAL and min(sections) >= PASS_SECTION_MIN:
            return Verdict.PASS
        return Verdict.BORDERLINE_OR_BELOW

    def summary(self) -> str:
        """Plain-text report, one line per figure."""
        return "\n".join([
            "B1 Mock Result",
            f"Reading: {self.reading}/{SECTION_MAX}",
            f"Listening: {self.listening}/{SECTION_MAX}",
            f"Writing: {self.writing}/{SECTION_MAX}",
            f"Speaking: {self.speaking}/{SECTION_MAX}",
            f"Total: {self.total}/{4 * SECTION_MAX}",
            self.verdict.label,
        ])
