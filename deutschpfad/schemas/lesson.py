"""
Lesson content schemas for deutschpfad.

Defines Pydantic models for lesson content including:
- Step variants (multiple choice, matching, listening, typed and spoken recall)
- Lessons and level categories of the lesson catalog

Asset files written for the Android app use camelCase keys with Bangla/German
suffixes (promptBn, promptDe, bn/de); those are accepted as aliases.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from typing import Annotated, Literal, Optional, Union


class ContentModel(BaseModel):
    """Base for immutable content loaded from assets."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PairItem(ContentModel):
    """One native/target pair of a matching exercise."""
    native: str = Field(..., validation_alias=AliasChoices("native", "bn"))
    target: str = Field(..., validation_alias=AliasChoices("target", "de"))


# -----------------------------------------------------------------------------
# Step types
# -----------------------------------------------------------------------------

class StepBase(ContentModel):
    type: str
    prompt_native: str = Field(..., validation_alias=AliasChoices("prompt_native", "promptBn"))
    prompt_target: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("prompt_target", "promptDe")
    )

    @property
    def expected_answer(self) -> str:
        """Answer recorded in the review pool when this step is missed."""
        answer = getattr(self, "answer", None)
        if answer is not None:
            return answer
        if self.prompt_target is not None:
            return self.prompt_target
        pairs = getattr(self, "pairs", None)
        if pairs:
            return pairs[0].target
        return ""


class McqStep(StepBase):
    """
    Multiple choice. The step is scored only when it carries an answer,
    which must then be one of the options.
    """
    type: Literal["mcq"] = "mcq"
    options: list[str] = Field(..., min_length=1)
    answer: Optional[str] = None

    @model_validator(mode="after")
    def answer_in_options(self):
        if self.answer is not None and self.answer not in self.options:
            raise ValueError(f"mcq answer {self.answer!r} is not one of its options")
        return self

    @property
    def scored(self) -> bool:
        return self.answer is not None


class MatchStep(StepBase):
    type: Literal["match"] = "match"
    pairs: list[PairItem] = Field(..., min_length=1)


class ListenStep(StepBase):
    """Plays prompt_target aloud; has no right or wrong answer."""
    type: Literal["listen"] = "listen"


class TypeInStep(StepBase):
    type: Literal["typein"] = "typein"
    answer: str


class SpeakStep(StepBase):
    type: Literal["speak"] = "speak"
    answer: str


Step = Annotated[
    Union[McqStep, MatchStep, ListenStep, TypeInStep, SpeakStep],
    Field(discriminator="type"),
]


# -----------------------------------------------------------------------------
# Lessons and catalog
# -----------------------------------------------------------------------------

class Lesson(ContentModel):
    id: str
    title: str
    level: str
    steps: list[Step] = Field(..., min_length=1)


class LevelCategory(ContentModel):
    """One entry of the lesson catalog: all lessons of a CEFR level."""
    level: str
    lessons: list[Lesson] = []
