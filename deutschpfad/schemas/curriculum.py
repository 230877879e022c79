"""
Curriculum schemas for deutschpfad.

The curriculum is the A1 -> A2 -> B1 -> B2 roadmap: each stage lists its
goals, sample topics and the checkpoint lessons that mark it as covered.
"""

from pydantic import AliasChoices, Field

from .lesson import ContentModel


class CurriculumStage(ContentModel):
    stage: str
    goals: list[str] = []
    sample_topics: list[str] = Field(
        default=[], validation_alias=AliasChoices("sample_topics", "sampleTopics")
    )
    checkpoint_lesson_ids: list[str] = Field(
        default=[], validation_alias=AliasChoices("checkpoint_lesson_ids", "checkpointLessonIds")
    )
