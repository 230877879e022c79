"""
Navigator - Catalog browsing, curriculum checkpoints and lesson ordering.

Provides:
- Level categories with per-lesson completion
- Curriculum stage progress from checkpoint lessons
- Next/recommended lesson lookup
"""

from dataclasses import dataclass
from typing import Optional

from deutschpfad.schemas import CurriculumStage, Lesson

from .loader import ContentLoader
from .progress import ProgressTracker


@dataclass
class NavigationLesson:
    """Lesson with completion metadata."""
    lesson: Lesson
    completed: bool
    score: Optional[int]        # latest score, None if never completed


@dataclass
class NavigationCategory:
    """Level category with lessons and completion counts."""
    level: str
    lessons: list[NavigationLesson]
    completed_count: int
    total_count: int


@dataclass
class StageProgress:
    """Checkpoint coverage for one curriculum stage."""
    stage: CurriculumStage
    completed_checkpoints: list[str]
    missing_checkpoints: list[str]

    @property
    def is_complete(self) -> bool:
        return not self.missing_checkpoints


class Navigator:
    """
    Navigate the lesson catalog and curriculum.

    Combines ContentLoader (content) with ProgressTracker (learner state).
    """

    def __init__(self, loader: ContentLoader, progress: ProgressTracker):
        self.loader = loader
        self.progress = progress
        self._lesson_order = [lesson.id for lesson in loader.all_lessons()]
        self._lesson_index = {lid: idx for idx, lid in enumerate(self._lesson_order)}

    @property
    def total_lessons(self) -> int:
        return len(self._lesson_order)

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def get_catalog(self) -> list[NavigationCategory]:
        categories = []
        for category in self.loader.catalog:
            nav_lessons = []
            for lesson in category.lessons:
                score = self.progress.lesson_score(lesson.id)
                nav_lessons.append(NavigationLesson(
                    lesson=lesson,
                    completed=score is not None,
                    score=score,
                ))
            categories.append(NavigationCategory(
                level=category.level,
                lessons=nav_lessons,
                completed_count=sum(1 for nl in nav_lessons if nl.completed),
                total_count=len(nav_lessons),
            ))
        return categories

    def get_stage_progress(self) -> list[StageProgress]:
        """Checkpoint coverage per curriculum stage, in roadmap order."""
        result = []
        for stage in self.loader.curriculum:
            completed = self.progress.completed_lesson_ids(stage.checkpoint_lesson_ids)
            result.append(StageProgress(
                stage=stage,
                completed_checkpoints=[lid for lid in stage.checkpoint_lesson_ids if lid in completed],
                missing_checkpoints=[lid for lid in stage.checkpoint_lesson_ids if lid not in completed],
            ))
        return result

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def get_next_lesson_id(self, current_id: str) -> Optional[str]:
        """Get the ID of the next lesson in catalog order."""
        if current_id not in self._lesson_index:
            return None
        current_idx = self._lesson_index[current_id]
        if current_idx + 1 >= len(self._lesson_order):
            return None
        return self._lesson_order[current_idx + 1]

    def get_recommended_lesson_id(self) -> Optional[str]:
        """First lesson never completed, else the first lesson."""
        for lesson_id in self._lesson_order:
            if not self.progress.is_completed(lesson_id):
                return lesson_id
        return self._lesson_order[0] if self._lesson_order else None

    def get_progress_summary(self) -> dict:
        """Get progress summary for display."""
        state = self.progress.state()
        completed = len(self.progress.completed_lesson_ids(self._lesson_order))
        return {
            "xp": state.xp,
            "streak": state.streak,
            "total_lessons": self.total_lessons,
            "completed": completed,
            "completion_percent": round(completed / self.total_lessons * 100, 1) if self.total_lessons > 0 else 0,
            "recommended_lesson_id": self.get_recommended_lesson_id(),
        }
