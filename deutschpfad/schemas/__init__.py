"""
deutschpfad Schemas - Pydantic models for the German learning app.

This module exports all schema classes for:
- Lesson: step variants, lessons, level categories
- Curriculum: roadmap stages
- Exam: mock exam content and report
- Progress: XP/streak state, review entries
"""

# Lesson schemas
from .lesson import (
    ContentModel,
    PairItem,
    McqStep,
    MatchStep,
    ListenStep,
    TypeInStep,
    SpeakStep,
    Step,
    Lesson,
    LevelCategory,
)

# Curriculum schemas
from .curriculum import CurriculumStage

# Exam schemas
from .exam import (
    ExamQuestion,
    ExamTask,
    MockExam,
    Verdict,
    ExamReport,
    SECTION_MAX,
    PASS_TOTAL,
    PASS_SECTION_MIN,
)

# Progress schemas
from .progress import (
    ProgressState,
    ReviewEntry,
    MAX_REVIEW_LEVEL,
)

__all__ = [
    # Lesson
    'ContentModel',
    'PairItem',
    'McqStep',
    'MatchStep',
    'ListenStep',
    'TypeInStep',
    'SpeakStep',
    'Step',
    'Lesson',
    'LevelCategory',
    # Curriculum
    'CurriculumStage',
    # Exam
    'ExamQuestion',
    'ExamTask',
    'MockExam',
    'Verdict',
    'ExamReport',
    'SECTION_MAX',
    'PASS_TOTAL',
    'PASS_SECTION_MIN',
    # Progress
    'ProgressState',
    'ReviewEntry',
    'MAX_REVIEW_LEVEL',
]
