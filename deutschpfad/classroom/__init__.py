"""
deutschpfad Classroom - Runtime components for lessons, review and progress.

This module provides:
- KeyValueStore implementations (SQLite, in-memory)
- ContentLoader: Load lessons, curriculum and mock exam
- ReviewPool: Leitner-style review queue
- ProgressTracker: XP, streak and lesson scores
- LessonSession: Step sequencing
- Navigator: Catalog and curriculum progress
"""

from .store import (
    KeyValueStore,
    MemoryStore,
    SqliteStore,
    DEFAULT_STATE_DIR,
    DEFAULT_STATE_DB,
)

from .loader import (
    ContentLoader,
    read_content_file,
)

from .review_pool import (
    ReviewPool,
    ReviewOutcome,
    POOL_KEY,
    encode_entries,
    decode_entries,
)

from .progress import (
    ProgressTracker,
    XP_PER_LESSON,
    done_key,
)

from .session import (
    LessonSession,
    StepOutcome,
    evaluate_step,
)

from .navigator import (
    Navigator,
    NavigationLesson,
    NavigationCategory,
    StageProgress,
)

__all__ = [
    # Store
    "KeyValueStore",
    "MemoryStore",
    "SqliteStore",
    "DEFAULT_STATE_DIR",
    "DEFAULT_STATE_DB",
    # Loader
    "ContentLoader",
    "read_content_file",
    # Review pool
    "ReviewPool",
    "ReviewOutcome",
    "POOL_KEY",
    "encode_entries",
    "decode_entries",
    # Progress
    "ProgressTracker",
    "XP_PER_LESSON",
    "done_key",
    # Session
    "LessonSession",
    "StepOutcome",
    "evaluate_step",
    # Navigator
    "Navigator",
    "NavigationLesson",
    "NavigationCategory",
    "StageProgress",
]
