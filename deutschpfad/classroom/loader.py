"""
ContentLoader - Load lesson, curriculum and exam content from a data directory.

Provides read-only access to:
- The lesson catalog (lessons grouped by level)
- The curriculum roadmap
- The B1 mock exam

Each file may be JSON or YAML; for a given stem the first existing
extension in CONTENT_EXTENSIONS wins. Content is validated on load and
cached for the lifetime of the loader.
"""

import json
import logging
from functools import cached_property
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import TypeAdapter, ValidationError

from deutschpfad.errors import ContentError
from deutschpfad.schemas import CurriculumStage, Lesson, LevelCategory, MockExam


logger = logging.getLogger(__name__)

CATALOG_STEM = "lessons"
CURRICULUM_STEM = "curriculum"
MOCK_EXAM_STEM = "b1_mock"
CONTENT_EXTENSIONS = (".json", ".yaml", ".yml")

_catalog_adapter = TypeAdapter(list[LevelCategory])
_curriculum_adapter = TypeAdapter(list[CurriculumStage])


def read_content_file(path: Path) -> Any:
    """Parse a JSON or YAML content file."""
    text = path.read_text(encoding="utf-8-sig")
    try:
        if path.suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ContentError(f"Cannot parse {path}: {e}") from e


class ContentLoader:
    """Load content files from a data directory."""

    def __init__(self, data_dir: str | Path):
        """
        Initialize loader.

        Args:
            data_dir: Directory containing lessons/curriculum/b1_mock files
        """
        self.data_dir = Path(data_dir)
        if not self.data_dir.is_dir():
            raise FileNotFoundError(f"Content directory not found: {data_dir}")

    def _find(self, stem: str) -> Path:
        for ext in CONTENT_EXTENSIONS:
            path = self.data_dir / f"{stem}{ext}"
            if path.exists():
                return path
        raise ContentError(f"No {stem} content in {self.data_dir}")

    def _load(self, stem: str, adapter: TypeAdapter) -> Any:
        path = self._find(stem)
        try:
            content = adapter.validate_python(read_content_file(path))
        except ValidationError as e:
            raise ContentError(f"Invalid content in {path}: {e}") from e
        logger.debug(f"Loaded {path}")
        return content

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    @cached_property
    def catalog(self) -> list[LevelCategory]:
        categories = self._load(CATALOG_STEM, _catalog_adapter)
        _validate_unique_lesson_ids(categories)
        return categories

    @cached_property
    def curriculum(self) -> list[CurriculumStage]:
        return self._load(CURRICULUM_STEM, _curriculum_adapter)

    @cached_property
    def mock_exam(self) -> MockExam:
        return self._load(MOCK_EXAM_STEM, TypeAdapter(MockExam))

    def all_lessons(self) -> list[Lesson]:
        """All lessons in catalog order."""
        return [lesson for category in self.catalog for lesson in category.lessons]

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        for lesson in self.all_lessons():
            if lesson.id == lesson_id:
                return lesson
        return None

    def get_category(self, level: str) -> Optional[LevelCategory]:
        for category in self.catalog:
            if category.level == level:
                return category
        return None


def _validate_unique_lesson_ids(categories: list[LevelCategory]):
    """Lesson IDs key persisted scores, so they must be unique across levels."""
    seen: set[str] = set()
    for category in categories:
        for lesson in category.lessons:
            if lesson.id in seen:
                raise ContentError(f"Duplicate lesson id: {lesson.id}")
            seen.add(lesson.id)
