#!/usr/bin/env python3
"""
validate_content.py - Check lesson, curriculum and exam content before shipping.

Loads every content file through the same schemas the app uses and reports
cross-file problems the schemas cannot see:
- curriculum checkpoints that name unknown lessons
- lessons whose level has no curriculum stage
- reading/listening sections that do not have exactly 5 questions

Usage:
  python scripts/validate_content.py
  python scripts/validate_content.py --data-dir path/to/content
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from deutschpfad.classroom import ContentLoader
from deutschpfad.config import configure_logging, get_settings
from deutschpfad.errors import ContentError
from deutschpfad.exam import POINTS_PER_QUESTION
from deutschpfad.schemas import SECTION_MAX

logger = logging.getLogger(__name__)

QUESTIONS_PER_SECTION = SECTION_MAX // POINTS_PER_QUESTION


def find_problems(loader: ContentLoader) -> list[str]:
    """Return human-readable cross-file problems (empty if none)."""
    problems = []
    lesson_ids = {lesson.id for lesson in loader.all_lessons()}
    stages = {stage.stage for stage in loader.curriculum}

    for stage in loader.curriculum:
        for lesson_id in stage.checkpoint_lesson_ids:
            if lesson_id not in lesson_ids:
                problems.append(f"Stage {stage.stage}: unknown checkpoint lesson {lesson_id}")

    for category in loader.catalog:
        if category.level not in stages:
            problems.append(f"Level {category.level} has no curriculum stage")
        for lesson in category.lessons:
            if lesson.level != category.level:
                problems.append(f"Lesson {lesson.id} is level {lesson.level} but listed under {category.level}")

    exam = loader.mock_exam
    for name, questions in (("reading", exam.reading), ("listening", exam.listening)):
        if len(questions) != QUESTIONS_PER_SECTION:
            problems.append(f"Mock exam {name} has {len(questions)} questions, expected {QUESTIONS_PER_SECTION}")

    return problems


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(description="Validate deutschpfad content")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Content directory (lessons, curriculum, b1_mock)"
    )
    args = parser.parse_args()

    try:
        loader = ContentLoader(args.data_dir)
        problems = find_problems(loader)
    except (FileNotFoundError, ContentError) as e:
        logger.error(str(e))
        sys.exit(1)

    lessons = loader.all_lessons()
    logger.info(f"Levels: {len(loader.catalog)}")
    logger.info(f"Lessons: {len(lessons)} ({sum(len(l.steps) for l in lessons)} steps)")
    logger.info(f"Curriculum stages: {len(loader.curriculum)}")

    for problem in problems:
        logger.warning(problem)
    if problems:
        sys.exit(1)
    logger.info("Content OK")


if __name__ == "__main__":
    main()
