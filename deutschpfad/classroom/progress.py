"""
ProgressTracker - XP, day streak and per-lesson scores.

State lives in a KeyValueStore under the keys the app has always used:
- xp, streak: ints
- last_day: ISO date of the last completed lesson
- done_<lessonId>: score of the latest run of that lesson
"""

import logging
from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from deutschpfad.schemas import ProgressState

from .store import KeyValueStore


logger = logging.getLogger(__name__)

XP_PER_LESSON = 10

XP_KEY = "xp"
STREAK_KEY = "streak"
LAST_DAY_KEY = "last_day"
DONE_PREFIX = "done_"


def done_key(lesson_id: str) -> str:
    return f"{DONE_PREFIX}{lesson_id}"


class ProgressTracker:
    """
    Track learner progress in a key-value store.

    The clock is injectable so streak rules can be tested against fixed dates.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], date] = date.today):
        """
        Initialize progress tracker.

        Args:
            store: Backing key-value store
            clock: Returns the current local calendar date
        """
        self.store = store
        self.clock = clock

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def state(self) -> ProgressState:
        """Read the current XP/streak state."""
        last_day = self.store.get(LAST_DAY_KEY)
        try:
            last_active_day = date.fromisoformat(last_day) if last_day else None
        except (TypeError, ValueError):
            logger.warning(f"Ignoring unparseable last_day {last_day!r}")
            last_active_day = None
        return ProgressState(
            xp=max(0, self._read_int(XP_KEY) or 0),
            streak=max(0, self._read_int(STREAK_KEY) or 0),
            last_active_day=last_active_day,
        )

    def _read_int(self, key: str) -> Optional[int]:
        """Stored int under `key`; None if unset or not a number."""
        value = self.store.get(key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric {key} {value!r}")
            return None

    def complete_lesson(self, lesson_id: str, score: int) -> ProgressState:
        """
        Record a finished lesson and award XP/streak.

        Every completion awards the same XP whatever the score. The streak
        grows when the previous completion was today or yesterday, otherwise
        it restarts at 1; a second lesson on the same day also counts.

        Returns:
            The updated ProgressState
        """
        today = self.clock()
        previous = self.state()

        if previous.last_active_day in (today, today - timedelta(days=1)):
            streak = previous.streak + 1
        else:
            streak = 1

        updated = ProgressState(
            xp=previous.xp + XP_PER_LESSON,
            streak=streak,
            last_active_day=today,
        )

        self.store.set(done_key(lesson_id), int(score))
        self.store.set(XP_KEY, updated.xp)
        self.store.set(STREAK_KEY, updated.streak)
        self.store.set(LAST_DAY_KEY, today.isoformat())

        logger.info(
            f"Completed {lesson_id} with score {score}: xp={updated.xp}, streak={updated.streak}"
        )
        return updated

    # -------------------------------------------------------------------------
    # Lesson records
    # -------------------------------------------------------------------------

    def lesson_score(self, lesson_id: str) -> Optional[int]:
        """Score of the latest completed run, or None if never completed."""
        return self._read_int(done_key(lesson_id))

    def is_completed(self, lesson_id: str) -> bool:
        return self.lesson_score(lesson_id) is not None

    def completed_lesson_ids(self, lesson_ids: Iterable[str]) -> set[str]:
        """Subset of the given lesson IDs that have been completed."""
        return {lesson_id for lesson_id in lesson_ids if self.is_completed(lesson_id)}
