"""
Tests for XP, streak and lesson score tracking.
"""

from datetime import date, timedelta

from deutschpfad.classroom import XP_PER_LESSON, MemoryStore, ProgressTracker, done_key

from conftest import TODAY


def tracker_with(last_day=None, streak=0, xp=0):
    data = {"xp": xp, "streak": streak}
    if last_day is not None:
        data["last_day"] = last_day.isoformat()
    store = MemoryStore(data)
    return ProgressTracker(store, clock=lambda: TODAY), store


class TestStreak:
    """Test streak rules."""

    def test_first_lesson_starts_streak(self, tracker):
        state = tracker.complete_lesson("a1_greetings", 3)
        assert state.streak == 1
        assert state.last_active_day == TODAY

    def test_yesterday_continues_streak(self):
        tracker, _ = tracker_with(TODAY - timedelta(days=1), streak=4)
        assert tracker.complete_lesson("a1_greetings", 3).streak == 5

    def test_gap_resets_streak(self):
        tracker, _ = tracker_with(TODAY - timedelta(days=2), streak=4)
        assert tracker.complete_lesson("a1_greetings", 3).streak == 1

    def test_same_day_counts_again(self):
        tracker, _ = tracker_with(TODAY, streak=2)
        assert tracker.complete_lesson("a1_greetings", 3).streak == 3

    def test_unparseable_last_day_resets(self):
        store = MemoryStore({"streak": 9, "last_day": "not-a-date"})
        tracker = ProgressTracker(store, clock=lambda: TODAY)
        assert tracker.state().last_active_day is None
        assert tracker.complete_lesson("a1_greetings", 0).streak == 1


class TestXpAndScores:
    """Test XP awards and per-lesson records."""

    def test_xp_per_lesson_regardless_of_score(self):
        tracker, _ = tracker_with(xp=20)
        tracker.complete_lesson("a1_greetings", 0)
        state = tracker.complete_lesson("a1_numbers", 5)
        assert state.xp == 20 + 2 * XP_PER_LESSON

    def test_writes_legacy_keys(self, tracker, store):
        tracker.complete_lesson("a1_greetings", 4)
        assert store.get(done_key("a1_greetings")) == 4
        assert store.get("done_a1_greetings") == 4
        assert store.get("xp") == XP_PER_LESSON
        assert store.get("streak") == 1
        assert store.get("last_day") == "2024-03-15"

    def test_latest_score_wins(self, tracker):
        tracker.complete_lesson("a1_greetings", 4)
        tracker.complete_lesson("a1_greetings", 2)
        assert tracker.lesson_score("a1_greetings") == 2

    def test_completion_lookup(self, tracker):
        assert tracker.lesson_score("a1_numbers") is None
        assert not tracker.is_completed("a1_numbers")
        tracker.complete_lesson("a1_numbers", 0)
        assert tracker.is_completed("a1_numbers")
        assert tracker.completed_lesson_ids(["a1_numbers", "a2_routine"]) == {"a1_numbers"}

    def test_state_defaults(self, tracker):
        state = tracker.state()
        assert state.xp == 0
        assert state.streak == 0
        assert state.last_active_day is None

    def test_clock_is_used(self):
        store = MemoryStore()
        days = iter([date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 5)])
        tracker = ProgressTracker(store, clock=lambda: next(days))
        streaks = [tracker.complete_lesson("a1_greetings", 1).streak for _ in range(3)]
        assert streaks == [1, 2, 1]


class TestCorruptState:
    """Non-numeric stored values fall back instead of raising."""

    def test_non_numeric_counters(self):
        store = MemoryStore({"xp": "ten", "streak": "x"})
        tracker = ProgressTracker(store, clock=lambda: TODAY)
        state = tracker.state()
        assert state.xp == 0
        assert state.streak == 0

    def test_complete_lesson_repairs_counters(self):
        store = MemoryStore({"xp": "ten", "streak": "x", "last_day": TODAY.isoformat()})
        tracker = ProgressTracker(store, clock=lambda: TODAY)
        state = tracker.complete_lesson("a1_greetings", 2)
        assert state.xp == XP_PER_LESSON
        assert state.streak == 1
        assert store.get("xp") == XP_PER_LESSON
        assert store.get(done_key("a1_greetings")) == 2

    def test_non_numeric_lesson_score(self):
        store = MemoryStore({done_key("a1_numbers"): "done"})
        tracker = ProgressTracker(store, clock=lambda: TODAY)
        assert tracker.lesson_score("a1_numbers") is None
        assert not tracker.is_completed("a1_numbers")
