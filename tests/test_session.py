"""
Tests for lesson step sequencing.
"""

import pytest

from deutschpfad.classroom import LessonSession, MemoryStore, ProgressTracker, ReviewPool, evaluate_step
from deutschpfad.errors import SessionFinishedError
from deutschpfad.schemas import Lesson, ListenStep, MatchStep, McqStep, SpeakStep, TypeInStep


class RecordingTracker:
    def __init__(self):
        self.calls = []

    def complete_lesson(self, lesson_id, score):
        self.calls.append((lesson_id, score))


class TestEvaluateStep:
    """Test per-step answer checks."""

    def test_typein_normalized(self):
        step = TypeInStep(prompt_native="ধন্যবাদ", answer="Danke")
        assert evaluate_step(step, "  danke ") is True
        assert evaluate_step(step, "Bitte") is False
        assert evaluate_step(step, None) is False

    def test_speak_uses_transcript(self):
        step = SpeakStep(prompt_native="বলুন", answer="Gute Nacht")
        assert evaluate_step(step, "gute nacht") is True
        assert evaluate_step(step, "") is False

    def test_mcq_exact_option(self):
        step = McqStep(prompt_native="তিন", options=["zwei", "drei"], answer="drei")
        assert evaluate_step(step, "drei") is True
        assert evaluate_step(step, "Drei") is False

    def test_mcq_without_answer_unscored(self):
        step = McqStep(prompt_native="তিন", options=["zwei", "drei"])
        assert evaluate_step(step, "zwei") is None

    def test_match_always_correct(self):
        step = MatchStep(prompt_native="মিলাও", pairs=[{"native": "হ্যাঁ", "target": "Ja"}])
        assert evaluate_step(step, "Nein") is True

    def test_listen_unscored(self):
        step = ListenStep(prompt_native="শোনো", prompt_target="Hallo")
        assert evaluate_step(step, None) is None


class TestLessonSession:
    """Test a full run through a lesson."""

    def test_mixed_lesson(self, greetings_lesson, pool):
        tracker = RecordingTracker()
        session = LessonSession(greetings_lesson, pool, tracker)

        first = session.submit("Guten Morgen")
        assert first.correct is True
        assert not first.finished
        assert session.position == (2, 3)

        second = session.submit("Bitte")
        assert second.correct is False
        assert second.expected == "Danke"

        third = session.submit()
        assert third.correct is None
        assert third.finished

        assert session.score == 1
        entries = pool.decode_all()
        assert [(e.level, e.prompt_native, e.correct_answer) for e in entries] == [(0, "ধন্যবাদ", "Danke")]
        assert tracker.calls == [("a1_greetings", 1)]

    def test_submit_after_finish(self, greetings_lesson, pool, tracker):
        session = LessonSession(greetings_lesson, pool, tracker)
        for _ in range(session.total):
            session.submit("Guten Morgen")
        assert session.finished
        with pytest.raises(SessionFinishedError):
            session.submit("Danke")

    def test_completion_recorded(self, greetings_lesson, pool, tracker):
        session = LessonSession(greetings_lesson, pool, tracker)
        session.submit("Guten Morgen")
        session.submit("danke")
        session.submit()
        assert tracker.lesson_score("a1_greetings") == 2
        assert tracker.state().xp == 10
        assert len(pool) == 0

    def test_missed_step_uses_expected_answer(self, pool, tracker):
        lesson = Lesson(
            id="a1_listen_mcq",
            title="Hören",
            level="A1",
            steps=[{"type": "mcq", "promptBn": "কোনটি?", "promptDe": "Hallo", "options": ["Hallo", "Tschüss"], "answer": "Hallo"}],
        )
        session = LessonSession(lesson, pool, tracker)
        outcome = session.submit("Tschüss")
        assert outcome.finished
        assert pool.decode_all()[0].correct_answer == "Hallo"

    def test_single_step_lesson_finishes_immediately(self, pool):
        lesson = Lesson(
            id="one",
            title="Eins",
            level="A1",
            steps=[{"type": "listen", "promptBn": "শোনো", "promptDe": "eins"}],
        )
        tracker = RecordingTracker()
        session = LessonSession(lesson, pool, tracker)
        assert session.submit().finished
        assert tracker.calls == [("one", 0)]


class FlakyTracker(RecordingTracker):
    """Fails the first completion write."""

    def complete_lesson(self, lesson_id, score):
        if not self.calls:
            self.calls.append(None)
            raise OSError("disk full")
        super().complete_lesson(lesson_id, score)


class TestCompletionFailures:
    """A failed completion write leaves the lesson open."""

    def test_failed_write_can_be_retried(self, greetings_lesson, pool):
        tracker = FlakyTracker()
        session = LessonSession(greetings_lesson, pool, tracker)
        session.submit("Guten Morgen")
        session.submit("danke")

        with pytest.raises(OSError):
            session.submit()
        assert not session.finished
        assert session.score == 2

        assert session.submit().finished
        assert session.score == 2
        assert tracker.calls[-1] == ("a1_greetings", 2)

    def test_corrupt_counters_still_record(self, greetings_lesson):
        store = MemoryStore({"streak": "x"})
        session = LessonSession(greetings_lesson, ReviewPool(store), ProgressTracker(store))
        session.submit("Guten Morgen")
        session.submit("Bitte")
        assert session.submit().finished
        assert store.get("done_a1_greetings") == 1
        assert store.get("xp") == 10
        assert store.get("streak") == 1
