"""
LessonSession - Drive one lesson from its first step to completion.

Each submission is checked against the current step, a miss is queued in
the review pool, and the last submission hands the score to the progress
tracker.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from deutschpfad.errors import SessionFinishedError
from deutschpfad.schemas import (
    Lesson,
    ListenStep,
    MatchStep,
    McqStep,
    SpeakStep,
    Step,
    TypeInStep,
)

from .progress import ProgressTracker
from .review_pool import ReviewPool


logger = logging.getLogger(__name__)


def normalize_answer(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def evaluate_step(step: Step, response: Optional[str]) -> Optional[bool]:
    """
    Check a response against a step.

    Args:
        step: Current lesson step
        response: Chosen option (mcq), chosen pair target (match), typed text
            (typein) or transcript (speak); ignored for listen steps

    Returns:
        True/False for scored steps, None for steps without a right answer
        (listen, and mcq without an answer key)
    """
    if isinstance(step, (TypeInStep, SpeakStep)):
        return normalize_answer(response) == normalize_answer(step.answer)
    if isinstance(step, McqStep):
        if not step.scored:
            return None
        return response == step.answer
    if isinstance(step, MatchStep):
        # Any pair selection counts; the exercise has no wrong-answer path.
        return True
    if isinstance(step, ListenStep):
        return None
    raise TypeError(f"Unsupported step type: {type(step).__name__}")


@dataclass(frozen=True)
class StepOutcome:
    """Result of one submission."""
    step_index: int
    correct: Optional[bool]
    expected: str
    finished: bool


class LessonSession:
    """
    Sequence a lesson's steps.

    Combines a Lesson (content) with ReviewPool and ProgressTracker
    (learner state).
    """

    def __init__(self, lesson: Lesson, review_pool: ReviewPool, progress: ProgressTracker):
        self.lesson = lesson
        self.review_pool = review_pool
        self.progress = progress
        self.step_index = 0
        self.score = 0
        self.finished = False

    @property
    def total(self) -> int:
        return len(self.lesson.steps)

    @property
    def current_step(self) -> Step:
        return self.lesson.steps[self.step_index]

    @property
    def position(self) -> tuple[int, int]:
        """1-based (current step, total) for display."""
        return (self.step_index + 1, self.total)

    def submit(self, response: Optional[str] = None) -> StepOutcome:
        """
        Submit a response for the current step and advance.

        Raises:
            SessionFinishedError: If the lesson has already finished
        """
        if self.finished:
            raise SessionFinishedError(f"Lesson {self.lesson.id} is already finished")

        step = self.current_step
        index = self.step_index
        correct = evaluate_step(step, response)
        score = self.score + 1 if correct is True else self.score
        last = self.step_index >= self.total - 1

        # Record completion before touching session state, so a failed
        # write leaves the last step open for another submit
        if last:
            self.progress.complete_lesson(self.lesson.id, score)

        self.score = score
        if correct is False:
            self.review_pool.add_miss(step.prompt_native, step.expected_answer)

        if last:
            self.finished = True
            logger.info(f"Lesson {self.lesson.id} finished: {self.score}/{self.total}")
        else:
            self.step_index += 1

        return StepOutcome(
            step_index=index,
            correct=correct,
            expected=step.expected_answer,
            finished=self.finished,
        )
