"""
ExamEngine - B1 mock exam state machine.

Sections run in a fixed order with no way back:

    READING -> LISTENING -> WRITING -> SPEAKING -> FINISHED

Reading and listening are multiple choice (5 points per correct answer,
capped at 25). Writing and speaking use the first task of their section and
are scored by the response scorer. Submitting speaking produces the report.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from deutschpfad.errors import CapturePendingError, ExamStageError
from deutschpfad.schemas import SECTION_MAX, ExamQuestion, ExamReport, MockExam
from deutschpfad.speech import CaptureSession, SpeechRecognizer

from .scorer import score_response


logger = logging.getLogger(__name__)

POINTS_PER_QUESTION = 5


class ExamStage(str, Enum):
    READING = "reading"
    LISTENING = "listening"
    WRITING = "writing"
    SPEAKING = "speaking"
    FINISHED = "finished"


def score_objective(questions: Sequence[ExamQuestion], choices: Sequence[Optional[str]]) -> int:
    """
    Score a multiple-choice section.

    Args:
        questions: Section questions
        choices: Chosen option per question, aligned by index; missing
            entries and None count as unanswered

    Returns:
        5 points per correct answer, capped at 25
    """
    points = 0
    for i, question in enumerate(questions):
        chosen = choices[i] if i < len(choices) else None
        if chosen is not None and chosen == question.answer:
            points += POINTS_PER_QUESTION
    return min(points, SECTION_MAX)


class ExamEngine:
    """
    Run one attempt at a mock exam.

    Each section can be submitted exactly once, in order.
    """

    def __init__(self, exam: MockExam, language_tag: str = "de-DE"):
        self.exam = exam
        self.language_tag = language_tag
        self.stage = ExamStage.READING
        self.scores: dict[ExamStage, int] = {}
        self.capture: Optional[CaptureSession] = None
        self.report: Optional[ExamReport] = None

    @property
    def finished(self) -> bool:
        return self.stage == ExamStage.FINISHED

    def _require(self, stage: ExamStage):
        if self.stage != stage:
            raise ExamStageError(f"Cannot submit {stage.value} during {self.stage.value}")

    def _advance(self, stage: ExamStage, score: int, next_stage: ExamStage) -> int:
        self.scores[stage] = score
        self.stage = next_stage
        logger.debug(f"Exam {stage.value}: {score}/{SECTION_MAX}")
        return score

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def submit_reading(self, choices: Sequence[Optional[str]]) -> int:
        self._require(ExamStage.READING)
        score = score_objective(self.exam.reading, choices)
        return self._advance(ExamStage.READING, score, ExamStage.LISTENING)

    def submit_listening(self, choices: Sequence[Optional[str]]) -> int:
        self._require(ExamStage.LISTENING)
        score = score_objective(self.exam.listening, choices)
        return self._advance(ExamStage.LISTENING, score, ExamStage.WRITING)

    def submit_writing(self, text: str) -> int:
        self._require(ExamStage.WRITING)
        task = self.exam.writing_task
        score = score_response(text, task.keywords, task.min_words)
        return self._advance(ExamStage.WRITING, score, ExamStage.SPEAKING)

    def start_speaking_capture(self, recognizer: SpeechRecognizer, audio: bytes) -> CaptureSession:
        """
        Send a recorded answer for transcription.

        A new capture replaces (and discards) any earlier one, so the learner
        can record again after a failed attempt.
        """
        self._require(ExamStage.SPEAKING)
        if self.capture is not None:
            self.capture.cancel()
        self.capture = recognizer.start_listening(self.language_tag, audio)
        return self.capture

    def submit_speaking(self, transcript: Optional[str] = None) -> ExamReport:
        """
        Score the speaking task and finish the exam.

        Args:
            transcript: Transcript to score. When omitted, the transcript of
                the finished capture is used; with no capture at all the
                answer is scored as empty.

        Raises:
            CapturePendingError: If the capture has not resolved yet
        """
        self._require(ExamStage.SPEAKING)
        if transcript is None:
            if self.capture is not None and self.capture.pending:
                raise CapturePendingError("Speech capture has not finished yet")
            transcript = ""
            if self.capture is not None and self.capture.done():
                transcript = self.capture.transcript() or ""

        task = self.exam.speaking_task
        score = score_response(transcript, task.keywords, task.min_words)
        self._advance(ExamStage.SPEAKING, score, ExamStage.FINISHED)
        self.capture = None
        return self._finalize()

    def _finalize(self) -> ExamReport:
        self.report = ExamReport(
            reading=self.scores[ExamStage.READING],
            listening=self.scores[ExamStage.LISTENING],
            writing=self.scores[ExamStage.WRITING],
            speaking=self.scores[ExamStage.SPEAKING],
        )
        logger.info(f"Exam finished: total={self.report.total}, verdict={self.report.verdict.value}")
        return self.report
