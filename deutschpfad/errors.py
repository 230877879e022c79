"""
Exceptions raised by deutschpfad.

Data problems in persisted state never raise (see ReviewPool); these cover
content that fails validation at load time and callers driving a session or
exam out of order.
"""


class DeutschpfadError(Exception):
    """Base class for all deutschpfad errors."""


class ContentError(DeutschpfadError, ValueError):
    """Lesson, curriculum or exam content is missing or invalid."""


class SessionFinishedError(DeutschpfadError, RuntimeError):
    """A step was submitted to a lesson session that has already finished."""


class ExamStageError(DeutschpfadError, RuntimeError):
    """An exam section was submitted outside its stage."""


class CapturePendingError(DeutschpfadError, RuntimeError):
    """Speaking was submitted while a speech capture is still running."""
