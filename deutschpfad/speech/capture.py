"""
CaptureSession - one pending speech-to-text request.

A capture resolves exactly once, to a transcript string. Recognition errors
and silence resolve to "" so callers only ever see text. "Not finished yet"
is a separate state from "finished with an empty transcript".
"""

from concurrent.futures import CancelledError, Future, wait
from typing import Callable, Optional


class CaptureSession:
    """Wraps the future a recognizer completes with the transcript."""

    def __init__(self, future: "Future[str]", language_tag: str):
        self._future = future
        self.language_tag = language_tag
        self._discarded = False

    @classmethod
    def resolved(cls, transcript: str, language_tag: str) -> "CaptureSession":
        """A capture that has already finished, e.g. for typed fallbacks."""
        future: Future[str] = Future()
        future.set_result(transcript)
        return cls(future, language_tag)

    @property
    def pending(self) -> bool:
        return not self._discarded and not self._future.done()

    @property
    def discarded(self) -> bool:
        return self._discarded or self._future.cancelled()

    def done(self) -> bool:
        """True once a transcript (possibly empty) is available."""
        return not self.discarded and self._future.done()

    def transcript(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Wait for the transcript.

        Returns:
            The transcript, or None if the capture was discarded
        """
        if self.discarded:
            return None
        try:
            return self._future.result(timeout=timeout)
        except CancelledError:
            return None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the capture resolves or `timeout` seconds pass.

        Returns:
            True if a transcript is available
        """
        if not self.discarded:
            wait([self._future], timeout=timeout)
        return self.done()

    def cancel(self):
        """Discard the capture; a late result is ignored."""
        self._discarded = True
        self._future.cancel()

    def on_result(self, callback: Callable[[str], None]):
        """Call `callback(transcript)` once the capture resolves, unless discarded."""
        def _forward(future: "Future[str]"):
            if self._discarded or future.cancelled():
                return
            callback(future.result())

        self._future.add_done_callback(_forward)
