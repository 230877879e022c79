"""
Speech recognition using Google Cloud Speech-to-Text.

The recognizer runs each request on a worker thread and hands back a
CaptureSession right away. Failures are logged and resolve as an empty
transcript; nothing is retried.

Prerequisites:
  Set GOOGLE_APPLICATION_CREDENTIALS to a service account JSON file path
  OR run `gcloud auth application-default login`
"""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional, Protocol

from .capture import CaptureSession


logger = logging.getLogger(__name__)


class SpeechRecognizer(Protocol):
    def start_listening(self, language_tag: str, audio: bytes) -> CaptureSession: ...


class GoogleSpeechRecognizer:
    """Transcribe recorded audio clips with the Cloud Speech API."""

    def __init__(self, client=None, executor: Optional[Executor] = None):
        """
        Args:
            client: Optional speech.SpeechClient (created lazily when omitted)
            executor: Worker pool for requests (default: a single thread)
        """
        self._client = client
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="stt")

    def _get_client(self):
        if self._client is None:
            from google.cloud import speech
            self._client = speech.SpeechClient()
        return self._client

    def start_listening(self, language_tag: str, audio: bytes) -> CaptureSession:
        future = self._executor.submit(self.transcribe, language_tag, audio)
        return CaptureSession(future, language_tag)

    def transcribe(self, language_tag: str, audio: bytes) -> str:
        """Blocking transcription; returns "" on silence or any error."""
        if not audio:
            logger.info("No audio recorded; returning empty transcript")
            return ""

        from google.cloud import speech

        try:
            client = self._get_client()
            config = speech.RecognitionConfig(
                language_code=language_tag,
                enable_automatic_punctuation=True,
            )
            response = client.recognize(
                config=config,
                audio=speech.RecognitionAudio(content=audio),
            )
        except Exception as e:
            logger.error(f"Speech recognition failed ({language_tag}): {e}")
            return ""

        parts = [
            result.alternatives[0].transcript.strip()
            for result in response.results
            if result.alternatives
        ]
        return " ".join(p for p in parts if p)
