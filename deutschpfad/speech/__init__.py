"""
deutschpfad Speech - text-to-speech and speech-to-text collaborators.

This module provides:
- CaptureSession: single-result handle for a pending transcription
- GoogleSpeechRecognizer: Cloud Speech-to-Text
- GoogleCloudSynthesizer: Cloud Text-to-Speech with an MP3 cache
"""

from .capture import CaptureSession

from .recognition import (
    SpeechRecognizer,
    GoogleSpeechRecognizer,
)

from .synthesis import (
    SpeechSynthesizer,
    GoogleCloudSynthesizer,
    DEFAULT_VOICE,
    clip_name,
)

__all__ = [
    "CaptureSession",
    "SpeechRecognizer",
    "GoogleSpeechRecognizer",
    "SpeechSynthesizer",
    "GoogleCloudSynthesizer",
    "DEFAULT_VOICE",
    "clip_name",
]
