"""
Speech synthesis using Google Cloud TTS.

Clips are cached as MP3 files named by a hash of (language, voice, text),
so each prompt is synthesized once and then served from disk.
"""

import hashlib
import logging
from pathlib import Path
from typing import Optional, Protocol


logger = logging.getLogger(__name__)

DEFAULT_VOICE = "de-DE-Neural2-B"


class SpeechSynthesizer(Protocol):
    def speak(self, text: str, language_tag: str) -> None: ...


def clip_name(text: str, language_tag: str, voice_name: str) -> str:
    digest = hashlib.sha256(f"{language_tag}|{voice_name}|{text}".encode("utf-8")).hexdigest()[:16]
    return f"{digest}.mp3"


class GoogleCloudSynthesizer:
    """
    Synthesize prompts to MP3.

    `speak` is fire-and-forget: it makes sure the clip exists and remembers
    it as `last_clip` for the UI to play.
    """

    def __init__(
        self,
        audio_dir: Path,
        voice_name: str = DEFAULT_VOICE,
        speaking_rate: float = 0.9,
        client=None,
    ):
        self.audio_dir = Path(audio_dir)
        self.voice_name = voice_name
        self.speaking_rate = speaking_rate
        self._client = client
        self.last_clip: Optional[Path] = None

    def _get_client(self):
        if self._client is None:
            from google.cloud import texttospeech
            self._client = texttospeech.TextToSpeechClient()
        return self._client

    def clip_path(self, text: str, language_tag: str) -> Path:
        return self.audio_dir / clip_name(text, language_tag, self.voice_name)

    def synthesize(self, text: str, language_tag: str) -> Optional[Path]:
        """
        Return the MP3 for `text`, synthesizing it if not cached.

        Returns:
            Path to the clip, or None if synthesis failed
        """
        output_path = self.clip_path(text, language_tag)
        if output_path.exists():
            return output_path
        if not text.strip():
            return None

        from google.cloud import texttospeech

        try:
            voice_params = {"language_code": language_tag}
            # Voice names are prefixed with their language, e.g. de-DE-Neural2-B
            if self.voice_name.startswith(language_tag):
                voice_params["name"] = self.voice_name
            response = self._get_client().synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=texttospeech.VoiceSelectionParams(**voice_params),
                audio_config=texttospeech.AudioConfig(
                    audio_encoding=texttospeech.AudioEncoding.MP3,
                    speaking_rate=self.speaking_rate,
                ),
            )
        except Exception as e:
            logger.error(f"TTS synthesis failed for {output_path.name}: {e}")
            return None

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "wb") as out:
            out.write(response.audio_content)
        return output_path

    def speak(self, text: str, language_tag: str) -> None:
        self.last_clip = self.synthesize(text, language_tag)
