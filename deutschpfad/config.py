"""
Runtime configuration for deutschpfad.

Settings come from environment variables, optionally set in a `.env` file at
the project root. Entry points call `configure_logging()` once.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from deutschpfad.classroom.store import DEFAULT_STATE_DB
from deutschpfad.speech.synthesis import DEFAULT_VOICE


PROJECT_ROOT = Path(__file__).parent.parent
ENV_PREFIX = "DEUTSCHPFAD_"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    data_dir: Path = Path("data")
    state_db: Path = DEFAULT_STATE_DB
    target_language: str = "de-DE"
    tts_voice: str = DEFAULT_VOICE
    audio_dir: Optional[Path] = None
    log_level: str = "INFO"
    capture_timeout: float = 30.0

    @field_validator("data_dir", "state_db", "audio_dir")
    @classmethod
    def expand_home(cls, v):
        return v.expanduser() if v is not None else v

    @property
    def resolved_audio_dir(self) -> Path:
        return self.audio_dir or self.data_dir / "audio"


def get_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: .env file to load first (default: PROJECT_ROOT/.env);
            variables already set in the environment take precedence
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")
    values = {}
    for field in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{field.upper()}")
        if raw:
            values[field] = raw
    return Settings(**values)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
