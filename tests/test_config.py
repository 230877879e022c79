"""
Tests for environment-based settings.
"""

import logging
from pathlib import Path

import pytest

from deutschpfad.config import Settings, configure_logging, get_settings
from deutschpfad.speech import DEFAULT_VOICE


ENV_VARS = [
    "DEUTSCHPFAD_DATA_DIR",
    "DEUTSCHPFAD_STATE_DB",
    "DEUTSCHPFAD_TARGET_LANGUAGE",
    "DEUTSCHPFAD_TTS_VOICE",
    "DEUTSCHPFAD_AUDIO_DIR",
    "DEUTSCHPFAD_LOG_LEVEL",
    "DEUTSCHPFAD_CAPTURE_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also unsets anything a .env file loaded
    for name in ENV_VARS:
        monkeypatch.setenv(name, "unused")
        monkeypatch.delenv(name)


class TestSettings:
    """Test settings defaults and overrides."""

    def test_defaults(self, tmp_path):
        settings = get_settings(tmp_path / "missing.env")
        assert settings.data_dir == Path("data")
        assert settings.target_language == "de-DE"
        assert settings.tts_voice == DEFAULT_VOICE
        assert settings.resolved_audio_dir == Path("data") / "audio"

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DEUTSCHPFAD_DATA_DIR", str(tmp_path / "content"))
        monkeypatch.setenv("DEUTSCHPFAD_AUDIO_DIR", str(tmp_path / "clips"))
        monkeypatch.setenv("DEUTSCHPFAD_LOG_LEVEL", "DEBUG")
        settings = get_settings(tmp_path / "missing.env")
        assert settings.data_dir == tmp_path / "content"
        assert settings.resolved_audio_dir == tmp_path / "clips"
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DEUTSCHPFAD_TTS_VOICE=de-DE-Neural2-C\n", encoding="utf-8")
        assert get_settings(env_file).tts_voice == "de-DE-Neural2-C"

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("DEUTSCHPFAD_TARGET_LANGUAGE=en-US\n", encoding="utf-8")
        monkeypatch.setenv("DEUTSCHPFAD_TARGET_LANGUAGE", "de-AT")
        assert get_settings(env_file).target_language == "de-AT"

    def test_home_expanded(self):
        settings = Settings(state_db="~/state.db")
        assert settings.state_db == Path.home() / "state.db"

    def test_configure_logging_accepts_unknown_level(self):
        configure_logging("LOUD")
        configure_logging("debug")
        assert logging.getLogger("deutschpfad").getEffectiveLevel() <= logging.WARNING

    def test_capture_timeout(self, tmp_path, monkeypatch):
        assert get_settings(tmp_path / "missing.env").capture_timeout == 30.0
        monkeypatch.setenv("DEUTSCHPFAD_CAPTURE_TIMEOUT", "5.5")
        assert get_settings(tmp_path / "missing.env").capture_timeout == 5.5
