"""Shared fixtures for deutschpfad tests."""

import json
from concurrent.futures import Future
from datetime import date

import pytest

from deutschpfad.classroom import MemoryStore, ProgressTracker, ReviewPool
from deutschpfad.schemas import Lesson, MockExam
from deutschpfad.speech import CaptureSession


TODAY = date(2024, 3, 15)


class FakeRecognizer:
    """Recognizer that returns a fixed transcript, or leaves captures pending."""

    def __init__(self, transcript: str = "", pending: bool = False):
        self.transcript = transcript
        self.pending = pending
        self.calls = []
        self.futures = []

    def start_listening(self, language_tag, audio):
        self.calls.append((language_tag, audio))
        if self.pending:
            future = Future()
            self.futures.append(future)
            return CaptureSession(future, language_tag)
        return CaptureSession.resolved(self.transcript, language_tag)


SAMPLE_CATALOG = [
    {
        "level": "A1",
        "lessons": [
            {
                "id": "a1_greetings",
                "title": "Begrüßung",
                "level": "A1",
                "steps": [
                    {"type": "mcq", "promptBn": "শুভ সকাল", "options": ["Guten Morgen", "Danke"], "answer": "Guten Morgen"},
                    {"type": "typein", "promptBn": "ধন্যবাদ", "answer": "Danke"},
                    {"type": "listen", "promptBn": "শোনো", "promptDe": "Hallo"},
                ],
            },
            {
                "id": "a1_numbers",
                "title": "Zahlen",
                "level": "A1",
                "steps": [
                    {"type": "typein", "promptBn": "এক", "answer": "eins"},
                ],
            },
        ],
    },
    {
        "level": "A2",
        "lessons": [
            {
                "id": "a2_routine",
                "title": "Tagesablauf",
                "level": "A2",
                "steps": [
                    {"type": "speak", "promptBn": "বলুন", "answer": "Ich trinke Kaffee"},
                ],
            },
        ],
    },
]

SAMPLE_CURRICULUM = [
    {"stage": "A1", "goals": ["Begrüßen"], "sampleTopics": ["Zahlen"], "checkpointLessonIds": ["a1_greetings", "a1_numbers"]},
    {"stage": "A2", "goals": [], "checkpointLessonIds": ["a2_routine"]},
    {"stage": "B1"},
]

SAMPLE_EXAM = {
    "reading": [
        {"prompt": f"Lesefrage {i}", "options": ["ja", "nein"], "answer": "ja"} for i in range(5)
    ],
    "listening": [
        {"prompt": f"Hörtext {i}", "options": ["links", "rechts"], "answer": "rechts"} for i in range(5)
    ],
    "writing": [
        {"prompt": "Schreiben Sie über Ihren Urlaub.", "keywords": ["Urlaub", "Wetter", "Hotel", "Strand"], "minWords": 50},
    ],
    "speaking": [
        {"prompt": "Erzählen Sie über Ihre Arbeit.", "keywords": ["Arbeit", "Kollegen"], "minWords": 10},
    ],
}


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def tracker(store):
    return ProgressTracker(store, clock=lambda: TODAY)


@pytest.fixture
def pool(store):
    return ReviewPool(store)


@pytest.fixture
def greetings_lesson():
    return Lesson.model_validate(SAMPLE_CATALOG[0]["lessons"][0])


@pytest.fixture
def mock_exam():
    return MockExam.model_validate(SAMPLE_EXAM)


@pytest.fixture
def data_dir(tmp_path):
    """Content directory with the sample catalog, curriculum and exam."""
    (tmp_path / "lessons.json").write_text(json.dumps(SAMPLE_CATALOG, ensure_ascii=False), encoding="utf-8")
    (tmp_path / "curriculum.json").write_text(json.dumps(SAMPLE_CURRICULUM, ensure_ascii=False), encoding="utf-8")
    (tmp_path / "b1_mock.json").write_text(json.dumps(SAMPLE_EXAM, ensure_ascii=False), encoding="utf-8")
    return tmp_path
