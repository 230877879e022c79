"""
Tests for HTML rendering helpers.
"""

from deutschpfad.exam import score_breakdown
from deutschpfad.schemas import ExamReport, ListenStep, MatchStep, ReviewEntry, SpeakStep, TypeInStep
from deutschpfad.viewer import (
    LEVEL_COLORS,
    STEP_TITLES,
    render_breakdown,
    render_exam_report,
    render_review_entry,
    render_step_prompt,
)


class TestStepPrompt:
    """Test step prompt rendering."""

    def test_typein_hides_answer(self):
        html = render_step_prompt(TypeInStep(prompt_native="ধন্যবাদ", answer="Danke"))
        assert "ধন্যবাদ" in html
        assert "Danke" not in html
        assert STEP_TITLES["typein"] in html

    def test_listen_hides_target(self):
        html = render_step_prompt(ListenStep(prompt_native="শোনো", prompt_target="Hallo"))
        assert "Hallo" not in html

    def test_speak_shows_phrase(self):
        html = render_step_prompt(SpeakStep(prompt_native="বলুন", answer="Gute Nacht"))
        assert "Gute Nacht" in html

    def test_match_shows_native_side(self):
        step = MatchStep(prompt_native="মিলাও", pairs=[{"bn": "হ্যাঁ", "de": "Ja"}, {"bn": "না", "de": "Nein"}])
        html = render_step_prompt(step)
        assert "হ্যাঁ, না" in html
        assert "Nein" not in html

    def test_escapes_markup(self):
        html = render_step_prompt(TypeInStep(prompt_native="<b>x</b>", answer="y"))
        assert "&lt;b&gt;x&lt;/b&gt;" in html


class TestReviewEntry:
    """Test review card rendering."""

    def test_level_badge(self):
        html = render_review_entry(ReviewEntry(level=1, prompt_native="এক", correct_answer="eins"))
        assert "L1" in html
        assert LEVEL_COLORS[1] in html
        assert "eins" not in html

    def test_show_answer(self):
        html = render_review_entry(ReviewEntry(level=0, prompt_native="এক", correct_answer="eins"), show_answer=True)
        assert "eins" in html


class TestReport:
    """Test exam report rendering."""

    def test_report(self):
        html = render_exam_report(ExamReport(reading=20, listening=15, writing=18, speaking=12))
        assert "20/25" in html
        assert "65/100" in html
        assert "Likely Pass (B1 range)" in html

    def test_breakdown(self):
        text = render_breakdown(score_breakdown("Urlaub weil", ["Urlaub"], 0))
        assert text.startswith("2 words")
        assert "keywords 2/8" in text
        assert "total 9/25" in text
