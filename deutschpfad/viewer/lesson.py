"""
Lesson renderer - step prompts and review cards.

Provides:
- Step prompt rendering for every step type
- Review pool card rendering
- Level badges for review entries
"""

import html

from deutschpfad.schemas import MatchStep, ReviewEntry, SpeakStep, Step


STEP_TITLES = {
    "mcq": "সঠিক উত্তর বাছাই করো",
    "match": "বাংলা → জার্মান মিলাও",
    "listen": "শোনো",
    "typein": "জার্মান টাইপ করুন",
    "speak": "উচ্চারণ বলুন",
}

LEVEL_COLORS = {
    0: "#E53935",   # new miss
    1: "#FB8C00",
    2: "#43A047",   # next hit masters it
}


def get_lesson_css() -> str:
    """Get CSS styles for step and review display."""
    return """
    <style>
    .step-card {
        background: #fafafa;
        border-radius: 12px;
        padding: 1.5em;
        margin: 1em 0;
        border-left: 4px solid #1976D2;
    }
    .step-title {
        font-size: 0.9em;
        color: #1565C0;
        font-weight: 600;
        margin-bottom: 0.5em;
    }
    .step-prompt {
        font-size: 1.4em;
        font-weight: 700;
        color: #222;
    }
    .step-target {
        font-size: 1.1em;
        color: #555;
        margin-top: 0.4em;
    }
    .review-card {
        border: 1px solid #ddd;
        border-radius: 8px;
        padding: 1em;
        margin: 0.6em 0;
    }
    .review-level {
        display: inline-block;
        color: white;
        border-radius: 4px;
        padding: 0 0.4em;
        margin-right: 0.5em;
        font-size: 0.85em;
    }
    </style>
    """


def render_step_prompt(step: Step) -> str:
    """
    Render the prompt block of a step.

    Speak steps show the phrase to say. The German side of mcq, typein and
    listen steps is never shown, since it is the answer or the audio.
    """
    parts = ['<div class="step-card">']
    parts.append(f'<div class="step-title">{html.escape(STEP_TITLES.get(step.type, step.type))}</div>')
    parts.append(f'<div class="step-prompt">{html.escape(step.prompt_native)}</div>')

    if isinstance(step, SpeakStep):
        parts.append(f'<div class="step-target">{html.escape(step.answer)}</div>')
    elif isinstance(step, MatchStep):
        natives = ", ".join(html.escape(pair.native) for pair in step.pairs)
        parts.append(f'<div class="step-target">{natives}</div>')

    parts.append('</div>')
    return ''.join(parts)


def render_review_entry(entry: ReviewEntry, show_answer: bool = False) -> str:
    """Render one review pool entry as `[L<level>] prompt`."""
    color = LEVEL_COLORS.get(entry.level, "#757575")
    parts = ['<div class="review-card">']
    parts.append(f'<span class="review-level" style="background: {color};">L{entry.level}</span>')
    parts.append(f'<strong>{html.escape(entry.prompt_native)}</strong>')
    if show_answer:
        parts.append(f'<div class="step-target">সঠিক: {html.escape(entry.correct_answer)}</div>')
    parts.append('</div>')
    return ''.join(parts)
