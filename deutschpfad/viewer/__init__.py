"""
deutschpfad Viewer - Rendering components for the Streamlit app.

This module provides:
- Step prompt and review card rendering
- Exam report rendering
"""

from .lesson import (
    get_lesson_css,
    render_step_prompt,
    render_review_entry,
    STEP_TITLES,
    LEVEL_COLORS,
)

from .report import (
    get_report_css,
    render_exam_report,
    render_breakdown,
    VERDICT_COLORS,
)

__all__ = [
    # Lesson
    "get_lesson_css",
    "render_step_prompt",
    "render_review_entry",
    "STEP_TITLES",
    "LEVEL_COLORS",
    # Report
    "get_report_css",
    "render_exam_report",
    "render_breakdown",
    "VERDICT_COLORS",
]
