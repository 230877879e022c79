"""
Exam report renderer - section scores and verdict display.
"""

import html

from deutschpfad.exam import ScoreBreakdown
from deutschpfad.schemas import SECTION_MAX, ExamReport, Verdict


VERDICT_COLORS = {
    Verdict.PASS: "#388E3C",
    Verdict.BORDERLINE_OR_BELOW: "#E65100",
}


def get_report_css() -> str:
    """Get CSS styles for the exam report."""
    return """
    <style>
    .report-box {
        background: #f5f5f5;
        border-radius: 12px;
        padding: 1.5em;
        margin: 1em 0;
    }
    .report-row {
        display: flex;
        justify-content: space-between;
        padding: 0.3em 0;
        border-bottom: 1px solid #e0e0e0;
    }
    .report-total {
        font-size: 1.6em;
        font-weight: 700;
        margin-top: 0.6em;
    }
    .report-verdict {
        font-weight: 600;
        margin-top: 0.4em;
    }
    </style>
    """


def render_exam_report(report: ExamReport) -> str:
    """Render section scores, total and verdict as HTML."""
    sections = [
        ("Reading", report.reading),
        ("Listening", report.listening),
        ("Writing", report.writing),
        ("Speaking", report.speaking),
    ]
    parts = ['<div class="report-box">']
    for name, score in sections:
        parts.append(
            f'<div class="report-row"><span>{name}</span><span>{score}/{SECTION_MAX}</span></div>'
        )
    parts.append(f'<div class="report-total">{report.total}/{4 * SECTION_MAX}</div>')
    color = VERDICT_COLORS[report.verdict]
    parts.append(
        f'<div class="report-verdict" style="color: {color};">{html.escape(report.verdict.label)}</div>'
    )
    parts.append('</div>')
    return ''.join(parts)


def render_breakdown(breakdown: ScoreBreakdown) -> str:
    """One-line explanation of a writing/speaking score."""
    return (
        f"{breakdown.word_count} words · length {breakdown.length}/10 · "
        f"keywords {breakdown.keyword}/8 · cohesion {breakdown.cohesion}/7 · "
        f"total {breakdown.total}/{SECTION_MAX}"
    )
