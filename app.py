"""
deutschpfad - German for Bangla speakers

Streamlit application with step-by-step lessons, a leveled review pool and a
B1 mock exam with automatic scoring of written and spoken answers.

Usage:
    streamlit run app.py
"""

import streamlit as st

from deutschpfad.classroom import (
    ContentLoader,
    LessonSession,
    Navigator,
    ProgressTracker,
    ReviewOutcome,
    ReviewPool,
    SqliteStore,
    XP_PER_LESSON,
)
from deutschpfad.config import configure_logging, get_settings
from deutschpfad.exam import ExamEngine, ExamStage, score_breakdown
from deutschpfad.schemas import ListenStep, MatchStep, McqStep, SpeakStep, TypeInStep
from deutschpfad.speech import GoogleCloudSynthesizer, GoogleSpeechRecognizer
from deutschpfad.viewer import (
    get_lesson_css,
    get_report_css,
    render_breakdown,
    render_exam_report,
    render_review_entry,
    render_step_prompt,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

SETTINGS = get_settings()
configure_logging(SETTINGS.log_level)

st.set_page_config(
    page_title="deutschpfad",
    page_icon="🇩🇪",
    layout="centered",
    initial_sidebar_state="expanded",
)

VIEWS = ["home", "review", "curriculum", "exam"]
VIEW_LABELS = {
    "home": "🏠 Lessons",
    "review": "🔁 Review",
    "curriculum": "📚 Curriculum",
    "exam": "🎓 B1 Mock Exam",
}


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = SqliteStore(SETTINGS.state_db)
        st.session_state.progress = ProgressTracker(st.session_state.store)
        st.session_state.pool = ReviewPool(st.session_state.store)

    if "loader" not in st.session_state:
        if SETTINGS.data_dir.is_dir():
            st.session_state.loader = ContentLoader(SETTINGS.data_dir)
            st.session_state.navigator = Navigator(st.session_state.loader, st.session_state.progress)
        else:
            st.session_state.loader = None

    if "synthesizer" not in st.session_state:
        st.session_state.synthesizer = GoogleCloudSynthesizer(
            SETTINGS.resolved_audio_dir, voice_name=SETTINGS.tts_voice
        )
        st.session_state.recognizer = GoogleSpeechRecognizer()

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = "home"  # home, lesson, review, curriculum, exam, report

    if "lesson_session" not in st.session_state:
        st.session_state.lesson_session = None
        st.session_state.last_outcome = None

    if "exam_engine" not in st.session_state:
        st.session_state.exam_engine = None

    if "capture" not in st.session_state:
        st.session_state.capture = None


def go(view: str):
    """Switch view, discarding any pending speech capture."""
    if st.session_state.capture is not None:
        st.session_state.capture.cancel()
        st.session_state.capture = None
    st.session_state.view_mode = view
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with XP, streak and view selection."""
    st.sidebar.title("🇩🇪 deutschpfad")

    state = st.session_state.progress.state()
    st.sidebar.markdown(f"**XP:** {state.xp} • 🔥 **{state.streak}**")

    if st.session_state.loader:
        stats = st.session_state.navigator.get_progress_summary()
        st.sidebar.markdown(f"**Lessons:** {stats['completed']}/{stats['total_lessons']}")
        st.sidebar.progress(stats['completion_percent'] / 100)

    st.sidebar.divider()

    current = st.session_state.view_mode if st.session_state.view_mode in VIEWS else None
    for view in VIEWS:
        if st.sidebar.button(VIEW_LABELS[view], key=f"nav_{view}", use_container_width=True,
                             type="primary" if view == current else "secondary"):
            go(view)


# -----------------------------------------------------------------------------
# Home: Level Categories
# -----------------------------------------------------------------------------

def render_home_view():
    st.title("Lessons")
    nav = st.session_state.navigator

    for category in nav.get_catalog():
        with st.expander(f"**Level {category.level}** ({category.completed_count}/{category.total_count})",
                         expanded=True):
            for nav_lesson in category.lessons:
                lesson = nav_lesson.lesson
                indicator = "✓" if nav_lesson.completed else "○"
                label = f"{indicator} {lesson.title} · {len(lesson.steps)} steps"
                if nav_lesson.score is not None:
                    label += f" · last score {nav_lesson.score}"
                if st.button(label, key=f"lesson_{lesson.id}", use_container_width=True):
                    start_lesson(lesson.id)


def start_lesson(lesson_id: str):
    lesson = st.session_state.loader.get_lesson(lesson_id)
    st.session_state.lesson_session = LessonSession(
        lesson, st.session_state.pool, st.session_state.progress
    )
    st.session_state.last_outcome = None
    go("lesson")


# -----------------------------------------------------------------------------
# Lesson View
# -----------------------------------------------------------------------------

def render_lesson_view():
    session = st.session_state.lesson_session
    if session is None:
        go("home")
        return

    if st.button("< Back"):
        go("home")

    if session.finished:
        st.success(f"Lesson complete: {session.score}/{session.total} correct · +{XP_PER_LESSON} XP")
        next_id = st.session_state.navigator.get_next_lesson_id(session.lesson.id)
        if next_id and st.button("Next lesson →", type="primary"):
            start_lesson(next_id)
        return

    pos, total = session.position
    st.subheader(f"{session.lesson.title} • {pos}/{total}")
    st.progress(pos / total)

    render_last_outcome()

    step = session.current_step
    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.markdown(render_step_prompt(step), unsafe_allow_html=True)

    key = f"step_{session.lesson.id}_{session.step_index}"
    if isinstance(step, McqStep):
        for i, option in enumerate(step.options):
            if st.button(option, key=f"{key}_opt_{i}", use_container_width=True):
                submit_step(option)
    elif isinstance(step, MatchStep):
        for i, pair in enumerate(step.pairs):
            st.markdown(f"**{pair.native}**")
            if st.button(pair.target, key=f"{key}_pair_{i}"):
                submit_step(pair.target)
    elif isinstance(step, ListenStep):
        render_play_button(step.prompt_target or "", key)
        if st.button("পরেরটি", key=f"{key}_next"):
            submit_step(None)
    elif isinstance(step, TypeInStep):
        typed = st.text_input("জার্মান টাইপ করুন", key=f"{key}_typed")
        if st.button("চেক", key=f"{key}_check", use_container_width=True):
            submit_step(typed)
    elif isinstance(step, SpeakStep):
        transcript = render_speech_capture(key, start_lesson_capture)
        if st.button("চেক", key=f"{key}_check", disabled=transcript is None):
            submit_step(transcript)


def submit_step(response):
    outcome = st.session_state.lesson_session.submit(response)
    st.session_state.last_outcome = outcome
    st.session_state.capture = None
    st.rerun()


def render_last_outcome():
    outcome = st.session_state.last_outcome
    if outcome is None or outcome.correct is None:
        return
    if outcome.correct:
        st.success("✅ ঠিক!")
    else:
        st.warning(f"সঠিক: {outcome.expected} (added to review)")


def render_play_button(text: str, key: str):
    synthesizer = st.session_state.synthesizer
    if st.button("▶ শোনো (DE)", key=f"{key}_play"):
        synthesizer.speak(text, SETTINGS.target_language)
        if synthesizer.last_clip is None:
            st.error("Audio unavailable.")
    clip = synthesizer.clip_path(text, SETTINGS.target_language)
    if clip.exists():
        st.audio(str(clip), format="audio/mp3")


def render_speech_capture(key: str, start):
    """
    Record, transcribe and show the transcript.

    Args:
        key: Widget key prefix
        start: Callable taking the recorded bytes and returning a CaptureSession

    Returns:
        The transcript once the capture has finished (possibly ""), else None
    """
    audio = st.audio_input("🎙️ বলুন", key=f"{key}_audio")

    if audio is not None and st.button("Transcribe", key=f"{key}_transcribe"):
        st.session_state.capture = start(audio.getvalue())

    capture = st.session_state.capture
    if capture is None:
        return None
    if capture.pending:
        with st.spinner("🎙️ Listening..."):
            finished = capture.wait(SETTINGS.capture_timeout)
        if not finished:
            capture.cancel()
            st.session_state.capture = None
            st.error("Speech recognition timed out. Please record again.")
            return None
    transcript = capture.transcript() if capture.done() else None
    if transcript is None:
        return None
    st.markdown(f"শুনেছি: {transcript}" if transcript else "_No speech recognized._")
    return transcript


def start_lesson_capture(audio: bytes):
    if st.session_state.capture is not None:
        st.session_state.capture.cancel()
    return st.session_state.recognizer.start_listening(SETTINGS.target_language, audio)


# -----------------------------------------------------------------------------
# Review View
# -----------------------------------------------------------------------------

def render_review_view():
    pool = st.session_state.pool
    entries = pool.decode_all()

    col1, col2 = st.columns([4, 1])
    with col1:
        st.title(f"Review ({len(entries)})")
    with col2:
        if st.button("Clear"):
            pool.clear()
            st.rerun()

    if not entries:
        st.info("এখন কিছু রিভিউ বাকি নেই 🎉")
        return

    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    for i, entry in enumerate(entries):
        card = st.empty()
        card.markdown(render_review_entry(entry), unsafe_allow_html=True)
        typed = st.text_input("জার্মান টাইপ করুন", key=f"review_{i}_{entry.level}_{entry.prompt_native}")
        if st.button("চেক", key=f"review_check_{i}"):
            outcome = pool.answer(entry, typed)
            if outcome == ReviewOutcome.RETRY:
                card.markdown(render_review_entry(entry, show_answer=True), unsafe_allow_html=True)
            else:
                st.rerun()


# -----------------------------------------------------------------------------
# Curriculum View
# -----------------------------------------------------------------------------

def render_curriculum_view():
    st.title("A1 → A2 → B1 → B2 পথনকশা")
    for progress in st.session_state.navigator.get_stage_progress():
        stage = progress.stage
        with st.container(border=True):
            done = len(progress.completed_checkpoints)
            total = done + len(progress.missing_checkpoints)
            st.subheader(f"{stage.stage} {'✓' if progress.is_complete and total else ''}")
            st.markdown("**Goals:**\n" + "\n".join(f"- {g}" for g in stage.goals))
            st.markdown("**Sample Topics:**\n" + "\n".join(f"- {t}" for t in stage.sample_topics))
            if total:
                st.caption(f"Checkpoints: {done}/{total}")


# -----------------------------------------------------------------------------
# Exam View
# -----------------------------------------------------------------------------

def render_exam_view():
    loader = st.session_state.loader
    engine = st.session_state.exam_engine
    if engine is None or engine.finished:
        st.title("B1 Mock Exam")
        st.markdown("Reading → Listening → Writing → Speaking, 25 points each.")
        if st.button("Start exam", type="primary"):
            st.session_state.exam_engine = ExamEngine(loader.mock_exam, SETTINGS.target_language)
            st.rerun()
        return

    exam = engine.exam
    if engine.stage == ExamStage.READING:
        st.header("Reading (25)")
        choices = [
            st.radio(q.prompt, q.options, index=None, key=f"reading_{i}")
            for i, q in enumerate(exam.reading)
        ]
        if st.button("Next: Listening"):
            engine.submit_reading(choices)
            st.rerun()

    elif engine.stage == ExamStage.LISTENING:
        st.header("Listening (25)")
        choices = []
        for i, q in enumerate(exam.listening):
            render_play_button(q.prompt, f"listening_{i}")
            choices.append(st.radio(f"Question {i + 1}", q.options, index=None, key=f"listening_{i}"))
        if st.button("Next: Writing"):
            engine.submit_listening(choices)
            st.rerun()

    elif engine.stage == ExamStage.WRITING:
        st.header("Writing (25)")
        task = exam.writing_task
        st.markdown(task.prompt)
        text = st.text_area("আপনার উত্তর (DE)", height=180, key="writing_text")
        st.caption(render_breakdown(score_breakdown(text, task.keywords, task.min_words)))
        if st.button("Next: Speaking"):
            engine.submit_writing(text)
            st.rerun()

    elif engine.stage == ExamStage.SPEAKING:
        st.header("Speaking (25)")
        task = exam.speaking_task
        st.markdown(task.prompt)
        st.caption("কীওয়ার্ড গাইড: " + ", ".join(task.keywords))
        render_speech_capture(
            "speaking",
            lambda audio: engine.start_speaking_capture(st.session_state.recognizer, audio),
        )
        if st.button("Finish", type="primary"):
            st.session_state.exam_report = engine.submit_speaking()
            st.session_state.capture = None
            go("report")


def render_report_view():
    report = st.session_state.get("exam_report")
    st.title("Exam Report")
    if report is None:
        st.info("No report")
        return
    st.markdown(get_report_css(), unsafe_allow_html=True)
    st.markdown(render_exam_report(report), unsafe_allow_html=True)
    if st.button("< Back"):
        go("home")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    if not st.session_state.loader:
        st.error(f"Content directory not found: {SETTINGS.data_dir}")
        return

    view = st.session_state.view_mode
    if view == "home":
        render_home_view()
    elif view == "lesson":
        render_lesson_view()
    elif view == "review":
        render_review_view()
    elif view == "curriculum":
        render_curriculum_view()
    elif view == "exam":
        render_exam_view()
    elif view == "report":
        render_report_view()


if __name__ == "__main__":
    main()
