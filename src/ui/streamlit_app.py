"""
Streamlit Web Interface for the AI Interviewer.

Run with: streamlit run src/ui/streamlit_app.py
(the API must be running: uvicorn src.main:app --port 8000)
"""
import logging

import streamlit as st

from src.client.chat_client import ChatClient
from src.config import get_settings
from src.custom_logging import configure_logging
from src.models.chat import Mode, Speaker
from src.services.upload_service import UploadError, read_upload
from src.session.controller import submit_turn
from src.session.state import (
    ContextChanged,
    DetailsChanged,
    FileLoaded,
    ModeSelected,
    RepositoryLinkChanged,
    SessionExited,
    SessionStarted,
    SessionState,
    reduce,
)

settings = get_settings()
configure_logging(settings.log_level)

st.set_page_config(
    page_title="AI Interviewer",
    page_icon="💼",
    layout="wide",
)

MODE_LABELS = {
    Mode.JOB: "💼 Job Interview",
    Mode.PROJECT: "🎓 Project Defense",
}

# Initialize session state
if "session" not in st.session_state:
    st.session_state.session = SessionState()
if "client" not in st.session_state:
    st.session_state.client = ChatClient()
if "loaded_files" not in st.session_state:
    st.session_state.loaded_files = set()


def dispatch(event) -> None:
    st.session_state.session = reduce(st.session_state.session, event)


def handle_upload(uploaded) -> None:
    """Append an uploaded file to the details once per file"""
    file_key = getattr(uploaded, "file_id", None) or f"{uploaded.name}:{uploaded.size}"
    if file_key in st.session_state.loaded_files:
        return

    st.session_state.loaded_files.add(file_key)
    try:
        text = read_upload(uploaded.name, uploaded.getvalue())
    except UploadError as e:
        logging.warning(f"Upload rejected: {e}")
        st.error(f"Could not read {uploaded.name}: {e}")
        return

    dispatch(FileLoaded(uploaded.name, text))


def render_setup(state: SessionState) -> None:
    st.title("AI Interviewer")

    mode = st.radio(
        "Mode",
        options=list(MODE_LABELS),
        format_func=MODE_LABELS.get,
        index=list(MODE_LABELS).index(state.mode),
        horizontal=True,
    )
    if mode != state.mode:
        dispatch(ModeSelected(mode))
        state = st.session_state.session

    is_job = state.mode == Mode.JOB
    context = st.text_input(
        "Position you are applying for" if is_job else "Project name",
        value=state.context,
        placeholder="e.g. Junior React Developer" if is_job else "e.g. E-commerce, Task Manager...",
    )
    if context != state.context:
        dispatch(ContextChanged(context))

    if not is_job:
        link = st.text_input(
            "🔗 Repository link (GitHub/GitLab)",
            value=state.repository_link,
            placeholder="https://github.com/user/repo",
        )
        if link != state.repository_link:
            dispatch(RepositoryLinkChanged(link))

        uploaded = st.file_uploader(
            "📄 Upload README or code (optional)",
            type=[ext.lstrip(".") for ext in settings.allowed_extensions],
            help="The file contents are appended to the technical context below",
        )
        if uploaded is not None:
            handle_upload(uploaded)

        details = st.text_area(
            "Technical context",
            value=st.session_state.session.details,
            placeholder="Describe your stack or upload a file above...",
            height=200,
        )
        if details != st.session_state.session.details:
            dispatch(DetailsChanged(details))

    start_label = "Start Interview" if is_job else "Defend Project"
    if st.button(start_label, disabled=not st.session_state.session.can_start, use_container_width=True):
        dispatch(SessionStarted())
        st.rerun()


def render_chat(state: SessionState) -> None:
    with st.sidebar:
        st.title("AI Interviewer")
        st.caption(f"MODE: {'RECRUITER' if state.mode == Mode.JOB else 'PROFESSOR'}")
        st.write("🎯 Goal: land the job." if state.mode == Mode.JOB else "🎓 Goal: pass the final project.")
        if state.repository_link:
            st.caption(f"🔗 Repo: {state.repository_link}")
        st.divider()
        if st.button("← Exit", use_container_width=True):
            dispatch(SessionExited())
            st.rerun()

    for turn in state.transcript:
        role = "user" if turn.speaker == Speaker.USER else "assistant"
        with st.chat_message(role):
            st.markdown(turn.text)

    if state.last_error:
        st.error(f"Could not reach the AI: {state.last_error}")

    # submit_turn blocks this script run until the reply arrives, and reduce
    # ignores a submit while pending, so at most one request is in flight
    message = st.chat_input("Type your answer...")
    if message:
        with st.spinner("Thinking..."):
            st.session_state.session = submit_turn(state, message, st.session_state.client)
        st.rerun()


if st.session_state.session.is_active:
    render_chat(st.session_state.session)
else:
    render_setup(st.session_state.session)
