"""
Cursus - Multi-language course viewer

Streamlit front end over the Cursus core: language selector, curriculum
sidebar, topic rendering and interactive quizzes.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from cursus.classroom import CurriculumLoader, Navigator, QuizSession, available_languages
from cursus.config import CONTENT_DIR, DEFAULT_LANGUAGE, setup_logging
from cursus.errors import CurriculumError, QuizError
from cursus.schemas import QuestionState, QuizBlock, Topic, block_id
from cursus.viewer import (
    get_quiz_css,
    get_topic_css,
    render_block,
    render_quiz_question,
    render_quiz_review,
    render_quiz_score,
    render_unavailable,
)

setup_logging()
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Cursus",
    page_icon="📘",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "languages" not in st.session_state:
        st.session_state.languages = available_languages(CONTENT_DIR)

    if "language" not in st.session_state:
        languages = st.session_state.languages
        if DEFAULT_LANGUAGE in languages or not languages:
            st.session_state.language = DEFAULT_LANGUAGE
        else:
            st.session_state.language = languages[0]

    if "navigators" not in st.session_state:
        st.session_state.navigators = {}  # language -> Navigator

    if "load_errors" not in st.session_state:
        st.session_state.load_errors = {}  # language -> message

    if "current_topic_id" not in st.session_state:
        st.session_state.current_topic_id = None

    if "quiz_sessions" not in st.session_state:
        st.session_state.quiz_sessions = {}  # quiz id -> QuizSession


def get_navigator(language: str):
    """Load (once) and return the navigator for a language, or None on failure."""
    navigators = st.session_state.navigators
    if language in navigators:
        return navigators[language]
    if language in st.session_state.load_errors:
        return None

    try:
        curriculum = CurriculumLoader(CONTENT_DIR, language).load_curriculum()
    except (CurriculumError, FileNotFoundError) as e:
        logger.error(f"Failed to load '{language}' curriculum: {e}")
        st.session_state.load_errors[language] = str(e)
        return None

    navigators[language] = Navigator(curriculum)
    return navigators[language]


def select_topic(topic_id: str):
    """Select a topic and update state."""
    st.session_state.current_topic_id = topic_id
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Curriculum Tree
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with language selector and curriculum tree."""
    st.sidebar.title("📘 Cursus")

    languages = st.session_state.languages
    if not languages:
        st.sidebar.error(f"No curricula found in {CONTENT_DIR}")
        return

    language = st.sidebar.selectbox(
        "Language",
        languages,
        index=languages.index(st.session_state.language) if st.session_state.language in languages else 0,
    )
    if language != st.session_state.language:
        st.session_state.language = language
        st.session_state.current_topic_id = None
        st.session_state.quiz_sessions = {}

    nav = get_navigator(language)
    if nav is None:
        return

    if st.session_state.current_topic_id is None:
        st.session_state.current_topic_id = nav.get_first_topic_id()

    render_curriculum_tree(nav)


def render_topic_button(topic: Topic, current_id: str):
    label = topic.title[:40] + "..." if len(topic.title) > 40 else topic.title
    if st.sidebar.button(
        label,
        key=f"topic_{topic.id}",
        type="primary" if topic.id == current_id else "secondary",
        use_container_width=True,
    ):
        select_topic(topic.id)


def render_curriculum_tree(nav: Navigator):
    """Render the curriculum tree with topic navigation."""
    current_id = st.session_state.current_topic_id
    tree = nav.get_navigation_tree(current_id)

    st.sidebar.divider()

    if tree.objectives is not None:
        render_topic_button(tree.objectives, current_id)

    for nav_module in tree.modules:
        module = nav_module.module
        with st.sidebar.expander(f"**{module.title}**", expanded=nav_module.is_expanded):
            for topic in module.topics():
                label = topic.title[:40] + "..." if len(topic.title) > 40 else topic.title
                if st.button(
                    label,
                    key=f"topic_{topic.id}",
                    type="primary" if topic.id == current_id else "secondary",
                    use_container_width=True,
                ):
                    select_topic(topic.id)
            if not module.lessons:
                st.caption("Coming soon")

    for topic in (tree.evaluations, tree.bibliography):
        if topic is not None:
            render_topic_button(topic, current_id)


# -----------------------------------------------------------------------------
# Main Content: Topic View
# -----------------------------------------------------------------------------

def render_topic_view():
    """Render the main topic content."""
    language = st.session_state.language
    nav = st.session_state.navigators.get(language)

    if nav is None:
        error = st.session_state.load_errors.get(language)
        if error:
            st.error(f"The '{language}' curriculum could not be assembled.")
            st.markdown(get_topic_css(), unsafe_allow_html=True)
            st.markdown(render_unavailable(language, error), unsafe_allow_html=True)
        return

    topic_id = st.session_state.current_topic_id
    topic = nav.get_topic(topic_id) if topic_id else None
    if topic is None:
        st.info("Select a topic from the sidebar to begin.")
        return

    render_navigation_bar(nav, topic.id)

    st.markdown(get_topic_css(), unsafe_allow_html=True)
    st.markdown(get_quiz_css(), unsafe_allow_html=True)
    st.title(topic.title)

    # Blocks are rendered in order; quizzes are interactive widgets
    for index, block in enumerate(topic.blocks):
        if isinstance(block, QuizBlock):
            render_quiz_section(block_id(topic.id, index), block)
        else:
            st.markdown(render_block(block), unsafe_allow_html=True)


def render_navigation_bar(nav: Navigator, topic_id: str):
    """Render navigation bar with prev/next buttons."""
    pos, total = nav.get_topic_position(topic_id)

    prev_id = nav.get_previous_topic_id(topic_id)
    next_id = nav.get_next_topic_id(topic_id)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if prev_id:
            if st.button("← Previous", use_container_width=True):
                select_topic(prev_id)

    with col2:
        st.markdown(f"<center>Topic {pos} of {total}</center>", unsafe_allow_html=True)

    with col3:
        if next_id:
            if st.button("Next →", use_container_width=True):
                select_topic(next_id)

    st.divider()


# -----------------------------------------------------------------------------
# Quizzes
# -----------------------------------------------------------------------------

def get_quiz_session(quiz_id: str, quiz: QuizBlock) -> QuizSession:
    sessions = st.session_state.quiz_sessions
    if quiz_id not in sessions:
        sessions[quiz_id] = QuizSession(quiz, quiz_id=quiz_id)
    return sessions[quiz_id]


def render_quiz_section(quiz_id: str, quiz: QuizBlock):
    """Render one quiz block, one question at a time."""
    session = get_quiz_session(quiz_id, quiz)

    if session.completed:
        score = session.final_score()
        st.markdown(render_quiz_score(score), unsafe_allow_html=True)
        st.markdown(render_quiz_review(session, session.review()), unsafe_allow_html=True)
        if st.button("Retry quiz", key=f"{quiz_id}_retry"):
            st.session_state.quiz_sessions[quiz_id] = QuizSession(quiz, quiz_id=quiz_id)
            st.rerun()
        return

    question_index = session.current_question_index
    question = quiz.questions[question_index]

    # Revealed questions stay visible with their outcome
    for index in range(question_index):
        st.markdown(render_quiz_question(session, index), unsafe_allow_html=True)
    st.markdown(render_quiz_question(session, question_index), unsafe_allow_html=True)

    choice = st.radio(
        "Options",
        list(range(len(question.options))),
        format_func=lambda i: question.options[i],
        index=session.selection(question_index),
        key=f"{quiz_id}_{question_index}_choice",
        label_visibility="collapsed",
    )

    try:
        if choice is not None and choice != session.selection(question_index):
            session.select_option(question_index, choice)
        if st.button(
            "Check answer",
            key=f"{quiz_id}_{question_index}_reveal",
            disabled=session.state(question_index) != QuestionState.ANSWERED,
        ):
            session.reveal_answer(question_index)
            st.rerun()
    except QuizError as e:
        logger.debug(f"Ignored quiz action on {quiz_id}: {e}")

    running = session.get_score()
    st.caption(f"{running.correct} of {running.total} correct so far")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_topic_view()


if __name__ == "__main__":
    main()
