"""
Cursus Viewer - Rendering components for topic display.

This module provides:
- Topic rendering through the per-kind dispatch contract
- The "content unavailable" marker
- Quiz display driven by a QuizSession
"""

from .topic import (
    get_topic_css,
    render_inline,
    render_block,
    render_topic,
    render_unavailable,
    BLOCK_RENDERERS,
)

from .quiz import (
    get_quiz_css,
    render_quiz_question,
    render_quiz_score,
    render_quiz_review,
)

__all__ = [
    # Topic rendering
    "get_topic_css",
    "render_inline",
    "render_block",
    "render_topic",
    "render_unavailable",
    "BLOCK_RENDERERS",
    # Quiz
    "get_quiz_css",
    "render_quiz_question",
    "render_quiz_score",
    "render_quiz_review",
]
