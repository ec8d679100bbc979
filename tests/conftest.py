"""Shared fixtures and record factories for the Cursus test suite."""

import pytest

from cursus.classroom import curriculum_from_record
from cursus.config import PROJECT_ROOT


LESSON_TEXT = {
    "pt": ("Lição", "Texto da lição", "Secção", "Mais texto"),
    "es": ("Lección", "Texto de la lección", "Sección", "Más texto"),
}


def _quiz_record(answers, n_options=4):
    return {
        "type": "quiz",
        "questions": [
            {
                "question": f"Question {i + 1}",
                "options": [f"Option {j}" for j in range(n_options)],
                "correctAnswer": answer,
            }
            for i, answer in enumerate(answers)
        ],
    }


def _topic_record(topic_id, title=None, content=None):
    return {
        "id": topic_id,
        "title": title or topic_id,
        "content": content if content is not None else [{"type": "paragraph", "text": f"{topic_id} text"}],
    }


def _lesson_record(lesson_id, language="pt"):
    """Lesson skeleton: heading, paragraph, subtitle, paragraph, code, quiz."""
    heading, body, section, more = LESSON_TEXT[language]
    return _topic_record(lesson_id, f"{heading} {lesson_id}", [
        {"type": "heading", "text": f"{heading} {lesson_id}"},
        {"type": "paragraph", "text": body},
        {"type": "subtitle", "text": section},
        {"type": "paragraph", "text": more},
        {"type": "code", "code": "npx expo start"},
        _quiz_record([0, 1]),
    ])


def _curriculum_record(language="pt", lesson_count=8):
    """Curriculum record with one module 'modulo-1' of `lesson_count` lessons."""
    return {
        "language": language,
        "objectives": _topic_record("objetivo-general"),
        "modules": [
            {
                "id": "modulo-1",
                "title": "Módulo 1",
                "overview": _topic_record("modulo-1-overview"),
                "conferences": [
                    _lesson_record(f"conf-{n}", language)
                    for n in range(1, lesson_count + 1)
                ],
            },
        ],
        "evaluations": _topic_record("evaluations"),
        "bibliography": _topic_record("bibliography"),
    }


@pytest.fixture
def make_quiz_record():
    return _quiz_record


@pytest.fixture
def make_topic_record():
    return _topic_record


@pytest.fixture
def make_lesson_record():
    return _lesson_record


@pytest.fixture
def make_curriculum_record():
    return _curriculum_record


@pytest.fixture
def pt_curriculum():
    return curriculum_from_record(_curriculum_record("pt"))


@pytest.fixture
def es_curriculum():
    return curriculum_from_record(_curriculum_record("es"))


@pytest.fixture
def content_dir():
    """Bundled sample content."""
    return PROJECT_ROOT / "content"
