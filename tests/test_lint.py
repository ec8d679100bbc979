"""
Lint tests for Cursus.
"""

import logging

from cursus.classroom import (
    CurriculumLoader,
    LintWarning,
    assemble_topic,
    lint_curriculum,
    lint_topic,
)


class TestLintTopic:
    """Single-topic checks."""

    def test_clean_topic(self):
        topic = assemble_topic("conf-1", "Conf. 1", [
            {"type": "heading", "text": "Título", "id": "titulo"},
            {"type": "subtitle", "text": "Parte 1"},
            {"type": "subtitle", "text": "Parte 2"},
        ])
        assert lint_topic(topic, "modulo-1/conf-1") == []

    def test_empty_topic(self):
        topic = assemble_topic("conf-1", "Conf. 1", [])
        assert lint_topic(topic, "modulo-1/conf-1") == [
            LintWarning("empty-topic", "modulo-1/conf-1", "topic has no content blocks"),
        ]

    def test_duplicate_anchor(self):
        topic = assemble_topic("conf-1", "Conf. 1", [
            {"type": "subtitle", "text": "Exemplo"},
            {"type": "paragraph", "text": "..."},
            {"type": "subtitle", "text": "exemplo"},
        ])
        warnings = lint_topic(topic, "modulo-1/conf-1")
        assert [(w.code, w.path) for w in warnings] == [
            ("duplicate-anchor", "modulo-1/conf-1/blocks[2]"),
        ]

    def test_heading_without_id_has_no_anchor(self):
        topic = assemble_topic("conf-1", "Conf. 1", [
            {"type": "heading", "text": "Título"},
            {"type": "heading", "text": "Título"},
        ])
        assert lint_topic(topic, "conf-1") == []

    def test_blank_quiz_option(self):
        topic = assemble_topic("conf-2", "Conf. 2", [{
            "type": "quiz",
            "questions": [{"question": "Q", "options": ["a", "  "], "correctAnswer": 0}],
        }])
        warnings = lint_topic(topic, "modulo-1/conf-2")
        assert [(w.code, w.path) for w in warnings] == [
            ("empty-quiz-option", "modulo-1/conf-2/blocks[0]/questions[0]/options[1]"),
        ]

    def test_warning_str(self):
        warning = LintWarning("empty-module", "modulo-2", "module has no lessons")
        assert str(warning) == "[empty-module] modulo-2: module has no lessons"


class TestLintCurriculum:
    """Whole-tree checks."""

    def test_generated_curriculum_is_clean(self, pt_curriculum):
        assert lint_curriculum(pt_curriculum) == []

    def test_bundled_content(self, content_dir, caplog):
        curriculum = CurriculumLoader(content_dir, "pt").load_curriculum()
        with caplog.at_level(logging.WARNING):
            warnings = lint_curriculum(curriculum)
        assert [(w.code, w.path) for w in warnings] == [("empty-module", "modulo-2")]
        assert "empty-module" in caplog.text
