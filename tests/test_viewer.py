"""
Viewer tests for Cursus.
"""

from cursus.classroom import QuizSession, assemble_topic
from cursus.schemas import BlockKind, QuizScore, validate_block
from cursus.viewer import (
    BLOCK_RENDERERS,
    render_block,
    render_inline,
    render_quiz_question,
    render_quiz_review,
    render_quiz_score,
    render_topic,
    render_unavailable,
)


class TestBlockRendering:
    """Per-kind renderers."""

    def test_every_kind_has_a_renderer(self):
        assert set(BLOCK_RENDERERS) == set(BlockKind)

    def test_text_is_escaped(self):
        block = validate_block({"type": "paragraph", "text": "<div> → <View>"}, "conf-1", 0)
        assert render_block(block) == "<p>&lt;div&gt; → &lt;View&gt;</p>"

    def test_subtitle_anchor(self):
        block = validate_block({"type": "subtitle", "text": "Parte 1: Expo"}, "conf-1", 0)
        assert 'id="parte-1-expo"' in render_block(block)

    def test_code_language(self):
        block = validate_block({"type": "code", "code": "ls -la"}, "conf-1", 0)
        assert 'class="language-bash"' in render_block(block)

    def test_alert_rendered_like_callout(self):
        alert = validate_block({"type": "alert", "alertType": "warning", "text": "x"}, "conf-1", 0)
        assert 'class="callout callout-warning"' in render_block(alert)

    def test_bold_segments(self):
        assert render_inline("Use **Node.js** LTS") == "Use <strong>Node.js</strong> LTS"
        assert render_inline("<b>") == "&lt;b&gt;"

    def test_quiz_not_rendered_inline(self):
        block = validate_block({
            "type": "quiz",
            "questions": [{"question": "Q", "options": ["a", "b"], "correctAnswer": 0}],
        }, "conf-2", 0)
        assert render_block(block) == ""


class TestTopicRendering:
    """Whole topics and the unavailable marker."""

    def test_render_topic(self):
        topic = assemble_topic("conf-1", "Conf. 1", [
            {"type": "heading", "text": "Título"},
            {"type": "divider"},
            {"type": "paragraph", "text": "Texto"},
        ])
        html = render_topic(topic)
        assert html.startswith('<article class="topic-article">')
        assert html.index("<h1>Título</h1>") < html.index("<hr>") < html.index("<p>Texto</p>")

    def test_unavailable_marker(self):
        html = render_unavailable("conf-3", "Unknown block kind 'video' at conf-3[4]")
        assert "Content unavailable" in html
        assert 'data-topic="conf-3"' in html
        assert "&#x27;video&#x27;" in html


class TestQuizRendering:
    """Quiz display driven by a session."""

    def _session(self):
        quiz = validate_block({
            "type": "quiz",
            "questions": [
                {"question": "Qual?", "options": ["a", "b", "c"], "correctAnswer": 1},
                {"question": "Outra?", "options": ["x", "y"], "correctAnswer": 0},
            ],
        }, "conf-2", 6)
        return QuizSession(quiz, quiz_id="conf-2-6")

    def test_selected_option(self):
        session = self._session()
        session.select_option(0, 2)
        html = render_quiz_question(session, 0)
        assert "Question 1 of 2" in html
        assert html.count("quiz-option-selected") == 1

    def test_revealed_wrong_answer(self):
        session = self._session()
        session.select_option(0, 2)
        session.reveal_answer(0)
        html = render_quiz_question(session, 0)
        assert html.count("quiz-option-correct") == 1
        assert html.count("quiz-option-wrong") == 1

    def test_score_and_review(self):
        session = self._session()
        for index, choice in enumerate([1, 1]):
            session.select_option(index, choice)
            session.reveal_answer(index)
        assert "50%" in render_quiz_score(session.final_score())
        review = render_quiz_review(session, session.review())
        assert review.count("<li>") == 2

    def test_score_counts(self):
        html = render_quiz_score(QuizScore(correct=3, total=4))
        assert "75%" in html
        assert "3 of 4 correct" in html
