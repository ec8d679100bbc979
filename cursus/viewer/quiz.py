"""
Quiz renderer - Multiple-choice quiz display driven by a QuizSession.

Provides:
- Question rendering with selection and reveal state
- Score display
- Review list for completed sessions
"""

import html

from cursus.classroom import QuizSession
from cursus.schemas import QuestionOutcome, QuestionState, QuizScore


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .quiz-container {
        background: #e3f2fd;
        border-radius: 12px;
        padding: 1.5em;
        margin: 1.5em 0;
        border-left: 4px solid #1976D2;
    }
    .quiz-title {
        font-weight: 600;
        color: #1565C0;
        font-size: 1.1em;
        margin-bottom: 0.8em;
    }
    .quiz-question {
        font-size: 1.05em;
        color: #333;
        margin-bottom: 1em;
        line-height: 1.6;
    }
    .quiz-option {
        background: white;
        border: 2px solid #ddd;
        border-radius: 8px;
        padding: 0.6em 1em;
        margin: 0.4em 0;
    }
    .quiz-option-selected {
        border-color: #1976D2;
    }
    .quiz-option-correct {
        border-color: #388E3C;
        background: #e8f5e9;
    }
    .quiz-option-wrong {
        border-color: #d32f2f;
        background: #fdecea;
    }
    .quiz-score-box {
        background: #e8f5e9;
        border-radius: 8px;
        padding: 1em;
        margin-top: 1.5em;
        text-align: center;
    }
    .quiz-score-value {
        font-size: 2em;
        font-weight: 700;
        color: #388E3C;
    }
    .quiz-score-label {
        color: #666;
        font-size: 0.9em;
    }
    </style>
    """


def _option_class(session: QuizSession, question_index: int, option_index: int) -> str:
    classes = ["quiz-option"]
    selected = session.selection(question_index) == option_index

    if session.state(question_index) == QuestionState.REVEALED:
        correct_answer = session.quiz.questions[question_index].correct_answer
        if option_index == correct_answer:
            classes.append("quiz-option-correct")
        elif selected:
            classes.append("quiz-option-wrong")
    elif selected:
        classes.append("quiz-option-selected")

    return " ".join(classes)


def render_quiz_question(session: QuizSession, question_index: int) -> str:
    """
    Render a single question with its current state.

    Args:
        session: QuizSession holding selections
        question_index: Question to render

    Returns:
        HTML string for the question
    """
    question = session.quiz.questions[question_index]
    parts = ['<div class="quiz-container">']
    parts.append(
        f'<div class="quiz-title">Question {question_index + 1} of {session.total_questions}</div>'
    )
    parts.append(f'<div class="quiz-question">{html.escape(question.question)}</div>')

    for option_index, option in enumerate(question.options):
        css = _option_class(session, question_index, option_index)
        parts.append(f'<div class="{css}">{html.escape(option)}</div>')

    parts.append("</div>")
    return "".join(parts)


def render_quiz_score(score: QuizScore) -> str:
    """Render quiz score display."""
    return f"""
    <div class="quiz-score-box">
        <div class="quiz-score-value">{score.percent}%</div>
        <div class="quiz-score-label">{score.correct} of {score.total} correct</div>
    </div>
    """


def render_quiz_review(session: QuizSession, outcomes: list[QuestionOutcome]) -> str:
    """Render the per-question review of a completed session."""
    parts = ['<ol class="quiz-review">']
    for outcome in outcomes:
        question = session.quiz.questions[outcome.index]
        mark = "✓" if outcome.is_correct else "✗"
        parts.append(
            f"<li>{mark} {html.escape(question.question)}"
            f" <em>{html.escape(question.options[outcome.correct_answer])}</em></li>"
        )
    parts.append("</ol>")
    return "".join(parts)
