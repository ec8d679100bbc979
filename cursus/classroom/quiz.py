"""
QuizSession - Per-learner state machine for one quiz block.

Each question moves UNANSWERED -> ANSWERED -> REVEALED:
- select_option records (or replaces) a selection until the question is revealed
- reveal_answer grades the selection against correct_answer
- the session is completed once every question is revealed

Sessions are owned by a single UI flow and discarded afterwards; retrying a
quiz means creating a new session. Illegal transitions raise a QuizError and
leave the session unchanged.
"""

from datetime import datetime
from typing import Optional

from cursus.errors import (
    InvalidSelection,
    NoSelection,
    QuestionAlreadyGraded,
    QuizNotCompleted,
)
from cursus.schemas import (
    Question,
    QuestionOutcome,
    QuestionState,
    QuizAttempt,
    QuizBlock,
    QuizScore,
)


def _is_index(value) -> bool:
    # bool is an int subclass; True must not select option 1
    return isinstance(value, int) and not isinstance(value, bool)


class QuizSession:
    """
    Track answers and scoring for one attempt at a quiz.

    Scoring is exact index equality with no partial credit; the order in
    which questions are answered does not affect the score.
    """

    def __init__(self, quiz: QuizBlock, quiz_id: Optional[str] = None):
        """
        Args:
            quiz: Validated quiz block
            quiz_id: Optional stable id of the block (see schemas.block_id)
        """
        self.quiz = quiz
        self.quiz_id = quiz_id
        self._selections: dict[int, int] = {}
        self._outcomes: dict[int, bool] = {}

    @property
    def total_questions(self) -> int:
        return len(self.quiz.questions)

    def _question(self, question_index: int) -> Question:
        if not _is_index(question_index) or not 0 <= question_index < self.total_questions:
            raise InvalidSelection(question_index)
        return self.quiz.questions[question_index]

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def state(self, question_index: int) -> QuestionState:
        self._question(question_index)
        if question_index in self._outcomes:
            return QuestionState.REVEALED
        if question_index in self._selections:
            return QuestionState.ANSWERED
        return QuestionState.UNANSWERED

    def selection(self, question_index: int) -> Optional[int]:
        """Selected option index, or None."""
        self._question(question_index)
        return self._selections.get(question_index)

    def is_correct(self, question_index: int) -> Optional[bool]:
        """Outcome of a revealed question, None until revealed."""
        self._question(question_index)
        return self._outcomes.get(question_index)

    @property
    def completed(self) -> bool:
        return len(self._outcomes) == self.total_questions

    @property
    def current_question_index(self) -> Optional[int]:
        """First question not yet revealed, in authored order."""
        for index in range(self.total_questions):
            if index not in self._outcomes:
                return index
        return None

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def select_option(self, question_index: int, option_index: int):
        """
        Record a selection for a question. Re-selecting before reveal
        replaces the previous choice.

        Raises:
            InvalidSelection: unknown question or option index
            QuestionAlreadyGraded: the question has been revealed
        """
        question = self._question(question_index)
        if question_index in self._outcomes:
            raise QuestionAlreadyGraded(question_index)
        if not _is_index(option_index) or not 0 <= option_index < len(question.options):
            raise InvalidSelection(question_index, option_index)
        self._selections[question_index] = option_index

    def reveal_answer(self, question_index: int) -> bool:
        """
        Grade the current selection and return whether it is correct.

        Revealing an already revealed question returns the recorded outcome.

        Raises:
            InvalidSelection: unknown question index
            NoSelection: nothing has been selected yet
        """
        question = self._question(question_index)
        if question_index in self._outcomes:
            return self._outcomes[question_index]
        if question_index not in self._selections:
            raise NoSelection(question_index)

        is_correct = self._selections[question_index] == question.correct_answer
        self._outcomes[question_index] = is_correct
        return is_correct

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def get_score(self) -> QuizScore:
        """Running score: correct revealed answers over all questions."""
        correct = sum(1 for ok in self._outcomes.values() if ok)
        return QuizScore(correct=correct, total=self.total_questions)

    def _require_completed(self):
        if not self.completed:
            raise QuizNotCompleted(len(self._outcomes), self.total_questions)

    def final_score(self) -> QuizScore:
        self._require_completed()
        return self.get_score()

    def review(self) -> list[QuestionOutcome]:
        """Per-question outcomes in authored order."""
        self._require_completed()
        return [
            QuestionOutcome(
                index=index,
                selected=self._selections[index],
                correct_answer=question.correct_answer,
                is_correct=self._outcomes[index],
            )
            for index, question in enumerate(self.quiz.questions)
        ]

    def to_attempt(self) -> QuizAttempt:
        """
        Snapshot of this session for the caller to persist.

        Unselected questions are recorded as None.
        """
        return QuizAttempt(
            quiz_id=self.quiz_id,
            score=self.get_score().percent,
            answers={
                index: self._selections.get(index)
                for index in range(self.total_questions)
            },
            completed=self.completed,
            created_at=datetime.now(),
        )
