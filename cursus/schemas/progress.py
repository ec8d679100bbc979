"""
Quiz progress schemas for Cursus.

Defines Pydantic models for quiz-session results:
- Per-question state
- Running/final score
- Per-question review outcome
- Attempt record handed to the caller for persistence
"""

from pydantic import BaseModel, computed_field
from typing import Optional
from datetime import datetime
from enum import Enum


class QuestionState(str, Enum):
    UNANSWERED = "unanswered"
    ANSWERED = "answered"
    REVEALED = "revealed"


class QuizScore(BaseModel):
    correct: int
    total: int

    @computed_field
    @property
    def fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct / self.total

    @computed_field
    @property
    def percent(self) -> int:
        """Whole percent, halves rounded up."""
        if self.total == 0:
            return 0
        return (200 * self.correct + self.total) // (2 * self.total)


class QuestionOutcome(BaseModel):
    index: int
    selected: int
    correct_answer: int
    is_correct: bool


class QuizAttempt(BaseModel):
    quiz_id: Optional[str] = None
    score: int  # percent
    answers: dict[int, Optional[int]]  # question index -> selected option
    completed: bool = False
    created_at: Optional[datetime] = None
