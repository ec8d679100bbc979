"""
Error taxonomy for Cursus.

Assembly-time errors (CurriculumError) block publication of a curriculum.
Quiz-session errors (QuizError) are local to one action and never change
session state.
"""

from typing import Optional


class CurriculumError(Exception):
    """Base class for errors raised while validating or assembling content."""


class MalformedBlock(CurriculumError):
    """A block of a known kind is missing a field or has an invalid one."""

    def __init__(self, topic_id: str, index: int, field: str, reason: str):
        self.topic_id = topic_id
        self.index = index
        self.field = field
        self.reason = reason
        super().__init__(
            f"Malformed block at {topic_id}[{index}]: field '{field}': {reason}"
        )


class UnknownBlockKind(CurriculumError):
    """A block carries a kind tag outside the recognized variant set."""

    def __init__(self, topic_id: str, index: int, kind: str):
        self.topic_id = topic_id
        self.index = index
        self.kind = kind
        super().__init__(f"Unknown block kind '{kind}' at {topic_id}[{index}]")


class DuplicateIdentifier(CurriculumError):
    """A topic or module identifier is used twice in the same tree."""

    def __init__(self, identifier: str, first_location: str, second_location: str):
        self.identifier = identifier
        self.first_location = first_location
        self.second_location = second_location
        super().__init__(
            f"Duplicate identifier '{identifier}': "
            f"used by {first_location} and {second_location}"
        )


class MalformedNode(CurriculumError):
    """A topic, module or curriculum has an invalid field of its own."""

    def __init__(self, location: str, field: str, reason: str):
        self.location = location
        self.field = field
        self.reason = reason
        super().__init__(f"Malformed {location}: field '{field}': {reason}")


class ContentFileError(CurriculumError):
    """A content file could not be parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse content file {path}: {reason}")


class StructuralDivergence(CurriculumError):
    """Two language trees are not structurally isomorphic."""

    def __init__(self, mismatches: list):
        self.mismatches = list(mismatches)
        preview = "; ".join(str(m) for m in self.mismatches[:3])
        more = f" (+{len(self.mismatches) - 3} more)" if len(self.mismatches) > 3 else ""
        super().__init__(
            f"{len(self.mismatches)} structural mismatch(es): {preview}{more}"
        )


# -----------------------------------------------------------------------------
# Quiz session errors
# -----------------------------------------------------------------------------

class QuizError(Exception):
    """Base class for illegal quiz-session transitions."""


class QuestionAlreadyGraded(QuizError):
    def __init__(self, question_index: int):
        self.question_index = question_index
        super().__init__(f"Question {question_index} has already been revealed")


class NoSelection(QuizError):
    def __init__(self, question_index: int):
        self.question_index = question_index
        super().__init__(f"Question {question_index} has no selected option")


class InvalidSelection(QuizError):
    def __init__(self, question_index: int, option_index: Optional[int] = None):
        self.question_index = question_index
        self.option_index = option_index
        if option_index is None:
            message = f"No question at index {question_index}"
        else:
            message = f"Question {question_index} has no option {option_index}"
        super().__init__(message)


class QuizNotCompleted(QuizError):
    def __init__(self, revealed: int, total: int):
        self.revealed = revealed
        self.total = total
        super().__init__(f"Quiz not completed: {revealed} of {total} questions revealed")
