"""
Consistency checker - Verify that two language trees share one skeleton.

Text may differ between languages; structure may not. Compared:
- singleton topics present in the same roles
- module ids and order
- lesson ids and order inside each module
- the ordered sequence of block kinds in every topic
- for quiz blocks: question count, option count and correct answer index

Sequences are aligned before comparison, so one block missing from a
translation is reported once, at its own path, instead of shifting every
block after it.
"""

import logging
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Iterator, Optional, Sequence

from cursus.errors import StructuralDivergence
from cursus.schemas import (
    Curriculum,
    QuizBlock,
    SINGLETON_ROLES,
    Topic,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuralMismatch:
    """One divergence. None on either side means the element is missing there."""
    path: str
    expected: Optional[str]
    actual: Optional[str]

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected!r}, got {self.actual!r}"


def _align(
    expected: Sequence[str],
    actual: Sequence[str],
) -> Iterator[tuple[Optional[int], Optional[int], bool]]:
    """
    Pair up positions of two sequences.

    Yields (expected_index, actual_index, equal); one index is None when the
    element exists on one side only.
    """
    matcher = SequenceMatcher(a=list(expected), b=list(actual), autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for offset in range(i2 - i1):
                yield i1 + offset, j1 + offset, True
        else:
            # replace / delete / insert: pair positionally, pad with None
            for offset in range(max(i2 - i1, j2 - j1)):
                i = i1 + offset if i1 + offset < i2 else None
                j = j1 + offset if j1 + offset < j2 else None
                yield i, j, False


def _element_mismatch(path, index_expected, index_actual, expected, actual, name):
    index = index_expected if index_expected is not None else index_actual
    return StructuralMismatch(
        f"{path}{name}[{index}]",
        expected[index_expected] if index_expected is not None else None,
        actual[index_actual] if index_actual is not None else None,
    )


def _compare_quiz(expected: QuizBlock, actual: QuizBlock, path: str) -> list[StructuralMismatch]:
    mismatches = []
    if len(expected.questions) != len(actual.questions):
        mismatches.append(StructuralMismatch(
            f"{path}/questions",
            str(len(expected.questions)),
            str(len(actual.questions)),
        ))

    for q_idx, (q_exp, q_act) in enumerate(zip(expected.questions, actual.questions)):
        q_path = f"{path}/questions[{q_idx}]"
        if len(q_exp.options) != len(q_act.options):
            mismatches.append(StructuralMismatch(
                f"{q_path}/options", str(len(q_exp.options)), str(len(q_act.options))
            ))
        if q_exp.correct_answer != q_act.correct_answer:
            mismatches.append(StructuralMismatch(
                f"{q_path}/correctAnswer", str(q_exp.correct_answer), str(q_act.correct_answer)
            ))
    return mismatches


def compare_topics(expected: Topic, actual: Topic, path: str) -> list[StructuralMismatch]:
    """Compare topic ids and block-kind skeletons."""
    mismatches = []
    if expected.id != actual.id:
        mismatches.append(StructuralMismatch(path, expected.id, actual.id))

    expected_kinds = [block.type for block in expected.blocks]
    actual_kinds = [block.type for block in actual.blocks]

    for i, j, equal in _align(expected_kinds, actual_kinds):
        if not equal:
            mismatches.append(
                _element_mismatch(f"{path}/", i, j, expected_kinds, actual_kinds, "blocks")
            )
            continue
        block_exp, block_act = expected.blocks[i], actual.blocks[j]
        if isinstance(block_exp, QuizBlock):
            mismatches.extend(_compare_quiz(block_exp, block_act, f"{path}/blocks[{i}]"))

    return mismatches


def check_consistency(reference: Curriculum, candidate: Curriculum) -> list[StructuralMismatch]:
    """
    Walk two curricula and report every structural divergence.

    Args:
        reference: Tree whose structure is taken as expected
        candidate: Translation being checked

    Returns:
        All mismatches (empty when the trees are isomorphic)
    """
    if reference.language == candidate.language:
        logger.warning(f"Comparing two '{reference.language}' curricula")

    mismatches: list[StructuralMismatch] = []

    for role in SINGLETON_ROLES:
        expected, actual = reference.singleton(role), candidate.singleton(role)
        if expected is None and actual is None:
            continue
        if expected is None or actual is None:
            mismatches.append(StructuralMismatch(
                role,
                expected.id if expected else None,
                actual.id if actual else None,
            ))
            continue
        mismatches.extend(compare_topics(expected, actual, role))

    expected_ids = [m.id for m in reference.modules]
    actual_ids = [m.id for m in candidate.modules]

    for i, j, equal in _align(expected_ids, actual_ids):
        if not equal:
            mismatches.append(_element_mismatch("", i, j, expected_ids, actual_ids, "modules"))
            continue

        module_exp = reference.modules[i]
        module_act = candidate.get_module(module_exp.id)
        mismatches.extend(compare_topics(
            module_exp.overview,
            module_act.overview,
            f"{module_exp.id}/{module_exp.overview.id}",
        ))

        lessons_exp = [lesson.id for lesson in module_exp.lessons]
        lessons_act = [lesson.id for lesson in module_act.lessons]
        for li, lj, lesson_equal in _align(lessons_exp, lessons_act):
            if not lesson_equal:
                mismatches.append(_element_mismatch(
                    f"{module_exp.id}/", li, lj, lessons_exp, lessons_act, "lessons"
                ))
                continue
            lesson = module_exp.lessons[li]
            mismatches.extend(compare_topics(
                lesson, module_act.lessons[lj], f"{module_exp.id}/{lesson.id}"
            ))

    logger.info(
        f"Consistency {reference.language} -> {candidate.language}: "
        f"{len(mismatches)} mismatch(es)"
    )
    return mismatches


def assert_consistent(reference: Curriculum, candidate: Curriculum):
    """Raise StructuralDivergence carrying every mismatch, if any."""
    mismatches = check_consistency(reference, candidate)
    if mismatches:
        raise StructuralDivergence(mismatches)
