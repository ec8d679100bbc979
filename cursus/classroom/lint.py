"""
Lint - Non-blocking authoring checks over an assembled curriculum.

Warnings never stop publication; they flag work-in-progress content:
- empty-topic: topic with no blocks
- empty-module: module with no lessons yet
- duplicate-anchor: two headings in a topic resolve to the same anchor
- empty-quiz-option: blank option text in a quiz question
"""

import logging
from dataclasses import dataclass

from cursus.schemas import (
    Curriculum,
    HeadingBlock,
    QuizBlock,
    SubtitleBlock,
    Topic,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintWarning:
    code: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.path}: {self.message}"


def lint_topic(topic: Topic, path: str) -> list[LintWarning]:
    """Lint a single topic. `path` prefixes reported locations."""
    warnings = []

    if not topic.blocks:
        warnings.append(LintWarning("empty-topic", path, "topic has no content blocks"))

    anchors: dict[str, int] = {}
    for index, block in enumerate(topic.blocks):
        if isinstance(block, (HeadingBlock, SubtitleBlock)):
            anchor = block.anchor
            if not anchor:
                continue
            if anchor in anchors:
                warnings.append(LintWarning(
                    "duplicate-anchor",
                    f"{path}/blocks[{index}]",
                    f"anchor '{anchor}' already used by blocks[{anchors[anchor]}]",
                ))
            else:
                anchors[anchor] = index

        elif isinstance(block, QuizBlock):
            for q_idx, question in enumerate(block.questions):
                for o_idx, option in enumerate(question.options):
                    if not option.strip():
                        warnings.append(LintWarning(
                            "empty-quiz-option",
                            f"{path}/blocks[{index}]/questions[{q_idx}]/options[{o_idx}]",
                            "option text is blank",
                        ))

    return warnings


def lint_curriculum(curriculum: Curriculum) -> list[LintWarning]:
    """
    Run all lint checks. Each warning is also logged at WARNING level.

    Returns:
        Warnings in navigation order
    """
    warnings = []

    if curriculum.objectives is not None:
        warnings.extend(lint_topic(curriculum.objectives, "objectives"))

    for module in curriculum.modules:
        if not module.lessons:
            warnings.append(LintWarning("empty-module", module.id, "module has no lessons"))
        warnings.extend(lint_topic(module.overview, f"{module.id}/{module.overview.id}"))
        for lesson in module.lessons:
            warnings.extend(lint_topic(lesson, f"{module.id}/{lesson.id}"))

    for role in ("evaluations", "bibliography"):
        topic = getattr(curriculum, role)
        if topic is not None:
            warnings.extend(lint_topic(topic, role))

    for warning in warnings:
        logger.warning(f"{curriculum.language}: {warning}")
    return warnings
