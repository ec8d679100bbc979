"""
Cursus Classroom - Runtime components for assembling and using curricula.

This module provides:
- Assembler: build topics, modules and curricula with validation
- Lint: non-blocking authoring checks
- QuizSession: quiz assessment state machine
- Consistency: cross-language structural checks
- CurriculumLoader: YAML content source
- Navigator: topic sequencing and traversal
"""

from .assembler import (
    assemble_topic,
    assemble_module,
    assemble_curriculum,
    topic_from_record,
    module_from_record,
    curriculum_from_record,
)

from .lint import (
    LintWarning,
    lint_topic,
    lint_curriculum,
)

from .quiz import QuizSession

from .consistency import (
    StructuralMismatch,
    compare_topics,
    check_consistency,
    assert_consistent,
)

from .loader import (
    CurriculumLoader,
    INDEX_FILENAME,
    available_languages,
    load_curricula,
    read_yaml,
)

from .navigator import (
    Navigator,
    NavigationModule,
    NavigationTree,
    iter_blocks,
)

__all__ = [
    # Assembler
    "assemble_topic",
    "assemble_module",
    "assemble_curriculum",
    "topic_from_record",
    "module_from_record",
    "curriculum_from_record",
    # Lint
    "LintWarning",
    "lint_topic",
    "lint_curriculum",
    # Quiz
    "QuizSession",
    # Consistency
    "StructuralMismatch",
    "compare_topics",
    "check_consistency",
    "assert_consistent",
    # Loader
    "CurriculumLoader",
    "INDEX_FILENAME",
    "available_languages",
    "load_curricula",
    "read_yaml",
    # Navigator
    "Navigator",
    "NavigationModule",
    "NavigationTree",
    "iter_blocks",
]
