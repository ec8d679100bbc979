"""
Cursus Schemas - Pydantic models for multi-language curriculum content.

This module exports all schema classes for:
- Blocks: the content block variant set, validator and dispatch contract
- Curriculum: topics, modules and per-language curricula
- Progress: quiz scores, outcomes and attempt records
"""

# Block schemas
from .blocks import (
    BlockKind,
    HeadingBlock,
    SubtitleBlock,
    ParagraphBlock,
    DividerBlock,
    ImageBlock,
    CodeBlock,
    AlertType,
    CalloutBlock,
    AlertBlock,
    ListItem,
    ListBlock,
    Column,
    TwoColumnBlock,
    FeatureItem,
    FeatureCardBlock,
    ComponentGridItem,
    ComponentGridBlock,
    FileItem,
    FileStructureBlock,
    Question,
    QuizBlock,
    AssignmentBlock,
    EvaluationCard,
    EvaluationCardsBlock,
    BibliographyCard,
    BibliographyCardsBlock,
    ContentBlock,
    BLOCK_MODELS,
    anchor_slug,
    block_id,
    validate_block,
    block_kind,
    dispatch_block,
)

# Curriculum schemas
from .curriculum import (
    Topic,
    Module,
    Curriculum,
    SINGLETON_ROLES,
)

# Progress schemas
from .progress import (
    QuestionState,
    QuizScore,
    QuestionOutcome,
    QuizAttempt,
)

__all__ = [
    # Blocks
    'BlockKind',
    'HeadingBlock',
    'SubtitleBlock',
    'ParagraphBlock',
    'DividerBlock',
    'ImageBlock',
    'CodeBlock',
    'AlertType',
    'CalloutBlock',
    'AlertBlock',
    'ListItem',
    'ListBlock',
    'Column',
    'TwoColumnBlock',
    'FeatureItem',
    'FeatureCardBlock',
    'ComponentGridItem',
    'ComponentGridBlock',
    'FileItem',
    'FileStructureBlock',
    'Question',
    'QuizBlock',
    'AssignmentBlock',
    'EvaluationCard',
    'EvaluationCardsBlock',
    'BibliographyCard',
    'BibliographyCardsBlock',
    'ContentBlock',
    'BLOCK_MODELS',
    'anchor_slug',
    'block_id',
    'validate_block',
    'block_kind',
    'dispatch_block',
    # Curriculum
    'Topic',
    'Module',
    'Curriculum',
    'SINGLETON_ROLES',
    # Progress
    'QuestionState',
    'QuizScore',
    'QuestionOutcome',
    'QuizAttempt',
]
