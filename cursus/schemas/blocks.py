"""
Content block schemas for Cursus.

Defines the closed set of content block kinds as flat Pydantic models
discriminated by their `type` tag, plus:
- the kind registry used by the validator
- validate_block: raw record -> typed block, with positional errors
- block_kind / dispatch_block: the renderer contract

Field names are snake_case; the camelCase names used by the content
source (imageUrl, alertType, correctAnswer, ...) are accepted as aliases.
"""

import re
from enum import Enum
from typing import Annotated, Any, Callable, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from cursus.errors import MalformedBlock, UnknownBlockKind


BLOCK_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
    frozen=True,
)


class BlockKind(str, Enum):
    HEADING = "heading"
    SUBTITLE = "subtitle"
    PARAGRAPH = "paragraph"
    DIVIDER = "divider"
    IMAGE = "image"
    CODE = "code"
    CALLOUT = "callout"
    ALERT = "alert"
    LIST = "list"
    TWO_COLUMN = "twoColumn"
    FEATURE_CARD = "featureCard"
    COMPONENT_GRID = "componentGrid"
    FILE_STRUCTURE = "fileStructure"
    QUIZ = "quiz"
    ASSIGNMENT = "assignment"
    EVALUATION_CARDS = "evaluationCards"
    BIBLIOGRAPHY_CARDS = "bibliographyCards"


def anchor_slug(text: str) -> str:
    """Deep-link slug for a heading: lowercase, tags stripped, [a-z0-9-] only."""
    slug = text.lower()
    slug = re.sub(r"<[^>]*>?", "", slug)
    slug = re.sub(r"[^a-z0-9 -]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


def block_id(topic_id: str, index: int) -> str:
    """Stable id of the block at `index` in a topic (quiz and assignment keys)."""
    return f"{topic_id}-{index}"


# -----------------------------------------------------------------------------
# Text blocks
# -----------------------------------------------------------------------------

class HeadingBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["heading"] = "heading"
    text: str
    id: Optional[str] = None

    @property
    def anchor(self) -> Optional[str]:
        return self.id


class SubtitleBlock(BaseModel):
    """Section title inside a topic; always addressable by its anchor."""
    model_config = BLOCK_CONFIG

    type: Literal["subtitle"] = "subtitle"
    text: str
    id: Optional[str] = None

    @property
    def anchor(self) -> str:
        return self.id or anchor_slug(self.text)


class ParagraphBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["paragraph"] = "paragraph"
    text: str
    id: Optional[str] = None


class DividerBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["divider"] = "divider"


class ImageBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["image"] = "image"
    image_url: str = Field(..., min_length=1)  # URL or asset path
    caption: Optional[str] = None


class CodeBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["code"] = "code"
    code: str
    language: str = "bash"  # highlighting tag


AlertType = Literal["info", "warning", "tip"]


class CalloutBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["callout"] = "callout"
    text: str
    alert_type: AlertType = "info"


class AlertBlock(BaseModel):
    """Same payload as a callout, kept as its own kind tag."""
    model_config = BLOCK_CONFIG

    type: Literal["alert"] = "alert"
    text: str
    alert_type: AlertType = "info"


# -----------------------------------------------------------------------------
# Structured blocks
# -----------------------------------------------------------------------------

class ListItem(BaseModel):
    model_config = BLOCK_CONFIG

    text: str
    sub_items: tuple[str, ...] = ()  # one level only


class ListBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["list"] = "list"
    items: tuple[Union[str, ListItem], ...]


class Column(BaseModel):
    model_config = BLOCK_CONFIG

    title: str
    content: tuple[str, ...]


class TwoColumnBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["twoColumn"] = "twoColumn"
    columns: tuple[Column, Column]


class FeatureItem(BaseModel):
    model_config = BLOCK_CONFIG

    icon: str
    title: str
    text: str


class FeatureCardBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["featureCard"] = "featureCard"
    feature_items: tuple[FeatureItem, ...]


class ComponentGridItem(BaseModel):
    model_config = BLOCK_CONFIG

    id: str
    title: str
    icon: str


class ComponentGridBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["componentGrid"] = "componentGrid"
    component_grid_items: tuple[ComponentGridItem, ...]


class FileItem(BaseModel):
    model_config = BLOCK_CONFIG

    id: str
    name: str
    description: tuple[str, ...] = ()


class FileStructureBlock(BaseModel):
    """
    Flat list of file entries, each with its own description lines.
    No nesting is implied by the order or the names.
    """
    model_config = BLOCK_CONFIG

    type: Literal["fileStructure"] = "fileStructure"
    files: tuple[FileItem, ...]


# -----------------------------------------------------------------------------
# Assessment blocks
# -----------------------------------------------------------------------------

class Question(BaseModel):
    """
    Multiple-choice question.
    correct_answer is a 0-based index into options and must be in range.
    """
    model_config = BLOCK_CONFIG

    question: str
    options: tuple[str, ...] = Field(..., min_length=2)
    correct_answer: int = Field(..., ge=0, strict=True)

    @field_validator("correct_answer")
    @classmethod
    def answer_in_range(cls, v: int, info: ValidationInfo) -> int:
        options = info.data.get("options")
        if options is not None and v >= len(options):
            raise ValueError(
                f"correctAnswer {v} out of range for {len(options)} options"
            )
        return v


class QuizBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["quiz"] = "quiz"
    questions: tuple[Question, ...] = Field(..., min_length=1)


class AssignmentBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["assignment"] = "assignment"
    assignment_id: Optional[str] = None  # filled from the block position when absent
    description: tuple[str, ...] = ()
    code: Optional[str] = None  # starter code


class EvaluationCard(BaseModel):
    model_config = BLOCK_CONFIG

    lang: str  # language the evaluation document is written in
    title: str
    description: str
    button_text: str
    url: str


class EvaluationCardsBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["evaluationCards"] = "evaluationCards"
    evaluation_cards: tuple[EvaluationCard, ...]


class BibliographyCard(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["pdf", "link"]
    title: str
    description: str
    button_text: str
    url: str


class BibliographyCardsBlock(BaseModel):
    model_config = BLOCK_CONFIG

    type: Literal["bibliographyCards"] = "bibliographyCards"
    bibliography_cards: tuple[BibliographyCard, ...]


ContentBlock = Annotated[
    Union[
        HeadingBlock,
        SubtitleBlock,
        ParagraphBlock,
        DividerBlock,
        ImageBlock,
        CodeBlock,
        CalloutBlock,
        AlertBlock,
        ListBlock,
        TwoColumnBlock,
        FeatureCardBlock,
        ComponentGridBlock,
        FileStructureBlock,
        QuizBlock,
        AssignmentBlock,
        EvaluationCardsBlock,
        BibliographyCardsBlock,
    ],
    Field(discriminator="type"),
]


BLOCK_MODELS: dict[BlockKind, type[BaseModel]] = {
    BlockKind.HEADING: HeadingBlock,
    BlockKind.SUBTITLE: SubtitleBlock,
    BlockKind.PARAGRAPH: ParagraphBlock,
    BlockKind.DIVIDER: DividerBlock,
    BlockKind.IMAGE: ImageBlock,
    BlockKind.CODE: CodeBlock,
    BlockKind.CALLOUT: CalloutBlock,
    BlockKind.ALERT: AlertBlock,
    BlockKind.LIST: ListBlock,
    BlockKind.TWO_COLUMN: TwoColumnBlock,
    BlockKind.FEATURE_CARD: FeatureCardBlock,
    BlockKind.COMPONENT_GRID: ComponentGridBlock,
    BlockKind.FILE_STRUCTURE: FileStructureBlock,
    BlockKind.QUIZ: QuizBlock,
    BlockKind.ASSIGNMENT: AssignmentBlock,
    BlockKind.EVALUATION_CARDS: EvaluationCardsBlock,
    BlockKind.BIBLIOGRAPHY_CARDS: BibliographyCardsBlock,
}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

def _error_field(error: dict) -> str:
    return ".".join(str(part) for part in error["loc"]) or "type"


def validate_block(raw: Any, topic_id: str, index: int) -> ContentBlock:
    """
    Validate one raw block record and return its typed model.

    Args:
        raw: Mapping with a `type` tag (an existing block model is re-checked)
        topic_id: Owning topic, used in error positions
        index: Position of the block inside the topic

    Raises:
        UnknownBlockKind: the tag is not in the variant set
        MalformedBlock: the tag is known but the payload is invalid
    """
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=True, exclude_none=True)
    if not isinstance(raw, Mapping):
        raise MalformedBlock(
            topic_id, index, "type", f"expected a mapping, got {type(raw).__name__}"
        )

    kind = raw.get("type")
    if not isinstance(kind, str):
        raise MalformedBlock(topic_id, index, "type", "missing or non-string kind tag")

    try:
        model = BLOCK_MODELS[BlockKind(kind)]
    except ValueError:
        raise UnknownBlockKind(topic_id, index, kind) from None

    try:
        block = model.model_validate(raw)
    except ValidationError as e:
        error = e.errors()[0]
        raise MalformedBlock(topic_id, index, _error_field(error), error["msg"]) from e

    if isinstance(block, AssignmentBlock) and block.assignment_id is None:
        block = block.model_copy(update={"assignment_id": block_id(topic_id, index)})
    return block


# -----------------------------------------------------------------------------
# Renderer contract
# -----------------------------------------------------------------------------

def block_kind(block: ContentBlock) -> BlockKind:
    """Kind tag of an assembled block."""
    return BlockKind(block.type)


def dispatch_block(
    block: ContentBlock,
    handlers: Mapping[BlockKind, Callable[[Any], Any]],
    default: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """
    Call the handler registered for the block's kind with the typed block.

    Raises KeyError when the kind has no handler and no default is given.
    """
    kind = block_kind(block)
    handler = handlers.get(kind, default)
    if handler is None:
        raise KeyError(f"No handler for block kind '{kind.value}'")
    return handler(block)
