"""
Assembler - Build immutable topics, modules and curricula from raw records.

Provides:
- assemble_topic: validate every block, fail fast on the first bad one
- assemble_module: lesson ids unique within the module, order preserved
- assemble_curriculum: topic ids unique across the whole language tree
- *_from_record helpers for nested records in the content-source shape
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ValidationError

from cursus.errors import (
    CurriculumError,
    DuplicateIdentifier,
    MalformedNode,
    UnknownBlockKind,
)
from cursus.schemas import (
    Curriculum,
    Module,
    SINGLETON_ROLES,
    Topic,
    validate_block,
)

logger = logging.getLogger(__name__)


def _build(model: type[BaseModel], location: str, **fields) -> Any:
    """Construct a tree node, reporting invalid fields as MalformedNode."""
    try:
        return model(**fields)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or model.__name__
        raise MalformedNode(location, field, error["msg"]) from e


# -----------------------------------------------------------------------------
# Assemblers
# -----------------------------------------------------------------------------

def assemble_topic(
    topic_id: str,
    title: str,
    blocks: Iterable[Any],
    *,
    skip_unknown: bool = False,
) -> Topic:
    """
    Validate blocks in order and build a Topic.

    Args:
        topic_id: Stable topic id (also its deep-link anchor)
        title: Display title
        blocks: Raw block records (or block models)
        skip_unknown: Drop blocks with unknown kind tags instead of failing.
            Malformed blocks of known kinds still fail.

    Raises:
        MalformedBlock / UnknownBlockKind for the first invalid block
    """
    validated = []
    for index, raw in enumerate(blocks):
        try:
            validated.append(validate_block(raw, topic_id, index))
        except UnknownBlockKind as e:
            if not skip_unknown:
                raise
            logger.warning(f"Skipping block: {e}")

    return _build(Topic, f"topic {topic_id!r}", id=topic_id, title=title, blocks=tuple(validated))


def assemble_module(
    module_id: str,
    title: str,
    overview: Topic,
    lessons: Iterable[Topic],
) -> Module:
    """
    Build a Module. Lessons keep the supplied order; an empty lesson list
    is allowed (module not yet published).

    Raises:
        DuplicateIdentifier if two topics of the module share an id
    """
    lessons = tuple(lessons)
    seen = {overview.id: f"{module_id}/overview"}
    for position, lesson in enumerate(lessons):
        location = f"{module_id}/lessons[{position}]"
        if lesson.id in seen:
            raise DuplicateIdentifier(lesson.id, seen[lesson.id], location)
        seen[lesson.id] = location

    return _build(
        Module, f"module {module_id!r}",
        id=module_id, title=title, overview=overview, lessons=lessons,
    )


def assemble_curriculum(
    language: str,
    modules: Iterable[Module],
    singleton_topics: Optional[Mapping[str, Topic]] = None,
) -> Curriculum:
    """
    Build a per-language Curriculum.

    Topic ids must be unique across every overview, lesson and singleton
    topic; module ids must be unique among modules.

    Args:
        language: Language code of this tree (e.g. "pt", "es")
        modules: Modules in display order
        singleton_topics: Mapping of role ("objectives", "evaluations",
            "bibliography") to topic

    Raises:
        DuplicateIdentifier on any id collision
        ValueError on an unknown singleton role
    """
    modules = tuple(modules)
    singletons = dict(singleton_topics or {})
    unknown = sorted(set(singletons) - set(SINGLETON_ROLES))
    if unknown:
        raise ValueError(f"Unknown singleton topic role(s): {', '.join(unknown)}")

    topic_locations: dict[str, str] = {}

    def claim(topic: Topic, location: str):
        if topic.id in topic_locations:
            raise DuplicateIdentifier(topic.id, topic_locations[topic.id], location)
        topic_locations[topic.id] = location

    # Claim in navigation order so the earlier location is reported first
    if singletons.get("objectives") is not None:
        claim(singletons["objectives"], "objectives")

    module_locations: dict[str, str] = {}
    for position, module in enumerate(modules):
        location = f"modules[{position}]"
        if module.id in module_locations:
            raise DuplicateIdentifier(module.id, module_locations[module.id], location)
        module_locations[module.id] = location

        claim(module.overview, f"{module.id}/overview")
        for lesson_position, lesson in enumerate(module.lessons):
            claim(lesson, f"{module.id}/lessons[{lesson_position}]")

    for role in SINGLETON_ROLES[1:]:
        if singletons.get(role) is not None:
            claim(singletons[role], role)

    curriculum = _build(
        Curriculum, f"{language!r} curriculum",
        language=language, modules=modules, **singletons,
    )
    logger.info(
        f"Assembled '{language}' curriculum: {len(modules)} modules, "
        f"{len(topic_locations)} topics"
    )
    return curriculum


# -----------------------------------------------------------------------------
# Record helpers
# -----------------------------------------------------------------------------

def _require(record: Mapping, keys: tuple[str, ...], what: str):
    if not isinstance(record, Mapping):
        raise CurriculumError(f"{what} record must be a mapping, got {type(record).__name__}")
    for key in keys:
        if key not in record:
            raise CurriculumError(f"{what} record missing '{key}'")


def topic_from_record(record: Mapping, *, skip_unknown: bool = False) -> Topic:
    """Assemble a topic from {id, title, content}."""
    _require(record, ("id", "title"), "Topic")
    return assemble_topic(
        record["id"],
        record["title"],
        record.get("content") or [],
        skip_unknown=skip_unknown,
    )


def module_from_record(record: Mapping, *, skip_unknown: bool = False) -> Module:
    """Assemble a module from {id, title, overview, conferences | lessons}."""
    _require(record, ("id", "title", "overview"), "Module")
    lesson_records = record.get("conferences", record.get("lessons")) or []
    return assemble_module(
        record["id"],
        record["title"],
        topic_from_record(record["overview"], skip_unknown=skip_unknown),
        [topic_from_record(r, skip_unknown=skip_unknown) for r in lesson_records],
    )


def curriculum_from_record(
    record: Mapping,
    language: Optional[str] = None,
    *,
    skip_unknown: bool = False,
) -> Curriculum:
    """
    Assemble a curriculum from
    {language, objectives, modules, evaluations, bibliography}.

    An explicit `language` argument overrides the record's.
    """
    _require(record, ("modules",), "Curriculum")
    language = language or record.get("language")
    if not language:
        raise CurriculumError("Curriculum record has no language")

    modules = [module_from_record(r, skip_unknown=skip_unknown) for r in record["modules"]]
    singletons = {
        role: topic_from_record(record[role], skip_unknown=skip_unknown)
        for role in SINGLETON_ROLES
        if record.get(role)
    }
    return assemble_curriculum(language, modules, singletons)
