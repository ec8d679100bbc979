"""
Curriculum schemas for Cursus.

Defines Pydantic models for the per-language curriculum tree:
- Topic: ordered content blocks under a stable, deep-linkable id
- Module: an overview topic plus ordered lesson topics
- Curriculum: ordered modules plus named singleton topics

All models are frozen; build them through cursus.classroom.assembler so
that block validation and identifier uniqueness are enforced.
"""

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from .blocks import ContentBlock


TREE_CONFIG = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

# Topics that sit outside any module, in sidebar order
SINGLETON_ROLES = ("objectives", "evaluations", "bibliography")


class Topic(BaseModel):
    model_config = TREE_CONFIG

    id: str = Field(..., min_length=1)
    title: str
    blocks: tuple[ContentBlock, ...] = Field(default=(), alias="content")


class Module(BaseModel):
    """
    A curriculum unit. Lesson order is the pedagogical sequence and is
    kept exactly as authored.
    """
    model_config = TREE_CONFIG

    id: str = Field(..., min_length=1)
    title: str
    overview: Topic
    lessons: tuple[Topic, ...] = Field(default=(), alias="conferences")

    def topics(self) -> tuple[Topic, ...]:
        """Overview followed by the lessons."""
        return (self.overview, *self.lessons)


class Curriculum(BaseModel):
    model_config = TREE_CONFIG

    language: str = Field(..., pattern=r'^[a-z]{2}(-[A-Z]{2})?$')
    modules: tuple[Module, ...] = ()

    # Singleton topics
    objectives: Optional[Topic] = None
    evaluations: Optional[Topic] = None
    bibliography: Optional[Topic] = None

    def singleton(self, role: str) -> Optional[Topic]:
        if role not in SINGLETON_ROLES:
            raise ValueError(f"Unknown singleton topic role: {role}")
        return getattr(self, role)

    def iter_topics(self) -> Iterator[Topic]:
        """
        Yield every topic in navigation order: objectives, each module's
        overview and lessons, then evaluations and bibliography.
        """
        if self.objectives is not None:
            yield self.objectives
        for module in self.modules:
            yield from module.topics()
        for role in SINGLETON_ROLES[1:]:
            topic = getattr(self, role)
            if topic is not None:
                yield topic

    def get_module(self, module_id: str) -> Optional[Module]:
        for module in self.modules:
            if module.id == module_id:
                return module
        return None
