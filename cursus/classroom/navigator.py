"""
Navigator - Read-only traversal and sequencing over an assembled curriculum.

Provides:
- Flat topic order matching the sidebar (objectives, modules, evaluations,
  bibliography)
- Next/previous topic navigation and positions
- Parent module lookup
- Block and quiz traversal
- Sidebar tree
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from cursus.schemas import (
    ContentBlock,
    Curriculum,
    Module,
    QuizBlock,
    Topic,
    block_id,
)


@dataclass
class NavigationModule:
    """Module entry for sidebar display."""
    module: Module
    topic_ids: list[str]  # overview first
    is_expanded: bool  # contains the current topic


@dataclass
class NavigationTree:
    objectives: Optional[Topic]
    modules: list[NavigationModule]
    evaluations: Optional[Topic]
    bibliography: Optional[Topic]


def iter_blocks(topic: Topic) -> Iterator[tuple[int, ContentBlock]]:
    """Yield (index, block) for every block of a topic, in authored order."""
    yield from enumerate(topic.blocks)


class Navigator:
    """
    Navigate one curriculum. Holds no mutable state besides lookup tables
    built at construction, so one instance can serve many readers.
    """

    def __init__(self, curriculum: Curriculum):
        self.curriculum = curriculum
        self._topic_order: list[str] = []
        self._topics: dict[str, Topic] = {}
        self._parent: dict[str, Module] = {}

        for topic in curriculum.iter_topics():
            self._topic_order.append(topic.id)
            self._topics[topic.id] = topic
        for module in curriculum.modules:
            for topic in module.topics():
                self._parent[topic.id] = module

        self._topic_index = {tid: idx for idx, tid in enumerate(self._topic_order)}

    @property
    def language(self) -> str:
        return self.curriculum.language

    @property
    def topic_order(self) -> list[str]:
        return list(self._topic_order)

    @property
    def total_topics(self) -> int:
        return len(self._topic_order)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_topic(self, topic_id: str) -> Optional[Topic]:
        return self._topics.get(topic_id)

    def get_parent_module(self, topic_id: str) -> Optional[Module]:
        """Module owning a topic; None for singleton topics."""
        return self._parent.get(topic_id)

    def get_first_topic_id(self) -> Optional[str]:
        return self._topic_order[0] if self._topic_order else None

    # -------------------------------------------------------------------------
    # Sequencing
    # -------------------------------------------------------------------------

    def get_next_topic_id(self, current_id: str) -> Optional[str]:
        if current_id not in self._topic_index:
            return None
        idx = self._topic_index[current_id]
        if idx + 1 >= len(self._topic_order):
            return None
        return self._topic_order[idx + 1]

    def get_previous_topic_id(self, current_id: str) -> Optional[str]:
        if current_id not in self._topic_index:
            return None
        idx = self._topic_index[current_id]
        if idx <= 0:
            return None
        return self._topic_order[idx - 1]

    def get_topic_position(self, topic_id: str) -> tuple[int, int]:
        """
        Get topic position as (current, total), 1-based.

        Returns (0, total) if topic not found.
        """
        if topic_id not in self._topic_index:
            return (0, len(self._topic_order))
        return (self._topic_index[topic_id] + 1, len(self._topic_order))

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def iter_quizzes(self) -> Iterator[tuple[str, QuizBlock]]:
        """Yield (quiz id, quiz block) for every quiz, in navigation order."""
        for topic_id in self._topic_order:
            topic = self._topics[topic_id]
            for index, block in iter_blocks(topic):
                if isinstance(block, QuizBlock):
                    yield block_id(topic.id, index), block

    def get_navigation_tree(self, current_topic_id: Optional[str] = None) -> NavigationTree:
        """Sidebar structure; the module holding the current topic is expanded."""
        current_module = self.get_parent_module(current_topic_id) if current_topic_id else None
        return NavigationTree(
            objectives=self.curriculum.objectives,
            modules=[
                NavigationModule(
                    module=module,
                    topic_ids=[topic.id for topic in module.topics()],
                    is_expanded=current_module is not None and module.id == current_module.id,
                )
                for module in self.curriculum.modules
            ],
            evaluations=self.curriculum.evaluations,
            bibliography=self.curriculum.bibliography,
        )
