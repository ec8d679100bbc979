"""
CurriculumLoader - Load per-language curricula from YAML content files.

Content layout:
    <content_dir>/<language>/curriculum.yaml   index (singletons + modules)
    <content_dir>/<language>/<topic>.yaml      one topic: {id, title, content}

Modules are loaded lazily, one at a time, and cached. Loading has no side
effects, so an unwanted load can simply be discarded.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from cursus.errors import ContentFileError, CurriculumError
from cursus.schemas import Curriculum, Module, SINGLETON_ROLES, Topic

from .assembler import assemble_curriculum, assemble_module, topic_from_record

logger = logging.getLogger(__name__)

INDEX_FILENAME = "curriculum.yaml"


def read_yaml(path: Path) -> Any:
    """
    Read one YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ContentFileError: If YAML parsing fails
    """
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ContentFileError(path, str(e)) from e


def available_languages(content_dir: str | Path) -> list[str]:
    """List language directories that contain a curriculum index."""
    content_dir = Path(content_dir)
    if not content_dir.exists():
        return []
    return sorted(
        p.name for p in content_dir.iterdir()
        if p.is_dir() and (p / INDEX_FILENAME).exists()
    )


class CurriculumLoader:
    """
    Load and assemble one language's curriculum.

    Not shared across threads; create one loader per language.
    """

    def __init__(self, content_dir: str | Path, language: str, *, skip_unknown: bool = False):
        """
        Args:
            content_dir: Root directory holding one subdirectory per language
            language: Language code, e.g. "pt"
            skip_unknown: Drop blocks with unknown kinds instead of failing
        """
        self.content_dir = Path(content_dir)
        self.language = language
        self.language_dir = self.content_dir / language
        self.skip_unknown = skip_unknown

        index_path = self.language_dir / INDEX_FILENAME
        if not index_path.exists():
            raise FileNotFoundError(f"Curriculum index not found: {index_path}")
        self._index_path = index_path
        self._index: Optional[dict] = None
        self._modules: dict[str, Module] = {}

    # -------------------------------------------------------------------------
    # Index
    # -------------------------------------------------------------------------

    def get_index(self) -> dict:
        if self._index is None:
            index = read_yaml(self._index_path)
            if not isinstance(index, Mapping):
                raise CurriculumError(f"Curriculum index must be a mapping: {self._index_path}")
            declared = index.get("language")
            if declared and declared != self.language:
                raise CurriculumError(
                    f"Index {self._index_path} declares language '{declared}', "
                    f"expected '{self.language}'"
                )
            self._index = dict(index)
        return self._index

    def _module_entries(self) -> list[Mapping]:
        entries = list(self.get_index().get("modules") or [])
        for position, entry in enumerate(entries):
            if not isinstance(entry, Mapping) or "id" not in entry:
                raise CurriculumError(
                    f"Module entry modules[{position}] in {self._index_path} must be a mapping with an 'id'"
                )
        return entries

    def get_module_ids(self) -> list[str]:
        """Module ids in display order (without loading any module)."""
        return [entry["id"] for entry in self._module_entries()]

    # -------------------------------------------------------------------------
    # Topics and modules
    # -------------------------------------------------------------------------

    def load_topic(self, source: str | Mapping) -> Topic:
        """
        Load a topic from a file path (relative to the language directory)
        or from an inline record.
        """
        if isinstance(source, Mapping):
            record = source
        else:
            record = read_yaml(self.language_dir / source)
        return topic_from_record(record, skip_unknown=self.skip_unknown)

    def load_module(self, module_id: str) -> Module:
        """Load one module on demand. Cached after the first load."""
        if module_id in self._modules:
            return self._modules[module_id]

        entry = next((e for e in self._module_entries() if e.get("id") == module_id), None)
        if entry is None:
            raise KeyError(f"Module not found in '{self.language}' curriculum: {module_id}")
        if "overview" not in entry:
            raise CurriculumError(f"Module '{module_id}' has no overview")

        module = assemble_module(
            module_id,
            entry.get("title", module_id),
            self.load_topic(entry["overview"]),
            [self.load_topic(source) for source in entry.get("lessons") or []],
        )
        logger.debug(f"Loaded module {self.language}/{module_id} ({len(module.lessons)} lessons)")
        self._modules[module_id] = module
        return module

    def load_singleton(self, role: str) -> Optional[Topic]:
        if role not in SINGLETON_ROLES:
            raise ValueError(f"Unknown singleton topic role: {role}")
        source = self.get_index().get(role)
        return self.load_topic(source) if source else None

    def load_curriculum(self) -> Curriculum:
        """Load every module and singleton and assemble the full tree."""
        modules = [self.load_module(module_id) for module_id in self.get_module_ids()]
        singletons = {}
        for role in SINGLETON_ROLES:
            topic = self.load_singleton(role)
            if topic is not None:
                singletons[role] = topic
        return assemble_curriculum(self.language, modules, singletons)


def load_curricula(
    content_dir: str | Path,
    languages: Optional[list[str]] = None,
    max_workers: int = 4,
    *,
    skip_unknown: bool = False,
    errors: Optional[dict[str, str]] = None,
) -> dict[str, Curriculum]:
    """
    Load several languages concurrently.

    Args:
        content_dir: Content root
        languages: Languages to load (default: all available)
        max_workers: Thread pool size
        errors: If given, a language that fails to load is recorded here
            (language -> message) and the others are still returned.

    Returns:
        Dict of language -> Curriculum in the requested order. Without
        `errors`, the first failure is re-raised.
    """
    languages = languages or available_languages(content_dir)

    def load_one(language: str) -> Curriculum:
        loader = CurriculumLoader(content_dir, language, skip_unknown=skip_unknown)
        return loader.load_curriculum()

    curricula = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(load_one, language): language for language in languages}
        for future in as_completed(futures):
            language = futures[future]
            try:
                curricula[language] = future.result()
            except (CurriculumError, FileNotFoundError) as e:
                if errors is None:
                    raise
                logger.error(f"[{language}] {e}")
                errors[language] = str(e)
                continue
            logger.info(f"Loaded '{language}' curriculum")

    return {language: curricula[language] for language in languages if language in curricula}
