"""Document sources and metadata providers for a governance corpus."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Protocol, Tuple

from .config import CorpusConfig
from .constants import DOCUMENT_SUFFIX
from .logging import get_logger
from .models import Category, StructuralPresence


class CorpusError(RuntimeError):
    """Raised when a corpus directory or document cannot be read."""


class DocumentSource(Protocol):
    """Yields ``(document_id, raw_text)`` pairs for one category."""

    def iter_documents(self, category: Category) -> Iterable[Tuple[str, str]]:
        """Return documents of ``category`` in a stable order."""


class MetadataProvider(Protocol):
    """Supplies filesystem facts the analyzer needs but must not fetch itself."""

    def last_modified(self, document_id: str) -> datetime:
        """Return the aware last-modified timestamp for ``document_id``."""


class StructuralPresenceChecker(Protocol):
    """Reports whether the mandated corpus documents exist."""

    def check(self) -> StructuralPresence:
        """Return presence flags for the corpus as a whole."""


class FileSystemCorpus:
    """Reads rule and workflow markdown files from a corpus directory.

    Implements :class:`DocumentSource`, :class:`MetadataProvider` and
    :class:`StructuralPresenceChecker`. Only ``*.md`` files directly inside each
    category directory are considered. Document identifiers are POSIX paths
    relative to the corpus root, e.g. ``Rules/security.md``.
    """

    def __init__(self, root: Path, config: CorpusConfig | None = None) -> None:
        self.root = Path(root).expanduser().resolve()
        self.config = config or CorpusConfig()
        self.logger = get_logger("sources")
        self._directories: Dict[Category, Path] = {
            Category.RULE: self.root / self.config.rules_dir,
            Category.WORKFLOW: self.root / self.config.workflows_dir,
        }

    def directory(self, category: Category) -> Path:
        return self._directories[category]

    def iter_documents(self, category: Category) -> Iterable[Tuple[str, str]]:
        documents: List[Tuple[str, str]] = []
        for path in self._list_documents(category):
            documents.append((self._document_id(path), self._read(path)))
        self.logger.debug("Read %d %s documents", len(documents), category.value)
        return documents

    def last_modified(self, document_id: str) -> datetime:
        path = self.root / document_id
        try:
            stat = path.stat()
        except OSError as exc:
            raise CorpusError(f"Cannot stat {document_id}: {exc}") from exc
        return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)

    def check(self) -> StructuralPresence:
        rules_dir = self.directory(Category.RULE)
        return StructuralPresence(
            index_present=(rules_dir / self.config.index_name).is_file(),
            meta_governance_present=(rules_dir / self.config.meta_governance_name).is_file(),
            rules_dir_present=rules_dir.is_dir(),
            workflows_dir_present=self.directory(Category.WORKFLOW).is_dir(),
        )

    def _list_documents(self, category: Category) -> List[Path]:
        directory = self.directory(category)
        if not directory.is_dir():
            return []
        try:
            entries = sorted(directory.iterdir(), key=lambda item: item.name)
        except OSError as exc:
            raise CorpusError(f"Cannot list {directory}: {exc}") from exc
        return [
            entry for entry in entries if entry.is_file() and entry.name.endswith(DOCUMENT_SUFFIX)
        ]

    def _document_id(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusError(f"Cannot read {self._document_id(path)}: {exc}") from exc


__all__ = [
    "CorpusError",
    "DocumentSource",
    "FileSystemCorpus",
    "MetadataProvider",
    "StructuralPresenceChecker",
]
