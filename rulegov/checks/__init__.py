"""Document check implementations in their fixed execution order."""

from __future__ import annotations

from typing import Callable, List

from .actionability import ActionabilityCheck
from .base import DocumentCheck
from .frontmatter import FrontmatterCheck, parse_frontmatter
from .references import CrossReferenceCheck
from .structure import StructureCheck

# Order matters: findings are reported in this sequence for every document.
_BUILTIN_FACTORIES: tuple[Callable[[], DocumentCheck], ...] = (
    FrontmatterCheck,
    StructureCheck,
    CrossReferenceCheck,
    ActionabilityCheck,
)


def default_checks() -> List[DocumentCheck]:
    """Return fresh instances of the built-in checks."""
    return [factory() for factory in _BUILTIN_FACTORIES]


__all__ = [
    "ActionabilityCheck",
    "CrossReferenceCheck",
    "DocumentCheck",
    "FrontmatterCheck",
    "StructureCheck",
    "default_checks",
    "parse_frontmatter",
]
