"""Actionable-language check."""

from __future__ import annotations

from typing import List

from .base import DocumentCheck
from ..constants import MIN_ACTIONABLE_STATEMENTS
from ..models import Document, Finding
from ..scoring import count_actionable


class ActionabilityCheck(DocumentCheck):
    """Warns when a document has too few directive statements (must, never, ...)."""

    name = "actionability"

    def run(self, document: Document) -> List[Finding]:
        count = count_actionable(document.raw_text)
        if count >= MIN_ACTIONABLE_STATEMENTS:
            return []
        return [
            self.warning(
                document,
                f"Consider adding more actionable content (found: {count} actionable statements)",
            )
        ]


__all__ = ["ActionabilityCheck"]
