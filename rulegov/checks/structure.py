"""Structural richness checks: headings and overall length."""

from __future__ import annotations

from typing import List

from .base import DocumentCheck
from ..constants import HEADING_PATTERN, MIN_HEADINGS, MIN_WORD_COUNT
from ..models import Document, Finding
from ..scoring import count_words


def count_headings(text: str) -> int:
    """Count level one to three markdown headings, one per line."""
    return sum(1 for line in text.splitlines() if HEADING_PATTERN.match(line))


class StructureCheck(DocumentCheck):
    """Flags documents that are too flat or too short to be useful."""

    name = "structure"

    def run(self, document: Document) -> List[Finding]:
        findings: List[Finding] = []
        text = document.raw_text

        if count_headings(text) < MIN_HEADINGS:
            findings.append(self.warning(document, "Consider adding more structure with headings"))

        words = count_words(text)
        if words < MIN_WORD_COUNT:
            findings.append(
                self.warning(document, f"Consider expanding content (current: {words} words)")
            )
        return findings


__all__ = ["StructureCheck", "count_headings"]
