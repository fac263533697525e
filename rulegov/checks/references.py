"""Cross-reference and external link checks."""

from __future__ import annotations

from typing import List

from .base import DocumentCheck
from ..constants import CROSS_REFERENCE_MARKERS, LINK_PATTERN
from ..models import Document, Finding


def has_cross_reference_section(text: str) -> bool:
    return any(marker in text for marker in CROSS_REFERENCE_MARKERS)


def count_links(text: str) -> int:
    return len(LINK_PATTERN.findall(text))


class CrossReferenceCheck(DocumentCheck):
    """Requires a dependency section and at least one markdown link."""

    name = "cross_references"

    def run(self, document: Document) -> List[Finding]:
        findings: List[Finding] = []
        text = document.raw_text

        if not has_cross_reference_section(text):
            findings.append(self.warning(document, "Missing cross-reference sections"))

        if count_links(text) == 0:
            findings.append(self.warning(document, "No external references found"))
        return findings


__all__ = ["CrossReferenceCheck", "count_links", "has_cross_reference_section"]
