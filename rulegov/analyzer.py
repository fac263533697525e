"""Per-document analysis: compliance findings plus a health record."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .checks import DocumentCheck, default_checks
from .models import Document, Finding, HealthRecord
from .scoring import count_words, days_since, health_score, quality_breakdown


class DocumentAnalyzer:
    """Runs every document check and scores a document's health.

    Analysis is a pure function of the document and ``now``: no I/O and no
    state carried between calls, so instances can be shared across threads.
    """

    def __init__(self, checks: Optional[Iterable[DocumentCheck]] = None) -> None:
        self._checks: List[DocumentCheck] = (
            list(checks) if checks is not None else default_checks()
        )

    @property
    def checks(self) -> List[DocumentCheck]:
        return list(self._checks)

    def analyze(self, document: Document, *, now: datetime) -> Tuple[List[Finding], HealthRecord]:
        findings: List[Finding] = []
        for check in self._checks:
            findings.extend(check.run(document))
        return findings, self.score(document, now=now)

    def score(self, document: Document, *, now: datetime) -> HealthRecord:
        """Build the health record; independent of the findings for the same text."""
        text = document.raw_text
        breakdown = quality_breakdown(text)
        return HealthRecord(
            document_id=document.document_id,
            category=document.category,
            health_score=health_score(breakdown),
            word_count=count_words(text),
            days_since_modified=days_since(document.last_modified, now),
            frontmatter_compliant=breakdown.frontmatter > 0,
            cross_referenced=breakdown.cross_references > 0,
            quality_breakdown=breakdown,
            last_modified=document.last_modified,
        )


__all__ = ["DocumentAnalyzer"]
