"""Report sink protocol and shared rendering helpers."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Protocol, Sequence

from ..models import CorpusResult, Finding, HealthRecord


class ReportSink(Protocol):
    """Receives the results of a run and renders or persists them."""

    def emit(self, findings: Sequence[Finding], result: CorpusResult) -> None:
        """Render ``findings`` and ``result``; failures propagate to the caller."""


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with a trailing ``Z``."""
    return moment.isoformat().replace("+00:00", "Z")


def status_label(overall_score: int) -> str:
    if overall_score >= 90:
        return "excellent"
    if overall_score >= 70:
        return "good"
    return "needs_attention"


def record_to_dict(record: HealthRecord) -> Dict[str, object]:
    return {
        "file_name": record.document_id,
        "category": record.category.value,
        "health_score": record.health_score,
        "word_count": record.word_count,
        "days_since_modified": record.days_since_modified,
        "frontmatter_compliant": record.frontmatter_compliant,
        "cross_referenced": record.cross_referenced,
        "last_modified": format_timestamp(record.last_modified),
        "quality_breakdown": {
            "frontmatter": record.quality_breakdown.frontmatter,
            "cross_references": record.quality_breakdown.cross_references,
            "actionability": record.quality_breakdown.actionability,
        },
    }


def finding_lines(findings: Sequence[Finding]) -> List[str]:
    return [finding.describe() for finding in findings]


__all__ = [
    "ReportSink",
    "finding_lines",
    "format_timestamp",
    "record_to_dict",
    "status_label",
]
