"""Core data models shared across rulegov components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class Category(str, Enum):
    """Kind of governance document, named after its corpus directory."""

    RULE = "rules"
    WORKFLOW = "workflows"


class Severity(str, Enum):
    """Whether a finding blocks compliance or only suggests an improvement."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Document:
    """Raw governance document handed to the analyzer."""

    document_id: str
    category: Category
    raw_text: str
    last_modified: datetime


@dataclass(frozen=True)
class Finding:
    """Single compliance issue raised against a document or the corpus."""

    severity: Severity
    document_id: Optional[str]
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def describe(self) -> str:
        """Return the message prefixed with the document it concerns."""
        if self.document_id is None:
            return self.message
        return f"{self.document_id}: {self.message}"


@dataclass(frozen=True)
class QualityBreakdown:
    """Sub-scores (0..100) that make up a document's health score."""

    frontmatter: int
    cross_references: int
    actionability: int


@dataclass(frozen=True)
class HealthRecord:
    """Per-document health summary."""

    document_id: str
    category: Category
    health_score: int
    word_count: int
    days_since_modified: int
    frontmatter_compliant: bool
    cross_referenced: bool
    quality_breakdown: QualityBreakdown
    last_modified: datetime


@dataclass(frozen=True)
class StructuralPresence:
    """Corpus-level facts about mandated documents and directories."""

    index_present: bool
    meta_governance_present: bool
    rules_dir_present: bool = True
    workflows_dir_present: bool = True


@dataclass(frozen=True)
class CorpusMetrics:
    """Aggregate arithmetic over every health record of a run."""

    total_documents: int
    compliant_documents: int
    compliance_rate: int
    average_word_count: int
    average_age_days: int
    maintenance_needed: int


@dataclass
class CorpusResult:
    """Corpus-wide scores, metrics and recommendations for one run."""

    validation_score: int
    overall_health: int
    metrics: CorpusMetrics
    recommendations: List[str]
    overall_score: int
    records: List[HealthRecord] = field(default_factory=list)
    findings: List[Finding] = field(default_factory=list)

    @property
    def errors(self) -> List[Finding]:
        return [finding for finding in self.findings if finding.is_error]

    @property
    def warnings(self) -> List[Finding]:
        return [finding for finding in self.findings if not finding.is_error]


__all__ = [
    "Category",
    "CorpusMetrics",
    "CorpusResult",
    "Document",
    "Finding",
    "HealthRecord",
    "QualityBreakdown",
    "Severity",
    "StructuralPresence",
]
