"""Corpus-level aggregation of per-document findings and health records."""

from __future__ import annotations

from typing import List, Sequence

from .constants import (
    ARCHIVAL_AGE_DAYS,
    COMPLIANCE_RATE_RECOMMENDATION_THRESHOLD,
    COMPLIANT_HEALTH_THRESHOLD,
    HEALTH_RECOMMENDATION_THRESHOLD,
    INDEX_DOCUMENT,
    MAINTENANCE_AGE_DAYS,
    META_GOVERNANCE_DOCUMENT,
)
from .models import (
    CorpusMetrics,
    CorpusResult,
    Finding,
    HealthRecord,
    Severity,
    StructuralPresence,
)
from .scoring import mean_score, overall_score, percentage, validation_score


def structural_findings(presence: StructuralPresence) -> List[Finding]:
    """Translate corpus layout facts into corpus-level findings."""
    findings: List[Finding] = []
    if not presence.rules_dir_present:
        findings.append(Finding(Severity.ERROR, None, "Rules directory not found"))
    if not presence.workflows_dir_present:
        findings.append(
            Finding(
                Severity.WARNING,
                None,
                "Workflows directory not found - skipping workflow validation",
            )
        )
    if not presence.index_present:
        findings.append(
            Finding(Severity.ERROR, None, f"{INDEX_DOCUMENT} is missing from Rules directory")
        )
    if not presence.meta_governance_present:
        findings.append(
            Finding(
                Severity.ERROR,
                None,
                f"{META_GOVERNANCE_DOCUMENT} is missing from Rules directory",
            )
        )
    return findings


def compute_metrics(records: Sequence[HealthRecord]) -> CorpusMetrics:
    total = len(records)
    compliant = sum(1 for record in records if record.health_score >= COMPLIANT_HEALTH_THRESHOLD)
    return CorpusMetrics(
        total_documents=total,
        compliant_documents=compliant,
        compliance_rate=percentage(compliant, total),
        average_word_count=mean_score([record.word_count for record in records]),
        average_age_days=mean_score([record.days_since_modified for record in records]),
        maintenance_needed=sum(
            1 for record in records if record.days_since_modified > MAINTENANCE_AGE_DAYS
        ),
    )


def build_recommendations(
    overall_health: int, metrics: CorpusMetrics, records: Sequence[HealthRecord]
) -> List[str]:
    recommendations: List[str] = []

    if overall_health < HEALTH_RECOMMENDATION_THRESHOLD:
        recommendations.append(
            "Overall rule health is below optimal. "
            "Focus on frontmatter compliance and cross-references."
        )

    if metrics.compliance_rate < COMPLIANCE_RATE_RECOMMENDATION_THRESHOLD:
        recommendations.append(
            "Less than 50% of rules meet quality standards. "
            "Prioritize rule template compliance."
        )

    if metrics.maintenance_needed > 0:
        recommendations.append(
            f"{metrics.maintenance_needed} rules haven't been updated in 90+ days. "
            "Review for relevance."
        )

    inactive = sum(1 for record in records if record.days_since_modified > ARCHIVAL_AGE_DAYS)
    if inactive > 0:
        recommendations.append(
            f"{inactive} rules are over 6 months old. Consider archiving or updating."
        )

    return recommendations


class CorpusAggregator:
    """Turns collected per-document outputs into corpus-wide scores."""

    def aggregate(
        self,
        findings: Sequence[Finding],
        records: Sequence[HealthRecord],
        presence: StructuralPresence,
    ) -> CorpusResult:
        all_findings = list(findings) + structural_findings(presence)
        errors = sum(1 for finding in all_findings if finding.is_error)
        warnings = len(all_findings) - errors

        validation = validation_score(errors, warnings)
        overall_health = mean_score([record.health_score for record in records])
        metrics = compute_metrics(records)

        return CorpusResult(
            validation_score=validation,
            overall_health=overall_health,
            metrics=metrics,
            recommendations=build_recommendations(overall_health, metrics, records),
            overall_score=overall_score(validation, overall_health),
            records=list(records),
            findings=all_findings,
        )


__all__ = [
    "CorpusAggregator",
    "build_recommendations",
    "compute_metrics",
    "structural_findings",
]
