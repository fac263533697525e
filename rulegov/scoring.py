"""Scoring formulas shared by the document analyzer and the corpus aggregator."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

from .constants import (
    ACTIONABILITY_POINTS_PER_MATCH,
    ACTIONABLE_PATTERNS,
    ERROR_PENALTY,
    FRONTMATTER_DELIMITER,
    FULL_SCORE,
    HEALTH_WEIGHT,
    SCORED_CROSS_REFERENCE_MARKERS,
    VALIDATION_WEIGHT,
    WARNING_PENALTY,
)
from .models import QualityBreakdown

_ONE_DAY = timedelta(days=1)


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity, unlike the built-in ``round``."""
    return int(math.floor(value + 0.5))


def mean_score(values: Sequence[int]) -> int:
    """Return the rounded arithmetic mean, or 0 for an empty sequence."""
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def count_words(text: str) -> int:
    return len(text.split())


def count_actionable(text: str) -> int:
    """Count matches of every actionable-language pattern across ``text``."""
    return sum(len(pattern.findall(text)) for pattern in ACTIONABLE_PATTERNS)


def frontmatter_score(text: str) -> int:
    # Looser than the frontmatter check: the delimiter anywhere is enough.
    return FULL_SCORE if FRONTMATTER_DELIMITER in text else 0


def cross_reference_score(text: str) -> int:
    if any(marker in text for marker in SCORED_CROSS_REFERENCE_MARKERS):
        return FULL_SCORE
    return 0


def actionability_score(text: str) -> int:
    return min(FULL_SCORE, count_actionable(text) * ACTIONABILITY_POINTS_PER_MATCH)


def quality_breakdown(text: str) -> QualityBreakdown:
    return QualityBreakdown(
        frontmatter=frontmatter_score(text),
        cross_references=cross_reference_score(text),
        actionability=actionability_score(text),
    )


def health_score(breakdown: QualityBreakdown) -> int:
    return mean_score(
        [breakdown.frontmatter, breakdown.cross_references, breakdown.actionability]
    )


def days_since(last_modified: datetime, now: datetime) -> int:
    """Whole days elapsed between ``last_modified`` and ``now``, floored."""
    return (now - last_modified) // _ONE_DAY


def validation_score(error_count: int, warning_count: int) -> int:
    if error_count == 0 and warning_count == 0:
        return FULL_SCORE
    penalty = error_count * ERROR_PENALTY + warning_count * WARNING_PENALTY
    return max(0, FULL_SCORE - penalty)


def overall_score(validation: int, overall_health: int) -> int:
    """Blend the compliance score and corpus health into one governance score."""
    return round_half_up(validation * VALIDATION_WEIGHT + overall_health * HEALTH_WEIGHT)


def percentage(part: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(part / total * 100)


__all__ = [
    "actionability_score",
    "count_actionable",
    "count_words",
    "cross_reference_score",
    "days_since",
    "frontmatter_score",
    "health_score",
    "mean_score",
    "overall_score",
    "percentage",
    "quality_breakdown",
    "round_half_up",
    "validation_score",
]
