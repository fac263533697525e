"""Shared constants for document checks, scoring and aggregation."""

from __future__ import annotations

import re

FRONTMATTER_DELIMITER = "---"

REQUIRED_FRONTMATTER_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "author",
    "version",
)

VERSION_PATTERN = re.compile(r"^\d+\.\d+$")

# Heading levels one to three; deeper headings are ignored.
HEADING_PATTERN = re.compile(r"^#{1,3}\s+\S")

LINK_PATTERN = re.compile(r"\[[^\]]+\]\([^)]*\)")

DEPENDS_ON_MARKER = "### Depends On"
EXTENDS_MARKER = "### Extends"
SEE_ALSO_MARKER = "### See Also"

CROSS_REFERENCE_MARKERS: tuple[str, ...] = (
    DEPENDS_ON_MARKER,
    EXTENDS_MARKER,
    SEE_ALSO_MARKER,
)

# "See Also" counts for the finding check but not for the health sub-score.
SCORED_CROSS_REFERENCE_MARKERS: tuple[str, ...] = (
    DEPENDS_ON_MARKER,
    EXTENDS_MARKER,
)

ACTIONABLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"must\s+(?:not\s+)?[a-z]", re.IGNORECASE),
    re.compile(r"should\s+(?:not\s+)?[a-z]", re.IGNORECASE),
    re.compile(r"never", re.IGNORECASE),
    re.compile(r"always", re.IGNORECASE),
    re.compile(r"required", re.IGNORECASE),
    re.compile(r"prohibited", re.IGNORECASE),
)

MIN_HEADINGS = 2
MIN_WORD_COUNT = 50
MIN_ACTIONABLE_STATEMENTS = 3

FULL_SCORE = 100
ACTIONABILITY_POINTS_PER_MATCH = 10

ERROR_PENALTY = 20
WARNING_PENALTY = 5

VALIDATION_WEIGHT = 0.4
HEALTH_WEIGHT = 0.6

COMPLIANT_HEALTH_THRESHOLD = 80
HEALTH_RECOMMENDATION_THRESHOLD = 70
COMPLIANCE_RATE_RECOMMENDATION_THRESHOLD = 50
MAINTENANCE_AGE_DAYS = 90
ARCHIVAL_AGE_DAYS = 180

PASSING_OVERALL_SCORE = 70

INDEX_DOCUMENT = "RULE_INDEX.md"
META_GOVERNANCE_DOCUMENT = "META_GOVERNANCE.md"
RULES_DIRECTORY = "Rules"
WORKFLOWS_DIRECTORY = "Workflows"
DOCUMENT_SUFFIX = ".md"


__all__ = [
    "ACTIONABILITY_POINTS_PER_MATCH",
    "ACTIONABLE_PATTERNS",
    "ARCHIVAL_AGE_DAYS",
    "COMPLIANCE_RATE_RECOMMENDATION_THRESHOLD",
    "COMPLIANT_HEALTH_THRESHOLD",
    "CROSS_REFERENCE_MARKERS",
    "DEPENDS_ON_MARKER",
    "DOCUMENT_SUFFIX",
    "ERROR_PENALTY",
    "EXTENDS_MARKER",
    "FRONTMATTER_DELIMITER",
    "FULL_SCORE",
    "HEADING_PATTERN",
    "HEALTH_RECOMMENDATION_THRESHOLD",
    "HEALTH_WEIGHT",
    "INDEX_DOCUMENT",
    "LINK_PATTERN",
    "MAINTENANCE_AGE_DAYS",
    "META_GOVERNANCE_DOCUMENT",
    "MIN_ACTIONABLE_STATEMENTS",
    "MIN_HEADINGS",
    "MIN_WORD_COUNT",
    "PASSING_OVERALL_SCORE",
    "REQUIRED_FRONTMATTER_FIELDS",
    "RULES_DIRECTORY",
    "SCORED_CROSS_REFERENCE_MARKERS",
    "SEE_ALSO_MARKER",
    "VALIDATION_WEIGHT",
    "VERSION_PATTERN",
    "WARNING_PENALTY",
    "WORKFLOWS_DIRECTORY",
]
