"""Tests for the cross-reference check."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from rulegov.checks.references import CrossReferenceCheck, count_links
from rulegov.models import Category, Document


def _doc(text: str) -> Document:
    return Document(
        document_id="Rules/links.md",
        category=Category.RULE,
        raw_text=text,
        last_modified=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.mark.parametrize("marker", ["### Depends On", "### Extends", "### See Also"])
def test_any_cross_reference_marker_satisfies_check(marker: str) -> None:
    findings = CrossReferenceCheck().run(_doc(f"{marker}\n- [Index](RULE_INDEX.md)\n"))
    assert findings == []


def test_missing_sections_and_links_warn_separately() -> None:
    findings = CrossReferenceCheck().run(_doc("# Title\nPlain text.\n"))
    assert [finding.message for finding in findings] == [
        "Missing cross-reference sections",
        "No external references found",
    ]


def test_count_links_requires_label_and_parentheses() -> None:
    text = "[ok](a.md) [empty target]() [](no-label.md) [broken] (x.md)"
    assert count_links(text) == 2
