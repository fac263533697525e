"""Frontmatter presence and required-field checks."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from .base import DocumentCheck
from ..constants import FRONTMATTER_DELIMITER, REQUIRED_FRONTMATTER_FIELDS, VERSION_PATTERN
from ..models import Document, Finding

_FIELD_PATTERN = re.compile(r"^(\w+):\s*(.*)$")


def parse_frontmatter(text: str) -> Optional[Dict[str, str]]:
    """Return the key/value fields of the leading frontmatter block.

    The block must open on the very first line and be closed by a second
    delimiter line with at least one line in between. ``None`` means no
    well-formed block was found. Only flat ``key: value`` lines are read;
    anything else inside the block is ignored.
    """
    lines = text.splitlines()
    if not lines or not _is_delimiter(lines[0]):
        return None

    closing = _find_closing_delimiter(lines)
    if closing is None:
        return None

    fields: Dict[str, str] = {}
    for line in lines[1:closing]:
        match = _FIELD_PATTERN.match(line)
        if not match:
            continue
        value = _strip_quotes(match.group(2).strip())
        if value:
            fields[match.group(1)] = value
    return fields


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER


def _find_closing_delimiter(lines: Sequence[str]) -> Optional[int]:
    for index in range(2, len(lines)):
        if _is_delimiter(lines[index]):
            return index
    return None


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


class FrontmatterCheck(DocumentCheck):
    """Requires a frontmatter block carrying name, description, author and version."""

    name = "frontmatter"

    def run(self, document: Document) -> List[Finding]:
        fields = parse_frontmatter(document.raw_text)
        if fields is None:
            return [self.error(document, "Missing or invalid frontmatter")]

        findings: List[Finding] = []
        for field_name in REQUIRED_FRONTMATTER_FIELDS:
            if field_name not in fields:
                findings.append(
                    self.error(document, f"Missing required frontmatter field: {field_name}")
                )

        version = fields.get("version")
        if version is not None and not VERSION_PATTERN.match(version):
            findings.append(
                self.warning(document, "Version should follow semantic versioning (x.y)")
            )
        return findings


__all__ = ["FrontmatterCheck", "parse_frontmatter"]
