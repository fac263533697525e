"""Markdown report rendering backed by Jinja templates."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .base import format_timestamp, status_label
from ..logging import get_logger
from ..models import Category, CorpusResult, Finding

REPORT_FILES: Dict[str, str] = {
    "validation": "governance-validation-report.md",
    "health": "rule-health-report.md",
    "comprehensive": "comprehensive-governance-report.md",
}

_TEMPLATES_DIR = Path(__file__).with_name("templates")


def create_environment(templates_dir: Path | None = None) -> Environment:
    directories: List[str] = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(_TEMPLATES_DIR))
    return Environment(
        loader=FileSystemLoader(directories),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class MarkdownReportSink:
    """Renders validation, health and comprehensive markdown reports."""

    def __init__(
        self,
        output_dir: Path,
        *,
        reports: Iterable[str] | None = None,
        templates_dir: Path | None = None,
        now: datetime | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        selected = list(reports) if reports is not None else list(REPORT_FILES)
        unknown = sorted(set(selected) - set(REPORT_FILES))
        if unknown:
            raise ValueError(f"Unknown markdown reports requested: {', '.join(unknown)}")
        self.reports = [name for name in REPORT_FILES if name in selected]
        self._env = create_environment(templates_dir)
        self._now = now
        self.logger = get_logger("reports.markdown")

    def render(self, name: str, findings: Sequence[Finding], result: CorpusResult) -> str:
        """Render a single report to a markdown string."""
        template = self._env.get_template(f"{name}.md.j2")
        return template.render(**self._context(findings, result))

    def emit(self, findings: Sequence[Finding], result: CorpusResult) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for name in self.reports:
            path = self.output_dir / REPORT_FILES[name]
            path.write_text(self.render(name, findings, result), encoding="utf-8")
            self.logger.info("Report saved to %s", path)

    def _context(self, findings: Sequence[Finding], result: CorpusResult) -> Dict[str, object]:
        moment = self._now or datetime.now(timezone.utc)
        records = result.records
        return {
            "timestamp": format_timestamp(moment),
            "result": result,
            "metrics": result.metrics,
            "errors": [finding for finding in findings if finding.is_error],
            "warnings": [finding for finding in findings if not finding.is_error],
            "records": records,
            "rule_records": [r for r in records if r.category is Category.RULE],
            "workflow_records": [r for r in records if r.category is Category.WORKFLOW],
            "frontmatter_compliant": sum(1 for r in records if r.frontmatter_compliant),
            "cross_referenced": sum(1 for r in records if r.cross_referenced),
            "status": status_label(result.overall_score),
        }


__all__ = ["MarkdownReportSink", "REPORT_FILES", "create_environment"]
