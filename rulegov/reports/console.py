"""Log-based summary of a run, mirroring what the reports contain."""

from __future__ import annotations

from typing import Sequence

from .base import finding_lines
from ..logging import get_logger
from ..models import CorpusResult, Finding


class ConsoleSummarySink:
    """Logs findings and headline scores through the rulegov logger."""

    def __init__(self, *, show_warnings: bool = True) -> None:
        self.show_warnings = show_warnings
        self.logger = get_logger("reports.console")

    def emit(self, findings: Sequence[Finding], result: CorpusResult) -> None:
        errors = [finding for finding in findings if finding.is_error]
        warnings = [finding for finding in findings if not finding.is_error]

        if errors:
            self.logger.error("Errors (%d):", len(errors))
            for line in finding_lines(errors):
                self.logger.error("  %s", line)
        if warnings and self.show_warnings:
            self.logger.warning("Warnings (%d):", len(warnings))
            for line in finding_lines(warnings):
                self.logger.warning("  %s", line)

        self.logger.info("Governance compliance score: %d/100", result.validation_score)
        self.logger.info(
            "Rule health: %d/100 (%d%% compliant)",
            result.overall_health,
            result.metrics.compliance_rate,
        )
        self.logger.info("Overall governance score: %d/100", result.overall_score)
        for recommendation in result.recommendations:
            self.logger.info("Recommendation: %s", recommendation)


__all__ = ["ConsoleSummarySink"]
