"""JSON health metrics output."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Sequence

from .base import format_timestamp, record_to_dict
from ..logging import get_logger
from ..models import CorpusResult, Finding

METRICS_FILENAME = "rule-health-metrics.json"


def build_metrics_payload(result: CorpusResult, *, timestamp: str) -> Dict[str, object]:
    return {
        "timestamp": timestamp,
        "overall_health": result.overall_health,
        "validation_score": result.validation_score,
        "overall_score": result.overall_score,
        "rules": [record_to_dict(record) for record in result.records],
        "metrics": asdict(result.metrics),
        "recommendations": list(result.recommendations),
    }


class JsonMetricsSink:
    """Writes per-document health records and corpus metrics as JSON."""

    def __init__(self, output_dir: Path, *, now: datetime | None = None) -> None:
        self.output_dir = Path(output_dir)
        self._now = now
        self.logger = get_logger("reports.metrics")

    @property
    def path(self) -> Path:
        return self.output_dir / METRICS_FILENAME

    def emit(self, findings: Sequence[Finding], result: CorpusResult) -> None:
        moment = self._now or datetime.now(timezone.utc)
        payload = build_metrics_payload(result, timestamp=format_timestamp(moment))
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        self.logger.info("Health metrics saved to %s", self.path)


__all__ = ["JsonMetricsSink", "METRICS_FILENAME", "build_metrics_payload"]
