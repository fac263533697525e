"""Report sinks for rendering and persisting audit results."""

from .base import ReportSink
from .console import ConsoleSummarySink
from .markdown import REPORT_FILES, MarkdownReportSink
from .metrics import METRICS_FILENAME, JsonMetricsSink

__all__ = [
    "ConsoleSummarySink",
    "JsonMetricsSink",
    "METRICS_FILENAME",
    "MarkdownReportSink",
    "REPORT_FILES",
    "ReportSink",
]
