"""CLI entrypoints for rulegov commands."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from .config import CONFIG_FILENAME, ConfigError, RuleGovConfig, load_config
from .logging import configure_logging
from .orchestrator import AuditOutcome, run_audit
from .reports import ConsoleSummarySink, JsonMetricsSink, MarkdownReportSink, ReportSink
from .sources import CorpusError, FileSystemCorpus

# Markdown reports written by each command.
_COMMAND_REPORTS = {
    "validate": ["validation"],
    "health": ["health"],
    "audit": ["validation", "health", "comprehensive"],
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the governance corpus root (defaults to current directory).",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=None,
        help="Directory for generated reports (defaults to <path>/reports).",
    )
    parser.add_argument(
        "--no-reports",
        action="store_true",
        help="Skip writing report files; only log the summary.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of documents analyzed in parallel.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rulegov",
        description="Audit governance rules and workflows for compliance and health.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check rules and workflows against governance standards.",
    )
    _add_common_options(validate_parser)

    health_parser = subparsers.add_parser(
        "health",
        help="Score rule health and write health metrics.",
    )
    _add_common_options(health_parser)

    audit_parser = subparsers.add_parser(
        "audit",
        help="Run validation and health analysis and compute the overall score.",
    )
    _add_common_options(audit_parser)
    audit_parser.add_argument(
        "--fail-under",
        type=int,
        default=None,
        help="Minimum overall score required for a passing audit (default 70).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for rulegov commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=args.quiet,
        log_file=args.log_file,
    )

    target = Path(args.path).expanduser()
    if not (target.is_dir() or (target.is_file() and target.name == CONFIG_FILENAME)):
        parser.exit(1, f"rulegov {args.command} failed: corpus path not found: {target}\n")

    try:
        config = load_config(target)
    except ConfigError as exc:
        parser.exit(1, f"rulegov {args.command} failed: {exc}\n")

    workers = args.workers if args.workers is not None else config.workers
    if workers < 1:
        parser.error("--workers must be at least 1")
    fail_under = getattr(args, "fail_under", None)
    if fail_under is None:
        fail_under = config.fail_under

    # One clock for document ages and report timestamps.
    now = datetime.now(timezone.utc)
    corpus = FileSystemCorpus(config.root, config.corpus)
    sinks = _build_sinks(args, config, now)

    try:
        outcome = run_audit(
            corpus,
            corpus,
            corpus,
            sinks,
            now=now,
            workers=workers,
            fail_under=fail_under,
        )
    except CorpusError as exc:
        parser.exit(1, f"rulegov {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    parser.exit(_exit_code(args.command, outcome), _summary(args.command, outcome))


def _build_sinks(
    args: argparse.Namespace, config: RuleGovConfig, now: datetime
) -> List[ReportSink]:
    sinks: List[ReportSink] = [ConsoleSummarySink(show_warnings=bool(args.verbose))]
    if args.no_reports:
        return sinks

    reports_dir = args.reports_dir if args.reports_dir is not None else config.reports_dir
    formats = config.reports.formats
    if "markdown" in formats:
        sinks.append(
            MarkdownReportSink(reports_dir, reports=_COMMAND_REPORTS[args.command], now=now)
        )
    if "json" in formats and args.command in {"health", "audit"}:
        sinks.append(JsonMetricsSink(reports_dir, now=now))
    return sinks


def _exit_code(command: str, outcome: AuditOutcome) -> int:
    if command == "validate":
        return 0 if outcome.validation_passed else 1
    if command == "health":
        return 0
    return outcome.exit_code


def _summary(command: str, outcome: AuditOutcome) -> str:
    result = outcome.result
    if command == "validate":
        status = "PASSED" if outcome.validation_passed else "FAILED"
        return (
            f"Validation {status}: {outcome.error_count} errors, "
            f"score {result.validation_score}/100\n"
        )
    if command == "health":
        return (
            f"Health: {result.overall_health}/100 "
            f"({result.metrics.compliance_rate}% compliant)\n"
        )
    status = "PASSED" if outcome.passed else "FAILED"
    return f"Audit {status}: overall score {result.overall_score}/100\n"


if __name__ == "__main__":
    main(sys.argv[1:])
