"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from rulegov.cli import _build_parser, main
from tests._fixtures.corpus_builder import CorpusBuilder
from tests._fixtures.documents import COMPLIANT_RULE


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "audit"])
    assert args.verbose is True
    assert args.command == "audit"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["validate", "--verbose"])
    assert args.verbose is True
    assert args.command == "validate"


def test_cli_defaults() -> None:
    args = _build_parser().parse_args(["health"])
    assert args.path == "."
    assert args.verbose is False
    assert args.no_reports is False
    assert args.workers is None


def test_cli_accepts_quiet_and_log_file() -> None:
    args = _build_parser().parse_args(["audit", "-q", "--log-file", "out/rulegov.log"])
    assert args.quiet is True
    assert args.log_file.name == "rulegov.log"


def test_cli_fail_under_only_on_audit() -> None:
    parser = _build_parser()
    assert parser.parse_args(["audit", "--fail-under", "80"]).fail_under == 80
    with pytest.raises(SystemExit):
        parser.parse_args(["validate", "--fail-under", "80"])


def _healthy_corpus(builder: CorpusBuilder) -> None:
    recent = datetime.now(timezone.utc) - timedelta(days=1)
    builder.write(
        {
            "Rules/RULE_INDEX.md": COMPLIANT_RULE,
            "Rules/META_GOVERNANCE.md": COMPLIANT_RULE,
            "Rules/secure.md": COMPLIANT_RULE,
            "Workflows/release.md": COMPLIANT_RULE,
        },
        modified=recent,
    )


def test_audit_passes_and_writes_reports(corpus_builder: CorpusBuilder) -> None:
    _healthy_corpus(corpus_builder)
    root = corpus_builder.path()

    with pytest.raises(SystemExit) as excinfo:
        main(["audit", str(root)])

    assert excinfo.value.code == 0
    reports = root / "reports"
    assert (reports / "governance-validation-report.md").exists()
    assert (reports / "rule-health-report.md").exists()
    assert (reports / "comprehensive-governance-report.md").exists()
    metrics = json.loads((reports / "rule-health-metrics.json").read_text(encoding="utf-8"))
    assert metrics["overall_health"] == 80
    assert metrics["metrics"]["total_documents"] == 4


def test_validate_fails_when_index_missing(corpus_builder: CorpusBuilder, tmp_path) -> None:
    corpus_builder.write({"Rules/secure.md": COMPLIANT_RULE, "Workflows/release.md": COMPLIANT_RULE})
    reports_dir = tmp_path / "out"

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(corpus_builder.path()), "--reports-dir", str(reports_dir)])

    assert excinfo.value.code == 1
    written = sorted(path.name for path in reports_dir.iterdir())
    assert written == ["governance-validation-report.md"]
    report = (reports_dir / "governance-validation-report.md").read_text(encoding="utf-8")
    assert "RULE_INDEX.md is missing from Rules directory" in report


def test_health_exits_zero_even_with_errors(corpus_builder: CorpusBuilder) -> None:
    corpus_builder.write({"Rules/bare.md": "no frontmatter\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["health", str(corpus_builder.path()), "--no-reports"])

    assert excinfo.value.code == 0
    assert not (corpus_builder.path() / "reports").exists()


def test_unreadable_document_exits_with_failure(corpus_builder: CorpusBuilder, capsys) -> None:
    corpus_builder.write_structure()
    (corpus_builder.path() / "Rules" / "binary.md").write_bytes(b"\xff\xfe")

    with pytest.raises(SystemExit) as excinfo:
        main(["audit", str(corpus_builder.path())])

    assert excinfo.value.code == 1
    assert "rulegov audit failed" in capsys.readouterr().err
    assert not (corpus_builder.path() / "reports").exists()


def test_invalid_config_exits_with_failure(corpus_builder: CorpusBuilder, capsys) -> None:
    (corpus_builder.path() / ".rulegov.yml").write_text("workers: 0\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["audit", str(corpus_builder.path())])

    assert excinfo.value.code == 1
    assert "workers must be a positive integer" in capsys.readouterr().err


def test_missing_corpus_path_exits_without_auditing_parent(
    corpus_builder: CorpusBuilder, capsys
) -> None:
    _healthy_corpus(corpus_builder)
    root = corpus_builder.path()
    mistyped = root / "does-not-exist"

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(mistyped)])

    assert excinfo.value.code == 1
    assert f"corpus path not found: {mistyped}" in capsys.readouterr().err
    assert not (root / "reports").exists()


def test_reports_share_one_generation_timestamp(corpus_builder: CorpusBuilder) -> None:
    _healthy_corpus(corpus_builder)
    reports = corpus_builder.path() / "reports"

    with pytest.raises(SystemExit):
        main(["audit", str(corpus_builder.path())])

    metrics = json.loads((reports / "rule-health-metrics.json").read_text(encoding="utf-8"))
    generated = f"Generated: {metrics['timestamp']}"
    for name in (
        "governance-validation-report.md",
        "rule-health-report.md",
        "comprehensive-governance-report.md",
    ):
        assert generated in (reports / name).read_text(encoding="utf-8")


def test_config_file_path_selects_its_corpus(corpus_builder: CorpusBuilder) -> None:
    _healthy_corpus(corpus_builder)
    config_file = corpus_builder.path() / ".rulegov.yml"
    config_file.write_text("workers: 2\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(config_file), "--no-reports"])

    assert excinfo.value.code == 0
