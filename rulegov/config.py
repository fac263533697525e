"""Configuration loading for rulegov (.rulegov.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import (
    INDEX_DOCUMENT,
    META_GOVERNANCE_DOCUMENT,
    PASSING_OVERALL_SCORE,
    RULES_DIRECTORY,
    WORKFLOWS_DIRECTORY,
)

CONFIG_FILENAME = ".rulegov.yml"
REPORT_FORMATS: tuple[str, ...] = ("markdown", "json")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CorpusConfig:
    """Where rule and workflow documents live under the corpus root."""

    rules_dir: str = RULES_DIRECTORY
    workflows_dir: str = WORKFLOWS_DIRECTORY
    index_name: str = INDEX_DOCUMENT
    meta_governance_name: str = META_GOVERNANCE_DOCUMENT


@dataclass
class ReportsConfig:
    """Report output location and formats."""

    output_dir: str = "reports"
    formats: List[str] = field(default_factory=lambda: list(REPORT_FORMATS))


@dataclass
class RuleGovConfig:
    """Represents the settings defined in .rulegov.yml."""

    root: Path
    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)
    workers: int = 1
    fail_under: int = PASSING_OVERALL_SCORE

    @property
    def reports_dir(self) -> Path:
        return self.root / self.reports.output_dir


def load_config(config_path: Path) -> RuleGovConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RuleGovConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    corpus = CorpusConfig()
    corpus_data = _as_dict(data.get("corpus"))
    if corpus_data:
        corpus.rules_dir = _as_str(corpus_data.get("rules_dir")) or corpus.rules_dir
        corpus.workflows_dir = _as_str(corpus_data.get("workflows_dir")) or corpus.workflows_dir
        corpus.index_name = _as_str(corpus_data.get("index_name")) or corpus.index_name
        corpus.meta_governance_name = (
            _as_str(corpus_data.get("meta_governance_name")) or corpus.meta_governance_name
        )

    reports = ReportsConfig()
    reports_data = _as_dict(data.get("reports"))
    if reports_data:
        reports.output_dir = _as_str(reports_data.get("output_dir")) or reports.output_dir
        if "formats" in reports_data:
            reports.formats = _as_formats(reports_data.get("formats"))

    workers = _as_int(data.get("workers"))
    if workers is not None and workers < 1:
        raise ConfigError("workers must be a positive integer")

    fail_under = _as_int(data.get("fail_under"))
    if fail_under is not None and not 0 <= fail_under <= 100:
        raise ConfigError("fail_under must be between 0 and 100")

    return RuleGovConfig(
        root=root,
        corpus=corpus,
        reports=reports,
        workers=workers if workers is not None else 1,
        fail_under=fail_under if fail_under is not None else PASSING_OVERALL_SCORE,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_formats(value: Any) -> List[str]:
    formats = [item.lower() for item in _as_str_list(value)]
    unknown = sorted(set(formats) - set(REPORT_FORMATS))
    if unknown:
        raise ConfigError(f"Unknown report formats: {', '.join(unknown)}")
    return formats


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "CorpusConfig",
    "REPORT_FORMATS",
    "ReportsConfig",
    "RuleGovConfig",
    "load_config",
]
