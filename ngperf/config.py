"""Configuration loading for ngperf (.ngperf.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".ngperf.yml"
REPORT_FORMATS = ("markdown", "json")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DiscoveryConfig:
    """Extra directory exclusions and the component file suffix."""

    exclude_dirs: List[str] = field(default_factory=list)
    suffix: Optional[str] = None


@dataclass
class ReportConfig:
    """Default report format and destination."""

    format: Optional[str] = None
    output: Optional[Path] = None


@dataclass
class RulesConfig:
    """Rule enablement; an empty list keeps every built-in rule."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class NgPerfConfig:
    """Represents the settings defined in .ngperf.yml."""

    root: Path
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)


def load_config(config_path: Path) -> NgPerfConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return NgPerfConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    discovery = DiscoveryConfig()
    discovery_data = _as_dict(data.get("discovery"))
    if discovery_data:
        discovery.exclude_dirs = _as_str_list(discovery_data.get("exclude_dirs"))
        discovery.suffix = _as_str(discovery_data.get("suffix"))

    report = ReportConfig()
    report_data = _as_dict(data.get("report"))
    if report_data:
        report_format = _as_str(report_data.get("format"))
        if report_format is not None:
            report_format = report_format.lower()
            if report_format not in REPORT_FORMATS:
                raise ConfigError(
                    f"Unsupported report format '{report_format}'; expected one of {', '.join(REPORT_FORMATS)}"
                )
        report.format = report_format
        output = _as_str(report_data.get("output"))
        report.output = root / output if output else None

    rules = RulesConfig()
    rules_data = _as_dict(data.get("rules"))
    if rules_data:
        rules.enabled = _as_str_list(rules_data.get("enabled"))

    return NgPerfConfig(root=root, discovery=discovery, report=report, rules=rules)


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
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


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
    "DiscoveryConfig",
    "NgPerfConfig",
    "REPORT_FORMATS",
    "ReportConfig",
    "RulesConfig",
    "load_config",
]
