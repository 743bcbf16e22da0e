"""Persists finished reports to disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..logging import get_logger

_logger = get_logger("reports")


class ReportWriteError(RuntimeError):
    """Raised when a report cannot be written to its destination."""


def save_report(content: str, output_path: str | Path) -> Path:
    """Write ``content`` to ``output_path``, creating parent directories as needed."""
    path = Path(output_path).expanduser()
    try:
        if not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            _logger.info("Created output directory: %s", path.parent)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Failed to save report to {path}: {exc}") from exc
    _logger.info("Performance report saved to: %s", path)
    return path


def save_json_report(payload: Mapping[str, Any], output_path: str | Path) -> Path:
    return save_report(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", output_path)


__all__ = ["ReportWriteError", "save_json_report", "save_report"]
