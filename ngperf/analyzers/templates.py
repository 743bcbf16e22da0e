"""Loads external component templates referenced by ``templateUrl``."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from ..models import ComponentRecord


def resolve_template_path(file_path: str, template_url: str) -> Path:
    return Path(file_path).parent / template_url


def load_template(record: ComponentRecord, logger: logging.Logger) -> ComponentRecord:
    """Return ``record`` with its template attached when it can be read.

    A missing or unreadable template is logged and the record is returned as-is;
    template-dependent rules then have nothing to check.
    """
    template_url = record.metadata.template_url
    if not template_url:
        return record

    template_path = resolve_template_path(record.file_path, template_url)
    try:
        template_text = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read template file: %s (%s)", template_path, exc)
        return record

    return replace(record, template_text=template_text, template_path=str(template_path))


__all__ = ["load_template", "resolve_template_path"]
