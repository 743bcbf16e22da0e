"""Shared helpers for template-scanning rules."""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from ..models import CodeLocation, ComponentRecord

INLINE_TEMPLATE_LABEL = "inline template"

NG_FOR_PATTERN = re.compile(r'\*ngFor\s*=\s*"([^"]*)"')

_LARGE_COLLECTION_HINTS = ("users", "items")
# Placeholder estimate until the data source is actually inspected.
_ESTIMATED_COLLECTION_SIZE = 50


class NgForLoop(NamedTuple):
    expression: str
    location: CodeLocation
    has_track_by: bool
    estimated_size: int | None


def line_number(text: str, index: int) -> int:
    return text.count("\n", 0, index) + 1


def column_number(text: str, index: int) -> int:
    return index - (text.rfind("\n", 0, index) + 1) + 1


def template_location(record: ComponentRecord, match: re.Match[str]) -> CodeLocation:
    template = match.string
    return CodeLocation(
        file=record.template_path or INLINE_TEMPLATE_LABEL,
        line=line_number(template, match.start()),
        column=column_number(template, match.start()),
        snippet=match.group(0),
    )


def estimate_loop_size(expression: str) -> int | None:
    if any(hint in expression for hint in _LARGE_COLLECTION_HINTS):
        return _ESTIMATED_COLLECTION_SIZE
    return None


def find_ng_for_loops(record: ComponentRecord) -> Iterator[NgForLoop]:
    template = record.template_text or ""
    for match in NG_FOR_PATTERN.finditer(template):
        expression = match.group(1)
        yield NgForLoop(
            expression=expression,
            location=template_location(record, match),
            has_track_by="trackBy" in expression,
            estimated_size=estimate_loop_size(expression),
        )


__all__ = [
    "INLINE_TEMPLATE_LABEL",
    "NG_FOR_PATTERN",
    "NgForLoop",
    "column_number",
    "estimate_loop_size",
    "find_ng_for_loops",
    "line_number",
    "template_location",
]
