"""Template performance rules for list rendering and async bindings."""

from __future__ import annotations

import re
from typing import List

from ..models import ComponentRecord, TemplateIssue
from .base import Rule
from .utils import find_ng_for_loops, template_location

LARGE_LIST_THRESHOLD = 100

BARE_INTERPOLATION_PATTERN = re.compile(r"\{\{\s*([\w$]+)\s*\}\}")
_STREAM_NAME_HINTS = ("$", "subscription", "observable", "stream")


def is_subscription_variable(name: str) -> bool:
    return any(hint in name for hint in _STREAM_NAME_HINTS)


class TrackByRule(Rule):
    """Flags ``*ngFor`` loops without a trackBy function."""

    name = "trackby"
    family = "template"

    def supports(self, record: ComponentRecord) -> bool:
        return bool(record.template_text)

    def evaluate(self, record: ComponentRecord) -> List[TemplateIssue]:
        return [
            TemplateIssue(
                type="missing-trackby",
                severity="high",
                location=loop.location,
                description="*ngFor loop missing trackBy function",
                fix="Add trackBy function to prevent unnecessary DOM manipulations",
                element_count=loop.estimated_size,
            )
            for loop in find_ng_for_loops(record)
            if not loop.has_track_by
        ]


class AsyncPipeRule(Rule):
    """Flags interpolated stream-like members that could be bound with ``| async``."""

    name = "async-pipe"
    family = "template"

    def supports(self, record: ComponentRecord) -> bool:
        return bool(record.template_text)

    def evaluate(self, record: ComponentRecord) -> List[TemplateIssue]:
        issues: List[TemplateIssue] = []
        for match in BARE_INTERPOLATION_PATTERN.finditer(record.template_text or ""):
            variable_name = match.group(1)
            if not is_subscription_variable(variable_name):
                continue
            issues.append(
                TemplateIssue(
                    type="async-pipe-opportunity",
                    severity="medium",
                    location=template_location(record, match),
                    description="Manual subscription can be replaced with async pipe",
                    fix="Replace manual subscription with async pipe for automatic unsubscription",
                    variable_name=variable_name,
                )
            )
        return issues


class LargeListRule(Rule):
    """Flags ``*ngFor`` loops whose estimated size calls for virtual scrolling."""

    name = "large-list"
    family = "template"

    def supports(self, record: ComponentRecord) -> bool:
        return bool(record.template_text)

    def evaluate(self, record: ComponentRecord) -> List[TemplateIssue]:
        return [
            TemplateIssue(
                type="large-ngfor",
                severity="high",
                location=loop.location,
                description=f"Large ngFor loop with ~{loop.estimated_size} items",
                fix="Consider virtual scrolling or pagination for large lists",
                element_count=loop.estimated_size,
            )
            for loop in find_ng_for_loops(record)
            if loop.estimated_size is not None and loop.estimated_size > LARGE_LIST_THRESHOLD
        ]


__all__ = [
    "AsyncPipeRule",
    "LARGE_LIST_THRESHOLD",
    "LargeListRule",
    "TrackByRule",
    "is_subscription_variable",
]
