"""Decides whether a component is complex enough for OnPush to matter."""

from __future__ import annotations

import re
from typing import Optional, Pattern, Sequence

SOURCE_PROBES: Sequence[Pattern[str]] = (
    # injected services
    re.compile(r"constructor\s*\([^)]*\s+\w+Service", re.IGNORECASE),
    re.compile(r"constructor\s*\([^)]*\s+Http", re.IGNORECASE),
    re.compile(r"constructor\s*\([^)]*\s+Api", re.IGNORECASE),
    # lifecycle hooks
    re.compile(r"ngOnInit\s*\("),
    re.compile(r"ngOnChanges\s*\("),
    re.compile(r"ngAfterViewInit\s*\("),
    re.compile(r"ngOnDestroy\s*\("),
    # reactive streams
    re.compile(r"\.subscribe\s*\("),
    re.compile(r"Observable\s*<"),
    re.compile(r"Subject\s*<"),
    re.compile(r"BehaviorSubject\s*<"),
    # forms
    re.compile(r"FormBuilder"),
    re.compile(r"FormGroup"),
    re.compile(r"FormControl"),
    re.compile(r"Validators\."),
    # typed method with a non-trivial body
    re.compile(r"\w+\s*\([^)]*\)\s*:\s*\w+\s*\{[\s\S]{50,}"),
    # computed getter
    re.compile(r"get\s+\w+\s*\(\s*\)\s*\{[\s\S]{20,}"),
    # event handlers
    re.compile(r"on\w+\s*\("),
    re.compile(r"handle\w+\s*\("),
    # loosely typed inputs
    re.compile(r"@Input\(\)\s+\w+(?:\s*:\s*(?:any|object|\w+\[\]))"),
)

TEMPLATE_PROBES: Sequence[Pattern[str]] = (
    re.compile(r"\*ngFor"),
    re.compile(r"\*ngIf"),
    re.compile(r"\[ngSwitch\]"),
    re.compile(r"\(\w+\)\s*="),
    re.compile(r"\[\w+\]\s*="),
    re.compile(r"\{\{.*?\}\}"),
)

INTERPOLATION_PATTERN = re.compile(r"\{\{.*?\}\}")

MIN_SOURCE_PROBES = 2
MIN_SOURCE_PROBES_WITH_TEMPLATE = 1
MAX_PLAIN_INTERPOLATIONS = 3


def count_source_probes(source_text: str) -> int:
    return sum(1 for probe in SOURCE_PROBES if probe.search(source_text))


def has_template_structure(template_text: str) -> bool:
    return any(probe.search(template_text) for probe in TEMPLATE_PROBES)


def count_interpolations(template_text: str) -> int:
    return len(INTERPOLATION_PATTERN.findall(template_text))


def is_complex_component(source_text: str, template_text: Optional[str]) -> bool:
    """Return True when the component shows enough logic or bindings to warrant OnPush.

    Static display components stay below every threshold so they are not flagged.
    """
    template = template_text or ""
    source_count = count_source_probes(source_text)
    return (
        source_count >= MIN_SOURCE_PROBES
        or (has_template_structure(template) and source_count >= MIN_SOURCE_PROBES_WITH_TEMPLATE)
        or count_interpolations(template) > MAX_PLAIN_INTERPOLATIONS
    )


__all__ = [
    "count_interpolations",
    "count_source_probes",
    "has_template_structure",
    "is_complex_component",
]
