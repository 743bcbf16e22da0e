"""Change-detection rules: OnPush strategy, template function calls, object comparisons."""

from __future__ import annotations

import re
from typing import List

from ..models import OPTIMIZED_CHANGE_DETECTION, ChangeDetectionIssue, ComponentRecord
from .base import Rule
from .complexity import is_complex_component
from .metadata import default_annotation_location
from .utils import template_location

FUNCTION_CALL_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\(\s*\)\s*\}\}")
OBJECT_COMPARISON_PATTERN = re.compile(r'\*ngIf\s*=\s*"([^"]*\.\w+\s*===?\s*[^"]*)')


class OnPushRule(Rule):
    """Flags non-trivial components that keep the default change detection."""

    name = "onpush"
    family = "change-detection"

    def evaluate(self, record: ComponentRecord) -> List[ChangeDetectionIssue]:
        if record.metadata.change_detection == OPTIMIZED_CHANGE_DETECTION:
            return []
        if not is_complex_component(record.source_text, record.template_text):
            return []
        return [
            ChangeDetectionIssue(
                type="missing-onpush",
                severity="high",
                location=record.annotation_location or default_annotation_location(record.file_path),
                description="Component uses default change detection strategy",
                estimated_impact="60% reduction in change detection cycles",
                fix="Add ChangeDetectionStrategy.OnPush to component decorator",
            )
        ]


class TemplateFunctionCallRule(Rule):
    """Flags ``{{ fn() }}`` interpolations, which re-run on every change detection pass."""

    name = "function-calls"
    family = "change-detection"

    def supports(self, record: ComponentRecord) -> bool:
        return bool(record.template_text)

    def evaluate(self, record: ComponentRecord) -> List[ChangeDetectionIssue]:
        issues: List[ChangeDetectionIssue] = []
        for match in FUNCTION_CALL_PATTERN.finditer(record.template_text or ""):
            function_name = match.group(1)
            issues.append(
                ChangeDetectionIssue(
                    type="function-in-template",
                    severity="high",
                    location=template_location(record, match),
                    description=f"Function call '{function_name}' in template causes unnecessary re-execution",
                    estimated_impact="Significant performance degradation on each change detection",
                    fix="Move function call to component property or use pipe",
                    function_name=function_name,
                )
            )
        return issues


class ObjectComparisonRule(Rule):
    """Flags ``*ngIf`` conditions comparing property-access chains."""

    name = "object-comparison"
    family = "change-detection"

    def supports(self, record: ComponentRecord) -> bool:
        return bool(record.template_text)

    def evaluate(self, record: ComponentRecord) -> List[ChangeDetectionIssue]:
        issues: List[ChangeDetectionIssue] = []
        for match in OBJECT_COMPARISON_PATTERN.finditer(record.template_text or ""):
            expression = match.group(1)
            issues.append(
                ChangeDetectionIssue(
                    type="object-comparison",
                    severity="medium",
                    location=template_location(record, match),
                    description=f"Object comparison in template: {expression}",
                    estimated_impact="Unnecessary re-renders when object references change",
                    fix="Use trackBy function or compare primitive values",
                    expression=expression,
                )
            )
        return issues


__all__ = ["ObjectComparisonRule", "OnPushRule", "TemplateFunctionCallRule"]
