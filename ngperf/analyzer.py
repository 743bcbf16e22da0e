"""Per-component analysis: extraction, rule evaluation and scoring."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .analyzers import Rule, discover_rules, extract_component, load_template
from .logging import get_logger
from .models import (
    BundleOptimization,
    ChangeDetectionIssue,
    ComponentAnalysis,
    ComponentRecord,
    SubscriptionIssue,
    TemplateIssue,
)
from .scoring import calculate_performance_score, generate_recommendations


class PerformanceAnalyzer:
    """Runs every enabled rule against one component file at a time.

    The analyzer keeps no per-file state, so a single instance can be reused
    across a whole project run.
    """

    def __init__(
        self,
        rules: Optional[Iterable[Rule]] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.rules: List[Rule] = list(rules) if rules is not None else discover_rules()
        self.logger = logger or get_logger("analyzer")

    def analyze_file(self, path: str | Path) -> ComponentAnalysis:
        """Read ``path`` and analyze it; I/O and decode errors propagate."""
        file_path = Path(path)
        source_text = file_path.read_text(encoding="utf-8")
        return self.analyze_component(str(file_path), source_text)

    def analyze_component(self, file_path: str, source_text: str) -> ComponentAnalysis:
        record = self.build_record(file_path, source_text)
        return self.analyze_record(record)

    def build_record(self, file_path: str, source_text: str) -> ComponentRecord:
        record = extract_component(file_path, source_text)
        if not record.name:
            self.logger.debug("No @Component class found in %s", file_path)
        return load_template(record, self.logger)

    def analyze_record(self, record: ComponentRecord) -> ComponentAnalysis:
        change_detection: List[ChangeDetectionIssue] = []
        template: List[TemplateIssue] = []
        subscription: List[SubscriptionIssue] = []
        bundle: List[BundleOptimization] = []
        buckets = {
            "change-detection": change_detection,
            "template": template,
            "subscription": subscription,
            "bundle": bundle,
        }

        for rule in self.rules:
            if not rule.supports(record):
                continue
            findings = rule.evaluate(record)
            self.logger.debug("Rule %s produced %d findings for %s", rule.name, len(findings), record.file_path)
            buckets[rule.family].extend(findings)  # type: ignore[arg-type]

        return ComponentAnalysis(
            component_name=record.name,
            file_path=record.file_path,
            change_detection_issues=change_detection,
            template_issues=template,
            subscription_issues=subscription,
            bundle_optimizations=bundle,
            performance_score=calculate_performance_score(change_detection, template, subscription),
            recommendations=generate_recommendations(change_detection, template, subscription),
        )


__all__ = ["PerformanceAnalyzer"]
