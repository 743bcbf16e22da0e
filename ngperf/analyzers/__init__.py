"""Rule implementations and discovery utilities."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .base import Family, Rule
from .bundle import BundleImportRule
from .change_detection import ObjectComparisonRule, OnPushRule, TemplateFunctionCallRule
from .complexity import is_complex_component
from .metadata import extract_component
from .subscriptions import ManualSubscriptionRule
from .template_rules import AsyncPipeRule, LargeListRule, TrackByRule
from .templates import load_template

# Order matters: findings within a family are reported in rule order.
_BUILTIN_FACTORIES: dict[str, Callable[[], Rule]] = {
    "onpush": OnPushRule,
    "function-calls": TemplateFunctionCallRule,
    "object-comparison": ObjectComparisonRule,
    "trackby": TrackByRule,
    "async-pipe": AsyncPipeRule,
    "large-list": LargeListRule,
    "subscriptions": ManualSubscriptionRule,
    "bundle": BundleImportRule,
}


def available_rules() -> List[str]:
    return list(_BUILTIN_FACTORIES)


def discover_rules(enabled: Sequence[str] | None = None) -> List[Rule]:
    """Return instantiated rules, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set.difference(_BUILTIN_FACTORIES)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown rules requested: {missing}")

    rules: List[Rule] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        instance = factory()
        if not isinstance(instance, Rule):
            raise TypeError(f"Rule factory for '{name}' did not return a Rule instance")
        rules.append(instance)
    return rules


__all__ = [
    "Family",
    "Rule",
    "available_rules",
    "discover_rules",
    "extract_component",
    "is_complex_component",
    "load_template",
]
