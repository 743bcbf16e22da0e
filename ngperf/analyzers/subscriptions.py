"""Subscription lifecycle rule built on the tree-sitter syntax tree."""

from __future__ import annotations

from typing import List

from tree_sitter import Node

from ..models import ComponentRecord, SubscriptionIssue
from .base import Rule
from .metadata import default_annotation_location
from .syntax import node_location, node_text, parse_typescript, walk

MULTIPLE_SUBSCRIPTIONS_THRESHOLD = 3


def _subscribe_receiver(node: Node) -> Node | None:
    """Return the receiver of ``<receiver>.subscribe(...)`` calls, else None."""
    if node.type != "call_expression":
        return None
    function = node.child_by_field_name("function")
    if function is None or function.type != "member_expression":
        return None
    if node_text(function.child_by_field_name("property")) != "subscribe":
        return None
    return function.child_by_field_name("object")


class ManualSubscriptionRule(Rule):
    """Flags manual ``.subscribe()`` calls and components juggling many of them."""

    name = "subscriptions"
    family = "subscription"

    def evaluate(self, record: ComponentRecord) -> List[SubscriptionIssue]:
        tree = record.syntax_tree or parse_typescript(record.source_text)
        source_bytes = record.source_text.encode("utf-8")
        issues: List[SubscriptionIssue] = []

        def visit(node: Node) -> None:
            receiver = _subscribe_receiver(node)
            if receiver is None:
                return
            variable_name = node_text(receiver)
            issues.append(
                SubscriptionIssue(
                    type="manual-subscription",
                    severity="medium",
                    location=node_location(node, record.file_path, source_bytes),
                    description=f"Manual subscription without proper cleanup: {variable_name}",
                    fix="Use async pipe, takeUntil pattern, or implement OnDestroy",
                    variable_name=variable_name,
                )
            )

        walk(tree.root_node, visit)

        if len(issues) > MULTIPLE_SUBSCRIPTIONS_THRESHOLD:
            issues.append(
                SubscriptionIssue(
                    type="multiple-subscriptions",
                    severity="low",
                    location=record.annotation_location or default_annotation_location(record.file_path),
                    description=f"Component has {len(issues)} manual subscriptions",
                    fix="Consider combining subscriptions using combineLatest or merge operators",
                    count=len(issues),
                )
            )
        return issues


__all__ = ["MULTIPLE_SUBSCRIPTIONS_THRESHOLD", "ManualSubscriptionRule"]
