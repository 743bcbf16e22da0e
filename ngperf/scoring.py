"""Performance score computation and recommendation synthesis."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .models import (
    SEVERITY_WEIGHTS,
    ChangeDetectionIssue,
    Recommendation,
    SubscriptionIssue,
    TemplateIssue,
)

MAX_SCORE = 100


def calculate_performance_score(
    change_detection_issues: Sequence[ChangeDetectionIssue],
    template_issues: Sequence[TemplateIssue],
    subscription_issues: Sequence[SubscriptionIssue],
) -> int:
    """Deduct a fixed weight per finding severity from 100, never going below 0."""
    score = MAX_SCORE
    for issues in (change_detection_issues, template_issues, subscription_issues):
        score -= _total_weight(issue.severity for issue in issues)
    return max(0, score)


def _total_weight(severities: Iterable[str]) -> int:
    return sum(SEVERITY_WEIGHTS.get(severity, 0) for severity in severities)


def generate_recommendations(
    change_detection_issues: Sequence[ChangeDetectionIssue],
    template_issues: Sequence[TemplateIssue],
    subscription_issues: Sequence[SubscriptionIssue],
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []

    if any(issue.type == "missing-onpush" for issue in change_detection_issues):
        recommendations.append(
            Recommendation(
                priority="high",
                category="performance",
                title="Implement OnPush Change Detection",
                description="Switch to OnPush strategy to dramatically reduce change detection cycles",
                implementation="Add ChangeDetectionStrategy.OnPush to @Component decorator",
                estimated_impact="60% reduction in change detection overhead",
            )
        )

    if any(issue.type == "missing-trackby" for issue in template_issues):
        recommendations.append(
            Recommendation(
                priority="high",
                category="performance",
                title="Add TrackBy Functions",
                description="Implement trackBy functions for all ngFor loops to prevent unnecessary DOM updates",
                implementation="Create trackBy functions that return unique identifiers for list items",
                estimated_impact="Eliminate unnecessary DOM re-renders for list updates",
            )
        )

    if subscription_issues:
        recommendations.append(
            Recommendation(
                priority="medium",
                category="memory",
                title="Optimize Subscription Management",
                description="Replace manual subscriptions with async pipes or proper cleanup",
                implementation="Use async pipe in templates or implement takeUntil pattern",
                estimated_impact="Prevent memory leaks and improve component cleanup",
            )
        )

    return recommendations


__all__ = ["MAX_SCORE", "calculate_performance_score", "generate_recommendations"]
