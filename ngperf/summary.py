"""Project-level aggregation of component analyses."""

from __future__ import annotations

from itertools import chain
from typing import Dict, List, Sequence

from .models import ISSUE_TYPES, ComponentAnalysis, IssueCount, ProjectSummary

TOP_ISSUE_LIMIT = 3


def generate_project_summary(
    analyses: Sequence[ComponentAnalysis],
    success_count: int,
    error_count: int,
) -> ProjectSummary:
    """Fold per-file results into totals, an average score and an issue histogram."""
    total_issues = sum(analysis.issue_count for analysis in analyses)

    average_score = 0.0
    if analyses:
        average_score = sum(analysis.performance_score for analysis in analyses) / len(analyses)

    breakdown: Dict[str, int] = {issue_type: 0 for issue_type in ISSUE_TYPES}
    for analysis in analyses:
        for issue in chain(
            analysis.change_detection_issues,
            analysis.template_issues,
            analysis.subscription_issues,
        ):
            if issue.type not in breakdown:
                raise ValueError(f"Unknown issue type '{issue.type}' in {analysis.file_path}")
            breakdown[issue.type] += 1

    return ProjectSummary(
        total_components=success_count,
        total_issues=total_issues,
        average_performance_score=round(average_score, 2),
        analysis_errors=error_count,
        issue_breakdown=breakdown,
        top_issues=top_issues(breakdown),
    )


def top_issues(breakdown: Dict[str, int], limit: int = TOP_ISSUE_LIMIT) -> List[IssueCount]:
    # sorted() is stable, so equal counts keep histogram order.
    ranked = sorted(breakdown.items(), key=lambda item: item[1], reverse=True)
    return [IssueCount(type=issue_type, count=count) for issue_type, count in ranked[:limit]]


__all__ = ["TOP_ISSUE_LIMIT", "generate_project_summary", "top_issues"]
