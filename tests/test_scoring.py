from __future__ import annotations

from ngperf.models import ChangeDetectionIssue, CodeLocation, SubscriptionIssue, TemplateIssue
from ngperf.scoring import calculate_performance_score, generate_recommendations

_LOCATION = CodeLocation(file="a.component.ts", line=1, column=1, snippet="")


def _cd(issue_type: str = "missing-onpush", severity: str = "high") -> ChangeDetectionIssue:
    return ChangeDetectionIssue(
        type=issue_type,  # type: ignore[arg-type]
        severity=severity,  # type: ignore[arg-type]
        location=_LOCATION,
        description="",
        estimated_impact="",
        fix="",
    )


def _tpl(issue_type: str = "missing-trackby", severity: str = "high") -> TemplateIssue:
    return TemplateIssue(type=issue_type, severity=severity, location=_LOCATION, description="", fix="")  # type: ignore[arg-type]


def _sub(severity: str = "medium") -> SubscriptionIssue:
    return SubscriptionIssue(
        type="manual-subscription", severity=severity, location=_LOCATION, description="", fix=""  # type: ignore[arg-type]
    )


def test_score_starts_at_one_hundred() -> None:
    assert calculate_performance_score([], [], []) == 100


def test_score_deducts_weight_per_severity() -> None:
    score = calculate_performance_score([_cd()], [_tpl(severity="medium")], [_sub(severity="low")])

    assert score == 100 - 15 - 10 - 5


def test_score_is_clamped_at_zero() -> None:
    assert calculate_performance_score([_cd()] * 7, [], []) == 0


def test_no_findings_means_no_recommendations() -> None:
    assert generate_recommendations([], [], []) == []


def test_recommendations_follow_finding_triggers() -> None:
    recommendations = generate_recommendations([_cd()], [_tpl()], [_sub()])

    assert [(item.title, item.priority, item.category) for item in recommendations] == [
        ("Implement OnPush Change Detection", "high", "performance"),
        ("Add TrackBy Functions", "high", "performance"),
        ("Optimize Subscription Management", "medium", "memory"),
    ]


def test_other_findings_do_not_trigger_recommendations() -> None:
    recommendations = generate_recommendations(
        [_cd("function-in-template")], [_tpl("async-pipe-opportunity", "medium")], []
    )

    assert recommendations == []
