"""Markdown report rendering backed by Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ComponentAnalysis, ProjectSummary

_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
_REPORT_TEMPLATE = "report.md.j2"
_LOWEST_SCORE_LIMIT = 5
_SEVERITY_ORDER = ("high", "medium", "low")

SEVERITY_MARKERS = {"high": "🔴", "medium": "🟡", "low": "🟢"}
PRIORITY_MARKERS = {"high": "🔥", "medium": "⚡", "low": "💡"}


class MarkdownReportRenderer:
    """Renders analyses (and an optional project summary) as a Markdown report."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories = [str(_TEMPLATES_DIR)]
        if templates_dir is not None and templates_dir != _TEMPLATES_DIR:
            directories.insert(0, str(templates_dir))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(
        self,
        analyses: Sequence[ComponentAnalysis],
        summary: Optional[ProjectSummary] = None,
    ) -> str:
        template = self._env.get_template(_REPORT_TEMPLATE)
        average = 0.0
        if analyses:
            average = round(sum(a.performance_score for a in analyses) / len(analyses), 2)
        return template.render(
            analyses=analyses,
            average_score=_format_score(average),
            total_issues=sum(analysis.issue_count for analysis in analyses),
            distribution=score_distribution(analyses),
            lowest=sorted(analyses, key=lambda a: a.performance_score)[:_LOWEST_SCORE_LIMIT],
            components=[
                {"analysis": analysis, "issues": _issues_by_severity(analysis)} for analysis in analyses
            ],
            summary=summary,
            summary_average=_format_score(summary.average_performance_score) if summary else None,
            severity_markers=SEVERITY_MARKERS,
            priority_markers=PRIORITY_MARKERS,
        )


def render_report(
    analyses: Sequence[ComponentAnalysis],
    summary: Optional[ProjectSummary] = None,
) -> str:
    return MarkdownReportRenderer().render(analyses, summary)


def score_distribution(analyses: Sequence[ComponentAnalysis]) -> Dict[str, int]:
    distribution = {"excellent": 0, "good": 0, "fair": 0, "poor": 0}
    for analysis in analyses:
        score = analysis.performance_score
        if score >= 90:
            distribution["excellent"] += 1
        elif score >= 70:
            distribution["good"] += 1
        elif score >= 50:
            distribution["fair"] += 1
        else:
            distribution["poor"] += 1
    return distribution


def _issues_by_severity(analysis: ComponentAnalysis) -> List[object]:
    issues = [
        *analysis.change_detection_issues,
        *analysis.template_issues,
        *analysis.subscription_issues,
    ]
    return sorted(issues, key=lambda issue: _SEVERITY_ORDER.index(issue.severity))


def _format_score(value: float) -> str:
    # 87.0 renders as "87", 87.5 as "87.5".
    return str(int(value)) if value == int(value) else str(value)


__all__ = ["MarkdownReportRenderer", "render_report", "score_distribution"]
