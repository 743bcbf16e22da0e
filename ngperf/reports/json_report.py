"""JSON report shape: camelCase keys, stable across releases."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Dict, Mapping, Optional, Sequence

from ..models import (
    BundleOptimization,
    ChangeDetectionIssue,
    CodeLocation,
    ComponentAnalysis,
    IssueCount,
    ProjectSummary,
    Recommendation,
    SubscriptionIssue,
    TemplateIssue,
)

# Optional finding fields, omitted from the payload when unset.
_OPTIONAL_FIELDS = {
    "element_count": "elementCount",
    "function_name": "functionName",
    "expression": "expression",
    "variable_name": "variableName",
    "count": "count",
    "module_name": "moduleName",
}


def analysis_to_dict(analysis: ComponentAnalysis) -> Dict[str, Any]:
    return {
        "componentName": analysis.component_name,
        "filePath": analysis.file_path,
        "changeDetectionIssues": [_issue_to_dict(issue) for issue in analysis.change_detection_issues],
        "templateIssues": [_issue_to_dict(issue) for issue in analysis.template_issues],
        "subscriptionIssues": [_issue_to_dict(issue) for issue in analysis.subscription_issues],
        "bundleOptimizations": [_bundle_to_dict(item) for item in analysis.bundle_optimizations],
        "performanceScore": analysis.performance_score,
        "recommendations": [_recommendation_to_dict(item) for item in analysis.recommendations],
    }


def analysis_from_dict(payload: Mapping[str, Any]) -> ComponentAnalysis:
    return ComponentAnalysis(
        component_name=str(payload.get("componentName", "")),
        file_path=str(payload.get("filePath", "")),
        change_detection_issues=[
            ChangeDetectionIssue(
                type=item["type"],
                severity=item["severity"],
                location=_location_from_dict(item["location"]),
                description=item["description"],
                estimated_impact=item.get("estimatedImpact", ""),
                fix=item["fix"],
                function_name=item.get("functionName"),
                expression=item.get("expression"),
            )
            for item in payload.get("changeDetectionIssues", [])
        ],
        template_issues=[
            TemplateIssue(
                type=item["type"],
                severity=item["severity"],
                location=_location_from_dict(item["location"]),
                description=item["description"],
                fix=item["fix"],
                element_count=item.get("elementCount"),
                variable_name=item.get("variableName"),
            )
            for item in payload.get("templateIssues", [])
        ],
        subscription_issues=[
            SubscriptionIssue(
                type=item["type"],
                severity=item["severity"],
                location=_location_from_dict(item["location"]),
                description=item["description"],
                fix=item["fix"],
                variable_name=item.get("variableName"),
                count=item.get("count"),
            )
            for item in payload.get("subscriptionIssues", [])
        ],
        bundle_optimizations=[
            BundleOptimization(
                type=item["type"],
                description=item["description"],
                estimated_size_reduction=item["estimatedSizeReduction"],
                implementation=item["implementation"],
                module_name=item.get("moduleName"),
                location=_location_from_dict(item["location"]) if item.get("location") else None,
            )
            for item in payload.get("bundleOptimizations", [])
        ],
        performance_score=int(payload.get("performanceScore", 100)),
        recommendations=[
            Recommendation(
                priority=item["priority"],
                category=item["category"],
                title=item["title"],
                description=item["description"],
                implementation=item["implementation"],
                estimated_impact=item["estimatedImpact"],
            )
            for item in payload.get("recommendations", [])
        ],
    )


def summary_to_dict(summary: ProjectSummary) -> Dict[str, Any]:
    return {
        "totalComponents": summary.total_components,
        "totalIssues": summary.total_issues,
        "averagePerformanceScore": summary.average_performance_score,
        "analysisErrors": summary.analysis_errors,
        "issueBreakdown": dict(summary.issue_breakdown),
        "topIssues": [{"type": item.type, "count": item.count} for item in summary.top_issues],
    }


def summary_from_dict(payload: Mapping[str, Any]) -> ProjectSummary:
    return ProjectSummary(
        total_components=int(payload["totalComponents"]),
        total_issues=int(payload["totalIssues"]),
        average_performance_score=float(payload["averagePerformanceScore"]),
        analysis_errors=int(payload["analysisErrors"]),
        issue_breakdown={str(key): int(value) for key, value in payload["issueBreakdown"].items()},
        top_issues=[IssueCount(type=item["type"], count=int(item["count"])) for item in payload["topIssues"]],
    )


def build_json_report(
    analyses: Sequence[ComponentAnalysis],
    summary: Optional[ProjectSummary] = None,
    *,
    generated_at: datetime | None = None,
) -> Dict[str, Any]:
    timestamp = (generated_at or datetime.now(UTC)).isoformat().replace("+00:00", "Z")
    report: Dict[str, Any] = {}
    if summary is not None:
        report["summary"] = summary_to_dict(summary)
    report["analyses"] = [analysis_to_dict(analysis) for analysis in analyses]
    report["generatedAt"] = timestamp
    return report


def _location_to_dict(location: CodeLocation) -> Dict[str, Any]:
    return {
        "file": location.file,
        "line": location.line,
        "column": location.column,
        "snippet": location.snippet,
    }


def _location_from_dict(payload: Mapping[str, Any]) -> CodeLocation:
    return CodeLocation(
        file=str(payload["file"]),
        line=int(payload["line"]),
        column=int(payload["column"]),
        snippet=str(payload["snippet"]),
    )


def _issue_to_dict(issue: ChangeDetectionIssue | TemplateIssue | SubscriptionIssue) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "type": issue.type,
        "severity": issue.severity,
        "location": _location_to_dict(issue.location),
        "description": issue.description,
    }
    if isinstance(issue, ChangeDetectionIssue):
        data["estimatedImpact"] = issue.estimated_impact
    data["fix"] = issue.fix
    _add_optional_fields(data, issue)
    return data


def _bundle_to_dict(item: BundleOptimization) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "type": item.type,
        "description": item.description,
        "estimatedSizeReduction": item.estimated_size_reduction,
        "implementation": item.implementation,
    }
    _add_optional_fields(data, item)
    if item.location is not None:
        data["location"] = _location_to_dict(item.location)
    return data


def _recommendation_to_dict(item: Recommendation) -> Dict[str, Any]:
    return {
        "priority": item.priority,
        "category": item.category,
        "title": item.title,
        "description": item.description,
        "implementation": item.implementation,
        "estimatedImpact": item.estimated_impact,
    }


def _add_optional_fields(data: Dict[str, Any], item: object) -> None:
    for attribute, key in _OPTIONAL_FIELDS.items():
        value = getattr(item, attribute, None)
        if value is not None:
            data[key] = value


__all__ = [
    "analysis_from_dict",
    "analysis_to_dict",
    "build_json_report",
    "summary_from_dict",
    "summary_to_dict",
]
