"""Static performance auditing for Angular components."""

from .analyzer import PerformanceAnalyzer
from .models import (
    BundleOptimization,
    ChangeDetectionIssue,
    CodeLocation,
    ComponentAnalysis,
    ComponentMetadata,
    ComponentRecord,
    IssueCount,
    ProjectSummary,
    Recommendation,
    SubscriptionIssue,
    TemplateIssue,
)
from .orchestrator import Orchestrator, ProjectResult
from .summary import generate_project_summary

__version__ = "1.0.0"

__all__ = [
    "BundleOptimization",
    "ChangeDetectionIssue",
    "CodeLocation",
    "ComponentAnalysis",
    "ComponentMetadata",
    "ComponentRecord",
    "IssueCount",
    "Orchestrator",
    "PerformanceAnalyzer",
    "ProjectResult",
    "ProjectSummary",
    "Recommendation",
    "SubscriptionIssue",
    "TemplateIssue",
    "generate_project_summary",
]
