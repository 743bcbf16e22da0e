"""Core data models shared across ngperf components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

Severity = Literal["high", "medium", "low"]
Priority = Literal["high", "medium", "low"]
Category = Literal["performance", "memory", "bundle-size"]

SEVERITY_WEIGHTS: Dict[str, int] = {
    "high": 15,
    "medium": 10,
    "low": 5,
}

# Histogram order; ties in the top-issue ranking fall back to this order.
ISSUE_TYPES: tuple[str, ...] = (
    "missing-onpush",
    "function-in-template",
    "missing-trackby",
    "manual-subscription",
    "async-pipe-opportunity",
    "large-ngfor",
    "object-comparison",
    "multiple-subscriptions",
)

OPTIMIZED_CHANGE_DETECTION = "OnPush"


@dataclass(frozen=True)
class CodeLocation:
    """Position of a finding; line and column are 1-based."""

    file: str
    line: int
    column: int
    snippet: str


@dataclass(frozen=True)
class ComponentMetadata:
    """Facts read from the ``@Component({...})`` literal."""

    selector: str = ""
    template_url: Optional[str] = None
    style_urls: Tuple[str, ...] = ()
    change_detection: Optional[str] = None
    inputs: Tuple[str, ...] = ()
    outputs: Tuple[str, ...] = ()
    providers: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ComponentRecord:
    """One parsed unit of analysis. Rules must treat it as read-only."""

    name: str
    file_path: str
    source_text: str
    metadata: ComponentMetadata = field(default_factory=ComponentMetadata)
    template_text: Optional[str] = None
    template_path: Optional[str] = None
    annotation_location: Optional[CodeLocation] = None
    syntax_tree: Any = field(default=None, compare=False, repr=False)


@dataclass
class ChangeDetectionIssue:
    type: Literal["missing-onpush", "function-in-template", "object-comparison"]
    severity: Severity
    location: CodeLocation
    description: str
    estimated_impact: str
    fix: str
    function_name: Optional[str] = None
    expression: Optional[str] = None


@dataclass
class TemplateIssue:
    type: Literal["missing-trackby", "async-pipe-opportunity", "large-ngfor"]
    severity: Severity
    location: CodeLocation
    description: str
    fix: str
    element_count: Optional[int] = None
    variable_name: Optional[str] = None


@dataclass
class SubscriptionIssue:
    type: Literal["manual-subscription", "multiple-subscriptions"]
    severity: Severity
    location: CodeLocation
    description: str
    fix: str
    variable_name: Optional[str] = None
    count: Optional[int] = None


@dataclass
class BundleOptimization:
    """Lazy-loading opportunity; carries no severity and is never scored."""

    type: Literal["lazy-loading"]
    description: str
    estimated_size_reduction: str
    implementation: str
    module_name: Optional[str] = None
    location: Optional[CodeLocation] = None


@dataclass
class Recommendation:
    priority: Priority
    category: Category
    title: str
    description: str
    implementation: str
    estimated_impact: str


@dataclass
class ComponentAnalysis:
    """Per-file analysis result."""

    component_name: str
    file_path: str
    change_detection_issues: List[ChangeDetectionIssue] = field(default_factory=list)
    template_issues: List[TemplateIssue] = field(default_factory=list)
    subscription_issues: List[SubscriptionIssue] = field(default_factory=list)
    bundle_optimizations: List[BundleOptimization] = field(default_factory=list)
    performance_score: int = 100
    recommendations: List[Recommendation] = field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return (
            len(self.change_detection_issues)
            + len(self.template_issues)
            + len(self.subscription_issues)
        )


@dataclass
class IssueCount:
    type: str
    count: int


@dataclass
class ProjectSummary:
    """Aggregate view over many component analyses."""

    total_components: int
    total_issues: int
    average_performance_score: float
    analysis_errors: int
    issue_breakdown: Dict[str, int]
    top_issues: List[IssueCount]


Finding = ChangeDetectionIssue | TemplateIssue | SubscriptionIssue | BundleOptimization
