"""Tests for the change-detection rules."""

from __future__ import annotations

from dataclasses import replace

from ngperf.analyzers.change_detection import (
    ObjectComparisonRule,
    OnPushRule,
    TemplateFunctionCallRule,
)
from ngperf.analyzers.metadata import extract_component
from ngperf.models import ComponentRecord

_COMPLEX_SOURCE = """\
import { Component, OnInit } from '@angular/core';

@Component({
  selector: 'app-dashboard',
  templateUrl: './dashboard.component.html',
})
export class DashboardComponent implements OnInit {
  constructor(private statsService: StatsService) {}

  ngOnInit() {
    this.statsService.load();
  }
}
"""


def _record(source: str, template: str | None = None) -> ComponentRecord:
    record = extract_component("src/app/dashboard.component.ts", source)
    if template is None:
        return record
    return replace(record, template_text=template, template_path="src/app/dashboard.component.html")


def test_onpush_rule_flags_complex_default_component() -> None:
    issues = OnPushRule().evaluate(_record(_COMPLEX_SOURCE))

    assert len(issues) == 1
    issue = issues[0]
    assert issue.type == "missing-onpush"
    assert issue.severity == "high"
    assert issue.estimated_impact == "60% reduction in change detection cycles"
    assert issue.location.file == "src/app/dashboard.component.ts"
    assert issue.location.line == 3


def test_onpush_rule_respects_declared_strategy() -> None:
    source = _COMPLEX_SOURCE.replace(
        "  templateUrl: './dashboard.component.html',\n",
        "  templateUrl: './dashboard.component.html',\n  changeDetection: ChangeDetectionStrategy.OnPush,\n",
    )

    assert OnPushRule().evaluate(_record(source, "<p>{{ a }}{{ b }}{{ c }}{{ d }}</p>")) == []


def test_onpush_rule_flags_explicit_default_strategy() -> None:
    source = _COMPLEX_SOURCE.replace(
        "  templateUrl: './dashboard.component.html',\n",
        "  templateUrl: './dashboard.component.html',\n  changeDetection: ChangeDetectionStrategy.Default,\n",
    )

    issues = OnPushRule().evaluate(_record(source))

    assert [issue.type for issue in issues] == ["missing-onpush"]


def test_onpush_rule_skips_static_display_components() -> None:
    source = """\
@Component({ selector: 'app-footer', templateUrl: './footer.component.html' })
export class FooterComponent {
  year = 2024;
}
"""
    assert OnPushRule().evaluate(_record(source, "<footer>Copyright</footer>")) == []


def test_onpush_rule_falls_back_to_first_line_without_annotation() -> None:
    source = "export class Widget {\n  constructor(private api: ApiService) {}\n  ngOnInit() {}\n}\n"

    issues = OnPushRule().evaluate(_record(source))

    assert len(issues) == 1
    assert issues[0].location.line == 1
    assert issues[0].location.column == 1
    assert issues[0].location.snippet == "@Component({"


def test_function_call_rule_reports_zero_argument_calls() -> None:
    issues = TemplateFunctionCallRule().evaluate(_record(_COMPLEX_SOURCE, "<div>{{ greeting() }}</div>"))

    assert len(issues) == 1
    issue = issues[0]
    assert issue.type == "function-in-template"
    assert issue.severity == "high"
    assert issue.function_name == "greeting"
    assert issue.location.file == "src/app/dashboard.component.html"
    assert issue.location.line == 1
    assert issue.location.column == 6
    assert issue.location.snippet == "{{ greeting() }}"


def test_function_call_rule_ignores_calls_with_arguments_and_pipes() -> None:
    template = "<p>{{ format(user) }}</p>\n<p>{{ total | currency }}</p>"

    assert TemplateFunctionCallRule().evaluate(_record(_COMPLEX_SOURCE, template)) == []


def test_function_call_rule_computes_multiline_locations() -> None:
    template = "<ul>\n  <li>{{ first() }}</li>\n    <li>{{second()}}</li>\n</ul>"

    issues = TemplateFunctionCallRule().evaluate(_record(_COMPLEX_SOURCE, template))

    assert [(issue.function_name, issue.location.line, issue.location.column) for issue in issues] == [
        ("first", 2, 7),
        ("second", 3, 9),
    ]


def test_template_rules_skip_records_without_template() -> None:
    record = _record(_COMPLEX_SOURCE)

    assert TemplateFunctionCallRule().supports(record) is False
    assert ObjectComparisonRule().supports(record) is False


def test_object_comparison_rule_captures_expression() -> None:
    template = "<div *ngIf=\"user.role === 'admin'\">Admin</div>"

    issues = ObjectComparisonRule().evaluate(_record(_COMPLEX_SOURCE, template))

    assert len(issues) == 1
    assert issues[0].type == "object-comparison"
    assert issues[0].severity == "medium"
    assert issues[0].expression == "user.role === 'admin'"
    assert issues[0].description == "Object comparison in template: user.role === 'admin'"


def test_object_comparison_rule_ignores_plain_conditions() -> None:
    template = '<div *ngIf="isVisible">Shown</div>'

    assert ObjectComparisonRule().evaluate(_record(_COMPLEX_SOURCE, template)) == []
