from __future__ import annotations

import pytest

from ngperf.analyzer import PerformanceAnalyzer
from ngperf.analyzers import discover_rules


def test_unannotated_file_scores_full_marks(tmp_path) -> None:
    path = tmp_path / "util.ts"
    path.write_text("export const VERSION = '1.0.0';\n", encoding="utf-8")

    analysis = PerformanceAnalyzer().analyze_file(path)

    assert analysis.component_name == ""
    assert analysis.performance_score == 100
    assert analysis.issue_count == 0
    assert analysis.recommendations == []


def test_analyze_file_buckets_findings_and_scores(component_builder) -> None:
    path = component_builder.component(
        "src/app/users/users.component.ts",
        class_name="UsersComponent",
        imports="import { Component } from '@angular/core';\nimport * as _ from 'lodash';",
        body=(
            "  constructor(private userService: UserService) {}\n"
            "  ngOnInit() {\n"
            "    this.userService.users$.subscribe(users => this.users = users);\n"
            "  }"
        ),
        template='<li *ngFor="let user of users">{{ label() }}</li>\n',
    )

    analysis = PerformanceAnalyzer().analyze_file(path)

    assert analysis.component_name == "UsersComponent"
    assert [issue.type for issue in analysis.change_detection_issues] == [
        "missing-onpush",
        "function-in-template",
    ]
    assert [issue.type for issue in analysis.template_issues] == ["missing-trackby"]
    assert [issue.type for issue in analysis.subscription_issues] == ["manual-subscription"]
    assert [item.module_name for item in analysis.bundle_optimizations] == ["lodash"]
    assert analysis.performance_score == 100 - 15 - 15 - 15 - 10
    assert [item.title for item in analysis.recommendations] == [
        "Implement OnPush Change Detection",
        "Add TrackBy Functions",
        "Optimize Subscription Management",
    ]


def test_analyzer_runs_only_configured_rules(component_builder) -> None:
    path = component_builder.component(
        "src/app/plain.component.ts",
        class_name="PlainComponent",
        imports="import { Component } from '@angular/core';\nimport * as moment from 'moment';",
    )

    analysis = PerformanceAnalyzer(rules=discover_rules(["onpush"])).analyze_file(path)

    assert analysis.bundle_optimizations == []


def test_analyze_file_propagates_read_errors(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        PerformanceAnalyzer().analyze_file(tmp_path / "missing.component.ts")
