"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ngperf.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "project"])
    assert args.verbose is True
    assert args.command == "project"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["component", "app.component.ts", "-v"])
    assert args.verbose is True
    assert args.command == "component"


def test_cli_accepts_output_and_format_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["project", "src", "-o", "out.json", "-f", "json"])
    assert args.path == "src"
    assert args.output == "out.json"
    assert args.format == "json"


def test_cli_rejects_unknown_format() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["project", "-f", "html"])


def test_cli_report_has_no_format_flag() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["report", "-f", "json"])


def test_help_command_prints_usage(capsys: pytest.CaptureFixture[str]) -> None:
    main(["help"])
    out = capsys.readouterr().out
    assert "usage: ngperf" in out
    assert "component" in out


def test_component_command_missing_file_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["component", str(tmp_path / "ghost.component.ts")])
    assert excinfo.value.code == 1
    assert "Component file not found" in capsys.readouterr().err


def test_component_command_prints_results(component_builder, capsys: pytest.CaptureFixture[str]) -> None:
    path = component_builder.component(
        "src/app/list.component.ts",
        class_name="ListComponent",
        template='<li *ngFor="let user of users">{{ user }}</li>\n',
    )

    main(["component", str(path)])

    out = capsys.readouterr().out
    assert "Component Analysis Results:" in out
    assert "Name: ListComponent" in out
    assert "Top Recommendations:" in out
    assert "Add TrackBy Functions (high priority)" in out
    assert "Completed in" in out


def test_component_command_writes_json(component_builder, tmp_path: Path) -> None:
    path = component_builder.component("src/app/plain.component.ts", class_name="PlainComponent")
    target = tmp_path / "reports" / "plain.json"

    main(["component", str(path), "-o", str(target), "-f", "json"])

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["analyses"][0]["componentName"] == "PlainComponent"
    assert "summary" not in payload


def test_project_command_prints_markdown(component_builder, capsys: pytest.CaptureFixture[str]) -> None:
    component_builder.component("src/app/plain.component.ts", class_name="PlainComponent")

    main(["project", str(component_builder.path())])

    out = capsys.readouterr().out
    assert "# Angular Performance Analysis Report" in out
    assert "Analysis Summary:" in out
    assert "Components: 1" in out


def test_project_command_reports_config_errors(component_builder, capsys: pytest.CaptureFixture[str]) -> None:
    component_builder.write({".ngperf.yml": "report:\n  format: pdf\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["project", str(component_builder.path())])
    assert excinfo.value.code == 1
    assert "ngperf project failed" in capsys.readouterr().err
