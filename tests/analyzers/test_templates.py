from __future__ import annotations

import logging

import pytest

from ngperf.analyzers.metadata import extract_component
from ngperf.analyzers.templates import load_template, resolve_template_path


def test_load_template_reads_sibling_file(component_builder) -> None:
    path = component_builder.component(
        "src/app/card.component.ts",
        class_name="CardComponent",
        template="<h2>{{ title }}</h2>\n",
    )
    record = extract_component(str(path), path.read_text(encoding="utf-8"))

    loaded = load_template(record, logging.getLogger("ngperf.test"))

    assert loaded.template_text == "<h2>{{ title }}</h2>\n"
    assert loaded.template_path == str(path.parent / "card.component.html")
    assert loaded.name == record.name


def test_load_template_missing_file_logs_warning(
    component_builder, caplog: pytest.LogCaptureFixture
) -> None:
    path = component_builder.component("src/app/ghost.component.ts", class_name="GhostComponent")
    source = path.read_text(encoding="utf-8").replace(
        "selector: 'app-ghostcomponent',",
        "selector: 'app-ghostcomponent',\n  templateUrl: './ghost.component.html',",
    )
    record = extract_component(str(path), source)

    with caplog.at_level(logging.WARNING, logger="ngperf.test"):
        loaded = load_template(record, logging.getLogger("ngperf.test"))

    assert loaded is record
    assert loaded.template_text is None
    assert "Could not read template file" in caplog.text


def test_load_template_without_template_url_is_noop() -> None:
    record = extract_component("inline.component.ts", "@Component({ selector: 'x' })\nclass InlineComponent {}\n")

    assert load_template(record, logging.getLogger("ngperf.test")) is record


def test_resolve_template_path_is_relative_to_component() -> None:
    resolved = resolve_template_path("src/app/user/user.component.ts", "../shared/user.html")

    assert resolved.as_posix() == "src/app/user/../shared/user.html"
