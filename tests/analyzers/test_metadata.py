"""Tests for component metadata extraction."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from ngperf.analyzers.metadata import extract_component


_ANNOTATED = """\
import { ChangeDetectionStrategy, Component } from '@angular/core';
import { UserService } from './user.service';

@Component({
  selector: 'app-user',
  templateUrl: './user.component.html',
  styleUrls: ['./user.component.css'],
  changeDetection: ChangeDetectionStrategy.OnPush,
  inputs: ['user', 'mode'],
  outputs: ['selected'],
  providers: [UserService],
  animations: [],
})
export class UserComponent {
  constructor(private users: UserService) {}
}
"""


def test_extract_component_reads_decorator_metadata() -> None:
    record = extract_component("src/app/user.component.ts", _ANNOTATED)

    assert record.name == "UserComponent"
    assert record.file_path == "src/app/user.component.ts"
    assert record.template_text is None
    assert record.metadata.selector == "app-user"
    assert record.metadata.template_url == "./user.component.html"
    assert record.metadata.style_urls == ("./user.component.css",)
    assert record.metadata.change_detection == "OnPush"
    assert record.metadata.inputs == ("user", "mode")
    assert record.metadata.outputs == ("selected",)
    assert record.metadata.providers == ("UserService",)


def test_extract_component_records_annotation_location() -> None:
    record = extract_component("user.component.ts", _ANNOTATED)

    assert record.annotation_location is not None
    assert record.annotation_location.line == 4
    assert record.annotation_location.column == 1
    assert record.annotation_location.snippet == "@Component({"


def test_extract_component_without_class_or_annotation_keeps_defaults() -> None:
    record = extract_component("util.ts", "export const answer = 42;\n")

    assert record.name == ""
    assert record.metadata.selector == ""
    assert record.metadata.template_url is None
    assert record.metadata.change_detection is None
    assert record.metadata.inputs == ()
    assert record.annotation_location is None


def test_extract_component_ignores_undecorated_classes() -> None:
    record = extract_component("plain.ts", "export class Plain {\n  value = 1;\n}\n")

    assert record.name == ""


def test_extract_component_uses_first_annotated_class() -> None:
    source = """\
import { Component } from '@angular/core';

class Helper {}

@Component({ selector: 'app-first' })
export class FirstComponent {}

@Component({ selector: 'app-second' })
export class SecondComponent {}
"""
    record = extract_component("multi.component.ts", source)

    assert record.name == "FirstComponent"
    assert record.metadata.selector == "app-first"


def test_extract_component_requires_literal_values() -> None:
    source = """\
const SELECTOR = 'app-dynamic';

@Component({
  selector: SELECTOR,
  templateUrl: `./dynamic.component.html`,
  changeDetection: strategy,
})
class DynamicComponent {}
"""
    record = extract_component("dynamic.component.ts", source)

    assert record.name == "DynamicComponent"
    assert record.metadata.selector == ""
    assert record.metadata.template_url is None
    assert record.metadata.change_detection is None


def test_extract_component_tolerates_malformed_source() -> None:
    record = extract_component("broken.component.ts", "@Component({ selector: \nexport class {{{")

    assert record.file_path == "broken.component.ts"
    assert record.metadata.template_url is None


def test_extracted_metadata_is_read_only() -> None:
    record = extract_component("src/app/user.component.ts", _ANNOTATED)

    with pytest.raises(FrozenInstanceError):
        record.metadata.selector = "app-other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        record.metadata.inputs.append("extra")  # type: ignore[attr-defined]
    with pytest.raises(FrozenInstanceError):
        record.metadata = record.metadata  # type: ignore[misc]

    assert record.metadata.selector == "app-user"
    assert record.metadata.inputs == ("user", "mode")


def test_extract_component_decodes_string_escapes() -> None:
    source = r"""
@Component({
  selector: 'app-\x65scaped',
  templateUrl: './x\u002ecomponent.html',
  styleUrls: ["./it\'s.css", './\u{61}.css'],
})
export class EscapedComponent {}
"""
    record = extract_component("src/app/x.component.ts", source)

    assert record.metadata.selector == "app-escaped"
    assert record.metadata.template_url == "./x.component.html"
    assert record.metadata.style_urls == ("./it's.css", "./a.css")
