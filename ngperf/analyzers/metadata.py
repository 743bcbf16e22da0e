"""Extracts component metadata from the ``@Component`` decorator of a source file."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tree_sitter import Node

from ..models import CodeLocation, ComponentMetadata, ComponentRecord
from .syntax import iter_nodes, node_location, node_text, parse_typescript, string_value

_CLASS_NODE_TYPES = {"class_declaration", "abstract_class_declaration"}
_COMPONENT_DECORATOR = "Component"


def extract_component(file_path: str, source_text: str) -> ComponentRecord:
    """Build a ComponentRecord (without template text) from raw source.

    Only the first annotated class is considered. Sources without one produce a
    record with an empty name and default metadata.
    """
    tree = parse_typescript(source_text)
    source_bytes = source_text.encode("utf-8")

    for node in iter_nodes(tree.root_node):
        if node.type not in _CLASS_NODE_TYPES:
            continue
        decorator = _find_component_decorator(node)
        if decorator is None:
            continue
        call = _decorator_call(decorator)
        metadata = ComponentMetadata()
        arguments = _call_arguments(call) if call is not None else []
        if arguments and arguments[0].type == "object":
            metadata = parse_component_metadata(arguments[0])
        location = node_location(decorator, file_path, source_bytes)
        return ComponentRecord(
            name=node_text(node.child_by_field_name("name")),
            file_path=file_path,
            source_text=source_text,
            metadata=metadata,
            annotation_location=replace(location, snippet=location.snippet.splitlines()[0]),
            syntax_tree=tree,
        )

    return ComponentRecord(
        name="",
        file_path=file_path,
        source_text=source_text,
        syntax_tree=tree,
    )


def parse_component_metadata(literal: Node) -> ComponentMetadata:
    fields: Dict[str, Any] = {}
    for pair in literal.children:
        if pair.type != "pair":
            continue
        key = pair.child_by_field_name("key")
        value = pair.child_by_field_name("value")
        if key is None or value is None or key.type != "property_identifier":
            continue
        name = node_text(key)

        if name == "selector":
            selector = string_value(value)
            if selector is not None:
                fields["selector"] = selector
        elif name == "templateUrl":
            fields["template_url"] = string_value(value)
        elif name == "changeDetection" and value.type == "member_expression":
            fields["change_detection"] = node_text(value.child_by_field_name("property"))
        elif name == "inputs":
            fields["inputs"] = _string_elements(value)
        elif name == "outputs":
            fields["outputs"] = _string_elements(value)
        elif name == "styleUrls":
            fields["style_urls"] = _string_elements(value)
        elif name == "providers" and value.type == "array":
            fields["providers"] = tuple(
                node_text(element) for element in value.named_children if element.type != "comment"
            )
    return ComponentMetadata(**fields)


def _find_component_decorator(class_node: Node) -> Optional[Node]:
    for decorator in _decorators_for(class_node):
        call = _decorator_call(decorator)
        if call is None:
            continue
        function = call.child_by_field_name("function")
        if function is not None and function.type == "identifier" and node_text(function) == _COMPONENT_DECORATOR:
            return decorator
    return None


def _decorators_for(class_node: Node) -> Iterable[Node]:
    # `@Component(...) export class X` attaches the decorator to the export statement.
    yield from (child for child in class_node.children if child.type == "decorator")
    parent = class_node.parent
    if parent is not None and parent.type == "export_statement":
        yield from (child for child in parent.children if child.type == "decorator")


def _decorator_call(decorator: Node) -> Optional[Node]:
    for child in decorator.named_children:
        if child.type == "call_expression":
            return child
    return None


def _call_arguments(call: Node) -> List[Node]:
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return []
    return [child for child in arguments.named_children if child.type != "comment"]


def _string_elements(value: Node) -> Tuple[str, ...]:
    if value.type != "array":
        return ()
    items: List[str] = []
    for element in value.named_children:
        text = string_value(element)
        if text is not None:
            items.append(text)
    return tuple(items)


def default_annotation_location(file_path: str) -> CodeLocation:
    return CodeLocation(file=file_path, line=1, column=1, snippet="@Component({")


__all__ = ["default_annotation_location", "extract_component", "parse_component_metadata"]
