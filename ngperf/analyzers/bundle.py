"""Import heuristics for bundle-size optimizations."""

from __future__ import annotations

from typing import List

from ..models import BundleOptimization, ComponentRecord
from .base import Rule
from .syntax import iter_nodes, node_location, parse_typescript, string_value

LARGE_LIBRARIES = ("lodash", "moment", "rxjs", "@angular/material")


def is_large_library(module_name: str) -> bool:
    return any(library in module_name for library in LARGE_LIBRARIES)


class BundleImportRule(Rule):
    """Suggests lazy loading for imports of known heavyweight libraries."""

    name = "bundle"
    family = "bundle"

    def evaluate(self, record: ComponentRecord) -> List[BundleOptimization]:
        tree = record.syntax_tree or parse_typescript(record.source_text)
        source_bytes = record.source_text.encode("utf-8")
        optimizations: List[BundleOptimization] = []
        for node in iter_nodes(tree.root_node):
            if node.type != "import_statement":
                continue
            source = node.child_by_field_name("source")
            module_name = string_value(source) if source is not None else None
            if module_name is None or not is_large_library(module_name):
                continue
            optimizations.append(
                BundleOptimization(
                    type="lazy-loading",
                    description=f"Large library '{module_name}' could be lazy loaded",
                    estimated_size_reduction="20-40KB",
                    implementation="Consider lazy loading this module or using dynamic imports",
                    module_name=module_name,
                    location=node_location(node, record.file_path, source_bytes),
                )
            )
        return optimizations


__all__ = ["BundleImportRule", "LARGE_LIBRARIES", "is_large_library"]
