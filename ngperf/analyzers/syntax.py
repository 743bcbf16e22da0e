"""Tree-sitter helpers for parsing and walking TypeScript sources."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Iterator, List, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from ..models import CodeLocation

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


@lru_cache(maxsize=1)
def _typescript_language() -> Language:
    return Language(tree_sitter_typescript.language_typescript())


def parse_typescript(source_text: str) -> Tree:
    """Parse TypeScript source; malformed input yields ERROR nodes, not exceptions."""
    parser = Parser(_typescript_language())
    return parser.parse(source_text.encode("utf-8"))


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants depth-first in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def walk(node: Node, visit: Callable[[Node], None]) -> None:
    for current in iter_nodes(node):
        visit(current)


def node_text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


def string_value(node: Node) -> Optional[str]:
    """Return the decoded contents of a quoted ``string`` node, or None for anything else."""
    if node.type != "string":
        return None
    parts: List[str] = []
    for child in node.children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(decode_escape(node_text(child)))
    return "".join(parts)


def decode_escape(sequence: str) -> str:
    """Decode one JavaScript escape such as ``\\n``, ``\\x2e``, ``\\u002e`` or ``\\u{1F600}``."""
    body = sequence[1:]
    if not body:
        return sequence
    if body[0] in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body[0]]
    if body[0] in "\r\n\u2028\u2029":
        # Line continuation.
        return ""
    if body[0] in "xu":
        digits = body[1:].strip("{}")
        try:
            return chr(int(digits, 16))
        except ValueError:
            return sequence
    return body


def node_location(node: Node, file_path: str, source_bytes: bytes) -> CodeLocation:
    """Build a 1-based location; the column counts characters, not bytes."""
    row, byte_column = node.start_point
    line_start = node.start_byte - byte_column
    prefix = source_bytes[line_start : node.start_byte].decode("utf-8", errors="ignore")
    return CodeLocation(
        file=file_path,
        line=row + 1,
        column=len(prefix) + 1,
        snippet=node_text(node),
    )


__all__ = [
    "decode_escape",
    "iter_nodes",
    "node_location",
    "node_text",
    "parse_typescript",
    "string_value",
    "walk",
]
