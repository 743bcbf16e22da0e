"""Discovery of Angular component files within a project tree."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Iterator, List

from .logging import get_logger

DEFAULT_COMPONENT_SUFFIX = ".component.ts"

_EXCLUDED_DIRS = {
    "node_modules",
    "dist",
    "build",
    ".git",
    ".angular",
    "coverage",
    "e2e",
    ".vscode",
    ".idea",
    "tmp",
    "temp",
}

_COMPONENT_MARKER = "@Component"
_CLASS_PATTERN = re.compile(r"class\s+\w+.*Component", re.IGNORECASE)


def should_skip_directory(name: str, extra_excludes: Iterable[str] = ()) -> bool:
    return name in _EXCLUDED_DIRS or name in set(extra_excludes) or name.startswith(".")


def looks_like_component(content: str) -> bool:
    return _COMPONENT_MARKER in content and bool(_CLASS_PATTERN.search(content))


class ComponentScanner:
    """Walks a project to find files that declare Angular components."""

    def __init__(
        self,
        *,
        exclude_dirs: Iterable[str] = (),
        suffix: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.exclude_dirs = set(exclude_dirs)
        self.suffix = suffix or DEFAULT_COMPONENT_SUFFIX
        self.logger = logger or get_logger("scanner")

    def scan(self, root: str | Path) -> List[Path]:
        """Return component files under ``root`` in a stable order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if root_path.is_file():
            return [root_path]
        return sorted(path for path in self._iter_files(root_path) if self._is_component_file(path))

    def _iter_files(self, root: Path) -> Iterator[Path]:
        def _on_error(exc: OSError) -> None:
            self.logger.warning("Could not read directory %s: %s", exc.filename, exc.strerror)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames[:] = [name for name in dirnames if not should_skip_directory(name, self.exclude_dirs)]
            current_dir = Path(dirpath)
            for filename in filenames:
                if filename.endswith(self.suffix):
                    yield current_dir / filename

    def _is_component_file(self, path: Path) -> bool:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.warning("Could not validate component file %s: %s", path, exc)
            return False
        return looks_like_component(content)


__all__ = [
    "ComponentScanner",
    "DEFAULT_COMPONENT_SUFFIX",
    "looks_like_component",
    "should_skip_directory",
]
