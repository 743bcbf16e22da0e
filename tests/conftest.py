from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.component_builder import ComponentBuilder


@pytest.fixture
def component_builder(tmp_path: Path) -> ComponentBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ComponentBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_ngperf_logger():
    """Undo CLI logging setup so caplog keeps seeing ngperf records."""
    yield
    logger = logging.getLogger("ngperf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
