from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from harness.logging import StructuredFormatter


@pytest.fixture(autouse=True)
def _reset_structured_logging() -> Generator[None, None, None]:
    # CLI invocations install a structured handler bound to the runner's stderr
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, StructuredFormatter):
            root.removeHandler(h)
    root.setLevel(level)
