"""Pytest fixtures for tablestyle tests."""

from collections.abc import Iterator

import pytest

from tablestyle.style import DEFAULTS


@pytest.fixture(autouse=True)
def restore_style_defaults() -> Iterator[None]:
    """Snapshot process-wide style defaults and restore them after each test."""
    saved = DEFAULTS.snapshot()
    yield
    DEFAULTS.replace(saved)
