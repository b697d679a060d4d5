"""Unit test fixtures."""

import pytest

from tablestyle import BorderGlyphSet, StyleDefaults


@pytest.fixture(params=["ascii", "unicode_square", "unicode_round", "unicode_thick_edge"])
def border(request: pytest.FixtureRequest) -> BorderGlyphSet:
    """Fresh glyph set for every registered variant."""
    return BorderGlyphSet.from_name(request.param)


@pytest.fixture
def defaults() -> StyleDefaults:
    """Isolated defaults context."""
    return StyleDefaults()
