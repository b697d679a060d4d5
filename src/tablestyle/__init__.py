"""
tablestyle: border glyphs and style configuration for text-mode tables.

This library provides:
- Border glyph sets (ASCII, unicode square, rounded, thick-edge)
- Row-kind aware rule queries for renderers
- A validated, observable style object
- Process-wide defaults layered under every new style

Example:
    from tablestyle import TableStyle

    style = TableStyle(border="unicode_round", padding_left=2)
    left, bar, cross, right, down, up = style.horizontal("top")
    left, center, right = style.vertical()

    TableStyle.set_defaults(width=80)
"""

from importlib.metadata import PackageNotFoundError, version

from .borders import (
    ASCII,
    SLOTS,
    UNICODE_ROUND,
    UNICODE_SQUARE,
    UNICODE_THICK_EDGE,
    BorderGlyphSet,
    BorderVariant,
    RowKind,
    border_names,
    get_variant,
    register_variant,
)
from .exceptions import (
    ConfigurationError,
    InvalidFieldValueError,
    TableStyleError,
    UnknownBorderError,
    UnknownGlyphSlotError,
    UnknownOptionError,
)
from .style import DEFAULTS, OPTION_NAMES, Alignment, StyleDefaults, TableStyle

try:
    __version__ = version("tablestyle")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Borders
    "BorderGlyphSet",
    "BorderVariant",
    "RowKind",
    "SLOTS",
    "ASCII",
    "UNICODE_SQUARE",
    "UNICODE_ROUND",
    "UNICODE_THICK_EDGE",
    "border_names",
    "get_variant",
    "register_variant",
    # Style
    "TableStyle",
    "StyleDefaults",
    "Alignment",
    "DEFAULTS",
    "OPTION_NAMES",
    # Exceptions - Base
    "TableStyleError",
    # Exceptions - Categories
    "ConfigurationError",
    # Exceptions - Configuration
    "UnknownOptionError",
    "UnknownGlyphSlotError",
    "UnknownBorderError",
    "InvalidFieldValueError",
]
