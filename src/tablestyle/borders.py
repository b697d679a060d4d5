"""Border glyph sets for text-mode tables.

A border glyph set maps named slots (corners, bars, tees, walls) to single
characters. Renderers never branch on the visual style; they ask for the
glyphs of a logical position instead:

    border = BorderGlyphSet.unicode_round()
    left, bar, cross, right, down, up = border.horizontal("top")
    left, center, right = border.vertical()

Every variant is a ``BorderVariant``: a default mapping, the three slot sets
used by ``remove_verticals()``/``remove_horizontals()``, and a layout telling
which slot feeds which position. New styles are registered with
``register_variant()``; rounded and thick-edge styles are derived from the
square one with ``BorderVariant.derive()``.

``None`` is the only "no glyph" value. Renderers must treat it as zero-width.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any

from .exceptions import InvalidFieldValueError, UnknownBorderError, UnknownGlyphSlotError

logger = logging.getLogger(__name__)

Glyph = str | None
VerticalGlyphs = tuple[Glyph, Glyph, Glyph]
RuleGlyphs = tuple[Glyph, Glyph, Glyph, Glyph, Glyph, Glyph]


class RowKind(str, Enum):
    """Kind of horizontal rule being drawn."""

    TOP = "top"
    BELOW_HEADING = "below_heading"
    BOTTOM = "bottom"
    CENTER = "center"

    @classmethod
    def coerce(cls, value: Any) -> RowKind:
        """
        Normalize a loosely-typed row kind.

        Accepts members, their string values (case-insensitive) and the
        short ``"bot"`` alias. Anything else resolves to ``CENTER``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "bot":
                return cls.BOTTOM
            try:
                return cls(key)
            except ValueError:
                pass
        return cls.CENTER


# ---------------------------------------------------------------------------
# Slot universe
# ---------------------------------------------------------------------------

TOP_SLOTS = ("north_west", "north_bar", "north_tee", "north_east", "north_down")
WALL_SLOTS = ("west_wall", "vertical_rule", "east_wall")
HEADING_SLOTS = (
    "heading_west",
    "heading_separator_bar",
    "heading_cross",
    "heading_east",
    "heading_down",
    "heading_up",
)
CENTER_SLOTS = ("west_tee", "horizontal_bar", "cross", "east_tee", "down_tee", "up_tee")
BOTTOM_SLOTS = ("south_west", "south_bar", "south_tee", "south_east", "south_up")

SLOTS: frozenset[str] = frozenset(
    TOP_SLOTS + WALL_SLOTS + HEADING_SLOTS + CENTER_SLOTS + BOTTOM_SLOTS
)
"""Every slot name a glyph set may carry."""


def _check_slot(slot: Any) -> str:
    if not isinstance(slot, str) or slot not in SLOTS:
        raise UnknownGlyphSlotError(slot)
    return slot


def normalize_glyph(slot: str, glyph: Any) -> Glyph:
    """
    Validate a glyph value, folding ``""`` into ``None``.

    Raises:
        InvalidFieldValueError: If the glyph is not a single character
    """
    if glyph is None or glyph == "":
        return None
    if not isinstance(glyph, str):
        raise InvalidFieldValueError(slot, glyph, "Glyph must be a string")
    if len(glyph) != 1:
        raise InvalidFieldValueError(slot, glyph, "Glyph must be a single character")
    return glyph


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class BorderVariant:
    """
    Immutable description of a border style.

    Attributes:
        name: Registry key (e.g., "unicode_round")
        glyphs: Default slot mapping copied into every new glyph set
        horizontals: Slots blanked by ``remove_horizontals()``
        verticals: Slots blanked by ``remove_verticals()``
        intersections: Slots also blanked by ``remove_verticals()``
        vertical_layout: Slots feeding ``vertical()`` as (left, center, right)
        rule_layout: Per row kind, the slots feeding ``horizontal()``;
            ``None`` entries are structurally absent
    """

    name: str
    glyphs: Mapping[str, Glyph]
    horizontals: frozenset[str]
    verticals: frozenset[str]
    intersections: frozenset[str]
    vertical_layout: tuple[str, str, str]
    rule_layout: Mapping[RowKind, tuple[str | None, ...]]

    def __post_init__(self) -> None:
        glyphs = {_check_slot(slot): normalize_glyph(slot, g) for slot, g in self.glyphs.items()}
        object.__setattr__(self, "glyphs", MappingProxyType(glyphs))

        for slot in self.horizontals | self.verticals | self.intersections:
            _check_slot(slot)

        layout_slots = set(self.vertical_layout)
        for kind in RowKind:
            if kind not in self.rule_layout:
                raise ValueError(f"{self.name}: missing rule layout for {kind.value}")
            layout_slots.update(slot for slot in self.rule_layout[kind] if slot is not None)
        missing = layout_slots - glyphs.keys()
        if missing:
            raise ValueError(f"{self.name}: layout uses uninitialized slots {sorted(missing)}")

    def derive(self, name: str, **overrides: Glyph) -> BorderVariant:
        """
        Create a new variant from this one with some glyphs replaced.

        Slot sets and layout are shared; only the named slots change.

        Example:
            round = SQUARE.derive("round", north_west="╭", north_east="╮")
        """
        for slot in overrides:
            _check_slot(slot)
        return replace(self, name=name, glyphs={**self.glyphs, **overrides})


ASCII = BorderVariant(
    name="ascii",
    glyphs={"horizontal_bar": "-", "vertical_rule": "|", "cross": "+"},
    horizontals=frozenset({"horizontal_bar"}),
    verticals=frozenset({"vertical_rule"}),
    intersections=frozenset({"cross"}),
    vertical_layout=("vertical_rule", "vertical_rule", "vertical_rule"),
    # ASCII has no row-kind sensitivity
    rule_layout={
        kind: ("cross", "horizontal_bar", "cross", "cross", "cross", "cross") for kind in RowKind
    },
)

_UNICODE_HORIZONTALS = frozenset(
    {"horizontal_bar", "south_bar", "heading_separator_bar", "north_bar"}
)
_UNICODE_VERTICALS = frozenset(WALL_SLOTS)

UNICODE_SQUARE = BorderVariant(
    name="unicode_square",
    glyphs={
        "north_west": "┌", "north_bar": "─", "north_tee": "┬", "north_east": "┐",
        "north_down": None,
        "west_wall": "│", "vertical_rule": "│", "east_wall": "│",
        "heading_west": "╞", "heading_separator_bar": "═", "heading_cross": "╪",
        "heading_east": "╡", "heading_down": "╤", "heading_up": "╧",
        "west_tee": "├", "horizontal_bar": "─", "cross": "┼", "east_tee": "┤",
        "down_tee": "┬", "up_tee": "┴",
        "south_west": "└", "south_bar": "─", "south_tee": "┴", "south_east": "┘",
        "south_up": None,
    },  # fmt: skip
    horizontals=_UNICODE_HORIZONTALS,
    verticals=_UNICODE_VERTICALS,
    intersections=SLOTS - _UNICODE_HORIZONTALS - _UNICODE_VERTICALS,
    vertical_layout=("west_wall", "vertical_rule", "east_wall"),
    rule_layout={
        RowKind.TOP: ("north_west", "north_bar", "north_tee", "north_east", "north_tee", None),
        RowKind.BELOW_HEADING: HEADING_SLOTS,
        RowKind.BOTTOM: ("south_west", "south_bar", "south_tee", "south_east", None, "south_tee"),
        RowKind.CENTER: CENTER_SLOTS,
    },
)

UNICODE_ROUND = UNICODE_SQUARE.derive(
    "unicode_round",
    north_west="╭",
    north_east="╮",
    south_west="╰",
    south_east="╯",
)

# Heavy outer walls and caps, thin interior separators
UNICODE_THICK_EDGE = UNICODE_SQUARE.derive(
    "unicode_thick_edge",
    north_west="┏", north_bar="━", north_tee="┯", north_east="┓",
    west_wall="┃", east_wall="┃",
    heading_west="┣", heading_east="┫",
    west_tee="┠", east_tee="┨",
    south_west="┗", south_bar="━", south_tee="┷", south_east="┛",
)  # fmt: skip

_VARIANTS: dict[str, BorderVariant] = {}


def register_variant(variant: BorderVariant) -> BorderVariant:
    """Register a variant so it can be selected by name."""
    if variant.name in _VARIANTS:
        logger.debug("Replacing border variant %s", variant.name)
    _VARIANTS[variant.name] = variant
    return variant


def get_variant(name: str) -> BorderVariant:
    """
    Look up a registered variant.

    Raises:
        UnknownBorderError: If no variant has this name
    """
    try:
        return _VARIANTS[name]
    except (KeyError, TypeError):
        raise UnknownBorderError(name, border_names()) from None


def border_names() -> list[str]:
    """Names of all registered variants, in registration order."""
    return list(_VARIANTS)


for _variant in (ASCII, UNICODE_SQUARE, UNICODE_ROUND, UNICODE_THICK_EDGE):
    register_variant(_variant)


# ---------------------------------------------------------------------------
# Glyph sets
# ---------------------------------------------------------------------------


class BorderGlyphSet:
    """
    Mutable glyph mapping for one table border.

    Glyph sets are owned by exactly one style; use ``copy()`` to hand one
    to another owner.
    """

    def __init__(
        self,
        variant: BorderVariant | str = ASCII,
        glyphs: Mapping[str, Glyph] | None = None,
    ) -> None:
        """
        Initialize a glyph set from a variant's default mapping.

        Args:
            variant: Variant instance or registered name
            glyphs: Optional slot overrides applied after the defaults

        Raises:
            UnknownBorderError: If ``variant`` names no registered variant
            UnknownGlyphSlotError: If an override names an unknown slot
            InvalidFieldValueError: If an override is not a single character
        """
        if isinstance(variant, str):
            variant = get_variant(variant)
        elif not isinstance(variant, BorderVariant):
            raise UnknownBorderError(variant, border_names())
        self.variant = variant
        self._glyphs: dict[str, Glyph] = dict(self.variant.glyphs)
        for slot, glyph in (glyphs or {}).items():
            self[slot] = glyph

    @classmethod
    def from_name(cls, name: str) -> BorderGlyphSet:
        """Build a glyph set for a registered variant."""
        return cls(get_variant(name))

    @classmethod
    def ascii(cls) -> BorderGlyphSet:
        return cls(ASCII)

    @classmethod
    def unicode_square(cls) -> BorderGlyphSet:
        return cls(UNICODE_SQUARE)

    @classmethod
    def unicode_round(cls) -> BorderGlyphSet:
        return cls(UNICODE_ROUND)

    @classmethod
    def unicode_thick_edge(cls) -> BorderGlyphSet:
        return cls(UNICODE_THICK_EDGE)

    @property
    def name(self) -> str:
        return self.variant.name

    def __getitem__(self, slot: str) -> Glyph:
        return self._glyphs.get(_check_slot(slot))

    def __setitem__(self, slot: str, glyph: Glyph) -> None:
        self._glyphs[_check_slot(slot)] = normalize_glyph(slot, glyph)

    def vertical(self) -> VerticalGlyphs:
        """
        Get vertical border elements.

        Returns:
            (left, center, right) glyphs for a content row
        """
        left, center, right = self.variant.vertical_layout
        return (self._glyphs.get(left), self._glyphs.get(center), self._glyphs.get(right))

    def horizontal(self, kind: RowKind | str | None = RowKind.CENTER) -> RuleGlyphs:
        """
        Get horizontal border elements.

        Args:
            kind: Row kind ("top", "below_heading", "bottom", "center");
                unrecognized values are treated as "center"

        Returns:
            (left, bar, intersection, right, down_tee, up_tee) glyphs
        """
        layout = self.variant.rule_layout[RowKind.coerce(kind)]
        left, bar, cross, right, down, up = (
            self._glyphs.get(slot) if slot is not None else None for slot in layout
        )
        return (left, bar, cross, right, down, up)

    def remove_verticals(self) -> None:
        """Blank every vertical and intersection glyph."""
        for slot in self.variant.verticals | self.variant.intersections:
            self._glyphs[slot] = None
        logger.debug("Removed vertical glyphs from %s border", self.name)

    def remove_horizontals(self) -> None:
        """Blank every horizontal glyph."""
        for slot in self.variant.horizontals:
            self._glyphs[slot] = None
        logger.debug("Removed horizontal glyphs from %s border", self.name)

    def as_dict(self) -> dict[str, Glyph]:
        """Return a copy of the slot mapping."""
        return dict(self._glyphs)

    def copy(self) -> BorderGlyphSet:
        """Duplicate this glyph set, including its mapping."""
        duplicate = type(self).__new__(type(self))
        duplicate.variant = self.variant
        duplicate._glyphs = dict(self._glyphs)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> BorderGlyphSet:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BorderGlyphSet):
            return NotImplemented
        return self.name == other.name and self._glyphs == other._glyphs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BorderGlyphSet({self.name!r})"
