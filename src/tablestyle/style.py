"""Table style configuration.

A ``TableStyle`` holds the visual preferences of one table and owns one
``BorderGlyphSet``. Styles are built by layering caller options over a fresh
snapshot of a ``StyleDefaults`` context:

    style = TableStyle({"padding_left": 2, "width": 40})
    style = TableStyle(border="unicode_round", all_separators=True)

    # change defaults for every style created afterwards
    TableStyle.set_defaults({"width": 80})

    # react to field changes
    style.on_change("width", lambda field, value: invalidate_widths())

Unknown option keys raise ``UnknownOptionError`` and invalid values raise
``InvalidFieldValueError`` before anything is stored.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Generic, TypeVar, overload

from .borders import BorderGlyphSet, RowKind, RuleGlyphs, VerticalGlyphs, normalize_glyph
from .exceptions import InvalidFieldValueError, UnknownOptionError

logger = logging.getLogger(__name__)

T = TypeVar("T")
Observer = Callable[[str, Any], None]


class Alignment(str, Enum):
    """Cell alignment preference."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ---------------------------------------------------------------------------
# Field validation
# ---------------------------------------------------------------------------


def _validate_border(field: str, value: Any) -> BorderGlyphSet:
    # Always copy: a style exclusively owns its border
    if isinstance(value, BorderGlyphSet):
        return value.copy()
    if isinstance(value, str):
        return BorderGlyphSet.from_name(value)
    raise InvalidFieldValueError(field, value, "Expected a BorderGlyphSet or a border name")


def _validate_bool(field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidFieldValueError(field, value, "Expected True or False")
    return value


def _validate_padding(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldValueError(field, value, "Expected an integer")
    if value < 0:
        raise InvalidFieldValueError(field, value, "Padding cannot be negative")
    return value


def _validate_margin(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidFieldValueError(field, value, "Expected a string")
    return value


def _validate_width(field: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldValueError(field, value, "Expected an integer or None")
    if value <= 0:
        raise InvalidFieldValueError(field, value, "Width must be positive")
    return value


def _validate_alignment(field: str, value: Any) -> Alignment | None:
    if value is None:
        return None
    try:
        return Alignment(value.lower() if isinstance(value, str) else value)
    except ValueError:
        choices = ", ".join(a.value for a in Alignment)
        raise InvalidFieldValueError(field, value, f"Expected one of: {choices}") from None


FIELD_VALIDATORS: dict[str, Callable[[str, Any], Any]] = {
    "border": _validate_border,
    "border_top": _validate_bool,
    "border_bottom": _validate_bool,
    "padding_left": _validate_padding,
    "padding_right": _validate_padding,
    "margin_left": _validate_margin,
    "width": _validate_width,
    "alignment": _validate_alignment,
    "all_separators": _validate_bool,
}

LEGACY_GLYPH_OPTIONS: dict[str, str] = {
    "border_x": "horizontal_bar",
    "border_y": "vertical_rule",
    "border_i": "cross",
}
"""Single-glyph overrides kept from ASCII-only borders, keyed to their slot."""

OPTION_NAMES: frozenset[str] = frozenset(FIELD_VALIDATORS) | frozenset(LEGACY_GLYPH_OPTIONS)


def factory_defaults() -> dict[str, Any]:
    """Built-in defaults, as a fresh mapping."""
    return {
        "border": BorderGlyphSet.ascii(),
        "border_top": True,
        "border_bottom": True,
        "padding_left": 1,
        "padding_right": 1,
        "margin_left": "",
        "width": None,
        "alignment": None,
        "all_separators": False,
    }


def validate_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate a partial option mapping.

    Every key is checked before any value, so an unknown key is reported
    even when other values are also invalid.

    Returns:
        A new mapping with normalized values (borders copied)

    Raises:
        UnknownOptionError: If a key has no matching setter
        InvalidFieldValueError: If a value is rejected by its field
    """
    for name in options:
        if name not in OPTION_NAMES:
            raise UnknownOptionError(name)

    validated: dict[str, Any] = {}
    for name, value in options.items():
        if name in LEGACY_GLYPH_OPTIONS:
            validated[name] = normalize_glyph(name, value)
        else:
            validated[name] = FIELD_VALIDATORS[name](name, value)
    return validated


# ---------------------------------------------------------------------------
# Defaults context
# ---------------------------------------------------------------------------


class StyleDefaults:
    """
    Defaults that new styles are layered over.

    The stored mapping is only ever swapped in a single assignment under a
    lock, so a reader never observes a partially merged mapping. Styles
    built earlier are never affected by later updates.

    Args:
        options: Partial overrides of the built-in defaults
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._options = {**factory_defaults(), **validate_options(options or {})}

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the defaults with a duplicated border."""
        with self._lock:
            options = dict(self._options)
        options["border"] = options["border"].copy()
        return options

    def update(self, options: Mapping[str, Any]) -> None:
        """Merge a partial mapping over the current defaults."""
        validated = validate_options(options)
        with self._lock:
            self._options = {**self._options, **validated}
        logger.debug("Updated style defaults: %s", sorted(validated))

    def replace(self, options: Mapping[str, Any]) -> None:
        """Replace the defaults wholesale; missing keys fall back to built-ins."""
        merged = {**factory_defaults(), **validate_options(options)}
        with self._lock:
            self._options = merged
        logger.debug("Replaced style defaults")

    def reset(self) -> None:
        """Restore the built-in defaults."""
        self.replace({})


DEFAULTS = StyleDefaults()
"""Process-wide defaults used when no context is passed to ``TableStyle``."""


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


class StyleField(Generic[T]):
    """Validated, observable attribute of a ``TableStyle``."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type) -> StyleField[T]: ...

    @overload
    def __get__(self, instance: TableStyle, owner: type) -> T: ...

    def __get__(self, instance: TableStyle | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance._values[self.name]

    def __set__(self, instance: TableStyle, value: Any) -> None:
        value = FIELD_VALIDATORS[self.name](self.name, value)
        instance._values[self.name] = value
        instance._notify(self.name, value)


class LegacyGlyph:
    """Single-slot override on the owned border (``border_x`` and friends)."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.slot = LEGACY_GLYPH_OPTIONS[name]

    def __get__(self, instance: TableStyle | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.border[self.slot]

    def __set__(self, instance: TableStyle, value: Any) -> None:
        instance.border[self.slot] = value
        instance._notify(self.name, instance.border[self.slot])


class TableStyle:
    """
    Formatting preferences for one table.

    Attributes:
        border: Owned glyph set (assignment stores a copy)
        border_top: Draw the top rule
        border_bottom: Draw the bottom rule
        padding_left: Spaces left of cell content
        padding_right: Spaces right of cell content
        margin_left: Text printed before every line
        width: Fixed table width, or None
        alignment: Cell alignment, or None to let each cell decide
        all_separators: Draw a separator under every row, not just the heading
    """

    border: StyleField[BorderGlyphSet] = StyleField()
    border_top: StyleField[bool] = StyleField()
    border_bottom: StyleField[bool] = StyleField()
    padding_left: StyleField[int] = StyleField()
    padding_right: StyleField[int] = StyleField()
    margin_left: StyleField[str] = StyleField()
    width: StyleField[int | None] = StyleField()
    alignment: StyleField[Alignment | None] = StyleField()
    all_separators: StyleField[bool] = StyleField()

    border_x = LegacyGlyph()
    border_y = LegacyGlyph()
    border_i = LegacyGlyph()

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        /,
        *,
        defaults: StyleDefaults | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Build a style from defaults plus overrides.

        Args:
            options: Partial option mapping
            defaults: Defaults context (process-wide ``DEFAULTS`` if omitted)
            **kwargs: Options given as keywords; they win over ``options``

        Raises:
            UnknownOptionError: If an option key is not recognized
            InvalidFieldValueError: If an option value is invalid
        """
        self._values: dict[str, Any] = {}
        self._observers: dict[str, list[Observer]] = {}
        context = defaults if defaults is not None else DEFAULTS
        self.apply({**context.snapshot(), **(options or {}), **kwargs})

    def apply(self, options: Mapping[str, Any]) -> None:
        """
        Apply a partial option mapping through the field setters.

        The whole mapping is validated before any field is assigned, so a
        rejected option leaves the style untouched and notifies nobody.
        ``border`` is applied first so legacy glyph overrides land on the
        new border.
        """
        validated = validate_options(options)
        for name in sorted(validated, key=lambda n: n != "border"):
            setattr(self, name, validated[name])

    @overload
    def on_change(self, field: str) -> Callable[[Observer], Observer]: ...

    @overload
    def on_change(self, field: str, callback: Observer) -> Observer: ...

    def on_change(self, field: str, callback: Observer | None = None) -> Any:
        """
        Observe assignments to a field.

        After each successful assignment, observers are called with
        ``(field, value)``, most recently registered first. Can be used as a
        decorator when ``callback`` is omitted.

        Raises:
            UnknownOptionError: If the field is not a style option
        """
        if field not in OPTION_NAMES:
            raise UnknownOptionError(field)

        def register(fn: Observer) -> Observer:
            self._observers.setdefault(field, []).insert(0, fn)
            logger.debug("Registered observer for %s", field)
            return fn

        if callback is None:
            return register
        return register(callback)

    def _notify(self, field: str, value: Any) -> None:
        for callback in list(self._observers.get(field, ())):
            callback(field, value)

    # Border delegation

    def vertical(self) -> VerticalGlyphs:
        return self.border.vertical()

    def horizontal(self, kind: RowKind | str | None = RowKind.CENTER) -> RuleGlyphs:
        return self.border.horizontal(kind)

    def remove_verticals(self) -> None:
        self.border.remove_verticals()

    def remove_horizontals(self) -> None:
        self.border.remove_horizontals()

    # Defaults protocol

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Copy of the process-wide defaults, with its own border."""
        return DEFAULTS.snapshot()

    @classmethod
    def set_defaults(cls, options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        """Merge options over the process-wide defaults for future styles."""
        DEFAULTS.update({**(options or {}), **kwargs})

    def copy(self) -> TableStyle:
        """Duplicate this style and its border. Observers are not copied."""
        duplicate = type(self).__new__(type(self))
        duplicate._values = dict(self._values)
        duplicate._values["border"] = self.border.copy()
        duplicate._observers = {}
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> TableStyle:
        return self.copy()

    def as_dict(self) -> dict[str, Any]:
        """Current field values; the border is a copy."""
        values = dict(self._values)
        values["border"] = self.border.copy()
        return values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableStyle):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"TableStyle({fields})"
