"""Tests for exception classes."""

import pytest

from tablestyle.exceptions import (
    ConfigurationError,
    InvalidFieldValueError,
    TableStyleError,
    UnknownBorderError,
    UnknownGlyphSlotError,
    UnknownOptionError,
)


class TestUnknownOptionError:
    """Tests for UnknownOptionError."""

    def test_message_names_option(self) -> None:
        exc = UnknownOptionError("bogus_key")

        assert exc.option == "bogus_key"
        assert str(exc) == "Unknown style option: 'bogus_key'"

    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise UnknownOptionError("bogus_key")


class TestUnknownBorderError:
    """Tests for UnknownBorderError."""

    def test_message_lists_available(self) -> None:
        exc = UnknownBorderError("dotted", ["ascii", "unicode_square"])

        assert exc.name == "dotted"
        assert str(exc) == "Unknown border variant: 'dotted' (available: ascii, unicode_square)"

    def test_message_without_available(self) -> None:
        assert str(UnknownBorderError("dotted")) == "Unknown border variant: 'dotted'"


class TestInvalidFieldValueError:
    """Tests for InvalidFieldValueError."""

    def test_attributes(self) -> None:
        exc = InvalidFieldValueError("width", 0, "Width must be positive")

        assert exc.field == "width"
        assert exc.value == 0
        assert exc.reason == "Width must be positive"
        assert str(exc) == "Invalid value for width: 0. Width must be positive"

    def test_is_value_error(self) -> None:
        assert isinstance(InvalidFieldValueError("width", 0, "bad"), ValueError)


class TestHierarchy:
    """All errors share the library base class."""

    @pytest.mark.parametrize(
        "exc",
        [
            UnknownOptionError("x"),
            UnknownGlyphSlotError("x"),
            UnknownBorderError("x"),
            InvalidFieldValueError("x", 1, "bad"),
        ],
    )
    def test_configuration_errors(self, exc: Exception) -> None:
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, TableStyleError)

    def test_glyph_slot_message(self) -> None:
        exc = UnknownGlyphSlotError("north")
        assert exc.slot == "north"
        assert str(exc) == "Unknown glyph slot: 'north'"
