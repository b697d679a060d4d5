"""Exceptions for tablestyle."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableStyleError(Exception):
    """
    Base exception for all tablestyle errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(TableStyleError):
    """
    Base exception for configuration errors.

    Raised synchronously when an option mapping, a field assignment or a
    glyph override cannot be applied.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class UnknownOptionError(ConfigurationError, KeyError):
    """
    Raised when an option mapping contains a key with no matching setter.

    Attributes:
        option: The offending key
    """

    def __init__(self, option: Any) -> None:
        self.option = option
        super().__init__(f"Unknown style option: {option!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UnknownGlyphSlotError(ConfigurationError, KeyError):
    """Raised when reading or writing a glyph slot outside the slot universe."""

    def __init__(self, slot: Any) -> None:
        self.slot = slot
        super().__init__(f"Unknown glyph slot: {slot!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownBorderError(ConfigurationError, KeyError):
    """Raised when a border variant name is not registered."""

    def __init__(self, name: Any, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        message = f"Unknown border variant: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidFieldValueError(ConfigurationError, ValueError):
    """
    Raised when a style field or glyph slot is given an invalid value.

    Attributes:
        field: Name of the field or slot being set
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for {field}: {value!r}. {reason}")
