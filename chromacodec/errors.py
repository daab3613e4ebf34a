"""
Exceptions raised by chromacodec.

Every color error derives from :class:`ColorError`, itself a ``ValueError``,
so callers that only care about "bad input" can catch ``ValueError``.
Scheme reading errors form a separate tree under :class:`SchemeReaderError`.
"""
from __future__ import annotations
from typing import Optional
from .types.format_type import ColorFormats


class ColorError(ValueError):
    """Base class for every color construction or parsing failure."""


class ChannelRangeError(ColorError):
    def __init__(self, channel: str, value, low, high) -> None:
        self.channel = channel
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"channel {channel}={value!r} is not within [{low}, {high}]")


class ChannelTypeError(ColorError, TypeError):
    def __init__(self, channel: str, value, expected: str) -> None:
        self.channel = channel
        self.value = value
        super().__init__(f"channel {channel}={value!r} must be {expected}, got {type(value).__name__}")


class PackedRangeError(ColorError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"packed color {value!r} is not an unsigned 32-bit integer")


class ParseHexError(ColorError):
    """The digit portion of a hex string is neither 6 nor 8 characters long."""

    def __init__(self, text: str, length: int) -> None:
        self.text = text
        self.length = length
        super().__init__(
            f"Failed to parse hex: {text!r} has {length} digits, expected 6 or 8"
        )


class ParseToIntError(ColorError):
    """A substring failed to parse as an integer of the expected base."""

    def __init__(self, cause: Exception, context: str) -> None:
        self.cause = cause
        self.context = context
        super().__init__(f"Failed to parse {context} into int: {cause}")


class ParseFormatError(ColorError):
    """
    Base for function-notation failures.

    Attributes:
        color_format: The notation that was attempted, or None when no
            notation could be picked.
        text: The offending input.
    """

    reason = "could not be parsed"

    def __init__(self, color_format: Optional[ColorFormats], text: str, detail: str = "") -> None:
        self.color_format = color_format
        self.text = text
        self.detail = detail
        message = f"{text!r} {self.reason}"
        if color_format is not None:
            message += f" as {color_format.value}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class GrammarMismatchError(ParseFormatError):
    reason = "does not match the grammar"


class MissingComponentError(ParseFormatError):
    reason = "is missing a required component"


class RangeValidationError(ParseFormatError):
    reason = "has a component out of range"


class ComponentParseError(ParseFormatError):
    reason = "has a component that is not a number"


class UnrecognizedFormatError(ParseFormatError):
    reason = "does not match any known color format"

    def __init__(self, text: str) -> None:
        super().__init__(None, text)


# ---------------------------------------------------------------------------
# Scheme reading
# ---------------------------------------------------------------------------

class SchemeReaderError(Exception):
    """Base class for scheme file failures."""


class SchemeIOError(SchemeReaderError):
    def __init__(self, path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"io error while reading scheme {str(path)!r}: {error}")


class NoLinesError(SchemeReaderError):
    def __init__(self, path=None) -> None:
        self.path = path
        where = f" {str(path)!r}" if path is not None else ""
        super().__init__(f"The scheme{where} appears to be empty")


class SchemeLineError(SchemeReaderError):
    def __init__(self, path, lineno: int, line: str, error: ColorError) -> None:
        self.path = path
        self.lineno = lineno
        self.line = line
        self.error = error
        where = str(path) if path is not None else "<lines>"
        super().__init__(f"{where}:{lineno}: {error}")
