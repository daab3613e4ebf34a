"""
Textual color notations
=======================

Each notation is a :class:`ColorFormat` exposing two class methods:

- ``matches(text)``: does the trimmed text fit the grammar
- ``parse(text)``: return a :class:`~chromacodec.colors.canonical.Canonical`
  or raise a :class:`~chromacodec.errors.ParseFormatError`

The set of notations is closed and enumerated by
:class:`~chromacodec.types.format_type.ColorFormats`:

    HEX      #RRGGBB / #RRGGBBAA         HexFormat
    RGB_F    rgb(0.5, 1.0, 0.25[, 1.0])  RGBFloatFormat
    RGB_U8   rgb(128, 255, 64[, 255])    RGBu8Format

The grammars do not overlap. Auto-detection follows ``FORMAT_ORDER`` and
uses the first format that matches.

>>> from chromacodec.formats import parse_color
>>> parse_color("rgba(0.0, 0.0, 0.0)")
Canonical(r=0, g=0, b=0, a=255)
>>> parse_color("#ffffff00")
Canonical(r=255, g=255, b=255, a=0)
"""
from __future__ import annotations
from typing import Dict, Optional
from ..colors.canonical import Canonical
from ..errors import UnrecognizedFormatError
from ..types.format_type import ColorFormats, FORMAT_ORDER
from .base import ColorFormat, FunctionNotationFormat
from .hex_format import HexFormat
from .rgb_float import RGBFloatFormat
from .rgb_u8 import RGBu8Format


def build_registry(*classes: type[ColorFormat]) -> Dict[ColorFormats, type[ColorFormat]]:
    return {cls.color_format: cls for cls in classes}


format_registry = build_registry(HexFormat, RGBFloatFormat, RGBu8Format)


def get_format(color_format: ColorFormats | str) -> type[ColorFormat]:
    try:
        return format_registry[ColorFormats(color_format)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported color format: {color_format!r}") from None


def detect_format(text: str) -> Optional[type[ColorFormat]]:
    """Return the first format in ``FORMAT_ORDER`` whose grammar matches."""
    for color_format in FORMAT_ORDER:
        cls = format_registry[color_format]
        if cls.matches(text):
            return cls
    return None


def parse_color(text: str, color_format: ColorFormats | str | None = None) -> Canonical:
    """
    Parse a textual color.

    Args:
        text: Hex or function-notation color.
        color_format: Notation to use. When omitted the notation is detected.

    Raises:
        UnrecognizedFormatError: No notation matched during detection.
        ParseFormatError: The chosen notation rejected the text.
    """
    if color_format is not None:
        return get_format(color_format).parse(text)
    cls = detect_format(text)
    if cls is None:
        raise UnrecognizedFormatError(text)
    return cls.parse(text)


__all__ = [
    'ColorFormat',
    'FunctionNotationFormat',
    'HexFormat',
    'RGBFloatFormat',
    'RGBu8Format',
    'format_registry',
    'get_format',
    'detect_format',
    'parse_color',
]
