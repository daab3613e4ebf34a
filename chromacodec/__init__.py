"""Chromacodec: color value normalization and codecs."""

from .colors.color_base import ColorBase
from .colors.rgb import RGB, RGBA
from .colors.canonical import Canonical
from .conversions import (
    pack,
    np_pack,
    np_unpack,
    to_hex,
    unit_to_u8,
    u8_to_unit,
)
from .formats import (
    ColorFormat,
    HexFormat,
    RGBFloatFormat,
    RGBu8Format,
    detect_format,
    get_format,
    parse_color,
)
from .scheme import Scheme
from .reader import read_scheme, parse_scheme_lines
from .types.format_type import ColorFormats, FormatType, FORMAT_ORDER
from .errors import (
    ColorError,
    ChannelRangeError,
    ChannelTypeError,
    PackedRangeError,
    ParseHexError,
    ParseToIntError,
    ParseFormatError,
    GrammarMismatchError,
    MissingComponentError,
    RangeValidationError,
    ComponentParseError,
    UnrecognizedFormatError,
    SchemeReaderError,
    SchemeIOError,
    NoLinesError,
    SchemeLineError,
)

# The codecs yield plain tuples; at the package level they yield colors.
unpack = Canonical.unpack
parse_from_hex = Canonical.parse_from_hex

__version__ = "0.1.0"

__all__ = [
    # color types
    "ColorBase",
    "RGB",
    "RGBA",
    "Canonical",
    "Scheme",
    # codecs
    "pack",
    "unpack",
    "np_pack",
    "np_unpack",
    "parse_from_hex",
    "to_hex",
    "unit_to_u8",
    "u8_to_unit",
    # notations
    "ColorFormat",
    "HexFormat",
    "RGBFloatFormat",
    "RGBu8Format",
    "ColorFormats",
    "FormatType",
    "FORMAT_ORDER",
    "detect_format",
    "get_format",
    "parse_color",
    # scheme files
    "read_scheme",
    "parse_scheme_lines",
    # errors
    "ColorError",
    "ChannelRangeError",
    "ChannelTypeError",
    "PackedRangeError",
    "ParseHexError",
    "ParseToIntError",
    "ParseFormatError",
    "GrammarMismatchError",
    "MissingComponentError",
    "RangeValidationError",
    "ComponentParseError",
    "UnrecognizedFormatError",
    "SchemeReaderError",
    "SchemeIOError",
    "NoLinesError",
    "SchemeLineError",
]
