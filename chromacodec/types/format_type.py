# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


class ColorFormats(str, Enum):
    """Textual color notations understood by the parsers."""
    RGB_U8 = "rgb_u8"
    RGB_F = "rgb_f"
    HEX = "hex"


max_channel = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
}

# Packed layout: RRGGBBAA, most significant byte first
BIT_SHIFT_RED = 4 * 6
BIT_SHIFT_GREEN = 4 * 4
BIT_SHIFT_BLUE = 4 * 2
BIT_SHIFT_ALPHA = 0
CHANNEL_SHIFTS = (BIT_SHIFT_RED, BIT_SHIFT_GREEN, BIT_SHIFT_BLUE, BIT_SHIFT_ALPHA)
CHANNEL_MASK = 0xFF
PACKED_MAX = 0xFFFFFFFF

OPAQUE = {
    FormatType.INT: max_channel[FormatType.INT],
    FormatType.FLOAT: max_channel[FormatType.FLOAT],
}

# Auto-detection tries formats in this order and keeps the first match.
FORMAT_ORDER = (ColorFormats.HEX, ColorFormats.RGB_F, ColorFormats.RGB_U8)
