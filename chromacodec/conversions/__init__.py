"""
Codecs between the canonical color and its external representations.

Functions here work on plain (r, g, b, a) tuples and integers; the color
classes in :mod:`chromacodec.colors` wrap them.

Packed (32-bit, RRGGBBAA):
    pack, unpack, np_pack, np_unpack

Hex strings:
    parse_from_hex, to_hex

Float <-> 8-bit scaling:
    unit_to_u8, u8_to_unit, np_unit_to_u8, np_u8_to_unit
"""

from .packed import pack, unpack, np_pack, np_unpack
from .hex import parse_from_hex, to_hex
from .numbers import unit_to_u8, u8_to_unit, np_unit_to_u8, np_u8_to_unit

__all__ = [
    'pack',
    'unpack',
    'np_pack',
    'np_unpack',
    'parse_from_hex',
    'to_hex',
    'unit_to_u8',
    'u8_to_unit',
    'np_unit_to_u8',
    'np_u8_to_unit',
]
