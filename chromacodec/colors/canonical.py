from __future__ import annotations
from typing import Any, Optional, Tuple
from ..conversions import packed as packed_codec
from ..conversions import hex as hex_codec
from ..conversions.numbers import unit_to_u8, u8_to_unit
from ..errors import ChannelRangeError, ChannelTypeError
from ..types.color_types import Packed, is_integer_component
from ..types.format_type import FormatType, OPAQUE, max_channel
from .rgb import RGB, RGBA


class Canonical(RGBA):
    """
    RGBA over 8-bit unsigned channels; the interchange type of every codec.

    Components must be integers in ``[0, 255]``. Values are stored as plain
    Python ``int`` so equality and hashing do not depend on numpy scalars.

    >>> Canonical.parse_from_hex("#00aa11")
    Canonical(r=0, g=170, b=17, a=255)
    >>> Canonical.new(128, 128, 0, 255).pack()
    2155872511
    """
    __slots__ = ()
    format_type = FormatType.INT

    @classmethod
    def _validate(cls, value: Tuple[Any, ...]) -> Tuple[int, ...]:
        high = max_channel[cls.format_type]
        out = []
        for name, v in zip(cls.channel_names, value):
            if not is_integer_component(v):
                raise ChannelTypeError(name, v, "an integer")
            if not 0 <= v <= high:
                raise ChannelRangeError(name, v, 0, high)
            out.append(int(v))
        return tuple(out)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_f(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Canonical:
        """Build from unit floats, scaling 0.0 -> 0 and 1.0 -> 255."""
        return cls(tuple(
            unit_to_u8(v, name) for name, v in zip(cls.channel_names, (red, green, blue, alpha))
        ))

    @classmethod
    def from_rgb(cls, rgb: RGB, alpha: int = OPAQUE[FormatType.INT]) -> Canonical:
        """Widen an 8-bit RGB color, fully opaque unless told otherwise."""
        return cls(rgb.into_rgba(alpha))

    @classmethod
    def parse_from_hex(cls, text: str) -> Canonical:
        return cls(hex_codec.parse_from_hex(text))

    @classmethod
    def unpack(cls, packed: Packed) -> Canonical:
        return cls(packed_codec.unpack(packed))

    # ------------------ CONVERSIONS ------------------
    def pack(self) -> Packed:
        return packed_codec.pack(self._value)

    def to_hex(self, alpha: Optional[bool] = None) -> str:
        return hex_codec.to_hex(self._value, alpha=alpha)

    def to_unit(self) -> RGBA:
        """Channels scaled to floats in [0.0, 1.0]."""
        return self.map(u8_to_unit)  # type: ignore[return-value]
