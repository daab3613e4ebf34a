from typing import ClassVar
from ..colors.canonical import Canonical
from ..types.format_type import ColorFormats, FormatType, OPAQUE, max_channel
from .base import FunctionNotationFormat


class RGBu8Format(FunctionNotationFormat):
    """
    ``rgb(255, 128, 0)`` / ``rgba(255, 128, 0, 64)`` with 8-bit integers.

    Components above 255 are rejected, not clamped.
    """

    color_format = ColorFormats.RGB_U8
    component: ClassVar[str] = r"[0-9]{1,3}"
    pattern = FunctionNotationFormat.build_pattern(component)
    convert = staticmethod(int)
    low = 0
    high = max_channel[FormatType.INT]
    default_alpha = OPAQUE[FormatType.INT]

    @classmethod
    def parse(cls, text: str) -> Canonical:
        return Canonical(cls.components(text))
