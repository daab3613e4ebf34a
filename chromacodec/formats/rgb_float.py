from typing import ClassVar
from ..colors.canonical import Canonical
from ..types.format_type import ColorFormats, FormatType, OPAQUE, max_channel
from .base import FunctionNotationFormat


class RGBFloatFormat(FunctionNotationFormat):
    """
    ``rgb(0.5, 1.0, 0.25)`` / ``rgba(0.5, 1.0, 0.25, 0.9)`` with unit floats.

    The grammar only admits components written as ``0.<digits>`` or
    ``1.<digits>``; values such as ``1.5`` still match and are rejected
    afterwards by the range check.
    """

    color_format = ColorFormats.RGB_F
    component: ClassVar[str] = r"[01]\.[0-9]+"
    pattern = FunctionNotationFormat.build_pattern(component)
    convert = staticmethod(float)
    low = 0.0
    high = max_channel[FormatType.FLOAT]
    default_alpha = OPAQUE[FormatType.FLOAT]

    @classmethod
    def parse(cls, text: str) -> Canonical:
        return Canonical.from_f(*cls.components(text))
