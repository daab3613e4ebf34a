import re
from typing import Optional, Sequence
from ..errors import ParseHexError, ParseToIntError
from ..types.color_types import U8Vector
from ..types.format_type import FormatType, OPAQUE

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")
_NAMES = ("red", "green", "blue", "alpha")


def _parse_pair(pair: str, channel: str, text: str) -> int:
    context = f"{channel} channel {pair!r} of {text!r}"
    if _HEX_PAIR.fullmatch(pair) is None:
        try:
            int(pair, 16)
        except ValueError as err:
            raise ParseToIntError(err, context) from err
        # int(..., 16) accepts "+f", " f" and the like; the cause is synthesized
        cause = ValueError(f"not a two-digit hex byte: {pair!r}")
        raise ParseToIntError(cause, context) from cause
    return int(pair, 16)


def parse_from_hex(text: str) -> U8Vector:
    """
    Parse ``#RRGGBB`` or ``#RRGGBBAA`` into an (r, g, b, a) tuple.

    The leading ``#`` is optional and digits are case-insensitive. Alpha
    defaults to 255 when only six digits are given.

    Raises:
        ParseHexError: The digit portion is neither 6 nor 8 characters.
        ParseToIntError: A two-character group is not a hex byte.
    """
    digits = text[1:] if text.startswith("#") else text
    if len(digits) not in (6, 8):
        raise ParseHexError(text, len(digits))

    channels = [
        _parse_pair(digits[i:i + 2], name, text)
        for i, name in zip(range(0, len(digits), 2), _NAMES)
    ]
    if len(channels) == 3:
        channels.append(OPAQUE[FormatType.INT])
    return tuple(channels)  # type: ignore[return-value]


def to_hex(color: Sequence[int], alpha: Optional[bool] = None) -> str:
    """
    Format (r, g, b, a) as lower-case ``#rrggbb`` or ``#rrggbbaa``.

    Args:
        alpha: Force (True) or suppress (False) the alpha pair. By default it
            is written only when the color is not fully opaque.
    """
    r, g, b, a = color
    if alpha is None:
        alpha = a != OPAQUE[FormatType.INT]
    out = f"#{r:02x}{g:02x}{b:02x}"
    if alpha:
        out += f"{a:02x}"
    return out
