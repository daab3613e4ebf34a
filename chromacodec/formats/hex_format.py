import re
from ..colors.canonical import Canonical
from ..errors import ComponentParseError, GrammarMismatchError, ParseHexError, ParseToIntError
from ..types.format_type import ColorFormats
from .base import ColorFormat


class HexFormat(ColorFormat):
    """``#RRGGBB`` or ``#RRGGBBAA``; the ``#`` is optional."""

    color_format = ColorFormats.HEX
    pattern = re.compile(
        r"""
        \#?
        (?P<r>[0-9a-fA-F]{2})
        (?P<g>[0-9a-fA-F]{2})
        (?P<b>[0-9a-fA-F]{2})
        (?P<a>[0-9a-fA-F]{2})?
        """,
        re.VERBOSE,
    )

    @classmethod
    def parse(cls, text: str) -> Canonical:
        stripped = text.strip()
        try:
            return Canonical.parse_from_hex(stripped)
        except ParseHexError as err:
            raise GrammarMismatchError(cls.color_format, text, str(err)) from err
        except ParseToIntError as err:
            raise ComponentParseError(cls.color_format, text, str(err)) from err
