"""
Scheme files.

The first line names the scheme; every other non-blank line holds one color
in any notation :func:`~chromacodec.formats.parse_color` understands::

    Solarized accents
    #b58900
    rgb(0.796, 0.294, 0.086)
    rgba(220, 50, 47, 255)
"""
from __future__ import annotations
import os
import warnings
from typing import Iterable, List, Optional, Union
from .colors.canonical import Canonical
from .errors import ColorError, NoLinesError, SchemeIOError, SchemeLineError
from .formats import parse_color
from .scheme import Scheme
from .types.format_type import ColorFormats

PathLike = Union[str, os.PathLike]


def parse_scheme_lines(
    lines: Iterable[str],
    color_format: ColorFormats | str | None = None,
    *,
    source: Optional[PathLike] = None,
) -> Scheme:
    """
    Build a scheme from its lines.

    Args:
        lines: Header line followed by color lines. Trailing newlines are fine.
        color_format: Force a notation for every color line instead of
            detecting it per line.
        source: Only used in error messages.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise NoLinesError(source) from None
    name = header.strip()

    colors: List[Canonical] = []
    for lineno, line in enumerate(it, start=2):
        if not line.strip():
            continue
        try:
            colors.append(parse_color(line, color_format))
        except ColorError as err:
            raise SchemeLineError(source, lineno, line.rstrip("\r\n"), err) from err

    if not colors:
        warnings.warn(f"Scheme {name!r} has no colors", UserWarning, stacklevel=2)
    return Scheme(name, colors)


def read_scheme(path: PathLike, color_format: ColorFormats | str | None = None) -> Scheme:
    """Read a scheme file, see :func:`parse_scheme_lines`."""
    try:
        with open(path, encoding="utf-8") as fh:
            lines = fh.readlines()
    except (OSError, UnicodeDecodeError) as err:
        raise SchemeIOError(path, err) from err
    return parse_scheme_lines(lines, color_format, source=path)
