from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional, TypeVar
import re
from ..colors.canonical import Canonical
from ..errors import (
    ComponentParseError,
    GrammarMismatchError,
    MissingComponentError,
    RangeValidationError,
)
from ..types.format_type import ColorFormats

N = TypeVar("N", int, float)


class ColorFormat(ABC):
    """
    A textual color notation.

    Implementors set ``color_format`` and ``pattern`` (compiled once at import,
    never mutated) and implement :meth:`parse`. Both operations ignore
    leading and trailing whitespace.
    """

    color_format: ClassVar[ColorFormats]
    pattern: ClassVar[re.Pattern[str]]

    @classmethod
    def matches(cls, text: str) -> bool:
        return cls.pattern.fullmatch(text.strip()) is not None

    @classmethod
    @abstractmethod
    def parse(cls, text: str) -> Canonical:
        ...

    @classmethod
    def _captures(cls, text: str) -> re.Match[str]:
        match = cls.pattern.fullmatch(text.strip())
        if match is None:
            raise GrammarMismatchError(cls.color_format, text)
        return match


class FunctionNotationFormat(ColorFormat):
    """
    Shared logic for ``rgb(...)`` / ``rgba(...)`` notations.

    Subclasses supply the component grammar, how a captured component is
    converted, its legal range and the alpha used when none is given.
    """

    component: ClassVar[str]
    convert: ClassVar[Callable[[str], float]]
    low: ClassVar[float]
    high: ClassVar[float]
    default_alpha: ClassVar[float]

    @staticmethod
    def build_pattern(component: str) -> re.Pattern[str]:
        return re.compile(
            rf"""
            [rR][gG][bB][aA]?
            \s*\(
                \s*(?P<r>{component})\s*,
                \s*(?P<g>{component})\s*,
                \s*(?P<b>{component})\s*
                (?:,
                    \s*(?P<a>{component})
                \s*)?
            \)
            """,
            re.VERBOSE | re.ASCII,
        )

    @classmethod
    def extract(cls, match: re.Match[str], name: str, text: str, default: Optional[N] = None) -> N:
        """Convert and range-check one named capture."""
        raw = match.group(name)
        if raw is None:
            if default is not None:
                return default
            raise MissingComponentError(
                cls.color_format, text, f"required color component {name!r} is missing"
            )
        try:
            value = cls.convert(raw)
        except ValueError as err:
            raise ComponentParseError(
                cls.color_format, text, f"unable to parse captured {raw!r}: {err}"
            ) from err
        if not cls.low <= value <= cls.high:
            raise RangeValidationError(
                cls.color_format,
                text,
                f"parsed {name}={value} is not within [{cls.low}, {cls.high}]",
            )
        return value

    @classmethod
    def components(cls, text: str) -> tuple:
        match = cls._captures(text)
        return (
            cls.extract(match, "r", text),
            cls.extract(match, "g", text),
            cls.extract(match, "b", text),
            cls.extract(match, "a", text, default=cls.default_alpha),
        )
