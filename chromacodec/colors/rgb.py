from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class RGB(ColorBase):
    """Three channels (r, g, b) of any uniform component type."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    mode: ClassVar[ColorSpace] = "rgb"

    @classmethod
    def new(cls, red, green, blue) -> RGB:
        return cls((red, green, blue))

    def into_rgba(self, alpha: Scalar) -> RGBA:
        """Attach an alpha channel."""
        return RGBA(self._value + (alpha,))


class RGBA(ColorBase):
    """Four channels (r, g, b, a) of any uniform component type."""
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    mode: ClassVar[ColorSpace] = "rgba"

    @classmethod
    def new(cls, red, green, blue, alpha) -> RGBA:
        return cls((red, green, blue, alpha))

    @property
    def a(self):
        return self._value[3]

    @property
    def alpha(self):
        return self._value[3]

    def _generic_class(self) -> type[ColorBase]:
        return RGBA

    def into_rgba(self, alpha: Scalar) -> RGBA:
        """Return a new instance with the alpha channel replaced."""
        return self.__class__(self._value[:3] + (alpha,))

    def to_rgb(self) -> RGB:
        """Drop the alpha channel."""
        return RGB(self._value[:3])
