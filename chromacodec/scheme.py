from __future__ import annotations
from typing import Iterable, Iterator, Tuple, overload
import numpy as np
from .colors.canonical import Canonical
from .conversions.packed import np_pack


class Scheme:
    """A named, ordered, immutable collection of canonical colors."""
    __slots__ = ('_name', '_colors', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, name: str, colors: Iterable[Canonical] = ()) -> None:
        colors = tuple(colors)
        for i, color in enumerate(colors):
            if not isinstance(color, Canonical):
                raise TypeError(f"scheme color #{i} must be Canonical, got {type(color).__name__}")
        self._name = name
        self._colors = colors
        super().__setattr__('_is_frozen', True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def colors(self) -> Tuple[Canonical, ...]:
        return self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Canonical]:
        return iter(self._colors)

    @overload
    def __getitem__(self, index: int) -> Canonical: ...
    @overload
    def __getitem__(self, index: slice) -> Tuple[Canonical, ...]: ...
    def __getitem__(self, index):
        return self._colors[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scheme):
            return NotImplemented
        return self._name == other._name and self._colors == other._colors

    def __hash__(self) -> int:
        return hash((self._name, self._colors))

    def __repr__(self) -> str:
        return f"Scheme(name={self._name!r}, colors={len(self._colors)})"

    def to_array(self) -> np.ndarray:
        """Colors as a ``(n, 4)`` uint8 array."""
        if not self._colors:
            return np.zeros((0, 4), dtype=np.uint8)
        return np.array([c.value for c in self._colors], dtype=np.uint8)

    def packed(self) -> np.ndarray:
        """Colors packed as a ``(n,)`` uint32 array."""
        return np_pack(self.to_array())
