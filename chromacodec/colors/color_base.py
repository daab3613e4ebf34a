from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, Self
from numpy import ndarray
import numpy as np
from ..types.color_types import ColorSpace, Scalar


class ColorBase:
    """
    Immutable fixed-order channel container.

    Subclasses declare ``num_channels``, ``channel_names`` and ``mode``.
    Channels are stored as a plain tuple; ``_validate`` is the hook where
    specialised colors enforce their component domain.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes

    num_channels: ClassVar[int]
    channel_names: ClassVar[Tuple[str, ...]]
    mode: ClassVar[ColorSpace]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Tuple[Any, ...] | ndarray | ColorBase) -> None:
        if isinstance(value, ColorBase):
            value = value.value
        elif isinstance(value, ndarray):
            if value.shape != (self.num_channels,):
                raise ValueError(
                    f"{self.mode} expects an array of shape ({self.num_channels},), got {value.shape}"
                )
            value = tuple(value.tolist())

        value = tuple(value)
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        # safe assignment; __setattr__ still allows it during init
        self._value = self._validate(value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _validate(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return value

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    @property
    def r(self):
        return self._value[0]

    @property
    def g(self):
        return self._value[1]

    @property
    def b(self):
        return self._value[2]

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __array__(self, dtype=None, copy=None) -> ndarray:
        return np.array(self._value, dtype=dtype)

    def _generic_class(self) -> type[ColorBase]:
        """The unconstrained class with the same channel layout."""
        return type(self)

    def map(self, f: Callable[[Any], Scalar]) -> ColorBase:
        """
        Apply ``f`` to every channel, keeping the channel order.

        The result is the generic (unconstrained) color class of the same
        layout, so ``f`` may change the component type.
        """
        cls = self._generic_class()
        return cls(tuple(f(v) for v in self._value))

    def replace(self, **channels) -> Self:
        """Return a copy with some channels replaced by name."""
        unknown = set(channels) - set(self.channel_names)
        if unknown:
            raise ValueError(f"{self.mode} has no channel(s) {sorted(unknown)}")
        return self.__class__(tuple(
            channels.get(name, v) for name, v in zip(self.channel_names, self._value)
        ))
