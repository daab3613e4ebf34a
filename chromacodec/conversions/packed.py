"""
Packed 32-bit representation.

Byte layout from most to least significant: R, G, B, A ("RRGGBBAA").
Every unsigned 32-bit value is a valid packed color, so the mapping is a
bijection between 4-tuples of bytes and ``0 .. 0xFFFFFFFF``.
"""
from typing import Sequence, Tuple
import numpy as np
from ..errors import ChannelRangeError, ChannelTypeError, PackedRangeError
from ..types.color_types import Packed, U8Vector, is_integer_component
from ..types.format_type import (
    BIT_SHIFT_RED,
    BIT_SHIFT_GREEN,
    BIT_SHIFT_BLUE,
    CHANNEL_MASK,
    CHANNEL_SHIFTS,
    PACKED_MAX,
)

_NAMES = ("r", "g", "b", "a")


def pack(color: Sequence[int]) -> Packed:
    """
    Pack four 8-bit channels into one integer.

    ``color`` is anything iterable as (r, g, b, a), typically a
    :class:`~chromacodec.colors.canonical.Canonical`.
    """
    values = tuple(color)
    if len(values) != 4:
        raise ValueError(f"expected 4 channels (r, g, b, a), got {len(values)}")
    for name, v in zip(_NAMES, values):
        if not is_integer_component(v):
            raise ChannelTypeError(name, v, "an integer")
        if not 0 <= v <= CHANNEL_MASK:
            raise ChannelRangeError(name, v, 0, CHANNEL_MASK)
    r, g, b, a = (int(v) for v in values)
    return (r << BIT_SHIFT_RED) | (g << BIT_SHIFT_GREEN) | (b << BIT_SHIFT_BLUE) | a


def unpack(packed: Packed) -> U8Vector:
    """Split a packed integer into its (r, g, b, a) bytes."""
    if not is_integer_component(packed) or not 0 <= packed <= PACKED_MAX:
        raise PackedRangeError(packed)
    packed = int(packed)
    return tuple((packed >> shift) & CHANNEL_MASK for shift in CHANNEL_SHIFTS)  # type: ignore[return-value]


def np_pack(colors: np.ndarray) -> np.ndarray:
    """
    Vectorized :func:`pack`.

    Args:
        colors: Integer array whose last dimension holds (r, g, b, a).

    Returns:
        ``uint32`` array with the last dimension removed.
    """
    arr = np.asarray(colors)
    if arr.shape[-1:] != (4,):
        raise ValueError(f"expected last dimension to be 4, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"expected an integer array, got dtype {arr.dtype}")
    if arr.size and (arr.min() < 0 or arr.max() > CHANNEL_MASK):
        bad = arr[(arr < 0) | (arr > CHANNEL_MASK)].flat[0]
        raise ChannelRangeError("array", int(bad), 0, CHANNEL_MASK)

    wide = arr.astype(np.uint32)
    out = np.zeros(arr.shape[:-1], dtype=np.uint32)
    for i, shift in enumerate(CHANNEL_SHIFTS):
        out |= wide[..., i] << np.uint32(shift)
    return out


def np_unpack(packed: np.ndarray) -> np.ndarray:
    """
    Vectorized :func:`unpack`.

    Returns:
        ``uint8`` array of shape ``packed.shape + (4,)``.
    """
    arr = np.asarray(packed)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"expected an integer array, got dtype {arr.dtype}")
    if arr.size and (arr.min() < 0 or arr.max() > PACKED_MAX):
        bad = arr[(arr < 0) | (arr > PACKED_MAX)].flat[0]
        raise PackedRangeError(int(bad))

    wide = arr.astype(np.uint32)
    channels: Tuple[np.ndarray, ...] = tuple(
        (wide >> np.uint32(shift)) & np.uint32(CHANNEL_MASK) for shift in CHANNEL_SHIFTS
    )
    return np.stack(channels, axis=-1).astype(np.uint8)
