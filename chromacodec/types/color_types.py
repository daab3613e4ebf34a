from __future__ import annotations
from typing import Literal, Tuple
import numpy as np

Scalar = int | float | np.integer | np.floating
U8Vector = Tuple[int, int, int, int]
Packed = int
ColorSpace = Literal["rgb", "rgba"]


def is_integer_component(value: object) -> bool:
    """
    Check whether a value can serve as an 8-bit channel.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))
