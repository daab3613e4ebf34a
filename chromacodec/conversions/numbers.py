import numpy as np
from ..errors import ChannelRangeError
from ..types.format_type import FormatType, max_channel

U8_MAX = max_channel[FormatType.INT]
UNIT_MAX = max_channel[FormatType.FLOAT]


def unit_to_u8(value: float, channel: str = "?") -> int:
    """Scale a float in [0.0, 1.0] to an 8-bit channel (0.0 -> 0, 1.0 -> 255)."""
    if not 0.0 <= value <= UNIT_MAX:
        raise ChannelRangeError(channel, value, 0.0, UNIT_MAX)
    return int(round(value * U8_MAX))


def u8_to_unit(value: int) -> float:
    return value / U8_MAX


def np_unit_to_u8(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`unit_to_u8`; rejects any value outside [0.0, 1.0]."""
    values = np.asarray(values, dtype=np.float64)
    bad = ~((values >= 0.0) & (values <= UNIT_MAX))
    if np.any(bad):
        first = values[bad].flat[0]
        raise ChannelRangeError("array", float(first), 0.0, UNIT_MAX)
    return np.round(values * U8_MAX).astype(np.uint8)


def np_u8_to_unit(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`u8_to_unit`, float64 like the scalar version."""
    return np.asarray(values, dtype=np.float64) / U8_MAX
