import math
import numbers
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Scalar


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (``2.5 -> 3``, ``-2.5 -> -2``)."""
    return math.floor(value + 0.5)


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized ``round_half_up``; returns an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)


def format_number(value: Scalar) -> str:
    """Render a channel for CSS output: ``1.0 -> '1'``, ``0.5 -> '0.5'``."""
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def is_number(value) -> bool:
    """True for ints, floats and numpy real scalars."""
    return isinstance(value, numbers.Real)
