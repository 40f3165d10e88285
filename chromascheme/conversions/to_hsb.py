import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import IntTriple, Scalar
from ..types.limits import CHANNEL_MAX, HUE_MAX, PERCENT_MAX
from ..utils import np_round_half_up, round_half_up, unpack_triple
from .hue import np_sector_hue, sector_hue, split_channels


def rgb_to_hsb(r, g: Optional[Scalar] = None, b: Optional[Scalar] = None) -> IntTriple:
    """
    Convert RGB to HSB/HSV.

    Brightness is the max channel; saturation is ``delta / max`` (0 for black).

    Args:
        r: Red in [0, 255], or a sequence of (r, g, b)
        g: Green in [0, 255]
        b: Blue in [0, 255]

    Returns:
        (h, s, v): hue in degrees, saturation and brightness in percent,
        each rounded half-up to an integer.
    """
    r, g, b = unpack_triple(r, g, b)
    r /= CHANNEL_MAX
    g /= CHANNEL_MAX
    b /= CHANNEL_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    saturation = 0 if max_c == 0 else delta / max_c
    hue = 0 if max_c == min_c else sector_hue(r, g, b, max_c, delta)

    return (
        round_half_up(hue * HUE_MAX) % HUE_MAX,
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(max_c * PERCENT_MAX),
    )


def np_rgb_to_hsb(r, g: Optional[NDArray] = None, b: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: Convert RGB to HSB/HSV.

    Args:
        r, g, b: array-like or scalar in [0, 255]; or a single ``(..., 3)`` array as ``r``

    Returns:
        hsb: integer array of shape (..., 3)
    """
    r, g, b = split_channels(r, g, b)
    r = r / CHANNEL_MAX
    g = g / CHANNEL_MAX
    b = b / CHANNEL_MAX

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    saturation = np.zeros_like(max_c)
    lit = max_c > 0
    saturation[lit] = delta[lit] / max_c[lit]
    hue = np_sector_hue(r, g, b, max_c, delta)

    return np.stack([
        np_round_half_up(hue * HUE_MAX) % HUE_MAX,
        np_round_half_up(saturation * PERCENT_MAX),
        np_round_half_up(max_c * PERCENT_MAX),
    ], axis=-1)


rgb_to_hsv = rgb_to_hsb
np_rgb_to_hsv = np_rgb_to_hsb
