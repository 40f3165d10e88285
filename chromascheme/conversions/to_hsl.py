import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import IntTriple, Scalar
from ..types.limits import CHANNEL_MAX, HUE_MAX, PERCENT_MAX
from ..utils import np_round_half_up, round_half_up, unpack_triple
from .hue import np_sector_hue, sector_hue, split_channels
from .to_rgb import hsb_to_rgb


def rgb_to_hsl(r, g: Optional[Scalar] = None, b: Optional[Scalar] = None) -> IntTriple:
    """
    Convert RGB to HSL.

    Standard min/max algorithm, adapted from
    https://en.wikipedia.org/wiki/HSL_and_HSV.

    Args:
        r: Red in [0, 255], or a sequence of (r, g, b)
        g: Green in [0, 255]
        b: Blue in [0, 255]

    Returns:
        (h, s, l): hue in degrees [0, 360), saturation and lightness in
        percent [0, 100], each rounded half-up to an integer. A hue that
        rounds up to 360 wraps to 0.
    """
    r, g, b = unpack_triple(r, g, b)
    r /= CHANNEL_MAX
    g /= CHANNEL_MAX
    b /= CHANNEL_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        hue = saturation = 0.0  # achromatic
    else:
        delta = max_c - min_c
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)
        hue = sector_hue(r, g, b, max_c, delta)

    return (
        round_half_up(hue * HUE_MAX) % HUE_MAX,
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(lightness * PERCENT_MAX),
    )


def np_rgb_to_hsl(r, g: Optional[NDArray] = None, b: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar in [0, 255]; or a single ``(..., 3)`` array as ``r``

    Returns:
        hsl: integer array of shape (..., 3)
    """
    r, g, b = split_channels(r, g, b)
    r = r / CHANNEL_MAX
    g = g / CHANNEL_MAX
    b = b / CHANNEL_MAX

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    saturation = np.zeros_like(lightness)
    chromatic = delta > 0
    light = chromatic & (lightness > 0.5)
    dark = chromatic & ~light
    saturation[light] = delta[light] / (2 - max_c[light] - min_c[light])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    hue = np_sector_hue(r, g, b, max_c, delta)

    return np.stack([
        np_round_half_up(hue * HUE_MAX) % HUE_MAX,
        np_round_half_up(saturation * PERCENT_MAX),
        np_round_half_up(lightness * PERCENT_MAX),
    ], axis=-1)


def hsb_to_hsl(h, s: Optional[Scalar] = None, v: Optional[Scalar] = None) -> IntTriple:
    """Convert HSB/HSV to HSL by way of RGB."""
    return rgb_to_hsl(hsb_to_rgb(h, s, v))


hsv_to_hsl = hsb_to_hsl
