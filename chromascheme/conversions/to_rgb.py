import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import IntTriple, Scalar
from ..types.limits import CHANNEL_MAX, HUE_MAX, PERCENT_MAX
from ..utils import np_round_half_up, round_half_up, unpack_triple
from .hue import split_channels

_SECTOR_DEGREES = 60

## HSL to RGB conversions

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """
    Piecewise channel helper for HSL to RGB.

    Args:
        p: Lower bound of the channel range
        q: Upper bound of the channel range
        t: Hue fraction for this channel, wrapped into [0, 1]

    Returns:
        Channel value in [0, 1]
    """
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s: Optional[Scalar] = None, l: Optional[Scalar] = None) -> IntTriple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, or a sequence of (h, s, l)
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        (r, g, b) in [0, 255], rounded half-up
    """
    h, s, l = unpack_triple(h, s, l)
    h /= HUE_MAX
    s /= PERCENT_MAX
    l /= PERCENT_MAX

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1 / 3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1 / 3)

    return round_half_up(r * CHANNEL_MAX), round_half_up(g * CHANNEL_MAX), round_half_up(b * CHANNEL_MAX)


def _np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_rgb(h, s: Optional[NDArray] = None, l: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h, s, l: array-like or scalar (degrees, percent, percent);
            or a single ``(..., 3)`` array as ``h``

    Returns:
        rgb: integer array of shape (..., 3)
    """
    h, s, l = split_channels(h, s, l)
    h = h / HUE_MAX
    s = s / PERCENT_MAX
    l = l / PERCENT_MAX

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    achromatic = s == 0
    r = np.where(achromatic, l, _np_hue_to_rgb(p, q, h + 1 / 3))
    g = np.where(achromatic, l, _np_hue_to_rgb(p, q, h))
    b = np.where(achromatic, l, _np_hue_to_rgb(p, q, h - 1 / 3))

    return np.stack([
        np_round_half_up(r * CHANNEL_MAX),
        np_round_half_up(g * CHANNEL_MAX),
        np_round_half_up(b * CHANNEL_MAX),
    ], axis=-1)

## HSB to RGB conversions

def hsb_to_rgb(h, s: Optional[Scalar] = None, v: Optional[Scalar] = None) -> IntTriple:
    """
    Convert HSB/HSV to RGB.

    Zero saturation always yields black, whatever the brightness; unlike
    ``hsl_to_rgb`` this does not produce a grey. Channels are floored,
    not rounded.

    Args:
        h: Hue in degrees, or a sequence of (h, s, v)
        s: Saturation in percent [0, 100]
        v: Brightness in percent [0, 100]

    Returns:
        (r, g, b) in [0, 255]
    """
    h, s, v = unpack_triple(h, s, v)
    if s == 0:
        return 0, 0, 0

    s /= PERCENT_MAX
    v /= PERCENT_MAX
    h /= _SECTOR_DEGREES

    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    # h == 360 lands in sector 6, which is sector 0 again
    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return math.floor(r * CHANNEL_MAX), math.floor(g * CHANNEL_MAX), math.floor(b * CHANNEL_MAX)


def np_hsb_to_rgb(h, s: Optional[NDArray] = None, v: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: Convert HSB/HSV to RGB.

    Args:
        h, s, v: array-like or scalar (degrees, percent, percent);
            or a single ``(..., 3)`` array as ``h``

    Returns:
        rgb: integer array of shape (..., 3)
    """
    h, s, v = split_channels(h, s, v)
    black = s == 0
    s = s / PERCENT_MAX
    v = v / PERCENT_MAX
    h = h / _SECTOR_DEGREES

    i = np.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    sector = i.astype(int) % 6
    masks = [sector == k for k in range(6)]
    r = np.select(masks, [v, q, p, p, t, v])
    g = np.select(masks, [t, v, v, q, p, p])
    b = np.select(masks, [p, p, t, v, v, q])

    rgb = np.stack([r, g, b], axis=-1) * CHANNEL_MAX
    rgb = np.floor(rgb).astype(int)
    rgb[black] = 0
    return rgb


hsv_to_rgb = hsb_to_rgb
np_hsv_to_rgb = np_hsb_to_rgb
