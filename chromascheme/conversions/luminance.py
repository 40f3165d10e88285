"""Relative luminance as defined by WCAG 2.x."""

import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import Scalar
from ..types.limits import (
    CHANNEL_MAX,
    LIGHT_LUMINANCE_THRESHOLD,
    LUMINANCE_WEIGHTS,
    SRGB_GAMMA,
    SRGB_GAMMA_OFFSET,
    SRGB_GAMMA_SCALE,
    SRGB_LINEAR_DIVISOR,
    SRGB_LINEAR_THRESHOLD,
)
from ..utils import unpack_triple
from .hex import InvalidColorFormat, hex_to_rgb
from .hue import split_channels


def _linearize(c: float) -> float:
    if c <= SRGB_LINEAR_THRESHOLD:
        return c / SRGB_LINEAR_DIVISOR
    return ((c + SRGB_GAMMA_OFFSET) / SRGB_GAMMA_SCALE) ** SRGB_GAMMA


def get_relative_luminance(color, g: Optional[Scalar] = None, b: Optional[Scalar] = None) -> float:
    """
    Relative luminance of an sRGB color.

    Args:
        color: A hex string, a red channel (with ``g`` and ``b``), a
            3-sequence of channels, or any object with ``r``, ``g``, ``b``
            attributes (such as ``Color``)

    Returns:
        Luminance in [0, 1]; 0 for black, 1 for white

    Raises:
        InvalidColorFormat: if ``color`` is a malformed hex string
    """
    if isinstance(color, str):
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise InvalidColorFormat(f"Invalid hex color: {color!r}")
    elif g is None and b is None and hasattr(color, "r"):
        rgb = (color.r, color.g, color.b)
    else:
        rgb = unpack_triple(color, g, b)

    red, green, blue = (_linearize(c / CHANNEL_MAX) for c in rgb)
    w_r, w_g, w_b = LUMINANCE_WEIGHTS
    return w_r * red + w_g * green + w_b * blue


def np_relative_luminance(r, g: Optional[NDArray] = None, b: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: relative luminance.

    Args:
        r, g, b: array-like or scalar in [0, 255]; or a single ``(..., 3)`` array as ``r``

    Returns:
        Float array of shape (...)
    """
    rgb = np.stack(split_channels(r, g, b), axis=-1) / CHANNEL_MAX
    linear = np.where(
        rgb <= SRGB_LINEAR_THRESHOLD,
        rgb / SRGB_LINEAR_DIVISOR,
        ((rgb + SRGB_GAMMA_OFFSET) / SRGB_GAMMA_SCALE) ** SRGB_GAMMA,
    )
    w_r, w_g, w_b = LUMINANCE_WEIGHTS
    return w_r * linear[..., 0] + w_g * linear[..., 1] + w_b * linear[..., 2]


def is_light(color, threshold: float = LIGHT_LUMINANCE_THRESHOLD) -> bool:
    """True when the relative luminance of ``color`` is above ``threshold``."""
    return get_relative_luminance(color) > threshold
