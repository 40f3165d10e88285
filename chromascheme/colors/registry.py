from __future__ import annotations
from typing import Optional

from ..conversions import convert
from ..types.color_types import ColorSpace, Scalar
from ..types.limits import ALPHA_MAX
from ..utils import value_or_default
from .color_base import ColorValue
from .hsl import hsl_mode_to_class
from .rgb import rgb_mode_to_class

unified_mode_to_class: dict[str, type[ColorValue]] = {**rgb_mode_to_class, **hsl_mode_to_class}


def get_color_class(color_space: str) -> type[ColorValue]:
    color_class = unified_mode_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorValue, to_space: Optional[ColorSpace] = None) -> ColorValue:
    """
    Convert this value to another of rgb, rgba, hsl, hsla.

    Alpha is carried over when both sides have it, defaulted to 1.0 when
    only the target has it, and dropped otherwise.

    Args:
        to_space: Target color space. Defaults to the current one.

    Returns:
        New ColorValue instance in the target space
    """
    cls = get_color_class(value_or_default(to_space, self.mode))
    channels = tuple(convert(self.value[:3], self.mode[:3], cls.mode[:3]))
    if cls.num_channels == 4:
        alpha = self.alpha if self.has_alpha else ALPHA_MAX
        channels = channels + (alpha,)
    return cls(channels)


def with_alpha(self: ColorValue, alpha: Optional[Scalar] = None) -> ColorValue:
    """
    Return an RGBA/HSLA value with the given alpha (1.0 when omitted).

    Replaces the alpha of a value that already has one.
    """
    alpha = value_or_default(alpha, ALPHA_MAX)
    base_mode = self.mode[:3]
    cls = get_color_class(base_mode + "a")
    return cls(tuple(self.value[:3]) + (alpha,))


def without_alpha(self: ColorValue) -> ColorValue:
    """Return the RGB/HSL value with the alpha channel dropped."""
    cls = get_color_class(self.mode[:3])
    return cls(self.value[:3])


ColorValue.convert = color_convert
ColorValue.with_alpha = with_alpha
ColorValue.without_alpha = without_alpha
