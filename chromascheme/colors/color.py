from __future__ import annotations
from typing import Any, Optional, Tuple

import numpy as np

from ..conversions import (
    get_relative_luminance,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
)
from ..types.color_types import IntTriple, Scalar, ScalarTriple
from ..types.limits import ALPHA_MAX, HUE_MAX, LIGHT_LUMINANCE_THRESHOLD
from ..utils import format_number, is_number, value_or_default
from .color_base import ColorValue, plain_scalar
from .hsl import Hsl, Hsla
from .rgb import Rgb, Rgba


def _channels_to_rgba(values) -> Tuple[ScalarTriple, Scalar]:
    values = list(values)
    if len(values) not in (3, 4):
        raise ValueError(f"Color expects 3 or 4 channels, got {len(values)}: {values!r}")
    rgb = values[:3]
    alpha = values[3] if len(values) == 4 else None
    if not all(is_number(v) for v in rgb) or not (alpha is None or is_number(alpha)):
        raise TypeError(f"Color channels must be numbers, got {values!r}")
    r, g, b = (plain_scalar(v) for v in rgb)
    return (r, g, b), plain_scalar(value_or_default(alpha, ALPHA_MAX))


class Color:
    """
    A single color kept in hex, RGB(A) and HSL(A) at once.

    Construct from a hex string (``"#ff8800"``, ``"f80"``), from 3 or 4
    numbers (``Color(255, 136, 0, 0.5)``), from one sequence of 3 or 4
    numbers, from another ``Color``, or from an ``Rgb``/``Rgba``/``Hsl``/
    ``Hsla`` value.

    RGB, HSL and alpha are stored; ``hex`` and the ``rgb``/``rgba``/
    ``hsl``/``hsla`` values are built on read, so every representation
    agrees after any setter call. The HSL setters recompute RGB from the
    full HSL triple; ``set_alpha`` touches alpha only.
    """
    __slots__ = ('_rgb', '_hsl', '_alpha')

    def __init__(self, *args: Any) -> None:
        hsl: Optional[ScalarTriple] = None

        if len(args) == 1:
            rgb, hsl, alpha = self._resolve_single(args[0])
        elif len(args) in (3, 4):
            rgb, alpha = _channels_to_rgba(args)
        else:
            raise TypeError(
                f"Color expects a hex string, a channel sequence or 3-4 numbers, got {len(args)} arguments"
            )

        self._rgb = rgb
        self._alpha = alpha
        self._hsl = hsl if hsl is not None else rgb_to_hsl(rgb)

    @staticmethod
    def _resolve_single(value: Any) -> Tuple[ScalarTriple, Optional[ScalarTriple], Scalar]:
        if isinstance(value, Color):
            return value._rgb, value._hsl, value._alpha

        if isinstance(value, str):
            return hex_to_rgb(normalize_hex(value)), None, ALPHA_MAX

        if isinstance(value, ColorValue):
            alpha = value.alpha if value.has_alpha else ALPHA_MAX
            if value.has_hue:
                h, s, l = value.value[:3]
                hsl = (h % HUE_MAX, s, l)
                return hsl_to_rgb(hsl), hsl, alpha
            r, g, b = value.value[:3]
            return (r, g, b), None, alpha

        if isinstance(value, (list, tuple, np.ndarray)):
            rgb, alpha = _channels_to_rgba(value)
            return rgb, None, alpha

        raise TypeError(f"Unsupported color input: {value!r}")

    @classmethod
    def from_hsl(cls, h: Scalar, s: Scalar, l: Scalar, a: Scalar = ALPHA_MAX) -> Color:
        """Build a color from HSL, keeping the HSL triple exactly and deriving RGB from it."""
        return cls(Hsla((h, s, l, a)))

    # ------------------ REPRESENTATIONS ------------------
    @property
    def hex(self) -> str:
        return rgb_to_hex(self._rgb)

    @property
    def r(self) -> Scalar:
        return self._rgb[0]

    @property
    def g(self) -> Scalar:
        return self._rgb[1]

    @property
    def b(self) -> Scalar:
        return self._rgb[2]

    @property
    def h(self) -> Scalar:
        return self._hsl[0]

    @property
    def s(self) -> Scalar:
        return self._hsl[1]

    @property
    def l(self) -> Scalar:
        return self._hsl[2]

    @property
    def a(self) -> Scalar:
        return self._alpha

    @property
    def rgb(self) -> Rgb:
        return Rgb(self._rgb)

    @property
    def rgba(self) -> Rgba:
        return Rgba(self._rgb + (self._alpha,))

    @property
    def hsl(self) -> Hsl:
        return Hsl(self._hsl)

    @property
    def hsla(self) -> Hsla:
        return Hsla(self._hsl + (self._alpha,))

    def to_hsb(self) -> IntTriple:
        """HSB/HSV triple of the current RGB channels."""
        return rgb_to_hsb(self._rgb)

    @property
    def luminance(self) -> float:
        return get_relative_luminance(self._rgb)

    def is_light(self, threshold: float = LIGHT_LUMINANCE_THRESHOLD) -> bool:
        return self.luminance > threshold

    # ------------------ MUTATORS ------------------
    def set_hue(self, hue: Scalar) -> None:
        """Set the hue (degrees, wrapped into [0, 360)) and refresh RGB and hex."""
        _, s, l = self._hsl
        self._hsl = (hue % HUE_MAX, s, l)
        self._update_from_hsl()

    def set_sat(self, saturation: Scalar) -> None:
        h, _, l = self._hsl
        self._hsl = (h, saturation, l)
        self._update_from_hsl()

    def set_lum(self, lightness: Scalar) -> None:
        h, s, _ = self._hsl
        self._hsl = (h, s, lightness)
        self._update_from_hsl()

    def set_alpha(self, alpha: Scalar) -> None:
        self._alpha = alpha

    def _update_from_hsl(self) -> None:
        self._rgb = hsl_to_rgb(self._hsl)

    # ------------------ VALUE PROTOCOL ------------------
    def copy(self) -> Color:
        return Color(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self._rgb, self._hsl, self._alpha) == (other._rgb, other._hsl, other._alpha)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Color({self.hex!r}, hsl={self._hsl!r}, a={format_number(self._alpha)})"

    def __str__(self) -> str:
        return self.hex


def random_color(rng: Optional[np.random.Generator] = None) -> Color:
    """
    Build a Color from a random hex value.

    Args:
        rng: Source of the random fraction. Defaults to a fresh
            ``numpy.random.default_rng()``.
    """
    generator = rng if rng is not None else np.random.default_rng()
    fraction = float(generator.random())
    return Color(f"#{int(fraction * 0x1000000):06x}")
