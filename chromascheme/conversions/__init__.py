"""
Chromascheme Color Space Conversions
====================================

Scalar and vectorized (numpy) conversions between hex, RGB, HSL and HSB/HSV.

Value ranges
------------
- RGB channels: integers in [0, 255]
- Hue: degrees in [0, 360)
- Saturation, lightness, brightness: percent in [0, 100]

Conversion Functions
-------------------

Hex:
    hex_to_rgb(hex)            -> (r, g, b) or None
    rgb_to_hex(r, g, b)        -> "#rrggbb"
    normalize_hex(hex)         -> "#rrggbb" (adds "#", expands "#abc")
    component_to_hex(c)        -> "rr"

RGB ↔ HSL:
    rgb_to_hsl(r, g, b)        np_rgb_to_hsl(r, g, b)
    hsl_to_rgb(h, s, l)        np_hsl_to_rgb(h, s, l)
    hue_to_rgb(p, q, t)

RGB ↔ HSB/HSV:
    rgb_to_hsb(r, g, b)        np_rgb_to_hsb(r, g, b)
    hsb_to_rgb(h, s, v)        np_hsb_to_rgb(h, s, v)
    hsv_to_rgb, rgb_to_hsv     (aliases)

HSB → HSL:
    hsb_to_hsl(h, s, v), hsv_to_hsl (alias)

Luminance:
    get_relative_luminance(color)
    np_relative_luminance(r, g, b)
    is_light(color, threshold=0.35)

High-Level API
-------------
    convert(color, from_space, to_space)

All triple-taking functions accept three positional values or a single
3-element sequence. Rounding is half-up; ``hsb_to_rgb`` floors its output
and returns black whenever saturation is 0.

Examples
--------
>>> from chromascheme.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 0, 0)
(0, 100, 50)
>>> hsl_to_rgb((120, 100, 50))
(0, 255, 0)
"""

# Hex
from .hex import (
    InvalidColorFormat,
    hex_to_rgb,
    normalize_hex,
    component_to_hex,
    rgb_to_hex,
)

# RGB → HSL, HSB → HSL
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl, hsb_to_hsl, hsv_to_hsl

# HSL → RGB, HSB → RGB
from .to_rgb import (
    hue_to_rgb,
    hsl_to_rgb,
    np_hsl_to_rgb,
    hsb_to_rgb,
    np_hsb_to_rgb,
    hsv_to_rgb,
    np_hsv_to_rgb,
)

# RGB → HSB
from .to_hsb import rgb_to_hsb, np_rgb_to_hsb, rgb_to_hsv, np_rgb_to_hsv

# Luminance
from .luminance import get_relative_luminance, np_relative_luminance, is_light

# High-level API
from .wrapper import convert

__all__ = [
    # Hex
    'InvalidColorFormat',
    'hex_to_rgb',
    'normalize_hex',
    'component_to_hex',
    'rgb_to_hex',

    # RGB ↔ HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hue_to_rgb',
    'hsl_to_rgb',
    'np_hsl_to_rgb',

    # RGB ↔ HSB
    'rgb_to_hsb',
    'np_rgb_to_hsb',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'hsb_to_rgb',
    'np_hsb_to_rgb',
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # HSB → HSL
    'hsb_to_hsl',
    'hsv_to_hsl',

    # Luminance
    'get_relative_luminance',
    'np_relative_luminance',
    'is_light',

    # High-level API
    'convert',
]
