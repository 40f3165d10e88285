"""
Chromascheme Color Classes
==========================

``Color`` is the mutable aggregate holding one color as hex, RGB(A) and
HSL(A). ``Rgb``, ``Rgba``, ``Hsl`` and ``Hsla`` are the immutable values it
hands out; each renders to its CSS string with ``str()``.

Usage
-----
>>> from chromascheme.colors import Color
>>> color = Color("#f80")
>>> color.hex
'#ff8800'
>>> str(color.hsl)
'hsl(32,100%,50%)'
>>> color.set_alpha(0.5)
>>> str(color.rgba)
'rgba(255,136,0,0.5)'

Value classes
-------------
    - Rgb:  r, g, b in [0, 255]             -> "rgb(r,g,b)"
    - Rgba: Rgb plus alpha in [0, 1]        -> "rgba(r,g,b,a)"
    - Hsl:  h in [0, 360), s, l in [0, 100] -> "hsl(h,s%,l%)"
    - Hsla: Hsl plus alpha                  -> "hsla(h,s%,l%,a)"

Notes
-----
- Value instances are frozen after initialization
- ``convert()`` moves between rgb, rgba, hsl and hsla
- ``with_alpha()`` / ``without_alpha()`` add, replace or drop alpha
"""

from .color_base import ColorValue
from .rgb import Rgb, Rgba
from .hsl import Hsl, Hsla
from .registry import unified_mode_to_class, get_color_class, color_convert
from .color import Color, random_color


__all__ = [
    'ColorValue',
    'Rgb',
    'Rgba',
    'Hsl',
    'Hsla',
    'Color',
    'random_color',
    'color_convert',
    'get_color_class',
    'unified_mode_to_class',
]
