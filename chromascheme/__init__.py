"""Chromascheme: color conversion, a synced color object, and hue-rotation palettes."""

from .colors import Color, ColorValue, Rgb, Rgba, Hsl, Hsla, random_color
from .scheme import ColorScheme, SCHEME_ANGLES, rotate_hue
from .conversions import (
    InvalidColorFormat,
    hex_to_rgb,
    normalize_hex,
    component_to_hex,
    rgb_to_hex,
    rgb_to_hsl,
    hue_to_rgb,
    hsl_to_rgb,
    rgb_to_hsb,
    rgb_to_hsv,
    hsb_to_rgb,
    hsv_to_rgb,
    hsb_to_hsl,
    hsv_to_hsl,
    get_relative_luminance,
    is_light,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsb,
    np_hsb_to_rgb,
    np_relative_luminance,
    convert,
)

__version__ = "0.1.0"

__all__ = [
    # color object and values
    "Color",
    "ColorValue",
    "Rgb",
    "Rgba",
    "Hsl",
    "Hsla",
    "random_color",
    # palettes
    "ColorScheme",
    "SCHEME_ANGLES",
    "rotate_hue",
    # errors
    "InvalidColorFormat",
    # conversions
    "hex_to_rgb",
    "normalize_hex",
    "component_to_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hue_to_rgb",
    "hsl_to_rgb",
    "rgb_to_hsb",
    "rgb_to_hsv",
    "hsb_to_rgb",
    "hsv_to_rgb",
    "hsb_to_hsl",
    "hsv_to_hsl",
    "get_relative_luminance",
    "is_light",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "np_rgb_to_hsb",
    "np_hsb_to_rgb",
    "np_relative_luminance",
    "convert",
]
