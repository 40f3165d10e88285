from typing import Callable, Dict, Union

from ..types.color_types import ConversionSpace, IntTriple, ScalarTriple
from ..utils import unpack_triple
from .hex import InvalidColorFormat, hex_to_rgb, rgb_to_hex
from .to_hsb import rgb_to_hsb
from .to_hsl import rgb_to_hsl
from .to_rgb import hsb_to_rgb, hsl_to_rgb

ConvertedColor = Union[str, ScalarTriple]


def _parse_hex(color: str) -> IntTriple:
    rgb = hex_to_rgb(color)
    if rgb is None:
        raise InvalidColorFormat(f"Invalid hex color: {color!r}")
    return rgb


# Every space converts through RGB
TO_RGB: Dict[str, Callable[..., ScalarTriple]] = {
    "hex": _parse_hex,
    "rgb": unpack_triple,
    "hsl": hsl_to_rgb,
    "hsb": hsb_to_rgb,
}

FROM_RGB: Dict[str, Callable[..., ConvertedColor]] = {
    "hex": rgb_to_hex,
    "rgb": unpack_triple,
    "hsl": rgb_to_hsl,
    "hsb": rgb_to_hsb,
}

SPACE_ALIASES = {"hsv": "hsb"}


def _canonical_space(space: str) -> str:
    space = space.lower()
    space = SPACE_ALIASES.get(space, space)
    if space not in TO_RGB:
        raise ValueError(f"Unknown space: {space}")
    return space


def convert(
    color: ConvertedColor,
    from_space: ConversionSpace,
    to_space: ConversionSpace,
) -> ConvertedColor:
    """
    Convert a color between hex, RGB, HSL and HSB/HSV.

    Args:
        color: Hex string or channel triple in ``from_space``
        from_space: One of "hex", "rgb", "hsl", "hsb", "hsv"
        to_space: One of "hex", "rgb", "hsl", "hsb", "hsv"

    Returns:
        Hex string when ``to_space`` is "hex", otherwise a channel tuple
    """
    fs = _canonical_space(from_space)
    ts = _canonical_space(to_space)
    if fs == ts:
        return color  # No conversion needed
    rgb = TO_RGB[fs](color)
    return FROM_RGB[ts](rgb)
