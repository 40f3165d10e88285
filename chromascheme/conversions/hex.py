import re
import warnings
from typing import Optional

from ..types.color_types import IntTriple, Scalar
from ..types.limits import CHANNEL_MAX
from ..utils import round_half_up, unpack_triple

_HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)
_SHORTHAND_LENGTH = 3


class InvalidColorFormat(ValueError):
    """Raised when a string cannot be read as a ``#rrggbb`` / ``#rgb`` color."""


def hex_to_rgb(hex_color: str) -> Optional[IntTriple]:
    """
    Convert a 6-digit hex string to an RGB triple.

    The leading ``#`` is optional and digits are case-insensitive.
    Shorthand (``#abc``) is not expanded here, see ``normalize_hex``.

    Args:
        hex_color: Hex string such as ``"#ff8000"`` or ``"FF8000"``

    Returns:
        (r, g, b) in [0, 255], or None when the string is malformed
    """
    if not isinstance(hex_color, str):
        return None
    match = _HEX_PATTERN.fullmatch(hex_color)
    if match is None:
        return None
    return int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16)


def normalize_hex(hex_color: str) -> str:
    """
    Canonicalize a hex color string to lowercase ``#rrggbb``.

    Adds the missing ``#`` and expands 3-digit shorthand by doubling each digit.

    Raises:
        InvalidColorFormat: if the result is not a valid 6-digit hex color
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(f"Hex color must be a string, got {type(hex_color).__name__}")
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) == _SHORTHAND_LENGTH:
        digits = "".join(d * 2 for d in digits)
    normalized = "#" + digits.lower()
    if hex_to_rgb(normalized) is None:
        raise InvalidColorFormat(f"Invalid hex color: {hex_color!r}")
    return normalized


def component_to_hex(c: Scalar) -> str:
    """Convert one channel to a 2-digit lowercase hex string."""
    value = round_half_up(c)
    if not 0 <= value <= CHANNEL_MAX:
        warnings.warn(
            f"Channel value {c!r} is outside [0, {CHANNEL_MAX}]; the hex component will be malformed"
        )
    return format(value, "02x")


def rgb_to_hex(r, g: Optional[Scalar] = None, b: Optional[Scalar] = None) -> str:
    """
    Convert an RGB color to a ``#rrggbb`` string.

    Accepts ``rgb_to_hex(r, g, b)`` or ``rgb_to_hex((r, g, b))``.
    """
    r, g, b = unpack_triple(r, g, b)
    return "#" + component_to_hex(r) + component_to_hex(g) + component_to_hex(b)
