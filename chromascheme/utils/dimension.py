from typing import Any, Optional, Tuple
from collections.abc import Sized

from ..types.color_types import Scalar


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def unpack_triple(first: Any, second: Optional[Scalar] = None, third: Optional[Scalar] = None) -> Tuple[Scalar, Scalar, Scalar]:
    """
    Accept either three positional channels or one 3-element sequence.

    Args:
        first: First channel, or a sequence holding all three channels
        second: Second channel, omitted when ``first`` is a sequence
        third: Third channel, omitted when ``first`` is a sequence

    Returns:
        Tuple of the three channels
    """
    if second is None and third is None:
        values = tuple(first)
        if len(values) != 3:
            raise ValueError(f"Expected 3 channels, got {len(values)}: {values!r}")
        return values[0], values[1], values[2]
    if second is None or third is None:
        raise TypeError("Expected three channel values or a single 3-element sequence")
    return first, second, third
