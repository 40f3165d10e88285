from __future__ import annotations
from typing import Literal, Tuple

Scalar = int | float
IntTriple = Tuple[int, int, int]
ScalarTriple = Tuple[Scalar, Scalar, Scalar]
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
ConversionSpace = Literal["hex", "rgb", "hsl", "hsb", "hsv"]
HUE_SPACES = {"hsl", "hsla", "hsb", "hsv"}
ALPHA_SPACES = {"rgba", "hsla"}
