from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorValue, WithAlpha, build_registry


class Rgb(ColorValue):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")


class Rgba(ColorValue, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")


rgb_mode_to_class = build_registry(Rgb, Rgba)
