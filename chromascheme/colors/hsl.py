from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorValue, WithAlpha, build_registry


class Hsl(ColorValue):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "hsl"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    percent_channels: ClassVar[Tuple[int, ...]] = (1, 2)


class Hsla(ColorValue, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "hsla"
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l", "a")
    percent_channels: ClassVar[Tuple[int, ...]] = (1, 2)


hsl_mode_to_class = build_registry(Hsl, Hsla)
