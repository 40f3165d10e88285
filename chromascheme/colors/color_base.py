from __future__ import annotations
from abc import ABC
from typing import Any, Callable, ClassVar, Iterator, Tuple
import numpy as np

from ..types.color_types import ALPHA_SPACES, HUE_SPACES, ColorSpace, Scalar, ScalarVector
from ..utils import format_number, get_dimension


def plain_scalar(value: Any) -> Scalar:
    """Unwrap numpy scalars so channels hold plain ``int``/``float``."""
    return value.item() if isinstance(value, np.generic) else value


class ColorValue:
    """
    Immutable channel record with CSS rendering.

    Subclasses declare ``mode``, ``channels`` and which channels render as
    percentages; channel values are reachable as attributes (``rgb.r``).
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorSpace]
    channels: ClassVar[Tuple[str, ...]]
    percent_channels: ClassVar[Tuple[int, ...]] = ()
    convert: Callable[..., ColorValue]
    with_alpha: Callable[..., ColorValue]
    without_alpha: Callable[..., ColorValue]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector) -> None:
        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {value!r}")

        self._value = tuple(plain_scalar(v) for v in value)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    def __getattr__(self, name: str) -> Scalar:
        channels = type(self).channels
        if name in channels:
            return self._value[channels.index(name)]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    # ------------------ SEQUENCE / VALUE PROTOCOL ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        """CSS form, e.g. ``rgb(255,0,0)`` or ``hsla(0,100%,50%,0.5)``."""
        parts = (
            format_number(v) + ('%' if i in self.percent_channels else '')
            for i, v in enumerate(self._value)
        )
        return f"{self.mode}({','.join(parts)})"


class WithAlpha(ABC):
    """
    Mixin for a ColorValue subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    value: ScalarVector
    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]


def build_registry(*classes: type[ColorValue]) -> dict[str, type[ColorValue]]:
    return {cls.mode: cls for cls in classes}

