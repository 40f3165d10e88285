"""
Palette generation by hue rotation.

A ``ColorScheme`` is an ordered, read-only tuple of ``Color`` built either
from an explicit list of colors or from a base color and a list of hue
rotation angles (degrees, negative allowed). Rotations happen in HSL and
keep the base saturation, lightness and alpha.

>>> from chromascheme import ColorScheme
>>> scheme = ColorScheme.complementary("#ff0000")
>>> scheme.hexes
['#ff0000', '#00ffff']
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, Literal, Sequence, Tuple

import numpy as np

from .colors import Color
from .utils import is_number, round_half_up
from .types.limits import HUE_MAX

SCHEME_ANGLES: Dict[str, Tuple[int, ...]] = {
    "complementary": (180,),
    "triad": (120, 240),
    "tetrad": (60, 180, 240),
    "analogous": (-45, 45),
    "split_complementary": (150, 210),
    "accented_analogous": (-45, 45, 180),
}


def rotate_hue(base: Color, angle: float) -> Color:
    """
    Return a new Color whose hue is ``base.h + angle``, rounded half-up to a
    whole degree and wrapped into [0, 360).

    Saturation, lightness and alpha are copied from ``base`` as they are,
    and RGB is derived from that HSL. The rotated color keeps its HSL even
    where reading it back from RGB would give other values: the complement
    of black is ``hsl(180,0%,0%)``, although ``Color("#000000")`` has hue 0.
    """
    hue = round_half_up(base.h + angle) % HUE_MAX
    return Color.from_hsl(hue, base.s, base.l, base.a)


class ColorScheme:
    """
    Ordered palette of colors.

    ``ColorScheme(colors)`` converts each item with ``Color``;
    ``ColorScheme(base, angles)`` puts the base first, then one hue
    rotation of it per angle.

    Without angles a single color (a hex string, a ``Color`` or one flat
    channel sequence) raises ``TypeError``; wrap it in a list, or use
    ``ColorScheme.from_angles(base, [])`` for a one-color palette.
    """
    __slots__ = ('_palette',)

    def __init__(self, colors: Any, angles: Iterable[float] | None = None) -> None:
        if angles is None:
            palette = self._create_from_colors(colors)
        else:
            palette = self._create_from_angles(colors, angles)
        self._palette: Tuple[Color, ...] = tuple(palette)

    @staticmethod
    def _create_from_colors(colors: Any) -> list[Color]:
        if isinstance(colors, (str, Color)) or not isinstance(colors, (list, tuple, np.ndarray)):
            raise TypeError(
                f"ColorScheme without angles expects a sequence of colors, got {colors!r}"
            )
        if len(colors) > 0 and all(is_number(c) for c in colors):
            raise TypeError(
                f"ColorScheme without angles expects a sequence of colors, not channels: {colors!r}"
            )
        return [Color(c) for c in colors]

    @staticmethod
    def _create_from_angles(base: Any, angles: Iterable[float]) -> list[Color]:
        palette = [Color(base)]
        for angle in angles:
            palette.append(rotate_hue(palette[0], angle))
        return palette

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_colors(cls, colors: Sequence[Any]) -> ColorScheme:
        return cls(colors)

    @classmethod
    def from_angles(cls, base: Any, angles: Iterable[float]) -> ColorScheme:
        return cls(base, angles)

    @classmethod
    def from_preset(cls, base: Any, name: str) -> ColorScheme:
        """Build the named preset (a key of ``SCHEME_ANGLES``) around ``base``."""
        angles = SCHEME_ANGLES.get(name.lower())
        if angles is None:
            raise ValueError(f"Unknown color scheme preset: {name}")
        return cls(base, angles)

    @classmethod
    def complementary(cls, base: Any) -> ColorScheme:
        return cls(base, SCHEME_ANGLES["complementary"])

    @classmethod
    def triad(cls, base: Any) -> ColorScheme:
        return cls(base, SCHEME_ANGLES["triad"])

    @classmethod
    def tetrad(cls, base: Any) -> ColorScheme:
        return cls(base, SCHEME_ANGLES["tetrad"])

    @classmethod
    def analogous(cls, base: Any) -> ColorScheme:
        return cls(base, SCHEME_ANGLES["analogous"])

    @classmethod
    def split_complementary(cls, base: Any) -> ColorScheme:
        return cls(base, SCHEME_ANGLES["split_complementary"])

    @classmethod
    def accented_analogous(cls, base: Any) -> ColorScheme:
        return cls(base, SCHEME_ANGLES["accented_analogous"])

    # Short aliases
    compl = complementary
    analog = analogous
    split = split_complementary
    accent = accented_analogous

    # ------------------ READ ACCESS ------------------
    @property
    def palette(self) -> Tuple[Color, ...]:
        return self._palette

    @property
    def hexes(self) -> list[str]:
        return [color.hex for color in self._palette]

    def to_array(self, space: Literal["rgb", "hsl"] = "rgb") -> np.ndarray:
        """Channels of every palette color as an integer array of shape (n, 3)."""
        if space == "rgb":
            rows = [color.rgb.value for color in self._palette]
        elif space == "hsl":
            rows = [color.hsl.value for color in self._palette]
        else:
            raise ValueError(f"Unknown space: {space}")
        return np.array(rows, dtype=int).reshape(-1, 3)

    def __len__(self) -> int:
        return len(self._palette)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._palette)

    def __getitem__(self, index):
        return self._palette[index]

    def __repr__(self) -> str:
        return f"ColorScheme({self.hexes!r})"
