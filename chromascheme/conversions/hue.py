import numpy as np
from numpy import ndarray as NDArray


def sector_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue as a fraction of a turn, from normalized channels.

    Picks the sector by the max channel (red, then green, then blue).
    Caller guarantees ``delta > 0``.
    """
    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return hue / 6


def np_sector_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized ``sector_hue``; achromatic entries (``delta == 0``) yield 0."""
    hue = np.zeros_like(max_c)
    chromatic = delta > 0
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6, 0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    return hue / 6


def split_channels(first, second=None, third=None):
    """Broadcast three channel arrays, or split one ``(..., 3)`` array."""
    if second is None and third is None:
        arr = np.asarray(first, dtype=float)
        if arr.shape[-1] != 3:
            raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
        first, second, third = arr[..., 0], arr[..., 1], arr[..., 2]
    a = np.asarray(first, dtype=float)
    b = np.asarray(second, dtype=float)
    c = np.asarray(third, dtype=float)
    out_shape = np.broadcast(a, b, c).shape
    return (
        np.broadcast_to(a, out_shape),
        np.broadcast_to(b, out_shape),
        np.broadcast_to(c, out_shape),
    )
