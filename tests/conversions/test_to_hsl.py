import numpy as np

from chromascheme.conversions import hsb_to_hsl, hsv_to_hsl, np_rgb_to_hsl, rgb_to_hsl
from ..samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), hsl_expected in samples_rgb_hsl.items():
        assert rgb_to_hsl(r, g, b) == hsl_expected


def test_rgb_to_hsl_accepts_sequence():
    assert rgb_to_hsl((255, 0, 0)) == (0, 100, 50)
    assert rgb_to_hsl([0, 255, 0]) == (120, 100, 50)


def test_rgb_to_hsl_returns_ints():
    assert all(isinstance(v, int) for v in rgb_to_hsl(51, 102, 153))


def test_rgb_to_hsl_hue_wraps_below_360():
    # hue of 359.76 rounds up to 360
    assert rgb_to_hsl(255, 0, 1) == (0, 100, 50)


def test_rgb_to_hsl_ranges():
    grid = range(0, 256, 15)
    for r in grid:
        for g in grid:
            for b in grid:
                h, s, l = rgb_to_hsl(r, g, b)
                assert 0 <= h < 360
                assert 0 <= s <= 100
                assert 0 <= l <= 100


def test_np_rgb_to_hsl():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)
    assert np.array_equal(np_rgb_to_hsl(the_matrix), expected)


def test_np_rgb_to_hsl_matches_scalar():
    values = np.arange(0, 256, 17)
    r, g, b = np.meshgrid(values, values, values, indexing="ij")
    result = np_rgb_to_hsl(r, g, b)
    assert result.shape == r.shape + (3,)
    for idx in np.ndindex(r.shape):
        expected = rgb_to_hsl(int(r[idx]), int(g[idx]), int(b[idx]))
        assert tuple(result[idx]) == expected


def test_hsb_to_hsl():
    assert hsb_to_hsl(0, 100, 100) == (0, 100, 50)
    assert hsb_to_hsl((120, 100, 100)) == (120, 100, 50)
    assert hsv_to_hsl(240, 100, 100) == (240, 100, 50)
