import numpy as np
import pytest

from chromascheme import SCHEME_ANGLES, Color, ColorScheme, rotate_hue


def hues(scheme):
    return [color.h for color in scheme]


def test_complementary():
    scheme = ColorScheme.complementary("#ff0000")
    assert scheme.hexes == ["#ff0000", "#00ffff"]
    assert (scheme[1].h, scheme[1].s, scheme[1].l) == (180, 100, 50)


def test_triad():
    assert ColorScheme.triad("#ff0000").hexes == ["#ff0000", "#00ff00", "#0000ff"]


def test_preset_hues():
    base = "#ff0000"
    assert hues(ColorScheme.tetrad(base)) == [0, 60, 180, 240]
    assert hues(ColorScheme.analogous(base)) == [0, 315, 45]
    assert hues(ColorScheme.split_complementary(base)) == [0, 150, 210]
    assert hues(ColorScheme.accented_analogous(base)) == [0, 315, 45, 180]


def test_preset_lengths():
    for name, angles in SCHEME_ANGLES.items():
        assert len(ColorScheme.from_preset("#336699", name)) == len(angles) + 1


def test_aliases():
    base = "#336699"
    assert ColorScheme.compl(base).hexes == ColorScheme.complementary(base).hexes
    assert ColorScheme.analog(base).hexes == ColorScheme.analogous(base).hexes
    assert ColorScheme.split(base).hexes == ColorScheme.split_complementary(base).hexes
    assert ColorScheme.accent(base).hexes == ColorScheme.accented_analogous(base).hexes


def test_rotation_keeps_saturation_and_lightness():
    scheme = ColorScheme.complementary("#336699")
    assert (scheme[1].h, scheme[1].s, scheme[1].l) == (30, 50, 40)


def test_negative_angles_wrap():
    scheme = ColorScheme.analogous(Color.from_hsl(10, 80, 40))
    assert hues(scheme) == [10, 325, 55]


def test_complementary_is_symmetric():
    base = Color("#336699")
    partner = ColorScheme.complementary(base)[1]
    back = ColorScheme.complementary(partner)[1]
    assert back.h == base.h
    assert back.hex == base.hex


def test_base_comes_first():
    for base in ["#336699", "#ff8000", (10, 200, 30)]:
        for name in SCHEME_ANGLES:
            assert ColorScheme.from_preset(base, name)[0] == Color(base)


def test_base_is_copied():
    base = Color("#ff0000")
    scheme = ColorScheme.triad(base)
    assert scheme[0] is not base
    base.set_hue(200)
    assert scheme[0].hex == "#ff0000"


def test_rotation_keeps_alpha():
    scheme = ColorScheme.triad(Color(255, 0, 0, 0.5))
    assert [color.a for color in scheme] == [0.5, 0.5, 0.5]


def test_from_angles():
    scheme = ColorScheme.from_angles("#ff0000", [90.5, -90])
    assert hues(scheme) == [0, 91, 270]
    assert str(scheme[1].hsl) == "hsl(91,100%,50%)"
    assert len(ColorScheme.from_angles("#ff0000", [])) == 1
    assert hues(ColorScheme("#ff0000", (120,))) == [0, 120]


def test_rotate_hue():
    base = Color("#ff0000")
    rotated = rotate_hue(base, 240)
    assert rotated.hex == "#0000ff"
    assert base.hex == "#ff0000"


def test_explicit_colors():
    scheme = ColorScheme(["#ff0000", (0, 255, 0), [0, 0, 255, 0.5], Color("#abc")])
    assert scheme.hexes == ["#ff0000", "#00ff00", "#0000ff", "#aabbcc"]
    assert scheme[2].a == 0.5
    assert ColorScheme.from_colors(["#ff0000"]).hexes == ["#ff0000"]
    assert len(ColorScheme([])) == 0


def test_explicit_colors_rejects_single_color():
    with pytest.raises(TypeError):
        ColorScheme("#ff0000")
    with pytest.raises(TypeError):
        ColorScheme([255, 0, 0])
    with pytest.raises(TypeError):
        ColorScheme(Color("#ff0000"))
    with pytest.raises(TypeError):
        ColorScheme(42)


def test_unknown_preset():
    with pytest.raises(ValueError):
        ColorScheme.from_preset("#ff0000", "pentad")
    assert ColorScheme.from_preset("#ff0000", "TRIAD").hexes == ColorScheme.triad("#ff0000").hexes


def test_palette_access():
    scheme = ColorScheme.complementary("#ff0000")
    assert isinstance(scheme.palette, tuple)
    assert len(scheme) == 2
    assert [color.hex for color in scheme] == scheme.hexes
    assert scheme[-1].hex == "#00ffff"
    assert repr(scheme) == "ColorScheme(['#ff0000', '#00ffff'])"


def test_to_array():
    scheme = ColorScheme.complementary("#ff0000")
    rgb = scheme.to_array()
    assert rgb.shape == (2, 3)
    assert np.issubdtype(rgb.dtype, np.integer)
    assert np.array_equal(rgb, [[255, 0, 0], [0, 255, 255]])
    assert np.array_equal(scheme.to_array("hsl"), [[0, 100, 50], [180, 100, 50]])
    assert ColorScheme([]).to_array().shape == (0, 3)
    with pytest.raises(ValueError):
        scheme.to_array("hsb")


def test_fractional_angles_give_whole_degrees():
    scheme = ColorScheme.from_angles("#ff0000", [0.4, 0.5, -0.5, 359.6])
    assert hues(scheme) == [0, 0, 1, 0, 0]
    assert all(isinstance(h, int) for h in hues(scheme))


def test_complement_of_black_keeps_rotated_hue():
    scheme = ColorScheme.complementary("#000000")
    complement = scheme[1]
    assert (complement.h, complement.s, complement.l) == (180, 0, 0)
    assert complement.hex == "#000000"
    assert complement != Color(complement.hex)
    assert Color(complement.hex).h == 0
