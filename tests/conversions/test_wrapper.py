import pytest

from chromascheme.conversions import InvalidColorFormat, convert


def test_convert_hex_to_spaces():
    assert convert("#ff0000", "hex", "rgb") == (255, 0, 0)
    assert convert("#ff0000", "hex", "hsl") == (0, 100, 50)
    assert convert("#ff0000", "hex", "hsb") == (0, 100, 100)


def test_convert_to_hex():
    assert convert((0, 100, 50), "hsl", "hex") == "#ff0000"
    assert convert((120, 100, 100), "hsb", "hex") == "#00ff00"
    assert convert((0, 0, 255), "rgb", "hex") == "#0000ff"


def test_convert_between_hue_spaces():
    assert convert((0, 100, 100), "hsb", "hsl") == (0, 100, 50)
    assert convert((240, 100, 50), "hsl", "hsb") == (240, 100, 100)


def test_convert_hsv_alias_and_case():
    assert convert((255, 0, 0), "rgb", "hsv") == (0, 100, 100)
    assert convert((255, 0, 0), "RGB", "HSV") == (0, 100, 100)
    assert convert((0, 100, 100), "hsv", "hsb") == (0, 100, 100)


def test_convert_same_space_returns_input():
    color = (10, 20, 30)
    assert convert(color, "rgb", "rgb") is color


def test_convert_unknown_space():
    with pytest.raises(ValueError, match="Unknown space"):
        convert((0, 0, 0), "rgb", "lab")
    with pytest.raises(ValueError, match="Unknown space"):
        convert((0, 0, 0), "cmyk", "rgb")


def test_convert_invalid_hex():
    with pytest.raises(InvalidColorFormat):
        convert("#nothex", "hex", "rgb")
