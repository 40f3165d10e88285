import pytest

from chromascheme.conversions import (
    InvalidColorFormat,
    component_to_hex,
    hex_to_rgb,
    normalize_hex,
    rgb_to_hex,
)
from ..samples import samples_hex_rgb


def test_hex_to_rgb():
    for hex_color, rgb_expected in samples_hex_rgb.items():
        assert hex_to_rgb(hex_color) == rgb_expected


def test_hex_to_rgb_optional_hash_and_case():
    assert hex_to_rgb("FF8000") == (255, 128, 0)
    assert hex_to_rgb("#Ff8000") == (255, 128, 0)


def test_hex_to_rgb_invalid_returns_none():
    for bad in ["#fff", "#ggg000", "#ff80001", "ff8000\n", "", "##ff8000", " #ff8000"]:
        assert hex_to_rgb(bad) is None
    assert hex_to_rgb(None) is None
    assert hex_to_rgb(0xff8000) is None


def test_rgb_to_hex():
    for hex_color, rgb in samples_hex_rgb.items():
        r, g, b = rgb
        assert rgb_to_hex(r, g, b) == hex_color
        assert rgb_to_hex(rgb) == hex_color


def test_rgb_to_hex_rounds_half_up():
    assert rgb_to_hex(127.5, 0, 0.49) == "#800000"


def test_component_to_hex():
    assert component_to_hex(0) == "00"
    assert component_to_hex(10) == "0a"
    assert component_to_hex(255) == "ff"


def test_component_to_hex_out_of_range_warns():
    with pytest.warns(UserWarning):
        assert component_to_hex(256) == "100"
    with pytest.warns(UserWarning):
        component_to_hex(-1)


def test_normalize_hex():
    assert normalize_hex("#abc") == "#aabbcc"
    assert normalize_hex("abc") == "#aabbcc"
    assert normalize_hex("#ABC") == "#aabbcc"
    assert normalize_hex("FF8000") == "#ff8000"
    assert normalize_hex("#ff8000") == "#ff8000"


def test_normalize_hex_invalid():
    for bad in ["#12", "xyz", "#ff80", "#ff800g", ""]:
        with pytest.raises(InvalidColorFormat):
            normalize_hex(bad)
    with pytest.raises(InvalidColorFormat):
        normalize_hex(None)


def test_invalid_color_format_is_value_error():
    with pytest.raises(ValueError):
        normalize_hex("nope")
