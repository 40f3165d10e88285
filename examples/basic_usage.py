"""Basic Chromascheme usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromascheme import (
    Color,
    ColorScheme,
    convert,
    np_rgb_to_hsl,
    random_color,
)


def demonstrate_conversions() -> None:
    # Single colors through the dispatcher.
    print("hex -> hsl:", convert("#ff8000", "hex", "hsl"))
    print("hsb -> rgb:", convert((210, 100, 100), "hsb", "rgb"))

    # Whole arrays at once.
    pixels = np.array([[255, 0, 0], [0, 255, 0], [51, 102, 153]])
    print("RGB array -> HSL:\n", np_rgb_to_hsl(pixels))


def demonstrate_color() -> None:
    accent = Color("#f80")
    print("Accent:", accent.hex, accent.rgb, accent.hsl)

    accent.set_hue(200)
    accent.set_alpha(0.75)
    print("Shifted:", accent.hex, accent.rgba, accent.hsla)
    print("Light background?", accent.is_light())

    print("Random:", random_color(np.random.default_rng(7)))


def demonstrate_schemes() -> None:
    base = Color("#336699")
    for name in ("complementary", "triad", "tetrad", "analogous", "split_complementary", "accented_analogous"):
        scheme = ColorScheme.from_preset(base, name)
        print(f"{name:>20}:", " ".join(scheme.hexes))

    # Arbitrary rotations, negative angles wrap around the hue circle.
    fan = ColorScheme.from_angles(base, [-30, -15, 15, 30])
    print(f"{'custom fan':>20}:", " ".join(fan.hexes))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_color()
    demonstrate_schemes()
