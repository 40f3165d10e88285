"""Render every preset scheme of a base color as a strip of swatches.

Needs Pillow (``pip install chromascheme[examples]``). Run with:
    python examples/palette_swatches.py "#336699" swatches.png
"""
import sys

import numpy as np
from PIL import Image, ImageDraw

from chromascheme import SCHEME_ANGLES, ColorScheme


def render_scheme(scheme: ColorScheme, cell_width: int = 80, cell_height: int = 80) -> Image.Image:
    rgb = scheme.to_array("rgb").astype(np.uint8)
    # one row of cells, each cell filled with its palette color
    strip = np.repeat(rgb[np.newaxis, :, :], cell_height, axis=0)
    strip = np.repeat(strip, cell_width, axis=1)
    img = Image.fromarray(strip, 'RGB')

    draw = ImageDraw.Draw(img)
    for index, color in enumerate(scheme):
        ink = (0, 0, 0) if color.is_light() else (255, 255, 255)
        draw.text((index * cell_width + 6, cell_height - 16), color.hex, fill=ink)
    return img


def render_presets(base, output_path: str | None = None, show: bool = False,
                   cell_width: int = 80, cell_height: int = 80):
    max_cells = max(len(angles) for angles in SCHEME_ANGLES.values()) + 1
    canvas = Image.new('RGBA', (cell_width * max_cells, cell_height * len(SCHEME_ANGLES)), (0, 0, 0, 0))
    strips = []
    for row, name in enumerate(SCHEME_ANGLES):
        scheme = ColorScheme.from_preset(base, name)
        img = render_scheme(scheme, cell_width, cell_height)
        canvas.paste(img, (0, row * cell_height))
        strips.append(img)
    if output_path:
        canvas.save(output_path)
    elif show:
        canvas.show()
    return strips


if __name__ == "__main__":
    base_color = sys.argv[1] if len(sys.argv) > 1 else "#336699"
    target = sys.argv[2] if len(sys.argv) > 2 else None
    render_presets(base_color, output_path=target, show=target is None)
