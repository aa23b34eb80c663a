"""Pillow rendering of a board.

Draws a checkered 8x8 board, the move number of every visited square and,
optionally, the knight's path as a polyline through square centres. The
start square and the current (last) square are highlighted.
"""

from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from knight_tour.moves import BOARD_SIZE
from knight_tour.types import Coord, Grid
from knight_tour.utils.tour import tour_path


DEFAULT_RESOLUTION = 512

Color = Tuple[int, int, int, int]

LIGHT_SQUARE: Color = (240, 217, 181, 255)
DARK_SQUARE: Color = (181, 136, 99, 255)
START_SQUARE: Color = (120, 180, 120, 255)
LAST_SQUARE: Color = (220, 120, 90, 255)
TEXT_COLOR: Color = (20, 20, 20, 255)
PATH_COLOR: Color = (40, 80, 200, 180)


def square_color(row: int, col: int) -> Color:
    # A1 (row 0, col 0) is a dark square
    return DARK_SQUARE if (row + col) % 2 == 0 else LIGHT_SQUARE


def _center(pos: Coord, cell_size: int) -> Tuple[int, int]:
    row, col = pos
    return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2


def render_image(
    grid: Grid,
    resolution: int = DEFAULT_RESOLUTION,
    show_path: bool = True,
    font: Optional[Union[ImageFont.ImageFont, ImageFont.FreeTypeFont]] = None,
) -> Image.Image:
    """Render ``grid`` as an RGBA image of roughly ``resolution`` pixels."""
    cell_size = resolution // BOARD_SIZE
    size = cell_size * BOARD_SIZE
    img = Image.new("RGBA", (size, size), (128, 128, 128, 255))
    draw = ImageDraw.Draw(img)

    path = tour_path(grid)
    highlights: Dict[Coord, Color] = {}
    if path:
        highlights[path[-1]] = LAST_SQUARE
        highlights[path[0]] = START_SQUARE

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            x0, y0 = col * cell_size, row * cell_size
            fill = highlights.get((row, col), square_color(row, col))
            draw.rectangle([x0, y0, x0 + cell_size - 1, y0 + cell_size - 1], fill=fill)

    if show_path and len(path) > 1:
        overlay = Image.new("RGBA", img.size, (0, 0, 0, 0))
        ImageDraw.Draw(overlay).line(
            [_center(pos, cell_size) for pos in path],
            fill=PATH_COLOR,
            width=max(1, cell_size // 16),
        )
        img.alpha_composite(overlay)
        draw = ImageDraw.Draw(img)

    font = font or ImageFont.load_default()
    for pos in path:
        label = str(int(grid[pos[0]][pos[1]]))
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        cx, cy = _center(pos, cell_size)
        draw.text(
            (cx - (right - left) // 2 - left, cy - (bottom - top) // 2 - top),
            label,
            fill=TEXT_COLOR,
            font=font,
        )
    return img


class TextureRenderer:
    resolution: int
    show_path: bool

    def __init__(self, resolution: int = DEFAULT_RESOLUTION, show_path: bool = True):
        self.resolution = resolution
        self.show_path = show_path

    def render(self, grid: Grid) -> Image.Image:
        return render_image(grid, resolution=self.resolution, show_path=self.show_path)
