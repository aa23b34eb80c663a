"""ASCII board rendering (columns A-H, rows 1-8)."""

from knight_tour.moves import BOARD_SIZE
from knight_tour.types import Grid

COLUMN_LABELS = "ABCDEFGH"
SEPARATOR = " +" + "---+" * BOARD_SIZE


def render_text(grid: Grid) -> str:
    """Render ``grid`` as a labelled 8x8 board.

    Move numbers are right-justified in their cell; empty cells are blank.
    The result starts with a blank line and ends with a newline.
    """
    lines = [
        "",
        "   " + "   ".join(COLUMN_LABELS[:BOARD_SIZE]),
        SEPARATOR,
    ]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            move_number = int(grid[row][col])
            cells.append(f"{move_number:2d} |" if move_number else "   |")
        lines.append(f"{row + 1}|" + "".join(cells))
        lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"
