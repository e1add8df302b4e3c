"""
Block Digit Font and ANSI Vocabulary

Fixed 3x5 bitmap font for the digits 0-9. Each bitmap cell is printed as two
spaces on a colored background, so a digit is NUMBER_WIDTH columns wide.
"""

from typing import Tuple

from .color import Color

CLEAR_SCREEN = "\x1bc"
RESET_STYLE = "\x1b[0m"

NUMBER_WIDTH = 6
NUMBER_HEIGHT = 5
CELL_WIDTH = 2
CELLS_PER_ROW = NUMBER_WIDTH // CELL_WIDTH

_FONT = (
    ("###", "#.#", "#.#", "#.#", "###"),  # 0
    ("..#", "..#", "..#", "..#", "..#"),  # 1
    ("###", "..#", "###", "#..", "###"),  # 2
    ("###", "..#", "###", "..#", "###"),  # 3
    ("#.#", "#.#", "###", "..#", "..#"),  # 4
    ("###", "#..", "###", "..#", "###"),  # 5
    ("###", "#..", "###", "#.#", "###"),  # 6
    ("###", "..#", "..#", "..#", "..#"),  # 7
    ("###", "#.#", "###", "#.#", "###"),  # 8
    ("###", "#.#", "###", "..#", "###"),  # 9
)

# Row-major cells, True where the digit is drawn
DIGIT_GLYPHS: Tuple[Tuple[bool, ...], ...] = tuple(
    tuple(cell == "#" for row in rows for cell in row) for rows in _FONT
)


def goto(column: int, row: int) -> str:
    """Cursor position sequence for a 0-based column and row"""
    return f"\x1b[{row + 1};{column + 1}H"


def set_color(color: Color) -> str:
    """Background color sequence"""
    return f"\x1b[{color.escape_fragment}m"


def render_digit(digit: int, column: int, row: int, color: Color) -> str:
    """
    Render one block digit with its top-left corner at (column, row).

    The color sequence is only written when a run of set cells starts and a
    reset only when it ends. The output always ends with a reset.

    Raises:
        ValueError: If digit is not in 0-9
    """
    if not 0 <= digit <= 9:
        raise ValueError(f"Digit out of range: {digit}")

    cells = DIGIT_GLYPHS[digit]
    parts = []
    filled = False
    i = 0

    for y in range(NUMBER_HEIGHT):
        parts.append(goto(column, row + y))

        for _ in range(CELLS_PER_ROW):
            if cells[i]:
                if not filled:
                    parts.append(set_color(color))
                    filled = True
            elif filled:
                parts.append(RESET_STYLE)
                filled = False

            parts.append(" " * CELL_WIDTH)
            i += 1

    parts.append(RESET_STYLE)
    return "".join(parts)
