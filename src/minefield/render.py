"""Console rendering of a field: one glyph and one colour hint per cell."""
from typing import List

from .cell import EMPTY, MINE, Cell, Visibility


# ============================================================================
# Glyphs and Colours
# ============================================================================

CLOSED_GLYPH = "?"
FLAGGED_GLYPH = "!"
MINE_GLYPH = "M"
EMPTY_GLYPH = "."

ANSI_RESET = "\033[0m"
_FG_BLACK = "\033[30m"
_FG_RED = "\033[31m"
_BG_WHITE = "\033[47m"

# Background per open content.
_CONTENT_COLORS = {
    MINE: "\033[101m",
    EMPTY: "\033[100m",
    1: "\033[104m",
    2: "\033[102m",
    3: "\033[103m",
    4: "\033[106m",
    5: "\033[42m",
    6: "\033[43m",
    7: "\033[45m",
    8: "\033[105m",
}


def glyph(cell: Cell) -> str:
    """Display character for a cell."""
    if cell.visibility == Visibility.CLOSED:
        return CLOSED_GLYPH
    if cell.visibility == Visibility.FLAGGED:
        return FLAGGED_GLYPH
    if cell.is_mine:
        return MINE_GLYPH
    if cell.is_empty:
        return EMPTY_GLYPH
    return str(cell.content)


def color(cell: Cell) -> str:
    """ANSI escape sequence to draw the cell with."""
    if cell.visibility == Visibility.CLOSED:
        return _FG_BLACK + _BG_WHITE
    if cell.visibility == Visibility.FLAGGED:
        return _FG_RED + _BG_WHITE
    return _FG_BLACK + _CONTENT_COLORS[cell.content]


def render_field(field, use_color: bool = True) -> str:
    """
    Render the field as a multi-line string.

    Args:
        field: Field to draw; it is only read.
        use_color: Wrap each cell in its ANSI colour hint.

    Returns:
        One line per row, each cell drawn as " g ".
    """
    lines: List[str] = []
    for row in range(field.rows):
        parts = []
        for col in range(field.cols):
            cell = field.cell(row, col)
            text = f" {glyph(cell)} "
            if use_color:
                text = f"{color(cell)}{text}{ANSI_RESET}"
            parts.append(text)
        lines.append("".join(parts))
    return "\n".join(lines)
