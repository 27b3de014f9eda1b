"""
Restricted view of a field for the detector.

The view lets an agent read what a player could see (visibility of every
cell, and the number on open cells) and plant or lift flags. It has no
way to hand out a Cell or the content of a cell that is not open.
"""
from typing import TYPE_CHECKING, List, Tuple

from .cell import Visibility
from .errors import ContractViolation

if TYPE_CHECKING:
    from .field import Field, GameOutcome


class FieldView:
    """
    Player-visible capability over a Field.

    Attributes are kept in a private slot; every public method either
    returns geometry, visibility, or content of an open cell.
    """

    __slots__ = ("__field",)

    def __init__(self, field: "Field") -> None:
        self.__field = field

    def __repr__(self) -> str:
        return f"FieldView(rows={self.rows}, cols={self.cols})"

    @property
    def rows(self) -> int:
        return self.__field.rows

    @property
    def cols(self) -> int:
        return self.__field.cols

    @property
    def outcome(self) -> "GameOutcome":
        return self.__field.outcome

    @property
    def is_playing(self) -> bool:
        return self.__field.is_playing

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Neighbour positions in the field's fixed enumeration order."""
        return self.__field.neighbors(row, col)

    def visibility(self, row: int, col: int) -> Visibility:
        return self.__field.cell(row, col).visibility

    def is_open(self, row: int, col: int) -> bool:
        return self.visibility(row, col) == Visibility.OPEN

    def is_flagged(self, row: int, col: int) -> bool:
        return self.visibility(row, col) == Visibility.FLAGGED

    def is_closed(self, row: int, col: int) -> bool:
        """True for any cell that is not open, flagged or not."""
        return self.visibility(row, col) != Visibility.OPEN

    def content(self, row: int, col: int) -> int:
        """
        Content of an open cell: EMPTY, a count in 1..8, or MINE.

        Raises:
            ContractViolation: If the cell is closed or flagged.
        """
        cell = self.__field.cell(row, col)
        if cell.visibility != Visibility.OPEN:
            raise ContractViolation(
                f"content of {(row, col)} is hidden while it is "
                f"{cell.visibility.name.lower()}"
            )
        return cell.content

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Flag a closed cell, or clear the flag on a flagged one.

        Returns:
            True if the cell is flagged afterwards.
        """
        return self.__field.toggle_flag(row, col)

    def closed_cells(self) -> List[Tuple[int, int]]:
        """Closed, unflagged positions in row-major order."""
        return self.__field.closed_cells()
