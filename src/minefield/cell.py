"""
Cell module for the minefield.

A cell carries two independent pieces of state: its content (empty,
adjacent-mine count or mine), fixed once the field is generated, and its
visibility (closed, open or flagged), which changes as the game is played.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple

from .errors import ContractViolation


# ============================================================================
# Constants
# ============================================================================

EMPTY = 0
MAX_COUNT = 8
MINE = 9


class Visibility(Enum):
    """Possible exposure states of a cell."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        row: Row index, fixed for the life of the cell.
        col: Column index, fixed for the life of the cell.
        visibility: Current exposure state (closed, open or flagged).
    """

    row: int
    col: int
    visibility: Visibility = Visibility.CLOSED
    _content: int = field(default=EMPTY, repr=False)
    _sealed: bool = field(default=False, repr=False)

    # ========================================================================
    # Content (generation only)
    # ========================================================================

    @property
    def content(self) -> int:
        """EMPTY, an adjacent-mine count in 1..8, or MINE."""
        return self._content

    @property
    def position(self) -> Tuple[int, int]:
        """The (row, col) position of this cell."""
        return self.row, self.col

    def place_mine(self) -> None:
        """Turn this cell into a mine during generation."""
        self._check_unsealed()
        if self._content == MINE:
            raise ContractViolation(f"cell {self.position} already holds a mine")
        self._content = MINE

    def increment_count(self) -> None:
        """
        Step the adjacent-mine count by one (EMPTY -> 1 -> ... -> 8).

        Raises:
            ContractViolation: If the cell is a mine, already at 8,
                or the field has been sealed.
        """
        self._check_unsealed()
        if self._content == MINE:
            raise ContractViolation(
                f"cannot increment the count of mine cell {self.position}"
            )
        if self._content >= MAX_COUNT:
            raise ContractViolation(
                f"count of cell {self.position} cannot exceed {MAX_COUNT}"
            )
        self._content += 1

    def seal(self) -> None:
        """Freeze content; called once generation is complete."""
        self._sealed = True

    def _check_unsealed(self) -> None:
        if self._sealed:
            raise ContractViolation(
                f"content of cell {self.position} is fixed after generation"
            )

    # ========================================================================
    # Visibility
    # ========================================================================

    def open(self) -> None:
        """
        Open this cell. Closed and flagged cells can both be opened.

        Raises:
            ContractViolation: If the cell is already open.
        """
        if self.visibility == Visibility.OPEN:
            raise ContractViolation(f"cell {self.position} is already open")
        self.visibility = Visibility.OPEN

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on a non-open cell.

        Returns:
            True if the cell is flagged afterwards, False if it was unflagged.

        Raises:
            ContractViolation: If the cell is open.
        """
        if self.visibility == Visibility.OPEN:
            raise ContractViolation(f"cannot flag open cell {self.position}")
        if self.visibility == Visibility.CLOSED:
            self.visibility = Visibility.FLAGGED
            return True
        self.visibility = Visibility.CLOSED
        return False

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self._content == MINE

    @property
    def is_empty(self) -> bool:
        """Check if cell has no mine and no mine neighbours."""
        return self._content == EMPTY

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed (unflagged)."""
        return self.visibility == Visibility.CLOSED

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.visibility == Visibility.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == Visibility.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Open mine (game over state)
        """
        if self.visibility == Visibility.CLOSED:
            return -1
        if self.visibility == Visibility.FLAGGED:
            return -2
        return self._content
