"""
Field module for the minefield.

Implements the grid with seeded mine placement, adjacency counting,
cell opening with cascade reveal, and win/loss detection.
"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Deque, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, Visibility
from .errors import ContractViolation, InvalidConfiguration
from .view import FieldView

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Top-left, top, top-right, left, right, bottom-left, bottom, bottom-right.
NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class GameOutcome(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class FieldConfig:
    """
    Configuration for a minefield.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Optional seed for the game's random generator.
    """

    width: int = 20
    height: int = 20
    num_mines: int = 50
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Field dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines >= self.width * self.height:
            raise InvalidConfiguration(
                f"Too many mines (max {self.width * self.height - 1})"
            )


DEFAULT_CONFIG = FieldConfig(20, 20, 50)


# ============================================================================
# Field Class
# ============================================================================

class Field:
    """
    Minefield grid.

    Owns every cell, places mines, and is the only place where cells are
    opened. The outcome moves from IN_PROGRESS to WON or LOST exclusively
    through open().
    """

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        rng: Optional[np.random.Generator] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Build and generate a field.

        Args:
            config: Field configuration (default: 20x20 with 50 mines).
            rng: Generator shared with the rest of the game session. When
                omitted, one is seeded from config.seed.
            mines: Fixed mine positions to use instead of random placement.
        """
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._outcome = GameOutcome.IN_PROGRESS
        self._init_grid()
        if mines is None:
            self._place_mines()
        else:
            self._place_fixed_mines(mines)
        self._seal()

    @classmethod
    def from_layout(
        cls,
        width: int,
        height: int,
        mines: Iterable[Position],
        rng: Optional[np.random.Generator] = None,
    ) -> "Field":
        """
        Build a field with mines at the given positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (row, col) positions of the mines.
            rng: Generator to keep for the session.

        Raises:
            InvalidConfiguration: If a mine lies outside the grid, is listed
                twice, or there are too many mines.
        """
        positions = list(mines)
        return cls(FieldConfig(width, height, len(positions)), rng, mines=positions)

    # ========================================================================
    # Generation (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of empty, closed cells."""
        self._grid: List[List[Cell]] = [
            [Cell(row, col) for col in range(self.config.width)]
            for row in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """Draw mine positions one at a time, redrawing on collision."""
        placed = 0
        draws = 0
        while placed < self.config.num_mines:
            col = int(self.rng.integers(0, self.config.width))
            row = int(self.rng.integers(0, self.config.height))
            draws += 1
            if self._grid[row][col].is_mine:
                continue
            self._add_mine(row, col)
            placed += 1
        logger.debug(
            "Placed %d mines on a %dx%d field in %d draws",
            placed, self.config.width, self.config.height, draws,
        )

    def _place_fixed_mines(self, mines: Iterable[Position]) -> None:
        """Place mines at caller-chosen positions."""
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise InvalidConfiguration("Mine positions must be distinct")
        if len(positions) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.num_mines} mines, got {len(positions)}"
            )
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position {(row, col)} is outside the field"
                )
            self._add_mine(row, col)

    def _add_mine(self, row: int, col: int) -> None:
        """Place one mine and bump the count of each non-mine neighbour."""
        self._grid[row][col].place_mine()
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            neighbor = self._grid[neighbor_row][neighbor_col]
            if not neighbor.is_mine:
                neighbor.increment_count()

    def _seal(self) -> None:
        for line in self._grid:
            for cell in line:
                cell.seal()

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get neighbouring positions in a fixed order.

        The order is top-left, top, top-right, left, right, bottom-left,
        bottom, bottom-right, skipping positions outside the grid. The
        detector relies on it for tie-breaking.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within field bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _require_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise ContractViolation(
                f"position {(row, col)} is outside the "
                f"{self.config.height}x{self.config.width} field"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, row: int, col: int) -> List[Position]:
        """
        Open the cell at the given position.

        Opening a mine reveals the whole field and loses the game. Opening
        an empty cell cascades through connected empty cells; numbered
        cells on the border of that region are opened but do not spread.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            Positions opened by this call, in the order they were opened.

        Raises:
            ContractViolation: If the position is out of range, the cell is
                already open, or the game has already ended.
        """
        self._require_position(row, col)
        if self._outcome != GameOutcome.IN_PROGRESS:
            raise ContractViolation(
                f"cannot open {(row, col)}: game is {self._outcome.name}"
            )
        cell = self._grid[row][col]
        if cell.is_open:
            raise ContractViolation(f"cell {(row, col)} is already open")

        if cell.is_mine:
            opened = self._reveal_all()
            self._outcome = GameOutcome.LOST
            logger.info("Opened mine at %s: game lost", (row, col))
            return opened

        cell.open()
        opened = [(row, col)]
        if cell.is_empty:
            opened.extend(self._cascade(row, col))
        logger.debug("Opened %s, %d cell(s) revealed", (row, col), len(opened))

        self._check_win_condition()
        return opened

    def _cascade(self, row: int, col: int) -> List[Position]:
        """Flood-fill open from an empty cell using a worklist."""
        opened: List[Position] = []
        pending: Deque[Position] = deque([(row, col)])
        while pending:
            current_row, current_col = pending.popleft()
            for neighbor_row, neighbor_col in self.neighbors(current_row, current_col):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_open:
                    continue
                neighbor.open()
                opened.append((neighbor_row, neighbor_col))
                if neighbor.is_empty:
                    pending.append((neighbor_row, neighbor_col))
        return opened

    def _reveal_all(self) -> List[Position]:
        """Open every cell that is not open yet."""
        opened = []
        for line in self._grid:
            for cell in line:
                if not cell.is_open:
                    cell.open()
                    opened.append(cell.position)
        return opened

    def _check_win_condition(self) -> None:
        """Win once the only cells left unopened are the mines."""
        not_open = self.count_not_open()
        if not_open < self.config.num_mines:
            raise ContractViolation(
                f"{not_open} unopened cells left but {self.config.num_mines} mines"
            )
        if not_open == self.config.num_mines:
            self._outcome = GameOutcome.WON
            logger.info("All safe cells opened: game won")

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a closed or flagged cell.

        Returns:
            True if the cell is flagged afterwards.
        """
        self._require_position(row, col)
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.height

    @property
    def cols(self) -> int:
        return self.config.width

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def outcome(self) -> GameOutcome:
        """Get current game outcome."""
        return self._outcome

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._outcome == GameOutcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._outcome == GameOutcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._outcome == GameOutcome.LOST

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position, including its content.

        This is full access to the field; the detector only ever receives
        a FieldView.
        """
        self._require_position(row, col)
        return self._grid[row][col]

    def cells(self) -> Iterable[Cell]:
        """Iterate over every cell in row-major order."""
        for line in self._grid:
            yield from line

    def closed_cells(self) -> List[Position]:
        """Positions of cells that are closed and not flagged, row-major."""
        return [
            cell.position for cell in self.cells()
            if cell.visibility == Visibility.CLOSED
        ]

    def count_not_open(self) -> int:
        """Number of cells that are closed or flagged."""
        return sum(1 for cell in self.cells() if not cell.is_open)

    def get_observation(self) -> np.ndarray:
        """
        Get field state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = closed
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def view(self) -> FieldView:
        """Get the restricted view handed to the detector."""
        return FieldView(self)
