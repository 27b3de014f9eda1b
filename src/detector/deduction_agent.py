"""
Deduction agent for the detector.

Flags cells that must be mines, then looks for a cell that must be safe;
guesses at random when neither rule applies. Each call makes one sweep
over the open numbered cells rather than iterating to a fixed point, so a
deduction missed on one turn can still be found on a later one.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from minefield import EMPTY, MINE, FieldView

from .base_agent import BaseAgent

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Neighbourhood Summary
# ============================================================================

@dataclass
class CellInfo:
    """Closed neighbourhood of an open numbered cell."""

    row: int
    col: int
    adjacent_mines: int
    flagged_neighbors: List[Position] = field(default_factory=list)
    unflagged_neighbors: List[Position] = field(default_factory=list)

    @property
    def closed_count(self) -> int:
        """Closed neighbours, flagged or not."""
        return len(self.flagged_neighbors) + len(self.unflagged_neighbors)


# ============================================================================
# Deduction Agent
# ============================================================================

class DeductionAgent(BaseAgent):
    """
    Agent that reasons from the numbers on open cells.

    Strategy, once per call:
        A. For each open number k whose closed neighbours number exactly
           k, flag all of them.
        B. Only if A planted a new flag: for each open number k with at
           least k flagged neighbours, the unflagged closed neighbours are
           safe; return the first in neighbour order.
        C. Otherwise guess uniformly among closed, unflagged cells.

    Flags are only ever planted by rule A, so every flag marks a real mine
    and rule B never points at one.
    """

    def __init__(
        self,
        view: FieldView,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__(view, rng)
        self.flags_placed = 0

    def decide_next_cell(self) -> Position:
        """
        Choose the next cell to open.

        Returns:
            (row, col) of a closed, unflagged cell.

        Raises:
            ExhaustedFallback: If a guess is needed but no closed cell is left.
        """
        if self._flag_certain_mines():
            safe = self._find_safe_cell()
            if safe is not None:
                self.certain_moves += 1
                self.last_move_certain = True
                logger.debug("Deduced safe cell %s", safe)
                return safe
        return self.random_closed_cell()

    def _flag_certain_mines(self) -> bool:
        """Phase A. Returns True if any flag was newly planted."""
        flagged_any = False
        for info in self._numbered_cells():
            if info.closed_count != info.adjacent_mines:
                continue
            for row, col in info.unflagged_neighbors:
                self.view.toggle_flag(row, col)
                self.flags_placed += 1
                flagged_any = True
                logger.debug("Flagged %s from %s", (row, col), (info.row, info.col))
        return flagged_any

    def _find_safe_cell(self) -> Optional[Position]:
        """Phase B. First unflagged neighbour of a satisfied number."""
        for info in self._numbered_cells():
            if (len(info.flagged_neighbors) >= info.adjacent_mines
                    and info.unflagged_neighbors):
                return info.unflagged_neighbors[0]
        return None

    def _numbered_cells(self) -> Iterator[CellInfo]:
        """
        Yield open numbered cells in row-major order.

        Neighbourhoods are read lazily, so flags planted earlier in the
        same sweep are seen by later cells.
        """
        for row in range(self.view.rows):
            for col in range(self.view.cols):
                if not self.view.is_open(row, col):
                    continue
                value = self.view.content(row, col)
                if value == EMPTY or value == MINE:
                    continue
                yield self._get_cell_info(row, col, value)

    def _get_cell_info(self, row: int, col: int, value: int) -> CellInfo:
        """Split the closed neighbours of a numbered cell by flag."""
        info = CellInfo(row=row, col=col, adjacent_mines=value)
        for neighbor in self.view.neighbors(row, col):
            if self.view.is_flagged(*neighbor):
                info.flagged_neighbors.append(neighbor)
            elif not self.view.is_open(*neighbor):
                info.unflagged_neighbors.append(neighbor)
        return info
