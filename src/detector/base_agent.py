"""
Base agent interface for the detector.

Defines the abstract interface that all agents must implement.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield import ExhaustedFallback, FieldView

logger = logging.getLogger(__name__)


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for detector agents.

    An agent sees the field only through a FieldView and draws any
    randomness from the generator of the game session it plays in.
    """

    def __init__(
        self,
        view: FieldView,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the agent.

        Args:
            view: Restricted view of the field being played.
            rng: Generator shared with the game session.
        """
        self.view = view
        self.rng = rng if rng is not None else np.random.default_rng()
        self.certain_moves = 0
        self.guesses_made = 0
        self.last_move_certain = False

    @abstractmethod
    def decide_next_cell(self) -> Tuple[int, int]:
        """
        Choose the next cell to open.

        Returns:
            (row, col) of a closed, unflagged cell.
        """
        pass

    def random_closed_cell(self) -> Tuple[int, int]:
        """
        Pick uniformly among closed, unflagged cells.

        Raises:
            ExhaustedFallback: If no such cell exists.
        """
        candidates = self.view.closed_cells()
        if not candidates:
            raise ExhaustedFallback(
                f"no closed cell left to guess while the game is "
                f"{self.view.outcome.name}"
            )
        index = int(self.rng.integers(0, len(candidates)))
        self.guesses_made += 1
        self.last_move_certain = False
        logger.debug("Guessing %s among %d closed cells", candidates[index], len(candidates))
        return candidates[index]
