"""
Random agent for the detector.

Serves as a baseline by always guessing among closed cells.
"""
from typing import Tuple

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that opens closed cells uniformly at random.

    This provides a baseline for comparing the deduction agent.
    """

    def decide_next_cell(self) -> Tuple[int, int]:
        """Select a random closed, unflagged cell."""
        return self.random_closed_cell()
