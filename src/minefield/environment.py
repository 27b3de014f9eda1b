"""
Gymnasium environment wrapper for the minefield.

Provides a standard step/reset interface over a Field, so any agent
that works from observations (or from a FieldView) can drive a game.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import error, spaces

from .field import Field, FieldConfig
from .render import render_field
from .view import FieldView


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for the minefield.

    Observation:
        2D array where:
        - -1 = closed cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine (only after a loss)

    Actions:
        Discrete action space of size width * height.
        Action i opens the cell at (i // width, i % width).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for opening a mine
        - -0.1 for probing a cell that is not closed
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Field configuration (default: 20x20 with 50 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or FieldConfig()
        self.render_mode = render_mode
        self.field: Optional[Field] = None

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0
        self._total_safe_cells = (
            self.config.width * self.config.height - self.config.num_mines
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly generated field.

        The field draws its mines from the environment's np_random, so
        resetting with the same seed reproduces the same layout.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        if seed is None and self.config.seed is not None and self.field is None:
            seed = self.config.seed
        super().reset(seed=seed)
        self.field = Field(self.config, rng=self.np_random)
        self._steps = 0

        return self.field.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Open one cell.

        Args:
            action: Cell index to open (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        field = self._require_field()
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        terminated = not field.is_playing

        return field.get_observation(), reward, terminated, False, self._get_info()

    def _require_field(self) -> Field:
        if self.field is None:
            raise error.ResetNeeded("Call reset() before step()")
        return self.field

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.width, int(action) % self.config.width

    def _calculate_reward(self, row: int, col: int) -> float:
        """Open the cell if it is closed and score the result."""
        field = self._require_field()
        if not field.cell(row, col).is_closed:
            return -0.1

        field.open(row, col)

        if field.is_won:
            return 10.0
        if field.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        field = self._require_field()
        opened = sum(1 for cell in field.cells() if cell.is_open)
        return {
            "steps": self._steps,
            "opened": opened,
            "total_safe": self._total_safe_cells,
            "outcome": field.outcome.name,
            "valid_actions": len(field.closed_cells()),
        }

    def render(self) -> Optional[str]:
        """Render the current field state."""
        field = self._require_field()
        if self.render_mode == "ansi":
            return render_field(field, use_color=False)
        if self.render_mode == "human":
            print(render_field(field))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = closed, unflagged cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self._require_field().closed_cells():
            mask[row * self.config.width + col] = True
        return mask

    def view(self) -> FieldView:
        """Restricted view of the current field, for the detector."""
        return self._require_field().view()
