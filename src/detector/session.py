"""
Game session: one field, one agent, one random generator.

The session is the turn driver. It opens the pending coordinate, lets the
field settle the outcome, and asks the agent for the next coordinate while
the game is still running.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np

from minefield import ContractViolation, Field, FieldConfig, FieldView, GameOutcome

from .base_agent import BaseAgent
from .deduction_agent import DeductionAgent

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
AgentFactory = Callable[[FieldView, np.random.Generator], BaseAgent]


@dataclass
class TurnResult:
    """What happened in one turn."""

    turn: int
    position: Position
    opened: List[Position] = field(default_factory=list)
    outcome: GameOutcome = GameOutcome.IN_PROGRESS
    certain: bool = False


class GameSession:
    """
    Plays one game from a random (or given) first probe to its end.

    The generator built from config.seed is shared by mine placement, the
    first probe and every guess the agent makes.
    """

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        agent_factory: AgentFactory = DeductionAgent,
        start: Optional[Position] = None,
        field: Optional[Field] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Field configuration; ignored when field is given.
            agent_factory: Builds the agent from (view, rng).
            start: First cell to open; random when omitted.
            field: Pre-built field to play instead of generating one.
        """
        if field is None:
            config = config or FieldConfig()
            field = Field(config, rng=np.random.default_rng(config.seed))
        self.field = field
        self.rng = field.rng
        self.agent = agent_factory(field.view(), self.rng)
        self.turns = 0
        self.next_cell = start if start is not None else self._random_start()
        self._last_certain = False

    def _random_start(self) -> Position:
        """The first probe precedes any deduction, so it is a pure guess."""
        row = int(self.rng.integers(0, self.field.rows))
        col = int(self.rng.integers(0, self.field.cols))
        return row, col

    @property
    def outcome(self) -> GameOutcome:
        return self.field.outcome

    @property
    def is_playing(self) -> bool:
        return self.field.is_playing

    def step(self) -> TurnResult:
        """
        Play one turn.

        Returns:
            The result of opening the pending cell.

        Raises:
            ContractViolation: If the game has already ended.
        """
        if not self.field.is_playing:
            raise ContractViolation(f"game is already {self.field.outcome.name}")

        self.turns += 1
        row, col = self.next_cell
        opened = self.field.open(row, col)
        result = TurnResult(
            turn=self.turns,
            position=(row, col),
            opened=opened,
            outcome=self.field.outcome,
            certain=self._last_certain,
        )
        logger.debug(
            "Turn %d: opened %s (%d cells), outcome %s",
            self.turns, (row, col), len(opened), self.field.outcome.name,
        )

        if self.field.is_playing:
            self.next_cell = self.agent.decide_next_cell()
            self._last_certain = self.agent.last_move_certain
        return result

    def run(self, max_turns: Optional[int] = None) -> GameOutcome:
        """
        Step until the game ends or max_turns turns have been played.

        Returns:
            The outcome when play stopped.
        """
        while self.field.is_playing:
            if max_turns is not None and self.turns >= max_turns:
                break
            self.step()
        logger.info("Game finished after %d turns: %s", self.turns, self.field.outcome.name)
        return self.field.outcome
