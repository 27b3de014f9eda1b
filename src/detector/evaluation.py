"""
Evaluation module for detector agents.

Plays batches of seeded games and aggregates the results.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from minefield import FieldConfig, GameOutcome

from .session import AgentFactory, GameSession

logger = logging.getLogger(__name__)


# ============================================================================
# Game Statistics
# ============================================================================

@dataclass
class GameStats:
    """Accumulated statistics over a batch of games."""

    games: int = 0
    wins: int = 0
    losses: int = 0
    total_turns: int = 0
    total_guesses: int = 0
    total_certain: int = 0
    win_history: List[bool] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        if not self.games:
            return 0.0
        return self.wins / self.games

    @property
    def avg_turns(self) -> float:
        if not self.games:
            return 0.0
        return self.total_turns / self.games

    @property
    def avg_guesses(self) -> float:
        if not self.games:
            return 0.0
        return self.total_guesses / self.games

    def record(self, session: GameSession) -> None:
        """Add a finished session to the totals."""
        won = session.outcome == GameOutcome.WON
        self.games += 1
        self.wins += int(won)
        self.losses += int(session.outcome == GameOutcome.LOST)
        self.total_turns += session.turns
        self.total_guesses += session.agent.guesses_made
        self.total_certain += session.agent.certain_moves
        self.win_history.append(won)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for reporting."""
        return {
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": self.win_rate,
            "avg_turns": self.avg_turns,
            "avg_guesses": self.avg_guesses,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Game i is played with seed base_seed + i, so every agent faces the
    same sequence of fields.
    """

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        num_games: int = 100,
        base_seed: int = 0,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Field configuration; its seed is replaced per game.
            num_games: Number of games per agent.
            base_seed: Seed of the first game.
        """
        self.config = config or FieldConfig()
        self.num_games = num_games
        self.base_seed = base_seed

    def _config_for(self, game: int) -> FieldConfig:
        return FieldConfig(
            width=self.config.width,
            height=self.config.height,
            num_mines=self.config.num_mines,
            seed=self.base_seed + game,
        )

    def evaluate(self, agent_factory: AgentFactory) -> GameStats:
        """
        Play num_games games with fresh agents.

        Args:
            agent_factory: Builds the agent from (view, rng).

        Returns:
            Aggregated statistics.
        """
        stats = GameStats()
        for game in range(self.num_games):
            session = GameSession(self._config_for(game), agent_factory)
            session.run()
            stats.record(session)
        logger.info(
            "Evaluated %d games: %.1f%% won",
            stats.games, 100 * stats.win_rate,
        )
        return stats

    def compare(
        self, agents: Dict[str, AgentFactory]
    ) -> Dict[str, GameStats]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent factory.

        Returns:
            Dictionary of agent_name -> statistics.
        """
        results = {}
        for name, factory in agents.items():
            logger.info("Evaluating %s...", name)
            results[name] = self.evaluate(factory)
        return results
