"""
Minefield detector agents.

Provides agents that choose the next cell to open without seeing mines:
- RandomAgent: Baseline random selection
- DeductionAgent: Flagging and safe-cell rules with a random fallback

and the drivers that run them:
- GameSession: One game, turn by turn
- Evaluator: Batches of seeded games
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .deduction_agent import DeductionAgent, CellInfo
from .session import GameSession, TurnResult
from .evaluation import Evaluator, GameStats

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "DeductionAgent",
    "CellInfo",
    "GameSession",
    "TurnResult",
    "Evaluator",
    "GameStats",
]
