"""Random agent."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from cardengine.ai.base import Agent

if TYPE_CHECKING:
    from cardengine.game.state import GameState, Move


class RandomAgent(Agent):
    """Agent that selects uniformly random legal moves."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def get_move(self, state: GameState, position: int) -> Move:
        """Select a random legal move."""
        move = state.random_legal_move(self.rng)
        if move is None:
            raise ValueError(f"No legal move for player {position}: the game is over")
        return move

    @property
    def name(self) -> str:
        return "Random"
