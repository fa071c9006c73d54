"""ISMCTS agent."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from cardengine.ai.base import Agent
from cardengine.mcts import ISMCTSConfig  # noqa: TC001

if TYPE_CHECKING:
    from cardengine.game.state import GameState, Move
    from cardengine.mcts.search import SearchResult

logger = logging.getLogger(__name__)


class MCTSAgent(Agent):
    """Agent that picks moves with Information Set MCTS.

    Builds a fresh search tree each move (no tree reuse). The search only
    ever works on randomized clones, so the live state is never touched.

    Attributes:
        config: Search parameters.
        last_result: Result of the latest search, for inspection.
    """

    def __init__(self, config: ISMCTSConfig, rng: np.random.Generator | None = None) -> None:
        """Initialize MCTS agent.

        Args:
            config: Search parameters.
            rng: Random source. Defaults to a generator seeded from config.seed.
        """
        self.config = config
        self.search = config.build(rng)
        self.last_result: SearchResult | None = None

    def get_move(self, state: GameState, position: int) -> Move:
        """Select a move using ISMCTS from position's point of view."""
        if state.position_to_move != position:
            raise ValueError(
                f"Asked to move for player {position} but player {state.position_to_move} is to move"
            )
        self.last_result = self.search.run(state)
        logger.debug(
            f"{self.name} (P{position}) plays {self.last_result.move} "
            f"after {self.last_result.simulations} simulations"
        )
        return self.last_result.move

    def reset(self) -> None:
        self.last_result = None

    @property
    def name(self) -> str:
        return f"ISMCTS({self.config.iterations},c={self.config.exploration:.2f})"
