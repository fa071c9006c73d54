"""Single game execution for agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cardengine.mcts.rollout import terminal_result

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cardengine.ai.base import Agent
    from cardengine.game.result import GameResult
    from cardengine.game.state import GameState, Move

logger = logging.getLogger(__name__)


@dataclass
class GameOutcome:
    """Result of a single game.

    Attributes:
        result: Final per-player result.
        winners: Positions with the best result (several on a tie).
        moves: (position, move) pairs in play order.
    """

    result: GameResult
    winners: list[int]
    moves: list[tuple[int, Move]] = field(default_factory=list)

    @property
    def turns(self) -> int:
        return len(self.moves)


def play_game(state: GameState, agents: Sequence[Agent]) -> GameOutcome:
    """Play state to the end, one agent per seat.

    Args:
        state: Starting state. Mutated in place until the game is done.
        agents: One agent per player position.

    Returns:
        GameOutcome with the result and the move history.

    Raises:
        ValueError: If the agent count does not match the players, or an
            agent returns an illegal move.
        GameStateContractError: If the game runs out of moves without a result.
    """
    if len(agents) != len(state.players):
        raise ValueError(f"Expected {len(state.players)} agents, got {len(agents)}")

    for agent in agents:
        agent.reset()

    moves: list[tuple[int, Move]] = []
    while legal := state.legal_moves():
        position = state.position_to_move
        move = agents[position].get_move(state, position)
        if move not in legal:
            raise ValueError(f"{agents[position].name} played illegal move {move}")
        state.apply_move(move)
        moves.append((position, move))

    result = terminal_result(state)
    logger.debug(f"Game over after {len(moves)} moves: {result}")
    return GameOutcome(result=result, winners=result.winners(), moves=moves)
