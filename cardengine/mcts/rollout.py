"""Random playouts to the end of the game."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cardengine.mcts.errors import GameStateContractError

if TYPE_CHECKING:
    import numpy as np

    from cardengine.game.result import GameResult
    from cardengine.game.state import GameState


def rollout(state: GameState, rng: np.random.Generator) -> GameResult:
    """Play uniformly random legal moves until the game is done.

    Args:
        state: State to play out. Mutated in place.
        rng: Random source for move picks.

    Returns:
        The terminal result.

    Raises:
        GameStateContractError: If the state runs out of moves without a result.
    """
    while (move := state.random_legal_move(rng)) is not None:
        state.apply_move(move)
    return terminal_result(state)


def terminal_result(state: GameState) -> GameResult:
    """Result of a state that has no legal moves left.

    Raises:
        GameStateContractError: If the result is missing.
    """
    result = state.result
    if result is None:
        raise GameStateContractError(
            f"{state!r} has no legal moves but no result: "
            "terminal detection and move generation disagree"
        )
    return result
