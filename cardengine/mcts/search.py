"""Information Set Monte Carlo Tree Search (ISMCTS).

Each iteration samples one determinization of the hidden information from
the point of view of the player to move, then runs a regular MCTS iteration
on it (select, expand, simulate, backpropagate) against a single tree shared
by all determinizations.

References:
    - ISMCTS paper: https://ieeexplore.ieee.org/document/6203567
    - Reference Python implementation: https://gist.github.com/kjlubick/8ea239ede6a026a61f4d
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from cardengine.game.state import random_choice
from cardengine.mcts.config import DEFAULT_EXPLORATION, ISMCTSConfig
from cardengine.mcts.errors import NoLegalMovesError
from cardengine.mcts.rollout import rollout
from cardengine.mcts.tree import SearchTree

if TYPE_CHECKING:
    from cardengine.game.state import GameState, Move

logger = logging.getLogger(__name__)


@dataclass
class MoveStat:
    """Search statistics of one root move."""

    move: Move
    visits: int
    availability: int
    average_reward: float


@dataclass
class SearchResult:
    """Result of an ISMCTS search.

    Attributes:
        move: Chosen move, the most visited root child.
        tree: Search tree built by the search. Only the root when the
            single-move shortcut was taken.
        simulations: Number of iterations actually run (0 on the shortcut).
        elapsed: Wall time of the search in seconds.
    """

    move: Move
    tree: SearchTree
    simulations: int
    elapsed: float

    def child_stats(self) -> list[MoveStat]:
        """Statistics of each root child, in creation order."""
        return [
            MoveStat(
                move=child.move,
                visits=child.visits,
                availability=child.availability,
                average_reward=child.average_reward,
            )
            for child in self.tree.children(SearchTree.ROOT)
        ]


class ISMCTSSearch:
    """ISMCTS search over any GameState.

    The search is single-threaded and never mutates the root state: every
    iteration works on its own randomized clone. A fresh tree is built on
    each run.

    Attributes:
        config: Search parameters.
        rng: Random source for determinizations, expansions and rollouts.
    """

    def __init__(self, config: ISMCTSConfig, rng: np.random.Generator) -> None:
        self.config = config
        self.rng = rng

    def run(self, root_state: GameState) -> SearchResult:
        """Search for the best move of the player to move in root_state.

        Args:
            root_state: Position to search from. Not modified.

        Returns:
            SearchResult with the chosen move and the tree.

        Raises:
            NoLegalMovesError: If root_state is already finished.
            GameStateContractError: If a rollout ends without a result.
        """
        start = time.perf_counter()
        tree = SearchTree()

        moves = root_state.legal_moves()
        if not moves:
            raise NoLegalMovesError(f"Cannot search {root_state!r}: no legal moves.")
        if len(moves) == 1:
            # No choice to make, skip determinization entirely
            return SearchResult(
                move=moves[0], tree=tree, simulations=0, elapsed=time.perf_counter() - start
            )

        observer = root_state.position_to_move
        for _ in range(self.config.iterations):
            self._iterate(root_state, observer, tree)

        best = tree.most_visited_child()
        elapsed = time.perf_counter() - start
        logger.debug(
            f"ISMCTS: {self.config.iterations} iterations, {len(tree)} nodes, "
            f"chose {best.move} ({best.visits} visits, avg {best.average_reward:.3f}) "
            f"in {elapsed * 1000:.1f}ms"
        )
        return SearchResult(
            move=best.move, tree=tree, simulations=self.config.iterations, elapsed=elapsed
        )

    def _iterate(self, root_state: GameState, observer: int, tree: SearchTree) -> None:
        """Run one determinize/select/expand/simulate/backpropagate iteration."""
        index = SearchTree.ROOT
        tree.root.availability += 1

        # Determinize
        state = root_state.randomized_clone(observer, self.rng)

        # Select: descend while every legal move already has a child
        moves = state.legal_moves()
        untried = tree.untried_moves(index, moves)
        while moves and not untried:
            selected = tree.select_ucb_child(index, moves, self.config.exploration)
            if selected is None:
                break
            index = selected
            state.apply_move(tree[index].move)
            moves = state.legal_moves()
            untried = tree.untried_moves(index, moves)

        # Expand
        if untried:
            move = random_choice(self.rng, untried)
            player = state.position_to_move
            state.apply_move(move)
            index = tree.add_child(index, move, player)

        # Simulate
        result = rollout(state, self.rng)

        # Backpropagate
        tree.backpropagate(index, result)


def search(
    root_state: GameState,
    iterations: int,
    exploration: float = DEFAULT_EXPLORATION,
    rng: np.random.Generator | None = None,
) -> Move:
    """Find the best move for the player to move in root_state.

    Args:
        root_state: Position to search from. Not modified.
        iterations: Number of iterations, at least 1.
        exploration: UCB exploration constant, positive.
        rng: Random source. A fresh unseeded generator if omitted.

    Returns:
        The move of the most visited root child.

    Raises:
        ValueError: On invalid iterations or exploration.
        NoLegalMovesError: If root_state is already finished.
        GameStateContractError: If a rollout ends without a result.
    """
    config = ISMCTSConfig(iterations=iterations, exploration=exploration)
    return config.build(rng).run(root_state).move


def estimate_value(
    root_state: GameState,
    move: Move,
    iterations: int,
    rng: np.random.Generator | None = None,
) -> float:
    """Average result of playing move then random moves, for the player to move.

    Pure Monte Carlo: each iteration determinizes root_state, applies move
    and plays random moves to the end. No tree is built.

    Args:
        root_state: Position where move is played. Not modified.
        move: Move to evaluate, legal in root_state.
        iterations: Number of playouts, at least 1.
        rng: Random source. A fresh unseeded generator if omitted.

    Returns:
        Mean terminal result of the player to move in root_state.

    Raises:
        ValueError: If iterations < 1.
        GameStateContractError: If a playout ends without a result.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if rng is None:
        rng = np.random.default_rng()

    player = root_state.position_to_move
    total = 0.0
    for _ in range(iterations):
        state = root_state.randomized_clone(player, rng)
        state.apply_move(move)
        total += rollout(state, rng)[player]
    return total / iterations
