"""Search tree node for Information Set MCTS.

A node stands for an edge of the game tree: the move that was played and the
player who played it. Because each iteration searches a different
determinization, the same node is reached from many actual game states, and
a child may be legal in some determinizations and not in others. That is
why nodes count availability separately from visits.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardengine.game.result import GameResult
    from cardengine.game.state import Move


class SearchNode:
    """Statistics for one move in the search tree.

    Links to other nodes are arena indices owned by SearchTree, never object
    references, so the tree can be dropped as a whole.

    Attributes:
        move: Move that led to this node. None for the root.
        parent: Arena index of the parent. None for the root.
        player_that_moved: Position of the player who played move. None for the root.
        children: Arena indices of the children, in creation order.
        visits: Number of iterations that went through this node.
        availability: Number of iterations in which move was legal at the parent
            when a child had to be selected, plus one for the expansion.
        total_reward: Sum of backpropagated results for player_that_moved.
    """

    __slots__ = (
        "move",
        "parent",
        "player_that_moved",
        "children",
        "visits",
        "availability",
        "total_reward",
    )

    def __init__(
        self,
        move: Move | None = None,
        parent: int | None = None,
        player_that_moved: int | None = None,
    ) -> None:
        self.move = move
        self.parent = parent
        self.player_that_moved = player_that_moved
        self.children: list[int] = []
        self.visits: int = 0
        # A new child was available when it was expanded, the root is counted per iteration
        self.availability: int = 0 if parent is None else 1
        self.total_reward: float = 0.0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def average_reward(self) -> float:
        """Mean reward for player_that_moved, 0 before the first visit."""
        if self.visits == 0:
            return 0.0
        return self.total_reward / self.visits

    def ucb_score(self, exploration: float) -> float:
        """UCB1 score with availability in place of the parent's visit count.

        score = average_reward + exploration * sqrt(ln(availability) / visits)

        Args:
            exploration: Exploration constant. Higher explores more.

        Raises:
            ValueError: On an unvisited node. Unvisited moves are always
                expanded, never selected.
        """
        if self.visits == 0:
            raise ValueError(f"UCB score is undefined for unvisited node {self!r}")
        return self.total_reward / self.visits + exploration * math.sqrt(
            math.log(self.availability) / self.visits
        )

    def update(self, result: GameResult) -> None:
        """Record one visit ending in result.

        The reward is taken from the point of view of the player who moved,
        so each player in the tree picks what is best for themselves.
        """
        self.visits += 1
        if self.player_that_moved is not None:
            self.total_reward += result[self.player_that_moved]

    def __repr__(self) -> str:
        if self.is_root:
            return f"[root, {len(self.children)} children, {self.visits} visits]"
        return (
            f"[M:{self.move} P:{self.player_that_moved} "
            f"R/V/A: {self.total_reward:.1f}/{self.visits}/{self.availability}]"
        )
