"""Arena-backed search tree for Information Set MCTS.

All nodes live in one list and refer to each other by index. The root is
always at index 0. A tree belongs to a single search and is never shared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cardengine.mcts.node import SearchNode

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from cardengine.game.result import GameResult
    from cardengine.game.state import Move


class SearchTree:
    """Owns every node of one search.

    Attributes:
        nodes: Node arena. nodes[ROOT] is the root.
    """

    ROOT = 0

    def __init__(self) -> None:
        self.nodes: list[SearchNode] = [SearchNode()]

    @property
    def root(self) -> SearchNode:
        return self.nodes[self.ROOT]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self.nodes)

    def children(self, index: int) -> list[SearchNode]:
        """Child nodes of nodes[index], in creation order."""
        return [self.nodes[c] for c in self.nodes[index].children]

    def add_child(self, parent: int, move: Move, player_that_moved: int) -> int:
        """Create a child of nodes[parent] for move.

        Returns:
            Arena index of the new child.
        """
        index = len(self.nodes)
        self.nodes.append(SearchNode(move=move, parent=parent, player_that_moved=player_that_moved))
        self.nodes[parent].children.append(index)
        return index

    def untried_moves(self, index: int, legal_moves: Sequence[Move]) -> list[Move]:
        """Legal moves that have no child at nodes[index] yet.

        The untried list cannot be cached on the node: the legal moves differ
        from one determinization to the next.
        """
        tried = [self.nodes[c].move for c in self.nodes[index].children]
        return [move for move in legal_moves if move not in tried]

    def select_ucb_child(
        self, index: int, legal_moves: Sequence[Move], exploration: float
    ) -> int | None:
        """Pick the child of nodes[index] maximizing UCB among the legal ones.

        Every child whose move is legal in the current determinization gets
        its availability incremented before scoring, whether it is chosen or
        not. Ties go to the first child in creation order.

        Args:
            index: Arena index of the node to select from.
            legal_moves: Moves legal in the current determinization.
            exploration: UCB exploration constant.

        Returns:
            Arena index of the selected child, or None if no child is legal.
        """
        selectable = [c for c in self.nodes[index].children if self.nodes[c].move in legal_moves]
        if not selectable:
            return None

        for c in selectable:
            self.nodes[c].availability += 1

        best = selectable[0]
        best_score = self.nodes[best].ucb_score(exploration)
        for c in selectable[1:]:
            score = self.nodes[c].ucb_score(exploration)
            if score > best_score:
                best, best_score = c, score
        return best

    def backpropagate(self, index: int, result: GameResult) -> None:
        """Update nodes[index] and all its ancestors with a terminal result."""
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            node.update(result)
            current = node.parent

    def most_visited_child(self, index: int = ROOT) -> SearchNode:
        """Child with the most visits (robust child). First one wins ties.

        Raises:
            ValueError: If the node has no children.
        """
        children = self.children(index)
        if not children:
            raise ValueError(f"Node {index} has no children")
        best = children[0]
        for child in children[1:]:
            if child.visits > best.visits:
                best = child
        return best

    def clear(self) -> None:
        """Drop every node and start over with a fresh root."""
        self.nodes = [SearchNode()]

    def format_children(self, index: int = ROOT) -> str:
        """One line per child of nodes[index]."""
        return "\n".join(repr(child) for child in self.children(index))

    def format_tree(self, index: int = ROOT, max_depth: int | None = None) -> str:
        """Indented dump of the subtree rooted at nodes[index], for debugging."""
        lines: list[str] = []
        stack = [(index, 0)]
        while stack:
            current, depth = stack.pop()
            lines.append("| " * depth + repr(self.nodes[current]))
            if max_depth is not None and depth >= max_depth:
                continue
            for child in reversed(self.nodes[current].children):
                stack.append((child, depth + 1))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SearchTree(nodes={len(self.nodes)}, root_visits={self.root.visits})"
