"""Tests for the SearchTree arena."""

import pytest

from cardengine.game.result import GameResult
from cardengine.mcts.tree import SearchTree


@pytest.fixture
def tree() -> SearchTree:
    """Root with children A, B, C played by player 0; A has child X by player 1."""
    tree = SearchTree()
    a = tree.add_child(SearchTree.ROOT, "A", 0)
    tree.add_child(SearchTree.ROOT, "B", 0)
    tree.add_child(SearchTree.ROOT, "C", 0)
    tree.add_child(a, "X", 1)
    return tree


class TestStructure:
    """Tests for arena indices and links."""

    def test_new_tree_has_only_root(self) -> None:
        tree = SearchTree()
        assert len(tree) == 1
        assert tree.root.is_root

    def test_add_child_links_both_ways(self, tree: SearchTree) -> None:
        """Children know their parent index and parents list children in order."""
        assert [c.move for c in tree.children(SearchTree.ROOT)] == ["A", "B", "C"]
        assert tree[1].parent == SearchTree.ROOT
        assert tree[4].parent == 1
        assert tree[4].player_that_moved == 1

    def test_clear_drops_every_node(self, tree: SearchTree) -> None:
        tree.clear()
        assert len(tree) == 1
        assert tree.root.children == []


class TestUntriedMoves:
    """Tests for untried move filtering."""

    def test_filters_moves_with_children(self, tree: SearchTree) -> None:
        assert tree.untried_moves(SearchTree.ROOT, ["A", "D", "C", "E"]) == ["D", "E"]

    def test_all_tried(self, tree: SearchTree) -> None:
        assert tree.untried_moves(SearchTree.ROOT, ["B", "A"]) == []

    def test_leaf_has_everything_untried(self, tree: SearchTree) -> None:
        assert tree.untried_moves(2, ["P", "Q"]) == ["P", "Q"]


class TestSelection:
    """Tests for UCB child selection."""

    def _visit(self, tree: SearchTree, index: int, rewards: list[float]) -> None:
        for reward in rewards:
            tree.backpropagate(index, GameResult.of([reward, 1.0 - reward]))

    def test_only_legal_children_are_candidates(self, tree: SearchTree) -> None:
        """A child whose move is illegal now is never selected."""
        self._visit(tree, 1, [1.0, 1.0])
        self._visit(tree, 2, [0.0])
        self._visit(tree, 3, [0.0])

        selected = tree.select_ucb_child(SearchTree.ROOT, ["B", "C"], 0.7)

        assert selected in (2, 3)

    def test_availability_counts_every_legal_child(self, tree: SearchTree) -> None:
        """All legal children gain availability, chosen or not; illegal ones do not."""
        for index in (1, 2, 3):
            self._visit(tree, index, [0.5])

        tree.select_ucb_child(SearchTree.ROOT, ["A", "C"], 0.7)

        assert tree[1].availability == 2
        assert tree[2].availability == 1
        assert tree[3].availability == 2

    def test_prefers_higher_reward(self, tree: SearchTree) -> None:
        self._visit(tree, 1, [0.1, 0.2])
        self._visit(tree, 2, [0.9, 0.8])
        self._visit(tree, 3, [0.3, 0.3])

        assert tree.select_ucb_child(SearchTree.ROOT, ["A", "B", "C"], 0.7) == 2

    def test_ties_go_to_first_child(self, tree: SearchTree) -> None:
        """Equal scores resolve to creation order."""
        for index in (1, 2, 3):
            self._visit(tree, index, [0.5])

        assert tree.select_ucb_child(SearchTree.ROOT, ["C", "B", "A"], 0.7) == 1

    def test_no_legal_child(self, tree: SearchTree) -> None:
        assert tree.select_ucb_child(SearchTree.ROOT, ["Z"], 0.7) is None


class TestBackpropagation:
    """Tests for result backpropagation."""

    def test_updates_path_to_root(self, tree: SearchTree) -> None:
        """Every node on the path gets a visit and its player's reward."""
        tree.backpropagate(4, GameResult.of([0.25, 0.75]))

        assert tree[4].visits == 1
        assert tree[4].total_reward == 0.75
        assert tree[1].visits == 1
        assert tree[1].total_reward == 0.25
        assert tree.root.visits == 1

    def test_siblings_untouched(self, tree: SearchTree) -> None:
        tree.backpropagate(4, GameResult.of([1.0, 0.0]))
        assert tree[2].visits == 0
        assert tree[3].visits == 0


class TestMostVisitedChild:
    def test_robust_child(self, tree: SearchTree) -> None:
        """Most visits wins even against a higher average."""
        for _ in range(3):
            tree.backpropagate(1, GameResult.of([0.4, 0.6]))
        tree.backpropagate(2, GameResult.of([1.0, 0.0]))

        assert tree.most_visited_child().move == "A"

    def test_first_wins_ties(self, tree: SearchTree) -> None:
        tree.backpropagate(2, GameResult.of([1.0, 0.0]))
        tree.backpropagate(3, GameResult.of([1.0, 0.0]))

        assert tree.most_visited_child().move == "B"

    def test_leaf_raises(self, tree: SearchTree) -> None:
        with pytest.raises(ValueError, match="no children"):
            tree.most_visited_child(4)


class TestFormatting:
    def test_format_tree_indents_by_depth(self, tree: SearchTree) -> None:
        lines = tree.format_tree().splitlines()

        assert lines[0].startswith("[root")
        assert lines[1].startswith("| [M:A")
        assert lines[2].startswith("| | [M:X")
        assert len(lines) == 5

    def test_format_tree_max_depth(self, tree: SearchTree) -> None:
        assert len(tree.format_tree(max_depth=1).splitlines()) == 4

    def test_format_children(self, tree: SearchTree) -> None:
        assert len(tree.format_children().splitlines()) == 3
