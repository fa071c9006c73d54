"""Tests for the game state contract and BaseGameState defaults."""

from typing import Any

import numpy as np
import pytest

from cardengine.game.result import GameResult
from cardengine.game.state import BaseGameState, GameState, random_choice


class CountdownGame(BaseGameState):
    """Players take turns removing 1 or 2 from a counter; taking the last one wins."""

    def __init__(self, counter: int = 5, players: int = 3) -> None:
        super().__init__([f"p{i}" for i in range(players)], 0)
        self.counter = counter
        self.last_mover: int | None = None

    @property
    def result(self) -> GameResult | None:
        if self.counter > 0:
            return None
        return GameResult.of(1.0 if p == self.last_mover else 0.0 for p in range(len(self.players)))

    def legal_moves(self) -> list[int]:
        return [m for m in (1, 2) if m <= self.counter]

    def apply_move(self, move: Any) -> None:
        self.counter -= move
        self.last_mover = self.position_to_move
        self.position_to_move = self.next_position(self.position_to_move)

    def clone(self) -> "CountdownGame":
        state = CountdownGame(self.counter, len(self.players))
        state.position_to_move = self.position_to_move
        state.last_mover = self.last_mover
        return state


class TestRandomChoice:
    def test_picks_from_items(self) -> None:
        rng = np.random.default_rng(0)
        picks = {random_choice(rng, ["a", "b", "c"]) for _ in range(100)}
        assert picks == {"a", "b", "c"}

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            random_choice(np.random.default_rng(0), [])


class TestBaseGameState:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(CountdownGame(), GameState)

    def test_next_position_wraps(self) -> None:
        state = CountdownGame(players=3)
        assert state.next_position(0) == 1
        assert state.next_position(2) == 0

    def test_turn_order(self) -> None:
        state = CountdownGame(players=2)
        state.apply_move(1)
        assert state.position_to_move == 1
        state.apply_move(1)
        assert state.position_to_move == 0

    def test_invalid_position(self) -> None:
        state = CountdownGame.__new__(CountdownGame)
        with pytest.raises(ValueError, match="out of range"):
            BaseGameState.__init__(state, ["a", "b"], 2)

    def test_needs_players(self) -> None:
        with pytest.raises(ValueError, match="at least one player"):
            CountdownGame(players=0)

    def test_random_legal_move_is_legal(self) -> None:
        state = CountdownGame(counter=1)
        rng = np.random.default_rng(0)
        for _ in range(10):
            assert state.random_legal_move(rng) == 1

    def test_random_legal_move_none_when_done(self) -> None:
        state = CountdownGame(counter=1)
        state.apply_move(1)
        assert state.random_legal_move(np.random.default_rng(0)) is None

    def test_terminal_states_have_result_and_no_moves(self) -> None:
        """Play random games: moves exist exactly while there is no result."""
        rng = np.random.default_rng(3)
        for _ in range(20):
            state = CountdownGame(counter=7)
            while not state.is_terminal:
                assert state.legal_moves()
                state.apply_move(state.random_legal_move(rng))
            assert state.legal_moves() == []
            assert state.result is not None
            assert sum(state.result) == 1.0

    def test_legal_moves_has_no_side_effects(self) -> None:
        state = CountdownGame(counter=4)
        assert state.legal_moves() == state.legal_moves()

    def test_default_randomized_clone_is_clone(self) -> None:
        state = CountdownGame(counter=4)
        state.apply_move(2)
        clone = state.randomized_clone(0, np.random.default_rng(0))

        assert clone is not state
        assert clone.counter == 2
        assert clone.position_to_move == state.position_to_move

    def test_repr(self) -> None:
        assert repr(CountdownGame(players=2)) == "CountdownGame(2 players, to move: 0)"
