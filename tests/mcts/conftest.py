"""Small deterministic games for search tests."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from cardengine.game.result import GameResult
from cardengine.game.state import BaseGameState
from cardengine.games.tricks import TrickGameConfig, TrickGameState


class ChoiceGame(BaseGameState):
    """Player 0 picks A or B, player 1 can only pass, then the game ends.

    A always wins for player 0, B always wins for player 1.
    """

    PAYOFFS = {"A": (1.0, 0.0), "B": (0.0, 1.0)}

    def __init__(self) -> None:
        super().__init__(["p0", "p1"], 0)
        self.history: list[str] = []
        self.clones = 0

    @property
    def result(self) -> GameResult | None:
        if len(self.history) < 2:
            return None
        return GameResult.of(self.PAYOFFS[self.history[0]])

    def legal_moves(self) -> list[str]:
        if len(self.history) == 0:
            return ["A", "B"]
        if len(self.history) == 1:
            return ["pass"]
        return []

    def apply_move(self, move: Any) -> None:
        self.history.append(move)
        self.position_to_move = self.next_position(self.position_to_move)

    def clone(self) -> ChoiceGame:
        state = ChoiceGame()
        state.history = list(self.history)
        state.position_to_move = self.position_to_move
        return state

    def randomized_clone(self, observer: int, rng: np.random.Generator) -> ChoiceGame:
        self.clones += 1
        return self.clone()


class SingleMoveGame(BaseGameState):
    """Only one move is ever legal at the root. Counts determinizations."""

    def __init__(self) -> None:
        super().__init__(["p0", "p1"], 0)
        self.done = False
        self.clones = 0

    @property
    def result(self) -> GameResult | None:
        return GameResult.of([1.0, 0.0]) if self.done else None

    def legal_moves(self) -> list[str]:
        return [] if self.done else ["only"]

    def apply_move(self, move: Any) -> None:
        self.done = True

    def clone(self) -> SingleMoveGame:
        state = SingleMoveGame()
        state.done = self.done
        return state

    def randomized_clone(self, observer: int, rng: np.random.Generator) -> SingleMoveGame:
        self.clones += 1
        return self.clone()


class ConstantGame(BaseGameState):
    """Players alternate picking 0, 1 or 2 for a fixed number of plies.

    The result does not depend on the moves.
    """

    def __init__(self, plies: int = 4, payoff: tuple[float, float] = (0.25, 0.75)) -> None:
        super().__init__(["p0", "p1"], 0)
        self.plies = plies
        self.payoff = payoff
        self.moves: list[int] = []

    @property
    def result(self) -> GameResult | None:
        return GameResult.of(self.payoff) if len(self.moves) >= self.plies else None

    def legal_moves(self) -> list[int]:
        return [] if len(self.moves) >= self.plies else [0, 1, 2]

    def apply_move(self, move: Any) -> None:
        self.moves.append(move)
        self.position_to_move = self.next_position(self.position_to_move)

    def clone(self) -> ConstantGame:
        state = type(self)(self.plies, self.payoff)
        state.moves = list(self.moves)
        state.position_to_move = self.position_to_move
        return state


class BrokenGame(ConstantGame):
    """Runs out of moves but never reports a result."""

    @property
    def result(self) -> GameResult | None:
        return None


@pytest.fixture
def choice_game() -> ChoiceGame:
    return ChoiceGame()


@pytest.fixture
def single_move_game() -> SingleMoveGame:
    return SingleMoveGame()


@pytest.fixture
def constant_game() -> ConstantGame:
    return ConstantGame()


@pytest.fixture
def broken_game() -> BrokenGame:
    return BrokenGame()


@pytest.fixture
def trick_game() -> TrickGameState:
    """Three players, four cards each, dealt from a 24-card deck."""
    config = TrickGameConfig(players=3, hand_size=4, ranks=[9, 10, 11, 12, 13, 14])
    return config.build(seed=7)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
