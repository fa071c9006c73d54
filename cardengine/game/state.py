"""Game state contract consumed by the search engine.

The search never knows the rules of the game it plays. It only talks to
objects implementing :class:`GameState`. Concrete games usually inherit
:class:`BaseGameState`, which supplies the optional parts of the contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np

    from cardengine.game.result import GameResult

# Moves are opaque to the search: only compared with ==.
Move = Any


def random_choice(rng: np.random.Generator, items: Sequence[Any]) -> Any:
    """Pick one element of a non-empty sequence uniformly at random.

    Args:
        rng: Random source. Every random draw of the engine goes through here.
        items: Sequence to pick from.

    Returns:
        The picked element.

    Raises:
        ValueError: If items is empty.
    """
    if not items:
        raise ValueError("Cannot choose from an empty sequence.")
    return items[int(rng.integers(len(items)))]


@runtime_checkable
class GameState(Protocol):
    """Position in a game, as seen by the search.

    Attributes:
        players: Players of the game. Fixed size, never modified by the search.
        position_to_move: Index in players of the player who moves next.
    """

    players: Sequence[Any]
    position_to_move: int

    @property
    def result(self) -> GameResult | None:
        """Outcome of the game, present if and only if the game is done."""
        ...

    def legal_moves(self) -> list[Move]:
        """Moves available to the player to move. Empty if and only if the game is done.

        Must not modify the state: two calls without a move in between
        return the same moves.
        """
        ...

    def apply_move(self, move: Move) -> None:
        """Play a move, mutating the state in place."""
        ...

    def randomized_clone(self, observer: int, rng: np.random.Generator) -> GameState:
        """Deep copy with all information unknown to observer resampled.

        This is the determinization step: it turns the imperfect information
        game into a perfect information one consistent with what observer knows.
        """
        ...

    def random_legal_move(self, rng: np.random.Generator) -> Move | None:
        """Uniformly random legal move, or None when the game is done."""
        ...


class BaseGameState(ABC):
    """Convenience base for concrete games.

    Subclasses implement the rules (legal_moves, apply_move, result, clone)
    and get the rest of the GameState contract for free. Games with hidden
    information must also override randomized_clone.
    """

    def __init__(self, players: Sequence[Any], position_to_move: int = 0) -> None:
        if not players:
            raise ValueError("A game needs at least one player.")
        if not 0 <= position_to_move < len(players):
            raise ValueError(f"position_to_move {position_to_move} out of range")
        self.players = list(players)
        self.position_to_move = position_to_move

    @property
    @abstractmethod
    def result(self) -> GameResult | None:
        """Outcome of the game, or None while it is not done."""
        ...

    @abstractmethod
    def legal_moves(self) -> list[Move]: ...

    @abstractmethod
    def apply_move(self, move: Move) -> None: ...

    @abstractmethod
    def clone(self) -> BaseGameState:
        """Create a deep copy of this state."""
        ...

    @property
    def is_terminal(self) -> bool:
        """Whether the game is done."""
        return self.result is not None

    def next_position(self, position: int) -> int:
        """Position of the player seated after position."""
        return (position + 1) % len(self.players)

    def random_legal_move(self, rng: np.random.Generator) -> Move | None:
        """Pick uniformly among legal_moves().

        Override only to avoid building the full move list; an override must
        produce the same moves with the same probabilities.
        """
        moves = self.legal_moves()
        if not moves:
            return None
        return random_choice(rng, moves)

    def randomized_clone(self, observer: int, rng: np.random.Generator) -> BaseGameState:
        """Perfect information games have nothing to hide: plain clone."""
        return self.clone()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.players)} players, to move: {self.position_to_move})"
