"""Base class for game-playing agents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardengine.game.state import GameState, Move


class Agent(ABC):
    """Base class for agents.

    Agents receive the game state and return one of its legal moves.
    """

    @abstractmethod
    def get_move(self, state: GameState, position: int) -> Move:
        """Select a move given the current game state.

        Args:
            state: Current game state. DO NOT modify this.
            position: Seat of this agent, always the player to move.

        Returns:
            One of state.legal_moves().
        """
        ...

    def reset(self) -> None:
        """Reset agent state for a new game.

        Override this if your agent keeps state between moves.
        Default implementation does nothing.
        """
        return  # noqa: B027

    @property
    def name(self) -> str:
        """Human-readable name for this agent."""
        return self.__class__.__name__
