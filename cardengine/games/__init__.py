"""Concrete games implementing the GameState contract."""

from cardengine.games.tricks import TrickGameConfig, TrickGameState

__all__ = ["TrickGameConfig", "TrickGameState"]
