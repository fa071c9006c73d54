"""Game model contract: states, results and cards."""

from cardengine.game.cards import Card, Deck, standard_deck
from cardengine.game.result import GameResult
from cardengine.game.state import BaseGameState, GameState, Move, random_choice

__all__ = [
    "BaseGameState",
    "Card",
    "Deck",
    "GameResult",
    "GameState",
    "Move",
    "random_choice",
    "standard_deck",
]
