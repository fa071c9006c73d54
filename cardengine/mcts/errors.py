"""Errors raised by the search engine."""

from __future__ import annotations


class NoLegalMovesError(ValueError):
    """Search was asked to choose a move in a finished game."""


class GameStateContractError(RuntimeError):
    """A game state broke its contract with the search.

    Raised when a state has no legal moves but no result either: its terminal
    detection and its move generation disagree. This is a bug in the game
    implementation, so the search is aborted rather than guessing.
    """
