"""Game and match execution for agents."""

from cardengine.eval.game import GameOutcome, play_game
from cardengine.eval.match import MatchConfig, MatchResult, run_match

__all__ = [
    "GameOutcome",
    "MatchConfig",
    "MatchResult",
    "play_game",
    "run_match",
]
