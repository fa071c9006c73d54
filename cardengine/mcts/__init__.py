"""Information Set Monte Carlo Tree Search for imperfect information games."""

from cardengine.mcts.config import DEFAULT_EXPLORATION, ISMCTSConfig
from cardengine.mcts.errors import GameStateContractError, NoLegalMovesError
from cardengine.mcts.node import SearchNode
from cardengine.mcts.rollout import rollout
from cardengine.mcts.search import ISMCTSSearch, MoveStat, SearchResult, estimate_value, search
from cardengine.mcts.tree import SearchTree

__all__ = [
    "DEFAULT_EXPLORATION",
    "GameStateContractError",
    "ISMCTSConfig",
    "ISMCTSSearch",
    "MoveStat",
    "NoLegalMovesError",
    "SearchNode",
    "SearchResult",
    "SearchTree",
    "estimate_value",
    "rollout",
    "search",
]
