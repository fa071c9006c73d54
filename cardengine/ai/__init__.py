"""Agents playing games through the GameState contract."""

from cardengine.ai.base import Agent
from cardengine.ai.config import (
    AgentConfig,
    AgentConfigBase,
    MCTSAgentConfig,
    RandomAgentConfig,
)
from cardengine.ai.mcts_agent import MCTSAgent
from cardengine.ai.random_agent import RandomAgent

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentConfigBase",
    "MCTSAgent",
    "MCTSAgentConfig",
    "RandomAgent",
    "RandomAgentConfig",
]
