"""Agent configuration with discriminated union pattern.

Each config type inherits from AgentConfigBase and implements `build()`.
Pydantic dispatches on the `variant` field.

Example YAML:
    agents:
      - variant: mcts
        iterations: 500
      - variant: random
      - variant: mcts
        iterations: 100
        exploration: 1.0
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal

import numpy as np
from pydantic import Field

from cardengine.config.base import StrictBaseModel
from cardengine.mcts.config import DEFAULT_EXPLORATION

if TYPE_CHECKING:
    from cardengine.ai.base import Agent


class AgentConfigBase(StrictBaseModel):
    """Base class for agent configurations."""

    @abstractmethod
    def build(self, seed: int | None = None) -> Agent:
        """Build the agent from this configuration.

        Args:
            seed: Seed for the agent's random source.

        Returns:
            Configured Agent instance.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the agent this config builds, without building it."""
        ...


class RandomAgentConfig(AgentConfigBase):
    """Configuration for random agent."""

    variant: Literal["random"] = "random"

    def build(self, seed: int | None = None) -> Agent:
        """Build a RandomAgent."""
        from cardengine.ai.random_agent import RandomAgent

        return RandomAgent(np.random.default_rng(seed))

    @property
    def name(self) -> str:
        return "Random"


class MCTSAgentConfig(AgentConfigBase):
    """Configuration for ISMCTS agent."""

    variant: Literal["mcts"] = "mcts"
    iterations: int = Field(default=500, ge=1)
    exploration: float = Field(default=DEFAULT_EXPLORATION, gt=0.0)

    def build(self, seed: int | None = None) -> Agent:
        """Build an MCTSAgent."""
        from cardengine.ai.mcts_agent import MCTSAgent
        from cardengine.mcts import ISMCTSConfig

        config = ISMCTSConfig(iterations=self.iterations, exploration=self.exploration, seed=seed)
        return MCTSAgent(config)

    @property
    def name(self) -> str:
        return f"ISMCTS({self.iterations},c={self.exploration:.2f})"


AgentConfig = Annotated[
    RandomAgentConfig | MCTSAgentConfig,
    Field(discriminator="variant"),
]
