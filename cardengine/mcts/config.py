"""ISMCTS search configuration."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from pydantic import Field

from cardengine.config.base import StrictBaseModel

if TYPE_CHECKING:
    from cardengine.mcts.search import ISMCTSSearch

# Theoretical UCB1 constant
DEFAULT_EXPLORATION = math.sqrt(2.0) / 2


class ISMCTSConfig(StrictBaseModel):
    """Parameters of one ISMCTS search.

    Lower exploration means more exploitation, higher means more exploration.
    """

    iterations: int = Field(ge=1)
    exploration: float = Field(default=DEFAULT_EXPLORATION, gt=0.0)
    seed: int | None = None

    def build(self, rng: np.random.Generator | None = None) -> ISMCTSSearch:
        """Construct an ISMCTSSearch from this config.

        Args:
            rng: Random source. Defaults to a generator seeded from seed.
        """
        from cardengine.mcts.search import ISMCTSSearch

        return ISMCTSSearch(self, rng if rng is not None else np.random.default_rng(self.seed))
