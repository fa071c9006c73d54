"""Repeated games between a fixed set of agents."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Self

import numpy as np
from pydantic import Field, model_validator

from cardengine.ai.config import AgentConfig  # noqa: TC001
from cardengine.config.base import StrictBaseModel
from cardengine.eval.game import GameOutcome, play_game
from cardengine.games.tricks import TrickGameConfig

logger = logging.getLogger(__name__)


class MatchConfig(StrictBaseModel):
    """Match configuration: one game setup, one agent per seat.

    Example YAML:
        game:
          players: 3
          hand_size: 5
        agents:
          - variant: mcts
            iterations: 300
          - variant: random
          - variant: random
        games: 20
        seed: 0
        workers: 2
    """

    game: TrickGameConfig = Field(default_factory=TrickGameConfig)
    agents: list[AgentConfig]
    games: int = Field(default=10, ge=1)
    seed: int = 0
    workers: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_seats(self) -> Self:
        """Exactly one agent config per seat of the game."""
        if len(self.agents) != self.game.players:
            raise ValueError(
                f"{len(self.agents)} agents configured for a {self.game.players}-player game"
            )
        return self


@dataclass
class MatchResult:
    """Results of all games of a match.

    Attributes:
        agent_names: Name of the agent in each seat.
        outcomes: Outcome of every game, in game order.
    """

    agent_names: list[str]
    outcomes: list[GameOutcome]

    def mean_scores(self) -> list[float]:
        """Mean result of each seat over all games."""
        scores = np.array([list(o.result) for o in self.outcomes])
        return [float(s) for s in scores.mean(axis=0)]

    def wins(self) -> list[float]:
        """Games won per seat. A tie shares one win among the winners."""
        wins = [0.0] * len(self.agent_names)
        for outcome in self.outcomes:
            for seat in outcome.winners:
                wins[seat] += 1.0 / len(outcome.winners)
        return wins

    def standings_table(self) -> str:
        """Format per-seat mean score and wins as a table."""
        name_width = max(10, *(len(n) for n in self.agent_names))
        lines = [
            f"Match Results ({len(self.outcomes)} games)",
            "=" * (name_width + 28),
            f"{'Seat':<6}{'Agent':<{name_width}}  {'Score':>8}  {'Wins':>8}",
        ]
        for seat, (name, score, wins) in enumerate(
            zip(self.agent_names, self.mean_scores(), self.wins(), strict=True)
        ):
            lines.append(f"{seat:<6}{name:<{name_width}}  {score:>8.3f}  {wins:>8.1f}")
        return "\n".join(lines)


def _play_one(config: MatchConfig, game_index: int) -> GameOutcome:
    """Play one game of the match with freshly built agents.

    Seeds are derived from the match seed and the game index, so results do
    not depend on the number of workers.
    """
    seeds = np.random.SeedSequence([config.seed, game_index]).generate_state(
        len(config.agents) + 1
    )
    state = config.game.build(seed=int(seeds[0]), leader=game_index % config.game.players)
    agents = [agent.build(seed=int(s)) for agent, s in zip(config.agents, seeds[1:], strict=True)]
    outcome = play_game(state, agents)
    logger.debug(f"Game {game_index}: {outcome.result} in {outcome.turns} moves")
    return outcome


def run_match(config: MatchConfig) -> MatchResult:
    """Play config.games games and collect the outcomes.

    With workers > 1 games run on a thread pool. Every game builds its own
    state, agents and search trees, nothing is shared between games.
    """
    names = [agent.name for agent in config.agents]
    logger.info(f"Match: {config.games} games, seats: {names}, workers: {config.workers}")

    if config.workers == 1:
        outcomes = [_play_one(config, i) for i in range(config.games)]
    else:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            outcomes = list(executor.map(lambda i: _play_one(config, i), range(config.games)))

    result = MatchResult(agent_names=names, outcomes=outcomes)
    logger.info(f"Match done. Mean scores: {[round(s, 3) for s in result.mean_scores()]}")
    return result
