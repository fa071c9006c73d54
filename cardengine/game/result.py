"""Outcome of a finished game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class GameResult:
    """Per-player outcome of a terminal game state.

    A larger value must always indicate a better outcome for that player,
    otherwise the search optimizes the wrong thing. Values are usually
    normalized to [0, 1] but nothing relies on it.

    Attributes:
        player_results: One score per player position.
    """

    player_results: tuple[float, ...]

    @classmethod
    def of(cls, scores: Iterable[float]) -> GameResult:
        """Build a result from any iterable of scores."""
        return cls(tuple(float(s) for s in scores))

    def winners(self) -> list[int]:
        """Positions holding the best score (several on a tie)."""
        if not self.player_results:
            return []
        best = max(self.player_results)
        return [i for i, score in enumerate(self.player_results) if score == best]

    def __getitem__(self, position: int) -> float:
        return self.player_results[position]

    def __len__(self) -> int:
        return len(self.player_results)

    def __iter__(self) -> Iterator[float]:
        return iter(self.player_results)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{s:.3f}" for s in self.player_results) + "]"
