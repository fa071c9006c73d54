"""Playing cards and decks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy as np

SUIT_SYMBOLS = {"spades": "♠", "hearts": "♥", "diamonds": "♦", "clubs": "♣"}
RANK_NAMES = {11: "J", 12: "Q", 13: "K", 14: "A"}


@dataclass(frozen=True, order=True)
class Card:
    """A card, ordered by suit then rank.

    Attributes:
        suit: Suit name, e.g. "spades".
        rank: Numeric rank, larger beats smaller within a suit.
    """

    suit: str
    rank: int

    def __str__(self) -> str:
        rank = RANK_NAMES.get(self.rank, str(self.rank))
        return f"{rank}{SUIT_SYMBOLS.get(self.suit, self.suit)}"


class Deck(list[Card]):
    """List of cards that can be drawn from either end and shuffled.

    The top of the deck is the end of the list.
    """

    @overload
    def draw_top(self) -> Card: ...

    @overload
    def draw_top(self, count: int) -> Deck: ...

    def draw_top(self, count: int | None = None) -> Card | Deck:
        """Draw the top card, or the top count cards as a new deck."""
        if count is None:
            return self.pop()
        if not 0 <= count <= len(self):
            raise ValueError(f"Cannot draw {count} cards from a deck of {len(self)}")
        drawn = Deck(self[len(self) - count :])
        del self[len(self) - count :]
        return drawn

    @overload
    def draw_bottom(self) -> Card: ...

    @overload
    def draw_bottom(self, count: int) -> Deck: ...

    def draw_bottom(self, count: int | None = None) -> Card | Deck:
        """Draw the bottom card, or the bottom count cards as a new deck."""
        if count is None:
            return self.pop(0)
        if not 0 <= count <= len(self):
            raise ValueError(f"Cannot draw {count} cards from a deck of {len(self)}")
        drawn = Deck(self[:count])
        del self[:count]
        return drawn

    def shuffle(self, rng: np.random.Generator) -> None:
        """Shuffle in place with the given random source."""
        order = rng.permutation(len(self))
        self[:] = [self[i] for i in order]

    def remove_duplicates(self) -> None:
        """Remove repeated cards, keeping the first occurrence of each."""
        seen: set[Card] = set()
        kept = []
        for card in self:
            if card not in seen:
                seen.add(card)
                kept.append(card)
        self[:] = kept

    def equals_content(self, other: Iterable[Card]) -> bool:
        """Whether both decks hold the same cards, ignoring order."""
        return sorted(self) == sorted(other)

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self) + "]"


def standard_deck(suits: Iterable[str], ranks: Iterable[int]) -> Deck:
    """Build an ordered deck with one card per (suit, rank) pair."""
    ranks = list(ranks)
    return Deck(Card(suit, rank) for suit in suits for rank in ranks)
