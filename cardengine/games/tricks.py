"""Plain trick-taking card game with hidden hands.

Each player is dealt the same number of cards. The player to move plays one
card and must follow the led suit when able. Once everyone has played, the
highest card of the led suit takes the trick and its winner leads the next
one. A player's result is the share of tricks they took.

Opponents' hands and the undealt cards are hidden, which makes this a
small but real imperfect information game for ISMCTS.
"""

from __future__ import annotations

import logging
from collections import Counter
from itertools import combinations
from typing import TYPE_CHECKING, Self

import numpy as np
from pydantic import Field, model_validator

from cardengine.config.base import StrictBaseModel
from cardengine.game.cards import Card, Deck, standard_deck
from cardengine.game.result import GameResult
from cardengine.game.state import BaseGameState

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

SUITS = ("spades", "hearts", "diamonds", "clubs")


def _can_deal(
    suit_counts: Counter[str],
    needs: dict[int | None, int],
    voids: dict[int | None, set[str]],
) -> bool:
    """Whether the cards left can fill every need without breaking a void.

    Hall's condition for the suit transportation problem: every group of
    holders must need no more cards than exist in the suits at least one of
    them may hold.
    """
    waiting = [h for h, n in needs.items() if n > 0]
    for size in range(1, len(waiting) + 1):
        for group in combinations(waiting, size):
            allowed = sum(
                count
                for suit, count in suit_counts.items()
                if any(suit not in voids[h] for h in group)
            )
            if sum(needs[h] for h in group) > allowed:
                return False
    return True


class TrickGameState(BaseGameState):
    """State of a trick-taking game.

    Attributes:
        hands: Cards held by each player.
        undealt: Cards nobody holds. Never revealed.
        trick: (position, card) pairs on the table, in play order.
        played: Cards of the finished tricks.
        tricks_won: Tricks taken by each player.
        voids: Suits each player is known not to hold, learned when they
            failed to follow suit.
    """

    def __init__(
        self,
        hands: Sequence[Sequence[Card]],
        undealt: Sequence[Card] = (),
        leader: int = 0,
        names: Sequence[str] | None = None,
    ) -> None:
        if len(hands) < 2:
            raise ValueError("A trick game needs at least 2 players.")
        if len({len(h) for h in hands}) != 1:
            raise ValueError("All hands must have the same size.")
        super().__init__(names or [f"Player {i}" for i in range(len(hands))], leader)
        self.hands = [Deck(h) for h in hands]
        self.undealt = Deck(undealt)
        self.trick: list[tuple[int, Card]] = []
        self.played = Deck()
        self.tricks_won = [0] * len(hands)
        self.voids: list[set[str]] = [set() for _ in hands]
        self.total_tricks = len(hands[0])

    @property
    def led_suit(self) -> str | None:
        """Suit of the first card of the current trick, if any."""
        return self.trick[0][1].suit if self.trick else None

    @property
    def result(self) -> GameResult | None:
        if self.trick or any(self.hands):
            return None
        if self.total_tricks == 0:
            return GameResult.of(0.0 for _ in self.hands)
        return GameResult.of(won / self.total_tricks for won in self.tricks_won)

    def legal_moves(self) -> list[Card]:
        hand = self.hands[self.position_to_move]
        led = self.led_suit
        if led is not None:
            following = [card for card in hand if card.suit == led]
            if following:
                return following
        return list(hand)

    def apply_move(self, move: Card) -> None:
        """Play a card from the hand of the player to move.

        Raises:
            ValueError: If the card is not a legal move.
        """
        position = self.position_to_move
        if move not in self.legal_moves():
            raise ValueError(f"{move} is not a legal move for player {position}")

        led = self.led_suit
        if led is not None and move.suit != led:
            self.voids[position].add(led)

        self.hands[position].remove(move)
        self.trick.append((position, move))

        if len(self.trick) < len(self.players):
            self.position_to_move = self.next_position(position)
            return

        winner = self.trick_winner()
        self.tricks_won[winner] += 1
        self.played.extend(card for _, card in self.trick)
        self.trick = []
        self.position_to_move = winner

    def trick_winner(self) -> int:
        """Position of the highest card of the led suit on the table."""
        led = self.led_suit
        winner, best = self.trick[0]
        for position, card in self.trick[1:]:
            if card.suit == led and card.rank > best.rank:
                winner, best = position, card
        return winner

    def clone(self) -> TrickGameState:
        state = TrickGameState.__new__(TrickGameState)
        state.players = list(self.players)
        state.position_to_move = self.position_to_move
        state.hands = [Deck(h) for h in self.hands]
        state.undealt = Deck(self.undealt)
        state.trick = list(self.trick)
        state.played = Deck(self.played)
        state.tricks_won = list(self.tricks_won)
        state.voids = [set(v) for v in self.voids]
        state.total_tricks = self.total_tricks
        return state

    def randomized_clone(self, observer: int, rng: np.random.Generator) -> TrickGameState:
        """Clone with every card unseen by observer redealt.

        The observer's hand, the table and the finished tricks are kept. The
        other hands and the undealt cards are pooled, shuffled and dealt
        back at the same sizes, most constrained player first. Each card
        dealt must fit the receiver's known voids and leave a valid deal for
        everyone still waiting, so known voids always hold. The true hands
        are kept only if the voids admit no deal at all.
        """
        state = self.clone()
        others = [p for p in range(len(self.players)) if p != observer]
        pool = Deck(card for p in others for card in self.hands[p])
        pool.extend(self.undealt)
        pool.shuffle(rng)

        # None stands for the undealt cards, which may be of any suit
        needs: dict[int | None, int] = {p: len(self.hands[p]) for p in others}
        needs[None] = len(self.undealt)
        voids: dict[int | None, set[str]] = {p: self.voids[p] for p in others}
        voids[None] = set()
        suit_counts = Counter(card.suit for card in pool)

        if not _can_deal(suit_counts, needs, voids):
            logger.warning(
                f"No deal of {len(pool)} unseen cards fits voids {self.voids}, keeping true hands"
            )
            return state

        order = sorted(needs, key=lambda h: sum(suit_counts[s] for s in voids[h]), reverse=True)
        for holder in order:
            dealt = Deck()
            for _ in range(needs[holder]):
                card = self._next_card(pool, holder, suit_counts, needs, voids)
                pool.remove(card)
                suit_counts[card.suit] -= 1
                needs[holder] -= 1
                dealt.append(card)
            if holder is None:
                state.undealt = dealt
            else:
                state.hands[holder] = dealt
        return state

    @staticmethod
    def _next_card(
        pool: Deck,
        holder: int | None,
        suit_counts: Counter[str],
        needs: dict[int | None, int],
        voids: dict[int | None, set[str]],
    ) -> Card:
        """First card of the shuffled pool holder may take without blocking the others."""
        checked: dict[str, bool] = {}
        for card in pool:
            if card.suit in voids[holder]:
                continue
            if card.suit not in checked:
                suit_counts[card.suit] -= 1
                needs[holder] -= 1
                checked[card.suit] = _can_deal(suit_counts, needs, voids)
                suit_counts[card.suit] += 1
                needs[holder] += 1
            if checked[card.suit]:
                return card
        raise RuntimeError(f"Deal for {holder} got stuck with {suit_counts} left")

    def __str__(self) -> str:
        table = ", ".join(f"P{p}:{c}" for p, c in self.trick)
        return (
            f"to move: P{self.position_to_move}, hand: {self.hands[self.position_to_move]}, "
            f"table: [{table}], tricks: {self.tricks_won}"
        )


class TrickGameConfig(StrictBaseModel):
    """Setup of a trick-taking game.

    Example YAML:
        players: 3
        hand_size: 5
        suits: [spades, hearts, diamonds, clubs]
        ranks: [9, 10, 11, 12, 13, 14]
    """

    players: int = Field(default=3, ge=2, le=6)
    hand_size: int = Field(default=5, ge=1)
    suits: list[str] = Field(default_factory=lambda: list(SUITS), min_length=1)
    ranks: list[int] = Field(default_factory=lambda: list(range(2, 15)), min_length=1)

    @model_validator(mode="after")
    def check_deck(self) -> Self:
        """Suits and ranks must be unique and the deck big enough to deal."""
        if len(set(self.suits)) != len(self.suits):
            raise ValueError(f"duplicate suits in {self.suits}")
        if len(set(self.ranks)) != len(self.ranks):
            raise ValueError(f"duplicate ranks in {self.ranks}")
        deck_size = len(self.suits) * len(self.ranks)
        if self.players * self.hand_size > deck_size:
            raise ValueError(
                f"cannot deal {self.players} hands of {self.hand_size} "
                f"from a deck of {deck_size} cards"
            )
        return self

    def build(self, seed: int | None = None, leader: int = 0) -> TrickGameState:
        """Shuffle a deck and deal a new game.

        Args:
            seed: Random seed for the deal.
            leader: Position leading the first trick.
        """
        rng = np.random.default_rng(seed)
        deck = standard_deck(self.suits, self.ranks)
        deck.shuffle(rng)
        hands = [sorted(deck.draw_top(self.hand_size)) for _ in range(self.players)]
        return TrickGameState(hands, deck, leader=leader)
