from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from .constants import BLACKJACK, DEFAULT_NUM_DECKS, DEFAULT_NUM_SHUFFLES, DEFAULT_SHOE_POLICY

# Suits are irrelevant to scoring and are not modeled; a card is its rank.
RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
FACE_RANKS = ("J", "Q", "K")
COPIES_PER_DECK = 4


class ShoeExhaustedError(RuntimeError):
    """Raised by a shoe running the 'error' policy when it has no cards left."""


def card_value(rank: str) -> int:
    if rank == "A":
        return 11
    if rank in FACE_RANKS:
        return 10
    if rank not in RANKS:
        raise ValueError(f"Unknown card rank: {rank!r}")
    return int(rank)


def hand_totals(cards: Iterable[str]) -> Tuple[int, bool]:
    total = 0
    aces = 0
    for rank in cards:
        if rank == "A":
            aces += 1
        total += card_value(rank)
    # downgrade aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
    # soft if at least one ace remains valued as 11
    is_soft = aces > 0
    return total, is_soft


class Shoe:
    """Multi-deck supply of card ranks, drawn from the end.

    When the shoe is empty, ``policy`` decides what happens: ``"reshuffle"``
    rebuilds a full shoe, ``"error"`` raises :class:`ShoeExhaustedError`.
    """

    def __init__(
        self,
        num_decks: int = DEFAULT_NUM_DECKS,
        num_shuffles: int = DEFAULT_NUM_SHUFFLES,
        seed: Optional[int] = None,
        policy: str = DEFAULT_SHOE_POLICY,
    ):
        self.num_decks = num_decks
        self.num_shuffles = num_shuffles
        self.policy = policy
        self.rng = random.Random(seed)
        self.reshuffles = 0
        self._cards: List[str] = []
        self._build()

    def _build(self):
        self._cards = [rank for _ in range(self.num_decks) for rank in RANKS for _ in range(COPIES_PER_DECK)]
        for _ in range(self.num_shuffles):
            self.rng.shuffle(self._cards)

    def size(self) -> int:
        return self.num_decks * len(RANKS) * COPIES_PER_DECK

    def draw(self) -> str:
        if not self._cards:
            if self.policy != "reshuffle":
                raise ShoeExhaustedError(f"Shoe of {self.num_decks} deck(s) has no cards left")
            self._build()
            self.reshuffles += 1
        return self._cards.pop()

    def draw_many(self, n: int) -> List[str]:
        return [self.draw() for _ in range(n)]

    def stack(self, cards: Iterable[str]) -> None:
        """Place ``cards`` on top of the shoe so they are drawn in the given order."""
        ranks = list(cards)
        for rank in ranks:
            card_value(rank)
        self._cards.extend(reversed(ranks))

    def remaining(self) -> int:
        return len(self._cards)
