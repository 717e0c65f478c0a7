from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .constants import (
    DEALER_STANDS_ON,
    DEFAULT_INITIAL_MONEY,
    DEFAULT_MAX_HANDS,
    DEFAULT_NUM_DECKS,
    DEFAULT_NUM_SHUFFLES,
    DEFAULT_SHOE_POLICY,
    SHOE_POLICIES,
)


@dataclass(frozen=True)
class Rules:
    num_decks: int = DEFAULT_NUM_DECKS
    num_shuffles: int = DEFAULT_NUM_SHUFFLES  # shuffle passes per shoe build
    initial_money: int = DEFAULT_INITIAL_MONEY
    blackjack_payout: Decimal = Decimal("1.5")  # 3:2
    max_hands: int = DEFAULT_MAX_HANDS  # total hands after splits
    dealer_stands_on: int = DEALER_STANDS_ON
    hit_soft_17: bool = False  # False => S17
    shoe_policy: str = DEFAULT_SHOE_POLICY  # 'reshuffle' or 'error' when the shoe runs dry

    def validate(self) -> None:
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")
        if self.num_shuffles < 1:
            raise ValueError("num_shuffles must be at least 1")
        if self.initial_money <= 0:
            raise ValueError("initial_money must be positive")
        if self.max_hands < 1:
            raise ValueError("max_hands must be at least 1")
        if self.blackjack_payout <= 0:
            raise ValueError("blackjack_payout must be positive")
        if self.shoe_policy not in SHOE_POLICIES:
            raise ValueError(f"shoe_policy must be one of: {', '.join(sorted(SHOE_POLICIES))}")
