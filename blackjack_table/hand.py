from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, List

from .cards import hand_totals
from .constants import BLACKJACK
from .money import format_money, to_money


class HandStatus(Enum):
    UNPLAYED = "unplayed"
    STOOD = "stood"
    BUST = "bust"
    DOUBLED = "doubled"
    BLACKJACK = "blackjack"


@dataclass
class Hand:
    """One group of cards with its wager.

    ``is_blackjack`` reports any two-card 21, including one formed after a
    split. Only the hand flagged ``is_natural`` at deal time is paid 3:2.
    """

    cards: List[str]
    bet: Decimal = Decimal(0)
    status: HandStatus = HandStatus.UNPLAYED
    is_natural: bool = False
    from_split: bool = False

    def __post_init__(self):
        self.cards = list(self.cards)
        self.bet = to_money(self.bet)

    def value(self) -> int:
        total, _ = hand_totals(self.cards)
        return total

    def is_soft(self) -> bool:
        _, soft = hand_totals(self.cards)
        return soft

    def is_blackjack(self) -> bool:
        return len(self.cards) == 2 and self.value() == BLACKJACK

    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    def can_be_split(self) -> bool:
        # identical rank only: K and 10 are both worth 10 but do not pair
        return len(self.cards) == 2 and self.cards[0] == self.cards[1]

    @property
    def is_done(self) -> bool:
        return self.status is not HandStatus.UNPLAYED

    def add_card(self, card: str) -> None:
        if self.is_done:
            raise RuntimeError(f"Cannot add a card to a {self.status.value} hand")
        self.cards.append(card)

    def describe(self) -> str:
        state = "Lost." if self.is_bust() else "Active."
        return (
            f"Hand -> {','.join(self.cards)}. Hand value -> {self.value()}. "
            f"Bet value -> {format_money(self.bet)}. Status -> {state}"
        )

    def to_dict(self) -> Dict:
        return {
            "cards": list(self.cards),
            "value": self.value(),
            "is_soft": self.is_soft(),
            "bet": format_money(self.bet),
            "status": self.status.value,
            "from_split": self.from_split,
            "line": self.describe(),
        }
