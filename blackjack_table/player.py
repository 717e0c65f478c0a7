from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence

from .constants import BLACKJACK
from .hand import Hand, HandStatus
from .money import Amount, as_money, to_money
from .types import Outcome


@dataclass
class HandResult:
    hand_index: int
    outcome: Outcome
    credit: Decimal
    value: int


class Player:
    """One seat at the table: a bankroll and the hands played this round.

    ``cursor`` indexes the hand currently being acted on. It only moves
    forward, once per hand reaching a terminal state, and equals
    ``len(hands)`` once every hand is finished. Mutators assume the matching
    ``can_*`` check already passed and do not re-validate it.
    """

    def __init__(self, money: Amount, position: int, blackjack_payout: Amount = Decimal("1.5"), max_hands: int = 4):
        self.bankroll = to_money(money)
        self.position = position
        self.blackjack_payout = Decimal(str(blackjack_payout))
        self.max_hands = max_hands
        self.hands: List[Hand] = []
        self._cursor = 0

    def __repr__(self) -> str:
        return f"Player(position={self.position}, bankroll={self.bankroll}, hands={len(self.hands)}, cursor={self._cursor})"

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current_hand(self) -> Hand:
        if not self.has_unplayed_hands():
            raise RuntimeError(f"Player {self.position} has no unplayed hands")
        return self.hands[self._cursor]

    def _advance(self, status: HandStatus) -> None:
        self.hands[self._cursor].status = status
        self._cursor += 1
        self._check_cursor()

    def _check_cursor(self) -> None:
        if not 0 <= self._cursor <= len(self.hands):
            raise RuntimeError(f"Cursor {self._cursor} out of range for {len(self.hands)} hand(s)")

    # --- betting ---
    def can_bet(self, amount: Optional[Amount]) -> bool:
        amount = as_money(amount)
        if amount is None:
            return False
        return 0 < amount <= self.bankroll

    def place_bet(self, amount: Amount) -> None:
        self.bankroll -= to_money(amount)

    def out_of_money(self) -> bool:
        return self.bankroll <= 0

    def clear(self) -> None:
        self.hands = []
        self._cursor = 0

    def start_round(self, cards: Sequence[str], bet: Amount) -> Optional[Decimal]:
        """Debit ``bet`` and open hand #0 with the two dealt cards.

        Returns the amount credited when the hand is a natural blackjack
        (paid immediately at 3:2), otherwise ``None``.
        """
        self.clear()
        hand = Hand(cards=list(cards), bet=to_money(bet))
        self.place_bet(hand.bet)
        self.hands.append(hand)
        return self._check_blackjack()

    def _check_blackjack(self) -> Optional[Decimal]:
        hand = self.hands[0]
        if not hand.is_blackjack():
            return None
        hand.is_natural = True
        credit = self._add_winnings(hand, blackjack=True)
        self._advance(HandStatus.BLACKJACK)
        return credit

    def _add_winnings(self, hand: Hand, blackjack: bool = False, push: bool = False) -> Decimal:
        if push:
            credit = hand.bet
        elif blackjack:
            credit = to_money(hand.bet + hand.bet * self.blackjack_payout)
        else:
            credit = to_money(hand.bet * 2)
        self.bankroll += credit
        return credit

    # --- turn actions ---
    def has_unplayed_hands(self) -> bool:
        return self._cursor < len(self.hands)

    def hit(self, card: str) -> bool:
        """Add ``card`` to the current hand; return True when it busts."""
        hand = self.current_hand
        hand.add_card(card)
        if hand.is_bust():
            self._advance(HandStatus.BUST)
            return True
        return False

    def stand(self) -> None:
        self._advance(HandStatus.STOOD)

    def can_double(self) -> bool:
        # only checks that some money is left; the amount is checked by can_double_down
        return self.bankroll > 0

    def can_double_down(self, amount: Optional[Amount]) -> bool:
        amount = as_money(amount)
        if amount is None:
            return False
        return 0 < amount <= self.current_hand.bet and amount <= self.bankroll

    def place_double_bet(self, amount: Amount) -> None:
        amount = to_money(amount)
        self.current_hand.bet += amount
        self.bankroll -= amount

    def double_down(self, amount: Amount, next_card: str) -> bool:
        """Raise the bet, take exactly one card and finish the hand.

        Returns True when the card busts the hand.
        """
        self.place_double_bet(amount)
        hand = self.current_hand
        hand.add_card(next_card)
        self._advance(HandStatus.DOUBLED)
        return hand.is_bust()

    def can_split(self) -> bool:
        hand = self.current_hand
        return hand.can_be_split() and len(self.hands) < self.max_hands and self.bankroll - hand.bet >= 0

    def split(self, next_cards: Sequence[str]) -> List[Hand]:
        """Replace the current hand with two hands of one original card each.

        Each new hand gets one of ``next_cards`` and the parent's bet. The
        cursor stays put and so lands on the first new hand.
        """
        parent = self.current_hand
        children = [
            Hand(cards=[parent.cards[i], next_cards[i]], bet=parent.bet, from_split=True)
            for i in range(2)
        ]
        self.place_bet(parent.bet)
        self.hands[self._cursor:self._cursor + 1] = children
        self._check_cursor()
        return children

    # --- settlement ---
    def settle_round(self, dealer_value: int, dealer_has_blackjack: bool) -> List[HandResult]:
        results: List[HandResult] = []
        for index, hand in enumerate(self.hands):
            if hand.is_bust():
                results.append(HandResult(index, Outcome.BUST, Decimal("0.00"), hand.value()))
                continue
            if hand.is_natural:
                # paid at deal time
                continue
            value = hand.value()
            if dealer_value > BLACKJACK or value > dealer_value:
                outcome, credit = Outcome.WIN, self._add_winnings(hand)
            elif dealer_has_blackjack or value < dealer_value:
                outcome, credit = Outcome.LOSE, Decimal("0.00")
            else:
                outcome, credit = Outcome.PUSH, self._add_winnings(hand, push=True)
            results.append(HandResult(index, outcome, credit, value))
        return results
