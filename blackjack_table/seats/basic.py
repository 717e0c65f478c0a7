from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..constants import DEFAULT_UNIT_BET
from ..money import to_money
from ..types import Action, Observation


class BasicStrategySeat:
    """Flat bettor playing a multi-deck, dealer-stands-on-17 basic strategy.

    Notes:
    - Bets ``unit`` each round, or the whole bankroll when less is left.
    - Doubles only on two-card hands and only for the full original bet.
    - Pairs are identical ranks only, matching the table's split rule.
    - No surrender, no insurance.
    """

    def __init__(self, unit: Any = DEFAULT_UNIT_BET):
        self.unit = to_money(unit)

    def bet(self, observation: Observation, info: Any) -> Decimal:
        return min(self.unit, to_money(observation.bankroll))

    def double_amount(self, observation: Observation, info: Any) -> Decimal:
        return min(to_money(observation.hand.bet), to_money(observation.bankroll))

    def act(self, observation: Observation, info: Any) -> Action:
        hand = observation.hand
        actions = observation.allowed_actions

        if Action.SPLIT in actions:
            pair_action = self._pair_decision(observation)
            if pair_action is not None:
                return pair_action

        if hand.is_soft:
            action = self._soft_total_decision(observation)
        else:
            action = self._hard_total_decision(observation)
        if action == Action.DOUBLE and not self._can_double(observation):
            return Action.HIT
        return action

    def _can_double(self, obs: Observation) -> bool:
        if Action.DOUBLE not in obs.allowed_actions or len(obs.hand.cards) != 2:
            return False
        # a partial double is legal but never correct strategy
        return to_money(obs.bankroll) >= to_money(obs.hand.bet)

    def _dealer_up(self, observation: Observation) -> int:
        r = observation.dealer_upcard
        if r in ("J", "Q", "K"):
            return 10
        if r == "A":
            return 11
        return int(r)

    def _soft_total_decision(self, obs: Observation) -> Action:
        up = self._dealer_up(obs)
        total = obs.hand.total
        if total in (13, 14):  # A,2 / A,3
            return Action.DOUBLE if up in (5, 6) else Action.HIT
        if total in (15, 16):  # A,4 / A,5
            return Action.DOUBLE if up in (4, 5, 6) else Action.HIT
        if total == 17:  # A,6
            return Action.DOUBLE if up in (3, 4, 5, 6) else Action.HIT
        if total == 18:  # A,7
            if up in (3, 4, 5, 6) and self._can_double(obs):
                return Action.DOUBLE
            if up in (9, 10, 11):
                return Action.HIT
            return Action.STAND
        if total <= 12:  # A,A after a hit, or several small cards
            return Action.HIT
        return Action.STAND

    def _hard_total_decision(self, obs: Observation) -> Action:
        up = self._dealer_up(obs)
        total = obs.hand.total

        if total <= 8:
            return Action.HIT
        if total == 9:
            return Action.DOUBLE if up in (3, 4, 5, 6) else Action.HIT
        if total == 10:
            return Action.DOUBLE if up <= 9 else Action.HIT
        if total == 11:
            return Action.DOUBLE if up <= 10 else Action.HIT
        if total == 12:
            return Action.STAND if up in (4, 5, 6) else Action.HIT
        if 13 <= total <= 16:
            return Action.STAND if up <= 6 else Action.HIT
        return Action.STAND

    def _pair_decision(self, obs: Observation) -> Action | None:
        pair = obs.hand.cards[0]
        up = self._dealer_up(obs)

        if pair in ("A", "8"):
            return Action.SPLIT
        if pair in ("10", "J", "Q", "K", "5"):
            return None  # play as a hard total
        if pair == "9":
            return Action.STAND if up in (7, 10, 11) else Action.SPLIT
        if pair in ("2", "3", "7"):
            return Action.SPLIT if up <= 7 else None
        if pair == "6":
            return Action.SPLIT if up <= 6 else None
        if pair == "4":
            return Action.SPLIT if up in (5, 6) else None
        return None
