from __future__ import annotations

import random
from decimal import Decimal
from typing import Any

from ..money import to_money
from ..types import Action, Observation


class RandomSeat:
    """Bets a random whole amount up to ``max_bet`` and picks uniformly among allowed actions."""

    def __init__(self, seed: int = 0, max_bet: int = 100):
        self.rng = random.Random(seed)
        self.max_bet = max_bet

    def bet(self, observation: Observation, info: Any) -> Decimal:
        bankroll = to_money(observation.bankroll)
        ceiling = int(min(bankroll, self.max_bet))
        if ceiling < 1:
            return bankroll
        return Decimal(self.rng.randint(1, ceiling))

    def act(self, observation: Observation, info: Any) -> Action:
        return self.rng.choice(observation.allowed_actions)

    def double_amount(self, observation: Observation, info: Any) -> Decimal:
        return min(to_money(observation.hand.bet), to_money(observation.bankroll))
