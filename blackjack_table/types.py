from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class Action(Enum):
    HIT = auto()
    STAND = auto()
    DOUBLE = auto()
    SPLIT = auto()


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    BLACKJACK = "blackjack"
    BUST = "bust"


@dataclass
class HandView:
    cards: List[str]
    total: int
    is_soft: bool
    bet: str
    can_split: bool
    can_double: bool


@dataclass
class Observation:
    position: int
    bankroll: str
    round_number: int
    hand: Optional[HandView] = None
    hand_index: int = 0
    num_hands: int = 0
    dealer_upcard: Optional[str] = None
    allowed_actions: List[Action] = field(default_factory=list)
