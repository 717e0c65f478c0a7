from .cards import Shoe, ShoeExhaustedError
from .hand import Hand, HandStatus
from .player import HandResult, Player
from .rules import Rules
from .table import BlackjackTable, RoundSummary
from .types import Action, HandView, Observation, Outcome

__all__ = [
    "BlackjackTable",
    "RoundSummary",
    "Player",
    "HandResult",
    "Hand",
    "HandStatus",
    "Shoe",
    "ShoeExhaustedError",
    "Rules",
    "Action",
    "Outcome",
    "Observation",
    "HandView",
]
