from __future__ import annotations

from typing import Any, Callable, Optional

from ..money import format_money, parse_money
from ..types import Action, Observation

ACTION_WORDS = {
    "hit": Action.HIT,
    "stand": Action.STAND,
    "double": Action.DOUBLE,
    "split": Action.SPLIT,
}


def parse_action(text: str) -> Optional[Action]:
    """Decode one typed option; ``None`` when it is not one of the four action words."""
    return ACTION_WORDS.get(text.strip().lower())


class ConsoleSeat:
    """A human at the terminal.

    ``input_fn`` defaults to the builtin ``input`` and can be swapped for
    tests. Undecodable answers are returned as ``None`` so the table
    rejects them and asks again.
    """

    def __init__(self, input_fn: Callable[[str], str] = input):
        self.input_fn = input_fn

    def bet(self, observation: Observation, info: Any):
        text = self.input_fn(
            f"Player {observation.position}. You have money = {format_money(observation.bankroll)}. "
            "Please enter your bet for this round : "
        )
        return parse_money(text)

    def act(self, observation: Observation, info: Any) -> Optional[Action]:
        text = self.input_fn(f"Player {observation.position}, please enter your option - hit, stand, split or double : ")
        return parse_action(text)

    def double_amount(self, observation: Observation, info: Any):
        text = self.input_fn(f"Player {observation.position} : Please enter your additional bet : ")
        return parse_money(text)
