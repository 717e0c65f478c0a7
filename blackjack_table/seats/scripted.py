from __future__ import annotations

from collections import deque
from typing import Any, Iterable, List, Optional

from ..types import Action, Observation


class ScriptedSeat:
    """Replays queued answers in order.

    Each queue holds raw answers, so an invalid one (``None``, a negative
    bet, a disallowed action) can be scripted to exercise re-prompting.
    Running out of answers raises ``IndexError``.
    """

    def __init__(self, bets: Iterable[Any] = (), actions: Iterable[Optional[Action]] = (), doubles: Iterable[Any] = ()):
        self.bets = deque(bets)
        self.actions = deque(actions)
        self.doubles = deque(doubles)
        self.seen: List[Observation] = []

    def _next(self, queue: deque, what: str) -> Any:
        if not queue:
            raise IndexError(f"ScriptedSeat has no {what} left")
        return queue.popleft()

    def bet(self, observation: Observation, info: Any) -> Any:
        self.seen.append(observation)
        return self._next(self.bets, "bets")

    def act(self, observation: Observation, info: Any) -> Optional[Action]:
        self.seen.append(observation)
        return self._next(self.actions, "actions")

    def double_amount(self, observation: Observation, info: Any) -> Any:
        self.seen.append(observation)
        return self._next(self.doubles, "double amounts")
