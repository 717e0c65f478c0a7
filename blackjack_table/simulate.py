from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from .constants import DEFAULT_UNIT_BET
from .money import format_money, to_money
from .rules import Rules
from .seats.basic import BasicStrategySeat
from .seats.random_seat import RandomSeat
from .table import BlackjackTable


@dataclass
class SimulationMetrics:
    players: int
    rounds: int
    hands: int
    total_staked: str
    net_result: str
    net_per_round: str
    wins: int
    losses: int
    pushes: int
    blackjacks: int
    busts: int
    reshuffles: int
    players_removed: int


def build_seat(name: str, seed: Optional[int] = None, unit: Any = DEFAULT_UNIT_BET) -> Any:
    if name == "basic":
        return BasicStrategySeat(unit=unit)
    if name == "random":
        return RandomSeat(seed=seed or 0, max_bet=int(to_money(unit)) or 1)
    raise ValueError(f"Unknown seat: {name}")


def run_simulation(
    seat: str = "basic",
    players: int = 1,
    rounds: int = 1000,
    seed: Optional[int] = 42,
    rules: Optional[Rules] = None,
    *,
    unit: Any = DEFAULT_UNIT_BET,
    log_fn: Optional[Callable[[Dict], None]] = None,
) -> Dict:
    """Play up to ``rounds`` rounds with automated seats and report the results."""
    if players < 1:
        raise ValueError("players must be at least 1")
    table = BlackjackTable(rules=rules, seed=seed, log_fn=log_fn)
    seated = []
    for i in range(players):
        seat_seed = None if seed is None else seed + i
        seated.append(table.add_player(build_seat(seat, seed=seat_seed, unit=unit)))
    starting = {p.position: p.bankroll for p in seated}

    counts: Counter = Counter()
    staked = Decimal(0)
    hands = 0
    removed = 0
    played = 0
    traces: List[Dict] = []
    while played < rounds and table.players:
        active = {p.position for p in table.players}
        summary = table.play_round()
        played += 1
        counts.update(summary.outcome_counts())
        removed += len(summary.removed)
        for p in seated:
            if p.position not in active:
                continue
            staked += sum((h.bet for h in p.hands), Decimal(0))
            hands += len(p.hands)
        if len(traces) < 10:
            traces.append({
                "round": summary.round_number,
                "dealer": summary.dealer,
                "dealer_value": summary.dealer_value,
                "outcomes": dict(summary.outcome_counts()),
            })

    net = sum((p.bankroll - starting[p.position] for p in seated), Decimal(0))
    metrics = SimulationMetrics(
        players=players,
        rounds=played,
        hands=hands,
        total_staked=format_money(staked),
        net_result=format_money(net),
        net_per_round=format_money(net / played) if played else "0",
        wins=counts["win"],
        losses=counts["lose"],
        pushes=counts["push"],
        blackjacks=counts["blackjack"],
        busts=counts["bust"],
        reshuffles=table.shoe.reshuffles,
        players_removed=removed,
    )
    return {
        "track": "simulation",
        "seat": seat,
        "metrics": asdict(metrics),
        "players": [
            {
                "position": p.position,
                "start": format_money(starting[p.position]),
                "final": format_money(p.bankroll),
                "seated": p in table.players,
            }
            for p in seated
        ],
        "samples": len(traces),
        "trace_preview": traces,
    }
