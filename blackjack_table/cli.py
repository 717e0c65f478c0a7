from __future__ import annotations

import argparse
import json
from decimal import Decimal

from .cli_helpers import (
    ask_continue,
    ask_player_count,
    create_event_emitter,
    format_bankrolls,
    parse_initial_money,
    setup_logging,
)
from .constants import (
    AVAILABLE_SEATS,
    DEFAULT_INITIAL_MONEY,
    DEFAULT_NUM_DECKS,
    DEFAULT_NUM_SHUFFLES,
    DEFAULT_PLAYERS,
    DEFAULT_ROUNDS,
    DEFAULT_SEAT,
    DEFAULT_SEED,
    DEFAULT_SHOE_POLICY,
    DEFAULT_UNIT_BET,
    SHOE_POLICIES,
)
from .rules import Rules
from .seats.console import ConsoleSeat
from .simulate import run_simulation
from .table import BlackjackTable


def build_rules(args: argparse.Namespace) -> Rules:
    rules = Rules(
        num_decks=args.decks,
        num_shuffles=args.shuffles,
        initial_money=args.money,
        hit_soft_17=args.hit_soft_17,
        shoe_policy=args.shoe_policy,
    )
    rules.validate()
    return rules


def _open_log(args: argparse.Namespace):
    if not (getattr(args, "log_jsonl", None) or getattr(args, "log", False)):
        return None, None
    return setup_logging(args)


def cmd_play(args: argparse.Namespace) -> None:
    rules = build_rules(args)
    log_file, log_fh = _open_log(args)
    emit = create_event_emitter(echo=True, log_fh=log_fh)
    table = BlackjackTable(rules=rules, seed=args.seed, log_fn=emit)
    try:
        count = args.players if args.players else ask_player_count()
        for _ in range(count):
            table.add_player(ConsoleSeat())
        table.run(should_continue=ask_continue)
        if table.players:
            print(json.dumps(format_bankrolls(table.players), indent=2))
    except (KeyboardInterrupt, EOFError):
        print("\nExiting the game\n")
        emit({"event": "game_end", "round": table.round_number, "interrupted": True})
    finally:
        if log_fh:
            log_fh.close()
            print(f"event log written to {log_file}")


def cmd_simulate(args: argparse.Namespace) -> None:
    rules = build_rules(args)
    log_file, log_fh = _open_log(args)
    emit = create_event_emitter(echo=args.debug, log_fh=log_fh) if (args.debug or log_fh) else None
    try:
        result = run_simulation(
            seat=args.seat,
            players=args.players,
            rounds=args.rounds,
            seed=args.seed,
            rules=rules,
            unit=args.unit,
            log_fn=emit,
        )
    finally:
        if log_fh:
            log_fh.close()
    if args.report:
        with open(args.report, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2)
    print(json.dumps(result["metrics"], indent=2))
    if log_file:
        print(f"event log written to {log_file}")


def _add_rules_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--decks", type=int, default=DEFAULT_NUM_DECKS, help="Decks in the shoe")
    p.add_argument("--shuffles", type=int, default=DEFAULT_NUM_SHUFFLES, help="Shuffle passes when the shoe is built")
    p.add_argument("--money", type=parse_initial_money, default=Decimal(DEFAULT_INITIAL_MONEY), help="Starting bankroll per player")
    p.add_argument("--hit-soft-17", action="store_true", help="Dealer hits soft 17 (default: stands on all 17s)")
    p.add_argument("--shoe-policy", choices=sorted(SHOE_POLICIES), default=DEFAULT_SHOE_POLICY, help="What to do when the shoe runs out")
    p.add_argument("--seed", type=int, default=None, help="Seed for the shoe shuffle")
    p.add_argument("--log-jsonl", type=str, default=None, help="Append table events as JSONL to this file")
    p.add_argument("--log", action="store_true", help="Append table events to a timestamped JSONL file under logs/")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="blackjack_table", description="Multi-player blackjack table")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_play = sub.add_parser("play", help="Play at the terminal")
    p_play.add_argument("--players", type=int, default=None, help="Number of players (asked when omitted)")
    _add_rules_arguments(p_play)
    p_play.set_defaults(func=cmd_play)

    p_sim = sub.add_parser("simulate", help="Play many rounds with automated seats")
    p_sim.add_argument("--seat", choices=sorted(AVAILABLE_SEATS), default=DEFAULT_SEAT)
    p_sim.add_argument("--players", type=int, default=DEFAULT_PLAYERS)
    p_sim.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    p_sim.add_argument("--unit", type=int, default=DEFAULT_UNIT_BET, help="Flat bet (basic) or maximum bet (random)")
    p_sim.add_argument("--report", type=str, default=None, help="Write the full JSON report to this file")
    p_sim.add_argument("--debug", action="store_true", help="Print every table event to stdout")
    _add_rules_arguments(p_sim)
    p_sim.set_defaults(func=cmd_simulate, seed=DEFAULT_SEED)

    args = parser.parse_args(argv)
    if args.func is cmd_play and args.players is not None and args.players < 1:
        parser.error("--players must be positive")
    args.func(args)


if __name__ == "__main__":
    main()
