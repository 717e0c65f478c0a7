"""Helper functions for CLI operations."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .constants import JSONL_EXTENSION
from .money import format_money, parse_money


def _hands_block(position: Any, hands: List[Dict[str, Any]]) -> str:
    lines = [f"--- Player {position} --- "]
    lines.extend(h["line"] for h in hands)
    return "\n".join(lines)


def format_event(event: Dict[str, Any]) -> Optional[str]:
    """Render a table event as console text; ``None`` for events with nothing to show."""
    kind = event.get("event")
    pos = event.get("position")
    if kind == "round_start":
        return "\n***Get ready for a new round***\n"
    if kind == "bet_rejected":
        return "Please enter a valid bet"
    if kind == "blackjack":
        return f"{_hands_block(pos, [event['hand']])}\nPlayer {pos} has a blackjack. You win 3:2!"
    if kind == "hands":
        block = _hands_block(pos, event["hands"])
        if event.get("dealer_upcard"):
            block = f"Dealer shows {event['dealer_upcard']}\n{block}"
        return block
    if kind == "card":
        return f"New card received - {event['card']}"
    if kind == "bust":
        return f"Player {pos} busts!"
    if kind == "double":
        return f"New card received - {event['card']}\n{_hands_block(pos, [event['hand']])}"
    if kind == "action_rejected":
        reason = event.get("reason")
        if reason == "no_money":
            return "You don't have money to double down!"
        if reason == "split_not_allowed":
            return "Split is not possible! Check cards and/or money available"
        if reason == "invalid_amount":
            return "Please enter a valid bet"
        return "Please enter a valid option."
    if kind == "dealer_reveal":
        return f"\n**** Everyone in this round has completed playing ****\nDealer original cards are {','.join(event['cards'])}"
    if kind == "dealer_blackjack":
        return "Dealer has a blackjack!"
    if kind == "dealer_hit":
        return f"Dealer hits\nDealer current cards are {','.join(event['cards'])}"
    if kind == "dealer_final":
        return f"Dealer final hand value = {event['value']}"
    if kind == "settle":
        outcome = event.get("outcome")
        if outcome == "win":
            return f"Player {pos} wins against the dealer"
        if outcome == "lose":
            return f"Player {pos} loses to the dealer"
        return f"Player {pos} gets a push"
    if kind == "player_removed":
        return f"**** Player {pos} has run out of money and hence being removed from the table. ****"
    if kind == "table_empty":
        return "**** All players on the table are out of money. ****"
    if kind == "shoe_reshuffled":
        return f"**** The shoe ran out and was reshuffled ({event.get('cards')} cards). ****"
    if kind == "shoe_exhausted":
        return "**** The shoe ran out of cards. The game cannot continue. ****"
    if kind == "game_end":
        return "The game has finished. Thanks for playing!"
    return None


def setup_logging(args) -> Tuple[str, Any]:
    """Set up the JSONL event log file and handle."""
    log_file = getattr(args, "log_jsonl", None)
    if not log_file:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        Path("logs").mkdir(parents=True, exist_ok=True)
        log_file = str(Path("logs") / f"{ts}_{args.cmd}{JSONL_EXTENSION}")
    log_fh = open(log_file, "a", encoding="utf-8")
    return log_file, log_fh


def create_event_emitter(
    echo: bool,
    log_fh: Optional[Any],
    print_fn: Callable[[str], None] = print,
) -> Callable[[Dict[str, Any]], None]:
    """Create an event sink that prints human text and appends JSONL records."""

    def emit(event: dict) -> None:
        if echo:
            text = format_event(event)
            if text is not None:
                print_fn(text)
        if log_fh:
            record = dict(event)
            record["timestamp"] = datetime.now().isoformat()
            log_fh.write(json.dumps(record) + "\n")
            log_fh.flush()

    return emit


def ask_player_count(input_fn: Callable[[str], str] = input, print_fn: Callable[[str], None] = print) -> int:
    """Ask until a positive whole number of players is entered."""
    print_fn("Please enter the number of players")
    while True:
        text = input_fn("")
        try:
            value = int(text.strip())
        except ValueError:
            value = 0
        if value > 0:
            return value
        print_fn("Please enter a valid number")


def ask_continue(input_fn: Callable[[str], str] = input, print_fn: Callable[[str], None] = print) -> bool:
    """Return False when the user types ``quit``."""
    text = input_fn("\nEnter quit to end the game. Press enter to play next round : ")
    if text.strip() == "quit":
        print_fn("\nExiting the game\n")
        return False
    return True


def format_bankrolls(players) -> Dict[str, str]:
    return {str(p.position): format_money(p.bankroll) for p in players}


def parse_initial_money(text: str):
    amount = parse_money(text)
    if amount is None or amount <= 0:
        raise ValueError(f"Initial money must be a positive amount, got {text!r}")
    return amount
