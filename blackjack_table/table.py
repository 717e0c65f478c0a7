from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .cards import Shoe, ShoeExhaustedError
from .hand import Hand
from .money import format_money, to_money
from .player import HandResult, Player
from .rules import Rules
from .types import Action, HandView, Observation, Outcome

LogFn = Callable[[Dict[str, Any]], None]


@dataclass
class RoundSummary:
    round_number: int
    dealer: List[str] = field(default_factory=list)
    dealer_value: int = 0
    dealer_blackjack: bool = False
    results: Dict[int, List[HandResult]] = field(default_factory=dict)
    blackjacks: Dict[int, str] = field(default_factory=dict)
    removed: List[int] = field(default_factory=list)

    def outcome_counts(self) -> Counter:
        counts: Counter = Counter()
        counts["blackjack"] += len(self.blackjacks)
        for results in self.results.values():
            for r in results:
                counts[r.outcome.value] += 1
        return counts


class BlackjackTable:
    """One table: the shoe, the seated players and the dealer's hand.

    Seats are duck-typed decision makers with ``bet``, ``act`` and
    ``double_amount`` methods, each called as ``method(observation, info)``.
    An answer that fails the legality check is reported and asked again.
    """

    def __init__(self, rules: Optional[Rules] = None, seed: Optional[int] = None, log_fn: Optional[LogFn] = None):
        self.rules = rules or Rules()
        self.rules.validate()
        self.shoe = Shoe(self.rules.num_decks, self.rules.num_shuffles, seed=seed, policy=self.rules.shoe_policy)
        self.players: List[Player] = []
        self.seats: Dict[int, Any] = {}
        self.dealer_hand: Optional[Hand] = None
        self.can_continue = True
        self.round_number = 0
        self.log_fn = log_fn

    # --- setup ---
    def add_player(self, seat: Any, money=None) -> Player:
        position = len(self.seats)
        player = Player(
            money if money is not None else self.rules.initial_money,
            position,
            blackjack_payout=self.rules.blackjack_payout,
            max_hands=self.rules.max_hands,
        )
        self.players.append(player)
        self.seats[position] = seat
        return player

    def _emit(self, event: str, **payload: Any) -> None:
        if self.log_fn is not None:
            payload["event"] = event
            payload.setdefault("round", self.round_number)
            self.log_fn(payload)

    def _draw(self) -> str:
        before = self.shoe.reshuffles
        card = self.shoe.draw()
        if self.shoe.reshuffles != before:
            self._emit("shoe_reshuffled", cards=self.shoe.size(), reshuffles=self.shoe.reshuffles)
        return card

    # --- game loop ---
    def run(self, should_continue: Optional[Callable[[], bool]] = None, max_rounds: Optional[int] = None) -> int:
        """Play rounds until the table empties, ``should_continue`` says stop, or ``max_rounds`` is reached."""
        played = 0
        while self.can_continue and self.players:
            self.play_round()
            played += 1
            if not self.can_continue:
                break
            if max_rounds is not None and played >= max_rounds:
                break
            if should_continue is not None and not should_continue():
                self.can_continue = False
        self._emit("game_end", rounds=played)
        return played

    def play_round(self) -> RoundSummary:
        """Play one full round.

        With the ``"error"`` shoe policy an empty shoe raises
        :class:`ShoeExhaustedError` mid-round. Stakes already taken stay
        on the table and ``can_continue`` is set to False, so ``run`` plays
        no further rounds.
        """
        if not self.can_continue:
            raise RuntimeError("The table has stopped; no further rounds can be played")
        self.round_number += 1
        summary = RoundSummary(round_number=self.round_number)
        self._emit("round_start", players=[p.position for p in self.players])
        try:
            self._deal(summary)
            for player in self.players:
                self._play_player(player)
            self._dealer_play()
        except ShoeExhaustedError:
            self.can_continue = False
            self._emit("shoe_exhausted", cards_remaining=self.shoe.remaining())
            raise
        self._settle(summary)
        self._clean_up(summary)
        return summary

    def _deal(self, summary: RoundSummary) -> None:
        self.dealer_hand = None
        for player in self.players:
            player.clear()
        for player in self.players:
            amount = self._request_bet(player)
            cards = [self._draw(), self._draw()]
            credit = player.start_round(cards, amount)
            if credit is not None:
                summary.blackjacks[player.position] = format_money(credit)
                self._emit(
                    "blackjack",
                    position=player.position,
                    hand=player.hands[0].to_dict(),
                    credit=format_money(credit),
                    bankroll=format_money(player.bankroll),
                )
        self.dealer_hand = Hand(cards=[self._draw(), self._draw()])

    def _request_bet(self, player: Player):
        seat = self.seats[player.position]
        while True:
            amount = seat.bet(self._observation(player), {})
            if player.can_bet(amount):
                return to_money(amount)
            self._emit("bet_rejected", position=player.position, amount=_jsonable(amount), bankroll=format_money(player.bankroll))

    def _request_double_amount(self, player: Player):
        seat = self.seats[player.position]
        while True:
            amount = seat.double_amount(self._observation(player), {})
            if player.can_double_down(amount):
                return to_money(amount)
            self._emit("action_rejected", position=player.position, action=Action.DOUBLE.name, reason="invalid_amount", amount=_jsonable(amount))

    def _play_player(self, player: Player) -> None:
        seat = self.seats[player.position]
        while player.has_unplayed_hands():
            index = player.cursor
            self._emit(
                "hands",
                position=player.position,
                hands=[h.to_dict() for h in player.hands],
                active=index,
                dealer_upcard=self.dealer_hand.cards[0],
                bankroll=format_money(player.bankroll),
            )
            action = seat.act(self._observation(player), {})
            if not isinstance(action, Action):
                self._emit("action_rejected", position=player.position, action=None, reason="unrecognized")
                continue
            if action == Action.HIT:
                self._emit("action", position=player.position, hand_index=index, action=action.name)
                card = self._draw()
                busted = player.hit(card)
                self._emit("card", position=player.position, hand_index=index, card=card)
                if busted:
                    self._emit("bust", position=player.position, hand_index=index, hand=player.hands[index].to_dict())
            elif action == Action.STAND:
                self._emit("action", position=player.position, hand_index=index, action=action.name)
                player.stand()
            elif action == Action.DOUBLE:
                if not player.can_double():
                    self._emit("action_rejected", position=player.position, action=action.name, reason="no_money")
                    continue
                amount = self._request_double_amount(player)
                self._emit("action", position=player.position, hand_index=index, action=action.name)
                card = self._draw()
                busted = player.double_down(amount, card)
                hand = player.hands[index]
                self._emit("double", position=player.position, hand_index=index, amount=format_money(amount), card=card, hand=hand.to_dict())
                if busted:
                    self._emit("bust", position=player.position, hand_index=index, hand=hand.to_dict())
            elif action == Action.SPLIT:
                if not player.can_split():
                    self._emit("action_rejected", position=player.position, action=action.name, reason="split_not_allowed")
                    continue
                self._emit("action", position=player.position, hand_index=index, action=action.name)
                children = player.split([self._draw(), self._draw()])
                self._emit("split", position=player.position, hand_index=index, hands=[h.to_dict() for h in children])

    def _dealer_play(self) -> None:
        dealer = self.dealer_hand
        self._emit("dealer_reveal", cards=list(dealer.cards), value=dealer.value())
        if dealer.is_blackjack():
            self._emit("dealer_blackjack", cards=list(dealer.cards))
            return
        while self._dealer_should_hit(dealer):
            card = self._draw()
            dealer.add_card(card)
            self._emit("dealer_hit", card=card, cards=list(dealer.cards), value=dealer.value())

    def _dealer_should_hit(self, dealer: Hand) -> bool:
        total = dealer.value()
        if total < self.rules.dealer_stands_on:
            return True
        return self.rules.hit_soft_17 and total == self.rules.dealer_stands_on and dealer.is_soft()

    def _settle(self, summary: RoundSummary) -> None:
        dealer = self.dealer_hand
        summary.dealer = list(dealer.cards)
        summary.dealer_value = dealer.value()
        summary.dealer_blackjack = dealer.is_blackjack()
        self._emit("dealer_final", cards=summary.dealer, value=summary.dealer_value, blackjack=summary.dealer_blackjack)
        for player in self.players:
            results = player.settle_round(summary.dealer_value, summary.dealer_blackjack)
            summary.results[player.position] = results
            for r in results:
                if r.outcome is Outcome.BUST:
                    continue
                self._emit(
                    "settle",
                    position=player.position,
                    hand_index=r.hand_index,
                    outcome=r.outcome.value,
                    value=r.value,
                    credit=format_money(r.credit),
                    bankroll=format_money(player.bankroll),
                )

    def _clean_up(self, summary: RoundSummary) -> None:
        for player in self.players:
            if player.out_of_money():
                summary.removed.append(player.position)
                self._emit("player_removed", position=player.position)
        self.players = [p for p in self.players if not p.out_of_money()]
        if not self.players:
            self._emit("table_empty")
            self.can_continue = False

    def _observation(self, player: Player) -> Observation:
        obs = Observation(
            position=player.position,
            bankroll=format_money(player.bankroll),
            round_number=self.round_number,
            num_hands=len(player.hands),
        )
        if self.dealer_hand is not None and self.dealer_hand.cards:
            obs.dealer_upcard = self.dealer_hand.cards[0]
        if not player.has_unplayed_hands():
            return obs
        hand = player.current_hand
        allowed = [Action.HIT, Action.STAND]
        can_double = player.can_double()
        can_split = player.can_split()
        if can_double:
            allowed.append(Action.DOUBLE)
        if can_split:
            allowed.append(Action.SPLIT)
        obs.hand = HandView(
            cards=list(hand.cards),
            total=hand.value(),
            is_soft=hand.is_soft(),
            bet=format_money(hand.bet),
            can_split=can_split,
            can_double=can_double,
        )
        obs.hand_index = player.cursor
        obs.allowed_actions = allowed
        return obs


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (int, str)):
        return value
    return str(value)
