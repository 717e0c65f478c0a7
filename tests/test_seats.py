from decimal import Decimal

import pytest

from blackjack_table.seats import BasicStrategySeat, ConsoleSeat, RandomSeat, ScriptedSeat, parse_action
from blackjack_table.types import Action, HandView, Observation


def obs(cards, total, up, *, soft=False, bet="10", bankroll="990", allowed=None):
    can_split = len(cards) == 2 and cards[0] == cards[1]
    if allowed is None:
        allowed = [Action.HIT, Action.STAND, Action.DOUBLE] + ([Action.SPLIT] if can_split else [])
    return Observation(
        position=0,
        bankroll=bankroll,
        round_number=1,
        hand=HandView(cards=cards, total=total, is_soft=soft, bet=bet, can_split=can_split, can_double=Action.DOUBLE in allowed),
        hand_index=0,
        num_hands=1,
        dealer_upcard=up,
        allowed_actions=allowed,
    )


@pytest.mark.parametrize("text,action", [
    ("hit", Action.HIT),
    (" stand\n", Action.STAND),
    ("DOUBLE", Action.DOUBLE),
    ("split", Action.SPLIT),
    ("surrender", None),
    ("", None),
])
def test_parse_action(text, action):
    assert parse_action(text) is action


def test_console_seat_decodes_answers():
    answers = iter(["25", "stand", "abc", "hold"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(answers)

    seat = ConsoleSeat(input_fn=fake_input)
    view = obs(["10", "6"], 16, "9")
    assert seat.bet(view, {}) == Decimal("25.00")
    assert seat.act(view, {}) is Action.STAND
    assert seat.double_amount(view, {}) is None
    assert seat.act(view, {}) is None
    assert prompts[0].startswith("Player 0. You have money = 990.")


def test_basic_hard_totals():
    seat = BasicStrategySeat()
    assert seat.act(obs(["10", "6"], 16, "10"), {}) is Action.HIT
    assert seat.act(obs(["10", "6"], 16, "6"), {}) is Action.STAND
    assert seat.act(obs(["10", "2"], 12, "4"), {}) is Action.STAND
    assert seat.act(obs(["10", "8"], 18, "A"), {}) is Action.STAND


def test_basic_doubles_only_when_it_can():
    seat = BasicStrategySeat()
    assert seat.act(obs(["5", "6"], 11, "6"), {}) is Action.DOUBLE
    assert seat.act(obs(["5", "6"], 11, "6", bankroll="5"), {}) is Action.HIT
    assert seat.act(obs(["2", "3", "6"], 11, "6"), {}) is Action.HIT
    assert seat.act(obs(["5", "6"], 11, "6", allowed=[Action.HIT, Action.STAND]), {}) is Action.HIT


def test_basic_soft_totals():
    seat = BasicStrategySeat()
    assert seat.act(obs(["A", "7"], 18, "9", soft=True), {}) is Action.HIT
    assert seat.act(obs(["A", "7"], 18, "8", soft=True), {}) is Action.STAND
    assert seat.act(obs(["A", "7"], 18, "5", soft=True), {}) is Action.DOUBLE
    assert seat.act(obs(["A", "2", "5"], 18, "5", soft=True), {}) is Action.STAND


def test_basic_pairs():
    seat = BasicStrategySeat()
    assert seat.act(obs(["8", "8"], 16, "10"), {}) is Action.SPLIT
    assert seat.act(obs(["A", "A"], 12, "6", soft=True), {}) is Action.SPLIT
    assert seat.act(obs(["K", "K"], 20, "6"), {}) is Action.STAND
    assert seat.act(obs(["9", "9"], 18, "7"), {}) is Action.STAND
    assert seat.act(obs(["9", "9"], 18, "6"), {}) is Action.SPLIT


def test_basic_bets_flat_or_what_is_left():
    seat = BasicStrategySeat(unit=25)
    assert seat.bet(Observation(position=0, bankroll="1000", round_number=1), {}) == Decimal("25.00")
    assert seat.bet(Observation(position=0, bankroll="7.50", round_number=1), {}) == Decimal("7.50")


def test_random_seat_stays_legal():
    seat = RandomSeat(seed=4, max_bet=50)
    view = obs(["10", "6"], 16, "9", allowed=[Action.HIT, Action.STAND])
    for _ in range(20):
        assert seat.act(view, {}) in (Action.HIT, Action.STAND)
        assert 1 <= seat.bet(view, {}) <= 50
    assert seat.double_amount(view, {}) == Decimal("10.00")


def test_random_seat_bets_fractional_remainder():
    seat = RandomSeat(seed=0)
    assert seat.bet(Observation(position=0, bankroll="0.50", round_number=1), {}) == Decimal("0.50")


def test_scripted_seat_runs_out():
    seat = ScriptedSeat(actions=[Action.HIT])
    view = obs(["10", "6"], 16, "9")
    assert seat.act(view, {}) is Action.HIT
    with pytest.raises(IndexError):
        seat.act(view, {})
    assert len(seat.seen) == 2
