from decimal import Decimal

import pytest

from blackjack_table.hand import Hand, HandStatus


@pytest.mark.parametrize("others", [["2"], ["3", "4"], ["9"], ["10"], ["2", "3", "5"]])
def test_single_ace_counts_eleven_when_rest_is_at_most_ten(others):
    s = sum(int(c) for c in others)
    assert Hand(cards=["A"] + others).value() == s + 11


@pytest.mark.parametrize("others", [["10", "5"], ["9", "2"], ["K", "Q"], ["6", "6", "6"]])
def test_single_ace_counts_one_when_rest_exceeds_ten(others):
    s = sum(10 if c in ("J", "Q", "K") else int(c) for c in others)
    assert Hand(cards=others + ["A"]).value() == s + 1


def test_two_aces_are_twelve():
    assert Hand(cards=["A", "A"]).value() == 12


def test_value_does_not_depend_on_card_order():
    assert Hand(cards=["A", "5", "A", "K"]).value() == Hand(cards=["K", "A", "A", "5"]).value() == 17


def test_soft_and_hard():
    assert Hand(cards=["A", "6"]).is_soft()
    assert not Hand(cards=["A", "6", "9"]).is_soft()
    assert not Hand(cards=["10", "7"]).is_soft()


def test_is_blackjack_requires_two_cards():
    assert Hand(cards=["A", "K"]).is_blackjack()
    assert Hand(cards=["10", "A"]).is_blackjack()
    assert not Hand(cards=["7", "7", "7"]).is_blackjack()
    assert not Hand(cards=["K", "Q"]).is_blackjack()


def test_is_bust():
    assert Hand(cards=["10", "10", "5"]).is_bust()
    assert Hand(cards=["10", "10", "5"]).value() == 25
    assert not Hand(cards=["10", "10", "A"]).is_bust()


@pytest.mark.parametrize("cards,expected", [
    (["K", "K"], True),
    (["8", "8"], True),
    (["A", "A"], True),
    (["10", "10"], True),
    (["K", "10"], False),
    (["J", "Q"], False),
    (["8", "8", "8"], False),
])
def test_can_be_split_needs_identical_rank(cards, expected):
    assert Hand(cards=cards).can_be_split() is expected


def test_bet_is_held_as_money():
    hand = Hand(cards=["5", "6"], bet=25)
    assert hand.bet == Decimal("25.00")


def test_finished_hand_takes_no_cards():
    hand = Hand(cards=["10", "8"], status=HandStatus.STOOD)
    with pytest.raises(RuntimeError):
        hand.add_card("2")


def test_describe():
    assert Hand(cards=["A", "7"], bet=50).describe() == (
        "Hand -> A,7. Hand value -> 18. Bet value -> 50. Status -> Active."
    )
    assert Hand(cards=["10", "9", "5"], bet=10).describe().endswith("Status -> Lost.")


def test_to_dict():
    d = Hand(cards=["A", "6"], bet=10).to_dict()
    assert d == {
        "cards": ["A", "6"],
        "value": 17,
        "is_soft": True,
        "bet": "10",
        "status": "unplayed",
        "from_split": False,
        "line": "Hand -> A,6. Hand value -> 17. Bet value -> 10. Status -> Active.",
    }
