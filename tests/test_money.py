from decimal import Decimal

from blackjack_table.money import as_money, format_money, parse_money, to_money


def test_to_money_uses_bankers_rounding():
    assert to_money("2.345") == Decimal("2.34")
    assert to_money("2.355") == Decimal("2.36")
    assert to_money(3) == Decimal("3.00")


def test_to_money_accepts_float_without_binary_noise():
    assert to_money(0.1) == Decimal("0.10")


def test_parse_money():
    assert parse_money(" 25 ") == Decimal("25.00")
    assert parse_money("7.5") == Decimal("7.50")
    assert parse_money("abc") is None
    assert parse_money("") is None
    assert parse_money("nan") is None
    assert parse_money("inf") is None


def test_format_money():
    assert format_money(Decimal("1150.00")) == "1150"
    assert format_money(Decimal("7.5")) == "7.50"
    assert format_money(0) == "0"


def test_as_money_rejects_non_amounts():
    assert as_money("12.5") == Decimal("12.50")
    assert as_money(None) is None
    assert as_money(True) is None
    assert as_money("twelve") is None
    assert as_money("NaN") is None
    assert as_money("Infinity") is None
    assert as_money([1]) is None


def test_parse_money_rejects_amounts_too_large_for_cents():
    assert parse_money("1e30") is None
    assert parse_money("9" * 29) is None
    assert parse_money("1e20") == Decimal("100000000000000000000.00")
