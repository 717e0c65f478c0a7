"""Exact money arithmetic.

Bankrolls, bets and credits are ``Decimal`` values held to the cent. Every
product is rounded with banker's rounding so a 3:2 payout on an odd bet gives
the same result everywhere.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Optional, Union

CENT = Decimal("0.01")

Amount = Union[Decimal, int, str]


def to_money(value: Amount) -> Decimal:
    """Convert ``value`` to a Decimal rounded to the cent."""
    if isinstance(value, float):
        # go through str so 0.1 stays 0.1
        value = str(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_EVEN)


def parse_money(text: str) -> Optional[Decimal]:
    """Parse user text into an amount; ``None`` when it is not a finite number.

    Numbers too large to hold to the cent are ``None`` as well.
    """
    try:
        amount = Decimal(text.strip())
        if not amount.is_finite():
            return None
        return to_money(amount)
    except (InvalidOperation, AttributeError):
        return None


def format_money(value: Amount) -> str:
    amount = to_money(value)
    if amount == amount.to_integral_value():
        return str(amount.quantize(Decimal(1)))
    return str(amount)


def as_money(value) -> Optional[Decimal]:
    """Like :func:`to_money`, but ``None`` for anything that is not a finite amount."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = to_money(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return amount if amount.is_finite() else None
