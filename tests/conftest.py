import pytest

from blackjack_table.rules import Rules
from blackjack_table.table import BlackjackTable


@pytest.fixture
def events():
    return []


@pytest.fixture
def table(events):
    return BlackjackTable(rules=Rules(), seed=7, log_fn=events.append)
