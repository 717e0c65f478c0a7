"""Constants and configuration defaults for blackjack_table."""

from __future__ import annotations

# Shoe
DEFAULT_NUM_DECKS = 8
DEFAULT_NUM_SHUFFLES = 8
SHOE_POLICIES = {"reshuffle", "error"}
DEFAULT_SHOE_POLICY = "reshuffle"

# Table
DEFAULT_INITIAL_MONEY = 1000
DEFAULT_MAX_HANDS = 4
DEALER_STANDS_ON = 17
BLACKJACK = 21

# Seats
AVAILABLE_SEATS = {"basic", "random"}
DEFAULT_SEAT = "basic"
DEFAULT_UNIT_BET = 10

# Default run parameters
DEFAULT_PLAYERS = 1
DEFAULT_ROUNDS = 1000
DEFAULT_SEED = 42

# File extensions
JSONL_EXTENSION = ".jsonl"
