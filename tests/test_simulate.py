import pytest

from blackjack_table.rules import Rules
from blackjack_table.simulate import build_seat, run_simulation


def test_simulation_report_shape():
    result = run_simulation(seat="basic", players=2, rounds=40, seed=42)
    metrics = result["metrics"]
    assert result["track"] == "simulation"
    assert metrics["players"] == 2
    assert 1 <= metrics["rounds"] <= 40
    assert metrics["hands"] >= metrics["rounds"]
    assert metrics["wins"] + metrics["losses"] + metrics["pushes"] + metrics["blackjacks"] + metrics["busts"] == metrics["hands"]
    assert [p["position"] for p in result["players"]] == [0, 1]
    assert result["samples"] == len(result["trace_preview"]) <= 10


def test_simulation_is_reproducible():
    a = run_simulation(seat="random", players=3, rounds=30, seed=9)
    b = run_simulation(seat="random", players=3, rounds=30, seed=9)
    assert a == b


def test_simulation_stops_when_everyone_is_broke():
    rules = Rules(initial_money=20)
    result = run_simulation(seat="random", players=1, rounds=10000, seed=1, rules=rules, unit=20)
    assert result["metrics"]["rounds"] < 10000
    assert result["metrics"]["players_removed"] == 1
    assert result["players"][0]["seated"] is False


def test_simulation_forwards_events():
    events = []
    run_simulation(seat="basic", players=1, rounds=3, seed=5, log_fn=events.append)
    assert [e["event"] for e in events].count("round_start") == 3


def test_unknown_seat():
    with pytest.raises(ValueError):
        build_seat("psychic")


def test_players_must_be_positive():
    with pytest.raises(ValueError):
        run_simulation(players=0)
