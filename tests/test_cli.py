import json

import pytest

from blackjack_table.cli import main


def test_simulate_prints_metrics(capsys):
    main(["simulate", "--rounds", "5", "--players", "2", "--seed", "3"])
    metrics = json.loads(capsys.readouterr().out)
    assert metrics["players"] == 2
    assert metrics["rounds"] == 5


def test_simulate_writes_report_and_log(tmp_path, capsys):
    report = tmp_path / "report.json"
    log = tmp_path / "events.jsonl"
    main(["simulate", "--rounds", "3", "--report", str(report), "--log-jsonl", str(log)])
    out = capsys.readouterr().out
    assert f"event log written to {log}" in out
    assert json.loads(report.read_text(encoding="utf-8"))["track"] == "simulation"
    lines = log.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["event"] == "round_start"


def test_invalid_rules_exit(capsys):
    with pytest.raises(SystemExit):
        main(["simulate", "--money", "-5"])


def test_play_rejects_non_positive_players():
    with pytest.raises(SystemExit):
        main(["play", "--players", "0"])


def test_oversized_money_is_a_usage_error():
    with pytest.raises(SystemExit):
        main(["simulate", "--money", "1e30"])
