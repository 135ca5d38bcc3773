import json
import math

import pytest

from sevens.simulation import (
    CONFIGURATIONS,
    SEVENS_COMBINATIONS,
    SPADES_COMBINATIONS,
    analyze_game_statistics,
    format_game_statistics,
    run_simulations_sevens,
    run_simulations_spades,
    save_performance_data,
)
from sevens.stats import StrategyPerformanceData


def _record(suit_count, avg=2.0, adv=0.0, diff=0.0, variance=0.0, n_size=13):
    return StrategyPerformanceData(
        suit_count=suit_count,
        n_size=n_size,
        deck_size=suit_count * n_size,
        strategy_win_rates={"A0": 0.25, "A1": 0.25, "A2": 0.25, "A3": 0.25},
        win_rate_variance=variance,
        max_win_rate_diff=diff,
        avg_options_per_turn=avg,
        strategy_advantage_factor=adv,
        total_avg_options=0.0,
        min_options=1,
        max_options=4,
        total_min_options=0.0,
        total_max_options=0.0,
    )


def test_results_follow_configuration_grid_order(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    results = run_simulations_sevens(4, 0)
    per_config = len(SEVENS_COMBINATIONS)
    assert per_config == 14
    assert len(CONFIGURATIONS) == 30
    pairs = [(r.suit_count, r.n_size) for r in results]
    assert pairs[0] == (4, 13)
    assert pairs[4 * per_config] == (4, 111)
    assert pairs[-1] == (64, 111)
    assert pairs[::per_config] == list(CONFIGURATIONS)
    assert len(SPADES_COMBINATIONS) == 35


def test_run_sevens_without_games(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    results = run_simulations_sevens(4, 0)
    out = capsys.readouterr().out
    assert len(results) == len(CONFIGURATIONS) * len(SEVENS_COMBINATIONS)
    assert "Testing 14 different strategy combinations" in out
    assert "=== GAME STATISTICS ANALYSIS (sevens) ===" in out
    saved = json.loads((tmp_path / "sevens_strategy_performance_data.json").read_text())
    assert len(saved) == len(results)
    assert all(item["deck_size"] == item["suit_count"] * item["n_size"] for item in saved)
    assert set(saved[0]["strategy_win_rates"]) == {"A0", "A1", "A2", "A3"}
    assert saved[0]["win_rate_variance"] is None


def test_run_spades_labels_strategies(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    results = run_simulations_spades(4, 0)
    out = capsys.readouterr().out
    assert "Testing 35 different strategy combinations" in out
    assert list(results[-1].strategy_win_rates) == ["A0", "B1", "C2", "D3"]
    assert (tmp_path / "spades_strategy_performance_data.json").exists()


def test_wrong_player_count_rejected(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError):
        run_simulations_sevens(3, 0)


def test_save_round_trip_and_nan_as_null(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    records = [_record(4, adv=1.0), _record(8, variance=math.nan)]
    path = save_performance_data(records, "demo")
    assert path.name == "demo_strategy_performance_data.json"
    loaded = json.loads(path.read_text())
    assert loaded[1]["win_rate_variance"] is None
    assert StrategyPerformanceData.from_dict(loaded[0]) == records[0]
    assert "demo_strategy_performance_data.json" in capsys.readouterr().out


def test_report_table_has_row_per_suit_count_sorted():
    records = [_record(8, avg=3.0), _record(4, avg=2.0), _record(4, avg=2.0)]
    text = format_game_statistics(records, "x")
    rows = [line for line in text.splitlines() if line.startswith("| ") and "Suits" not in line]
    assert len(rows) == 2
    assert rows[0].split("|")[1].strip() == "4"
    assert rows[1].split("|")[1].strip() == "8"
    assert "Total strategy configurations tested: 3" in text


def test_report_trends_and_differentiation():
    records = [_record(4, avg=2.0, adv=2.0), _record(8, avg=3.0, adv=2.0)]
    text = format_game_statistics(records, "x")
    assert "Complexity increases with more suits (+1)" in text
    assert "Strategy importance remains stable across suit counts" in text
    assert "High strategy differentiation" in text
    assert "Simplest configuration: 4 suits (2.00 avg options/turn)" in text
    assert "Most complex configuration: 8 suits (3.00 avg options/turn)" in text


def test_report_low_differentiation_and_impact_warning():
    records = [_record(4, avg=3.0, adv=0.1, diff=0.5), _record(8, avg=2.0, adv=0.0, diff=0.5)]
    text = format_game_statistics(records, "x")
    assert "Low strategy differentiation - mostly luck-based" in text
    assert "Complexity decreases with more suits (-1)" in text
    assert "High strategy impact detected" in text


def test_report_on_empty_data():
    text = format_game_statistics([], "empty")
    assert "=== GAME STATISTICS ANALYSIS (empty) ===" in text
    assert "GAME COMPLEXITY ANALYSIS" not in text
    assert "Total games simulated: 0" in text
    assert text.rstrip().endswith("=" * 70)


def test_analyze_prints_the_report(capsys):
    records = [_record(4)]
    analyze_game_statistics(records, "y")
    assert capsys.readouterr().out == format_game_statistics(records, "y")