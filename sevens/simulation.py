"""Batch simulations over many deck sizes and strategy line-ups, with a report."""

from __future__ import annotations

import json
import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .cards import GameRules, Strategy
from .game import play_game
from .spades import SevensSpades, SpadeFirstStrategy, SpadeLastRandom, SpadesLastHighest, SpadesRandom
from .stats import GAMES_PER_CONFIG, SimulationStatistics, StrategyPerformanceData
from .vanilla import HighestFirst, LowestFirst, Sevens, VanillaRandom

CONFIGURATIONS: tuple[tuple[int, int], ...] = tuple(
    (suits, n_size)
    for suits in (4, 8, 16, 32, 48, 64)
    for n_size in (13, 27, 55, 83, 111)
)

SEVENS_COMBINATIONS: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0), (1, 1, 1, 1), (2, 2, 2, 2),
    (0, 0, 0, 1), (0, 0, 1, 1), (0, 1, 1, 1),
    (0, 0, 0, 2), (0, 0, 2, 2), (0, 2, 2, 2),
    (1, 1, 1, 2), (1, 1, 2, 2), (1, 2, 2, 2),
    (0, 1, 1, 2), (0, 1, 2, 2),
)

SPADES_COMBINATIONS: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0), (1, 1, 1, 1), (2, 2, 2, 2), (3, 3, 3, 3),
    (0, 0, 0, 1), (0, 0, 1, 1), (0, 1, 1, 1),
    (0, 0, 0, 2), (0, 0, 2, 2), (0, 2, 2, 2),
    (0, 0, 0, 3), (0, 0, 3, 3), (0, 3, 3, 3),
    (1, 1, 1, 2), (1, 1, 2, 2), (1, 2, 2, 2),
    (1, 1, 1, 3), (1, 1, 3, 3), (1, 3, 3, 3),
    (2, 2, 2, 3), (2, 2, 3, 3), (2, 3, 3, 3),
    (0, 1, 1, 2), (0, 1, 2, 2), (0, 0, 1, 2),
    (0, 1, 1, 3), (0, 1, 3, 3), (0, 0, 1, 3),
    (0, 2, 2, 3), (0, 2, 3, 3), (0, 0, 2, 3),
    (1, 2, 2, 3), (1, 2, 3, 3), (1, 1, 2, 3),
    (0, 1, 2, 3),
)


def _div(a: float, b: float) -> float:
    """Division that yields nan or infinity instead of raising on a zero divisor."""
    if b:
        return a / b
    if math.isnan(a) or a == 0:
        return math.nan
    return math.copysign(math.inf, a)


def _trend(values: Sequence[float]) -> int:
    return sum((b > a) - (b < a) for a, b in zip(values, values[1:]))


def _simulate_combination(
    pool: Sequence[Strategy],
    combination: Sequence[int],
    rules: GameRules,
    player_count: int,
    suit_count: int,
    n_size: int,
    simulation_count: int,
    rng: random.Random,
) -> StrategyPerformanceData:
    assignment = [pool[index] for index in combination]
    stats = SimulationStatistics(
        player_count, suit_count * n_size, suit_count, n_size, [repr(s) for s in assignment]
    )
    for _ in range(simulation_count):
        stats.record_result(play_game(assignment, rules, player_count, suit_count, n_size, rng))
    return stats.performance_data()


def _run(
    name: str,
    rules: GameRules,
    pool: Sequence[Strategy],
    combinations: Sequence[Sequence[int]],
    player_count: int,
    simulation_count: int,
) -> list[StrategyPerformanceData]:
    if any(len(combination) != player_count for combination in combinations):
        raise ValueError(f"every strategy line-up has {len(combinations[0])} players")
    print(f"Testing {len(combinations)} different strategy combinations")
    rng = random.Random()
    results = [
        _simulate_combination(
            pool, combination, rules, player_count, suit_count, n_size, simulation_count, rng
        )
        for suit_count, n_size in CONFIGURATIONS
        for combination in combinations
    ]
    save_performance_data(results, name)
    analyze_game_statistics(results, name)
    return results


def run_simulations_sevens(
    player_count: int, simulation_count: int
) -> list[StrategyPerformanceData]:
    """Simulate every plain-Sevens line-up at every deck configuration."""
    pool = [VanillaRandom(), LowestFirst(), HighestFirst()]
    return _run("sevens", Sevens(), pool, SEVENS_COMBINATIONS, player_count, simulation_count)


def run_simulations_spades(
    player_count: int, simulation_count: int
) -> list[StrategyPerformanceData]:
    """Simulate every spades-gated line-up at every deck configuration."""
    pool = [SpadesRandom(), SpadeFirstStrategy(), SpadeLastRandom(), SpadesLastHighest()]
    return _run("spades", SevensSpades(), pool, SPADES_COMBINATIONS, player_count, simulation_count)


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    return value


def save_performance_data(data: Sequence[StrategyPerformanceData], name: str) -> Path:
    """Write the data as pretty JSON to '<name>_strategy_performance_data.json'."""
    path = Path(f"{name}_strategy_performance_data.json")
    payload = [_json_safe(item.to_dict()) for item in data]
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Strategy performance data saved to '{path}'")
    return path


@dataclass
class _SuitCountStats:
    suit_count: int
    total_games: int
    deck_size: float
    avg_options: float
    min_options: float
    max_options: float
    strategy_advantage: float
    win_rate_variance: float
    max_win_diff: float


def _group_by_suit_count(data: Sequence[StrategyPerformanceData]) -> list[_SuitCountStats]:
    groups: dict[int, list[StrategyPerformanceData]] = {}
    for item in data:
        groups.setdefault(item.suit_count, []).append(item)

    def mean(items: list[StrategyPerformanceData], attr: str) -> float:
        return sum(getattr(item, attr) for item in items) / len(items)

    return [
        _SuitCountStats(
            suit_count=suit_count,
            total_games=len(items) * GAMES_PER_CONFIG,
            deck_size=mean(items, "deck_size"),
            avg_options=mean(items, "avg_options_per_turn"),
            min_options=mean(items, "min_options"),
            max_options=mean(items, "max_options"),
            strategy_advantage=mean(items, "strategy_advantage_factor"),
            win_rate_variance=mean(items, "win_rate_variance"),
            max_win_diff=mean(items, "max_win_rate_diff"),
        )
        for suit_count, items in sorted(groups.items())
    ]


def format_game_statistics(data: Sequence[StrategyPerformanceData], name: str) -> str:
    """The full text report over a set of performance records."""
    stats = _group_by_suit_count(data)
    lines = [f"\n=== GAME STATISTICS ANALYSIS ({name}) ==="]

    lines.append("\n📊 DETAILED STATISTICS BY SUIT COUNT")
    lines.append(
        "| Suits | Games | Configs | Deck | Avg Opts | Min | Max | Strat Adv | Variance | Max Diff |"
    )
    lines.append(
        "|-------|-------|---------|------|----------|-----|-----|-----------|----------|----------|"
    )
    for s in stats:
        lines.append(
            f"| {s.suit_count:5} | {s.total_games // 1000:5}k | "
            f"{s.total_games // GAMES_PER_CONFIG:7} | {s.deck_size:4.0f} | "
            f"{s.avg_options:8.2f} | {s.min_options:3.0f} | {s.max_options:3.0f} | "
            f"{s.strategy_advantage:9.3f} | {s.win_rate_variance:8.3f} | "
            f"{s.max_win_diff * 100.0:8.2f}% |"
        )

    total_games = sum(s.total_games for s in stats)
    total_configs = sum(s.total_games // GAMES_PER_CONFIG for s in stats)

    def weighted(attr: str) -> float:
        return _div(sum(getattr(s, attr) * s.total_games for s in stats), total_games)

    lines.append("\n🎯 OVERALL PERFORMANCE METRICS")
    lines.append(f"Total strategy configurations tested: {total_configs}")
    lines.append(f"Total games simulated: {total_games} ({GAMES_PER_CONFIG} games per config)")
    lines.append(f"Average options per turn (weighted): {weighted('avg_options'):.2f}")

    if stats:
        simplest = min(stats, key=lambda s: s.avg_options)
        most_complex = max(reversed(stats), key=lambda s: s.avg_options)
        lines.append("\n🧠 GAME COMPLEXITY ANALYSIS")
        lines.append(
            f"Simplest configuration: {simplest.suit_count} suits "
            f"({simplest.avg_options:.2f} avg options/turn)"
        )
        lines.append(
            f"Most complex configuration: {most_complex.suit_count} suits "
            f"({most_complex.avg_options:.2f} avg options/turn)"
        )
        ratio = _div(most_complex.avg_options, simplest.avg_options)
        lines.append(f"Complexity multiplier: {ratio:.2f}x increase")
        range_simple = most_complex.max_options - simplest.min_options
        range_complex = most_complex.max_options - most_complex.min_options
        lines.append(
            f"Decision range: {range_simple:.0f} options (simple) vs "
            f"{range_complex:.0f} options (complex)"
        )

    lines.append("\n⚔️ STRATEGY EFFECTIVENESS ANALYSIS")
    avg_advantage = weighted("strategy_advantage")
    avg_variance = weighted("win_rate_variance")
    avg_max_diff = weighted("max_win_diff")
    lines.append(f"Average strategy advantage factor: {avg_advantage:.3f}")
    lines.append(f"Average win rate variance: {avg_variance:.3f}")
    lines.append(f"Average max win rate difference: {avg_max_diff * 100.0:.2f}%")
    if avg_advantage > 1.5:
        lines.append("🟢 High strategy differentiation - skill matters significantly")
    elif avg_advantage > 1.2:
        lines.append("🟡 Moderate strategy differentiation - some skill advantage")
    else:
        lines.append("🔴 Low strategy differentiation - mostly luck-based")

    lines.append("\n📈 TREND ANALYSIS")
    complexity_trend = _trend([s.avg_options for s in stats])
    strategy_trend = _trend([s.strategy_advantage for s in stats])
    if complexity_trend > 0:
        lines.append(f"🔺 Complexity increases with more suits (+{complexity_trend})")
    elif complexity_trend < 0:
        lines.append(f"🔻 Complexity decreases with more suits ({complexity_trend})")
    else:
        lines.append("➡️ Complexity remains stable across suit counts")
    if strategy_trend > 0:
        lines.append(f"🔺 Strategy importance increases with more suits (+{strategy_trend})")
    elif strategy_trend < 0:
        lines.append(f"🔻 Strategy importance decreases with more suits ({strategy_trend})")
    else:
        lines.append("➡️ Strategy importance remains stable across suit counts")

    lines.append("\n💻 COMPUTATIONAL COST ANALYSIS")
    total_decisions = 0.0
    for s in stats:
        decisions = s.deck_size * 0.75 * s.avg_options * GAMES_PER_CONFIG
        total_decisions += decisions
        seconds = decisions / 1000.0
        lines.append(
            f"{s.suit_count} suits: {decisions:8.0f} decisions, {seconds:6.1f}s "
            f"({seconds / 60.0:4.1f} min) per 10k games"
        )
    lines.append(f"\nTotal estimated decisions across all simulations: {total_decisions:.0f}")
    lines.append(
        f"Estimated total computation time: {total_decisions / 1000.0 / 3600.0:.1f} hours"
    )

    lines.append("\n💡 PERFORMANCE INSIGHTS")
    if stats:
        sweet_spot = max(
            reversed(stats), key=lambda s: _div(s.strategy_advantage, s.avg_options)
        )
        lines.append(f"🎯 Optimal complexity/strategy ratio: {sweet_spot.suit_count} suits")
    if avg_max_diff > 0.15:
        lines.append("⚠️ High strategy impact detected - consider strategy balancing")
    if complexity_trend > 2:
        lines.append("📊 Strong complexity scaling - good for difficulty progression")

    lines.append("\n" + "=" * 70)
    return "\n".join(lines) + "\n"


def analyze_game_statistics(data: Sequence[StrategyPerformanceData], name: str) -> None:
    """Print the text report for the given records."""
    print(format_game_statistics(data, name), end="")