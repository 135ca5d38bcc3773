"""Aggregated statistics over many games played with one strategy line-up."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional, Sequence

from .game import GameResult

GAMES_PER_CONFIG = 10_000


@dataclass
class StrategyPerformanceData:
    """Summary of one strategy combination at one deck configuration."""

    suit_count: int
    n_size: int
    deck_size: int
    strategy_win_rates: dict[str, float]
    win_rate_variance: float
    max_win_rate_diff: float
    avg_options_per_turn: float
    strategy_advantage_factor: float
    total_avg_options: float
    min_options: int
    max_options: int
    total_min_options: float
    total_max_options: float

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of every field, in declaration order."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StrategyPerformanceData:
        return cls(**{**data, "strategy_win_rates": dict(data["strategy_win_rates"])})


class SimulationStatistics:
    """Running totals for a series of games with a fixed player line-up."""

    def __init__(
        self,
        player_count: int,
        size_of_deck: int,
        suit_count: int,
        n_size: int,
        strategy_names: Sequence[str],
    ) -> None:
        if len(strategy_names) > player_count:
            raise ValueError("more strategy names than players")
        self.games_completed = 0
        self.player_wins = [0] * player_count
        self.strategy_names = list(strategy_names)
        self.total_avg_options = 0.0
        self.total_min_options = 0
        self.total_max_options = 0
        self.min_options_ever: Optional[int] = None
        self.max_options_ever = 0
        self.size_of_deck = size_of_deck
        self.suit_count = suit_count
        self.n_size = n_size

    def record_result(self, result: GameResult) -> None:
        self.games_completed += 1
        if result.winner is not None:
            self.player_wins[result.winner] += 1
        self.total_avg_options += result.avg_options
        self.total_min_options += result.min_options
        self.total_max_options += result.max_options
        if self.min_options_ever is None:
            self.min_options_ever = result.min_options
        else:
            self.min_options_ever = min(self.min_options_ever, result.min_options)
        self.max_options_ever = max(self.max_options_ever, result.max_options)

    def _win_rates(self) -> list[float]:
        games = self.games_completed
        return [wins / games if games else math.nan for wins in self.player_wins]

    def win_rate_variance(self) -> float:
        """Population variance of the players' win rates."""
        rates = self._win_rates()
        if not rates:
            return math.nan
        mean = sum(rates) / len(rates)
        return sum((rate - mean) ** 2 for rate in rates) / len(rates)

    def max_win_rate_diff(self) -> float:
        """Gap between the best and the worst win rate."""
        rates = [rate for rate in self._win_rates() if not math.isnan(rate)]
        if not rates:
            return math.nan
        return max(rates) - min(rates)

    def strategy_advantage_factor(self) -> float:
        """Win-rate variance scaled by options per turn, damped by the suit count."""
        variance = self.win_rate_variance()
        if self.games_completed:
            avg_options = self.total_avg_options / self.games_completed
        else:
            avg_options = math.nan
        if self.suit_count > 0:
            scale = 1.0 / (1.0 + math.log(self.suit_count))
        else:
            scale = 0.0
        return variance * avg_options * scale

    def performance_data(self) -> StrategyPerformanceData:
        games = self.games_completed
        win_rates = {
            f"{name}{index}": (self.player_wins[index] / games if games else 0.0)
            for index, name in enumerate(self.strategy_names)
        }
        return StrategyPerformanceData(
            suit_count=self.suit_count,
            n_size=self.n_size,
            deck_size=self.size_of_deck,
            strategy_win_rates=win_rates,
            win_rate_variance=self.win_rate_variance(),
            max_win_rate_diff=self.max_win_rate_diff(),
            avg_options_per_turn=self.total_avg_options / games if games else 0.0,
            strategy_advantage_factor=self.strategy_advantage_factor(),
            total_avg_options=self.total_avg_options / GAMES_PER_CONFIG,
            min_options=self.min_options_ever if self.min_options_ever is not None else 0,
            max_options=self.max_options_ever,
            total_min_options=self.total_min_options / GAMES_PER_CONFIG,
            total_max_options=self.total_max_options / GAMES_PER_CONFIG,
        )