"""Command-line entry point for the batch simulations."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .simulation import run_simulations_sevens, run_simulations_spades

PLAYER_COUNT = 4


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sevens", description="Simulate Sevens strategy line-ups and report on them."
    )
    parser.add_argument(
        "--simulations",
        type=_non_negative,
        default=10_000,
        help="games per strategy line-up and deck configuration",
    )
    parser.add_argument(
        "--game",
        choices=("sevens", "spades", "both"),
        default="both",
        help="which rule set to simulate",
    )
    args = parser.parse_args(argv)
    if args.game in ("sevens", "both"):
        run_simulations_sevens(PLAYER_COUNT, args.simulations)
    if args.game in ("spades", "both"):
        run_simulations_spades(PLAYER_COUNT, args.simulations)
    return 0