"""Plain Sevens rules and the strategies that play them."""

from __future__ import annotations

import random
from typing import Optional

from .cards import Board, Card, GameBoard, GameRules, Strategy


class Sevens(GameRules):
    """Any middle card may start a suit; other cards extend a suit at either end."""

    def __repr__(self) -> str:
        return "Sevens"

    def can_play(self, board: Board, card: Card) -> bool:
        if card.value == board.n7:
            return True
        low, high = board.ranges[card.suit.rank]
        return (low > 0 and low - 1 == card.value) or (
            high > 0 and high + 1 == card.value
        )

    def find_options(self, board: Board) -> int:
        return sum(_suit_options(r, 2 * board.n7 - 1) for r in board.ranges)


def _suit_options(suit_range: tuple[int, int], max_value: int) -> int:
    low, high = suit_range
    if suit_range == (0, 0):
        return 1
    if low == 1:
        return 0 if high == max_value else 1
    if high == max_value:
        return 1
    return 2


def _playable(hand: list[Card], board: GameBoard) -> list[int]:
    return [index for index, card in enumerate(hand) if board.can_play(card)]


class VanillaRandom(Strategy):
    """Plays a uniformly random playable card."""

    name = "A"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        choices = _playable(hand, board)
        return rng.choice(choices) if choices else None


class LowestFirst(Strategy):
    """Plays the lowest-valued playable card, the first one on ties."""

    name = "B"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        choices = _playable(hand, board)
        if not choices:
            return None
        return min(choices, key=lambda index: hand[index].value)


class HighestFirst(Strategy):
    """Plays the highest-valued playable card, the first one on ties."""

    name = "C"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        choices = _playable(hand, board)
        if not choices:
            return None
        return max(choices, key=lambda index: hand[index].value)