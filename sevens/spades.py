"""Spades-gated Sevens: other suits may only grow inside the spade range."""

from __future__ import annotations

import random
from typing import Optional

from .cards import Board, Card, GameBoard, GameRules, Strategy
from .vanilla import _suit_options

SPADES_RANK = 0


def _within(value: int, suit_range: tuple[int, int]) -> bool:
    low, high = suit_range
    return low <= value <= high


class SevensSpades(GameRules):
    """Spades extend freely; other suits extend only to values the spades already cover."""

    def __repr__(self) -> str:
        return "SevensSpades"

    def can_play(self, board: Board, card: Card) -> bool:
        value = card.value
        if value == board.n7:
            return True
        low, high = board.ranges[card.suit.rank]
        extends = (low > 0 and low - 1 == value) or (high > 0 and high + 1 == value)
        if card.suit.rank == SPADES_RANK:
            return extends
        spade_low, spade_high = board.ranges[SPADES_RANK]
        in_spades = spade_low > 0 and spade_high > 0 and spade_low <= value <= spade_high
        return in_spades and extends

    def find_options(self, board: Board) -> int:
        max_value = 2 * board.n7 - 1
        spades = board.ranges[SPADES_RANK]
        seven_open = _within(board.n7, spades)
        return sum(
            self._options_for(rank, suit_range, spades, seven_open, max_value)
            for rank, suit_range in enumerate(board.ranges)
        )

    @staticmethod
    def _options_for(
        rank: int,
        suit_range: tuple[int, int],
        spades: tuple[int, int],
        seven_open: bool,
        max_value: int,
    ) -> int:
        if suit_range == (0, 0):
            return 1 if rank == SPADES_RANK or seven_open else 0
        if rank == SPADES_RANK:
            return _suit_options(suit_range, max_value)
        low, high = suit_range
        if low > spades[0] and high < spades[1]:
            return _suit_options(suit_range, max_value)
        options = 0
        if low > 1 and _within(low - 1, spades):
            options += 1
        if high < max_value and _within(high + 1, spades):
            options += 1
        return options


def _opening(hand: list[Card], board: GameBoard) -> tuple[Optional[int], list[int]]:
    """Index of the middle spade in the hand, if held, and every playable index."""
    n7 = board.board.n7
    seven = next(
        (
            index
            for index, card in enumerate(hand)
            if card.suit.rank == SPADES_RANK and card.value == n7
        ),
        None,
    )
    choices = [index for index, card in enumerate(hand) if board.can_play(card)]
    return seven, choices


class SpadesRandom(Strategy):
    """Leads the middle spade when held, otherwise plays a random playable card."""

    name = "A"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        seven, choices = _opening(hand, board)
        if seven is not None:
            return seven
        return rng.choice(choices) if choices else None


class SpadeFirstStrategy(Strategy):
    """Prefers the first playable spade, falling back to a random playable card."""

    name = "B"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        seven, choices = _opening(hand, board)
        if seven is not None:
            return seven
        if not choices:
            return None
        spade = next((i for i in choices if hand[i].suit.rank == SPADES_RANK), None)
        return spade if spade is not None else rng.choice(choices)


class SpadeLastRandom(Strategy):
    """Prefers the first playable non-spade, falling back to a random playable card."""

    name = "C"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        seven, choices = _opening(hand, board)
        if seven is not None:
            return seven
        if not choices:
            return None
        other = next((i for i in choices if hand[i].suit.rank != SPADES_RANK), None)
        return other if other is not None else rng.choice(choices)


class SpadesLastHighest(Strategy):
    """Plays the highest playable non-spade, the first one on ties, else a random card."""

    name = "D"

    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        seven, choices = _opening(hand, board)
        if seven is not None:
            return seven
        if not choices:
            return None
        others = [i for i in choices if hand[i].suit.rank != SPADES_RANK]
        if others:
            return max(others, key=lambda index: hand[index].value)
        return rng.choice(choices)