"""Cards, suits, the board and the interfaces shared by every rule set."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class SuitColor:
    """Terminal colour of a suit symbol, held as an ANSI SGR parameter string."""

    sgr: str

    @classmethod
    def red(cls) -> SuitColor:
        return cls("31")

    @classmethod
    def gray(cls) -> SuitColor:
        return cls.custom(192, 192, 192)

    @classmethod
    def custom(cls, r: int, g: int, b: int) -> SuitColor:
        for component in (r, g, b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls(f"38;2;{r};{g};{b}")

    def paint(self, text: str) -> str:
        """Wrap text in this colour's escape sequence."""
        return f"\x1b[{self.sgr}m{text}{_RESET}"


@dataclass(frozen=True)
class Suit:
    name: str
    symbol: str
    color: SuitColor
    rank: int

    def __str__(self) -> str:
        return self.name

    def colored(self) -> str:
        """The suit symbol painted in the suit colour."""
        return self.color.paint(self.symbol)


@dataclass(frozen=True)
class Card:
    suit: Suit
    value: int

    def colored(self) -> str:
        """The coloured suit symbol followed by the card value."""
        return f"{self.suit.colored()}{self.value}"


@dataclass
class Board:
    """Per-suit ranges of played cards; (0, 0) means nothing played yet."""

    suits: list[Suit]
    n7: int
    ranges: list[tuple[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.ranges:
            self.ranges = [(0, 0)] * len(self.suits)
        elif len(self.ranges) != len(self.suits):
            raise ValueError("one range is needed for each suit")


class GameRules(ABC):
    """Decides which cards may be played and how many moves the board allows."""

    @abstractmethod
    def can_play(self, board: Board, card: Card) -> bool:
        """Whether the card may be placed on the board."""

    @abstractmethod
    def find_options(self, board: Board) -> int:
        """Number of distinct placements the board currently allows."""


class GameBoard:
    """A board together with the rules that govern it."""

    def __init__(self, suits: list[Suit], n7: int, rules: GameRules) -> None:
        self.board = Board(list(suits), n7)
        self.rules = rules

    def __repr__(self) -> str:
        return f"GameBoard(board={self.board!r}, rules={self.rules!r})"

    def can_play(self, card: Card) -> bool:
        return self.rules.can_play(self.board, card)

    def play_card(self, card: Card) -> None:
        """Extend the card's suit range; cards that do not fit leave it unchanged."""
        rank = card.suit.rank
        bottom, top = self.board.ranges[rank]
        n7 = self.board.n7
        value = card.value

        if value == n7:
            if bottom > 0 or top > 0 or (bottom, top) == (0, 0):
                self.board.ranges[rank] = (n7, n7)
            return

        if bottom > 0 and top > 0:
            if value == bottom - 1:
                self.board.ranges[rank] = (bottom - 1, top)
            elif value == top + 1:
                self.board.ranges[rank] = (bottom, top + 1)
        elif bottom > 0:
            if value == bottom - 1:
                self.board.ranges[rank] = (bottom - 1, bottom)
            elif value == bottom + 1:
                self.board.ranges[rank] = (bottom, bottom + 1)
        elif top > 0:
            if value == top - 1:
                self.board.ranges[rank] = (top - 1, top)
            elif value == top + 1:
                self.board.ranges[rank] = (top, top + 1)


class Strategy(ABC):
    """A player's policy for choosing which card to play."""

    name = "?"

    def __repr__(self) -> str:
        return self.name

    @abstractmethod
    def select_card(
        self, hand: list[Card], board: GameBoard, rng: random.Random
    ) -> Optional[int]:
        """Index into the hand of the card to play, or None to pass."""


def alphabetical_label(number: int) -> str:
    """Bijective base-26 label for a zero-based index: a, b, ..., z, aa, ab, ..."""
    if number < 0:
        raise ValueError("label index must be non-negative")
    letters = []
    number += 1
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("a") + remainder))
    return "".join(reversed(letters))


def alpha_suits(suit_count: int, rng: random.Random) -> list[Suit]:
    """Suits named by letter, each with a random bright colour."""
    suits = []
    for rank in range(suit_count):
        letter = alphabetical_label(rank)
        color = SuitColor.custom(
            rng.randint(128, 255), rng.randint(128, 255), rng.randint(128, 255)
        )
        suits.append(Suit(f"Suit {letter}", letter, color, rank))
    return suits


def order_hand(hand: list[Card], n7: int) -> list[Card]:
    """Hand sorted by suit, then distance from the middle card, then value."""
    return sorted(
        hand, key=lambda card: (card.suit.rank, abs(card.value - n7), card.value)
    )