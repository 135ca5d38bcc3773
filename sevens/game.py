"""Dealing and playing a single game of Sevens."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from .cards import Board, Card, GameBoard, GameRules, Strategy, Suit, alpha_suits, order_hand

STARTING_SUIT = "Spades"


@dataclass
class GameResult:
    """Outcome of one game and the options seen on each turn."""

    winner: Optional[int]
    board: Board
    avg_options: float
    min_options: int
    max_options: int


def build_deck(suits: Sequence[Suit], n_size: int) -> list[Card]:
    """One card of each value from 1 to n_size for every suit, suit by suit."""
    return [Card(suit, value) for suit in suits for value in range(1, n_size + 1)]


def deal(deck: Sequence[Card], player_count: int) -> list[list[Card]]:
    """Deal the deck round-robin, starting with the first player."""
    if player_count < 1:
        raise ValueError("at least one player is needed")
    return [list(deck[player::player_count]) for player in range(player_count)]


def play_game(
    strategies: Sequence[Strategy],
    rules: GameRules,
    player_count: int,
    suit_count: int,
    n_size: int,
    rng: Optional[random.Random] = None,
) -> GameResult:
    """Play one shuffled game until a player empties their hand or the turn limit is hit."""
    if len(strategies) < player_count:
        raise ValueError("a strategy is needed for every player")
    rng = rng if rng is not None else random.Random()

    suits = alpha_suits(suit_count, rng)
    n7 = n_size // 2
    deck = build_deck(suits, n_size)
    rng.shuffle(deck)
    hands = [order_hand(hand, n7) for hand in deal(deck, player_count)]

    starting_player = next(
        (
            index
            for index, hand in enumerate(hands)
            if any(c.suit.name == STARTING_SUIT and c.value == n7 for c in hand)
        ),
        0,
    )

    game_board = GameBoard(suits, n7, rules)
    option_counts: list[int] = []

    def result(winner: Optional[int]) -> GameResult:
        if option_counts:
            avg = sum(option_counts) / len(option_counts)
            low, high = min(option_counts), max(option_counts)
        else:
            avg, low, high = 0.0, 0, 0
        return GameResult(winner, game_board.board, avg, low, high)

    for turn in range(starting_player, len(deck) * player_count):
        player = turn % player_count
        option_counts.append(rules.find_options(game_board.board))
        hand = hands[player]
        index = strategies[player].select_card(hand, game_board, rng)
        if index is None:
            continue
        card = hand[index]
        if not game_board.can_play(card):
            continue
        game_board.play_card(card)
        del hand[index]
        if not hand:
            return result(player)

    return result(None)