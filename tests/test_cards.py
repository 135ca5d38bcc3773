import random

import pytest

from sevens.cards import (
    Board,
    Card,
    GameBoard,
    GameRules,
    Strategy,
    Suit,
    SuitColor,
    alpha_suits,
    alphabetical_label,
    order_hand,
)


class _AnyRules(GameRules):
    def can_play(self, board, card):
        return True

    def find_options(self, board):
        return len(board.ranges)


def _suit(rank, name="Spades"):
    return Suit(name, name[0], SuitColor.gray(), rank)


def test_alphabetical_label_first_values():
    assert alphabetical_label(0) == "a"
    assert alphabetical_label(26) == "aa"


def test_alphabetical_label_unique_and_ordered():
    labels = [alphabetical_label(i) for i in range(2000)]
    assert len(set(labels)) == len(labels)
    assert labels == sorted(labels, key=lambda s: (len(s), s))
    assert all(set(label) <= set("abcdefghijklmnopqrstuvwxyz") for label in labels)


def test_alphabetical_label_negative_raises():
    with pytest.raises(ValueError):
        alphabetical_label(-1)


def test_suit_color_custom_sgr_and_paint():
    color = SuitColor.custom(10, 20, 30)
    assert color.sgr == "38;2;10;20;30"
    painted = color.paint("x")
    assert painted.startswith("\x1b[38;2;10;20;30m")
    assert "x" in painted
    assert painted.endswith("\x1b[0m")


def test_suit_color_gray_matches_custom():
    assert SuitColor.gray() == SuitColor.custom(192, 192, 192)


def test_suit_color_out_of_range():
    with pytest.raises(ValueError):
        SuitColor.custom(0, 256, 0)


def test_suit_str_and_colored():
    suit = Suit("Hearts", "H", SuitColor.red(), 1)
    assert str(suit) == "Hearts"
    assert suit.colored() == SuitColor.red().paint("H")


def test_card_colored():
    suit = _suit(0)
    card = Card(suit, 9)
    assert card.colored() == suit.colored() + "9"


def test_alpha_suits_properties():
    suits = alpha_suits(30, random.Random(1))
    assert [s.rank for s in suits] == list(range(30))
    assert [s.symbol for s in suits] == [alphabetical_label(i) for i in range(30)]
    assert all(s.name == f"Suit {s.symbol}" for s in suits)
    for suit in suits:
        prefix, _, r, g, b = suit.color.sgr.split(";")
        assert all(128 <= int(c) <= 255 for c in (r, g, b))


def test_alpha_suits_deterministic_with_seed():
    first = alpha_suits(5, random.Random(7))
    second = alpha_suits(5, random.Random(7))
    assert [s.symbol for s in first] == ["a", "b", "c", "d", "e"]
    assert [s.name for s in first] == ["Suit a", "Suit b", "Suit c", "Suit d", "Suit e"]
    assert [s.color.sgr for s in first] == [s.color.sgr for s in second]
    assert first == second


def test_board_default_ranges():
    board = Board([_suit(0), _suit(1, "Hearts")], 7)
    assert board.ranges == [(0, 0), (0, 0)]


def test_board_mismatched_ranges():
    with pytest.raises(ValueError):
        Board([_suit(0)], 7, [(0, 0), (0, 0)])


def test_game_rules_is_abstract():
    with pytest.raises(TypeError):
        GameRules()


def test_strategy_is_abstract():
    with pytest.raises(TypeError):
        Strategy()


def test_game_board_delegates_to_rules():
    gb = GameBoard([_suit(0)], 7, _AnyRules())
    assert gb.can_play(Card(_suit(0), 1)) is True
    assert gb.rules.find_options(gb.board) == 1


def test_play_card_sequence():
    spades = _suit(0)
    gb = GameBoard([spades], 7, _AnyRules())
    gb.play_card(Card(spades, 6))
    assert gb.board.ranges[0] == (0, 0)
    gb.play_card(Card(spades, 7))
    assert gb.board.ranges[0] == (7, 7)
    gb.play_card(Card(spades, 6))
    assert gb.board.ranges[0] == (6, 7)
    gb.play_card(Card(spades, 8))
    assert gb.board.ranges[0] == (6, 8)
    gb.play_card(Card(spades, 10))
    assert gb.board.ranges[0] == (6, 8)


def test_play_card_seven_resets_range():
    spades = _suit(0)
    gb = GameBoard([spades], 7, _AnyRules())
    gb.board.ranges[0] = (5, 9)
    gb.play_card(Card(spades, 7))
    assert gb.board.ranges[0] == (7, 7)


def test_play_card_partial_ranges():
    spades = _suit(0)
    gb = GameBoard([spades], 7, _AnyRules())
    gb.board.ranges[0] = (5, 0)
    gb.play_card(Card(spades, 4))
    assert gb.board.ranges[0] == (4, 5)
    gb.board.ranges[0] = (0, 5)
    gb.play_card(Card(spades, 6))
    assert gb.board.ranges[0] == (5, 6)


def test_play_card_only_touches_its_suit():
    spades, hearts = _suit(0), _suit(1, "Hearts")
    gb = GameBoard([spades, hearts], 7, _AnyRules())
    gb.play_card(Card(hearts, 7))
    assert gb.board.ranges == [(0, 0), (7, 7)]


def test_order_hand_example():
    spades = _suit(0)
    hand = [Card(spades, v) for v in (1, 13, 7, 6, 8)]
    assert [c.value for c in order_hand(hand, 7)] == [7, 6, 8, 1, 13]


def test_order_hand_groups_by_suit_and_keeps_cards():
    suits = alpha_suits(4, random.Random(3))
    rng = random.Random(4)
    hand = [Card(s, v) for s in suits for v in range(1, 14)]
    rng.shuffle(hand)
    ordered = order_hand(hand, 7)
    assert sorted(ordered, key=repr) == sorted(hand, key=repr)
    ranks = [c.suit.rank for c in ordered]
    assert ranks == sorted(ranks)
    for rank in range(4):
        distances = [abs(c.value - 7) for c in ordered if c.suit.rank == rank]
        assert distances == sorted(distances)