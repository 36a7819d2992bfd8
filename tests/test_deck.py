"""Unit tests for deck construction, shuffling, and dealing."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from deck import SUITS, VALUES, create_cards, deal_cards, shuffle_cards
from game_types import (
    DeckError,
    InsufficientCardsError,
    InvalidArgumentShapeError,
    InvalidArgumentTypeError,
)


@pytest.fixture
def cards():
    return create_cards(SUITS, VALUES)


def test_create_cards_builds_52_unique_cards(cards):
    assert len(cards) == 52
    assert len(set(cards)) == 52
    assert set(cards) == {suit + value for suit in SUITS for value in VALUES}


def test_create_cards_is_suit_major(cards):
    assert cards[:3] == ["♠A", "♠2", "♠3"]
    assert cards[12] == "♠K"
    assert cards[13] == "♥A"
    assert all(card.startswith("♠") for card in cards[:13])
    assert cards[-1] == "♣K"


def test_create_cards_uses_given_tokens():
    suits = ["S", "H", "D", "C"]
    values = list("A23456789TJQK")
    result = create_cards(suits, values)
    assert result[0] == "SA"
    assert result[-1] == "CK"


@pytest.mark.parametrize(
    "suits, values",
    [
        ("not an array", ""),
        (list(SUITS), 2026),
        (True, None),
        (list(SUITS), "A23456789TJQK"),
    ],
)
def test_create_cards_rejects_non_sequences(suits, values):
    with pytest.raises(InvalidArgumentTypeError, match="must be arrays"):
        create_cards(suits, values)


@pytest.mark.parametrize(
    "suits, values",
    [
        (list(SUITS), ["A", "2", "3", "4", "5", "6"]),
        (["♠", "♥"], list(VALUES)),
        (["♠", "♥"], ["A", "2", "3", "4", "5", "6"]),
        ([], []),
    ],
)
def test_create_cards_rejects_wrong_shape(suits, values):
    with pytest.raises(InvalidArgumentShapeError, match="4 suits and 13 values"):
        create_cards(suits, values)


def test_errors_share_a_base_and_builtin_kinds():
    assert issubclass(InvalidArgumentTypeError, TypeError)
    assert issubclass(InvalidArgumentShapeError, ValueError)
    assert issubclass(InsufficientCardsError, ValueError)
    for error in (InvalidArgumentTypeError, InvalidArgumentShapeError, InsufficientCardsError):
        assert issubclass(error, DeckError)


def test_shuffle_is_a_permutation(cards):
    result = shuffle_cards(cards)
    assert len(result) == 52
    assert sorted(result) == sorted(cards)
    assert "♠A" in result


def test_shuffle_leaves_input_untouched(cards):
    original = list(cards)
    result = shuffle_cards(cards, rng=random.Random(7))
    assert cards == original
    assert result is not cards


def test_shuffle_is_reproducible_with_seeded_rng(cards):
    first = shuffle_cards(cards, rng=random.Random(42))
    second = shuffle_cards(cards, rng=random.Random(42))
    assert first == second
    assert first != cards


def test_shuffle_handles_tiny_inputs():
    assert shuffle_cards([]) == []
    assert shuffle_cards(["♠A"]) == ["♠A"]
    assert shuffle_cards(("x", "x", "y"), rng=random.Random(1)).count("x") == 2


class _RecordingRandom(random.Random):
    def __init__(self) -> None:
        super().__init__(0)
        self.bounds = []

    def randrange(self, stop, *args, **kwargs):  # type: ignore[override]
        self.bounds.append(stop)
        return stop - 1


def test_shuffle_draws_from_shrinking_inclusive_ranges():
    rng = _RecordingRandom()
    result = shuffle_cards(["a", "b", "c", "d"], rng=rng)
    assert rng.bounds == [4, 3, 2]
    # j == i every time, so nothing moves
    assert result == ["a", "b", "c", "d"]


def test_shuffle_reaches_every_permutation_of_three():
    rng = random.Random(3)
    seen = Counter(tuple(shuffle_cards("abc", rng=rng)) for _ in range(3000))
    assert len(seen) == 6
    assert min(seen.values()) > 350


def test_deal_cards_returns_requested_hands(cards):
    hands = deal_cards(shuffle_cards(cards), 4, 3)
    assert len(hands) == 3
    assert all(len(hand) == 4 for hand in hands)
    dealt = [card for hand in hands for card in hand]
    assert len(set(dealt)) == 12
    assert set(dealt) <= set(cards)


def test_deal_cards_fills_hands_in_blocks(cards):
    hands = deal_cards(cards, 4, 3)
    assert hands == [cards[0:4], cards[4:8], cards[8:12]]
    assert hands[0] == ["♠A", "♠2", "♠3", "♠4"]


def test_deal_cards_does_not_consume_input(cards):
    original = list(cards)
    deal_cards(cards, 5, 4)
    assert cards == original


def test_deal_cards_can_use_whole_deck(cards):
    hands = deal_cards(cards, 13, 4)
    assert [hand[0] for hand in hands] == ["♠A", "♥A", "♦A", "♣A"]


def test_deal_cards_raises_when_not_enough(cards):
    with pytest.raises(InsufficientCardsError, match="need 80, have 52"):
        deal_cards(cards, 10, 8)


@pytest.mark.parametrize("hand_size, players", [(0, 3), (4, 0), (-1, 2)])
def test_deal_cards_rejects_non_positive_sizes(cards, hand_size, players):
    with pytest.raises(InvalidArgumentShapeError):
        deal_cards(cards, hand_size, players)
