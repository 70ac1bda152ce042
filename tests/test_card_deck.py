"""
Tests for cards, the deck and the 5-card hand evaluator
"""

import itertools
import random

import pytest

from conftest import hand
from core.card_deck import (Card, Deck, classify_hand, compare_hands, evaluate_hand,
                            hand_category, new_shuffled_deck)
from core.errors import EmptyDeckError
from core.game_constants import Comparison, HandCategory


def test_card_parsing_and_display():
    assert Card.from_string('10H') == Card(10, 'H')
    assert Card.from_string('as') == Card(14, 'S')
    assert Card.from_string('QD').rank == 12
    assert str(Card(11, 'C')) == 'JC'
    assert str(Card(7, 'D')) == '7D'


def test_card_rejects_bad_values():
    with pytest.raises(ValueError):
        Card(1, 'H')
    with pytest.raises(ValueError):
        Card(10, 'X')
    with pytest.raises(ValueError):
        Card.from_string('ZZ')


def test_cards_are_values():
    assert Card(5, 'H') == Card(5, 'H')
    assert Card(5, 'H') != Card(5, 'D')
    assert len({Card(5, 'H'), Card(5, 'H'), Card(6, 'H')}) == 2


def test_drawing_whole_deck_yields_every_card_once():
    deck = new_shuffled_deck(random.Random(42))
    assert len(deck) == 52

    drawn = []
    while len(deck):
        card, deck = deck.draw()
        drawn.append(card)

    assert len(drawn) == 52
    assert len(set(drawn)) == 52
    assert {(c.rank, c.suit) for c in drawn} == {(r, s) for r in range(2, 15) for s in 'HDCS'}

    with pytest.raises(EmptyDeckError):
        deck.draw()


def test_draw_takes_front_card_and_leaves_original_untouched():
    deck = Deck(tuple(hand('2H 3D 4C')))
    card, rest = deck.draw()
    assert card == Card(2, 'H')
    assert list(rest) == hand('3D 4C')
    assert len(deck) == 3


def test_shuffle_is_reproducible_with_seed():
    assert new_shuffled_deck(random.Random(7)) == new_shuffled_deck(random.Random(7))
    assert new_shuffled_deck(random.Random(7)) != new_shuffled_deck(random.Random(8))


@pytest.mark.parametrize('cards, category, strength', [
    ('10H JH QH KH AH', HandCategory.STRAIGHT_FLUSH, 8014),
    ('2C 2D 2S 2H 5C', HandCategory.FOUR_OF_A_KIND, 7002),
    ('5H 5D 5S 9C 9D', HandCategory.FULL_HOUSE, 6005),
    ('2H 4H 6H 8H 9H', HandCategory.FLUSH, 5009),
    ('10C JD QS KH AC', HandCategory.STRAIGHT, 4014),
    ('AH AC AD 2S 3D', HandCategory.THREE_OF_A_KIND, 3014),
    ('9H 9D 4C 4S 2D', HandCategory.TWO_PAIR, 2009),
    ('KH KD 2C 3S 4D', HandCategory.ONE_PAIR, 1013),
    ('2H 5D 9C JS KD', HandCategory.HIGH_CARD, 13),
])
def test_category_and_strength(cards, category, strength):
    assert hand_category(hand(cards)) == category
    assert evaluate_hand(hand(cards)) == strength


def test_straight_flush_beats_four_of_a_kind():
    royal = hand('10H JH QH KH AH')
    quads = hand('2C 2D 2S 2H 5C')
    assert evaluate_hand(quads) < evaluate_hand(royal)
    assert compare_hands(royal, quads) == Comparison.GREATER
    assert compare_hands(quads, royal) == Comparison.LESS


def test_category_dominates_embedded_rank():
    full_house = hand('5H 5D 5S 9C 9D')
    trips = hand('AH AC AD 2S 3D')
    assert evaluate_hand(full_house) == 6005
    assert evaluate_hand(trips) == 3014
    assert compare_hands(full_house, trips) == Comparison.GREATER


def test_any_flush_beats_any_straight():
    weakest_flush = hand('2D 3D 4D 5D 7D')
    best_straight = hand('10C JD QS KH AC')
    assert compare_hands(weakest_flush, best_straight) == Comparison.GREATER


def test_ace_low_run_is_not_a_straight():
    assert classify_hand(hand('AH 2D 3C 4S 5H')) == (HandCategory.HIGH_CARD, 14)
    assert classify_hand(hand('AH 2H 3H 4H 5H')) == (HandCategory.FLUSH, 14)


def test_kickers_do_not_break_ties():
    assert compare_hands(hand('KH KD 2C 3S 4D'), hand('KS KC AH QD JC')) == Comparison.EQUAL
    assert compare_hands(hand('9H 9D 4C 4S 2D'), hand('9S 9C 8H 8D AD')) == Comparison.EQUAL


def test_evaluation_ignores_card_order():
    cards = hand('5H 5D 5S 9C 9D')
    expected = evaluate_hand(cards)
    assert all(evaluate_hand(list(p)) == expected for p in itertools.permutations(cards))


def test_evaluate_requires_five_cards():
    with pytest.raises(ValueError):
        evaluate_hand(hand('AH KH QH JH'))
