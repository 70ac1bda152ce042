"""
Shared helpers for building cards, hands and boards from short names
"""

import pytest

from core.board import Board
from core.card_deck import Card


def hand(text):
    """hand('10H JH QH KH AH') -> list of Card"""
    return [Card.from_string(name) for name in text.split()]


def board_from(*columns):
    """board_from('AH 2C', '', ...) with exactly five column strings"""
    return Board.from_columns([hand(col) for col in columns])


@pytest.fixture
def full_board():
    return board_from(
        '2H 3H 4H 5H 6H',
        '2D 3D 4D 5D 6D',
        '2C 3C 4C 5C 6C',
        '2S 3S 4S 5S 6S',
        '7H 8H 9H 10H JH',
    )
