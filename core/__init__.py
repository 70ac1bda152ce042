"""
Core game engine and utilities for two-player Chinese Poker
"""

from .game_engine import ChinesePoker, RoundState, TableView
from .game_constants import Side, Outcome, Comparison, Phase, HandCategory
from .card_deck import Card, Deck, new_shuffled_deck, evaluate_hand, compare_hands
from .board import Board
from .player import Player
from .scoring import RoundResult, ColumnResult, score_round
from .errors import (ChinesePokerError, EmptyDeckError, IllegalColumnError,
                     ColumnFullError, OutOfTurnError)

__all__ = ['ChinesePoker', 'RoundState', 'TableView', 'Side', 'Outcome', 'Comparison',
           'Phase', 'HandCategory', 'Card', 'Deck', 'new_shuffled_deck', 'evaluate_hand',
           'compare_hands', 'Board', 'Player', 'RoundResult', 'ColumnResult', 'score_round',
           'ChinesePokerError', 'EmptyDeckError', 'IllegalColumnError', 'ColumnFullError',
           'OutOfTurnError']
