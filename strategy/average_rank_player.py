"""
Greedy column choice: put the card where the cards already placed are lowest
"""

from core.board import Board
from core.card_deck import Card


class AverageRankPlayer:
    """
    Picks the legal column whose placed cards have the lowest average rank

    Empty columns average 0 so they fill first. Ties go to the lowest
    column index. Only the own board is looked at; the card itself, the
    opponent's board and the remaining deck play no part.
    """

    def __init__(self):
        self.name = "AverageRank_AI"

    def choose_column(self, board: Board, card: Card) -> int:
        legal = sorted(board.legal_columns())
        if not legal:
            raise ValueError("No legal column left on a complete board")
        return min(legal, key=board.average_rank)
