import random
from typing import Optional

from core.board import Board
from core.card_deck import Card


class RandomPlayer:
    """Uniformly random legal column, used as a baseline opponent"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.name = "Random_AI"

    def choose_column(self, board: Board, card: Card) -> int:
        legal = sorted(board.legal_columns())
        if not legal:
            raise ValueError("No legal column left on a complete board")
        return self.rng.choice(legal)
