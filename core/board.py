"""
One side's 5x5 grid of columns and the fewest-cards-first placement rule
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from .card_deck import Card
from .errors import ColumnFullError, IllegalColumnError
from .game_constants import COLUMN_SIZE, NUM_COLUMNS

Column = Tuple[Card, ...]


@dataclass(frozen=True)
class Board:
    columns: Tuple[Column, ...] = ((),) * NUM_COLUMNS

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_columns(cls, columns):
        if len(columns) != NUM_COLUMNS:
            raise ValueError(f"A board has {NUM_COLUMNS} columns, got {len(columns)}")
        board = cls(tuple(tuple(col) for col in columns))
        if any(len(col) > COLUMN_SIZE for col in board.columns):
            raise ValueError(f"A column holds at most {COLUMN_SIZE} cards")
        return board

    def counts(self) -> List[int]:
        return [len(col) for col in self.columns]

    def column(self, index) -> Column:
        return self.columns[index]

    def legal_columns(self) -> FrozenSet[int]:
        """Columns holding the fewest cards, excluding full ones"""
        counts = self.counts()
        fewest = min(counts)
        return frozenset(i for i, n in enumerate(counts) if n == fewest and n < COLUMN_SIZE)

    def place(self, column, card: Card) -> 'Board':
        """Append card to column, returning the new board"""
        if not 0 <= column < NUM_COLUMNS:
            raise IllegalColumnError(column, f"There is no column {column}.")
        if len(self.columns[column]) >= COLUMN_SIZE:
            raise ColumnFullError(column)
        if column not in self.legal_columns():
            raise IllegalColumnError(column)

        columns = list(self.columns)
        columns[column] = columns[column] + (card,)
        return Board(tuple(columns))

    def average_rank(self, column) -> float:
        cards = self.columns[column]
        if not cards:
            return 0.0
        return sum(c.rank for c in cards) / len(cards)

    def card_count(self):
        return sum(self.counts())

    def is_complete(self):
        return all(len(col) == COLUMN_SIZE for col in self.columns)

    def cards(self):
        return [card for col in self.columns for card in col]
