"""
Exceptions raised by the Chinese Poker engine
"""


class ChinesePokerError(Exception):
    """Base class for every error the engine raises"""


class EmptyDeckError(ChinesePokerError):
    """A draw was requested from a deck with no cards left"""

    def __init__(self):
        super().__init__("Cannot draw from an empty deck")


class OutOfTurnError(ChinesePokerError):
    """A move was attempted in a phase that does not accept it"""


class IllegalColumnError(ChinesePokerError):
    """Placement into a column outside the current legal set"""

    title = "Invalid Move"
    default_message = "Place the card in one of the columns with the fewest cards."

    def __init__(self, column, message=None):
        self.column = column
        self.message = message or self.default_message
        super().__init__(f"Column {column}: {self.message}")


class ColumnFullError(IllegalColumnError):
    """Placement into a column that already holds five cards"""

    title = "Column Full"
    default_message = "This column already has 5 cards."
