from .game_constants import Side


class Player:
    def __init__(self, name, side=Side.PLAYER, is_ai=False, strategy=None):
        self.name = name
        self.side = side
        self.is_ai = is_ai
        self.strategy = strategy  # anything with choose_column(board, card)

    def choose_column(self, board, card):
        if self.strategy is None:
            raise ValueError(f"{self.name} has no strategy to choose a column with")
        return self.strategy.choose_column(board, card)

    def __repr__(self):
        kind = type(self.strategy).__name__ if self.is_ai else 'human'
        return f"Player({self.name!r}, {self.side.name}, {kind})"
