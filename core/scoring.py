"""
End-of-round scoring: column-by-column showdown between the two boards
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board
from .card_deck import evaluate_hand, hand_category
from .game_constants import NUM_COLUMNS, HandCategory, Outcome, Side


@dataclass(frozen=True)
class ColumnResult:
    column: int
    player_strength: int
    opponent_strength: int
    player_category: HandCategory
    opponent_category: HandCategory
    winner: Optional[Side]   # None on equal strength


@dataclass(frozen=True)
class RoundResult:
    outcome: Outcome
    columns: Tuple[ColumnResult, ...]
    player_wins: int
    opponent_wins: int

    @property
    def ties(self):
        return sum(1 for c in self.columns if c.winner is None)


def aggregate_outcome(player_wins, opponent_wins) -> Outcome:
    if player_wins > opponent_wins:
        return Outcome.PLAYER_WIN
    if opponent_wins > player_wins:
        return Outcome.OPPONENT_WIN
    return Outcome.TIE


def score_column(column, player_cards, opponent_cards) -> ColumnResult:
    p_strength = evaluate_hand(player_cards)
    o_strength = evaluate_hand(opponent_cards)
    if p_strength > o_strength:
        winner = Side.PLAYER
    elif o_strength > p_strength:
        winner = Side.OPPONENT
    else:
        winner = None
    return ColumnResult(
        column=column,
        player_strength=p_strength,
        opponent_strength=o_strength,
        player_category=hand_category(player_cards),
        opponent_category=hand_category(opponent_cards),
        winner=winner,
    )


def score_round(player_board: Board, opponent_board: Board) -> RoundResult:
    """Compare both completed boards column by column"""
    if not (player_board.is_complete() and opponent_board.is_complete()):
        raise ValueError("Both boards must be complete before scoring")

    columns = tuple(
        score_column(i, player_board.column(i), opponent_board.column(i))
        for i in range(NUM_COLUMNS)
    )
    player_wins = sum(1 for c in columns if c.winner == Side.PLAYER)
    opponent_wins = sum(1 for c in columns if c.winner == Side.OPPONENT)
    return RoundResult(
        outcome=aggregate_outcome(player_wins, opponent_wins),
        columns=columns,
        player_wins=player_wins,
        opponent_wins=opponent_wins,
    )
