import random
import time
from dataclasses import dataclass, replace
from typing import FrozenSet, Optional, Tuple

from .board import Board
from .card_deck import Card, Deck, new_shuffled_deck
from .errors import IllegalColumnError, OutOfTurnError
from .game_constants import (COLUMN_SIZE, CONCEALED_FROM_TURN, INITIAL_DEAL, NUM_COLUMNS,
                             OPPONENT_THINK_DELAY, ROUND_LENGTH, Outcome, Phase, Side)
from .player import Player
from .scoring import RoundResult, score_round


@dataclass(frozen=True)
class RoundState:
    """One version of a round. Transitions return a new RoundState."""
    deck: Deck
    player_board: Board = Board()
    opponent_board: Board = Board()
    turn_number: int = 0
    is_player_turn: bool = True
    current_card: Optional[Card] = None
    phase: Phase = Phase.DEALING
    concealed: FrozenSet[Tuple[int, int]] = frozenset()   # (column, row) on the opponent board

    @property
    def card_concealed(self):
        """Pending card is face down while the opponent is about to play late in the round"""
        return (self.phase == Phase.OPPONENT_TURN and self.current_card is not None
                and self.turn_number >= CONCEALED_FROM_TURN)

    def legal_columns(self):
        if self.phase == Phase.PLAYER_TURN:
            return self.player_board.legal_columns()
        if self.phase == Phase.OPPONENT_TURN:
            return self.opponent_board.legal_columns()
        return frozenset()


@dataclass(frozen=True)
class TableView:
    """What the human side is allowed to see"""
    phase: Phase
    turn_number: int
    is_player_turn: bool
    legal_columns: FrozenSet[int]
    pending_card: Optional[Card]
    card_concealed: bool
    player_columns: Tuple[Tuple[Card, ...], ...]
    opponent_columns: Tuple[Tuple[Optional[Card], ...], ...]   # None = face down
    cards_left: int


def start_round(rng: Optional[random.Random] = None) -> RoundState:
    return RoundState(deck=new_shuffled_deck(rng))


def _draw_next(state: RoundState) -> RoundState:
    if state.turn_number >= ROUND_LENGTH:
        return replace(state, current_card=None)
    card, deck = state.deck.draw()
    return replace(state, current_card=card, deck=deck)


def deal_initial_cards(state: RoundState, rng: Optional[random.Random] = None) -> RoundState:
    """Deal five cards to each side into random legal columns, then draw the first card"""
    if state.phase != Phase.DEALING:
        raise OutOfTurnError(f"Cannot deal during {state.phase.name}")
    rng = rng or random.Random()

    deck = state.deck
    turn = state.turn_number
    boards = {Side.PLAYER: state.player_board, Side.OPPONENT: state.opponent_board}
    for side in (Side.PLAYER, Side.OPPONENT):
        for _ in range(INITIAL_DEAL):
            card, deck = deck.draw()
            column = rng.choice(sorted(boards[side].legal_columns()))
            boards[side] = boards[side].place(column, card)
            turn += 1

    state = replace(state, deck=deck, turn_number=turn,
                    player_board=boards[Side.PLAYER], opponent_board=boards[Side.OPPONENT],
                    is_player_turn=True, phase=Phase.PLAYER_TURN)
    return _draw_next(state)


def apply_player_move(state: RoundState, column) -> RoundState:
    if state.phase != Phase.PLAYER_TURN:
        raise OutOfTurnError(f"It is not the player's turn ({state.phase.name})")

    board = state.player_board.place(column, state.current_card)
    state = replace(state, player_board=board, turn_number=state.turn_number + 1,
                    is_player_turn=False, phase=Phase.OPPONENT_TURN, current_card=None)
    return _draw_next(state)


def apply_opponent_turn(state: RoundState, strategy) -> RoundState:
    """Let the strategy place the pending card on the opponent board"""
    if state.phase != Phase.OPPONENT_TURN:
        raise OutOfTurnError(f"It is not the opponent's turn ({state.phase.name})")

    card = state.current_card
    column = strategy.choose_column(state.opponent_board, card)
    board = state.opponent_board.place(column, card)
    row = len(board.column(column)) - 1

    concealed = state.concealed
    if row == COLUMN_SIZE - 1 or state.turn_number >= CONCEALED_FROM_TURN:
        concealed = concealed | {(column, row)}

    turn = state.turn_number + 1
    state = replace(state, opponent_board=board, concealed=concealed,
                    turn_number=turn, current_card=None)
    if turn == ROUND_LENGTH:
        return replace(state, is_player_turn=False, phase=Phase.SCORING)
    return _draw_next(replace(state, is_player_turn=True, phase=Phase.PLAYER_TURN))


def reveal(state: RoundState) -> RoundState:
    return replace(state, concealed=frozenset())


def finish_round(state: RoundState) -> Tuple[RoundState, RoundResult]:
    """Reveal every face-down card and score the round"""
    if state.phase != Phase.SCORING:
        raise OutOfTurnError(f"Round is not ready for scoring ({state.phase.name})")
    state = reveal(state)
    result = score_round(state.player_board, state.opponent_board)
    return replace(state, phase=Phase.TERMINAL), result


def table_view(state: RoundState) -> TableView:
    opponent_columns = tuple(
        tuple(None if (c, r) in state.concealed else card for r, card in enumerate(col))
        for c, col in enumerate(state.opponent_board.columns)
    )
    concealed = state.card_concealed
    return TableView(
        phase=state.phase,
        turn_number=state.turn_number,
        is_player_turn=state.is_player_turn,
        legal_columns=state.legal_columns(),
        pending_card=None if concealed else state.current_card,
        card_concealed=concealed,
        player_columns=state.player_board.columns,
        opponent_columns=opponent_columns,
        cards_left=len(state.deck),
    )


def _cell(card, hidden_marker='##'):
    if card is None:
        return hidden_marker.rjust(3)
    return str(card).rjust(3)


def format_table(view: TableView, opponent_name="Bot", player_name="You"):
    """Text rendering of both boards, rows top to bottom"""
    header = "     " + "  ".join(f"C{i + 1}".rjust(3) for i in range(NUM_COLUMNS))
    lines = [f"{opponent_name}:", header]
    for row in range(COLUMN_SIZE):
        cells = []
        for col in view.opponent_columns:
            cells.append(_cell(col[row]) if row < len(col) else '  .')
        lines.append(f"  {row + 1}  " + "  ".join(cells))

    if view.card_concealed:
        pending = '## (face down)'
    elif view.pending_card is not None:
        pending = str(view.pending_card)
    else:
        pending = '-'
    lines.append("")
    lines.append(f"Turn {view.turn_number}/{ROUND_LENGTH}   Next card: {pending}   Deck: {view.cards_left}")
    lines.append("")

    lines.append(f"{player_name}:")
    lines.append(header)
    for row in range(COLUMN_SIZE):
        cells = []
        for col in view.player_columns:
            cells.append(_cell(col[row]) if row < len(col) else '  .')
        lines.append(f"  {row + 1}  " + "  ".join(cells))
    return "\n".join(lines)


def format_result(result: RoundResult, player_name="You", opponent_name="Bot"):
    lines = ["--- Showdown ---"]
    for col in result.columns:
        if col.winner == Side.PLAYER:
            winner = player_name
        elif col.winner == Side.OPPONENT:
            winner = opponent_name
        else:
            winner = "tie"
        lines.append(f"Column {col.column + 1}: {col.player_category.name} ({col.player_strength}) vs "
                     f"{col.opponent_category.name} ({col.opponent_strength}) -> {winner}")
    if result.outcome == Outcome.PLAYER_WIN:
        title = f"{player_name} wins!"
    elif result.outcome == Outcome.OPPONENT_WIN:
        title = f"{opponent_name} wins!"
    else:
        title = "It's a tie!"
    lines.append(f"{title} ({result.player_wins}-{result.opponent_wins})")
    return "\n".join(lines)


class ChinesePoker:
    """
    Holds the current RoundState for a human (or scripted) player against
    an automated opponent and records finished rounds on the scoreboard
    """

    def __init__(self, player_name="You", opponent_strategy=None, rng=None, scoreboard=None,
                 verbose=True, think_delay=0.0, player_strategy=None):
        if opponent_strategy is None:
            from strategy.average_rank_player import AverageRankPlayer
            opponent_strategy = AverageRankPlayer()

        self.rng = rng or random.Random()
        self.player = Player(player_name, Side.PLAYER, is_ai=player_strategy is not None,
                             strategy=player_strategy)
        self.opponent = Player("Bot", Side.OPPONENT, is_ai=True, strategy=opponent_strategy)
        self.scoreboard = scoreboard
        self.verbose = verbose
        self.think_delay = think_delay
        self.state = None
        self.result = None

    def new_round(self):
        """Fresh deck and boards; any in-progress round is discarded"""
        state = start_round(self.rng)
        self.state = deal_initial_cards(state, self.rng)
        self.result = None
        if self.verbose:
            print("\n--- New round ---")
        return self.view()

    restart = new_round

    def view(self) -> TableView:
        if self.state is None:
            raise OutOfTurnError("No round in progress")
        return table_view(self.state)

    @property
    def is_over(self):
        return self.state is not None and self.state.phase == Phase.TERMINAL

    def play_column(self, column):
        """Human placement. Raises IllegalColumnError and leaves the state untouched."""
        if self.state is None:
            raise OutOfTurnError("No round in progress")
        card = self.state.current_card
        self.state = apply_player_move(self.state, column)
        if self.verbose:
            print(f"{self.player.name} places {card} in column {column + 1}")
        return self.view()

    def opponent_turn(self):
        if self.state is None:
            raise OutOfTurnError("No round in progress")
        self.state = apply_opponent_turn(self.state, self.opponent.strategy)
        if self.verbose:
            print(f"{self.opponent.name} places a card ({self.state.turn_number}/{ROUND_LENGTH})")
        if self.state.phase == Phase.SCORING:
            self.finish()
        return self.view()

    def finish(self) -> RoundResult:
        if self.state is None:
            raise OutOfTurnError("No round in progress")
        self.state, self.result = finish_round(self.state)
        if self.verbose:
            print(format_result(self.result, self.player.name, self.opponent.name))
        if self.scoreboard is not None:
            from utils.scoreboard import record_outcome_best_effort
            record_outcome_best_effort(self.scoreboard, self.player.name, self.result.outcome,
                                       verbose=self.verbose)
        return self.result

    def play_round(self) -> RoundResult:
        """Play a complete round, prompting on stdin when the player is human"""
        self.new_round()
        while not self.is_over:
            if self.state.phase == Phase.PLAYER_TURN:
                if self.player.is_ai:
                    column = self.player.choose_column(self.state.player_board, self.state.current_card)
                else:
                    column = self.get_human_column()
                try:
                    self.play_column(column)
                except IllegalColumnError as e:
                    print(f"\n{e.title}: {e.message}")
            elif self.state.phase == Phase.OPPONENT_TURN:
                if self.think_delay > 0:
                    time.sleep(self.think_delay)
                self.opponent_turn()
            else:
                self.finish()
        return self.result

    def get_human_column(self):
        """Read a 1-based column number from the human player"""
        view = self.view()
        print()
        print(format_table(view, self.opponent.name, self.player.name))
        legal = ", ".join(str(c + 1) for c in sorted(view.legal_columns))
        while True:
            choice = input(f"Place {view.pending_card} in column ({legal}): ").strip()
            if choice.isdigit() and 1 <= int(choice) <= NUM_COLUMNS:
                return int(choice) - 1
            print(f"Invalid choice. Enter a number from 1 to {NUM_COLUMNS}.")


def interactive_game(player_name, scoreboard=None, rng=None):
    return ChinesePoker(player_name, rng=rng, scoreboard=scoreboard, verbose=True,
                        think_delay=OPPONENT_THINK_DELAY)
