from enum import Enum, IntEnum

# Table geometry
NUM_COLUMNS = 5
COLUMN_SIZE = 5

# Round timing
INITIAL_DEAL = 5                                  # cards dealt to each side before play
ROUND_LENGTH = NUM_COLUMNS * COLUMN_SIZE * 2      # 50 placements, 25 per side
CONCEALED_FROM_TURN = 40                          # last 10 placements hide the opponent's cards
OPPONENT_THINK_DELAY = 0.6                        # seconds, interactive play only

DEFAULT_SCOREBOARD_FILE = 'scoreboard.pkl'

RANKS = list(range(2, 15))   # 11=J, 12=Q, 13=K, 14=A
SUITS = ['H', 'D', 'C', 'S']


class Side(Enum):
    PLAYER = 0
    OPPONENT = 1


class Outcome(Enum):
    PLAYER_WIN = 0
    OPPONENT_WIN = 1
    TIE = 2


class Comparison(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class Phase(Enum):
    DEALING = 0
    PLAYER_TURN = 1
    OPPONENT_TURN = 2
    SCORING = 3
    TERMINAL = 4


class HandCategory(IntEnum):
    # Value * 1000 is the base strength of the category
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
