import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .errors import EmptyDeckError
from .game_constants import RANKS, SUITS, Comparison, HandCategory

RANK_NAMES = {11: 'J', 12: 'Q', 13: 'K', 14: 'A'}
NAME_TO_RANK = {name: rank for rank, name in RANK_NAMES.items()}


@dataclass(frozen=True)
class Card:
    rank: int   # 2..14, ace high
    suit: str   # H, D, C, S

    def __post_init__(self):
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank {self.rank!r}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit {self.suit!r}")

    @classmethod
    def from_string(cls, text):
        """Parse '10H', 'AS', 'qd' style card names"""
        text = text.strip().upper()
        rank_part, suit = text[:-1], text[-1:]
        if rank_part in NAME_TO_RANK:
            rank = NAME_TO_RANK[rank_part]
        elif rank_part.isdigit():
            rank = int(rank_part)
        else:
            raise ValueError(f"Invalid card {text!r}")
        return cls(rank, suit)

    @property
    def rank_name(self):
        return RANK_NAMES.get(self.rank, str(self.rank))

    def __str__(self):
        return f"{self.rank_name}{self.suit}"

    def __repr__(self):
        return str(self)


def full_deck():
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


@dataclass(frozen=True)
class Deck:
    """Ordered draw pile. Drawing returns the card and the shorter deck."""
    cards: Tuple[Card, ...] = ()

    def draw(self) -> Tuple[Card, 'Deck']:
        if not self.cards:
            raise EmptyDeckError()
        return self.cards[0], Deck(self.cards[1:])

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)


def new_shuffled_deck(rng: Optional[random.Random] = None) -> Deck:
    """All 52 rank x suit combinations in uniformly random order"""
    rng = rng or random.Random()
    cards = full_deck()
    rng.shuffle(cards)
    return Deck(tuple(cards))


def _key_rank(rank_counts, count):
    return max(rank for rank, c in rank_counts.items() if c == count)


def classify_hand(cards: Sequence[Card]) -> Tuple[HandCategory, int]:
    """
    Classify a 5-card hand

    Returns (category, key rank). The key rank is the high card for
    straights, flushes and high-card hands, otherwise the rank of the
    largest repeated group (higher pair for two pair).
    """
    if len(cards) != 5:
        raise ValueError(f"A hand must have exactly 5 cards, got {len(cards)}")

    ranks = sorted(c.rank for c in cards)
    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True)

    is_flush = len(set(c.suit for c in cards)) == 1
    # No wheel: A-2-3-4-5 is ranks 2,3,4,5,14 and not contiguous
    is_straight = len(rank_counts) == 5 and ranks[-1] - ranks[0] == 4
    high = ranks[-1]

    if is_flush and is_straight:
        return HandCategory.STRAIGHT_FLUSH, high
    if counts == [4, 1]:
        return HandCategory.FOUR_OF_A_KIND, _key_rank(rank_counts, 4)
    if counts == [3, 2]:
        return HandCategory.FULL_HOUSE, _key_rank(rank_counts, 3)
    if is_flush:
        return HandCategory.FLUSH, high
    if is_straight:
        return HandCategory.STRAIGHT, high
    if counts == [3, 1, 1]:
        return HandCategory.THREE_OF_A_KIND, _key_rank(rank_counts, 3)
    if counts == [2, 2, 1]:
        return HandCategory.TWO_PAIR, _key_rank(rank_counts, 2)
    if counts == [2, 1, 1, 1]:
        return HandCategory.ONE_PAIR, _key_rank(rank_counts, 2)
    return HandCategory.HIGH_CARD, high


def evaluate_hand(cards: Sequence[Card]) -> int:
    """Score a 5-card column: category * 1000 + key rank (kickers ignored)"""
    category, key_rank = classify_hand(cards)
    return category * 1000 + key_rank


def hand_category(cards: Sequence[Card]) -> HandCategory:
    return classify_hand(cards)[0]


def compare_hands(h1: Iterable[Card], h2: Iterable[Card]) -> Comparison:
    diff = evaluate_hand(list(h1)) - evaluate_hand(list(h2))
    if diff > 0:
        return Comparison.GREATER
    if diff < 0:
        return Comparison.LESS
    return Comparison.EQUAL
