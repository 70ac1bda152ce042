"""
Column-selection players for the automated side
"""

from .average_rank_player import AverageRankPlayer
from .random_player import RandomPlayer

__all__ = ['AverageRankPlayer', 'RandomPlayer']
