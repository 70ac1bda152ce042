"""
Headless bot-vs-bot evaluation of column-selection strategies
Plays many seeded rounds and summarizes them with numpy
"""

import random
import numpy as np
from typing import Dict, Optional

from core.game_constants import NUM_COLUMNS, HandCategory, Outcome
from core.game_engine import ChinesePoker


def simulate_matches(player_strategy, opponent_strategy, num_rounds: int = 100,
                     seed: Optional[int] = None, verbose: bool = True) -> Dict:
    """
    Play num_rounds complete rounds between two strategies

    Args:
        player_strategy: strategy for the first seat (takes the human side)
        opponent_strategy: strategy for the automated seat
        num_rounds: rounds to play
        seed: base seed; round i uses seed + i so runs are reproducible
        verbose: print a summary when done

    Returns:
        Dictionary of win/tie rates, average columns won, per-column win
        rates and hand category frequencies for both seats
    """
    if num_rounds <= 0:
        raise ValueError("num_rounds must be positive")

    base_seed = seed if seed is not None else random.randrange(2 ** 31)

    outcomes = np.zeros(num_rounds, dtype=int)
    player_cols = np.zeros((num_rounds, NUM_COLUMNS), dtype=int)
    opponent_cols = np.zeros((num_rounds, NUM_COLUMNS), dtype=int)
    player_strengths = np.zeros((num_rounds, NUM_COLUMNS), dtype=int)
    opponent_strengths = np.zeros((num_rounds, NUM_COLUMNS), dtype=int)

    for i in range(num_rounds):
        game = ChinesePoker("Sim", opponent_strategy=opponent_strategy,
                            rng=random.Random(base_seed + i), verbose=False,
                            player_strategy=player_strategy)
        result = game.play_round()

        outcomes[i] = result.outcome.value
        for col in result.columns:
            player_strengths[i, col.column] = col.player_strength
            opponent_strengths[i, col.column] = col.opponent_strength
        player_cols[i] = player_strengths[i] > opponent_strengths[i]
        opponent_cols[i] = opponent_strengths[i] > player_strengths[i]

    num_categories = len(HandCategory)
    player_categories = np.bincount((player_strengths // 1000).ravel(), minlength=num_categories)
    opponent_categories = np.bincount((opponent_strengths // 1000).ravel(), minlength=num_categories)
    total_columns = num_rounds * NUM_COLUMNS

    results = {
        'num_rounds': num_rounds,
        'seed': base_seed,
        'player_win_rate': float(np.mean(outcomes == Outcome.PLAYER_WIN.value)),
        'opponent_win_rate': float(np.mean(outcomes == Outcome.OPPONENT_WIN.value)),
        'tie_rate': float(np.mean(outcomes == Outcome.TIE.value)),
        'avg_player_columns': float(player_cols.sum(axis=1).mean()),
        'avg_opponent_columns': float(opponent_cols.sum(axis=1).mean()),
        'player_column_win_rates': player_cols.mean(axis=0).tolist(),
        'opponent_column_win_rates': opponent_cols.mean(axis=0).tolist(),
        'avg_player_strength': float(player_strengths.mean()),
        'avg_opponent_strength': float(opponent_strengths.mean()),
        'player_categories': {c.name: float(player_categories[c] / total_columns) for c in HandCategory},
        'opponent_categories': {c.name: float(opponent_categories[c] / total_columns) for c in HandCategory},
    }

    if verbose:
        print_simulation_summary(results,
                                 getattr(player_strategy, 'name', type(player_strategy).__name__),
                                 getattr(opponent_strategy, 'name', type(opponent_strategy).__name__))
    return results


def print_simulation_summary(results: Dict, player_label="Player", opponent_label="Opponent"):
    print(f"\n{'=' * 60}")
    print(f"SIMULATION: {player_label} vs {opponent_label} ({results['num_rounds']} rounds, seed {results['seed']})")
    print(f"{'=' * 60}")
    print(f"  {player_label} wins:   {results['player_win_rate']:.1%}")
    print(f"  {opponent_label} wins: {results['opponent_win_rate']:.1%}")
    print(f"  Ties:          {results['tie_rate']:.1%}")
    print(f"  Avg columns won: {results['avg_player_columns']:.2f} vs {results['avg_opponent_columns']:.2f}")
    print(f"  Avg column strength: {results['avg_player_strength']:.0f} vs {results['avg_opponent_strength']:.0f}")

    print("\n  Column win rates:")
    for i, (p, o) in enumerate(zip(results['player_column_win_rates'],
                                   results['opponent_column_win_rates'])):
        print(f"    Column {i + 1}: {p:.1%} vs {o:.1%}")

    print("\n  Hand categories:")
    for name in reversed([c.name for c in HandCategory]):
        p = results['player_categories'][name]
        o = results['opponent_categories'][name]
        if p or o:
            print(f"    {name:<16} {p:6.1%}  {o:6.1%}")
