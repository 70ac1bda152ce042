"""
Win/loss records keyed by player name, stored in a pickle file
"""

import os
import pickle
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.game_constants import DEFAULT_SCOREBOARD_FILE, Outcome


@dataclass(frozen=True)
class PlayerRecord:
    name: str
    wins: int
    losses: int


def default_scoreboard_path():
    return os.environ.get('CHINESE_POKER_SCOREBOARD', DEFAULT_SCOREBOARD_FILE)


class ScoreboardStore:
    def __init__(self, filename: Optional[str] = None, verbose: bool = False):
        self.filename = filename or default_scoreboard_path()
        self.verbose = verbose

    def _load(self) -> Dict[str, Dict[str, int]]:
        if not os.path.exists(self.filename):
            return {}
        with open(self.filename, 'rb') as f:
            data = pickle.load(f)
        if not isinstance(data, dict) or 'users' not in data:
            raise ValueError(f"{self.filename} is not a scoreboard file")
        return data['users']

    def _save(self, users: Dict[str, Dict[str, int]]):
        tmp = self.filename + '.tmp'
        with open(tmp, 'wb') as f:
            pickle.dump({'type': 'Scoreboard', 'version': '1.0', 'users': users}, f)
        os.replace(tmp, self.filename)

    def record_outcome(self, player_name: str, outcome: Outcome):
        """Count a win or a loss for player_name. Ties are not recorded."""
        if outcome == Outcome.TIE or not player_name:
            return
        users = self._load()
        entry = users.setdefault(player_name, {'wins': 0, 'losses': 0})
        if outcome == Outcome.PLAYER_WIN:
            entry['wins'] += 1
        else:
            entry['losses'] += 1
        self._save(users)
        if self.verbose:
            print(f"Scoreboard updated for {player_name}: W {entry['wins']} | L {entry['losses']}")

    def fetch_all_records(self) -> List[PlayerRecord]:
        """All players, most wins first"""
        records = [PlayerRecord(name, d.get('wins', 0), d.get('losses', 0))
                   for name, d in self._load().items()]
        return sorted(records, key=lambda r: r.wins, reverse=True)


def record_outcome_best_effort(store, player_name, outcome, verbose=True):
    """Write the outcome, but never let a storage failure end the round"""
    try:
        store.record_outcome(player_name, outcome)
        return True
    except Exception as e:
        if verbose:
            print(f"WARNING: Could not record {outcome.name} for {player_name}: {e}")
        return False


def format_scoreboard(records: List[PlayerRecord]):
    if not records:
        return "No games recorded yet."
    width = max(len(r.name) for r in records)
    return "\n".join(f"{i:2d}. {r.name.ljust(width)}  W: {r.wins} | L: {r.losses}"
                     for i, r in enumerate(records, 1))
