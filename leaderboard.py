"""
Daily leaderboard ranking over entries supplied by the caller.
"""
from dataclasses import dataclass, field
from typing import List

from game_logic import calculate_score, normalize_history

DEFAULT_LIMIT = 5


@dataclass
class LeaderboardEntry:
    user_id: str
    score: int
    guesses: List[List[str]] = field(default_factory=list)


def build_entry(user_id, history) -> LeaderboardEntry:
    history = normalize_history(history)
    return LeaderboardEntry(user_id=user_id, score=calculate_score(history), guesses=history)


def rank_entries(entries, limit=DEFAULT_LIMIT):
    # Score only; sorted() is stable so equal scores keep their input order
    ordered = sorted(entries, key=lambda e: e.score, reverse=True)
    if limit is not None:
        ordered = ordered[:limit]

    leaderboard = []
    for i, e in enumerate(ordered, start=1):
        leaderboard.append({
            "rank": i,
            "userId": e.user_id,
            "score": e.score,
            "guessesCount": len(e.guesses),
        })
    return leaderboard
