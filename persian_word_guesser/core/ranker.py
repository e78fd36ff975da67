# ranker.py - orders raw search candidates for display

from typing import List, Mapping, Tuple

MAX_RETURNED_GUESSES = 30


def ranked_pairs(
    candidates: Mapping[str, int], limit: int = MAX_RETURNED_GUESSES
) -> List[Tuple[str, int]]:
    """
    Sort (word, rank) pairs by rank, highest first, and keep the top `limit`.
    Equal ranks fall back to the word so the order is stable for tests.
    """
    if limit <= 0:
        return []
    ordered = sorted(candidates.items(), key=lambda kv: (-kv[1], kv[0]))
    return ordered[:limit]


def rank_candidates(
    candidates: Mapping[str, int], limit: int = MAX_RETURNED_GUESSES
) -> List[str]:
    """Words only, most recently promoted first."""
    return [word for word, _rank in ranked_pairs(candidates, limit)]
