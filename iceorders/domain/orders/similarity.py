from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions turning ``a`` into ``b``."""
    return Levenshtein.distance(a, b)


def normalize_name(name: str) -> str:
    return name.lower().strip()


def names_similar(a: str, b: str, threshold: int = 2, min_length: int = 4) -> bool:
    n1 = normalize_name(a)
    n2 = normalize_name(b)
    if n1 == n2:
        return True
    # Short names carry too little signal for edit distance ("jo" vs "to").
    if len(n1) < min_length or len(n2) < min_length:
        return False
    return Levenshtein.distance(n1, n2, score_cutoff=threshold) <= threshold
