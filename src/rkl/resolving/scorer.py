"""Jaccard distance over character n-grams, used to rank fuzzy candidates."""

from typing import Set


def ngrams(text: str, n: int = 1) -> Set[str]:
    if n < 1:
        raise ValueError(f"n-gram size must be positive, got {n}")
    if len(text) < n:
        return {text} if text else set()
    return {text[i:i + n] for i in range(len(text) - n + 1)}


def jaccard_distance(a: str, b: str, n: int = 1) -> float:
    """
    1 - |A & B| / |A | B| over the n-gram sets of both strings.
    Lower is more similar; identical strings score 0.0.
    """
    grams_a, grams_b = ngrams(a, n), ngrams(b, n)
    union = grams_a | grams_b
    if not union:
        return 0.0
    return 1.0 - len(grams_a & grams_b) / len(union)
