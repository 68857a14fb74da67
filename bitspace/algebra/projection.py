"""Scoring a vector against a binary pseudo-subspace."""

from typing import Iterable

from ..vectors.base import Vector


def projection_score(query: Vector, candidates: Iterable[Vector]) -> float:
    """
    Sum of ``query.measure_overlap(c)`` over every candidate.

    The binary stand-in for comparing a vector with its projection onto a
    subspace. All overlaps are summed, negative ones included.
    """
    score = 0.0
    for candidate in candidates:
        score += query.measure_overlap(candidate)
    return float(score)
