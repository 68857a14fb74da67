"""
Binary vector algebra.

Vector-space operations realized in Boolean arithmetic over bit vectors:
Hamming distance, adjustment to orthogonal distance, sequential
orthogonalization, fuzzy intersection, weighted superposition and
projection scoring.
"""

from .distance import hamming_distance
from .adjuster import adjust_to_half_distance
from .orthogonalize import orthogonalize, OrthogonalizationResult
from .intersect import fuzzy_intersect
from .superposition import weighted_combine, weighted_combine_pairs, WeightedVector
from .projection import projection_score

__all__ = [
    'hamming_distance',
    'adjust_to_half_distance',
    'orthogonalize',
    'OrthogonalizationResult',
    'fuzzy_intersect',
    'weighted_combine',
    'weighted_combine_pairs',
    'WeightedVector',
    'projection_score',
]
