"""bitspace - Vector-space algebra over binary (Hamming) representations."""

__version__ = "0.1.0"

from .core.errors import BitSpaceError, DimensionMismatch, InvalidWeight
from .core.bitset import FixedBitSet
from .core.seeding import ConstantSeed, DerivedSeed, SuppliedRng
from .vectors import Vector, BinaryVector, create_zero_vector
from .algebra import (
    hamming_distance,
    adjust_to_half_distance,
    orthogonalize,
    OrthogonalizationResult,
    fuzzy_intersect,
    weighted_combine,
    weighted_combine_pairs,
    WeightedVector,
    projection_score,
)
from .config import BitSpaceConfig, get_config

__all__ = [
    "BitSpaceError",
    "DimensionMismatch",
    "InvalidWeight",
    "FixedBitSet",
    "ConstantSeed",
    "DerivedSeed",
    "SuppliedRng",
    "Vector",
    "BinaryVector",
    "create_zero_vector",
    "hamming_distance",
    "adjust_to_half_distance",
    "orthogonalize",
    "OrthogonalizationResult",
    "fuzzy_intersect",
    "weighted_combine",
    "weighted_combine_pairs",
    "WeightedVector",
    "projection_score",
    "BitSpaceConfig",
    "get_config",
    "__version__",
]
