"""
Core primitives: packed bit sets, seeding strategies and error types.
"""

from .errors import (
    BitSpaceError,
    DimensionMismatch,
    InvalidWeight,
    ProbeBudgetExceeded,
    is_dimension_error,
    is_weight_error,
)
from .bitset import FixedBitSet
from .seeding import (
    DEFAULT_SEED,
    SeedStrategy,
    ConstantSeed,
    DerivedSeed,
    SuppliedRng,
    seed_from_string,
    resolve_rng,
)

__all__ = [
    'BitSpaceError',
    'DimensionMismatch',
    'InvalidWeight',
    'ProbeBudgetExceeded',
    'is_dimension_error',
    'is_weight_error',
    'FixedBitSet',
    'DEFAULT_SEED',
    'SeedStrategy',
    'ConstantSeed',
    'DerivedSeed',
    'SuppliedRng',
    'seed_from_string',
    'resolve_rng',
]
