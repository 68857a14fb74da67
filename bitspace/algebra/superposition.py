"""
Weighted superposition of binary vectors.

The binary counterpart of a weighted vector sum followed by normalization:
each output bit is a coin flip biased by the normalized weights of the
inputs that set it.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.bitset import FixedBitSet
from ..core.errors import DimensionMismatch, InvalidWeight
from ..core.seeding import DerivedSeed, SeedStrategy
from ..vectors.binary import BinaryVector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedVector:
    """A binary vector paired with a non-negative weight."""
    vector: BinaryVector
    weight: float


def _validate_weights(weight_a: float, weight_b: float) -> float:
    for weight in (weight_a, weight_b):
        if not math.isfinite(weight) or weight < 0:
            raise InvalidWeight(weight_a, weight_b)
    total = weight_a + weight_b
    if total <= 0:
        raise InvalidWeight(weight_a, weight_b)
    return total


def weighted_combine(a: BinaryVector, weight_a: float,
                     b: BinaryVector, weight_b: float,
                     seeding: Optional[SeedStrategy] = None) -> BinaryVector:
    """
    Per-bit weighted vote between ``a`` and ``b``.

    Bit i is set with probability
    ``(weight_a * a[i] + weight_b * b[i]) / (weight_a + weight_b)``:
    always when both inputs set it, never when neither does. One draw is
    taken per position in order.

    By default the generator is seeded from ``a`` alone, so the same ``a``
    yields the same draws whatever ``b`` and the weights are.

    Raises:
        InvalidWeight: if a weight is negative or not finite, or they sum to zero
        DimensionMismatch: if the vectors differ in dimension
    """
    total = _validate_weights(weight_a, weight_b)
    if a.dimension != b.dimension:
        raise DimensionMismatch(a.dimension, b.dimension, operation='weighted_combine')

    seeding = seeding or DerivedSeed()
    rng = seeding.rng_for(a)

    probability = (weight_a * a.to_bool_array() + weight_b * b.to_bool_array()) / total
    draws = rng.random(a.dimension)
    votes = draws <= probability
    # A zero probability never sets a bit, even on a draw of exactly 0.0
    votes &= probability > 0

    logger.debug(f"weighted_combine: weights {weight_a}/{weight_b}, {int(votes.sum())} bits set")
    return BinaryVector(a.dimension, FixedBitSet.from_bool_array(votes))


def weighted_combine_pairs(first: WeightedVector, second: WeightedVector,
                           seeding: Optional[SeedStrategy] = None) -> BinaryVector:
    """``weighted_combine`` over (vector, weight) pairs."""
    return weighted_combine(first.vector, first.weight,
                            second.vector, second.weight, seeding)
