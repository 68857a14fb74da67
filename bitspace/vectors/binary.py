"""
Binary vectors for Hamming-space semantics.

A BinaryVector wraps a FixedBitSet of fixed dimension. Similarity is derived
from Hamming distance: identical vectors overlap at 1.0, vectors at distance
n/2 (orthogonal in binary space) at 0.0, and complements at -1.0.
"""

from typing import Optional

import numpy as np

from ..core.bitset import FixedBitSet
from ..core.errors import DimensionMismatch


class BinaryVector:
    """
    Fixed-dimension bit vector.

    Attributes:
        bit_set: Underlying packed bits; mutated in place by the adjuster
    """

    __slots__ = ("bit_set",)

    def __init__(self, dimension: int, bit_set: Optional[FixedBitSet] = None):
        """
        Args:
            dimension: Number of bits, must be positive
            bit_set: Existing bits to wrap (not copied); zeros if omitted
        """
        if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)) or dimension <= 0:
            raise ValueError(f"dimension must be a positive integer, got {dimension!r}")
        if bit_set is None:
            bit_set = FixedBitSet(int(dimension))
        elif bit_set.length != dimension:
            raise DimensionMismatch(int(dimension), bit_set.length, operation='BinaryVector')
        self.bit_set = bit_set

    @property
    def dimension(self) -> int:
        return self.bit_set.length

    @classmethod
    def from_bits(cls, bits) -> "BinaryVector":
        """Build from a sequence of truth values (or 0/1 ints)."""
        bit_set = FixedBitSet.from_bool_array(bits)
        return cls(bit_set.length, bit_set)

    @classmethod
    def generate_random_vector(cls, dimension: int,
                               rng: Optional[np.random.Generator] = None) -> "BinaryVector":
        """
        Random vector with exactly ``dimension // 2`` bits set.

        Such vectors sit at expected distance n/2 from each other.
        """
        rng = rng if rng is not None else np.random.default_rng()
        bits = np.zeros(dimension, dtype=bool)
        bits[rng.permutation(dimension)[:dimension // 2]] = True
        return cls.from_bits(bits)

    def _check_dimension(self, other: "BinaryVector", operation: str) -> None:
        if other.dimension != self.dimension:
            raise DimensionMismatch(self.dimension, other.dimension, operation=operation)

    def measure_overlap(self, other: "BinaryVector") -> float:
        """Overlap ``1 - 2 * hamming / n``."""
        self._check_dimension(other, 'measure_overlap')
        distance = FixedBitSet.xor_count(self.bit_set, other.bit_set)
        return 1.0 - 2.0 * distance / self.dimension

    def copy(self) -> "BinaryVector":
        return BinaryVector(self.dimension, self.bit_set.clone())

    def is_zero_vector(self) -> bool:
        return self.bit_set.cardinality() == 0

    def to_seed_string(self) -> str:
        return self.bit_set.to_seed_string()

    def to_bool_array(self) -> np.ndarray:
        return self.bit_set.to_bool_array()

    def __getitem__(self, index: int) -> bool:
        return self.bit_set.get(index)

    def __len__(self) -> int:
        return self.dimension

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryVector):
            return NotImplemented
        return self.bit_set == other.bit_set

    __hash__ = None

    def __repr__(self) -> str:
        return f"BinaryVector(dimension={self.dimension}, set_bits={self.bit_set.cardinality()})"


def create_zero_vector(dimension: int) -> BinaryVector:
    """Allocate an all-zero binary vector."""
    return BinaryVector(dimension)
