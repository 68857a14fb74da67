"""
Decorrelation diagnostics for binary vectors.

Under the random bit-vector model the Hamming distance between two
unrelated n-bit vectors follows Binomial(n, 0.5), centred on the orthogonal
distance n/2 with standard deviation sqrt(n)/2. These helpers express how
far a measured distance sits from that expectation.
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence

from scipy import stats

from ..core.errors import DimensionMismatch
from ..algebra.distance import hamming_distance
from ..vectors.binary import BinaryVector


def distance_z_score(distance: int, dimension: int) -> float:
    """Standardized deviation of ``distance`` from n/2."""
    if dimension <= 0:
        raise ValueError(f"dimension must be positive, got {dimension}")
    return (distance - dimension / 2.0) / math.sqrt(dimension / 4.0)


def distance_p_value(distance: int, dimension: int) -> float:
    """Two-sided binomial test p-value of ``distance`` against Binomial(n, 0.5)."""
    if dimension <= 0:
        raise ValueError(f"dimension must be positive, got {dimension}")
    return float(stats.binomtest(int(distance), int(dimension), 0.5).pvalue)


@dataclass
class PairStatistic:
    """Distance statistics for one vector pair (i < j)."""
    i: int
    j: int
    distance: int
    deviation: int
    z_score: float


@dataclass
class DecorrelationReport:
    """Pairwise distance statistics for a list of vectors."""
    dimension: int
    pairs: List[PairStatistic] = field(default_factory=list)

    @property
    def max_abs_deviation(self) -> int:
        return max((abs(p.deviation) for p in self.pairs), default=0)

    @property
    def mean_distance(self) -> float:
        if not self.pairs:
            return 0.0
        return sum(p.distance for p in self.pairs) / len(self.pairs)

    def is_orthogonal(self, tolerance: int = 0) -> bool:
        """True when every pair lies within ``tolerance`` of n // 2."""
        return self.max_abs_deviation <= tolerance


def orthogonality_report(vectors: Sequence[BinaryVector]) -> DecorrelationReport:
    """
    Compare every pair of vectors against the orthogonal distance n // 2.

    Raises:
        DimensionMismatch: if the vectors differ in dimension
    """
    if not vectors:
        return DecorrelationReport(dimension=0)

    dimension = vectors[0].dimension
    for vector in vectors[1:]:
        if vector.dimension != dimension:
            raise DimensionMismatch(dimension, vector.dimension, operation='orthogonality_report')

    report = DecorrelationReport(dimension=dimension)
    for i in range(len(vectors)):
        for j in range(i + 1, len(vectors)):
            distance = hamming_distance(vectors[i], vectors[j])
            report.pairs.append(PairStatistic(
                i=i,
                j=j,
                distance=distance,
                deviation=distance - dimension // 2,
                z_score=distance_z_score(distance, dimension),
            ))
    return report
