"""
Sequential decorrelation of a list of binary vectors.

Works like Gram-Schmidt with real vectors: vector k is adjusted against
every vector before it, so the result depends on list order. Because the
last vector ends up dissimilar from all others, the same routine serves as
negation: ``vectors[-1] NOT (vectors[0] OR ... OR vectors[-2])``.
"""

import logging
from dataclasses import dataclass
from typing import MutableSequence, Optional

from ..config import BitSpaceConfig, get_config
from ..core.seeding import SeedStrategy, constant_seed_strategy
from ..utils.logging_setup import log_operation
from ..vectors.binary import BinaryVector
from .adjuster import adjust_to_half_distance

logger = logging.getLogger(__name__)


@dataclass
class OrthogonalizationResult:
    """Outcome of ``orthogonalize``; truthy on success."""
    success: bool
    adjustments: int = 0
    failed_index: Optional[int] = None
    expected_dimension: Optional[int] = None
    actual_dimension: Optional[int] = None

    def __bool__(self) -> bool:
        return self.success


def orthogonalize(vectors: MutableSequence[BinaryVector],
                  seeding: Optional[SeedStrategy] = None,
                  *,
                  config: Optional[BitSpaceConfig] = None) -> OrthogonalizationResult:
    """
    Make each vector orthogonal (distance n // 2) to all vectors before it.

    Vectors are altered in place; the list itself is not resized. Every
    dimension is checked against ``vectors[0]`` before anything is mutated,
    and the first mismatch is reported as a failed result.

    Args:
        vectors: Vectors to orthogonalize in place
        seeding: Strategy giving the generator for each adjustment; defaults
            to a constant seed, so every adjustment starts from the same draws
        config: Overrides the global configuration

    Returns:
        OrthogonalizationResult
    """
    if not vectors:
        return OrthogonalizationResult(success=True)

    config = config or get_config()
    seeding = seeding or constant_seed_strategy(config)
    dimension = vectors[0].dimension

    for k, vector in enumerate(vectors):
        if vector.dimension != dimension:
            logger.error(
                f"orthogonalize: vector {k} has dimension {vector.dimension}, "
                f"expected {dimension}"
            )
            return OrthogonalizationResult(
                success=False,
                failed_index=k,
                expected_dimension=dimension,
                actual_dimension=vector.dimension,
            )

    log_operation(logger, 'orthogonalize', count=len(vectors), dimension=dimension)

    adjustments = 0
    for k in range(len(vectors)):
        kth_vector = vectors[k]
        for j in range(k):
            adjust_to_half_distance(kth_vector, vectors[j],
                                    seeding.rng_for(kth_vector), config=config)
            adjustments += 1

    return OrthogonalizationResult(success=True, adjustments=adjustments)
