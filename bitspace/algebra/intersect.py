"""Fuzzy intersection of binary vectors."""

import logging
from typing import Optional

import numpy as np

from ..config import ACCEPTANCE_THRESHOLD, BitSpaceConfig, get_config
from ..core.bitset import FixedBitSet
from ..core.errors import DimensionMismatch
from ..core.seeding import resolve_rng
from ..vectors.binary import BinaryVector

logger = logging.getLogger(__name__)


def fuzzy_intersect(a: BinaryVector,
                    b: BinaryVector,
                    rng: Optional[np.random.Generator] = None,
                    *,
                    config: Optional[BitSpaceConfig] = None) -> BinaryVector:
    """
    Approximate intersection of ``a`` and ``b``.

    The result matches both inputs wherever they agree. Each disputed
    position, in increasing order, gets one draw and takes ``b``'s bit when
    the draw exceeds 0.5, ``a``'s bit otherwise.

    Raises:
        DimensionMismatch: if the vectors differ in dimension
    """
    if a.dimension != b.dimension:
        raise DimensionMismatch(a.dimension, b.dimension, operation='fuzzy_intersect')
    config = config or get_config()

    result = a.to_bool_array()
    differs = np.flatnonzero(result ^ b.to_bool_array())
    if differs.size:
        rng = resolve_rng(rng, config)
        draws = rng.random(differs.size)
        flipped = differs[draws > ACCEPTANCE_THRESHOLD]
        result[flipped] = ~result[flipped]
        logger.debug(f"fuzzy_intersect: {flipped.size}/{differs.size} disputed bits flipped")

    return BinaryVector(a.dimension, FixedBitSet.from_bool_array(result))
