"""
Hamming adjustment toward binary orthogonality.

The binary analog of one Gram-Schmidt step: rather than subtracting a
projection, perturb just enough bits of the target that its Hamming
distance to the reference becomes exactly n/2.
"""

import logging
from typing import Optional

import numpy as np

from ..config import ACCEPTANCE_THRESHOLD, BitSpaceConfig, get_config
from ..core.errors import DimensionMismatch, ProbeBudgetExceeded
from ..core.seeding import resolve_rng
from ..vectors.binary import BinaryVector
from .distance import hamming_distance

logger = logging.getLogger(__name__)


def adjust_to_half_distance(target: BinaryVector,
                            reference: BinaryVector,
                            rng: Optional[np.random.Generator] = None,
                            *,
                            config: Optional[BitSpaceConfig] = None) -> None:
    """
    Flip bits of ``target`` in place until its distance to ``reference`` is n // 2.

    With delta = n // 2 - distance, a positive delta flips agreeing positions
    (pushing the vectors apart) and a negative delta flips disagreeing ones.
    Positions are scanned in increasing order, wrapping to 0; each eligible
    position gets one draw and is flipped when the draw exceeds the
    threshold of 0.5. A flipped position stops being eligible, so every
    flip moves the distance one step toward n // 2.

    Args:
        target: Vector to mutate
        reference: Vector to decorrelate from; left untouched
        rng: Generator to draw from; a constant-seed generator if None
        config: Overrides the global configuration

    Raises:
        DimensionMismatch: if the vectors differ in dimension
        ProbeBudgetExceeded: if the scan draws ``probe_budget_factor * n``
            times without finishing
    """
    config = config or get_config()
    n = target.dimension
    if reference.dimension != n:
        raise DimensionMismatch(n, reference.dimension, operation='adjust_to_half_distance')

    delta = n // 2 - hamming_distance(target, reference)
    if delta == 0:
        return

    rng = resolve_rng(rng, config)
    disagreement = target.to_bool_array() ^ reference.to_bool_array()

    # Eligible positions agree when pushing apart, disagree when pulling together
    eligible_state = delta < 0
    required = abs(delta)
    budget = config.probe_budget_factor * n

    flips = 0
    probes = 0
    passes = 0
    while True:
        for position in np.flatnonzero(disagreement == eligible_state):
            probes += 1
            if rng.random() > ACCEPTANCE_THRESHOLD:
                target.bit_set.flip(int(position))
                disagreement[position] = not eligible_state
                flips += 1
                if flips == required:
                    logger.debug(
                        f"Adjusted distance by {delta} with {probes} draws over "
                        f"{passes + 1} pass(es) (dimension {n})"
                    )
                    return
            if probes >= budget:
                raise ProbeBudgetExceeded(flips, required, probes)
        passes += 1
