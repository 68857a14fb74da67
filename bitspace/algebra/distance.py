"""Hamming distance between bit vectors."""

from typing import Union

from ..core.bitset import FixedBitSet
from ..core.errors import DimensionMismatch
from ..vectors.binary import BinaryVector

BitOperand = Union[BinaryVector, FixedBitSet]


def _bits(operand: BitOperand) -> FixedBitSet:
    return operand.bit_set if isinstance(operand, BinaryVector) else operand


def hamming_distance(a: BitOperand, b: BitOperand) -> int:
    """
    Number of positions where ``a`` and ``b`` differ.

    Computed as |a AND NOT b| + |b AND NOT a|, which equals the popcount of
    a XOR b.

    Raises:
        DimensionMismatch: if the operands differ in dimension
    """
    bits_a, bits_b = _bits(a), _bits(b)
    if bits_a.length != bits_b.length:
        raise DimensionMismatch(bits_a.length, bits_b.length, operation='hamming_distance')
    return FixedBitSet.xor_count(bits_a, bits_b)
