"""
Fixed-size packed bit set.

Bits are stored little-endian inside a numpy uint8 buffer: bit ``i`` lives in
byte ``i >> 3`` at position ``i & 7``. Padding bits past ``length`` are kept
at zero by every operation, so byte-wise popcounts never need masking.
"""

from typing import List, Union

import numpy as np

from .errors import DimensionMismatch


# Set-bit count for every byte value
_POPCOUNT = np.array([bin(i).count("1") for i in range(256)], dtype=np.uint8)


def _popcount(buffer: np.ndarray) -> int:
    return int(_POPCOUNT[buffer].sum(dtype=np.int64))


class FixedBitSet:
    """
    Packed array of ``length`` bits supporting single-bit access and
    whole-set XOR and counting.
    """

    __slots__ = ("_bits", "_length")

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self._length = int(length)
        self._bits = np.zeros((self._length + 7) // 8, dtype=np.uint8)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"bit index {index} out of range [0, {self._length})")

    def get(self, index: int) -> bool:
        """Return whether bit ``index`` is set."""
        self._check_index(index)
        return bool((int(self._bits[index >> 3]) >> (index & 7)) & 1)

    def set(self, index: int) -> None:
        self._check_index(index)
        self._bits[index >> 3] = self._bits[index >> 3] | np.uint8(1 << (index & 7))

    def clear(self, index: int) -> None:
        self._check_index(index)
        self._bits[index >> 3] = self._bits[index >> 3] & np.uint8(~(1 << (index & 7)) & 0xFF)

    def flip(self, index: int) -> None:
        self._check_index(index)
        self._bits[index >> 3] = self._bits[index >> 3] ^ np.uint8(1 << (index & 7))

    def clone(self) -> "FixedBitSet":
        """Independent copy; no buffer is shared with the original."""
        other = FixedBitSet.__new__(FixedBitSet)
        other._length = self._length
        other._bits = self._bits.copy()
        return other

    def xor(self, other: "FixedBitSet") -> None:
        """XOR ``other`` into this set in place."""
        if other._length != self._length:
            raise DimensionMismatch(self._length, other._length, operation='xor')
        np.bitwise_xor(self._bits, other._bits, out=self._bits)

    def cardinality(self) -> int:
        """Number of set bits."""
        return _popcount(self._bits)

    @staticmethod
    def and_not_count(a: "FixedBitSet", b: "FixedBitSet") -> int:
        """Count bits set in ``a`` but not in ``b``."""
        if a._length != b._length:
            raise DimensionMismatch(a._length, b._length, operation='and_not_count')
        return _popcount(a._bits & ~b._bits)

    @staticmethod
    def xor_count(a: "FixedBitSet", b: "FixedBitSet") -> int:
        """Size of the symmetric difference of ``a`` and ``b``."""
        return FixedBitSet.and_not_count(a, b) + FixedBitSet.and_not_count(b, a)

    def to_bool_array(self) -> np.ndarray:
        """Unpack into a bool array of shape (length,)."""
        return np.unpackbits(self._bits, count=self._length, bitorder="little").astype(bool)

    @classmethod
    def from_bool_array(cls, values: Union[np.ndarray, List[bool]]) -> "FixedBitSet":
        """Pack a one-dimensional sequence of truth values."""
        arr = np.asarray(values, dtype=bool)
        if arr.ndim != 1:
            raise ValueError(f"expected a 1-d array, got shape {arr.shape}")
        bitset = cls(arr.shape[0])
        if arr.size:
            bitset._bits = np.packbits(arr, bitorder="little")
        return bitset

    def set_bits(self) -> np.ndarray:
        """Indices of set bits in increasing order."""
        return np.flatnonzero(self.to_bool_array())

    def to_seed_string(self) -> str:
        """
        Stable serialization used as a seed source.

        The buffer is read as 64-bit little-endian words, written as decimal
        integers joined by ``|``.
        """
        padding = (-len(self._bits)) % 8
        raw = self._bits.tobytes() + b"\x00" * padding
        words = np.frombuffer(raw, dtype="<u8")
        return "|".join(str(int(w)) for w in words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedBitSet):
            return NotImplemented
        return self._length == other._length and bool(np.array_equal(self._bits, other._bits))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"FixedBitSet(length={self._length}, cardinality={self.cardinality()})"
