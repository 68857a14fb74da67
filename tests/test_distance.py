"""Tests for Hamming distance."""

import numpy as np
import pytest

from bitspace.algebra import hamming_distance
from bitspace.core.errors import DimensionMismatch
from bitspace.vectors import BinaryVector, create_zero_vector


class TestHammingDistance:
    """Test distance properties."""

    def test_distance_to_self_is_zero(self, make_vector):
        vec = make_vector(777)
        assert hamming_distance(vec, vec) == 0

    def test_symmetric(self, make_vector):
        for _ in range(10):
            a, b = make_vector(300), make_vector(300)
            assert hamming_distance(a, b) == hamming_distance(b, a)

    def test_matches_direct_count(self, make_vector):
        a, b = make_vector(1001), make_vector(1001)
        expected = int(np.count_nonzero(a.to_bool_array() != b.to_bool_array()))
        assert hamming_distance(a, b) == expected

    def test_known_value(self):
        a = BinaryVector.from_bits([1, 1, 0, 0, 1])
        b = BinaryVector.from_bits([0, 1, 1, 0, 0])
        assert hamming_distance(a, b) == 3

    def test_complement_is_full_dimension(self):
        bits = np.array([1, 0, 0, 1, 1, 0, 1], dtype=bool)
        assert hamming_distance(BinaryVector.from_bits(bits), BinaryVector.from_bits(~bits)) == 7

    def test_accepts_bit_sets(self, make_vector):
        a, b = make_vector(64), make_vector(64)
        assert hamming_distance(a.bit_set, b.bit_set) == hamming_distance(a, b)

    def test_does_not_mutate(self, make_vector):
        a, b = make_vector(64), make_vector(64)
        a_before, b_before = a.copy(), b.copy()
        hamming_distance(a, b)
        assert a == a_before and b == b_before

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch) as exc_info:
            hamming_distance(create_zero_vector(10), create_zero_vector(11))
        assert exc_info.value.expected == 10
        assert exc_info.value.actual == 11
        assert exc_info.value.operation == 'hamming_distance'
