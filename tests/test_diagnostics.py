"""Tests for decorrelation diagnostics."""

import math

import pytest

from bitspace.algebra import orthogonalize
from bitspace.analysis import (
    distance_p_value,
    distance_z_score,
    orthogonality_report,
)
from bitspace.core.errors import DimensionMismatch
from bitspace.vectors import create_zero_vector


class TestDistanceStatistics:

    def test_z_score_at_half_distance(self):
        assert distance_z_score(512, 1024) == 0.0

    def test_z_score_scale(self):
        # std of Binomial(1024, 0.5) is 16
        assert distance_z_score(544, 1024) == pytest.approx(2.0)
        assert distance_z_score(480, 1024) == pytest.approx(-2.0)

    def test_p_value_at_center(self):
        assert distance_p_value(32, 64) == pytest.approx(1.0)

    def test_p_value_for_identical_vectors(self):
        assert distance_p_value(0, 64) < 1e-15

    def test_invalid_dimension(self):
        with pytest.raises(ValueError):
            distance_z_score(0, 0)
        with pytest.raises(ValueError):
            distance_p_value(0, -1)


class TestOrthogonalityReport:

    def test_report_after_orthogonalize(self, make_vector):
        vectors = [make_vector(512) for _ in range(2)]
        orthogonalize(vectors)
        report = orthogonality_report(vectors)

        assert report.dimension == 512
        assert len(report.pairs) == 1
        pair = report.pairs[0]
        assert (pair.i, pair.j) == (0, 1)
        assert pair.distance == 256
        assert pair.deviation == 0
        assert pair.z_score == 0.0
        assert report.is_orthogonal()
        assert report.mean_distance == 256.0

    def test_identical_vectors_not_orthogonal(self, make_vector):
        vec = make_vector(256)
        report = orthogonality_report([vec, vec.copy(), vec.copy()])

        assert len(report.pairs) == 3
        assert report.max_abs_deviation == 128
        assert not report.is_orthogonal(tolerance=10)
        assert all(math.isclose(p.z_score, -16.0) for p in report.pairs)

    def test_small_inputs(self, make_vector):
        assert orthogonality_report([]).pairs == []
        report = orthogonality_report([make_vector(16)])
        assert report.pairs == []
        assert report.max_abs_deviation == 0
        assert report.mean_distance == 0.0

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            orthogonality_report([create_zero_vector(8), create_zero_vector(9)])
