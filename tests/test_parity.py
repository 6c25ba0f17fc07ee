"""Tests for the sign and parity engine."""

import pytest

from core.parity import (
    conjugation_sign,
    grade,
    involution_sign,
    iter_bits,
    lowest_bit,
    metric_factor,
    reordering_parity,
    reordering_sign,
    reversion_sign,
)
from core.signature import DeclaredSignature, EuclideanSignature


class TestBitHelpers:

    @pytest.mark.parametrize("mask, expected", [(0, 0), (1, 1), (7, 3), (0b1010, 2), ((1 << 64) - 1, 64)])
    def test_grade(self, mask, expected):
        assert grade(mask) == expected

    def test_lowest_bit(self):
        assert lowest_bit(1) == 0
        assert lowest_bit(0b1000) == 3
        assert lowest_bit(1 << 63) == 63

    def test_iter_bits(self):
        assert list(iter_bits(0)) == []
        assert list(iter_bits(0b10110)) == [1, 2, 4]


class TestReordering:

    @pytest.mark.parametrize("a, b, parity", [
        (1, 1, 0),
        (1, 2, 1),   # e1 e2 = -e(3)
        (2, 1, 0),
        (2, 4, 1),
        (3, 4, 0),   # bivector commutes past an orthogonal vector
        (4, 3, 0),
        (3, 3, 1),
        (0, 7, 0),
    ])
    def test_parity(self, a, b, parity):
        assert reordering_parity(a, b) == parity
        assert reordering_sign(a, b) == 1 - 2 * parity

    def test_distinct_vectors_anticommute(self):
        for i in range(8):
            for j in range(8):
                if i != j:
                    assert reordering_sign(1 << i, 1 << j) == -reordering_sign(1 << j, 1 << i)


class TestMetricFactor:

    def test_no_common_vectors(self):
        assert metric_factor(EuclideanSignature(4), 0) == 1

    def test_product_of_squares(self):
        sig = DeclaredSignature((2.0, -1, 3.0))
        assert metric_factor(sig, 0b101) == 6.0
        assert metric_factor(sig, 0b011) == -2.0

    def test_null_vector_kills(self):
        sig = DeclaredSignature.from_pqr(1, 1, 1)
        assert metric_factor(sig, 0b111) == 0


class TestGradeSigns:

    @pytest.mark.parametrize("k, rev, inv, conj", [
        (0, 1, 1, 1),
        (1, 1, -1, -1),
        (2, -1, 1, -1),
        (3, -1, -1, 1),
        (4, 1, 1, 1),
    ])
    def test_signs_by_grade(self, k, rev, inv, conj):
        mask = (1 << k) - 1
        assert reversion_sign(mask) == rev
        assert involution_sign(mask) == inv
        assert conjugation_sign(mask) == conj
