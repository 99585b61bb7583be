# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Tests for left/right contraction and the dot product."""

import pytest

from core import (
    DimensionMismatchError,
    Multivector,
    Zero,
    blade,
    multivector,
    pseudoscalar,
    scalar,
)
from functional import contractl, contractr, dot, dual, isapprox


class TestLeftContraction:

    def test_vector_into_plane(self, basis3):
        e1, e2, e12 = basis3["e1"], basis3["e2"], basis3["e12"]
        assert isapprox(e1 << e12, e2)
        assert isapprox(e2 << e12, -e1)

    def test_plane_into_itself(self, basis3):
        s = basis3["e12"] << basis3["e12"]
        assert float(s) == pytest.approx(-1)

    def test_vectors_give_inner_product(self):
        s = contractl([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        assert float(s) == pytest.approx(32)

    def test_higher_grade_is_zero(self, basis3):
        assert isinstance(basis3["e12"] << basis3["e1"], Zero)

    def test_orthogonal_is_zero(self, basis3):
        assert isinstance(basis3["e3"] << basis3["e12"], Zero)

    def test_scalars(self, basis3):
        assert isapprox(2.0 << basis3["e1"], 2 * basis3["e1"])
        assert isinstance(basis3["e1"] << 2.0, Zero)
        assert contractl(scalar(2.0), 3.0) == 6.0

    def test_pseudoscalars(self, basis3):
        e1 = basis3["e1"]
        assert isapprox(e1 << pseudoscalar(3, 2.0), 2 * dual(e1))
        assert pseudoscalar(3, 2.0) << pseudoscalar(3, 3.0) == -6.0
        assert isinstance(pseudoscalar(3, 2.0) << e1, Zero)

    def test_result_is_orthogonal_to_subject(self, randn):
        B = blade(randn(5, 2))
        C = blade(randn(5, 4))
        D = B << C
        assert D.grade == 2
        assert isinstance(contractl(B, D), Zero)


class TestRightContraction:

    def test_plane_onto_vector(self, basis3):
        e1, e2, e12 = basis3["e1"], basis3["e2"], basis3["e12"]
        assert isapprox(e12 >> e2, e1)
        assert isapprox(e12 >> e1, -e2)

    def test_mirrors_left(self, randn):
        B = blade(randn(4, 1))
        C = blade(randn(4, 3))
        assert isapprox(contractr(C, B), ~((~B) << (~C)))

    def test_higher_grade_is_zero(self, basis3):
        assert isinstance(basis3["e1"] >> basis3["e12"], Zero)


class TestDot:

    def test_defaults_to_left(self, basis3):
        e1, e12 = basis3["e1"], basis3["e12"]
        assert isapprox(dot(e1, e12), basis3["e2"])
        assert isapprox(e1 | e12, basis3["e2"])

    def test_right(self, basis3):
        assert isapprox(dot(basis3["e12"], basis3["e2"], left=False), basis3["e1"])

    def test_vectors(self):
        assert float(blade([1.0, 0.0]) | [3.0, 4.0]) == pytest.approx(3)


class TestMultivectors:

    def test_distributes(self, basis3):
        M = multivector([2.0, basis3["e1"]])
        C = M << basis3["e12"]
        assert isinstance(C, Multivector)
        assert C.grades() == [1, 2]
        assert isapprox(C[1][0], basis3["e2"])
        assert isapprox(C[2][0], 2 * basis3["e12"])


def test_dimension_mismatch(basis3):
    with pytest.raises(DimensionMismatchError):
        contractl(blade([1.0, 0.0]), basis3["e12"])
    with pytest.raises(DimensionMismatchError):
        basis3["e12"] >> [1.0, 0.0]
