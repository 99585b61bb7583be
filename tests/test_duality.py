# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Tests for full-space and relative duals."""

import pytest
import torch

from core import (
    Blade,
    ContainmentError,
    DimensionMismatchError,
    Multivector,
    Pseudoscalar,
    UndefinedOperationError,
    Zero,
    blade,
    multivector,
    pseudoscalar,
    scalar,
)
from functional import dual, isapprox, project, wedge
from functional.arithmetic import reverse_sign


def _orthogonal(B, C, atol=1e-10):
    return torch.allclose(
        B.basis.transpose(0, 1) @ C.basis,
        torch.zeros(B.grade, C.grade, dtype=B.precision),
        atol=atol,
    )


class TestDual:

    def test_basis_vectors(self, basis3):
        e1, e2, e3, e12 = basis3["e1"], basis3["e2"], basis3["e3"], basis3["e12"]
        assert isapprox(dual(e1), e2 ^ e3)
        assert isapprox(dual(e3), e12)
        assert isapprox(dual(e12), -e3)

    @pytest.mark.parametrize("grade", [1, 2, 3, 4, 5])
    def test_complement(self, randn, grade):
        dim = 6
        B = blade(randn(dim, grade))
        D = dual(B)
        assert isinstance(D, Blade)
        assert D.grade == dim - grade
        assert D.norm == pytest.approx(B.norm)
        assert _orthogonal(B, D)

    @pytest.mark.parametrize("grade", [1, 2, 3, 4])
    def test_orientation(self, randn, grade):
        dim = 5
        B = blade(randn(dim, grade))
        P = wedge(B, dual(B))
        assert isinstance(P, Pseudoscalar)
        assert P.value == pytest.approx(reverse_sign(grade) * B.norm ** 2)

    def test_pseudoscalar(self):
        s = dual(pseudoscalar(3, 2.5))
        assert s == 2.5

    def test_scalar_needs_dim(self):
        with pytest.raises(UndefinedOperationError):
            dual(scalar(2.0))
        P = dual(2.0, dim=3)
        assert isinstance(P, Pseudoscalar)
        assert P.value == pytest.approx(reverse_sign(3) * 2.0)
        assert dual(scalar(2.0), dim=3) == dual(2.0, pseudoscalar(3))

    def test_raw_vector(self):
        assert isapprox(dual([0.0, 0.0, 2.0]), 2 * blade([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]))

    def test_zero_rejected(self):
        with pytest.raises(UndefinedOperationError, match="dual of Zero"):
            dual(Zero())
        with pytest.raises(UndefinedOperationError):
            dual([0.0, 0.0, 0.0])

    def test_multivector(self, basis3):
        D = dual(multivector([2.0, basis3["e1"], basis3["e12"]]))
        assert isinstance(D, Multivector)
        assert D.grades() == [1, 2, 3]
        assert D[3][0].value == pytest.approx(-2.0)


class TestRelativeDual:

    @pytest.fixture
    def C(self, randn):
        return blade(randn(8, 5))

    @pytest.fixture
    def B(self, C, randn):
        return blade(C.basis @ randn(5, 2), volume=3.0)

    def test_complement_within(self, B, C):
        D = dual(B, C)
        assert isinstance(D, Blade)
        assert D.grade == C.grade - B.grade
        assert D.norm == pytest.approx(B.norm)
        assert _orthogonal(B, D)
        assert isapprox(project(D, C), D)

    def test_twice_gives_back_up_to_sign(self, B, C):
        assert isapprox(dual(dual(B, C), C), reverse_sign(C.grade) * B)

    def test_twice_even_grade(self, randn):
        C = blade(randn(8, 6))
        B = blade(C.basis @ randn(6, 3))
        assert isapprox(dual(dual(B, C), C), -B)

    def test_volume_of_reference_ignored(self, B, C):
        assert isapprox(dual(B, C), dual(B, blade(C, volume=7.5)))

    def test_equal_grades(self, basis3):
        e12 = basis3["e12"]
        assert float(dual(e12, e12)) == pytest.approx(1)
        assert float(dual(3 * e12, e12)) == pytest.approx(3)
        assert float(dual(-e12, e12)) == pytest.approx(-1)

    def test_plane(self, basis3):
        e1, e2, e12 = basis3["e1"], basis3["e2"], basis3["e12"]
        assert isapprox(dual(e1, e12), -e2)
        assert isapprox(dual(e2, e12), e1)

    def test_relative_to_pseudoscalar(self, randn):
        B = blade(randn(8, 3))
        assert isapprox(dual(B, pseudoscalar(8, 2.0)), dual(B))

    def test_not_contained(self, basis3):
        with pytest.raises(ContainmentError, match="contained in y"):
            dual(basis3["e3"], basis3["e12"])
        with pytest.raises(ContainmentError):
            dual(basis3["e12"], basis3["e1"])

    def test_containment_tolerance(self, basis3):
        v = blade([1.0, 0.0, 1e-10])
        assert isapprox(dual(v, basis3["e12"]), -basis3["e2"])
        with pytest.raises(ContainmentError):
            dual(v, basis3["e12"], atol=1e-12)


class TestRelativeDualSpecialCases:

    def test_undefined(self, basis3):
        e1, e12 = basis3["e1"], basis3["e12"]
        with pytest.raises(UndefinedOperationError, match="relative to Zero"):
            dual(e1, Zero())
        with pytest.raises(UndefinedOperationError, match="relative to Zero"):
            dual(Zero(), Zero())
        with pytest.raises(UndefinedOperationError, match="relative to Zero"):
            dual(e1, [0.0, 0.0, 0.0])
        with pytest.raises(UndefinedOperationError, match="dual of Zero"):
            dual(Zero(), e12)
        with pytest.raises(UndefinedOperationError, match="Multivector"):
            dual(e1, multivector([2.0, e12]))

    def test_scalar_relative_to_blade(self, basis3):
        e12 = basis3["e12"]
        assert dual(2.0, e12) == blade(e12, volume=-2.0)
        assert dual(scalar(2.0), basis3["e1"]) == blade(basis3["e1"], volume=2.0)

    def test_scalar_relative_to_pseudoscalar(self):
        P = dual(2.0, pseudoscalar(4, 5.0))
        assert isinstance(P, Pseudoscalar)
        assert P.value == pytest.approx(2.0)
        assert dual(2.0, pseudoscalar(3)).value == pytest.approx(-2.0)

    def test_scalar_relative_to_scalar(self):
        assert dual(2.0, scalar(3.0)) == 2.0

    def test_relative_to_scalar_is_zero(self, basis3):
        assert isinstance(dual(basis3["e1"], 3.0), Zero)
        assert isinstance(dual(pseudoscalar(3, 2.0), scalar(3.0)), Zero)

    def test_pseudoscalars(self, basis3):
        assert dual(pseudoscalar(3, 2.0), pseudoscalar(3, 5.0)) == 2.0
        assert isinstance(dual(pseudoscalar(3, 2.0), basis3["e12"]), Zero)

    def test_multivector_subject(self, basis3):
        D = dual(multivector([2.0, basis3["e1"]]), basis3["e12"])
        assert isinstance(D, Multivector)
        assert D.grades() == [1, 2]
        assert isapprox(D[1][0], -basis3["e2"])

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            dual(blade([1.0, 0.0, 0.0, 0.0, 0.0]), pseudoscalar(6))
