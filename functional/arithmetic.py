# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Additive and scalar arithmetic: add, negate, scale, reverse, inverse."""

from core.base import AbstractScalar
from core.blade import Blade, blade
from core.config import DEFAULT_CONFIG
from core.errors import UndefinedOperationError
from core.linalg import det
from core.multivector import Multivector, multivector
from core.precision import resolve_precision
from core.pseudoscalar import Pseudoscalar, pseudoscalar
from core.scalars import Zero, scalar
from functional.coerce import coerce, coerce_pair, is_scalar_like


def reverse_sign(grade: int) -> int:
    """Sign ``(-1)^(k(k-1)/2)`` picked up by reversing a grade-*k* blade."""
    return -1 if grade % 4 >= 2 else 1


def scale(x, factor: float):
    """Multiply every term of *x* by the real *factor*."""
    if isinstance(x, Multivector):
        return multivector([scale(b, factor) for b in x.blades()], precision=x.precision)
    if isinstance(x, AbstractScalar):
        return scalar(x.value * factor, x.precision)
    if isinstance(x, Pseudoscalar):
        return pseudoscalar(x.dim, x.value * factor, x.precision)
    return blade(x, volume=x.volume * factor)


def _same_subspace(x: Blade, y: Blade) -> float:
    """Orientation of *y* relative to *x* if they span one subspace, else 0."""
    d = det(x.basis.transpose(0, 1) @ y.basis)
    if abs(abs(d) - 1) > DEFAULT_CONFIG.containment_atol(x.precision):
        return 0
    return d


def add(x, y, precision=None):
    """Sum of two operands.

    Scalars, vectors and pseudoscalars add into a single term, as do two
    blades spanning the same subspace. Anything else forms a multivector.
    """
    x, y, precision = coerce_pair(x, y, precision)
    if isinstance(x, Zero):
        return y
    if isinstance(y, Zero):
        return x
    if isinstance(x, AbstractScalar) and isinstance(y, AbstractScalar):
        return scalar(x.value + y.value, precision)
    if isinstance(x, Pseudoscalar) and isinstance(y, Pseudoscalar):
        return pseudoscalar(x.dim, x.value + y.value, precision)
    if isinstance(x, Blade) and isinstance(y, Blade) and x.grade == y.grade:
        if x.grade == 1:
            return blade(x.volume * x.basis + y.volume * y.basis, precision=precision)
        orientation = _same_subspace(x, y)
        if orientation:
            volume = x.volume + y.volume * orientation
            if abs(volume) < DEFAULT_CONFIG.blade_atol(precision):
                return Zero(precision)
            return blade(x, volume=volume)
    return multivector([x, y], precision=precision)


def negate(x):
    """Additive inverse: flips the sign of every term."""
    x = coerce(x, resolve_precision(x))
    return scale(x, -1)


def subtract(x, y, precision=None):
    """``x - y``."""
    x, y, precision = coerce_pair(x, y, precision)
    return add(x, negate(y), precision)


def multiply(x, y, precision=None):
    """Scalar multiplication.

    Raises:
        TypeError: If neither operand is scalar-like. The geometric product
            of two non-scalar elements is not provided.
    """
    if not (is_scalar_like(x) or is_scalar_like(y)):
        raise TypeError(
            f"multiply: one operand must be scalar, got {type(x).__name__} "
            f"and {type(y).__name__}"
        )
    x, y, precision = coerce_pair(x, y, precision)
    if isinstance(x, AbstractScalar):
        return scale(y, x.value)
    return scale(x, y.value)


def reverse(x):
    """Reversion: grade-*k* terms pick up ``(-1)^(k(k-1)/2)``."""
    x = coerce(x, resolve_precision(x))
    if isinstance(x, Multivector):
        return multivector([reverse(b) for b in x.blades()], precision=x.precision)
    if isinstance(x, AbstractScalar):
        return x
    return scale(x, reverse_sign(x.grade))


def inverse(x):
    """Multiplicative inverse ``reverse(x) / norm(x)**2`` of a blade.

    Raises:
        UndefinedOperationError: For Zero and for multivectors.
    """
    x = coerce(x, resolve_precision(x))
    if isinstance(x, Zero):
        raise UndefinedOperationError("The inverse of Zero is not defined")
    if isinstance(x, Multivector):
        raise UndefinedOperationError("The inverse of a Multivector is not defined")
    return scale(reverse(x), 1 / x.norm ** 2)


reciprocal = inverse


def divide(x, y, precision=None):
    """``x / y`` for a scalar-like divisor.

    Raises:
        TypeError: If *y* is not scalar-like.
    """
    if not is_scalar_like(y):
        raise TypeError(f"divide: divisor must be scalar, got {type(y).__name__}")
    x, y, precision = coerce_pair(x, y, precision)
    return multiply(x, inverse(y), precision)
