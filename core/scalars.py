# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Scalar variants: Zero, One and general Scalars.

Use the :func:`scalar` factory to build scalars: it canonicalises 0 to
:class:`Zero` and 1 to :class:`One`.
"""

import numbers

import torch

from core.base import AbstractScalar
from core.precision import as_precision, cast_value, resolve_precision


class Zero(AbstractScalar):
    """The additive identity. Absorbs products, has no defined inverse or dual."""

    basis = None

    def __init__(self, precision=None):
        self.precision = resolve_precision(precision=precision)

    @property
    def value(self) -> float:
        return 0.0

    def to(self, precision):
        return Zero(precision)

    def __repr__(self):
        return f"Zero(precision={self.precision})"


class One(AbstractScalar):
    """The multiplicative identity."""

    basis = 1

    def __init__(self, precision=None):
        self.precision = resolve_precision(precision=precision)

    @property
    def value(self) -> float:
        return 1.0

    def to(self, precision):
        return One(precision)

    def __repr__(self):
        return f"One(precision={self.precision})"


class Scalar(AbstractScalar):
    """A real scalar other than 0 and 1.

    Args:
        value (Real): The value, rounded through *precision*.
        precision: Floating dtype. Defaults to the precision carried by
            *value* (float64 for Python numbers).
    """

    basis = 1

    def __init__(self, value, precision=None):
        self.precision = resolve_precision(value, precision=precision)
        value = cast_value(value, self.precision)
        if value == 0 or value == 1:
            raise ValueError(
                f"value: expected a value other than 0 and 1, got {value} "
                "(use scalar() to get Zero or One)"
            )
        self._value = value

    @property
    def value(self) -> float:
        return self._value

    def to(self, precision):
        return scalar(self._value, precision)

    def __repr__(self):
        return f"Scalar({self._value!r}, precision={self.precision})"


def scalar(value, precision=None) -> AbstractScalar:
    """Build the canonical scalar for *value*.

    Args:
        value: A real number or an existing scalar-like.
        precision: Explicit precision; defaults to the one carried by *value*.

    Returns:
        AbstractScalar: :class:`Zero` for 0, :class:`One` for 1, otherwise a
        :class:`Scalar`.
    """
    if isinstance(value, AbstractScalar):
        precision = resolve_precision(value, precision=precision)
        value = value.value
    elif isinstance(value, numbers.Real):
        precision = resolve_precision(value, precision=precision)
    else:
        raise TypeError(f"value: expected a real number or scalar, got {type(value).__name__}")

    value = cast_value(value, precision)
    if value == 0:
        return Zero(precision)
    if value == 1:
        return One(precision)
    return Scalar(value, precision)


def _precision_for(x) -> torch.dtype:
    if isinstance(x, (torch.dtype, str)):
        return as_precision(x)
    return resolve_precision(x)


def zero(x=None) -> Zero:
    """:class:`Zero` in the precision of *x* (an entity, tensor or dtype)."""
    return Zero(_precision_for(x))


def one(x=None) -> One:
    """:class:`One` in the precision of *x* (an entity, tensor or dtype)."""
    return One(_precision_for(x))
