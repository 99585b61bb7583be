# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Duality: orthogonal complements, in the full space or inside a blade.

Sign conventions:

* ``dual(B)`` has orientation ``sign(B) * sign(det[basis(B) | basis(dual)])``,
  negated when ``grade(B) mod 4 >= 2``.
* ``dual(B, C)`` measures the same determinant against ``basis(C)`` and is
  negated once more for each of ``grade(C) mod 4 >= 2`` and
  ``grade(B) mod 4 >= 2``. Only ``basis(C)`` matters; the volume of ``C``,
  sign included, is ignored.

Applying the relative dual twice gives back
``(-1)^(grade(C)(grade(C)-1)/2) * B``.
"""

import torch

from core.base import AbstractScalar
from core.blade import Blade, blade
from core.config import DEFAULT_CONFIG
from core.errors import ContainmentError, UndefinedOperationError
from core.linalg import complement, det, reject_from, vector_norm
from core.multivector import Multivector, multivector
from core.precision import resolve_precision
from core.pseudoscalar import Pseudoscalar, pseudoscalar
from core.scalars import Zero, scalar
from functional.arithmetic import reverse_sign
from functional.coerce import coerce, coerce_pair
from log import get_logger

logger = get_logger(__name__)


def dual(x, y=None, *, dim=None, atol=None, precision=None):
    """Dual of *x*, in the full ambient space or relative to *y*.

    Args:
        x: Element to dualise. Multivectors dualise term by term.
        y: Optional blade-like element whose subspace contains *x*.
        dim (int, optional): Ambient dimension for the dual of a bare
            scalar, which otherwise has none.
        atol (float, optional): Tolerance of the containment test of a
            relative dual. Defaults to ``sqrt(eps(precision))``.
        precision: Explicit precision of the result.

    Raises:
        UndefinedOperationError: For the dual of Zero, of anything relative
            to Zero or to a multivector, and of a scalar without ``dim``.
        ContainmentError: If *x* does not lie in the subspace of *y*.
        DimensionMismatchError: If dimensioned operands differ in ``dim``.
    """
    if y is not None:
        return _relative_dual(x, y, atol, precision)

    precision = resolve_precision(x, precision=precision)
    x = coerce(x, precision)
    if isinstance(x, Zero):
        raise UndefinedOperationError("The dual of Zero is not well-defined")
    if isinstance(x, Multivector):
        return multivector([dual(b, dim=x.dim) for b in x.blades()], precision=precision)
    if isinstance(x, AbstractScalar):
        if dim is None:
            raise UndefinedOperationError(
                "The dual of a scalar needs an ambient dimension; pass dim="
            )
        return dual(x, pseudoscalar(dim, 1, precision))
    if isinstance(x, Pseudoscalar):
        return scalar(x.value, precision)

    basis = complement(x.basis)
    orientation = det(torch.cat([x.basis, basis], dim=1))
    volume = x.volume * orientation * reverse_sign(x.grade)
    return blade(basis, volume=volume, precision=precision)


def _check_defined(x, y):
    if isinstance(y, Zero):
        raise UndefinedOperationError("The dual of anything relative to Zero is not well-defined")
    if isinstance(x, Zero):
        raise UndefinedOperationError("The dual of Zero is not well-defined")
    if isinstance(y, Multivector):
        raise UndefinedOperationError("The dual relative to a Multivector is not defined")


def _relative_dual(x, y, atol, precision):
    _check_defined(x, y)
    x, y, precision = coerce_pair(x, y, precision)
    # Raw zeros only show up after coercion
    _check_defined(x, y)

    if isinstance(x, Multivector):
        terms = [_relative_dual(b, y, atol, precision) for b in x.blades()]
        return multivector(terms, precision=precision)

    if isinstance(x, AbstractScalar):
        if isinstance(y, AbstractScalar):
            return x
        if isinstance(y, Pseudoscalar):
            return pseudoscalar(y.dim, reverse_sign(y.grade) * x.value, precision)
        return blade(y, volume=reverse_sign(y.grade) * x.value)

    if isinstance(y, AbstractScalar):
        return Zero(precision)
    if isinstance(x, Pseudoscalar):
        return scalar(x.value, precision) if isinstance(y, Pseudoscalar) else Zero(precision)
    if isinstance(y, Pseudoscalar):
        return dual(x)

    return _blade_dual(x, y, atol)


def _blade_dual(x: Blade, y: Blade, atol):
    if atol is None:
        atol = DEFAULT_CONFIG.containment_atol(x.precision)
    rejection = vector_norm(reject_from(x.basis, y.basis))
    if rejection > atol:
        logger.debug("relative dual: rejection %g exceeds atol %g", rejection, atol)
        raise ContainmentError(
            f"x: expected a blade contained in y, got rejection norm {rejection:g} > atol {atol:g}"
        )
    if x.grade > y.grade:
        raise ContainmentError(
            f"x: expected grade <= {y.grade} to fit in y, got grade {x.grade}"
        )

    sign = reverse_sign(y.grade) * reverse_sign(x.grade)
    if x.grade == y.grade:
        return scalar(x.volume * sign * det(y.basis.transpose(0, 1) @ x.basis), x.precision)

    # Complement of x inside y, computed in y's coordinates
    coords = y.basis.transpose(0, 1) @ x.basis
    basis = y.basis @ complement(coords)
    orientation = det(y.basis.transpose(0, 1) @ torch.cat([x.basis, basis], dim=1))
    return blade(basis, volume=x.volume * sign * orientation, precision=x.precision)
