# Versor: Universal Geometric Algebra Neural Network (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Operand coercion shared by the operators.

Raw reals become scalars in the partner's precision and raw coordinate
vectors become blades. Dimensions are checked on the raw operands, so a
zero vector still takes part in dimension checks before it collapses.
"""

import numbers

from core.base import AbstractMultivector, AbstractScalar
from core.blade import blade
from core.precision import resolve_precision
from core.scalars import scalar
from core.validation import assert_dim_equal, is_vector


def is_scalar_like(x) -> bool:
    """Return True for scalar variants and raw reals."""
    return isinstance(x, (AbstractScalar, numbers.Real))


def coerce(x, precision):
    """Convert an operand to an algebra element of *precision*."""
    if isinstance(x, AbstractMultivector):
        return x.to(precision)
    if isinstance(x, numbers.Real):
        return scalar(x, precision)
    if is_vector(x):
        return blade(x, precision=precision)
    raise TypeError(f"operand: expected an algebra element, real or vector, got {type(x).__name__}")


def coerce_pair(x, y, precision=None):
    """Check dimensions, resolve a common precision and coerce both operands.

    Returns:
        Tuple of the coerced operands and their common precision.
    """
    assert_dim_equal(x, y)
    precision = resolve_precision(x, y, precision=precision)
    return coerce(x, precision), coerce(y, precision), precision
