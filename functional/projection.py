# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Orthogonal projection of one element onto the subspace of a blade."""

from core.base import AbstractScalar
from core.blade import blade
from core.errors import UndefinedOperationError
from core.linalg import project_onto
from core.multivector import Multivector, multivector
from core.pseudoscalar import Pseudoscalar
from core.scalars import Zero
from functional.arithmetic import scale
from functional.coerce import coerce_pair


def project(x, y, precision=None):
    """Project *x* onto the subspace spanned by *y*.

    Args:
        x: Element to project. Multivectors project term by term.
        y: Blade-like target subspace.
        precision: Explicit precision of the result.

    Returns:
        The projection: *x* itself if it lies in *y*, Zero if it is
        orthogonal to *y* or of higher grade, otherwise a blade of lower norm.

    Raises:
        UndefinedOperationError: If *y* is a multivector.
        DimensionMismatchError: If dimensioned operands differ in ``dim``.
    """
    if isinstance(y, Multivector):
        raise UndefinedOperationError("Projection onto a Multivector is not defined")
    x, y, precision = coerce_pair(x, y, precision)

    if isinstance(x, Multivector):
        return multivector([project(b, y, precision) for b in x.blades()], precision=precision)
    if isinstance(x, Zero) or isinstance(y, Zero):
        return Zero(precision)
    if isinstance(x, AbstractScalar):
        return x
    if isinstance(y, AbstractScalar):
        return Zero(precision)
    if isinstance(x, Pseudoscalar):
        return x if isinstance(y, Pseudoscalar) else Zero(precision)
    if isinstance(y, Pseudoscalar):
        return x
    if x.grade > y.grade:
        return Zero(precision)

    projected = blade(project_onto(x.basis, y.basis), precision=precision)
    return scale(projected, x.volume)
