# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Left and right contractions, and the dot product built on them."""

from core.base import AbstractScalar
from core.multivector import Multivector, multivector
from core.pseudoscalar import Pseudoscalar
from core.scalars import Zero, scalar
from functional.arithmetic import reverse, reverse_sign, scale
from functional.coerce import coerce_pair
from functional.duality import dual
from functional.projection import project


def contractl(x, y, precision=None):
    """Left contraction ``x << y``: the part of *y* orthogonal to *x*.

    For blades ``B`` and ``C`` this is
    ``volume(C) * (-1)^(c(c-1)/2) * dual(project(B, C), C)``. The result
    is Zero whenever ``grade(B) > grade(C)``.

    Raises:
        DimensionMismatchError: If dimensioned operands differ in ``dim``.
    """
    x, y, precision = coerce_pair(x, y, precision)
    if isinstance(x, Multivector) or isinstance(y, Multivector):
        terms = [contractl(b, c, precision) for b in x.blades() for c in y.blades()]
        return multivector(terms, precision=precision)
    if isinstance(x, AbstractScalar):
        return scale(y, x.value)
    if isinstance(y, AbstractScalar) or x.grade > y.grade:
        return Zero(precision)

    if isinstance(y, Pseudoscalar):
        if isinstance(x, Pseudoscalar):
            return scalar(x.value * y.value * reverse_sign(y.grade), precision)
        return scale(dual(x), y.value)

    projected = project(x, y)
    if isinstance(projected, Zero):
        return projected
    return scale(dual(projected, y), y.volume * reverse_sign(y.grade))


def contractr(x, y, precision=None):
    """Right contraction ``x >> y``, the mirror of :func:`contractl`."""
    x, y, precision = coerce_pair(x, y, precision)
    return reverse(contractl(reverse(y), reverse(x), precision))


def dot(x, y, left: bool = True, precision=None):
    """Dot product: the left contraction, or the right one if ``left=False``."""
    if left:
        return contractl(x, y, precision)
    return contractr(x, y, precision)
