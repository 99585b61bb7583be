# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Outer (wedge) product."""

import torch

from core.base import AbstractScalar
from core.blade import Blade, blade
from core.multivector import Multivector, multivector
from core.precision import resolve_precision
from core.scalars import Zero
from core.validation import as_vector, assert_dim_equal, is_vector
from functional.arithmetic import scale
from functional.coerce import coerce


def wedge(x, y, precision=None):
    """Outer product ``x ^ y``.

    Blades wedge by concatenating their bases; the result collapses to Zero
    when the grades overflow the ambient dimension or the subspaces meet.
    Scalars scale, and multivectors distribute over their terms.

    Args:
        x: Algebra element, real, or raw vector.
        y: Algebra element, real, or raw vector.
        precision: Explicit precision of the result.

    Raises:
        DimensionMismatchError: If dimensioned operands differ in ``dim``.
    """
    assert_dim_equal(x, y)
    precision = resolve_precision(x, y, precision=precision)

    # Raw vectors enter the span directly, unnormalised
    if is_vector(x) and is_vector(y):
        columns = [as_vector(x, precision), as_vector(y, precision)]
        # Two vectors overflow a line; a 1 x 2 stack would also read as a row
        if columns[0].shape[0] < 2:
            return Zero(precision)
        return blade(torch.stack(columns, dim=1), precision=precision)
    if isinstance(x, Blade) and is_vector(y):
        x = x.to(precision)
        v = x.volume * as_vector(y, precision).unsqueeze(1)
        return blade(torch.cat([x.basis, v], dim=1), precision=precision)
    if is_vector(x) and isinstance(y, Blade):
        y = y.to(precision)
        v = y.volume * as_vector(x, precision).unsqueeze(1)
        return blade(torch.cat([v, y.basis], dim=1), precision=precision)

    x, y = coerce(x, precision), coerce(y, precision)
    if isinstance(x, Multivector) or isinstance(y, Multivector):
        terms = [wedge(b, c, precision) for b in x.blades() for c in y.blades()]
        return multivector(terms, precision=precision)
    if isinstance(x, AbstractScalar):
        return scale(y, x.value)
    if isinstance(y, AbstractScalar):
        return scale(x, y.value)
    if x.grade + y.grade > x.dim:
        return Zero(precision)

    # Span of both bases; a Pseudoscalar when the grades fill the space
    span = blade(torch.cat([x.basis, y.basis], dim=1), precision=precision)
    return scale(span, x.volume * y.volume)


outer = wedge
