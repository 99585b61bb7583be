# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Structural equality and precision-aware approximate equality."""

from __future__ import annotations

import math
import numbers

import torch

from core.base import AbstractMultivector, AbstractScalar
from core.blade import Blade
from core.linalg import det, reject_from, sign, vector_norm
from core.multivector import Multivector
from core.precision import default_rtol, precision_of, resolve_precision
from core.pseudoscalar import Pseudoscalar
from core.scalars import Zero
from core.validation import as_vector, dim_of, is_vector
from functional.arithmetic import negate
from functional.coerce import coerce


def equals(x, y) -> bool:
    """Structural equality.

    Same variant, dimension and grade, with exactly equal volumes and bases.
    Scalar variants also equal plain reals of the same value.
    """
    x_scalar = isinstance(x, (AbstractScalar, numbers.Real))
    y_scalar = isinstance(y, (AbstractScalar, numbers.Real))
    if x_scalar or y_scalar:
        return x_scalar and y_scalar and float(x) == float(y)
    if not (isinstance(x, AbstractMultivector) and isinstance(y, AbstractMultivector)):
        return False
    if type(x) is not type(y) or x.dim != y.dim:
        return False
    if isinstance(x, Multivector):
        xs, ys = x.blades(), y.blades()
        return len(xs) == len(ys) and all(equals(b, c) for b, c in zip(xs, ys))
    if x.grade != y.grade or x.volume != y.volume:
        return False
    if isinstance(x, Blade):
        return torch.equal(x.basis, y.basis.to(x.basis.dtype))
    return True


def _close(a: float, b: float, atol: float, rtol: float) -> bool:
    if a == b:
        return True
    return abs(a - b) <= max(atol, rtol * max(abs(a), abs(b)))


def _inner(b, c) -> float:
    """Inner product of two blades of the same grade."""
    if isinstance(b, AbstractScalar) or isinstance(b, Pseudoscalar):
        return b.volume * c.volume
    return b.volume * c.volume * det(b.basis.transpose(0, 1) @ c.basis)


def _grade_norm(terms) -> float:
    total = sum(_inner(b, c) for b in terms for c in terms)
    return math.sqrt(max(total, 0.0))


def _blades_close(x: Blade, y: Blade, atol, rtol) -> bool:
    """Same subspace up to tolerance, then same oriented volume.

    Both tests are symmetric in *x* and *y*: the rejection of one unit basis
    from the other has the same norm either way, and so does the
    determinant of their overlap.
    """
    scale = max(x.norm, y.norm)
    spread = vector_norm(reject_from(y.basis, x.basis))
    if spread * scale > max(atol, rtol * scale):
        return False
    orientation = sign(det(x.basis.transpose(0, 1) @ y.basis))
    return _close(x.volume * orientation, y.volume, atol, rtol)


def _multivectors_close(x, y, atol, rtol) -> bool:
    if x.grades() != y.grades():
        return False
    for k in x.grades():
        xs, ys = x[k], y[k]
        diff = _grade_norm(xs + [negate(c) for c in ys])
        scale = max(_grade_norm(xs), _grade_norm(ys))
        if diff > max(atol, rtol * scale):
            return False
    return True


def isapprox(x, y, atol: float = 0, rtol: float | None = None) -> bool:
    """Approximate equality.

    Dimension and grade must match exactly. Payloads compare with
    ``|a - b| <= max(atol, rtol * max(|a|, |b|))``. Blades must first span
    the same subspace: the rejection of one basis from the other, scaled by
    the larger norm, is held to the same tolerance. Their volumes are then
    compared after aligning orientations. Blades spanning different
    subspaces are never close unless the tolerance covers their whole volume.

    Args:
        x: Algebra element, real, or raw vector.
        y: Algebra element, real, or raw vector.
        atol (float): Absolute tolerance.
        rtol (float, optional): Relative tolerance. Defaults to the looser
            ``sqrt(eps)`` of the two precisions, or to 0 when a positive
            *atol* is given.

    Returns:
        bool: Whether *x* and *y* are approximately equal.
    """
    if rtol is None:
        rtol = 0.0 if atol > 0 else default_rtol(
            *[p for p in (precision_of(x), precision_of(y)) if p is not None]
        )

    dim_x, dim_y = dim_of(x), dim_of(y)
    if dim_x is not None and dim_y is not None and dim_x != dim_y:
        return False

    # A raw vector is close to Zero when it is short, before it collapses
    if isinstance(x, Zero) and is_vector(y):
        return vector_norm(as_vector(y)) <= atol
    if isinstance(y, Zero) and is_vector(x):
        return vector_norm(as_vector(x)) <= atol

    precision = resolve_precision(x, y)
    x, y = coerce(x, precision), coerce(y, precision)

    if isinstance(x, Multivector) or isinstance(y, Multivector):
        return _multivectors_close(x, y, atol, rtol)
    if x.dim != y.dim or x.grade != y.grade:
        return False
    if isinstance(x, Blade):
        return _blades_close(x, y, atol, rtol)
    return _close(x.volume, y.volume, atol, rtol)
