# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Blades: oriented subspaces with a signed volume.

A :class:`Blade` stores an orthonormal basis of its subspace (a ``[dim, grade]``
tensor) and a signed volume relative to that basis. Top-grade blades are
always represented by :class:`~core.pseudoscalar.Pseudoscalar`, so a
``Blade`` has ``1 <= grade < dim``.

Build blades with the :func:`blade` factory; it collapses degenerate input
to :class:`~core.scalars.Zero` instead of raising.
"""

import math

import torch

from core.base import AbstractBlade, AbstractMultivector, AbstractScalar
from core.config import DEFAULT_CONFIG
from core.linalg import det, qr, rank, sign
from core.precision import as_precision, cast_value, resolve_precision
from core.pseudoscalar import Pseudoscalar, pseudoscalar
from core.scalars import Zero, scalar
from core.validation import as_vectors
from log import get_logger

logger = get_logger(__name__)


class Blade(AbstractBlade):
    """Blade of grade ``1 <= k < dim``.

    The constructor trusts its input; use :func:`blade` for anything that
    is not already an orthonormal basis.

    Args:
        basis (torch.Tensor): Orthonormal columns ``[dim, k]``. Not copied.
        volume (Real): Nonzero signed volume relative to *basis*.
    """

    def __init__(self, basis: torch.Tensor, volume):
        if basis.ndim != 2:
            raise ValueError(f"basis: expected ndim 2, got shape {tuple(basis.shape)}")
        dim, grade = basis.shape
        if not 1 <= grade < dim:
            raise ValueError(
                f"basis: expected 1 <= grade < dim, got shape {tuple(basis.shape)}"
            )
        self.precision = as_precision(basis.dtype)
        volume = cast_value(volume, self.precision)
        if volume == 0:
            raise ValueError("volume: expected a nonzero volume (use blade())")
        self.dim = dim
        self.grade = grade
        self._basis = basis
        self._volume = volume
        self._norm = abs(volume)

    @property
    def basis(self) -> torch.Tensor:
        return self._basis

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def norm(self) -> float:
        return self._norm

    def to(self, precision):
        if as_precision(precision) == self.precision:
            return self
        return blade(self, volume=self._volume, precision=precision)

    def __repr__(self):
        return (f"Blade(dim={self.dim}, grade={self.grade}, volume={self._volume!r}, "
                f"precision={self.precision})")


def _make(basis: torch.Tensor, volume):
    volume = cast_value(volume, basis.dtype)
    if volume == 0:
        return Zero(basis.dtype)
    return Blade(basis, volume)


def _collapse(reason: str, *args):
    logger.debug("blade collapsed to Zero: " + reason, *args)


def blade(vectors, *, atol=None, volume=None, norm=None, precision=None,
          copy_basis: bool = True):
    """Build the canonical blade spanned by *vectors*.

    Accepts raw spanning vectors or, in copy form, an existing blade whose
    subspace is reused.

    Args:
        vectors: A 1-D vector, a ``[dim, k]`` matrix whose columns span the
            blade (a ``1 x n`` row is one vector), or an existing blade.
        atol (float, optional): Norm below which the result collapses to
            Zero. Defaults to ``100 * eps(precision)``.
        volume (float, optional): Signed volume override. For raw vectors it
            is taken relative to the orientation of *vectors*; in copy form,
            relative to the source basis.
        norm (float, optional): Magnitude override that keeps the orientation.
        precision: Explicit precision; defaults to the one carried by *vectors*.
        copy_basis (bool): Copy form only. ``False`` aliases the source's basis
            tensor instead of copying it.

    Returns:
        :class:`Blade`, :class:`~core.pseudoscalar.Pseudoscalar` when the
        vectors fill the space, or :class:`~core.scalars.Zero` for
        degenerate input.
    """
    if volume is not None and norm is not None:
        raise ValueError("blade: pass at most one of volume= and norm=")
    if isinstance(vectors, AbstractMultivector):
        return _copy(vectors, volume, norm, precision, copy_basis)

    precision = resolve_precision(vectors, precision=precision)
    matrix = as_vectors(vectors, precision)
    dim, k = matrix.shape
    if atol is None:
        atol = DEFAULT_CONFIG.blade_atol(precision)

    if k > dim:
        _collapse("%d vectors in dimension %d", k, dim)
        return Zero(precision)
    if rank(matrix) < k:
        _collapse("vectors are linearly dependent")
        return Zero(precision)

    Q, R = qr(matrix)
    signed = math.prod(torch.diagonal(R).tolist())
    if abs(signed) < atol:
        _collapse("norm %g below atol %g", abs(signed), atol)
        return Zero(precision)

    if k == dim:
        value = det(matrix)
        orientation = sign(value)
        if volume is not None:
            value = orientation * volume
        elif norm is not None:
            value = orientation * norm
        return pseudoscalar(dim, value, precision)

    # Orientation lives in the basis, so a fresh blade has volume == norm
    if signed < 0:
        Q = Q.clone()
        Q[:, 0] = -Q[:, 0]

    if volume is None:
        volume = norm if norm is not None else abs(signed)
    return _make(Q.contiguous(), volume)


def _copy(x, volume, norm, precision, copy_basis):
    if not isinstance(x, AbstractBlade):
        raise TypeError(f"vectors: expected vectors or a blade, got {type(x).__name__}")
    precision = resolve_precision(x, precision=precision)
    if isinstance(x, Zero):
        return Zero(precision)

    if volume is None:
        volume = x.sign * (norm if norm is not None else 1)

    if isinstance(x, AbstractScalar):
        return scalar(volume, precision)
    if isinstance(x, Pseudoscalar):
        return pseudoscalar(x.dim, volume, precision)

    basis = x.basis
    if copy_basis or basis.dtype != precision:
        basis = basis.to(precision, copy=True)
    return _make(basis, volume)
