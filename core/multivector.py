# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Multivector container: a sum of blades grouped by grade.

Use the :func:`multivector` factory. It reduces same-grade terms where the
sum is again a blade (grades 0, 1 and ``dim``), drops terms that cancel, and
returns a bare blade when only one term is left.
"""

from __future__ import annotations

import functools
import math

from core.base import AbstractMultivector, AbstractScalar
from core.errors import DimensionMismatchError
from core.precision import as_precision, resolve_precision
from core.scalars import Zero, scalar
from core.validation import dim_of, is_vector
from log import get_logger

logger = get_logger(__name__)


class Multivector(AbstractMultivector):
    """A sum of blades of one ambient dimension.

    Attributes:
        dim (int): Ambient dimension.
        precision (torch.dtype): Common precision of all terms.
        norm (float): ``sqrt(sum(norm(b)**2))`` over the terms, fixed at
            construction.
    """

    def __init__(self, summands: dict, dim: int, precision):
        """Initializes a Multivector from already-reduced terms.

        Args:
            summands (dict): Map from grade to a non-empty list of blades.
            dim (int): Ambient dimension.
            precision: Common precision of the blades.
        """
        self._summands = {g: list(summands[g]) for g in sorted(summands)}
        self.dim = dim
        self.precision = as_precision(precision)
        self._norm = math.sqrt(sum(b.norm ** 2 for b in self.blades()))

    @property
    def norm(self) -> float:
        return self._norm

    def grades(self) -> list[int]:
        return list(self._summands)

    def blades(self) -> list:
        return [b for g in self._summands for b in self._summands[g]]

    def summands(self) -> dict:
        """Copy of the grade -> blade-list mapping, in ascending grade order."""
        return {g: list(terms) for g, terms in self._summands.items()}

    def __getitem__(self, k: int) -> list:
        return list(self._summands.get(k, []))

    def __len__(self) -> int:
        return sum(len(terms) for terms in self._summands.values())

    def __iter__(self):
        return iter(self.blades())

    def to(self, precision):
        if as_precision(precision) == self.precision:
            return self
        return multivector(self.blades(), precision=precision)

    def __repr__(self):
        counts = ", ".join(f"{g}: {len(t)}" for g, t in self._summands.items())
        return f"Multivector(dim={self.dim}, grades={{{counts}}}, precision={self.precision})"


def _flatten(items) -> list:
    flat = []
    for item in items:
        if isinstance(item, Multivector):
            flat.extend(item.blades())
        else:
            flat.append(item)
    return flat


def _check_dims(items) -> int | None:
    first = None
    for item in items:
        dim = dim_of(item)
        if dim is None:
            continue
        if first is None:
            first = item
        elif dim != dim_of(first):
            raise DimensionMismatchError(
                f"dim(x) = {dim_of(first)} not equal to dim(y) = {dim}"
            )
    return dim_of(first) if first is not None else None


def multivector(blades, precision=None):
    """Sum *blades* into the canonical element of the algebra.

    Args:
        blades: Iterable of blades, multivectors (flattened), raw reals, or
            raw vectors.
        precision: Explicit precision; defaults to the widest precision among
            the terms.

    Returns:
        A :class:`Multivector`, or the single blade / scalar / ``Zero`` the
        sum reduces to.

    Raises:
        DimensionMismatchError: If two dimensioned terms differ in ``dim``.
    """
    from core.blade import blade
    from functional.arithmetic import add

    items = _flatten(blades)
    dim = _check_dims(items)
    precision = resolve_precision(*items, precision=precision)

    terms = []
    for item in items:
        if isinstance(item, AbstractMultivector):
            terms.append(item.to(precision))
        elif is_vector(item):
            terms.append(blade(item, precision=precision))
        else:
            terms.append(scalar(item, precision))

    if not terms:
        return Zero(precision)
    if all(isinstance(t, AbstractScalar) for t in terms):
        return scalar(sum(t.value for t in terms), precision)

    summands = {}
    for term in terms:
        if term.volume == 0:
            continue
        summands.setdefault(term.grade, []).append(term)

    for grade in sorted({0, 1, dim}):
        if len(summands.get(grade, [])) < 2:
            continue
        total = functools.reduce(add, summands[grade])
        if isinstance(total, Zero):
            del summands[grade]
        else:
            summands[grade] = [total]

    if not summands:
        logger.debug("multivector terms cancelled to Zero")
        return Zero(precision)
    if len(summands) == 1:
        (only,) = summands.values()
        if len(only) == 1:
            return only[0]
    return Multivector(summands, dim, precision)
