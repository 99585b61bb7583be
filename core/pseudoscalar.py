# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Top-grade blades, stored compactly as ``(dim, value)``."""

import numbers

import torch

from core.base import AbstractBlade, AbstractScalar
from core.precision import cast_value, resolve_precision
from core.scalars import Zero, scalar
from core.validation import check_dim


class Pseudoscalar(AbstractBlade):
    """Blade of grade ``dim``: ``value`` times the unit pseudoscalar.

    Args:
        dim (int): Ambient dimension (>= 1).
        value (Real): Nonzero signed volume.
        precision: Floating dtype. Defaults to the one carried by *value*.
    """

    def __init__(self, dim: int, value, precision=None):
        dim = check_dim(dim)
        if dim < 1:
            raise ValueError(f"dim: expected dim >= 1, got {dim} (use pseudoscalar())")
        self.precision = resolve_precision(value, precision=precision)
        value = cast_value(value, self.precision)
        if value == 0:
            raise ValueError("value: expected a nonzero value (use pseudoscalar())")
        self.dim = dim
        self.grade = dim
        self._value = value

    @property
    def value(self) -> float:
        return self._value

    @property
    def volume(self) -> float:
        return self._value

    @property
    def norm(self) -> float:
        return abs(self._value)

    @property
    def basis(self) -> torch.Tensor:
        """Identity basis of the ambient space (a fresh tensor each call)."""
        return torch.eye(self.dim, dtype=self.precision)

    def to(self, precision):
        return pseudoscalar(self.dim, self._value, precision)

    def __repr__(self):
        return f"Pseudoscalar(dim={self.dim}, value={self._value!r}, precision={self.precision})"


def pseudoscalar(dim: int, value=1, precision=None):
    """Build a pseudoscalar, canonicalising degenerate cases.

    Args:
        dim (int): Ambient dimension.
        value: Real number or scalar-like.
        precision: Explicit precision; defaults to the one carried by *value*.

    Returns:
        :class:`Zero` for a zero value, ``scalar(value)`` when ``dim == 0``,
        otherwise a :class:`Pseudoscalar`.
    """
    dim = check_dim(dim)
    if isinstance(value, AbstractScalar):
        precision = resolve_precision(value, precision=precision)
        value = value.value
    elif not isinstance(value, numbers.Real):
        raise TypeError(f"value: expected a real number or scalar, got {type(value).__name__}")
    precision = resolve_precision(value, precision=precision)

    value = cast_value(value, precision)
    if value == 0:
        return Zero(precision)
    if dim == 0:
        return scalar(value, precision)
    return Pseudoscalar(dim, value, precision)
