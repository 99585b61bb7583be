# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Abstract bases of the algebra's variant types.

``AbstractMultivector > AbstractBlade > AbstractScalar``. The bases carry the
Python operator overloads; the operators themselves live in ``functional``
and are imported lazily to keep the type layer free of import cycles.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod

import torch

from core.validation import is_vector


def _is_operand(x) -> bool:
    return isinstance(x, (AbstractMultivector, numbers.Real)) or is_vector(x)


class AbstractMultivector(ABC):
    """Base class of every element of the algebra.

    Supports natural syntax: ``A + B``, ``A - B``, ``-A``, ``x * A``, ``A / x``,
    ``~A`` (reverse), ``A ^ B`` (wedge), ``A << B`` (left contraction),
    ``A >> B`` (right contraction), ``A | B`` (dot) and ``A == B``.

    Attributes:
        precision (torch.dtype): Floating dtype of the payload.
        dim (int): Dimension of the ambient space (0 for scalar-likes).
    """

    # Let numpy hand binary operators with arrays back to us.
    __array_ufunc__ = None

    precision: torch.dtype
    dim: int

    @property
    @abstractmethod
    def norm(self) -> float:
        """Magnitude of the element."""

    @abstractmethod
    def grades(self) -> list[int]:
        """Grades present, ascending."""

    @abstractmethod
    def blades(self) -> list:
        """Blade terms, in ascending grade order."""

    @abstractmethod
    def to(self, precision) -> AbstractMultivector:
        """Return the same element stored at *precision*."""

    def __getitem__(self, k: int) -> list:
        """Blades of grade *k* (an empty list if the grade is absent)."""
        return [b for b in self.blades() if b.grade == k]

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import subtract
        return subtract(other, self)

    def __neg__(self):
        from functional.arithmetic import negate
        return negate(self)

    def __pos__(self):
        return self

    def __mul__(self, other):
        """Scalar multiplication. Both operands non-scalar raises ``TypeError``."""
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import multiply
        return multiply(other, self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.arithmetic import divide
        return divide(other, self)

    def __invert__(self):
        """Reversion (~A)."""
        from functional.arithmetic import reverse
        return reverse(self)

    def __xor__(self, other):
        """Outer product (A ^ B)."""
        if not _is_operand(other):
            return NotImplemented
        from functional.wedge import wedge
        return wedge(self, other)

    def __rxor__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.wedge import wedge
        return wedge(other, self)

    def __lshift__(self, other):
        """Left contraction (A << B)."""
        if not _is_operand(other):
            return NotImplemented
        from functional.contraction import contractl
        return contractl(self, other)

    def __rlshift__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.contraction import contractl
        return contractl(other, self)

    def __rshift__(self, other):
        """Right contraction (A >> B)."""
        if not _is_operand(other):
            return NotImplemented
        from functional.contraction import contractr
        return contractr(self, other)

    def __rrshift__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.contraction import contractr
        return contractr(other, self)

    def __or__(self, other):
        """Dot product (A | B), the left contraction."""
        if not _is_operand(other):
            return NotImplemented
        from functional.contraction import dot
        return dot(self, other)

    def __ror__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from functional.contraction import dot
        return dot(other, self)

    def __eq__(self, other):
        if not isinstance(other, (AbstractMultivector, numbers.Real)):
            return NotImplemented
        from functional.comparison import equals
        return equals(self, other)

    def __hash__(self):
        return hash((type(self).__name__, self.dim, tuple(self.grades())))


class AbstractBlade(AbstractMultivector):
    """A single term of one grade: the wedge of ``grade`` vectors."""

    grade: int

    @property
    @abstractmethod
    def volume(self) -> float:
        """Signed magnitude relative to ``basis``."""

    @property
    def sign(self) -> int:
        """Orientation relative to ``basis``: -1, 0 or +1."""
        volume = self.volume
        return (volume > 0) - (volume < 0)

    def grades(self) -> list[int]:
        return [self.grade]

    def blades(self) -> list:
        return [self]

    def __hash__(self):
        return hash((type(self).__name__, self.dim, self.grade, self.volume))


class AbstractScalar(AbstractBlade):
    """Grade-0 elements. They carry no ambient dimension."""

    dim = 0
    grade = 0

    @property
    @abstractmethod
    def value(self) -> float:
        """The scalar's real value."""

    @property
    def volume(self) -> float:
        return self.value

    @property
    def norm(self) -> float:
        return abs(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __hash__(self):
        return hash(self.value)
