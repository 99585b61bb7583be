# Versor: Universal Geometric Algebra Neural Network (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Error kinds raised by the blade algebra.

All three are contract violations by the caller and are never caught
inside the kernel.
"""


class BladesError(Exception):
    """Base class for errors raised by the algebra."""


class DimensionMismatchError(BladesError, ValueError):
    """Two dimensioned operands live in ambient spaces of different dimension."""


class ContainmentError(BladesError, ValueError):
    """A blade is not contained in the subspace it is being measured against."""


class UndefinedOperationError(BladesError, ArithmeticError):
    """The requested operation has no algebraic meaning for its operands."""
