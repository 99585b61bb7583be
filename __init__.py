"""Blades: a subspace geometric algebra kernel on PyTorch."""

__version__ = "0.1.0"

from core import (
    Zero,
    One,
    Scalar,
    Blade,
    Pseudoscalar,
    Multivector,
    scalar,
    zero,
    one,
    blade,
    pseudoscalar,
    multivector,
    AlgebraConfig,
    DimensionMismatchError,
    ContainmentError,
    UndefinedOperationError,
)
from functional import (
    wedge,
    contractl,
    contractr,
    dot,
    project,
    dual,
    reverse,
    inverse,
    isapprox,
)

__all__ = [
    "__version__",
    "Zero",
    "One",
    "Scalar",
    "Blade",
    "Pseudoscalar",
    "Multivector",
    "scalar",
    "zero",
    "one",
    "blade",
    "pseudoscalar",
    "multivector",
    "AlgebraConfig",
    "DimensionMismatchError",
    "ContainmentError",
    "UndefinedOperationError",
    "wedge",
    "contractl",
    "contractr",
    "dot",
    "project",
    "dual",
    "reverse",
    "inverse",
    "isapprox",
]
