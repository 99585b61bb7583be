"""Variant types of the subspace algebra.

Scalars, blades, pseudoscalars and multivectors, with the precision,
tolerance and validation helpers they are built on.
"""

from .errors import (
    BladesError,
    DimensionMismatchError,
    ContainmentError,
    UndefinedOperationError,
)
from .precision import (
    DEFAULT_PRECISION,
    SUPPORTED_PRECISIONS,
    as_precision,
    resolve_precision,
    eps,
    blade_atol,
    default_rtol,
)
from .config import AlgebraConfig, DEFAULT_CONFIG
from .base import AbstractMultivector, AbstractBlade, AbstractScalar
from .scalars import Zero, One, Scalar, scalar, zero, one
from .pseudoscalar import Pseudoscalar, pseudoscalar
from .blade import Blade, blade
from .multivector import Multivector, multivector

__all__ = [
    # errors
    "BladesError",
    "DimensionMismatchError",
    "ContainmentError",
    "UndefinedOperationError",
    # precision / config
    "DEFAULT_PRECISION",
    "SUPPORTED_PRECISIONS",
    "as_precision",
    "resolve_precision",
    "eps",
    "blade_atol",
    "default_rtol",
    "AlgebraConfig",
    "DEFAULT_CONFIG",
    # types
    "AbstractMultivector",
    "AbstractBlade",
    "AbstractScalar",
    "Zero",
    "One",
    "Scalar",
    "Pseudoscalar",
    "Blade",
    "Multivector",
    # factories
    "scalar",
    "zero",
    "one",
    "pseudoscalar",
    "blade",
    "multivector",
]
