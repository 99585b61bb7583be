# Versor: Universal Geometric Algebra Neural Network (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Floating-point precision handling.

Every algebra entity is parameterised by a torch floating dtype. Binary
operations resolve to the wider of their operands' precisions unless a
precision is requested explicitly. Tolerances are always derived from a
precision at the call site; there is no global tolerance state.
"""

import functools
import math
import numbers
from typing import Optional

import numpy as np
import torch

DEFAULT_PRECISION = torch.float64

SUPPORTED_PRECISIONS = (torch.float16, torch.float32, torch.float64)

# Epsilon multiple below which a blade's norm is treated as zero
BLADE_ATOL_FACTOR = 100

_NUMPY_FLOATS = {
    2: torch.float16,
    4: torch.float32,
    8: torch.float64,
}


def as_precision(precision) -> torch.dtype:
    """Normalise a precision argument to a supported torch dtype.

    Args:
        precision: A ``torch.dtype``, a numpy dtype (or type), or a name such
            as ``"float32"``.

    Returns:
        torch.dtype: One of :data:`SUPPORTED_PRECISIONS`.
    """
    if isinstance(precision, torch.dtype):
        dtype = precision
    elif isinstance(precision, str):
        dtype = getattr(torch, precision, None)
    else:
        try:
            np_dtype = np.dtype(precision)
        except TypeError:
            np_dtype = None
        dtype = _from_numpy_dtype(np_dtype) if np_dtype is not None else None

    if dtype not in SUPPORTED_PRECISIONS:
        raise ValueError(
            f"precision: expected one of {SUPPORTED_PRECISIONS}, got {precision!r}"
        )
    return dtype


def _from_numpy_dtype(np_dtype: np.dtype) -> Optional[torch.dtype]:
    if np_dtype.kind != 'f':
        return None
    # longdouble and friends collapse to float64
    return _NUMPY_FLOATS.get(np_dtype.itemsize, torch.float64)


def precision_of(obj) -> Optional[torch.dtype]:
    """Return the precision carried by *obj*, or ``None`` if it is untyped.

    Algebra entities, floating tensors, and floating numpy arrays/scalars
    carry a precision. Python numbers, integer data and plain lists do not.
    """
    precision = getattr(obj, "precision", None)
    if isinstance(precision, torch.dtype):
        return precision
    if isinstance(obj, torch.Tensor):
        if not obj.is_floating_point():
            return None
        return obj.dtype if obj.dtype in SUPPORTED_PRECISIONS else torch.float32
    if isinstance(obj, (np.ndarray, np.generic)):
        return _from_numpy_dtype(obj.dtype)
    return None


def resolve_precision(*objs, precision=None) -> torch.dtype:
    """Resolve the common precision of a group of operands.

    Args:
        *objs: Operands (entities, tensors, arrays, or plain numbers).
        precision: Explicit override. Wins over anything inferred.

    Returns:
        torch.dtype: The explicit precision, else the widest precision carried
        by *objs*, else :data:`DEFAULT_PRECISION`.
    """
    if precision is not None:
        return as_precision(precision)
    found = [p for p in map(precision_of, objs) if p is not None]
    if not found:
        return DEFAULT_PRECISION
    return functools.reduce(torch.promote_types, found)


def eps(precision) -> float:
    """Machine epsilon of *precision*."""
    return torch.finfo(as_precision(precision)).eps


def blade_atol(precision, factor: float = BLADE_ATOL_FACTOR) -> float:
    """Default absolute tolerance below which a blade collapses to Zero."""
    return factor * eps(precision)


def default_rtol(*precisions) -> float:
    """Default relative tolerance for approximate comparison.

    Uses the loosest ``sqrt(eps)`` among *precisions* so that values stored
    at different widths still compare equal.
    """
    if not precisions:
        precisions = (DEFAULT_PRECISION,)
    return max(math.sqrt(eps(p)) for p in precisions)


def working_dtype(precision: torch.dtype) -> torch.dtype:
    """Dtype used for dense linear algebra on data of *precision*.

    ``torch.linalg`` has no half-precision kernels on CPU, so float16 data
    is factorised in float32 and cast back.
    """
    return torch.float32 if precision == torch.float16 else precision


def cast_value(value, precision: torch.dtype) -> float:
    """Round a real number through *precision* and return it as a Python float."""
    if not isinstance(value, numbers.Real):
        raise TypeError(f"value: expected a real number, got {type(value).__name__}")
    return float(torch.tensor(float(value), dtype=precision))
