# Versor: Universal Geometric Algebra Neural Network (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Input validation and conversion for the blade algebra.

Checks raise instead of asserting: they guard user input and the
dimension checks are part of the operator contract.
"""

import numbers

import numpy as np
import torch

from core.errors import DimensionMismatchError
from core.precision import resolve_precision


def check_real(x, name: str = "x") -> None:
    """Raise ``TypeError`` unless *x* is a real number."""
    if not isinstance(x, numbers.Real):
        raise TypeError(f"{name}: expected a real number, got {type(x).__name__}")


def check_dim(dim, name: str = "dim") -> int:
    """Validate an ambient space dimension and return it as ``int``."""
    if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
        raise TypeError(f"{name}: expected an integer, got {type(dim).__name__}")
    if dim < 0:
        raise ValueError(f"{name}: expected dim >= 0, got {dim}")
    return int(dim)


def _to_tensor(data, name: str) -> torch.Tensor:
    if isinstance(data, torch.Tensor):
        tensor = data.detach()
        if tensor.is_complex():
            raise TypeError(f"{name}: expected real data, got dtype {tensor.dtype}")
        return tensor
    array = np.asarray(data)
    if array.dtype.kind not in "biuf":
        raise TypeError(f"{name}: expected real numeric data, got dtype {array.dtype}")
    return torch.from_numpy(np.ascontiguousarray(array))


def is_vector(x) -> bool:
    """Return True if *x* is a raw coordinate vector.

    Raw vectors are 1-D tensors, 1-D numpy arrays, and non-empty flat
    lists/tuples of reals.
    """
    if isinstance(x, (torch.Tensor, np.ndarray)):
        return x.ndim == 1 and x.shape[0] > 0
    if isinstance(x, (list, tuple)):
        return len(x) > 0 and all(isinstance(c, numbers.Real) for c in x)
    return False


def as_vector(data, precision=None, name: str = "v") -> torch.Tensor:
    """Convert a raw coordinate vector to a 1-D tensor of the resolved precision."""
    if not is_vector(data):
        raise TypeError(f"{name}: expected a non-empty 1-D vector, got {type(data).__name__}")
    tensor = _to_tensor(data, name)
    return tensor.to(resolve_precision(data, precision=precision))


def as_vectors(data, precision=None, name: str = "vectors") -> torch.Tensor:
    """Convert spanning vectors to a ``dim x k`` matrix.

    Columns of a 2-D input are the vectors. A 1-D input is a single vector,
    and so is a ``1 x n`` row with ``n > 1``.

    Args:
        data: Tensor, numpy array, or nested list of reals.
        precision: Explicit precision. Defaults to the precision carried by
            *data* (float64 for untyped data).
        name: Argument name used in error messages.

    Returns:
        torch.Tensor: Matrix of shape ``[dim, k]``.
    """
    tensor = _to_tensor(data, name)
    if tensor.numel() == 0:
        raise ValueError(f"{name}: expected at least one coordinate, got shape {tuple(tensor.shape)}")
    if tensor.ndim == 1:
        tensor = tensor.reshape(-1, 1)
    elif tensor.ndim == 2:
        if tensor.shape[0] == 1 and tensor.shape[1] > 1:
            tensor = tensor.transpose(0, 1)
    else:
        raise ValueError(f"{name}: expected ndim 1 or 2, got shape {tuple(tensor.shape)}")
    return tensor.to(resolve_precision(data, precision=precision))


def dim_of(x):
    """Ambient dimension of an entity or raw vector, ``None`` for scalar-likes."""
    if is_vector(x):
        return len(x)
    dim = getattr(x, "dim", None)
    if dim is None or callable(dim) or dim == 0:
        return None
    return dim


def assert_dim_equal(x, y) -> None:
    """Raise :class:`DimensionMismatchError` if dimensioned *x* and *y* differ.

    Scalar-likes and raw reals carry no dimension and always pass.
    """
    dim_x, dim_y = dim_of(x), dim_of(y)
    if dim_x is None or dim_y is None:
        return
    if dim_x != dim_y:
        raise DimensionMismatchError(
            f"dim(x) = {dim_x} not equal to dim(y) = {dim_y}"
        )
