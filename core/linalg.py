# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Dense linear-algebra primitives used by the blade algebra.

Thin wrappers over ``torch.linalg`` that factorise in a working dtype
(see :func:`core.precision.working_dtype`) and hand back results in the
caller's precision.
"""

from typing import Tuple

import torch

from core.precision import working_dtype


def _work(matrix: torch.Tensor) -> torch.Tensor:
    return matrix.to(working_dtype(matrix.dtype))


def qr(vectors: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """Reduced QR factorisation of a ``[dim, k]`` matrix.

    Returns:
        Tuple[torch.Tensor, torch.Tensor]: ``Q`` of shape ``[dim, k]`` with
        orthonormal columns and upper-triangular ``R`` of shape ``[k, k]``.
    """
    Q, R = torch.linalg.qr(_work(vectors), mode="reduced")
    return Q.to(vectors.dtype), R.to(vectors.dtype)


def complement(basis: torch.Tensor) -> torch.Tensor:
    """Orthonormal basis of the orthogonal complement of ``span(basis)``.

    Args:
        basis (torch.Tensor): Orthonormal columns ``[dim, k]``.

    Returns:
        torch.Tensor: Orthonormal columns ``[dim, dim - k]``.
    """
    k = basis.shape[1]
    Q, _ = torch.linalg.qr(_work(basis), mode="complete")
    return Q[:, k:].contiguous().to(basis.dtype)


def det(matrix: torch.Tensor) -> float:
    """Determinant of a square matrix (1 for an empty matrix)."""
    if matrix.numel() == 0:
        return 1.0
    return float(torch.linalg.det(_work(matrix)))


def rank(matrix: torch.Tensor) -> int:
    """Numerical rank with the default ``torch.linalg.matrix_rank`` tolerance."""
    return int(torch.linalg.matrix_rank(_work(matrix)))


def vector_norm(x: torch.Tensor) -> float:
    """Euclidean (Frobenius for matrices) norm."""
    return float(torch.linalg.vector_norm(_work(x)))


def project_onto(vectors: torch.Tensor, basis: torch.Tensor) -> torch.Tensor:
    """Orthogonal projection of the columns of *vectors* onto ``span(basis)``."""
    return basis @ (basis.transpose(0, 1) @ vectors)


def reject_from(vectors: torch.Tensor, basis: torch.Tensor) -> torch.Tensor:
    """Component of the columns of *vectors* orthogonal to ``span(basis)``."""
    return vectors - project_onto(vectors, basis)


def sign(x: float) -> int:
    """Sign of a real number as -1, 0 or +1."""
    return (x > 0) - (x < 0)
