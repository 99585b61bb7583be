# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Shared fixtures for the blade algebra tests."""

import pytest
import torch

from core import blade


@pytest.fixture
def gen():
    """Seeded generator so random blades are reproducible."""
    return torch.Generator().manual_seed(2026)


@pytest.fixture
def randn(gen):
    """Factory for float64 Gaussian matrices drawn from the seeded generator."""
    def _randn(*shape):
        return torch.randn(*shape, generator=gen, dtype=torch.float64)
    return _randn


@pytest.fixture
def basis3():
    """Unit basis blades of 3-D space: e1, e2, e3 and e12."""
    e1 = blade([1.0, 0.0, 0.0])
    e2 = blade([0.0, 1.0, 0.0])
    e3 = blade([0.0, 0.0, 1.0])
    e12 = blade(torch.tensor([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]], dtype=torch.float64))
    return {"e1": e1, "e2": e2, "e3": e3, "e12": e12}
