# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Numeric configuration for the blade algebra.

Gathers the tolerance knobs into a single frozen :class:`AlgebraConfig`.
The kernel reads :data:`DEFAULT_CONFIG` for its defaults; callers that want
different tolerances pass ``atol`` explicitly, optionally taken from a config
loaded with OmegaConf. Precision is never configured globally: it is carried
by the operands or passed per call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from omegaconf import DictConfig, OmegaConf

from core.precision import BLADE_ATOL_FACTOR, DEFAULT_PRECISION, eps


@dataclass(frozen=True)
class AlgebraConfig:
    """Immutable bag of tolerance settings.

    Attributes:
        blade_atol_factor: Multiple of machine epsilon below which a blade's
            norm collapses it to Zero.
        containment_tol: Absolute tolerance of the subspace containment test
            in relative duals. ``None`` -> ``sqrt(eps)`` of the operand
            precision.
    """

    blade_atol_factor: float = BLADE_ATOL_FACTOR
    containment_tol: float | None = None

    def __post_init__(self) -> None:
        if self.blade_atol_factor < 0:
            raise ValueError(
                f"blade_atol_factor: expected >= 0, got {self.blade_atol_factor}"
            )
        if self.containment_tol is not None and self.containment_tol < 0:
            raise ValueError(
                f"containment_tol: expected >= 0, got {self.containment_tol}"
            )

    def blade_atol(self, precision=DEFAULT_PRECISION) -> float:
        """Collapse tolerance for blades of *precision*."""
        return self.blade_atol_factor * eps(precision)

    def containment_atol(self, precision=DEFAULT_PRECISION) -> float:
        """Containment tolerance for relative duals of *precision*."""
        if self.containment_tol is not None:
            return self.containment_tol
        return math.sqrt(eps(precision))

    @classmethod
    def from_omegaconf(cls, cfg: DictConfig) -> AlgebraConfig:
        """Build a config from an OmegaConf node, ignoring unknown keys.

        Args:
            cfg (DictConfig): Node holding any of the dataclass fields, either
                at the top level or under an ``algebra`` key.
        """
        if "algebra" in cfg:
            cfg = cfg.algebra
        known = {f.name for f in fields(cls)}
        return cls(**{k: cfg.get(k) for k in known if cfg.get(k) is not None})

    @classmethod
    def load(cls, path: str) -> AlgebraConfig:
        """Load a config from a YAML file."""
        return cls.from_omegaconf(OmegaConf.load(path))


DEFAULT_CONFIG = AlgebraConfig()
