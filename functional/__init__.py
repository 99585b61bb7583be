"""Stateless operators of the subspace algebra.

Arithmetic, outer product, contractions, projection, duality and
comparison. Every operator accepts algebra elements, raw reals and raw
coordinate vectors.
"""

from .arithmetic import (
    add,
    subtract,
    negate,
    multiply,
    divide,
    scale,
    reverse,
    inverse,
    reciprocal,
)
from .wedge import wedge, outer
from .contraction import contractl, contractr, dot
from .projection import project
from .duality import dual
from .comparison import equals, isapprox

__all__ = [
    # arithmetic
    "add",
    "subtract",
    "negate",
    "multiply",
    "divide",
    "scale",
    "reverse",
    "inverse",
    "reciprocal",
    # products
    "wedge",
    "outer",
    "contractl",
    "contractr",
    "dot",
    # subspaces
    "project",
    "dual",
    # comparison
    "equals",
    "isapprox",
]
