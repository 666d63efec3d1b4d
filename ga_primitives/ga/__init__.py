"""
GA (Geometric Algebra) module.

Implements the grade 0-3 elements of G(3,0,0) and the products between
vectors: inner, outer (cross), wedge and geometric.
"""

from .algebra import (
    Vector,
    Scalar,
    Bivector,
    Trivector,
    magnitude,
    angle,
    inner_product,
    outer_product,
    wedge_product,
    geometric_product,
    e1, e2, e3,
    zero,
)

__all__ = [
    # Elements
    "Vector",
    "Scalar",
    "Bivector",
    "Trivector",
    # Operations
    "magnitude",
    "angle",
    "inner_product",
    "outer_product",
    "wedge_product",
    "geometric_product",
    # Basis vectors
    "e1", "e2", "e3",
    "zero",
]
