"""
ga-primitives: 3D Geometric Algebra Primitives

Vectors, scalars, bivectors and trivectors of G(3,0,0) with the products
relating them.

Key Features:
- Immutable, tensor-backed value types
- Magnitude, angle, inner, outer (cross), wedge and geometric products
- IEEE-754 behaviour on degenerate input (NaN, never an exception)

Example:
    >>> from ga_primitives import Vector
    >>> a, b = Vector(0.0, 1.0, 0.0), Vector(1.0, 0.0, 0.0)
    >>> a.outerp(b)
    Vector(x=0.0, y=0.0, z=-1.0)
    >>> scalar_part, bivector_part = a.geop(b)
"""

__version__ = "0.1.0"
__author__ = "ga-primitives Contributors"

from . import core
from . import ga
from . import utils

from .ga import (
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
)
from .utils import Config

__all__ = [
    "core",
    "ga",
    "utils",
    "Vector",
    "Scalar",
    "Bivector",
    "Trivector",
    "magnitude",
    "angle",
    "inner_product",
    "outer_product",
    "wedge_product",
    "geometric_product",
    "Config",
]
