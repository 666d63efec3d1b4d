"""
Capability interfaces for geometric algebra elements.

Each algebraic operation is its own abstract capability so that element
types declare exactly what they support:

    Magnitude
    ├── Vector
    └── Bivector
    Angle, InnerProduct, OuterProduct, WedgeProduct, GeometricProduct
    └── Vector
"""

from abc import ABC, abstractmethod


class Magnitude(ABC):
    """Elements with a real-valued size."""

    @abstractmethod
    def mag(self) -> float:
        """Return the magnitude as a Python float."""


class Angle(ABC):
    """Elements that can measure the angle to a vector."""

    @abstractmethod
    def angle(self, other) -> float:
        """Return the angle to `other` in radians, in [0, π]."""


class InnerProduct(ABC):

    @abstractmethod
    def innerp(self, other):
        """Return the inner (dot) product with `other` as a Scalar."""


class OuterProduct(ABC):

    @abstractmethod
    def outerp(self, other):
        """Return the outer (cross) product with `other` as a Vector."""


class WedgeProduct(ABC):

    @abstractmethod
    def wedgep(self, other):
        """Return the Bivector spanned by self and `other`, in that order."""


class GeometricProduct(ABC):

    @abstractmethod
    def geop(self, other):
        """Return the (Scalar, Bivector) parts of the geometric product."""
