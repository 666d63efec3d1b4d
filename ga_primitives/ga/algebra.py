"""
Geometric algebra primitives for 3D Euclidean space G(3,0,0).

Elements by grade:
- Grade 0 (Scalar): a single real value
- Grade 1 (Vector): x e₁ + y e₂ + z e₃
- Grade 2 (Bivector): oriented plane element a ∧ b, kept as the ordered
  pair of spanning vectors (a, b)
- Grade 3 (Trivector): oriented volume element, kept as an ordered triple

Products between two vectors a, b:
- Inner product   a · b = a₁b₁ + a₂b₂ + a₃b₃            -> Scalar
- Outer product   a × b (right-handed cross product)    -> Vector
- Wedge product   a ∧ b, the pair (a, b) in that order  -> Bivector
- Geometric prod. ab = a · b + a ∧ b as the pair of its
                  grade-0 and grade-2 parts             -> (Scalar, Bivector)

Components are stored in float64 tensors. Products and sums of squares run
on the tensors; the final sqrt, acos and sin run on the resulting Python
floats through libm. Degenerate inputs (zero vectors, acos arguments
rounded past ±1) return NaN instead of raising.
"""

from __future__ import annotations
import logging
import math
import numbers
from typing import Optional, Tuple, Union

import numpy as np
import torch

from ..core.base import (
    Magnitude,
    Angle,
    InnerProduct,
    OuterProduct,
    WedgeProduct,
    GeometricProduct,
)
from ..core.constants import (
    DEFAULT_DTYPE,
    DEFAULT_DEVICE,
    NUM_COMPONENTS,
    IDX_X,
    IDX_Y,
    IDX_Z,
)
from ..core.types import Real, ArrayLike, ComponentTensor, GeometricPair
from ..utils.config import Config

logger = logging.getLogger(__name__)


class Vector(Magnitude, Angle, InnerProduct, OuterProduct, WedgeProduct, GeometricProduct):
    """
    A grade-1 element x e₁ + y e₂ + z e₃.

    Vectors are immutable values. Components live in a (3,) tensor that is
    never handed out directly; `tensor()` returns a copy.

    Equality is exact and component-wise, with no tolerance.
    """

    def __init__(self, x: Real, y: Real, z: Real,
                 dtype: Optional[torch.dtype] = None,
                 device: Union[str, torch.device, None] = None,
                 config: Optional[Config] = None):
        """
        Initialize a vector from its three components. No validation is done.

        Args:
            x, y, z: Components along e₁, e₂, e₃
            dtype: Storage dtype (float64 by default)
            device: Storage device (cpu by default)
            config: Storage settings; explicit dtype/device take precedence
        """
        if config is not None:
            dtype = dtype or config.torch_dtype
            device = device if device is not None else config.torch_device
        self._v = torch.tensor(
            [x, y, z],
            dtype=dtype or DEFAULT_DTYPE,
            device=device if device is not None else DEFAULT_DEVICE,
        )

    @classmethod
    def new(cls, x: Real, y: Real, z: Real, **kwargs) -> 'Vector':
        """Alias of the constructor."""
        return cls(x, y, z, **kwargs)

    @classmethod
    def from_tensor(cls, components: ArrayLike,
                    dtype: Optional[torch.dtype] = None,
                    device: Union[str, torch.device, None] = None) -> 'Vector':
        """
        Create a vector from a tensor, array or sequence of 3 components.

        Raises:
            ValueError: If `components` is not one-dimensional with 3 entries
        """
        t = torch.as_tensor(components, dtype=dtype or DEFAULT_DTYPE, device=device)
        if t.dim() != 1 or t.shape[-1] != NUM_COMPONENTS:
            raise ValueError(
                f"Expected {NUM_COMPONENTS} components, got shape {tuple(t.shape)}"
            )
        return cls._wrap(t.clone())

    @classmethod
    def _wrap(cls, components: ComponentTensor) -> 'Vector':
        """Wrap an owned (3,) tensor without copying."""
        v = cls.__new__(cls)
        v._v = components
        return v

    # === Components ===

    @property
    def x(self) -> float:
        return self._v[IDX_X].item()

    @property
    def y(self) -> float:
        return self._v[IDX_Y].item()

    @property
    def z(self) -> float:
        return self._v[IDX_Z].item()

    @property
    def dtype(self) -> torch.dtype:
        return self._v.dtype

    @property
    def device(self) -> torch.device:
        return self._v.device

    def tensor(self) -> torch.Tensor:
        """Copy of the (3,) component tensor."""
        return self._v.clone()

    def numpy(self) -> np.ndarray:
        """Components as a numpy array."""
        return self._v.detach().cpu().numpy().copy()

    def tolist(self) -> list:
        return self._v.tolist()

    def to(self, device: Union[str, torch.device]) -> 'Vector':
        """Move to specified device."""
        return Vector._wrap(self._v.to(device))

    def __iter__(self):
        return iter(self.tolist())

    # === Capabilities ===

    def mag(self) -> float:
        """Euclidean norm sqrt(x² + y² + z²)."""
        return magnitude(self)

    def angle(self, other: 'Vector') -> float:
        """Angle to `other` in radians. NaN if either vector is zero."""
        return angle(self, other)

    def innerp(self, other: 'Vector') -> 'Scalar':
        return inner_product(self, other)

    def outerp(self, other: 'Vector') -> 'Vector':
        return outer_product(self, other)

    def wedgep(self, other: 'Vector') -> 'Bivector':
        return wedge_product(self, other)

    def geop(self, other: 'Vector') -> GeometricPair:
        return geometric_product(self, other)

    # === Operators ===

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.tolist() == other.tolist()

    def __hash__(self) -> int:
        return hash(tuple(self.tolist()))

    def __neg__(self) -> 'Vector':
        return Vector._wrap(-self._v)

    def __add__(self, other: 'Vector') -> 'Vector':
        if isinstance(other, Vector):
            return Vector._wrap(self._v + other._v)
        return NotImplemented

    def __sub__(self, other: 'Vector') -> 'Vector':
        if isinstance(other, Vector):
            return Vector._wrap(self._v - other._v)
        return NotImplemented

    def __mul__(self, other: Union['Vector', Real]):
        """Scaling by a real, or geometric product with another vector."""
        if _is_real(other):
            return Vector._wrap(self._v * _factor(other))
        if isinstance(other, Vector):
            return geometric_product(self, other)
        return NotImplemented

    def __rmul__(self, other: Real) -> 'Vector':
        if _is_real(other):
            return Vector._wrap(self._v * _factor(other))
        return NotImplemented

    def __truediv__(self, other: Real) -> 'Vector':
        if _is_real(other):
            return Vector._wrap(self._v / _factor(other))
        return NotImplemented

    def __or__(self, other: 'Vector') -> 'Scalar':
        """Inner product: a | b."""
        if isinstance(other, Vector):
            return inner_product(self, other)
        return NotImplemented

    def __xor__(self, other: 'Vector') -> 'Bivector':
        """Wedge product: a ^ b."""
        if isinstance(other, Vector):
            return wedge_product(self, other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector(x={self.x!r}, y={self.y!r}, z={self.z!r})"


class Scalar:
    """A grade-0 element. Result type of the inner product."""

    def __init__(self, value: Union[Real, torch.Tensor],
                 dtype: Optional[torch.dtype] = None,
                 device: Union[str, torch.device, None] = None):
        if isinstance(value, torch.Tensor):
            s = value.detach().clone().reshape(())
            if dtype is not None or device is not None:
                s = s.to(device=device if device is not None else s.device,
                         dtype=dtype or s.dtype)
            self._s = s
        else:
            self._s = torch.tensor(
                value,
                dtype=dtype or DEFAULT_DTYPE,
                device=device if device is not None else DEFAULT_DEVICE,
            )

    @property
    def value(self) -> float:
        return self._s.item()

    def tensor(self) -> torch.Tensor:
        """Copy of the 0-d value tensor."""
        return self._s.clone()

    def __float__(self) -> float:
        return self.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Scalar(value={self.value!r})"


class Bivector(Magnitude):
    """
    A grade-2 element x ∧ y.

    Holds references to the two spanning vectors rather than copies.
    Vectors are immutable, so the referenced data cannot change under the
    bivector. Order matters: (a, b) and (b, a) are different bivectors.
    """

    def __init__(self, x: Vector, y: Vector):
        self._x = x
        self._y = y

    @classmethod
    def from_vectors(cls, x: Vector, y: Vector) -> 'Bivector':
        """Pair two existing vectors. No copying, no check for parallelism."""
        return cls(x, y)

    @property
    def x(self) -> Vector:
        return self._x

    @property
    def y(self) -> Vector:
        return self._y

    def vectors(self) -> Tuple[Vector, Vector]:
        return self._x, self._y

    def mag(self) -> float:
        """
        Area of the parallelogram spanned by x and y:
        |x| |y| sin(angle(x, y)).

        0 for axis-parallel vectors, NaN when either vector is zero.
        """
        return magnitude(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bivector):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Bivector(x={self._x!r}, y={self._y!r})"


class Trivector:
    """
    A grade-3 element x ∧ y ∧ z, kept as an ordered triple of vector
    references. Nothing in the algebra produces or consumes trivectors yet.
    """

    def __init__(self, x: Vector, y: Vector, z: Vector):
        self._x = x
        self._y = y
        self._z = z

    @classmethod
    def from_vectors(cls, x: Vector, y: Vector, z: Vector) -> 'Trivector':
        return cls(x, y, z)

    @property
    def x(self) -> Vector:
        return self._x

    @property
    def y(self) -> Vector:
        return self._y

    @property
    def z(self) -> Vector:
        return self._z

    def vectors(self) -> Tuple[Vector, Vector, Vector]:
        return self._x, self._y, self._z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Trivector):
            return NotImplemented
        return self.vectors() == other.vectors()

    def __hash__(self) -> int:
        return hash(self.vectors())

    def __repr__(self) -> str:
        return f"Trivector(x={self._x!r}, y={self._y!r}, z={self._z!r})"


# === Tensor kernels ===

def _is_real(value) -> bool:
    """Real numbers, numpy scalars and 0-d tensors."""
    if isinstance(value, torch.Tensor):
        return value.dim() == 0
    return isinstance(value, numbers.Real)


def _factor(value) -> Union[float, torch.Tensor]:
    if isinstance(value, torch.Tensor):
        return value
    return float(value)


def _dot(a: Vector, b: Vector) -> torch.Tensor:
    ax, ay, az = a._v.unbind()
    bx, by, bz = b._v.unbind()
    return ax * bx + ay * by + az * bz


def _norm(v: Vector) -> float:
    x, y, z = v._v.unbind()
    return math.sqrt((x * x + y * y + z * z).item())


def _angle(a: Vector, b: Vector) -> float:
    dot = _dot(a, b).item()
    denom = _norm(a) * _norm(b)
    if denom == 0.0:
        return math.nan
    cos = dot / denom
    # Rounding can push the cosine past ±1, outside the acos domain
    if not -1.0 <= cos <= 1.0:
        return math.nan
    return math.acos(cos)


# === Operations ===

def magnitude(element: Union[Vector, Bivector]) -> float:
    """
    Magnitude of a vector or bivector.

    Raises:
        TypeError: If `element` is neither a Vector nor a Bivector
    """
    if isinstance(element, Vector):
        return _norm(element)
    if isinstance(element, Bivector):
        x, y = element.vectors()
        result = _norm(x) * _norm(y) * math.sin(_angle(x, y))
        if math.isnan(result):
            logger.debug("Bivector magnitude is NaN for %r", element)
        return result
    raise TypeError(
        f"magnitude() expects a Vector or Bivector, got {type(element).__name__}"
    )


def angle(a: Vector, b: Vector) -> float:
    """
    Angle between two vectors: acos(a · b / (|a| |b|)), in [0, π].

    Returns NaN when either vector has zero magnitude or when rounding pushes
    the cosine outside [-1, 1].
    """
    result = _angle(a, b)
    if math.isnan(result):
        logger.debug("Angle between %r and %r is undefined", a, b)
    return result


def inner_product(a: Vector, b: Vector) -> Scalar:
    """Compute the inner (dot) product a · b."""
    return Scalar(_dot(a, b))


def outer_product(a: Vector, b: Vector) -> Vector:
    """
    Compute the right-handed cross product a × b:
    (a₂b₃ − a₃b₂, a₃b₁ − a₁b₃, a₁b₂ − a₂b₁).

    Anticommutative: outer_product(a, b) == -outer_product(b, a).
    """
    ax, ay, az = a._v.unbind()
    bx, by, bz = b._v.unbind()
    return Vector._wrap(torch.stack([
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    ]))


def wedge_product(a: Vector, b: Vector) -> Bivector:
    """
    Compute the wedge product a ∧ b.

    Purely structural: records a and b in order, no arithmetic.
    """
    return Bivector(a, b)


def geometric_product(a: Vector, b: Vector) -> GeometricPair:
    """
    Compute the geometric product ab = a · b + a ∧ b.

    Returned as the pair of its grade-0 and grade-2 parts.
    """
    return inner_product(a, b), wedge_product(a, b)


# === Factory functions for basis vectors ===

def e1(coeff: Real = 1.0, **kwargs) -> Vector:
    """Create coeff · e₁."""
    return Vector(coeff, 0.0, 0.0, **kwargs)


def e2(coeff: Real = 1.0, **kwargs) -> Vector:
    """Create coeff · e₂."""
    return Vector(0.0, coeff, 0.0, **kwargs)


def e3(coeff: Real = 1.0, **kwargs) -> Vector:
    """Create coeff · e₃."""
    return Vector(0.0, 0.0, coeff, **kwargs)


def zero(**kwargs) -> Vector:
    """Create the zero vector."""
    return Vector(0.0, 0.0, 0.0, **kwargs)
