"""
Core module for ga-primitives.

Contains:
- Constants: default dtype/device and component layout
- Types: type aliases shared across the package
- Base: abstract capability classes implemented by the algebra elements
"""

from .constants import (
    DEFAULT_DTYPE,
    DEFAULT_DTYPE_NAME,
    DEFAULT_DEVICE,
    SUPPORTED_DTYPES,
    NUM_COMPONENTS,
    IDX_X,
    IDX_Y,
    IDX_Z,
)

from .types import (
    Real,
    ComponentTensor,
    ArrayLike,
    GeometricPair,
)

from .base import (
    Magnitude,
    Angle,
    InnerProduct,
    OuterProduct,
    WedgeProduct,
    GeometricProduct,
)

__all__ = [
    # Constants
    "DEFAULT_DTYPE",
    "DEFAULT_DTYPE_NAME",
    "DEFAULT_DEVICE",
    "SUPPORTED_DTYPES",
    "NUM_COMPONENTS",
    "IDX_X",
    "IDX_Y",
    "IDX_Z",
    # Types
    "Real",
    "ComponentTensor",
    "ArrayLike",
    "GeometricPair",
    # Capabilities
    "Magnitude",
    "Angle",
    "InnerProduct",
    "OuterProduct",
    "WedgeProduct",
    "GeometricProduct",
]
