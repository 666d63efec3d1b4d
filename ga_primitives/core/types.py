"""
Type aliases for ga-primitives.

Vectors keep their components in a 1-D tensor of shape (3,). Scalars hold a
0-d tensor. Everything returned to the caller as a plain real is a Python
float.
"""

from typing import Tuple, Union, TYPE_CHECKING

import numpy as np
import torch

if TYPE_CHECKING:
    from ..ga.algebra import Scalar, Bivector


# Anything accepted as a real coefficient
Real = Union[int, float]

# Component storage: (3,) tensor [x, y, z]
ComponentTensor = torch.Tensor

# Inputs accepted by Vector.from_tensor
ArrayLike = Union[torch.Tensor, np.ndarray, list, tuple]

# Result of the geometric product: (grade-0 part, grade-2 part)
GeometricPair = Tuple["Scalar", "Bivector"]
