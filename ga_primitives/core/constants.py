"""
Centralized constants for ga-primitives.

Default storage settings and the component layout of vectors.

Usage:
    from ga_primitives.core.constants import DEFAULT_DTYPE, NUM_COMPONENTS
"""

import torch


# =============================================================================
# Storage Defaults
# =============================================================================

# Components are stored in double precision so results match IEEE-754 f64
DEFAULT_DTYPE: torch.dtype = torch.float64
DEFAULT_DTYPE_NAME: str = "float64"

DEFAULT_DEVICE: str = "cpu"

# Floating dtypes accepted by Config
SUPPORTED_DTYPES = {
    "float16": torch.float16,
    "bfloat16": torch.bfloat16,
    "float32": torch.float32,
    "float64": torch.float64,
}


# =============================================================================
# Algebra Layout
# =============================================================================

# Number of components of a grade-1 element in 3D
NUM_COMPONENTS: int = 3

# Component indices
IDX_X: int = 0
IDX_Y: int = 1
IDX_Z: int = 2
