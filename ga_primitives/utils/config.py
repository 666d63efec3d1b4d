"""
Configuration management for ga-primitives.

Controls how vector components are stored (dtype and device).
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Union
from pathlib import Path

import torch

from ..core.constants import DEFAULT_DTYPE_NAME, DEFAULT_DEVICE, SUPPORTED_DTYPES

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Storage configuration for algebra elements.

    Attributes:
        dtype: Name of a floating torch dtype ('float64', 'float32', ...)
        device: Device to store components on ('cpu', 'cuda', 'mps')
        extra: Unrecognised keys carried through from dictionaries
    """

    dtype: str = DEFAULT_DTYPE_NAME
    device: str = DEFAULT_DEVICE

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(
                f"Unsupported dtype: {self.dtype}. "
                f"Supported: {', '.join(SUPPORTED_DTYPES)}"
            )

    @property
    def torch_dtype(self) -> torch.dtype:
        return SUPPORTED_DTYPES[self.dtype]

    @property
    def torch_device(self) -> torch.device:
        return torch.device(self.device)

    def factory_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for Vector(...) and the basis factories."""
        return {'dtype': self.torch_dtype, 'device': self.torch_device}

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: Union[str, Path]) -> Config:
    """Read a Config from a JSON file written by `save_config`."""
    path = Path(filepath)
    config = Config.from_dict(json.loads(path.read_text()))
    logger.debug("Loaded %r from %s", config, path)
    return config


def save_config(config: Config, filepath: Union[str, Path]) -> Path:
    """Write `config` as JSON, creating parent directories. Returns the path."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2))
    return path
