"""
Configuration Module

Parameters of a perception hierarchy, loadable from a mapping or a YAML file.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_RADIUS_GROWTH,
    DEFAULT_RADIUS_SCALE,
    DEFAULT_RESOLUTION,
)
from .spectrum import is_power_of_two

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerceptionConfig:
    """
    Configuration for a perception hierarchy.

    Level k uses a concept radius of radius_scale * radius_growth^k.
    """
    radius_scale: float = DEFAULT_RADIUS_SCALE     # Initial radius at level 0
    resolution: int = DEFAULT_RESOLUTION           # Trajectory length (power of two)
    max_depth: int = DEFAULT_MAX_DEPTH             # Number of dimensions
    radius_growth: float = DEFAULT_RADIUS_GROWTH   # Radius multiplier per level
    load_from: Optional[str] = None                # Input source, for loaders
    save_at: Optional[str] = None                  # Where collaborators persist dimensions
    init_with: Optional[str] = None                # Previously saved dimensions

    def __post_init__(self):
        """Validate configuration."""
        if not self.radius_scale > 0:
            raise ValueError(f"radius_scale must be > 0, got {self.radius_scale}")
        if not is_power_of_two(self.resolution):
            raise ValueError(f"resolution must be a power of two, got {self.resolution}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if not self.radius_growth > 0:
            raise ValueError(f"radius_growth must be > 0, got {self.radius_growth}")

    @property
    def radius_scales(self) -> Tuple[float, ...]:
        """Concept radius of each level, bottom to top."""
        return tuple(self.radius_scale * self.radius_growth ** level
                     for level in range(self.max_depth))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PerceptionConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "PerceptionConfig":
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        config = cls.from_dict(data)
        logger.info(f"Loaded perception config from {path}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
