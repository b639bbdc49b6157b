"""
Perception Module

Stacks dimensions into a hierarchy. Each raw input becomes a length-1
spectrum for level 0; whenever a level closes a segment, its abstracted
spectrum is fed to the level above. Higher levels therefore fire on ever
rarer events, each chunking the stream at a coarser timescale.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .config import PerceptionConfig
from .dimension import Dimension
from .spectrum import Spectrum

logger = logging.getLogger(__name__)


class Hierarchy:
    """
    Chain of dimensions with geometrically growing concept radii.

    Strictly one forward pass: an input is propagated through every level
    that produces a boundary before the next input is accepted.
    """

    def __init__(self, config: Optional[PerceptionConfig] = None):
        self.config = config or PerceptionConfig()
        self.dimensions: List[Dimension] = [
            Dimension(level, radius_scale, self.config.resolution)
            for level, radius_scale in enumerate(self.config.radius_scales)
        ]
        self.inputs_seen = 0
        self.overflow = 0  # Spectra emitted by the top level

        logger.info(f"Created hierarchy with {len(self.dimensions)} levels, "
                    f"resolution {self.config.resolution}")

    def perceive(self, vector: Any) -> int:
        """
        Feed one raw input vector through the hierarchy.

        Args:
            vector: Feature vector of the input event

        Returns:
            Number of levels that closed a segment on this input
        """
        self.inputs_seen += 1
        spectrum: Optional[Spectrum] = Spectrum.from_vector(vector)
        fired = 0
        for dimension in self.dimensions:
            spectrum = dimension.perceive(spectrum)
            if spectrum is None:
                break
            fired += 1
        else:
            self.overflow += 1
            logger.debug(f"Top level {len(self.dimensions) - 1} emitted a spectrum "
                         f"of length {spectrum.length}; discarded")
        return fired

    def perceive_all(self, inputs: Iterable[Any]) -> List[Dimension]:
        for vector in inputs:
            self.perceive(vector)
        return self.dimensions

    def __getitem__(self, level: int) -> Dimension:
        return self.dimensions[level]

    def __len__(self) -> int:
        return len(self.dimensions)

    def summary(self) -> Dict[str, Any]:
        """Get summary of the whole hierarchy."""
        return {
            "inputs": self.inputs_seen,
            "overflow": self.overflow,
            "levels": [dimension.summary() for dimension in self.dimensions],
        }


def process(config: PerceptionConfig, inputs: Iterable[Any]) -> List[Dimension]:
    """
    Run the system over a sequence of input vectors.

    Args:
        config: Hierarchy parameters
        inputs: Ordered feature vectors of constant dimension

    Returns:
        One populated dimension per level
    """
    hierarchy = Hierarchy(config)
    dimensions = hierarchy.perceive_all(inputs)
    logger.info(f"Perceived {hierarchy.inputs_seen} inputs; concepts per level: "
                f"{[len(d.semantic) for d in dimensions]}")
    return dimensions
