"""
Dimension Module

One level of the perception hierarchy: a conceptual space, an episodic log,
and the Markov statistics of its labels. Every incoming spectrum is
categorized, counted and stored; when the segmentation predicate fires, the
open segment is abstracted into a spectrum for the superior level.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .abstraction import interpolate, transform
from .categorization import categorize
from .concept import Concept, Label, Symbol, gen_concept_symbol
from .markov import BigramModel, UnigramModel
from .memory import EpisodicMemory, SemanticMemory
from .segmentation import segment
from .spectrum import Spectrum, is_power_of_two

logger = logging.getLogger(__name__)


class Dimension:
    """
    The dimension at a given level of abstraction.

    Consists of the dual memory (episodic and semantic) and the statistics of
    the constituent labels.

    Attributes:
        level: Level of abstraction (0 is the input level)
        radius_scale: Initial radius of a new concept
        resolution: Number of real and virtual concepts in an abstracted trajectory
        episodic: Memory of previously seen symbols
        semantic: Space of concepts
        unigram: Counts of each label
        bigram: Counts of each ordered pair of labels
    """

    def __init__(self, level: int, radius_scale: float, resolution: int):
        if radius_scale <= 0:
            raise ValueError(f"radius_scale must be > 0, got {radius_scale}")
        if not is_power_of_two(resolution):
            raise ValueError(f"resolution must be a power of two, got {resolution}")

        self.level = level
        self.radius_scale = radius_scale
        self.resolution = resolution

        self.episodic = EpisodicMemory()
        self.semantic = SemanticMemory()
        self.unigram: UnigramModel[Label] = UnigramModel()
        self.bigram: BigramModel[Label] = BigramModel()

        self._input_dimension: Optional[int] = None

    def perceive(self, spectrum: Spectrum) -> Optional[Spectrum]:
        """
        Main step of the perception loop.

        Inserts the spectrum from the subordinate level as a symbol/concept,
        then categorizes, updates and segments the resulting memory.

        Args:
            spectrum: Observation from the subordinate level

        Returns:
            The abstracted spectrum of the closed segment if a boundary fired,
            otherwise None

        Raises:
            ValueError: If the spectrum's dimension differs from earlier ones
        """
        self._check_dimension(spectrum)

        # Create a new symbol/concept with a label
        label, concept, symbol = gen_concept_symbol(spectrum, self.radius_scale)

        # Categorize the concept in the semantic space
        category = categorize(spectrum.point, self.semantic.space, self.unigram)
        symbol.relabel(category)
        if category not in self.semantic:
            logger.debug(f"Level {self.level}: new concept {category} "
                         f"({len(self.semantic) + 1} total)")

        # Update the markov models of the resulting category
        previous = self.episodic.previous_label
        self.unigram.increment(category)
        self.bigram.increment(previous, category)

        # Insert or refine the category with the observation
        self.semantic.update(category, concept, self.unigram.count(category))

        if segment(self.unigram, previous, category):
            superior = self._abstract_segment()
            self.episodic.close_segment()
            # The boundary symbol opens the next segment
            self.episodic.update(symbol)
            logger.debug(f"Level {self.level}: boundary #{len(self.episodic.segments)} "
                         f"subtending {superior.length} events")
            return superior

        self.episodic.update(symbol)
        return None

    def current_trajectory(self) -> List[Tuple[np.ndarray, int]]:
        """
        (centroid, length) pairs of the concepts in the open segment.

        Raises:
            RuntimeError: If a symbol refers to a label missing from the
                semantic memory
        """
        trajectory = []
        for symbol in self.episodic.head.ongoing:
            concept = self.semantic.get(symbol.label)
            if concept is None:
                raise RuntimeError(
                    f"Level {self.level}: symbol label {symbol.label} missing from semantic memory"
                )
            trajectory.append((concept.centroid, symbol.length))
        return trajectory

    def _abstract_segment(self) -> Spectrum:
        """Abstract the trajectory of the open segment to a spectrum."""
        trajectory = self.current_trajectory()
        length = sum(weight for _, weight in trajectory)
        signal = interpolate(trajectory, self.resolution)
        return transform(signal, length=length)

    def _check_dimension(self, spectrum: Spectrum) -> None:
        if self._input_dimension is None:
            self._input_dimension = spectrum.dimension
        elif spectrum.dimension != self._input_dimension:
            raise ValueError(
                f"Level {self.level} expects {self._input_dimension}-dimensional input, "
                f"got {spectrum.dimension}"
            )

    @property
    def concepts(self) -> Dict[Label, Concept]:
        return self.semantic.space

    @property
    def sequence(self) -> List[Symbol]:
        return self.episodic.sequence

    @property
    def segments(self) -> List[List[Symbol]]:
        return self.episodic.segments

    @property
    def boundary_count(self) -> int:
        return len(self.episodic.segments)

    @property
    def input_dimension(self) -> Optional[int]:
        return self._input_dimension

    def summary(self) -> Dict[str, Any]:
        """Get summary of the state of this dimension."""
        return {
            "level": self.level,
            "radius_scale": self.radius_scale,
            "resolution": self.resolution,
            "input_dimension": self._input_dimension,
            "events": self.unigram.total,
            "concepts": len(self.semantic),
            "boundaries": self.boundary_count,
            "ongoing": len(self.episodic.head.ongoing),
            "counts": {label: count for label, count in self.unigram.items()},
        }

    def __repr__(self) -> str:
        return (f"Dimension(level={self.level}, radius_scale={self.radius_scale}, "
                f"resolution={self.resolution}, concepts={len(self.semantic)}, "
                f"events={self.unigram.total})")
