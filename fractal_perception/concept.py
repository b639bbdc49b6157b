"""
Concept/Symbol Module

A Concept is the evolving statistical description of a category: an online
Bayesian estimate of its centroid and per-dimension spread, with a cached
spherical region (centroid, radius) used for categorization.

A Symbol is the episodic record that one input event was assigned to a
category.
"""

from typing import Any, Tuple
from dataclasses import dataclass
import uuid

import numpy as np

from .constants import CONTAINMENT_TOLERANCE, SIGMA_RADIUS, VARIANCE_EPSILON
from .spectrum import Spectrum, as_vector, norm


Label = str


def generate_label() -> Label:
    """Mint a new, never repeated category label."""
    return uuid.uuid4().hex


@dataclass
class Location:
    """Cached region of a concept: a ball around the centroid."""
    centroid: np.ndarray
    radius: float = 0.0


@dataclass
class Moments:
    """Running sample statistics and the fused prior of a concept."""
    sample_mean: np.ndarray
    sample_variance: np.ndarray
    prior_mean: np.ndarray
    prior_variance: np.ndarray


@dataclass
class Concept:
    """
    Online Bayesian model of one category.

    Each dimension is treated as an independent Gaussian; there is no
    cross-dimension covariance.

    Attributes:
        label: Identifier of the category
        location: Cached (centroid, radius) region
        moments: Sample and prior statistics
    """
    label: Label
    location: Location
    moments: Moments

    @classmethod
    def new(cls, label: Label, vector: Any, radius: float) -> 'Concept':
        """
        Create a concept from its first observation.

        The prior variance spreads (radius / 3)^2 evenly across the
        dimensions so that the initial region covers 3σ.

        Args:
            label: Category label
            vector: First observed point
            radius: Initial region radius (the level's radius scale)
        """
        if radius < 0:
            raise ValueError(f"Concept radius must be >= 0, got {radius}")
        point = as_vector(vector)
        dims = max(point.shape[0], 1)
        spread = (radius / SIGMA_RADIUS) ** 2 / dims

        return cls(
            label=label,
            location=Location(centroid=point.copy(), radius=float(radius)),
            moments=Moments(
                sample_mean=point.copy(),
                sample_variance=np.zeros(point.shape),
                prior_mean=point.copy(),
                prior_variance=np.full(point.shape, spread),
            ),
        )

    @property
    def centroid(self) -> np.ndarray:
        return self.location.centroid

    @property
    def radius(self) -> float:
        return self.location.radius

    @property
    def dimension(self) -> int:
        return int(self.moments.prior_mean.shape[0])

    def contains(self, vector: np.ndarray) -> bool:
        """
        True if the vector lies inside the cached region.

        Raises:
            ValueError: If the vector's dimension differs from the concept's
        """
        if np.shape(vector) != self.location.centroid.shape:
            raise ValueError(
                f"Observation has shape {np.shape(vector)}, concept has dimension {self.dimension}"
            )
        distance = norm(vector - self.location.centroid)
        slack = CONTAINMENT_TOLERANCE * max(1.0, norm(self.location.centroid))
        return distance <= self.location.radius + slack

    def update(self, vector: Any, count: int) -> None:
        """
        One online estimation step with a new observation.

        Args:
            vector: Observed point x
            count: Number of observations of this category including x

        Raises:
            ValueError: On a non-positive count or a dimension mismatch
        """
        if count < 1:
            raise ValueError(f"Observation count must be >= 1, got {count}")
        x = as_vector(vector)
        if x.shape != self.moments.sample_mean.shape:
            raise ValueError(
                f"Observation has dimension {x.shape[0]}, concept has {self.dimension}"
            )

        m = self.moments
        mean = m.sample_mean + (x - m.sample_mean) / count

        if count > 1:
            # Real and non-negative for complex observations: (1 - 1/n)|x - m|^2
            spread = np.real((x - mean) * np.conj(x - m.sample_mean))
            variance = m.sample_variance + (spread - m.sample_variance) / count

            # Precision-weighted fusion of the prior with the observation.
            # Components with no spread left keep their prior.
            denom = m.prior_variance + variance
            degenerate = np.abs(denom) <= VARIANCE_EPSILON
            safe = np.where(degenerate, 1.0, denom)
            prior_mean = np.where(degenerate, m.prior_mean,
                                  (variance * m.prior_mean + m.prior_variance * x) / safe)
            prior_variance = np.where(degenerate, m.prior_variance,
                                      variance * m.prior_variance / safe)
        else:
            variance = m.sample_variance
            prior_mean = m.prior_mean
            prior_variance = m.prior_variance

        self.moments = Moments(
            sample_mean=mean,
            sample_variance=variance,
            prior_mean=prior_mean,
            prior_variance=prior_variance,
        )
        self.location = Location(
            centroid=prior_mean.copy(),
            radius=norm(np.sqrt(prior_variance) * SIGMA_RADIUS),
        )

    def __hash__(self):
        return hash(self.label)

    def __eq__(self, other):
        if not isinstance(other, Concept):
            return False
        return self.label == other.label


@dataclass
class Symbol:
    """Episodic record of the category an input event was assigned to."""
    label: Label
    content: str = ""
    length: int = 1

    def __post_init__(self):
        if not self.content:
            self.content = str(self.label)

    def relabel(self, label: Label) -> None:
        self.label = label
        self.content = str(label)


def gen_concept_symbol(spectrum: Spectrum, radius: float) -> Tuple[Label, Concept, Symbol]:
    """
    Build a fresh concept and symbol for an incoming spectrum.

    Args:
        spectrum: Observation from the subordinate level
        radius: Initial concept radius

    Returns:
        (label, concept, symbol) sharing one freshly minted label
    """
    label = generate_label()
    concept = Concept.new(label, spectrum.point, radius)
    symbol = Symbol(label=label, length=spectrum.length)
    return label, concept, symbol


__all__ = [
    'Label',
    'generate_label',
    'Location',
    'Moments',
    'Concept',
    'Symbol',
    'gen_concept_symbol',
]
