"""
Spectrum Module

Value types passed between levels of the hierarchy.

- Vector: 1-D complex128 array with a fixed dimension per level
- Signal: 2-D complex128 array, one Vector per row
- Spectrum: flattened frequency-domain point plus the number of events it subtends
"""

from typing import Any, Sequence
from dataclasses import dataclass

import numpy as np

from .constants import ZERO_TOLERANCE


def as_vector(values: Any) -> np.ndarray:
    """
    Coerce numeric input into a Vector.

    Scalars become 1-D vectors; real input is promoted to complex.

    Args:
        values: Scalar, sequence or array of numbers

    Returns:
        1-D complex128 array (a fresh copy)
    """
    vector = np.array(values, dtype=np.complex128).reshape(-1)
    return vector


def as_signal(vectors: Sequence[Any]) -> np.ndarray:
    """
    Stack Vectors into a Signal of shape (n, d).

    Raises:
        ValueError: If the vectors do not share one dimension
    """
    rows = [as_vector(v) for v in vectors]
    if not rows:
        return np.zeros((0, 0), dtype=np.complex128)
    dims = {row.shape[0] for row in rows}
    if len(dims) != 1:
        raise ValueError(f"Signal vectors must share one dimension, got {sorted(dims)}")
    return np.vstack(rows)


def norm(vector: np.ndarray) -> float:
    """Euclidean norm: sqrt(sum |c|^2)."""
    return float(np.linalg.norm(vector))


def is_zero(vector: np.ndarray, tolerance: float = ZERO_TOLERANCE) -> bool:
    """True when every component lies within tolerance of zero."""
    return bool(np.all(np.abs(vector) <= tolerance))


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


@dataclass
class Spectrum:
    """
    Spectrum of a trajectory and its length in the subordinate level.

    Attributes:
        point: Flattened complex spectrum (a Vector)
        length: Number of input events subtended by the trajectory
    """
    point: np.ndarray
    length: int = 1

    def __post_init__(self):
        self.point = as_vector(self.point)
        if self.length < 0:
            raise ValueError(f"Spectrum length must be >= 0, got {self.length}")

    @classmethod
    def from_vector(cls, values: Any) -> 'Spectrum':
        """Spectrum of a single raw input event (length 1)."""
        return cls(point=as_vector(values), length=1)

    @property
    def dimension(self) -> int:
        return int(self.point.shape[0])

    def __eq__(self, other):
        if not isinstance(other, Spectrum):
            return False
        return (self.length == other.length and
                self.point.shape == other.point.shape and
                bool(np.allclose(self.point, other.point)))
