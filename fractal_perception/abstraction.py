"""
Abstraction Module

Turns the trajectory of a completed segment into a single point for the
superior level:

    trajectory --interpolate--> fixed-length signal --transform--> spectrum

Both steps are pure functions over immutable inputs.
"""

from typing import Any, Optional, Sequence, Tuple

import numpy as np

from .spectrum import Spectrum, as_signal, is_power_of_two


def fourier(signal: np.ndarray) -> np.ndarray:
    """
    Radix-2 fast Fourier transform of a vector-valued signal.

    Each row of ``signal`` is one sample. The signal is split into even and
    odd samples, both halves are transformed recursively, and bins ``k`` and
    ``k + n/2`` are recombined as ``even[k] ± ω_k · odd[k]`` with
    ``ω_k = exp(-2πik/n)``.

    Args:
        signal: Array of shape (n, d) with n a power of two

    Returns:
        Frequency-domain signal of the same shape

    Raises:
        ValueError: If n is not a power of two
    """
    n = signal.shape[0]
    if not is_power_of_two(n):
        raise ValueError(f"Signal length must be a power of two, got {n}")
    if n == 1:
        return signal

    f_even = fourier(signal[0::2])
    f_odd = fourier(signal[1::2])

    k = np.arange(n // 2)
    omega = np.exp(-2j * np.pi * k / n)[:, np.newaxis]
    delta = f_odd * omega

    return np.concatenate([f_even + delta, f_even - delta], axis=0)


def transform(signal: Any, length: Optional[int] = None) -> Spectrum:
    """
    Returns the spectrum of the given signal.

    Args:
        signal: Time-domain signal, an (n, d) array or a sequence of Vectors
        length: Number of events the signal subtends in the subordinate
            level (defaults to the number of samples)

    Returns:
        Spectrum whose point is the bin-ordered concatenation of the output
    """
    if isinstance(signal, np.ndarray) and signal.ndim == 2:
        samples = signal.astype(np.complex128, copy=False)
    else:
        samples = as_signal(signal)
    spectrum = fourier(samples)
    if length is None:
        length = samples.shape[0]
    return Spectrum(point=spectrum.reshape(-1), length=length)


def interpolate(trajectory: Sequence[Tuple[Any, float]], resolution: int) -> np.ndarray:
    """
    Returns a stepwise signal of ``resolution`` samples tracing the trajectory.

    The cumulative weights of the trajectory are rescaled onto ``resolution``
    slots. Each slot takes the vector of the interval covering its start
    position (zero-order hold), so vectors are repeated, never blended.

    Args:
        trajectory: Ordered (vector, weight) pairs; weight is the number of
            events the vector subtends
        resolution: Number of samples in the output signal

    Returns:
        Signal of shape (resolution, d)

    Raises:
        ValueError: On an empty trajectory, negative weights or zero total weight
    """
    if len(trajectory) == 0:
        raise ValueError("Cannot interpolate an empty trajectory")
    if resolution < 0:
        raise ValueError(f"Resolution must be >= 0, got {resolution}")

    vectors = as_signal([vector for vector, _ in trajectory])
    weights = np.array([weight for _, weight in trajectory], dtype=float)
    if np.any(weights < 0):
        raise ValueError("Trajectory weights must be non-negative")

    ends = np.cumsum(weights)
    total = ends[-1]
    if total <= 0:
        raise ValueError("Trajectory must subtend a positive total weight")

    positions = np.arange(resolution) * (total / resolution) if resolution else np.zeros(0)
    # First interval whose end lies beyond the slot position
    indices = np.searchsorted(ends, positions, side="right")
    indices = np.minimum(indices, len(trajectory) - 1)

    return vectors[indices]


__all__ = [
    'fourier',
    'transform',
    'interpolate',
]
