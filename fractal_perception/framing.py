"""
Framing Module

Turns a one-dimensional stream of samples (e.g. decoded audio) into the
sequence of feature vectors the hierarchy consumes.
"""

from typing import Iterator, Sequence

import numpy as np

from .abstraction import fourier
from .spectrum import is_power_of_two


def to_complex(samples: Sequence[float]) -> np.ndarray:
    """Convert real samples to a complex128 array."""
    return np.asarray(samples, dtype=np.complex128).reshape(-1)


def slides(samples: Sequence, chunk_size: int, step_size: int) -> Iterator[Sequence]:
    """
    Yield overlapping windows of ``chunk_size`` samples every ``step_size``.

    Windows that would run past the end are not produced.

    Raises:
        ValueError: Unless 0 < step_size <= chunk_size
    """
    if chunk_size <= 0 or step_size <= 0:
        raise ValueError(f"chunk_size and step_size must be > 0, got {chunk_size}, {step_size}")
    if chunk_size < step_size:
        raise ValueError(f"chunk_size {chunk_size} must be >= step_size {step_size}")

    start = 0
    while start + chunk_size <= len(samples):
        yield samples[start:start + chunk_size]
        start += step_size


def stft(samples: Sequence[float], chunk_size: int) -> np.ndarray:
    """
    Short-time spectra of consecutive, non-overlapping chunks.

    The trailing samples that do not fill a whole chunk are dropped.

    Args:
        samples: Time-domain samples
        chunk_size: Samples per chunk (power of two)

    Returns:
        Array of shape (n_chunks, chunk_size), one feature vector per chunk
    """
    if not is_power_of_two(chunk_size):
        raise ValueError(f"chunk_size must be a power of two, got {chunk_size}")
    signal = to_complex(samples)
    n_chunks = len(signal) // chunk_size
    chunks = signal[:n_chunks * chunk_size].reshape(n_chunks, chunk_size)
    # Each chunk is a scalar-valued signal: one 1-D vector per sample
    return np.array([fourier(chunk[:, np.newaxis]).reshape(-1) for chunk in chunks],
                    dtype=np.complex128).reshape(n_chunks, chunk_size)
