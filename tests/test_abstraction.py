"""
Tests for the spectral transform and trajectory resampling
"""

import pytest
import numpy as np

from fractal_perception.abstraction import fourier, transform, interpolate
from fractal_perception.spectrum import Spectrum


class TestTransform:
    def test_length_one_signal_unchanged(self):
        signal = np.array([[1 + 2j, 3.0]])
        spectrum = transform(signal)

        np.testing.assert_allclose(spectrum.point, [1 + 2j, 3.0])
        assert spectrum.length == 1

    def test_constant_signal_energy_in_bin_zero(self):
        signal = np.tile([1.0, 2.0], (8, 1))
        bins = transform(signal).point.reshape(8, 2)

        np.testing.assert_allclose(bins[0], [8.0, 16.0])
        np.testing.assert_allclose(bins[1:], 0.0, atol=1e-9)

    def test_matches_numpy_fft(self):
        rng = np.random.default_rng(0)
        signal = rng.normal(size=(16, 3)) + 1j * rng.normal(size=(16, 3))

        np.testing.assert_allclose(fourier(signal), np.fft.fft(signal, axis=0), atol=1e-9)

    def test_point_is_bin_ordered_concatenation(self):
        signal = np.array([[1.0, 0.0], [0.0, 1.0]])
        spectrum = transform(signal)

        # bin 0 = sum, bin 1 = difference
        np.testing.assert_allclose(spectrum.point, [1, 1, 1, -1], atol=1e-12)

    def test_length_carried_independent_of_size(self):
        signal = np.ones((4, 2))
        assert transform(signal, length=17).length == 17
        assert transform(signal).length == 4

    def test_accepts_sequence_of_vectors(self):
        spectrum = transform([[1.0], [1.0]])
        np.testing.assert_allclose(spectrum.point, [2.0, 0.0], atol=1e-12)

    def test_non_power_of_two_rejected(self):
        with pytest.raises(ValueError):
            transform(np.ones((3, 2)))

    def test_empty_signal_rejected(self):
        with pytest.raises(ValueError):
            fourier(np.zeros((0, 2), dtype=complex))


class TestInterpolate:
    def test_single_point_repeated(self):
        signal = interpolate([([1.0, 2.0], 3)], 4)

        assert signal.shape == (4, 2)
        for row in signal:
            np.testing.assert_allclose(row, [1.0, 2.0])

    def test_stepwise_by_weight(self):
        signal = interpolate([([0.0], 1), ([1.0], 3)], 4)
        np.testing.assert_allclose(signal[:, 0], [0, 1, 1, 1])

    def test_equal_weights_split_evenly(self):
        signal = interpolate([([5.0], 1), ([7.0], 1)], 8)
        np.testing.assert_allclose(signal[:, 0], [5, 5, 5, 5, 7, 7, 7, 7])

    def test_values_are_held_not_blended(self):
        trajectory = [([0.0], 2), ([10.0], 1), ([20.0], 5)]
        signal = interpolate(trajectory, 16)
        assert set(np.real(signal[:, 0])) <= {0.0, 10.0, 20.0}

    def test_output_length_is_resolution(self):
        rng = np.random.default_rng(1)
        trajectory = [(rng.normal(size=3), int(w)) for w in rng.integers(1, 9, size=7)]
        for resolution in (1, 2, 4, 8, 64):
            assert interpolate(trajectory, resolution).shape == (resolution, 3)

    def test_zero_resolution_is_empty(self):
        signal = interpolate([([1.0, 2.0], 1)], 0)
        assert signal.shape == (0, 2)

    def test_empty_trajectory_rejected(self):
        with pytest.raises(ValueError):
            interpolate([], 4)

    def test_zero_total_weight_rejected(self):
        with pytest.raises(ValueError):
            interpolate([([1.0], 0)], 4)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            interpolate([([0.0], 1), ([1.0], -1)], 4)

    def test_zero_weight_interval_skipped(self):
        signal = interpolate([([0.0], 1), ([9.0], 0), ([1.0], 1)], 4)

        np.testing.assert_allclose(signal[:, 0], [0, 0, 1, 1])
        assert 9.0 not in np.real(signal[:, 0])

    def test_resampled_then_transformed(self):
        signal = interpolate([([1.0, 1.0], 2), ([1.0, 1.0], 3)], 4)
        spectrum = transform(signal, length=5)

        assert isinstance(spectrum, Spectrum)
        assert spectrum.length == 5
        assert spectrum.dimension == 8


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
