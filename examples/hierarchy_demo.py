"""
Demonstration of the Fractal Perception Hierarchy

This script shows how the hierarchy chunks a stream at several timescales:
1. A single level discovering categories and segment boundaries
2. A multi-level hierarchy abstracting segments into higher-level symbols
3. Feeding short-time spectra of a raw sample stream into the hierarchy
"""

import logging

import numpy as np
from fractal_perception import Dimension, Hierarchy, PerceptionConfig, Spectrum
from fractal_perception.framing import stft


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_single_level():
    """Two well separated clusters visited in runs."""
    print_section("LEVEL 0: Categories and Boundaries")

    dimension = Dimension(level=0, radius_scale=1.0, resolution=4)
    stream = [[0.0, 0.0]] * 5 + [[100.0, 0.0]] * 5 + [[0.0, 0.0]] * 5

    for i, x in enumerate(stream):
        superior = dimension.perceive(Spectrum.from_vector(x))
        if superior is not None:
            print(f"  Boundary before event {i}: segment of {superior.length} events "
                  f"-> {superior.dimension}-dimensional spectrum")

    summary = dimension.summary()
    print(f"\n  Concepts discovered: {summary['concepts']}")
    print(f"  Boundaries: {summary['boundaries']}")
    for label, count in summary["counts"].items():
        print(f"    {label[:8]}: {count} events")


def demonstrate_hierarchy():
    """Noisy visits to a handful of prototypes, chunked over three levels."""
    print_section("HIERARCHY: Multi-Timescale Chunking")

    rng = np.random.default_rng(42)
    prototypes = rng.normal(scale=20.0, size=(5, 3))
    # Runs of random length through random prototypes
    stream = []
    for index in rng.integers(0, len(prototypes), size=60):
        run = rng.integers(1, 8)
        stream.extend(prototypes[index] + rng.normal(scale=0.2, size=(run, 3)))

    hierarchy = Hierarchy(PerceptionConfig(radius_scale=1.0, resolution=8, max_depth=3))
    hierarchy.perceive_all(stream)

    print(f"\n  Inputs: {hierarchy.inputs_seen}")
    for level in hierarchy.summary()["levels"]:
        print(f"  Level {level['level']}: {level['events']:4d} events, "
              f"{level['concepts']:3d} concepts, {level['boundaries']:3d} boundaries "
              f"(radius {level['radius_scale']:g})")


def demonstrate_framing():
    """Short-time spectra of a tone that switches pitch."""
    print_section("FRAMING: Sample Stream to Feature Vectors")

    t = np.arange(4096)
    samples = np.concatenate([np.sin(2 * np.pi * t[:2048] / 16),
                              np.sin(2 * np.pi * t[2048:] / 4)])
    features = stft(samples, 16)
    print(f"\n  {len(samples)} samples -> {features.shape[0]} feature vectors "
          f"of dimension {features.shape[1]}")

    hierarchy = Hierarchy(PerceptionConfig(radius_scale=1.0, resolution=4, max_depth=2))
    hierarchy.perceive_all(features)
    for dimension in hierarchy.dimensions:
        print(f"  {dimension}")


def main():
    """Run all demonstrations."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "=" * 70)
    print("  FRACTAL PERCEPTION - HIERARCHY DEMONSTRATION")
    print("=" * 70)

    demonstrate_single_level()
    demonstrate_hierarchy()
    demonstrate_framing()

    print("\n" + "=" * 70)
    print("  DEMONSTRATION COMPLETE")
    print("=" * 70 + "\n")


if __name__ == "__main__":
    main()
