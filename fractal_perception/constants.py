# fractal_perception/constants.py
"""
Fractal Perception Constants

This module defines constants used throughout the perception hierarchy:

LEVEL 0: Hierarchy Defaults (Configuration Layer)
- DEFAULT_RADIUS_SCALE: Initial concept radius at the lowest level
- DEFAULT_RADIUS_GROWTH: Per-level multiplier of the radius scale
- DEFAULT_RESOLUTION: Length of a resampled trajectory (power of two)
- DEFAULT_MAX_DEPTH: Number of levels in the hierarchy

LEVEL 1: Concept Statistics (Semantic Layer)
- SIGMA_RADIUS: Number of standard deviations covered by a concept radius
- VARIANCE_EPSILON: Tolerance below which a combined variance counts as zero

LEVEL 2: Episodic Bookkeeping (Symbol Layer)
- START_LABEL: Sentinel label of the symbol preceding the first event
"""


# =============================================================================
# LEVEL 0: Hierarchy Defaults
# =============================================================================

DEFAULT_RADIUS_SCALE = 1.0
DEFAULT_RADIUS_GROWTH = 10.0   # x1, x10, x100, x1000 across levels
DEFAULT_RESOLUTION = 64        # Real + virtual concepts per trajectory
DEFAULT_MAX_DEPTH = 4

assert DEFAULT_RESOLUTION > 0 and DEFAULT_RESOLUTION & (DEFAULT_RESOLUTION - 1) == 0, \
    "DEFAULT_RESOLUTION must be a power of two"


# =============================================================================
# LEVEL 1: Concept Statistics
# =============================================================================

# A concept region is the ball of radius 3σ around its centroid
SIGMA_RADIUS = 3.0

# Combined variance components below this magnitude freeze the prior
VARIANCE_EPSILON = 1e-12

# Absolute tolerance for Vector zero tests
ZERO_TOLERANCE = 1e-12

# Round-off slack of region membership, relative to the centroid magnitude
CONTAINMENT_TOLERANCE = 1e-9


# =============================================================================
# LEVEL 2: Episodic Bookkeeping
# =============================================================================

START_LABEL = "start"
START_CONTENT = "start"
