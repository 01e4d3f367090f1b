"""Shared constants for curve generation and branching.

Lengths are fractions of the canvas diagonal so a drawing keeps its
proportions across canvas presets. Angles are in degrees unless the name
says otherwise.
"""

import math

# Fan-out: 1 line at gamma 0, 7 lines at |gamma| 100.
LINE_COUNT_MIN = 1
LINE_COUNT_MAX = 7

# Line length: 15%–50% of the diagonal, ±5% jitter.
LINE_LENGTH_MIN_FRAC = 0.15
LINE_LENGTH_MAX_FRAC = 0.50
LINE_LENGTH_JITTER = 0.10

# Direction clusters span a half-turn; gamma rotates them by up to ±180°.
CLUSTER_ARC_DEG = 180.0
GAMMA_ROTATION_DEG = 180.0

# Curvature: perpendicular offset 5%–30% of line length, ±20% jitter.
CURVATURE_MIN_FRAC = 0.05
CURVATURE_MAX_FRAC = 0.30
CURVATURE_JITTER = 0.20

# Short lines bend more: curvature profile × (1 + (1 - length profile) × 0.5).
SHORT_LINE_CURVATURE_GAIN = 0.5

# Discrete per-line profile multipliers.
LENGTH_PROFILES = (0.5, 0.8, 1.0, 1.3, 1.8)
CURVATURE_PROFILES = (0.4, 0.75, 1.0, 1.5, 2.0)

# Branches: 6%–12% of the diagonal, ±60° around the mean direction.
BRANCH_LENGTH_MIN_FRAC = 0.06
BRANCH_LENGTH_RANGE_FRAC = 0.06
BRANCH_ANGLE_SPAN_RAD = 2 * math.pi / 3
BRANCH_CURVATURE_SPAN = 0.7
BRANCH_CURVED_THRESHOLD = 0.08
BRANCH_DASHED_PROBABILITY = 0.35
BRANCH_COUNT_MAX = 2
