# coxeter_core/constants.py
"""
Coxeter Engine Constants

This module defines constants used throughout the inversion engine:

LAYER 1: Coxeter Matrix Constants
- INFINITY: Bond-order sentinel meaning "no relation" between two generators
- IDENTITY_BOND: Diagonal bond order (s_i * s_i = 1)

LAYER 2: Numeric Constants (Geometric Representation)
- ROUND_DECIMALS: Decimals used to key floating-point group elements
- ROOT_TOLERANCE: Threshold used when reading the sign of a root

LAYER 3: Safety Bounds
- MAX_LENGTH: Upper bound on descent-stripping loops
- RELATION_CHECK_LIMIT: How far infinite bonds are probed during validation
"""


# =============================================================================
# LAYER 1: Coxeter Matrix Constants
# =============================================================================

# M(i, j) = 0 encodes m = ∞: (s_i s_j)^k never closes
INFINITY = 0
IDENTITY_BOND = 1


# =============================================================================
# LAYER 2: Numeric Constants (Geometric Representation)
# =============================================================================

# Entries of the Tits representation live in Z[cos(π/m)]; rounding to this
# many decimals gives a stable equality/hash key for short and medium words.
ROUND_DECIMALS = 6

# A root is negative iff its coordinate sum is below -ROOT_TOLERANCE
ROOT_TOLERANCE = 1e-9


# =============================================================================
# LAYER 3: Safety Bounds
# =============================================================================

MAX_LENGTH = 10_000
RELATION_CHECK_LIMIT = 32

assert ROUND_DECIMALS > 0, "ROUND_DECIMALS must be positive"


# =============================================================================
# Logging
# =============================================================================

LOGGER_NAMES = ("coxeter_core", "coxeter_inversions")
