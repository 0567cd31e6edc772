"""
rot3_manifold constants.

All magic numbers are centralized here with clear documentation.

Numerical Policy:
    Thresholds are chosen for IEEE 754 double precision. They select a
    computational path (singularity guard, Taylor surrogate) and do not
    change the mathematical result beyond the stated approximation order.
"""

# =============================================================================
# Exponential map (Rodrigues)
# =============================================================================

# Rotation vectors shorter than this map to the identity exactly
RODRIGUES_ZERO_ANGLE = 1e-10

# Tolerance on |axis|^2 - 1 for the validated axis-angle constructor
UNIT_AXIS_TOL = 1e-9

# =============================================================================
# Logarithm map
# =============================================================================

# |trace + 1| below this selects the half-turn (theta = pi) branch
LOGMAP_HALF_TURN_EPS = 1e-10

# trace - 3 above -TAYLOR_SWITCH uses the second-order Taylor magnitude
LOGMAP_TAYLOR_SWITCH = 1e-7

# A diagonal entry within this of -1 is skipped when recovering the half-turn axis
LOGMAP_DIAGONAL_EPS = 1e-10

# =============================================================================
# Comparison
# =============================================================================

# Default absolute tolerance for Rot3.equals
EQUALITY_TOL_DEFAULT = 1e-9

# Tangent dimension of SO(3)
SO3_DIM = 3
