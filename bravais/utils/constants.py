"""
Numerical constants shared by the lattice geometry.
"""

import numpy as np

# Absolute tolerance for near-zero and positivity tests
DEFAULT_TOLERANCE = 1.0e-12

SQRT2 = np.sqrt(2.0)
SQRT3 = np.sqrt(3.0)
HALF_SQRT3 = 0.5 * SQRT3

# Supported spatial dimensionalities
MIN_DIMENSIONALITY = 1
MAX_DIMENSIONALITY = 3
