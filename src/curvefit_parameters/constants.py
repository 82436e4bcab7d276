"""Global constants for curvefit-parameters.

This module centralizes the defaults used when a parameter is built without
explicit bounds or vary flag, so constructors and vector builders agree.
"""

import math

# Bounds applied when none are given
DEFAULT_LOWER_BOUND: float = -math.inf
DEFAULT_UPPER_BOUND: float = math.inf

# Parameters are free unless told otherwise
DEFAULT_VARY: bool = True

# Shown after the value of a parameter whose vary flag is off
LOCKED_MARKER: str = "🔒"
