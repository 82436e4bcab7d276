"""Public API for curvefit-parameters.

This module collects the parameter types, the optimizer hand-off helpers
and the package defaults into one import surface.
"""

# Parameters
from .parameters import (
    Parameter,
    Parameters,
    ParameterVectors,
    is_varied,
    num_varied,
    to_vecs,
    set_values,
)

# Constants
from .constants import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_UPPER_BOUND,
    DEFAULT_VARY,
    LOCKED_MARKER,
)

# Version
try:
    from importlib.metadata import version
    __version__ = version("curvefit-parameters")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Parameters
    "Parameter",
    "Parameters",
    "ParameterVectors",

    # Optimizer hand-off
    "is_varied",
    "num_varied",
    "to_vecs",
    "set_values",

    # Constants
    "DEFAULT_LOWER_BOUND",
    "DEFAULT_UPPER_BOUND",
    "DEFAULT_VARY",
    "LOCKED_MARKER",

    # Version
    "__version__",
]
