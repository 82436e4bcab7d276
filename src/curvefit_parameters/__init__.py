"""curvefit-parameters: named, bounded parameters for curve fitting.

This package provides the bookkeeping layer between a fitting caller and a
numerical optimizer: an ordered collection of named parameters with bounds
and vary flags, and its conversion to and from flat vectors.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
