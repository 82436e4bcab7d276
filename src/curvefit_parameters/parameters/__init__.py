"""Parameter types for curve fitting.

This module provides the single-parameter type and the ordered container
that optimizers read from (to_vecs) and write back to (set_values).
"""

from .parameter import (
    Parameter,
    is_varied,
)
from .container import (
    Parameters,
    ParameterVectors,
    num_varied,
    to_vecs,
    set_values,
)

__all__ = [
    # Single parameter
    "Parameter",
    "is_varied",
    # Container
    "Parameters",
    "ParameterVectors",
    "num_varied",
    "to_vecs",
    "set_values",
]
