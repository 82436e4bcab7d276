"""Single model parameter.

A Parameter is a named scalar with bounds and a vary flag. It is the
leaf type held by the Parameters container and carries no knowledge of
the container it lives in.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

import numpy as np

from ..constants import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_UPPER_BOUND,
    DEFAULT_VARY,
    LOCKED_MARKER,
)

logger = logging.getLogger(__name__)


@dataclass
class Parameter:
    """A named, bounded, optionally varying scalar.

    The name does not have to be given; it is filled in from the key the
    first time the parameter is inserted into a Parameters container.

    Every field stays mutable after construction. Equal bounds at
    construction time lock the parameter (vary is forced to False).

    Attributes:
        value: Current value
        name: Parameter identifier ("" until named)
        lower_bound: Lower bound
        upper_bound: Upper bound
        vary: Whether the parameter should be varied during optimization
    """
    value: float
    name: str = ""
    lower_bound: float = DEFAULT_LOWER_BOUND
    upper_bound: float = DEFAULT_UPPER_BOUND
    vary: bool = DEFAULT_VARY

    def __post_init__(self):
        """Coerce fields and lock parameters with a degenerate bound range."""
        self.value = float(self.value)
        self.lower_bound = float(self.lower_bound)
        self.upper_bound = float(self.upper_bound)
        # Reject truthy stand-ins such as "false" or 0
        if not isinstance(self.vary, (bool, np.bool_)):
            raise TypeError(
                f"Parameter {self.name!r} vary must be bool, got {type(self.vary).__name__}"
            )
        self.vary = bool(self.vary)

        if self.lower_bound == self.upper_bound:
            if self.vary:
                logger.debug(
                    f"Parameter {self.name!r} has equal bounds "
                    f"({self.lower_bound}); locking it"
                )
            self.vary = False

    @property
    def is_varied(self) -> bool:
        """True if vary is set and the bounds do not coincide.

        Evaluated on every access, so changing the bounds after
        construction is reflected without touching vary.
        """
        return self.vary and self.lower_bound != self.upper_bound

    def __str__(self) -> str:
        lock = f" {LOCKED_MARKER}" if not self.vary else ""
        return (
            f"{self.name} | Value = {self.value}{lock} | "
            f"Bounds = [{self.lower_bound}, {self.upper_bound}]"
        )

    def show(self, file: Optional[TextIO] = None) -> None:
        """Write the one-line rendering to a text stream (stdout by default)."""
        print(self, file=file if file is not None else sys.stdout)


def is_varied(par: Parameter) -> bool:
    """Return True if par will actually be varied by an optimizer."""
    return par.is_varied
