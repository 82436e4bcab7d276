"""Ordered container of named parameters.

This module implements Parameters, the collection handed back and forth
between a fitting caller and a numerical optimizer:
- Keyed access by name, positional access by insertion index, and
  attribute-style sugar over keyed access
- Merging of two containers (last writer wins)
- Marshalling to flat, order-aligned vectors (to_vecs) and bulk value
  assignment from a vector or scalar (set_values)

Insertion order is load-bearing: it defines both the positional index and
the order of every vector produced or consumed here.
"""

import copy
import logging
import numbers
import sys
from itertools import islice
from typing import (
    Dict,
    ItemsView,
    Iterator,
    KeysView,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    TextIO,
    Tuple,
    Union,
    ValuesView,
)

import numpy as np

from ..constants import DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND, DEFAULT_VARY
from .parameter import Parameter

logger = logging.getLogger(__name__)


class ParameterVectors(NamedTuple):
    """Parallel, insertion-ordered vectors describing a Parameters container.

    This is the hand-off format for numerical optimizers. The vary vector
    holds the reconciled is_varied value, not the stored vary flag.
    """
    names: List[str]
    values: np.ndarray
    lower_bounds: np.ndarray
    upper_bounds: np.ndarray
    vary: np.ndarray


class Parameters:
    """Insertion-ordered mapping from name to Parameter.

    Entries are read and written by name (``pars["a"]``), read by position
    (``pars[0]`` or ``pars.at(0)``), and, as sugar over keyed access, as
    attributes (``pars.a``). Attribute access only reaches names that do not
    collide with a method or start with an underscore; keyed access is the
    canonical API.

    Inserting a Parameter whose name is empty sets its name to the key. A
    Parameter that already carries a name keeps it, even when that name
    differs from the key it is stored under.

    Entries are never removed.

    Example:
        >>> pars = Parameters()
        >>> pars["amp"] = Parameter(1.0, lower_bound=0.0)
        >>> pars["amp"].name
        'amp'
        >>> pars.set_values([2.5])
        >>> pars.to_vecs().values
        array([2.5])
    """

    def __init__(self, entries: Optional[Mapping[str, Parameter]] = None):
        self._entries: Dict[str, Parameter] = {}
        if entries is not None:
            for key, par in entries.items():
                self[key] = par

    @classmethod
    def from_vectors(
        cls,
        values: Sequence[float],
        names: Sequence[str],
        lower_bounds: Optional[Sequence[float]] = None,
        upper_bounds: Optional[Sequence[float]] = None,
        vary: Optional[Sequence[bool]] = None,
    ) -> "Parameters":
        """Build a container from parallel vectors.

        Each optional vector is all-or-nothing: when it is omitted, every
        entry gets the same default (-inf, +inf or True); when it is given,
        it must supply a value for every entry.

        Args:
            values: Parameter values
            names: Parameter names, in insertion order
            lower_bounds: Lower bounds, or None for -inf everywhere
            upper_bounds: Upper bounds, or None for +inf everywhere
            vary: Vary flags, or None for True everywhere

        Returns:
            New Parameters with one entry per name

        Raises:
            ValueError: If any supplied vector length differs from len(names)
        """
        n = len(names)
        if len(values) != n:
            raise ValueError(
                f"Length mismatch: got {n} names but {len(values)} values"
            )
        for label, vec in (
            ("lower_bounds", lower_bounds),
            ("upper_bounds", upper_bounds),
            ("vary", vary),
        ):
            if vec is not None and len(vec) != n:
                raise ValueError(
                    f"Length mismatch: got {n} names but {len(vec)} {label}"
                )

        pars = cls()
        for i, name in enumerate(names):
            pars[name] = Parameter(
                value=values[i],
                name=name,
                lower_bound=DEFAULT_LOWER_BOUND if lower_bounds is None else lower_bounds[i],
                upper_bound=DEFAULT_UPPER_BOUND if upper_bounds is None else upper_bounds[i],
                vary=DEFAULT_VARY if vary is None else vary[i],
            )
        logger.debug(f"Built Parameters from vectors: {list(names)}")
        return pars

    # Keyed and positional access

    def __getitem__(self, key: Union[str, int]) -> Parameter:
        """Get a parameter by name or by insertion position.

        Raises:
            KeyError: If a name is not in the container
            IndexError: If a position is out of range
            TypeError: If key is neither a str nor an int
        """
        if isinstance(key, str):
            if key not in self._entries:
                raise KeyError(
                    f"Unknown parameter: {key}. Available: {list(self._entries)}"
                )
            return self._entries[key]
        if isinstance(key, numbers.Integral) and not isinstance(key, bool):
            return self.at(key)
        raise TypeError(
            f"Parameters indices must be str or int, got {type(key).__name__}"
        )

    def __setitem__(self, key: str, par: Parameter) -> None:
        """Insert or overwrite the entry stored under key.

        An existing key keeps its position; a new key is appended.
        """
        if not isinstance(key, str):
            raise TypeError(f"Parameter names must be str, got {type(key).__name__}")
        if not isinstance(par, Parameter):
            raise TypeError(
                f"Can only store Parameter instances, got {type(par).__name__}"
            )
        self._finalize_entry(key, par)
        self._entries[key] = par

    @staticmethod
    def _finalize_entry(key: str, par: Parameter) -> None:
        """Name an unnamed parameter after the key it is inserted under."""
        if not par.name:
            logger.debug(f"Naming unnamed parameter after its key {key!r}")
            par.name = key

    def at(self, index: int) -> Parameter:
        """Get the parameter at a position in insertion order.

        Negative positions count from the end, as for lists.

        Raises:
            IndexError: If index is out of range
            TypeError: If index is not an int
        """
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise TypeError(
                f"Parameter positions must be int, got {type(index).__name__}"
            )
        n = len(self._entries)
        pos = index + n if index < 0 else index
        if not 0 <= pos < n:
            raise IndexError(
                f"Parameter index {index} out of range for {n} parameters"
            )
        return next(islice(self._entries.values(), pos, None))

    # Attribute-style sugar

    def __getattr__(self, name: str) -> Parameter:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(
                f"'{type(self).__name__}' object has no parameter or attribute '{name}'"
            ) from e

    def __setattr__(self, name: str, value) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        if hasattr(type(self), name):
            raise AttributeError(
                f"Cannot assign to '{name}', it is a Parameters attribute; "
                f"use pars[{name!r}] = ... instead"
            )
        self[name] = value

    # Mapping protocol

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def keys(self) -> KeysView[str]:
        """Parameter names in insertion order."""
        return self._entries.keys()

    def values(self) -> ValuesView[Parameter]:
        """Parameters in insertion order."""
        return self._entries.values()

    def items(self) -> ItemsView[str, Parameter]:
        """(name, Parameter) pairs in insertion order."""
        return self._entries.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def merge(self, other: Mapping[str, Parameter]) -> None:
        """Insert every entry of other, overwriting on name clashes.

        Keys already present keep their position and take the entry from
        other; new keys are appended in other's order. The entries are
        shared with other, not copied.
        """
        for key, par in other.items():
            self[key] = par
        logger.debug(f"Merged {len(other)} parameters; now holding {len(self)}")

    def copy(self) -> "Parameters":
        """Return a deep copy with independent Parameter entries."""
        return copy.deepcopy(self)

    # Optimizer hand-off

    def num_varied(self) -> int:
        """Number of parameters that will actually be varied."""
        return sum(1 for par in self._entries.values() if par.is_varied)

    def to_vecs(self) -> ParameterVectors:
        """Unpack the parameter fields into parallel vectors.

        Returns:
            ParameterVectors with names, values, lower_bounds, upper_bounds
            and vary (the reconciled is_varied flags), all in insertion order
        """
        pars = list(self._entries.values())
        return ParameterVectors(
            names=[par.name for par in pars],
            values=np.array([par.value for par in pars], dtype=float),
            lower_bounds=np.array([par.lower_bound for par in pars], dtype=float),
            upper_bounds=np.array([par.upper_bound for par in pars], dtype=float),
            vary=np.array([par.is_varied for par in pars], dtype=bool),
        )

    def bounds(self) -> List[Tuple[float, float]]:
        """(lower, upper) pairs in insertion order, as scipy.optimize expects."""
        return [(par.lower_bound, par.upper_bound) for par in self._entries.values()]

    def set_values(self, x: Union[float, Sequence[float], np.ndarray]) -> None:
        """Set parameter values from a vector or broadcast a scalar.

        A 1-D input assigns x[i] to the i-th parameter in insertion order.
        A scalar is assigned to every parameter, varied or not.

        Args:
            x: Scalar or 1-D sequence of length len(self)

        Raises:
            ValueError: If a sequence has the wrong length, x has more than
                one dimension, or an element is not numeric
            TypeError: If an element cannot be converted to float

        Nothing is changed when an error is raised.
        """
        # Convert everything up front so a bad element fails before any write
        arr = np.asarray(x, dtype=float)
        if arr.ndim == 0:
            value = float(arr)
            for par in self._entries.values():
                par.value = value
            logger.debug(f"Set all {len(self)} parameter values to {value}")
        elif arr.ndim == 1:
            if len(arr) != len(self._entries):
                raise ValueError(
                    f"Length mismatch: got {len(arr)} values for "
                    f"{len(self._entries)} parameters"
                )
            for par, value in zip(self._entries.values(), arr):
                par.value = float(value)
            logger.debug(f"Set values of {len(self)} parameters from vector")
        else:
            raise ValueError(f"Expected a scalar or 1-D sequence, got {arr.ndim}-D input")

    # Display

    def __str__(self) -> str:
        return "\n".join(str(par) for par in self._entries.values())

    def show(self, file: Optional[TextIO] = None) -> None:
        """Write one line per parameter to a text stream (stdout by default)."""
        stream = file if file is not None else sys.stdout
        for par in self._entries.values():
            par.show(stream)

    def __repr__(self) -> str:
        """Compact representation for debugging."""
        preview = list(self._entries)[:3]
        if len(self._entries) > 3:
            preview.append("...")
        return f"Parameters({len(self._entries)} entries{preview})"


def num_varied(pars: Parameters) -> int:
    """Return the number of varied parameters in pars."""
    return pars.num_varied()


def to_vecs(pars: Parameters) -> ParameterVectors:
    """Return pars unpacked into parallel vectors."""
    return pars.to_vecs()


def set_values(pars: Parameters, x: Union[float, Sequence[float], np.ndarray]) -> None:
    """Set the values of pars from a vector, or broadcast a scalar."""
    pars.set_values(x)
