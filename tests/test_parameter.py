"""Tests for the single Parameter type.

Tests the leaf parameter including:
- Construction defaults and numeric coercion
- Locking of parameters with equal bounds
- Live is_varied evaluation after mutation
- One-line display
"""

import io
import math

import numpy as np
import pytest
from hypothesis import given, strategies as st

from curvefit_parameters import LOCKED_MARKER, Parameter, is_varied

finite = st.floats(allow_nan=False, allow_infinity=False)


class TestParameterConstruction:
    """Tests for Parameter construction."""

    def test_defaults(self):
        """Test that only the value is required."""
        par = Parameter(1.5)
        assert par.value == 1.5
        assert par.name == ""
        assert par.lower_bound == -math.inf
        assert par.upper_bound == math.inf
        assert par.vary is True

    def test_keyword_construction(self):
        """Test constructing with every field given by keyword."""
        par = Parameter(value=2.0, name="amp", lower_bound=0.0, upper_bound=10.0, vary=False)
        assert par.name == "amp"
        assert par.value == 2.0
        assert par.lower_bound == 0.0
        assert par.upper_bound == 10.0
        assert par.vary is False

    def test_int_inputs_become_floats(self):
        """Test that integer inputs are stored as floats."""
        par = Parameter(3, lower_bound=1, upper_bound=5)
        assert isinstance(par.value, float)
        assert isinstance(par.lower_bound, float)
        assert isinstance(par.upper_bound, float)

    def test_inverted_bounds_accepted(self):
        """Test that lower > upper is not rejected."""
        par = Parameter(0.0, lower_bound=5.0, upper_bound=1.0)
        assert par.lower_bound == 5.0
        assert par.upper_bound == 1.0
        assert par.vary is True

    def test_equal_bounds_lock_parameter(self):
        """Test that equal bounds force vary to False."""
        par = Parameter(1.0, lower_bound=2.0, upper_bound=2.0, vary=True)
        assert par.vary is False
        assert not par.is_varied

    @pytest.mark.parametrize("vary", ["false", 0, 1, None])
    def test_non_bool_vary_raises(self, vary):
        """Test that vary must be an actual bool."""
        with pytest.raises(TypeError, match="vary must be bool"):
            Parameter(1.0, vary=vary)

    def test_numpy_bool_vary_accepted(self):
        """Test that numpy bools are accepted and stored as bool."""
        par = Parameter(1.0, vary=np.bool_(False))
        assert par.vary is False

    @given(bound=finite, value=finite, vary=st.booleans())
    def test_equal_bounds_always_lock(self, bound, value, vary):
        """Test that equal bounds lock the parameter whatever vary was requested."""
        par = Parameter(value, lower_bound=bound, upper_bound=bound, vary=vary)
        assert par.vary is False


class TestIsVaried:
    """Tests for the live is_varied predicate."""

    def test_free_parameter_is_varied(self):
        """Test that a default parameter is varied."""
        par = Parameter(1.0)
        assert par.is_varied
        assert is_varied(par)

    def test_fixed_parameter_not_varied(self):
        """Test that vary=False means not varied."""
        par = Parameter(1.0, vary=False)
        assert not is_varied(par)

    def test_bound_mutation_changes_is_varied(self):
        """Test that collapsing bounds after construction stops variation."""
        par = Parameter(1.0, lower_bound=0.0, upper_bound=2.0)
        assert is_varied(par)

        par.upper_bound = 0.0
        assert par.vary is True  # stored flag untouched
        assert not is_varied(par)

        par.upper_bound = 3.0
        assert is_varied(par)

    def test_unlocking_requires_vary(self):
        """Test that widening bounds of a locked parameter does not re-enable it."""
        par = Parameter(1.0, lower_bound=1.0, upper_bound=1.0)
        par.upper_bound = 2.0
        assert not is_varied(par)

        par.vary = True
        assert is_varied(par)

    @given(
        lower=finite,
        upper=finite,
        vary=st.booleans(),
        new_lower=finite,
        new_upper=finite,
        new_vary=st.booleans(),
    )
    def test_is_varied_matches_definition(self, lower, upper, vary, new_lower, new_upper, new_vary):
        """Test is_varied == vary and lower != upper across mutations."""
        par = Parameter(0.0, lower_bound=lower, upper_bound=upper, vary=vary)
        assert is_varied(par) == (par.vary and par.lower_bound != par.upper_bound)

        par.lower_bound = new_lower
        par.upper_bound = new_upper
        assert is_varied(par) == (par.vary and new_lower != new_upper)

        par.vary = new_vary
        assert is_varied(par) == (new_vary and new_lower != new_upper)


class TestParameterDisplay:
    """Tests for the one-line rendering."""

    def test_str_free(self):
        """Test rendering of a free parameter."""
        par = Parameter(1.5, name="amp", lower_bound=0.0, upper_bound=2.0)
        assert str(par) == "amp | Value = 1.5 | Bounds = [0.0, 2.0]"

    def test_str_locked(self):
        """Test that a fixed parameter shows the lock marker."""
        par = Parameter(1.5, name="amp", vary=False)
        assert str(par) == f"amp | Value = 1.5 {LOCKED_MARKER} | Bounds = [-inf, inf]"

    def test_show_writes_line(self):
        """Test that show writes one line to the given stream."""
        par = Parameter(3.0, name="offset")
        buf = io.StringIO()
        par.show(buf)
        assert buf.getvalue() == "offset | Value = 3.0 | Bounds = [-inf, inf]\n"

    def test_show_defaults_to_stdout(self, capsys):
        """Test that show prints to stdout without a stream."""
        Parameter(3.0, name="offset").show()
        assert capsys.readouterr().out.startswith("offset | Value = 3.0")


class TestParameterMutability:
    """Tests that fields stay mutable."""

    def test_fields_are_mutable(self):
        """Test every field can be reassigned."""
        par = Parameter(1.0)
        par.name = "x"
        par.value = 2.0
        par.lower_bound = -1.0
        par.upper_bound = 1.0
        par.vary = False
        assert (par.name, par.value, par.lower_bound, par.upper_bound, par.vary) == (
            "x", 2.0, -1.0, 1.0, False
        )

    def test_equality_by_fields(self):
        """Test that parameters with equal fields compare equal."""
        assert Parameter(1.0, name="a") == Parameter(1.0, name="a")
        assert Parameter(1.0, name="a") != Parameter(1.0, name="b")

    @pytest.mark.parametrize("value", ["abc", None])
    def test_non_numeric_value_raises(self, value):
        """Test that values that cannot become floats are rejected."""
        with pytest.raises((TypeError, ValueError)):
            Parameter(value)
