"""Shared fixtures for parameter container tests."""

import pytest

from curvefit_parameters import Parameter, Parameters


@pytest.fixture
def ab_params():
    """Two free, unbounded parameters built from vectors."""
    return Parameters.from_vectors([1.0, 2.0], ["a", "b"])


@pytest.fixture
def mixed_params():
    """Free, fixed and locked parameters in a known order."""
    pars = Parameters()
    pars["amp"] = Parameter(1.0, lower_bound=0.0, upper_bound=10.0)
    pars["offset"] = Parameter(0.5, vary=False)
    pars["width"] = Parameter(2.0, lower_bound=2.0, upper_bound=2.0)
    pars["phase"] = Parameter(0.0, lower_bound=-3.0, upper_bound=3.0)
    return pars
