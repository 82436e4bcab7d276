#!/usr/bin/env python3
"""Fit a Gaussian peak with scipy, using Parameters as the hand-off layer."""

from __future__ import annotations

import numpy as np
from scipy.optimize import minimize

from curvefit_parameters import Parameter, Parameters


def gaussian(x: np.ndarray, pars: Parameters) -> np.ndarray:
    return (
        pars["amp"].value
        * np.exp(-0.5 * ((x - pars["center"].value) / pars["width"].value) ** 2)
        + pars["offset"].value
    )


def fit(x: np.ndarray, y: np.ndarray, pars: Parameters) -> Parameters:
    """Minimize the squared residuals over the varied parameters only."""
    vecs = pars.to_vecs()
    free = vecs.vary
    bounds = [
        (None if np.isinf(lo) else lo, None if np.isinf(hi) else hi)
        for lo, hi in zip(vecs.lower_bounds[free], vecs.upper_bounds[free])
    ]

    def objective(z: np.ndarray) -> float:
        full = vecs.values.copy()
        full[free] = z
        pars.set_values(full)
        return float(np.sum((gaussian(x, pars) - y) ** 2))

    result = minimize(objective, vecs.values[free], bounds=bounds, method="L-BFGS-B")
    objective(result.x)
    return pars


def main() -> None:
    print("📈 curvefit-parameters demo")

    rng = np.random.default_rng(42)
    x = np.linspace(-5.0, 5.0, 200)

    truth = Parameters.from_vectors([3.0, 0.7, 1.2, 0.25], ["amp", "center", "width", "offset"])
    y = gaussian(x, truth) + rng.normal(scale=0.05, size=x.size)

    # 1) Initial guess, with the offset held fixed at its true value
    pars = Parameters()
    pars["amp"] = Parameter(1.0, lower_bound=0.0)
    pars["center"] = Parameter(0.0, lower_bound=-5.0, upper_bound=5.0)
    pars.width = Parameter(2.0, lower_bound=0.1, upper_bound=10.0)
    pars.offset = Parameter(0.25, vary=False)

    print(f"\nInitial guess ({pars.num_varied()} of {len(pars)} varied):")
    pars.show()

    # 2) Fit and report
    fit(x, y, pars)
    print("\nFitted:")
    pars.show()

    print("\n✅ Demo complete")


if __name__ == "__main__":
    main()
