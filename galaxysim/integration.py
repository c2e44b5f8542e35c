"""Enclosed-mass integration using Simpson's rule."""

from __future__ import annotations

import math

from galaxysim.density import ModelType, model_density

INTEGRATION_STEPS = 1000


def mass_integrand(r: float, model: ModelType, param1: float, param2: float) -> float:
    """Mass per unit radius of a spherical shell: 4 pi r^2 rho(r)."""
    return 4.0 * math.pi * r * r * model_density(model, r, param1, param2)


def simpson_integrate(
    r_min: float, r_max: float, model: ModelType, param1: float, param2: float
) -> float:
    """Integrate the mass integrand from r_min to r_max with Simpson's rule."""
    n = INTEGRATION_STEPS + INTEGRATION_STEPS % 2
    h = (r_max - r_min) / n

    def f(r: float) -> float:
        return mass_integrand(r, model, param1, param2)

    total = f(r_min) + f(r_max)
    total += 4.0 * sum(f(r_min + i * h) for i in range(1, n, 2))
    total += 2.0 * sum(f(r_min + i * h) for i in range(2, n, 2))
    return (h / 3.0) * total