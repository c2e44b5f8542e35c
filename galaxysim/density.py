"""Density profiles for Plummer and Hernquist spherical models."""

from __future__ import annotations

import math
from enum import Enum

_MAX_DENSITY_SCAN_STEPS = 1000
_MAX_DENSITY_MARGIN = 1.1
_HERNQUIST_MIN_RADIUS = 1e-10


class ModelType(Enum):
    """The supported spherical density models."""

    PLUMMER = "plummer"
    HERNQUIST = "hernquist"

    @property
    def label(self) -> str:
        return self.name.capitalize()


def plummer_density(r: float, rho0: float, a: float) -> float:
    """Plummer density: rho0 / (1 + (r/a)^2)^(5/2)."""
    ratio = r / a
    return rho0 / (1.0 + ratio * ratio) ** 2.5


def hernquist_density(r: float, M: float, a: float) -> float:
    """Hernquist-style density: (M / 2pi) * (a / r) / (1 + r/a)^3.

    Returns 0 for radii too close to the centre to evaluate.
    """
    if r < _HERNQUIST_MIN_RADIUS:
        return 0.0
    ratio = r / a
    mass_factor = M / (2.0 * math.pi)
    scale_factor = a / r
    falloff = 1.0 / (1.0 + ratio) ** 3
    return mass_factor * scale_factor * falloff


def model_density(model: ModelType, r: float, param1: float, param2: float) -> float:
    """Density of the given model at radius r."""
    if model is ModelType.PLUMMER:
        return plummer_density(r, param1, param2)
    return hernquist_density(r, param1, param2)


def find_max_density(
    model: ModelType, param1: float, param2: float, r_max: float
) -> float:
    """Scan [0, r_max] for the peak density and return it with a 10% margin."""
    steps = _MAX_DENSITY_SCAN_STEPS
    peak = max(
        0.0,
        max(
            model_density(model, (i * r_max) / steps, param1, param2)
            for i in range(steps + 1)
        ),
    )
    return peak * _MAX_DENSITY_MARGIN