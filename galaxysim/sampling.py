"""Rejection sampling of star positions from spherical density models."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from galaxysim.density import ModelType, find_max_density, model_density


@dataclass(frozen=True)
class Star:
    """A star position in Cartesian coordinates."""

    x: float
    y: float
    z: float

    def radius(self) -> float:
        """Distance of the star from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def rejection_sample_radius(
    model: ModelType,
    param1: float,
    param2: float,
    r_max: float,
    max_density: float,
    rng: random.Random | None = None,
) -> float:
    """Draw a radius in [0, r_max] whose distribution follows the model density."""
    rng = _rng_or_default(rng)
    while True:
        r = rng.random() * r_max
        height = rng.random() * max_density
        if height <= model_density(model, r, param1, param2):
            return r


def spherical_to_cartesian(r: float, rng: random.Random | None = None) -> Star:
    """Place a star at radius r in a uniformly random direction."""
    rng = _rng_or_default(rng)
    theta = 2.0 * math.pi * rng.random()
    phi = math.acos(2.0 * rng.random() - 1.0)
    return Star(
        x=r * math.sin(phi) * math.cos(theta),
        y=r * math.sin(phi) * math.sin(theta),
        z=r * math.cos(phi),
    )


def generate_stars(
    n_stars: int,
    model: ModelType,
    param1: float,
    param2: float,
    r_max: float,
    rng: random.Random | None = None,
) -> list[Star]:
    """Generate n_stars positions for the model, reporting progress every 10%."""
    if n_stars < 0:
        raise ValueError(f"number of stars must be non-negative, got {n_stars}")
    rng = _rng_or_default(rng)
    print(f"Generating {n_stars} stars for {model.label} model...")

    max_density = find_max_density(model, param1, param2, r_max)
    step = n_stars // 10
    stars: list[Star] = []
    for count in range(1, n_stars + 1):
        r = rejection_sample_radius(model, param1, param2, r_max, max_density, rng)
        stars.append(spherical_to_cartesian(r, rng))
        if step and count % step == 0:
            print(f"Progress: {count * 100 // n_stars}%")

    print("Star generation complete!\n")
    return stars