# galaxysim

Density models for spherical star clusters and galaxy bulges. The package can
integrate enclosed mass and sample star positions.

`ModelType` provides two models:

- **Plummer** (`ModelType.PLUMMER`, globular clusters): `rho(r) = rho0 / (1 + (r/a)^2)^(5/2)`
- **Hernquist** (`ModelType.HERNQUIST`, galaxy bulges): `rho(r) = (M / 2pi) * (a / r) / (1 + r/a)^3`

For both models, `param1` is the density scale and `param2` is the scale radius
`a`. The density scale is `rho0` for Plummer and the total mass `M` for
Hernquist.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Densities

```python
from galaxysim.density import (
    ModelType, plummer_density, hernquist_density, model_density, find_max_density,
)

plummer_density(0.0, 1.0, 1.0)                    # central density rho0
hernquist_density(1.0, 100.0, 1.0)                # Hernquist density at r = a
model_density(ModelType.PLUMMER, 2.0, 1.0, 1.0)   # dispatch on the model

# Peak density on a 1000-step grid over [0, r_max], times 1.1
find_max_density(ModelType.HERNQUIST, 100.0, 1.0, 10.0)
```

For radii below `1e-10`, the Hernquist density is returned as `0.0`. This
avoids the singularity at the centre. `ModelType.label` gives the display name
of a model, `"Plummer"` or `"Hernquist"`.

### Enclosed mass

```python
from galaxysim.density import ModelType
from galaxysim.integration import INTEGRATION_STEPS, mass_integrand, simpson_integrate

mass_integrand(1.0, ModelType.PLUMMER, 1.0, 1.0)   # 4 pi r^2 rho(r)

# Integral of 4 pi r^2 rho(r) dr by Simpson's rule with INTEGRATION_STEPS (1000) intervals
mass = simpson_integrate(0.0, 5.0, ModelType.PLUMMER, 1.0, 1.0)
```

### Sampling stars

Each star is drawn in two steps:

1. The radius comes from rejection sampling. A point is chosen uniformly in
   `[0, r_max] x [0, max_density]`. It is kept if it lies under the density
   curve.
2. The star is placed at that radius in a direction that is uniformly random on
   the sphere.

Every sampling function takes an optional `random.Random`. Pass one to make
runs reproducible. Without it, a fresh unseeded generator is used.

```python
import random
from galaxysim.density import ModelType
from galaxysim.sampling import generate_stars

rng = random.Random(42)
stars = generate_stars(10_000, ModelType.PLUMMER, 1.0, 1.0, 10.0, rng)

first = stars[0]
print(first.x, first.y, first.z, first.radius())
```

`generate_stars` returns a list of frozen `Star` dataclasses with fields `x`,
`y` and `z`. It prints a start message, a progress line at every 10% and a
completion message to standard output. It raises `ValueError` if `n_stars` is
negative.

The lower-level functions can also be used on their own:

- `rejection_sample_radius(model, param1, param2, r_max, max_density, rng)`
- `spherical_to_cartesian(r, rng)`

## What it does not do

`galaxysim` is a library only. It does not provide:

- a command-line program;
- writing star positions or mass profiles to data files;
- circular-velocity profiles;
- plots.

To get these, use the returned `Star` lists and the `simpson_integrate` results
in your own code.