import math

import pytest

from galaxysim.density import ModelType, model_density
from galaxysim.integration import mass_integrand, simpson_integrate


def test_integrand_zero_at_origin():
    assert mass_integrand(0.0, ModelType.PLUMMER, 1.0, 1.0) == 0.0
    assert mass_integrand(0.0, ModelType.HERNQUIST, 100.0, 1.0) == 0.0


def test_integrand_matches_shell_mass():
    r = 2.5
    assert mass_integrand(r, ModelType.PLUMMER, 1.0, 1.0) == pytest.approx(
        4.0 * math.pi * r * r * model_density(ModelType.PLUMMER, r, 1.0, 1.0)
    )


def test_empty_interval_is_zero():
    assert simpson_integrate(3.0, 3.0, ModelType.PLUMMER, 1.0, 1.0) == 0.0


@pytest.mark.parametrize("r", [0.5, 1.0, 3.0, 10.0])
def test_plummer_enclosed_mass_analytic(r):
    rho0, a = 1.0, 1.0
    analytic = (4.0 / 3.0) * math.pi * rho0 * r**3 / (1.0 + (r / a) ** 2) ** 1.5
    assert simpson_integrate(0.0, r, ModelType.PLUMMER, rho0, a) == pytest.approx(
        analytic, rel=1e-6
    )


@pytest.mark.parametrize("r", [1.0, 5.0, 10.0])
def test_hernquist_enclosed_mass_analytic(r):
    M = 100.0
    analytic = M * r * r / (r + 1.0) ** 2
    assert simpson_integrate(0.0, r, ModelType.HERNQUIST, M, 1.0) == pytest.approx(
        analytic, rel=1e-6
    )


def test_additive_over_intervals():
    whole = simpson_integrate(0.0, 5.0, ModelType.PLUMMER, 1.0, 1.0)
    parts = simpson_integrate(0.0, 2.0, ModelType.PLUMMER, 1.0, 1.0) + simpson_integrate(
        2.0, 5.0, ModelType.PLUMMER, 1.0, 1.0
    )
    assert whole == pytest.approx(parts, rel=1e-8)


def test_reversed_interval_negates():
    forward = simpson_integrate(1.0, 4.0, ModelType.HERNQUIST, 100.0, 1.0)
    backward = simpson_integrate(4.0, 1.0, ModelType.HERNQUIST, 100.0, 1.0)
    assert backward == pytest.approx(-forward)