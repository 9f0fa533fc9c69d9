# tests/test_archimedean_copula.py
from __future__ import annotations

import numpy as np
import pytest

from archcopula.AMHCopula import AMHCopula
from archcopula.ArchimedeanCopula import ArchimedeanCopula, IndependentCopula, logdensity, sample
from archcopula.ClaytonCopula import ClaytonCopula
from archcopula.Errors import InvalidParameter, UnsupportedDimension
from archcopula.FrankCopula import FrankCopula
from archcopula.Generator.AMHGenerator import AMHGenerator
from archcopula.Generator.ClaytonGenerator import ClaytonGenerator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.GumbelCopula import GumbelCopula

from conftest import kendall_tau, mixed_difference


# -------------------------
# Construction
# -------------------------

@pytest.mark.unit
def test_independent_generator_gives_independent_copula():
    C = ArchimedeanCopula(3, IndependentGenerator())
    assert isinstance(C, IndependentCopula)
    assert C.dimension == 3


@pytest.mark.unit
@pytest.mark.parametrize(
    "family, theta", [(AMHCopula, 0.0), (ClaytonCopula, 0.0), (FrankCopula, 0.0), (GumbelCopula, 1.0)],
)
def test_family_at_independence_parameter(family, theta):
    C = family(4, theta)
    assert isinstance(C, IndependentCopula)
    assert C.dimension == 4


@pytest.mark.unit
@pytest.mark.parametrize(
    "build",
    [
        lambda: AMHCopula(3, -0.5),
        lambda: ClaytonCopula(4, -0.5),
        lambda: FrankCopula(3, -1.0),
        lambda: ArchimedeanCopula(5, AMHGenerator(-0.05)),
    ],
)
def test_dimension_beyond_monotony_is_rejected(build):
    with pytest.raises(UnsupportedDimension):
        build()


@pytest.mark.unit
def test_dimension_must_be_at_least_two():
    with pytest.raises(InvalidParameter):
        ClaytonCopula(1, 2.0)


@pytest.mark.unit
def test_family_exposes_parameter():
    C = ClaytonCopula(3, 2.0)
    assert C.theta == 2.0
    assert C.generator == ClaytonGenerator(2.0)
    assert repr(C) == "ClaytonCopula(dimension=3, theta=2)"


# -------------------------
# CDF and density
# -------------------------

@pytest.mark.unit
def test_independent_copula_cdf_and_density():
    C = IndependentCopula(3)
    u = np.array([[0.2, 0.5, 0.9], [0.1, 0.1, 0.1]])
    assert np.allclose(C.cdf(u), np.prod(u, axis=1))
    assert np.allclose(C.logpdf(u), 0.0, atol=1e-14)


@pytest.mark.unit
@pytest.mark.parametrize(
    "C",
    [AMHCopula(2, 0.7), ClaytonCopula(3, -0.3), FrankCopula(3, 4.0), GumbelCopula(3, 2.5)],
    ids=repr,
)
def test_cdf_has_uniform_margins(C):
    for i in range(C.dimension):
        u = np.ones(C.dimension)
        u[i] = 0.37
        assert C.cdf(u) == pytest.approx(0.37, rel=1e-12)


@pytest.mark.unit
def test_gumbel_cdf_closed_form():
    C = GumbelCopula(2, 2.0)
    u, v = 0.3, 0.6
    expected = np.exp(-np.sqrt(np.log(u) ** 2 + np.log(v) ** 2))
    assert C.cdf([u, v]) == pytest.approx(expected, rel=1e-14)


@pytest.mark.unit
def test_clayton_bivariate_density_closed_form():
    theta = 2.0
    C = ClaytonCopula(2, theta)
    u = np.array([[0.2, 0.3], [0.7, 0.1], [0.95, 0.9]])
    x, y = u[:, 0], u[:, 1]
    expected = ((1 + theta) * (x * y) ** (-(1 + theta))
                * (x ** -theta + y ** -theta - 1) ** (-(2 + 1 / theta)))
    assert np.allclose(C.pdf(u), expected, rtol=1e-12)


@pytest.mark.unit
def test_gumbel_bivariate_density_closed_form():
    theta = 1.7
    C = GumbelCopula(2, theta)
    u = np.array([[0.2, 0.3], [0.7, 0.1], [0.95, 0.9]])
    x, y = -np.log(u[:, 0]), -np.log(u[:, 1])
    s = x ** theta + y ** theta
    expected = (C.cdf(u) / (u[:, 0] * u[:, 1]) * (x * y) ** (theta - 1)
                * s ** (1 / theta - 2) * (s ** (1 / theta) + theta - 1))
    assert np.allclose(C.pdf(u), expected, rtol=1e-12)


@pytest.mark.unit
@pytest.mark.parametrize(
    "C, point",
    [
        (AMHCopula(2, -0.6), [0.3, 0.8]),
        (AMHCopula(3, 0.5), [0.3, 0.6, 0.8]),
        (FrankCopula(2, -3.0), [0.25, 0.5]),
        (FrankCopula(3, 5.0), [0.4, 0.5, 0.7]),
        (ClaytonCopula(3, -0.3), [0.6, 0.7, 0.8]),
        (GumbelCopula(3, 1.5), [0.2, 0.5, 0.6]),
    ],
    ids=repr,
)
def test_density_is_mixed_derivative_of_cdf(C, point):
    u = np.array(point)
    h = 1e-4 if C.dimension == 2 else 1e-3
    numeric = mixed_difference(C.cdf, u, h)
    assert C.pdf(u) == pytest.approx(numeric, rel=1e-4)


@pytest.mark.unit
def test_logpdf_outside_unit_cube_is_minus_infinity():
    C = ClaytonCopula(2, 1.0)
    u = np.array([[0.0, 0.5], [1.2, 0.5], [-0.1, 0.3], [0.5, 0.5]])
    out = C.logpdf(u)
    assert np.all(np.isneginf(out[:3]))
    assert np.isfinite(out[3])


@pytest.mark.unit
def test_points_must_match_dimension():
    with pytest.raises(ValueError):
        ClaytonCopula(3, 1.0).cdf([0.5, 0.5])


# -------------------------
# Sampling
# -------------------------

@pytest.mark.statistical
@pytest.mark.parametrize(
    "C",
    [
        AMHCopula(2, -0.5),
        AMHCopula(3, 0.6),
        ClaytonCopula(2, -0.9),
        ClaytonCopula(3, -0.3),
        ClaytonCopula(4, 2.0),
        FrankCopula(2, -4.0),
        FrankCopula(3, 3.0),
        GumbelCopula(3, 2.0),
        IndependentCopula(3),
    ],
    ids=repr,
)
def test_samples_lie_in_unit_cube_with_finite_density(C, rng):
    u = sample(C, 300, random_state=rng)
    assert u.shape == (300, C.dimension)
    assert np.all((u >= 0) & (u <= 1))
    assert np.all(np.isfinite(logdensity(C, u)))


@pytest.mark.statistical
def test_strongly_negative_clayton_density_is_finite_near_support_end(rng):
    C = ClaytonCopula(2, -0.9)
    u = C.simulate(2_000, random_state=rng)
    assert np.all(np.isfinite(C.logpdf(u)))

    # a point whose phi_inv sum lands on the support end
    G = C.generator
    u_edge = G.phi(G.phi_support() * np.array([0.3, 0.7]))
    assert np.isfinite(C.logpdf(u_edge))
    assert C.logpdf(u_edge) > C.logpdf([0.5, 0.5])


@pytest.mark.statistical
@pytest.mark.parametrize(
    "C, n, tol",
    [
        (GumbelCopula(2, 2.0), 10_000, 0.03),
        (ClaytonCopula(3, 2.0), 5_000, 0.03),
        (FrankCopula(2, 5.0), 5_000, 0.03),
        (AMHCopula(2, 0.8), 5_000, 0.03),
        (AMHCopula(2, -0.8), 2_000, 0.05),
        (ClaytonCopula(2, -0.5), 2_000, 0.05),
        (FrankCopula(2, -5.0), 2_000, 0.05),
    ],
    ids=repr,
)
def test_sample_kendall_tau_matches_generator(C, n, tol, rng):
    u = C.simulate(n, random_state=rng)
    assert kendall_tau(u) == pytest.approx(C.tau(), abs=tol)


@pytest.mark.statistical
def test_sample_cdf_matches_copula_cdf(rng):
    C = ClaytonCopula(3, 1.0)
    u = C.simulate(20_000, random_state=rng)
    for point in ([0.3, 0.5, 0.7], [0.8, 0.8, 0.8], [0.2, 0.9, 0.6]):
        empirical = np.mean(np.all(u <= np.array(point), axis=1))
        assert empirical == pytest.approx(C.cdf(point), abs=0.01)


@pytest.mark.unit
def test_simulation_is_reproducible_from_seed():
    C = FrankCopula(2, -2.0)
    assert np.array_equal(C.simulate(20, random_state=3), C.simulate(20, random_state=3))


@pytest.mark.unit
def test_tail_dependence_coefficients():
    assert GumbelCopula(2, 2.0).upper_tail_dependence() == pytest.approx(2 - np.sqrt(2))
    assert ClaytonCopula(2, 2.0).lower_tail_dependence() == pytest.approx(2 ** -0.5)
