# tests/test_radial_transform.py
from __future__ import annotations

import numpy as np
import pytest

from archcopula.Errors import InvalidParameter
from archcopula.Generator.ClaytonGenerator import ClaytonGenerator
from archcopula.Generator.FrankGenerator import FrankGenerator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.RadialTransform import (
    PositiveStable,
    WilliamsonFromFrailty,
    WilliamsonTransform,
    radial_dist,
)


# -------------------------
# Positive stable frailty
# -------------------------

@pytest.mark.unit
def test_positive_stable_rejects_bad_index():
    with pytest.raises(InvalidParameter):
        PositiveStable(0.0)
    with pytest.raises(InvalidParameter):
        PositiveStable(1.5)


@pytest.mark.unit
def test_positive_stable_unit_index_is_point_mass():
    assert np.all(PositiveStable(1.0).rvs(size=10, random_state=0) == 1.0)


@pytest.mark.statistical
@pytest.mark.parametrize("alpha", [0.3, 0.5, 0.8])
def test_positive_stable_laplace_transform(alpha: float, rng):
    """E[exp(-t V)] = exp(-t^alpha)."""
    v = PositiveStable(alpha).rvs(size=40_000, random_state=rng)
    assert np.all(v > 0)
    for t in (0.5, 1.0, 2.0):
        assert np.mean(np.exp(-t * v)) == pytest.approx(np.exp(-t ** alpha), abs=0.01)


# -------------------------
# Williamson transform
# -------------------------

@pytest.mark.unit
def test_independent_radial_law_is_gamma():
    """For phi(t) = exp(-t) the radial variable is Gamma(d, 1)."""
    R = WilliamsonTransform(IndependentGenerator(), 3)
    for x in (0.1, 1.0, 4.0):
        expected = np.exp(-x) * (1 + x + x ** 2 / 2)
        assert R.sf(x) == pytest.approx(expected, rel=1e-13)
        assert R.cdf(x) == pytest.approx(1 - expected, abs=1e-14)
    assert R.sf(0.0) == 1.0
    assert R.sf(-1.0) == 1.0


@pytest.mark.unit
def test_survival_function_vanishes_at_support_end():
    R = WilliamsonTransform(ClaytonGenerator(-0.5), 2)
    assert R.sf(2.0) == 0.0
    assert R.sf(5.0) == 0.0
    xs = np.linspace(0.0, 2.0, 41)
    assert np.all(np.diff([R.sf(x) for x in xs]) <= 0)


@pytest.mark.unit
def test_draws_stay_below_finite_support_end(rng):
    G = ClaytonGenerator(-0.9)
    R = WilliamsonTransform(G, 2)
    assert R.isf(1e-12) < G.phi_support()
    assert np.all(R.rvs(size=500, random_state=rng) < G.phi_support())


@pytest.mark.unit
def test_quantile_inverts_survival():
    R = WilliamsonTransform(FrankGenerator(-3.0), 2)
    for p in (0.01, 0.3, 0.5, 0.95, 0.9999):
        x = R.ppf(p)
        assert R.cdf(x) == pytest.approx(p, abs=1e-10)


@pytest.mark.unit
def test_heavy_tailed_radial_law_is_inverted_far_out():
    """Clayton's radial law has a polynomial tail; doubling brackets it."""
    R = WilliamsonTransform(ClaytonGenerator(3.0), 2)
    v = 1e-8
    x = R.isf(v)
    assert x > 1e3
    assert R.sf(x) == pytest.approx(v, rel=1e-6)


@pytest.mark.statistical
def test_numeric_and_frailty_radial_laws_agree(rng):
    G = ClaytonGenerator(1.5)
    numeric = WilliamsonTransform(G, 3)
    draws = WilliamsonFromFrailty(G.frailty(), 3).rvs(size=20_000, random_state=rng)
    for p in (0.1, 0.5, 0.9):
        assert np.mean(draws <= numeric.ppf(p)) == pytest.approx(p, abs=0.015)


@pytest.mark.unit
def test_radial_dist_prefers_frailty():
    assert isinstance(radial_dist(ClaytonGenerator(2.0), 3), WilliamsonFromFrailty)
    assert isinstance(radial_dist(ClaytonGenerator(-0.3), 3), WilliamsonTransform)
    assert isinstance(radial_dist(FrankGenerator(-2.0), 2), WilliamsonTransform)


@pytest.mark.unit
def test_numeric_draws_are_reproducible():
    R = WilliamsonTransform(ClaytonGenerator(-0.3), 3)
    a = R.rvs(size=5, random_state=7)
    b = R.rvs(size=5, random_state=7)
    assert a.shape == (5,)
    assert np.array_equal(a, b)
    assert np.all((a >= 0) & (a <= ClaytonGenerator(-0.3).phi_support()))
