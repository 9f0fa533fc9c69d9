"""
Created on 15/10/2025

Filename: RadialTransform.py

Relative Path: src/archcopula/RadialTransform.py

Radial ("Williamson") variables of Archimedean copulas.

If R has Williamson d-transform phi and S is uniform on the unit simplex,
then (phi(R S_1), ..., phi(R S_d)) follows the d-dimensional Archimedean
copula generated by phi (McNeil & Neslehova, 2009).  When phi is the
Laplace transform of a frailty V, R = Gamma(d, 1) / V and the construction
collapses to the Marshall-Olkin algorithm U_i = phi(E_i / V).
"""

from __future__ import annotations

import logging
from math import factorial

import numpy as np

from archcopula.Errors import InvalidParameter
from archcopula.SpecialFunctions import SolverOptions, invert_survival


class PositiveStable:
    """
    Totally skewed positive alpha-stable law with Laplace transform
    exp(-t^alpha), 0 < alpha <= 1.

    Drawn with Kanter's representation of the Chambers-Mallows-Stuck
    algorithm; alpha = 1 is the point mass at one.
    """

    def __init__(self, alpha: float):
        if not 0 < alpha <= 1:
            raise InvalidParameter(f"alpha must be in (0, 1], got {alpha}.")
        self.alpha = float(alpha)

    def rvs(self, size=None, random_state=None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        alpha = self.alpha
        if alpha == 1:
            return np.ones(() if size is None else size)
        v = rng.uniform(0.0, np.pi, size=size)
        w = rng.standard_exponential(size=size)
        return (np.sin(alpha * v) / np.sin(v) ** (1 / alpha)
                * (np.sin((1 - alpha) * v) / w) ** ((1 - alpha) / alpha))


class WilliamsonFromFrailty:
    """Radial law R = G / V with G ~ Gamma(d, 1) and V the frailty."""

    def __init__(self, frailty, dimension: int):
        self.frailty = frailty
        self.dimension = dimension

    def rvs(self, size=None, random_state=None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        v = np.asarray(self.frailty.rvs(size=size, random_state=rng), dtype=float)
        return rng.gamma(self.dimension, size=size) / v


class WilliamsonTransform:
    """
    Radial law recovered from phi alone by inverting its Williamson d-transform.

    The survival function is

        P(R > x) = sum_{k=0}^{d-1} x^k (-1)^k phi^(k)(x) / k!

    whose terms are all non-negative for a d-monotone phi, so it is summed
    directly and inverted by bracketed root finding, one draw at a time.
    """

    def __init__(self, generator, dimension: int, options: SolverOptions | None = None):
        self.generator = generator
        self.dimension = dimension
        self.options = options
        self.logger = logging.getLogger(self.__class__.__name__)

    def sf(self, x: float) -> float:
        if x <= 0:
            return 1.0
        if x >= self.generator.phi_support():
            return 0.0
        total = float(self.generator.phi(x))
        for k in range(1, self.dimension):
            total += x ** k * (-1) ** k * float(self.generator.phi_deriv(x, k)) / factorial(k)
        return min(total, 1.0)

    def cdf(self, x: float) -> float:
        return 1.0 - self.sf(x)

    def isf(self, v: float) -> float:
        support = self.generator.phi_support()
        x = invert_survival(self.sf, v, start=min(1.0, support), options=self.options)
        # draws stay strictly below the support end
        return min(x, np.nextafter(support, 0.0))

    def ppf(self, p: float) -> float:
        return self.isf(1.0 - p)

    def rvs(self, size=None, random_state=None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        levels = 1.0 - rng.random(size)
        self.logger.debug("Inverting Williamson %d-transform of %r for %d draws",
                          self.dimension, self.generator, np.size(levels))
        draws = [self.isf(v) for v in np.ravel(levels)]
        return np.reshape(np.asarray(draws, dtype=float), np.shape(levels))


def radial_dist(generator, dimension: int, options: SolverOptions | None = None):
    """
    Radial variable of the ``dimension``-variate copula generated by ``generator``.

    Uses the frailty when the generator knows one, otherwise the numeric
    Williamson inversion, which works for any d-monotone phi.
    """
    frailty = generator.frailty()
    if frailty is not None:
        return WilliamsonFromFrailty(frailty, dimension)
    return WilliamsonTransform(generator, dimension, options)
