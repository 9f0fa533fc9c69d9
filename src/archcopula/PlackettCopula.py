"""
Created on 15/10/2025

Filename: PlackettCopula.py

Relative Path: src/archcopula/PlackettCopula.py

Bivariate Plackett copula, θ > 0:

    C(u, v) = ([1 + (θ-1)(u+v)] - sqrt([1 + (θ-1)(u+v)]^2 - 4uvθ(θ-1))) / (2(θ-1))

More details in Joe, H. (2014). Dependence modeling with copulas. CRC press,
p. 164.  Sampling follows Johnson (1987), Multivariate statistical
simulation, p. 193 (also Nelsen 2006, exercise 3.38).
"""

import numpy as np

from archcopula.ArchimedeanCopula import IndependentCopula
from archcopula.CopulaDistribution import CopulaDistribution, RandomState
from archcopula.Errors import InvalidParameter
from archcopula.FrechetBounds import MCopula, WCopula


class PlackettCopula(CopulaDistribution):
    """
    Plackett copula.

    Degenerate parameters return the matching special copula:
    θ = 1 → IndependentCopula(2), θ = 0 → MCopula(2), θ = ∞ → WCopula(2).
    """

    def __new__(cls, theta: float):
        if theta == 1:
            return IndependentCopula(2)
        if theta == 0:
            return MCopula(2)
        if theta == np.inf:
            return WCopula(2)
        if not theta > 0:
            raise InvalidParameter(f"Theta must be non-negative, you provided {theta}.")
        return super().__new__(cls)

    def __init__(self, theta: float):
        super().__init__(name="Plackett", dimension=2)
        self.theta = float(theta)

    def __repr__(self) -> str:
        return f"PlackettCopula(theta={self.theta:g})"

    def cdf(self, u: np.ndarray) -> np.ndarray:
        u = self._check_points(u)
        x, y = u[..., 0], u[..., 1]
        eta = self.theta - 1
        term1 = 1 + eta * (x + y)
        term2 = np.sqrt(term1 ** 2 - 4 * self.theta * eta * x * y)
        return 0.5 * (term1 - term2) / eta

    def logpdf(self, u: np.ndarray) -> np.ndarray:
        u = self._check_points(u)
        x, y = u[..., 0], u[..., 1]
        eta = self.theta - 1
        term1 = self.theta * (1 + eta * (x + y - 2 * x * y))
        term2 = (1 + eta * (x + y)) ** 2 - 4 * self.theta * eta * x * y
        return np.log(term1) - 1.5 * np.log(term2)

    def simulate(self, n_samples: int, random_state: RandomState = None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        theta = self.theta
        u = rng.random(n_samples)
        t = rng.random(n_samples)
        a = t * (1 - t)
        b = theta + a * (theta - 1) ** 2
        c = 2 * a * (u * theta ** 2 + 1 - u) + theta * (1 - 2 * a)
        d = np.sqrt(theta) * np.sqrt(theta + 4 * a * u * (1 - u) * (1 - theta) ** 2)
        v = (c - (1 - 2 * t) * d) / (2 * b)
        return np.column_stack([u, v])

    def rho(self) -> float:
        theta = self.theta
        return (theta + 1) / (theta - 1) - 2 * theta * np.log(theta) / (theta - 1) ** 2
