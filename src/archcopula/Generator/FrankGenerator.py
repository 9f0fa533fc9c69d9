"""
Created on 15/10/2025

Filename: FrankGenerator.py

Relative Path: src/archcopula/Generator/FrankGenerator.py
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy import stats

from archcopula.Errors import InvalidParameter
from archcopula.Generator.Generator import Generator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.SpecialFunctions import debye, polylog

# Calibration interval; tau(500) ~ 0.992.  Beyond ~700 exp(theta) overflows.
THETA_MAX = 500.0
THETA_MIN_POSITIVE = 1e-12
SERIES_THRESHOLD = 0.01


class FrankGenerator(Generator):
    """
    Frank generator, theta real and non-zero.

    phi(t) = -log(1 - (1 - e^-theta) e^-t) / theta

    theta = 0 is the independence copula.  Positive theta is the Laplace
    transform of a Logarithmic(1 - e^-theta) law; negative theta is only
    2-monotone.
    """

    name = "Frank"
    independence_theta = 0.0

    def __new__(cls, theta: float):
        if not np.isfinite(theta):
            raise InvalidParameter(f"Theta must be finite, you provided {theta}.")
        if theta == 0:
            return IndependentGenerator()
        return super().__new__(cls)

    def __init__(self, theta: float):
        super().__init__(theta)

    def phi(self, t):
        e = np.exp(-np.asarray(t, dtype=float))
        return -np.log1p(np.expm1(-self.theta) * e) / self.theta

    def phi_inv(self, u):
        u = np.asarray(u, dtype=float)
        return -np.log(np.expm1(-self.theta * u) / np.expm1(-self.theta))

    def phi_deriv(self, t, k: int = 1):
        if k == 0:
            return self.phi(t)
        x = -np.expm1(-self.theta) * np.exp(-np.asarray(t, dtype=float))
        return (-1) ** k / self.theta * polylog(1 - k, x)

    def phi_inv_deriv(self, u):
        return -self.theta / np.expm1(self.theta * np.asarray(u, dtype=float))

    def max_monotony(self) -> float:
        return np.inf if self.theta > 0 else 2

    def frailty(self):
        p = -np.expm1(-self.theta)
        if self.theta > 0 and p < 1:
            return stats.logser(p)
        return None

    def tau(self) -> float:
        theta = self.theta
        if abs(theta) < SERIES_THRESHOLD:
            return theta / 9 - theta ** 3 / 900 + theta ** 5 / 52920 - theta ** 7 / 2721600
        return 1 + 4 * (debye(1, theta) - 1) / theta

    def rho(self) -> float:
        theta = self.theta
        if abs(theta) < SERIES_THRESHOLD:
            return theta / 6 - theta ** 3 / 450 + theta ** 5 / 23520 - theta ** 7 / 1134000
        return 1 + 12 * (debye(2, theta) - debye(1, theta)) / theta

    @classmethod
    def theta_bounds(cls, dimension: int = 2) -> Tuple[float, float]:
        if dimension > 2:
            return THETA_MIN_POSITIVE, THETA_MAX
        return -THETA_MAX, THETA_MAX
