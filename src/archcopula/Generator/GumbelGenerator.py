"""
Created on 15/10/2025

Filename: GumbelGenerator.py

Relative Path: src/archcopula/Generator/GumbelGenerator.py
"""

from __future__ import annotations

from math import comb
from typing import Tuple

import numpy as np

from archcopula import DependenceCalibrator
from archcopula.Errors import InvalidParameter
from archcopula.Generator.Generator import Generator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.RadialTransform import PositiveStable
from archcopula.SpecialFunctions import SolverOptions

# Finite stand-in for theta = inf when calibrating (tau = 1, or by Spearman's rho).
THETA_MAX = 100.0


class GumbelGenerator(Generator):
    """
    Gumbel generator, theta in [1, inf).

    phi(t) = exp(-t^(1/theta))

    theta = 1 is the independence copula.  The Gumbel copula is also an
    extreme-value copula, so the generator exposes its Pickands dependence
    function A(t) = (t^theta + (1 - t)^theta)^(1/theta).
    """

    name = "Gumbel"
    independence_theta = 1.0

    def __new__(cls, theta: float):
        if not 1 <= theta < np.inf:
            raise InvalidParameter(f"Theta must be a finite value >= 1, you provided {theta}.")
        if theta == 1:
            return IndependentGenerator()
        return super().__new__(cls)

    def __init__(self, theta: float):
        super().__init__(theta)

    # ──────────────────────────────────────────────────────────────────────
    # Generator function
    # ──────────────────────────────────────────────────────────────────────
    def phi(self, t):
        return np.exp(-np.asarray(t, dtype=float) ** (1 / self.theta))

    def phi_inv(self, u):
        return (-np.log(u)) ** self.theta

    def phi_inv_deriv(self, u):
        u = np.asarray(u, dtype=float)
        return -self.theta * (-np.log(u)) ** (self.theta - 1) / u

    def _bell(self, t, k: int):
        """
        (-1)^k B_k(g', ..., g^(k)) for g(t) = -t^alpha.

        phi^(k) = phi * B_k by Faa di Bruno; with alpha < 1 every term of
        the recursion below is non-negative, so nothing cancels.
        """
        alpha = 1 / self.theta
        t = np.asarray(t, dtype=float)
        y = []
        coef = alpha
        for m in range(1, k + 1):
            if m > 1:
                coef *= m - 1 - alpha
            y.append(coef * t ** (alpha - m))
        b = [np.ones_like(t)]
        for n in range(k):
            b.append(sum(comb(n, i) * b[n - i] * y[i] for i in range(n + 1)))
        return b[k]

    def log_abs_phi_deriv(self, t, k: int):
        t = np.asarray(t, dtype=float)
        with np.errstate(divide="ignore"):
            return -t ** (1 / self.theta) + np.log(self._bell(t, k))

    def phi_deriv(self, t, k: int = 1):
        if k == 0:
            return self.phi(t)
        return (-1) ** k * self.phi(t) * self._bell(t, k)

    def frailty(self) -> PositiveStable:
        return PositiveStable(1 / self.theta)

    # ──────────────────────────────────────────────────────────────────────
    # Pickands dependence function
    # ──────────────────────────────────────────────────────────────────────
    def pickands(self, t):
        t = np.asarray(t, dtype=float)
        return (t ** self.theta + (1 - t) ** self.theta) ** (1 / self.theta)

    def pickands_d1(self, t):
        theta = self.theta
        t = np.asarray(t, dtype=float)
        s = t ** theta + (1 - t) ** theta
        return (t ** (theta - 1) - (1 - t) ** (theta - 1)) * s ** (1 / theta - 1)

    def pickands_d2(self, t):
        theta = self.theta
        t = np.asarray(t, dtype=float)
        s = t ** theta + (1 - t) ** theta
        return (theta - 1) * (t * (1 - t)) ** (theta - 2) * s ** (1 / theta - 2)

    # ──────────────────────────────────────────────────────────────────────
    # Dependence measures
    # ──────────────────────────────────────────────────────────────────────
    def tau(self) -> float:
        return (self.theta - 1) / self.theta

    @classmethod
    def tau_inverse(cls, target: float, dimension: int = 2,
                    options: SolverOptions | None = None) -> float:
        target = DependenceCalibrator.check_target(target)
        if not np.isfinite(target):
            return target
        if target == 1:
            _, upper = cls.theta_bounds(dimension)
            return DependenceCalibrator.saturate(cls, "tau", target, upper, (upper - 1) / upper)
        if target < 0:
            return DependenceCalibrator.saturate(cls, "tau", target, 1.0, 0.0)
        return 1 / (1 - target)

    @classmethod
    def theta_bounds(cls, dimension: int = 2) -> Tuple[float, float]:
        return 1.0, THETA_MAX
