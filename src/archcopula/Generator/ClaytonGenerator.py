"""
Created on 15/10/2025

Filename: ClaytonGenerator.py

Relative Path: src/archcopula/Generator/ClaytonGenerator.py
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy import stats

from archcopula import DependenceCalibrator
from archcopula.Errors import InvalidParameter
from archcopula.Generator.Generator import Generator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.SpecialFunctions import SolverOptions

# Finite stand-in for theta = inf when calibrating (tau = 1, or by Spearman's rho).
THETA_MAX = 50.0
# Half-width, per summed coordinate, of the band treated as the support end.
BOUNDARY_TOL = 8 * np.finfo(float).eps


class ClaytonGenerator(Generator):
    """
    Clayton generator, theta in [-1, inf).

    phi(t) = max(1 + theta t, 0)^(-1/theta)

    theta = 0 is the independence copula.  Negative theta gives a
    non-strict generator that is d-monotone only for theta >= -1/(d-1).
    """

    name = "Clayton"
    independence_theta = 0.0

    def __new__(cls, theta: float):
        if not -1 <= theta < np.inf:
            raise InvalidParameter(f"Theta must be a finite value >= -1, you provided {theta}.")
        if theta == 0:
            return IndependentGenerator()
        return super().__new__(cls)

    def __init__(self, theta: float):
        super().__init__(theta)

    def phi(self, t):
        base = np.maximum(1 + self.theta * np.asarray(t, dtype=float), 0.0)
        with np.errstate(divide="ignore"):
            return base ** (-1 / self.theta)

    def phi_inv(self, u):
        return (np.asarray(u, dtype=float) ** -self.theta - 1) / self.theta

    def phi_deriv(self, t, k: int = 1):
        theta = self.theta
        coef = np.prod([-1 - j * theta for j in range(k)])
        base = 1 + theta * np.asarray(t, dtype=float)
        with np.errstate(divide="ignore", invalid="ignore"):
            value = coef * np.maximum(base, 0.0) ** (-1 / theta - k)
        return np.where(base > 0, value, 0.0)

    def log_abs_phi_deriv(self, t, k: int):
        theta = self.theta
        with np.errstate(divide="ignore"):
            log_coef = float(np.sum(np.log([abs(1 + j * theta) for j in range(k)])))
        base = 1 + theta * np.asarray(t, dtype=float)
        if theta < 0:
            # t = phi_support() up to the rounding of sum(phi_inv(u))
            tol = BOUNDARY_TOL * k
            base = np.where(np.abs(base) <= tol, tol, base)
        with np.errstate(divide="ignore", invalid="ignore"):
            value = log_coef + (-1 / theta - k) * np.log(np.maximum(base, 0.0))
        return np.where(base > 0, value, -np.inf)

    def phi_inv_deriv(self, u):
        return -np.asarray(u, dtype=float) ** (-self.theta - 1)

    def phi_support(self) -> float:
        return -1 / self.theta if self.theta < 0 else np.inf

    def max_monotony(self) -> float:
        if self.theta >= 0:
            return np.inf
        return int(np.floor(1 - 1 / self.theta + 1e-12))

    def frailty(self):
        if self.theta > 0:
            return stats.gamma(a=1 / self.theta, scale=self.theta)
        return None

    def tau(self) -> float:
        return self.theta / (self.theta + 2)

    @classmethod
    def theta_bounds(cls, dimension: int = 2) -> Tuple[float, float]:
        return max(-1.0, -1.0 / (dimension - 1)), THETA_MAX

    @classmethod
    def tau_inverse(cls, target: float, dimension: int = 2,
                    options: SolverOptions | None = None) -> float:
        target = DependenceCalibrator.check_target(target)
        if not np.isfinite(target):
            return target
        lower, upper = cls.theta_bounds(dimension)
        if target == 1:
            return DependenceCalibrator.saturate(cls, "tau", target, upper, upper / (upper + 2))
        reachable = lower / (lower + 2)
        if target < reachable:
            return DependenceCalibrator.saturate(cls, "tau", target, lower, reachable)
        return 2 * target / (1 - target)
