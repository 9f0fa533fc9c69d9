"""
Created on 14/10/2025

Filename: AMHGenerator.py

Relative Path: src/archcopula/Generator/AMHGenerator.py

Ali-Mikhail-Haq generator

    phi(t) = (1 - theta) / (e^t - theta),        theta in [-1, 1)

theta = 0 is the independence copula.  For theta >= 0 the generator is the
Laplace transform of a Geometric(1 - theta) law and completely monotone; for
theta < 0 it is only d-monotone up to a theta-dependent d, tracked by the
critical value table below.

References:
    Nelsen, R. B. (2006). An introduction to copulas. Springer.
    Hofert, M. & Maechler, M. Spearman's rho for the AMH copula: a beautiful
    formula (R package copula, vignette rhoAMH-dilog).
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

import numpy as np
from scipy import stats

from archcopula.Errors import InvalidParameter, UnsupportedDimension
from archcopula.Generator.Generator import Generator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.SpecialFunctions import dilog, polylog

# Upper end of the calibration interval; theta = 1 itself degenerates phi.
THETA_MAX = 1.0 - 1e-12


class CriticalValueTable:
    """
    Thresholds theta_k with ``theta < theta_k  =>  max_monotony == k - 1``.

    Small k are known analytically or were tabulated once.  Larger k are
    found on first access by walking theta from 0 towards -1 in fixed steps
    until Li_{-k}(theta) turns positive; the first theta satisfying this at
    the given resolution is kept.  Results are memoised for the lifetime of
    the process (cold start: a handful of high-precision polylog evaluations
    per new key).  ``dict.setdefault`` makes concurrent first access safe;
    a racing duplicate search returns the same value.
    """

    def __init__(self, known: Dict[int, float], step: float = 1e-7):
        self._values: Dict[int, float] = dict(known)
        self.step = step
        self.logger = logging.getLogger(self.__class__.__name__)

    def __getitem__(self, k: int) -> float:
        if k < 2:
            raise UnsupportedDimension(f"Critical values start at k = 2, got {k}.")
        value = self._values.get(k)
        if value is None:
            self.logger.debug("Searching AMH critical value for k = %d", k)
            value = self._values.setdefault(k, self._search(k))
        return value

    def __contains__(self, k: int) -> bool:
        return k in self._values

    def _search(self, k: int) -> float:
        x = 0.0
        while x > -1:
            if polylog(-k, x) > 0:
                break
            x -= self.step
        return x


AMH_CRITICAL_VALUES = CriticalValueTable({
    2: -1.0,
    3: np.sqrt(3) - 2,
    4: -5 + 2 * np.sqrt(6),
    5: -13 / 2 - np.sqrt(105) / 2 + (np.sqrt(2) / 2) * np.sqrt(13 * np.sqrt(105) + 135),
    6: -14 - 3 * np.sqrt(15) + np.sqrt(6) * np.sqrt(14 * np.sqrt(15) + 55),
    7: -0.00914869999999993,
    8: -0.004376199999998468,
    9: -0.002121400000000042,
    10: -0.0010375999999997928,
    11: -0.0005105999999999994,
    12: -0.00025240000000000527,
    13: -0.0001252000000000022,
    14: -6.220000000000067e-5,
    15: -3.099999999999991e-5,
    16: -1.5500000000000048e-5,
    17: -7.699999999999994e-6,
    18: -3.839999999999973e-6,
    19: -1.9199999999999918e-6,
    20: -9.600000000000008e-7,
})

MAX_SEARCHED_MONOTONY = 100


def _amh_tau(theta: float) -> float:
    if abs(theta) < 0.01:
        return (2 / 9 * theta
                + 1 / 18 * theta ** 2
                + 1 / 45 * theta ** 3
                + 1 / 90 * theta ** 4
                + 2 / 315 * theta ** 5
                + 1 / 252 * theta ** 6
                + 1 / 378 * theta ** 7
                + 1 / 540 * theta ** 8
                + 2 / 1485 * theta ** 9
                + 1 / 990 * theta ** 10)
    u = theta + (1 - theta) ** 2 * np.log1p(-theta)
    return 1 - (2 / 3) * u / theta ** 2


def _amh_rho(a: float) -> float:
    if np.isnan(a):
        return a
    aa = abs(a)
    # series below 0.016 keep full precision where the closed form cancels
    if aa < 7e-16:
        return a / 3
    if aa < 1e-4:
        return a / 3 * (1 + a / 4)
    if aa < 0.002:
        return a * (1 / 3 + a * (1 / 12 + a * 3 / 100))
    if aa < 0.007:
        return a * (1 / 3 + a * (1 / 12 + a * (3 / 100 + a / 75)))
    if aa < 0.016:
        return a * (1 / 3 + a * (1 / 12 + a * (3 / 100 + a * (1 / 75 + a / 147))))
    log_term = (1 - a) * np.log1p(-a) if a < 1 else 0.0
    return (12 * (1 + a) * float(dilog(a)) - 24 * log_term) / a ** 2 - 3 * (a + 12) / a


class AMHGenerator(Generator):
    """Ali-Mikhail-Haq generator, theta in [-1, 1)."""

    name = "AMH"
    independence_theta = 0.0

    def __new__(cls, theta: float):
        if not -1 <= theta < 1:
            raise InvalidParameter(f"Theta must be in [-1, 1), you provided {theta}.")
        if theta == 0:
            return IndependentGenerator()
        return super().__new__(cls)

    def __init__(self, theta: float):
        super().__init__(theta)

    # ──────────────────────────────────────────────────────────────────────
    # Generator function
    # ──────────────────────────────────────────────────────────────────────
    def phi(self, t):
        e = np.exp(-np.asarray(t, dtype=float))
        return (1 - self.theta) * e / (1 - self.theta * e)

    def phi_inv(self, u):
        return np.log(self.theta + (1 - self.theta) / np.asarray(u, dtype=float))

    def phi_deriv(self, t, k: int = 1):
        theta = self.theta
        if k == 0:
            return self.phi(t)
        if k == 1:
            e = np.exp(-np.asarray(t, dtype=float))
            return -(1 - theta) * e / (1 - theta * e) ** 2
        x = theta * np.exp(-np.asarray(t, dtype=float))
        return (-1) ** k * (1 - theta) / theta * polylog(-k, x)

    def phi_inv_deriv(self, u):
        u = np.asarray(u, dtype=float)
        return (self.theta - 1) / (self.theta * (u - 1) * u + u)

    def max_monotony(self) -> float:
        if self.theta >= 0:
            return np.inf
        for k in range(3, MAX_SEARCHED_MONOTONY + 1):
            if self.theta < AMH_CRITICAL_VALUES[k]:
                return k - 1
        return MAX_SEARCHED_MONOTONY

    def frailty(self):
        if self.theta > 0:
            return stats.geom(1 - self.theta)
        return None

    # ──────────────────────────────────────────────────────────────────────
    # Dependence measures
    # ──────────────────────────────────────────────────────────────────────
    def tau(self) -> float:
        return float(_amh_tau(self.theta))

    def rho(self) -> float:
        return float(_amh_rho(self.theta))

    @classmethod
    def theta_bounds(cls, dimension: int = 2) -> Tuple[float, float]:
        return AMH_CRITICAL_VALUES[dimension], THETA_MAX
