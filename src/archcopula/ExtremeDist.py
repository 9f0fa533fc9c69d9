"""
Created on 15/10/2025

Filename: ExtremeDist.py

Relative Path: src/archcopula/ExtremeDist.py
"""

from __future__ import annotations

import numpy as np

from archcopula.CopulaDistribution import RandomState
from archcopula.SpecialFunctions import SolverOptions, invert_cdf

EPS = np.finfo(float).eps


class ExtremeDist:
    """
    Distribution on [0, 1] derived from a Pickands dependence function A.

    F(z) = z + z (1 - z) A'(z) / A(z)

    ``pickands`` is any object exposing ``pickands``, ``pickands_d1`` and
    ``pickands_d2`` (e.g. a Gumbel or independence generator).  There is no
    closed-form quantile, so ``ppf`` inverts the CDF numerically.
    """

    def __init__(self, pickands, options: SolverOptions | None = None):
        self.G = pickands
        self.options = options

    def cdf(self, z):
        z = np.asarray(z, dtype=float)
        zc = np.clip(z, EPS, 1 - EPS)
        value = zc + zc * (1 - zc) * self.G.pickands_d1(zc) / self.G.pickands(zc)
        return np.where(z <= 0, 0.0, np.where(z >= 1, 1.0, value))

    def pdf(self, z):
        z = np.asarray(z, dtype=float)
        zc = np.clip(z, EPS, 1 - EPS)
        A = self.G.pickands(zc)
        A_prime = self.G.pickands_d1(zc)
        A_double_prime = self.G.pickands_d2(zc)
        value = (1 + (1 - 2 * zc) * A_prime / A
                 + zc * (1 - zc) * (A_double_prime * A - A_prime ** 2) / A ** 2)
        return np.where((z < 0) | (z > 1), 0.0, value)

    def logpdf(self, z):
        with np.errstate(divide="ignore"):
            return np.log(self.pdf(z))

    def _ppf_scalar(self, p: float) -> float:
        if p == 0:
            return 0.0
        if p == 1:
            return 1.0
        return invert_cdf(lambda x: float(self.cdf(x)), p, EPS, 1 - EPS, self.options)

    def ppf(self, p):
        p = np.asarray(p, dtype=float)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("p must be between 0 and 1")
        if p.ndim == 0:
            return self._ppf_scalar(float(p))
        return np.reshape([self._ppf_scalar(v) for v in p.ravel()], p.shape)

    def rvs(self, size=None, random_state: RandomState = None):
        rng = np.random.default_rng(random_state)
        return self.ppf(rng.random(size))
