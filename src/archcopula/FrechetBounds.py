"""
Created on 15/10/2025

Filename: FrechetBounds.py

Relative Path: src/archcopula/FrechetBounds.py

Fréchet–Hoeffding bounds.  Both are singular, so neither has a density.
"""

import numpy as np

from archcopula.CopulaDistribution import CopulaDistribution, RandomState
from archcopula.Errors import UnsupportedDimension


class MCopula(CopulaDistribution):
    """Comonotone (upper) bound C(u) = min(u_1, ..., u_d)."""

    def __init__(self, dimension: int):
        super().__init__(name="M", dimension=dimension)

    def cdf(self, u: np.ndarray) -> np.ndarray:
        return np.min(self._check_points(u), axis=-1)

    def simulate(self, n_samples: int, random_state: RandomState = None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        return np.repeat(rng.random((n_samples, 1)), self.dimension, axis=1)

    def tau(self) -> float:
        return 1.0

    def rho(self) -> float:
        return 1.0


class WCopula(CopulaDistribution):
    """Countermonotone (lower) bound C(u, v) = max(u + v - 1, 0); a copula only for d = 2."""

    def __init__(self, dimension: int = 2):
        if dimension != 2:
            raise UnsupportedDimension(f"W is a copula only in dimension 2, got {dimension}.")
        super().__init__(name="W", dimension=dimension)

    def cdf(self, u: np.ndarray) -> np.ndarray:
        u = self._check_points(u)
        return np.maximum(u.sum(axis=-1) - 1, 0.0)

    def simulate(self, n_samples: int, random_state: RandomState = None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        u = rng.random(n_samples)
        return np.column_stack([u, 1 - u])

    def tau(self) -> float:
        return -1.0

    def rho(self) -> float:
        return -1.0
