"""
Created on 14/10/2025

Filename: IndependentGenerator.py

Relative Path: src/archcopula/Generator/IndependentGenerator.py
"""

import numpy as np
from scipy import stats

from archcopula.Generator.Generator import Generator


class IndependentGenerator(Generator):
    """phi(t) = exp(-t), the generator of the independence copula."""

    name = "Independent"

    def __init__(self) -> None:
        super().__init__()

    def phi(self, t):
        return np.exp(-np.asarray(t, dtype=float))

    def phi_inv(self, u):
        return -np.log(u)

    def phi_deriv(self, t, k: int = 1):
        return (-1) ** k * np.exp(-np.asarray(t, dtype=float))

    def phi_inv_deriv(self, u):
        return -1.0 / np.asarray(u, dtype=float)

    def log_abs_phi_deriv(self, t, k: int):
        return -np.asarray(t, dtype=float)

    def frailty(self):
        # point mass at one
        return stats.rv_discrete(name="unit", values=([1], [1.0]))

    def tau(self) -> float:
        return 0.0

    def rho(self) -> float:
        return 0.0

    # Pickands dependence function of the independence copula
    def pickands(self, t):
        return np.ones_like(np.asarray(t, dtype=float))

    def pickands_d1(self, t):
        return np.zeros_like(np.asarray(t, dtype=float))

    def pickands_d2(self, t):
        return np.zeros_like(np.asarray(t, dtype=float))
