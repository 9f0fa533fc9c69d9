"""
Created on 14/10/2025

Filename: Generator.py

Relative Path: src/archcopula/Generator/Generator.py

Abstract Archimedean generator.  A family only has to provide the scalar
function phi, its inverse and its derivatives; sampling, density evaluation
and calibration are derived from these elsewhere in the package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np
from scipy import integrate

from archcopula import DependenceCalibrator
from archcopula.Errors import InvalidParameter
from archcopula.SpecialFunctions import SolverOptions


class Generator(ABC):
    """
    Archimedean generator phi: [0, inf) -> [0, 1] with phi(0) = 1.

    Instances are immutable: a new parameter means a new generator.
    Sub-classes normalise degenerate parameters in ``__new__`` (e.g. the
    independence value returns an ``IndependentGenerator``).
    """

    name = "Generator"
    independence_theta: Optional[float] = None

    def __init__(self, theta: Optional[float] = None):
        self._theta = None if theta is None else float(theta)

    @property
    def theta(self) -> Optional[float]:
        return self._theta

    @property
    def params(self) -> Tuple[float, ...]:
        return () if self._theta is None else (self._theta,)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(f'{p:g}' for p in self.params)})"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.params == other.params

    def __hash__(self) -> int:
        return hash((type(self), self.params))

    # ──────────────────────────────────────────────────────────────────────
    # Generator function
    # ──────────────────────────────────────────────────────────────────────
    @abstractmethod
    def phi(self, t):
        """phi(t) for t >= 0."""

    @abstractmethod
    def phi_inv(self, u):
        """Inverse of phi on (0, 1]."""

    @abstractmethod
    def phi_deriv(self, t, k: int = 1):
        """k-th derivative of phi at t (k = 0 returns phi itself)."""

    def phi_inv_deriv(self, u):
        """Derivative of phi_inv at u."""
        return 1.0 / self.phi_deriv(self.phi_inv(u), 1)

    def log_abs_phi_deriv(self, t, k: int):
        """log((-1)^k phi^(k)(t)); families override this to stay in log space."""
        with np.errstate(divide="ignore"):
            return np.log((-1) ** k * self.phi_deriv(t, k))

    def phi_support(self) -> float:
        """Point beyond which phi vanishes (inf for strict generators)."""
        return np.inf

    def max_monotony(self) -> float:
        """Largest d for which phi is d-monotone (inf when completely monotone)."""
        return np.inf

    def frailty(self):
        """
        Distribution whose Laplace transform is phi.

        Returns an object exposing ``rvs(size, random_state)``, or None when
        no frailty is known and sampling must go through the numeric
        Williamson transform.
        """
        return None

    # ──────────────────────────────────────────────────────────────────────
    # Dependence measures
    # ──────────────────────────────────────────────────────────────────────
    def tau(self) -> float:
        return self.numeric_tau()

    def rho(self) -> float:
        return self.numeric_rho()

    def numeric_tau(self) -> float:
        """Kendall's tau from tau = 1 - 4 * int_0^inf t phi'(t)^2 dt."""
        integral, _ = integrate.quad(lambda t: t * self.phi_deriv(t, 1) ** 2,
                                     0.0, self.phi_support(), limit=200)
        return 1.0 - 4.0 * integral

    def numeric_rho(self) -> float:
        """Spearman's rho from rho = 12 * int int C(u, v) du dv - 3."""
        def copula(v: float, u: float) -> float:
            return self.phi(self.phi_inv(u) + self.phi_inv(v))

        integral, _ = integrate.dblquad(copula, 0.0, 1.0, 0.0, 1.0,
                                        epsabs=1e-11, epsrel=1e-10)
        return 12.0 * integral - 3.0

    # ──────────────────────────────────────────────────────────────────────
    # Calibration
    # ──────────────────────────────────────────────────────────────────────
    @classmethod
    def theta_bounds(cls, dimension: int = 2) -> Tuple[float, float]:
        """Parameter interval searched by the calibrator for ``dimension``."""
        raise InvalidParameter(f"{cls.__name__} has no parameter to calibrate.")

    @classmethod
    def tau_inverse(cls, target: float, dimension: int = 2,
                    options: SolverOptions | None = None) -> float:
        return DependenceCalibrator.invert("tau", cls, target, dimension, options)

    @classmethod
    def rho_inverse(cls, target: float, dimension: int = 2,
                    options: SolverOptions | None = None) -> float:
        return DependenceCalibrator.invert("rho", cls, target, dimension, options)
