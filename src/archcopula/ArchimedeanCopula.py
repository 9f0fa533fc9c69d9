"""
Created on 15/10/2025

Filename: ArchimedeanCopula.py

Relative Path: src/archcopula/ArchimedeanCopula.py

Archimedean copulas C(u) = phi(phi^-1(u_1) + ... + phi^-1(u_d)).

Everything here is written against the ``Generator`` contract only:

- sampling draws one radial variable R per row and spreads it over the
  simplex, U_i = phi(R * E_i / sum(E));
- the log-density is

      log f(u) = log((-1)^d phi^(d)(sum phi^-1(u_i))) + sum log(-(phi^-1)'(u_i)).
"""

from __future__ import annotations

import numpy as np

from archcopula.CopulaDistribution import CopulaDistribution, RandomState
from archcopula.Errors import UnsupportedDimension
from archcopula.Generator.Generator import Generator
from archcopula.Generator.IndependentGenerator import IndependentGenerator
from archcopula.RadialTransform import radial_dist


class ArchimedeanCopula(CopulaDistribution):
    """d-variate Archimedean copula built from any generator."""

    def __new__(cls, dimension: int, generator: Generator = None):
        if cls is ArchimedeanCopula and isinstance(generator, IndependentGenerator):
            cls = IndependentCopula
        return super().__new__(cls)

    def __init__(self, dimension: int, generator: Generator):
        super().__init__(name=generator.name, dimension=dimension)
        monotony = generator.max_monotony()
        if monotony < self.dimension:
            raise UnsupportedDimension(
                f"{generator!r} is only {monotony}-monotone and cannot generate a "
                f"{self.dimension}-dimensional copula.")
        self.generator = generator

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dimension={self.dimension}, generator={self.generator!r})"

    # ──────────────────────────────────────────────────────────────────────
    # Analytical functions
    # ──────────────────────────────────────────────────────────────────────
    def cdf(self, u: np.ndarray) -> np.ndarray:
        u = self._check_points(u)
        return self.generator.phi(np.sum(self.generator.phi_inv(u), axis=-1))

    def logpdf(self, u: np.ndarray) -> np.ndarray:
        """
        Log-density at points in (0, 1]^d.

        Args
        ----
        u : array-like, shape (..., d)

        Returns
        -------
        np.ndarray – log c(u), -inf outside the unit cube
        """
        u = self._check_points(u)
        G = self.generator
        inside = np.all((u > 0) & (u <= 1), axis=-1)
        u_in = np.where(inside[..., None], u, 0.5)

        s = np.sum(G.phi_inv(u_in), axis=-1)
        with np.errstate(divide="ignore"):
            jacobian = np.sum(np.log(-G.phi_inv_deriv(u_in)), axis=-1)
        return np.where(inside, G.log_abs_phi_deriv(s, self.dimension) + jacobian, -np.inf)

    def tau(self) -> float:
        return self.generator.tau()

    def rho(self) -> float:
        return self.generator.rho()

    # ──────────────────────────────────────────────────────────────────────
    # Simulation
    # ──────────────────────────────────────────────────────────────────────
    def radial_dist(self):
        """Radial variable for this dimension, rebuilt on every call."""
        return radial_dist(self.generator, self.dimension)

    def simulate(self, n_samples: int, random_state: RandomState = None) -> np.ndarray:
        rng = np.random.default_rng(random_state)
        r = np.asarray(self.radial_dist().rvs(size=n_samples, random_state=rng), dtype=float)
        e = rng.standard_exponential((n_samples, self.dimension))
        return self.generator.phi(r[:, None] * e / e.sum(axis=1, keepdims=True))


class IndependentCopula(ArchimedeanCopula):
    """Product copula C(u) = u_1 * ... * u_d."""

    def __init__(self, dimension: int, generator: Generator = None):
        super().__init__(dimension, IndependentGenerator())

    def __repr__(self) -> str:
        return f"IndependentCopula(dimension={self.dimension})"

    def cdf(self, u: np.ndarray) -> np.ndarray:
        return np.prod(self._check_points(u), axis=-1)


class ParametricArchimedeanCopula(ArchimedeanCopula):
    """
    Archimedean copula of a one-parameter family, built as ``Family(d, theta)``.

    Sub-classes set ``generator_type``; a parameter that normalises to the
    independence generator yields an ``IndependentCopula`` instead.
    """

    generator_type = None

    def __new__(cls, dimension: int, theta: float):
        if isinstance(cls.generator_type(theta), IndependentGenerator):
            return IndependentCopula(dimension)
        return CopulaDistribution.__new__(cls)

    def __init__(self, dimension: int, theta: float):
        super().__init__(dimension, self.generator_type(theta))

    @property
    def theta(self) -> float:
        return self.generator.theta

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dimension={self.dimension}, theta={self.theta:g})"


def sample(copula: CopulaDistribution, n_samples: int, random_state: RandomState = None) -> np.ndarray:
    """n_samples x d matrix of dependent uniforms."""
    return copula.simulate(n_samples, random_state)


def logdensity(copula: CopulaDistribution, u) -> np.ndarray:
    return copula.logpdf(u)
