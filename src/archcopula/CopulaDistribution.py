"""
Base class for copula distributions.

Sub‑classes **must** implement `simulate`, returning uniform pseudo‑observations
of their own dimension, and `cdf`.  Densities are optional: singular copulas
(the Fréchet bounds) have none.  Keep all heavy maths in the child class;
this file is just the common skeleton.
"""

from typing import Optional, Union

import numpy as np

from archcopula.Errors import InvalidParameter

RandomState = Optional[Union[int, np.random.Generator]]


class CopulaDistribution:
    """Abstract copula distribution."""

    def __init__(self, name: str, dimension: int):
        if int(dimension) != dimension or dimension < 2:
            raise InvalidParameter(f"Copula dimension must be an integer >= 2, got {dimension}.")
        self.name = name
        self.dimension = int(dimension)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dimension={self.dimension})"

    def simulate(self, n_samples: int, random_state: RandomState = None) -> np.ndarray:  # noqa: D401
        """
        Generate observations from the copula.

        Parameters
        ----------
        n_samples : int
            Number of points to draw.
        random_state : int | numpy.random.Generator | None
            Seed or generator feeding the uniform and exponential streams.

        Returns
        -------
        np.ndarray
            Shape ``(n_samples, d)`` array of uniforms on [0, 1].
        """
        raise NotImplementedError("Sub‑classes implement this.")

    def cdf(self, u: np.ndarray) -> np.ndarray:
        raise NotImplementedError("Sub‑classes implement this.")

    def logpdf(self, u: np.ndarray) -> np.ndarray:
        raise NotImplementedError(f"{self.name} copula has no density.")

    def pdf(self, u: np.ndarray) -> np.ndarray:
        return np.exp(self.logpdf(u))

    def _check_points(self, u) -> np.ndarray:
        """Return ``u`` as a float array whose last axis has length d."""
        u = np.asarray(u, dtype=float)
        if u.shape[-1:] != (self.dimension,):
            raise ValueError(
                f"Points must have {self.dimension} coordinates on the last axis, got shape {u.shape}.")
        return u
