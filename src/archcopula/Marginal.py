"""
Created on 05/05/2025

Updated: 16/10/2025 – frozen scipy laws, fitting, joint-density terms

Filename: Marginal.py

Relative Path: src/archcopula/Marginal.py
"""

from typing import Dict, Optional

import numpy as np
import pandas as pd

EPS = np.finfo(float).eps


class Marginal:
    """
    One named margin of a ``CopulaModel``, backed by a scipy.stats family.

    ``params`` are the keyword arguments of the family (``loc``, ``scale``,
    shape names); they are frozen into ``self.law`` once at construction.
    """

    def __init__(self, name: str, distribution, params: Optional[Dict] = None):
        self.name = name
        self.distribution = distribution
        self.params = dict(params or {})
        self.law = distribution(**self.params)

    @classmethod
    def fit(cls, name: str, distribution, data) -> "Marginal":
        """Maximum-likelihood margin for one column of observations."""
        values = np.asarray(data, dtype=float)
        values = values[np.isfinite(values)]
        estimates = distribution.fit(values)
        names = (distribution.shapes.split(", ") if distribution.shapes else []) + ["loc", "scale"]
        return cls(name, distribution, dict(zip(names, estimates)))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v:g}" for k, v in self.params.items())
        return f"Marginal({self.name!r}, {self.distribution.name}({args}))"

    def inverse_cdf(self, u: np.ndarray) -> np.ndarray:
        """Map copula uniforms to observations on this margin's scale."""
        return self.law.ppf(u)

    def cdf(self, x: np.ndarray) -> np.ndarray:
        return self.law.cdf(x)

    def pseudo_observations(self, x: np.ndarray) -> np.ndarray:
        """Probability integral transform kept strictly inside (0, 1)."""
        return np.clip(self.cdf(x), EPS, 1 - EPS)

    def logpdf(self, x: np.ndarray) -> np.ndarray:
        return self.law.logpdf(x)


def fit_marginals(data: pd.DataFrame, distribution) -> list:
    """One fitted ``Marginal`` per DataFrame column, all from the same family."""
    return [Marginal.fit(column, distribution, data[column]) for column in data.columns]
