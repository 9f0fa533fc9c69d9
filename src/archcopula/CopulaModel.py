"""
Created on 05/05/2025

Updated: 16/10/2025 – Archimedean copula, DataFrame output, fitting from data

Filename: CopulaModel.py

Relative Path: src/archcopula/CopulaModel.py
"""

import numpy as np
import pandas as pd

from typing import List, Union

from archcopula.ArchimedeanCopula import ArchimedeanCopula
from archcopula.CopulaDistribution import CopulaDistribution, RandomState
from archcopula.DependenceCalibrator import fit_parameter_from_data
from archcopula.Marginal import Marginal, fit_marginals


class CopulaModel:
    """Joint distribution assembled from a copula and its marginals."""

    def __init__(self, copula: CopulaDistribution, marginals: List[Marginal]):
        """
        Initialize a copula model.
        
        Args:
            copula: A copula distribution
            marginals: List of marginal distributions, one per copula dimension
        """
        self.copula = copula
        self.marginals = marginals
        self.dimension = copula.dimension

        # Ensure the number of marginals matches the dimension
        if len(marginals) != self.dimension:
            raise ValueError(
                f"Number of marginals ({len(marginals)}) must match the dimension ({self.dimension})")

    @classmethod
    def from_data(cls, data: pd.DataFrame, generator_type, distribution,
                  measure: str = "tau") -> "CopulaModel":
        """
        Fit every margin by maximum likelihood, then the generator by inverting
        the sample's average pairwise rank dependence.

        Args:
            data: One column per variable
            generator_type: Generator family, e.g. ClaytonGenerator
            distribution: scipy.stats family shared by all margins
            measure: "tau" or "rho"
        """
        marginals = fit_marginals(data, distribution)
        generator = fit_parameter_from_data(generator_type, data, measure)
        return cls(ArchimedeanCopula(data.shape[1], generator), marginals)

    @property
    def columns(self) -> List[str]:
        return [marginal.name for marginal in self.marginals]

    def simulate(self, n_samples: int, random_state: RandomState = None) -> pd.DataFrame:
        """
        Simulate samples from the copula model.
        
        Args:
            n_samples: Number of samples to generate
            random_state: Seed or numpy Generator for the copula draws
            
        Returns:
            DataFrame with samples from the joint distribution
        """
        # Generate samples from the copula
        uniform_samples = self.copula.simulate(n_samples, random_state)

        # Transform using the marginal distributions
        data = {}
        for i, marginal in enumerate(self.marginals):
            data[marginal.name] = marginal.inverse_cdf(uniform_samples[:, i])

        return pd.DataFrame(data)

    def logpdf(self, data: Union[pd.DataFrame, np.ndarray]) -> np.ndarray:
        """
        Joint log-density: copula log-density at F(x) plus the marginal log-densities.
        
        Args:
            data: Observations, a DataFrame with the marginal names as columns
                  or an array of shape (n, d)
            
        Returns:
            Array of length n
        """
        if isinstance(data, pd.DataFrame):
            x = data[self.columns].to_numpy(dtype=float)
        else:
            x = np.atleast_2d(np.asarray(data, dtype=float))

        u = np.column_stack([m.pseudo_observations(x[:, i]) for i, m in enumerate(self.marginals)])
        marginal_part = sum(m.logpdf(x[:, i]) for i, m in enumerate(self.marginals))
        return self.copula.logpdf(u) + marginal_part
