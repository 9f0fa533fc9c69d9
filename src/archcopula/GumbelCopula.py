"""
Created on 05 / 05 / 2025

Updated: 15 / 10 / 2025 – d-variate copula on top of GumbelGenerator
"""

from archcopula.ArchimedeanCopula import ParametricArchimedeanCopula
from archcopula.ExtremeDist import ExtremeDist
from archcopula.Generator.GumbelGenerator import GumbelGenerator


class GumbelCopula(ParametricArchimedeanCopula):
    """
    d-variate Gumbel copula, θ ≥ 1.

    C(u) = exp{ −[(−ln u₁)^θ + … + (−ln u_d)^θ]^{1/θ} }

    θ = 1 is the independence copula.  Sampled exactly through a positive
    stable frailty.
    """

    generator_type = GumbelGenerator

    def upper_tail_dependence(self) -> float:
        """λ_U = 2 − 2^{1/θ} for the bivariate margins."""
        return float(2 - 2 ** (1 / self.theta))

    def extreme_dist(self) -> ExtremeDist:
        """
        Law of Z = ln U₁ / ln(U₁U₂) for a bivariate draw (U₁, U₂).

        Gumbel is also an extreme-value copula; Z is its Pickands-based
        auxiliary variable.
        """
        return ExtremeDist(self.generator)
