"""
Created on 05 / 05 / 2025

Updated: 15 / 10 / 2025 – d-variate copula on top of ClaytonGenerator
"""

from archcopula.ArchimedeanCopula import ParametricArchimedeanCopula
from archcopula.Generator.ClaytonGenerator import ClaytonGenerator


class ClaytonCopula(ParametricArchimedeanCopula):
    """
    d-variate Clayton copula, θ ≥ -1/(d-1).

    C(u) = max(u₁^{-θ} + … + u_d^{-θ} - d + 1, 0)^{-1/θ}

    θ = 0 is the independence copula; θ > 0 gives lower tail dependence
    2^{-1/θ}.
    """

    generator_type = ClaytonGenerator

    def lower_tail_dependence(self) -> float:
        """λ_L = 2^{-1/θ} for θ > 0, zero otherwise."""
        return float(2 ** (-1 / self.theta)) if self.theta > 0 else 0.0
