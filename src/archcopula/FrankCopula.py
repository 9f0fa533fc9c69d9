"""
Created on 15/10/2025

Filename: FrankCopula.py

Relative Path: src/archcopula/FrankCopula.py
"""

from archcopula.ArchimedeanCopula import ParametricArchimedeanCopula
from archcopula.Generator.FrankGenerator import FrankGenerator


class FrankCopula(ParametricArchimedeanCopula):
    """
    Frank copula, θ ≠ 0 (θ = 0 is independence).

    Radially symmetric with no tail dependence.  Negative θ is only
    available in dimension 2.
    """

    generator_type = FrankGenerator
