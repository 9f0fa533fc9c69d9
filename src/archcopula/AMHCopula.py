"""
Created on 15/10/2025

Filename: AMHCopula.py

Relative Path: src/archcopula/AMHCopula.py
"""

from archcopula.ArchimedeanCopula import ParametricArchimedeanCopula
from archcopula.Generator.AMHGenerator import AMHGenerator


class AMHCopula(ParametricArchimedeanCopula):
    """
    Ali-Mikhail-Haq copula, θ ∈ [-1, 1).

    Bivariate Kendall's tau is confined to [(5 - 8 ln 2)/3, 1/3]; for θ < 0
    the admissible dimension shrinks as θ decreases (see
    ``AMHGenerator.max_monotony``).
    """

    generator_type = AMHGenerator
