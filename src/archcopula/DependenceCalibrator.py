"""
Created on 15/10/2025

Filename: DependenceCalibrator.py

Relative Path: src/archcopula/DependenceCalibrator.py

Maps a target Kendall's tau or Spearman's rho back to a generator parameter.

The forward maps (theta -> measure) are supplied by the generator families;
this module only brackets, saturates and root-finds.  Targets outside the
family's achievable range are clamped to the nearest admissible parameter and
reported with a ``SaturatedTargetWarning``.
"""

from __future__ import annotations

import logging
import warnings
from typing import Callable, Union

import numpy as np
import pandas as pd

from archcopula.Errors import InvalidParameter, SaturatedTargetWarning
from archcopula.SpecialFunctions import SolverOptions, find_root

logger = logging.getLogger(__name__)

MEASURES = {"tau": "kendall", "rho": "spearman"}


# ──────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────
def check_target(target: float) -> float:
    """Return ``target`` as a float, rejecting finite values outside [-1, 1]."""
    target = float(target)
    if np.isfinite(target) and abs(target) > 1:
        raise InvalidParameter(f"Dependence measures live in [-1, 1], got {target}.")
    return target


def _check_measure(measure: str) -> str:
    if measure not in MEASURES:
        raise ValueError(f"measure must be one of {sorted(MEASURES)}, got {measure!r}")
    return measure


def saturate(generator_type, measure: str, target: float, theta: float,
             achievable: float) -> float:
    """Warn that ``target`` is out of reach and return the boundary ``theta``."""
    side = "above the maximum" if target > achievable else "below the minimum"
    message = (f"{generator_type.name} cannot reach {measure} = {target:g} "
               f"({side} {achievable:g}); returning theta = {theta:g}.")
    logger.info(message)
    warnings.warn(message, SaturatedTargetWarning, stacklevel=3)
    return theta


def _measure_function(generator_type, measure: str) -> Callable[[float], float]:
    def evaluate(theta: float) -> float:
        return float(getattr(generator_type(theta), measure)())
    return evaluate


# ──────────────────────────────────────────────────────────────────────────
# Inversion
# ──────────────────────────────────────────────────────────────────────────
def invert(measure: str, generator_type, target: float, dimension: int = 2,
           options: SolverOptions | None = None) -> float:
    """
    Parameter of ``generator_type`` whose ``measure`` equals ``target``.

    Args:
        measure: "tau" or "rho"
        generator_type: Generator sub-class providing ``theta_bounds``
        target: Requested dependence value
        dimension: Dimension the resulting generator must support
        options: Solver tolerances and iteration cap

    Returns:
        theta; NaN for a non-finite target, the boundary theta (plus a
        warning) for an unreachable one

    Raises:
        CalibrationFailed: if both Brent and bisection fail on the bracket
    """
    _check_measure(measure)
    target = check_target(target)
    if not np.isfinite(target):
        return np.nan
    if target == 0:
        return generator_type.independence_theta

    lower, upper = generator_type.theta_bounds(dimension)
    evaluate = _measure_function(generator_type, measure)
    m_lower, m_upper = evaluate(lower), evaluate(upper)
    if m_lower > m_upper:
        m_lower, m_upper = m_upper, m_lower
        lower, upper = upper, lower

    if target < m_lower:
        return saturate(generator_type, measure, target, lower, m_lower)
    if target > m_upper:
        return saturate(generator_type, measure, target, upper, m_upper)

    logger.debug("Inverting %s = %g for %s on [%g, %g]",
                 measure, target, generator_type.name, lower, upper)
    a, b = sorted((lower, upper))
    return find_root(lambda theta: evaluate(theta) - target, a, b, options)


def fit_parameter(generator_type, dimension: int, measure: str, target: float,
                  options: SolverOptions | None = None):
    """
    Generator of ``generator_type`` matching a target dependence value.

    The parameter is searched within the range supporting ``dimension``.
    """
    _check_measure(measure)
    inverse = generator_type.tau_inverse if measure == "tau" else generator_type.rho_inverse
    theta = inverse(target, dimension=dimension, options=options)
    return generator_type(theta)


# ──────────────────────────────────────────────────────────────────────────
# Data
# ──────────────────────────────────────────────────────────────────────────
def empirical_dependence(data: Union[np.ndarray, pd.DataFrame], measure: str = "tau") -> float:
    """Average pairwise Kendall's tau or Spearman's rho of a sample."""
    _check_measure(measure)
    frame = data if isinstance(data, pd.DataFrame) else pd.DataFrame(np.asarray(data, dtype=float))
    if frame.shape[1] < 2:
        raise ValueError("Need at least two columns to measure dependence.")
    corr = frame.corr(method=MEASURES[measure]).to_numpy()
    return float(corr[np.triu_indices(corr.shape[0], k=1)].mean())


def fit_parameter_from_data(generator_type, data: Union[np.ndarray, pd.DataFrame],
                            measure: str = "tau", options: SolverOptions | None = None):
    """Fit by inverting the sample's average pairwise dependence measure."""
    dimension = np.shape(data)[1]
    target = empirical_dependence(data, measure)
    logger.info("Empirical %s of %d-variate sample: %.4f", measure, dimension, target)
    return fit_parameter(generator_type, dimension, measure, target, options)
