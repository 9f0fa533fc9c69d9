"""
Created on 14/10/2025

Filename: SpecialFunctions.py

Relative Path: src/archcopula/SpecialFunctions.py

Numerical building blocks shared by the generators, the samplers and the
calibrator: polylogarithms, Debye functions and bracketed root finding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import mpmath
import numpy as np
from scipy import integrate, optimize, special

from archcopula.Errors import CalibrationFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverOptions:
    """
    Tolerances and iteration cap handed to every bracketed root search.

    The cap is a hard limit: reaching it without convergence is reported
    as a failure, never returned as a root.
    """
    xtol: float = 1e-12
    rtol: float = 4 * np.finfo(float).eps
    maxiter: int = 10_000


DEFAULT_OPTIONS = SolverOptions()


# ──────────────────────────────────────────────────────────────────────────
# Special functions
# ──────────────────────────────────────────────────────────────────────────
def _polylog_scalar(s: int, x: float) -> float:
    if s == 0:
        return x / (1.0 - x)
    if s == -1:
        return x / (1.0 - x) ** 2
    # Li_s for s << 0 is an alternating sum of huge terms near x < 0
    with mpmath.workdps(30 + 2 * abs(int(s))):
        return float(mpmath.polylog(s, x))


def polylog(s: int, x):
    """
    Real polylogarithm Li_s(x).

    Args:
        s: Integer order (negative orders are the ones generators need)
        x: Scalar or array argument

    Returns:
        float for scalar input, otherwise an ndarray of the same shape
    """
    if np.ndim(x) == 0:
        return _polylog_scalar(s, float(x))
    x = np.asarray(x, dtype=float)
    out = np.empty_like(x)
    for idx, value in np.ndenumerate(x):
        out[idx] = _polylog_scalar(s, value)
    return out


def dilog(x):
    """Li_2(x) for real x <= 1."""
    return special.spence(1.0 - np.asarray(x, dtype=float))


def debye(n: int, x: float) -> float:
    """
    Debye function D_n(x) = n / x^n * int_0^x t^n / (e^t - 1) dt.

    Defined for negative x as well; D_n(0) = 1.
    """
    if x == 0:
        return 1.0

    def integrand(t: float) -> float:
        if t == 0:
            return 1.0 if n == 1 else 0.0
        return t ** n / np.expm1(t)

    integral, _ = integrate.quad(integrand, 0.0, x, limit=200, epsabs=1e-14, epsrel=1e-13)
    return n * integral / x ** n


# ──────────────────────────────────────────────────────────────────────────
# Root finding
# ──────────────────────────────────────────────────────────────────────────
def _attempt(method: Callable, f: Callable[[float], float], a: float, b: float,
             options: SolverOptions) -> Optional[optimize.RootResults]:
    """Run one bracketed solver; None when the bracket is not usable."""
    fa, fb = f(a), f(b)
    if not (np.isfinite(fa) and np.isfinite(fb)) or np.sign(fa) == np.sign(fb):
        return None
    _, result = method(f, a, b, xtol=options.xtol, rtol=options.rtol,
                       maxiter=options.maxiter, full_output=True, disp=False)
    return result


def find_root(f: Callable[[float], float], a: float, b: float,
              options: SolverOptions | None = None) -> float:
    """
    Root of ``f`` on ``[a, b]``: Brent first, plain bisection as fallback.

    Raises:
        CalibrationFailed: if neither method converges on the bracket
    """
    options = options or DEFAULT_OPTIONS
    for endpoint in (a, b):
        if f(endpoint) == 0:
            return float(endpoint)

    result = _attempt(optimize.brentq, f, a, b, options)
    if result is not None and result.converged:
        return float(result.root)

    logger.debug("Brent failed on [%g, %g] (%s); falling back to bisection",
                 a, b, "no bracket" if result is None else result.flag)
    result = _attempt(optimize.bisect, f, a, b, options)
    if result is not None and result.converged:
        return float(result.root)

    raise CalibrationFailed(
        f"Root search on [{a}, {b}] did not converge within {options.maxiter} iterations "
        f"({'no sign change' if result is None else result.flag})."
    )


def invert_cdf(cdf: Callable[[float], float], p: float, lower: float, upper: float,
               options: SolverOptions | None = None) -> float:
    """
    Quantile of a distribution known only through its CDF.

    Solves ``cdf(x) = p`` on the bracket ``[lower, upper]``.
    """
    return find_root(lambda x: cdf(x) - p, lower, upper, options)


def invert_survival(survival: Callable[[float], float], v: float,
                    start: float = 1.0, max_doublings: int = 1100,
                    options: SolverOptions | None = None) -> float:
    """
    Solve ``survival(x) = v`` for a decreasing survival function on [0, inf).

    The upper end of the bracket is found by doubling ``start``; used for
    radial laws whose support is unbounded.
    """
    upper = start
    for _ in range(max_doublings):
        if survival(upper) <= v:
            break
        upper *= 2.0
    else:
        raise CalibrationFailed(
            f"Could not bracket survival level {v} below x = {upper}.")
    return find_root(lambda x: survival(x) - v, 0.0, upper, options)
