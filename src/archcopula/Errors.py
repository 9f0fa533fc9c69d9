"""
Created on 14/10/2025

Filename: Errors.py

Relative Path: src/archcopula/Errors.py
"""


class CopulaError(Exception):
    """Base class for every failure raised by archcopula."""


class InvalidParameter(CopulaError, ValueError):
    """A copula or generator parameter lies outside its admissible domain."""


class UnsupportedDimension(CopulaError, ValueError):
    """The requested dimension exceeds what the generator supports."""


class CalibrationFailed(CopulaError, RuntimeError):
    """A bracketed root search could not produce a converged root."""


class SaturatedTargetWarning(UserWarning):
    """
    Requested dependence value is outside the family's achievable range.

    The caller still receives a usable parameter (the nearest admissible
    boundary value); this warning lets it detect the clamping.
    """
