# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest
from scipy import stats


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20251015)


def kendall_tau(samples: np.ndarray) -> float:
    """Average pairwise Kendall's tau of the columns of ``samples``."""
    d = samples.shape[1]
    taus = [stats.kendalltau(samples[:, i], samples[:, j])[0]
            for i in range(d) for j in range(i + 1, d)]
    return float(np.mean(taus))


def mixed_difference(cdf, u: np.ndarray, h: float) -> float:
    """
    Central finite-difference estimate of the d-th mixed partial derivative
    of ``cdf`` at the point ``u``.
    """
    d = len(u)
    total = 0.0
    for corner in range(2 ** d):
        signs = np.array([1.0 if corner >> i & 1 else -1.0 for i in range(d)])
        total += np.prod(signs) * float(cdf(u + signs * h))
    return total / (2 * h) ** d
