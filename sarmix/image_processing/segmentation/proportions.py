# -*- coding: utf-8 -*-
"""
Mixture Proportions - MAP update under a symmetric Dirichlet prior.

With region pixel counts ``n_k``, ``K`` regions, ``N`` pixels and
concentration ``alfa``::

    pi_k = (n_k + alfa - 1) / (N + K * (alfa - 1))

Large ``alfa`` pulls the proportions toward ``1 / K``; ``alfa = 1``
gives the empirical frequencies ``n_k / N``.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Third-party
import numpy as np

# sarmix internal
from sarmix.exceptions import ValidationError

#: Default Dirichlet concentration.
DEFAULT_ALFA = 1_000_000.0


def uniform_proportions(n_regions: int) -> np.ndarray:
    """Equal proportions ``1 / n_regions`` used before the first update."""
    return np.full(n_regions, 1.0 / n_regions, dtype=np.float64)


def update_proportions(counts: np.ndarray,
                       alfa: float = DEFAULT_ALFA) -> np.ndarray:
    """MAP mixture proportions from region pixel counts.

    Parameters
    ----------
    counts : np.ndarray
        1D pixel counts of the active regions (all > 0).
    alfa : float
        Dirichlet concentration (> 0).

    Returns
    -------
    np.ndarray
        Proportions, same length as ``counts``, summing to 1.

    Raises
    ------
    ValidationError
        If ``counts`` is empty or ``alfa`` is not positive.
    """
    counts = np.asarray(counts, dtype=np.float64)
    if counts.size == 0:
        raise ValidationError("counts must not be empty")
    if not alfa > 0:
        raise ValidationError(f"alfa must be > 0, got {alfa}")
    total = counts.sum()
    k = counts.size
    return (counts + alfa - 1.0) / (total + k * (alfa - 1.0))
