# -*- coding: utf-8 -*-
"""
Region Distributions - Nakagami amplitude and bivariate Gaussian position models.

Each superpixel models the amplitude of its pixels with a Nakagami
distribution (the standard speckle model for coherent radar amplitude)
and the position of its pixels with a bivariate Gaussian. This module
provides the density evaluators for both and the maximum-likelihood
Nakagami shape estimator.

Parameterization
----------------
The Nakagami density is written in (shape, rate) form::

    f(a; nu, r) = 2 r^nu / Gamma(nu) * a^(2 nu - 1) * exp(-r a^2)

with ``r = nu / mu`` and ``mu = E[a^2]``. This is SciPy's
``nakagami(nu, scale=sqrt(mu))``.

Shape estimation
----------------
Given ``mu = mean(a^2)``, the ML shape solves::

    log(nu) - digamma(nu) = log(mu) - mean(log(a^2))

The left side decreases monotonically from +inf to 0, so the root is
bracketed on ``[NU_MIN, nu_max]`` and found with Brent's method. When the
right side is at or below the value at ``nu_max`` (a single pixel, or a
constant region) the estimate saturates at ``nu_max``.

Dependencies
------------
scipy

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

# Standard library
from typing import Union

# Third-party
import numpy as np
from scipy.optimize import brentq
from scipy.special import digamma
from scipy.stats import nakagami

# sarmix internal
from sarmix.exceptions import ValidationError

ArrayLike = Union[float, np.ndarray]

#: Smallest shape value returned by the estimator.
NU_MIN = 1e-3


def _shape_equation(nu: float) -> float:
    return float(np.log(nu) - digamma(nu))


def estimate_nakagami_shape(
    amplitudes: np.ndarray,
    mu: float,
    count: int,
    nu_max: float,
) -> float:
    """Maximum-likelihood Nakagami shape for a set of amplitudes.

    Parameters
    ----------
    amplitudes : np.ndarray
        Positive amplitude samples (any shape, flattened).
    mu : float
        Scale estimate ``mean(amplitudes ** 2)``. Must be > 0.
    count : int
        Number of samples. Must be >= 1.
    nu_max : float
        Upper bound of the shape search.

    Returns
    -------
    float
        Shape estimate in ``[NU_MIN, nu_max]``.

    Raises
    ------
    ValidationError
        If ``mu`` or ``count`` is not positive, or ``nu_max < NU_MIN``.
    """
    if not mu > 0:
        raise ValidationError(f"mu must be > 0, got {mu}")
    if count < 1:
        raise ValidationError(f"count must be >= 1, got {count}")
    if nu_max < NU_MIN:
        raise ValidationError(f"nu_max must be >= {NU_MIN}, got {nu_max}")

    a = np.asarray(amplitudes, dtype=np.float64).ravel()
    delta = float(np.log(mu) - np.sum(np.log(a * a)) / count)

    if delta <= _shape_equation(nu_max):
        return float(nu_max)
    if delta >= _shape_equation(NU_MIN):
        return NU_MIN
    return float(brentq(lambda nu: _shape_equation(nu) - delta,
                        NU_MIN, nu_max))


def nakagami_logpdf(amplitude: ArrayLike, shape: float,
                    rate: float) -> ArrayLike:
    """Log of the Nakagami density at ``(shape, rate)``."""
    return nakagami.logpdf(amplitude, shape, scale=np.sqrt(shape / rate))


def nakagami_pdf(amplitude: ArrayLike, shape: float,
                 rate: float) -> ArrayLike:
    """Nakagami density at ``(shape, rate)``.

    Parameters
    ----------
    amplitude : float or np.ndarray
        Non-negative amplitude value(s).
    shape : float
        Shape parameter ``nu`` (> 0).
    rate : float
        Rate parameter ``nu / mu`` (> 0).

    Returns
    -------
    float or np.ndarray
        Density, same shape as ``amplitude``.
    """
    return nakagami.pdf(amplitude, shape, scale=np.sqrt(shape / rate))


def gaussian_logpdf_2d(points: np.ndarray, mean: np.ndarray,
                       covariance: np.ndarray) -> np.ndarray:
    """Log of the bivariate Gaussian density at each row of ``points``.

    Evaluated in closed form from the 2x2 determinant and inverse, so a
    positive-definite covariance is accepted however ill-conditioned
    (e.g. a long one-pixel-thick region).

    Returns
    -------
    np.ndarray
        1D array with one value per point, even for a single point.
        All NaN if ``covariance`` is not positive-definite.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    cov = np.asarray(covariance, dtype=np.float64)
    s_rr = cov[0, 0]
    s_cc = cov[1, 1]
    s_rc = 0.5 * (cov[0, 1] + cov[1, 0])
    det = s_rr * s_cc - s_rc * s_rc
    if not (s_rr > 0 and det > 0):
        return np.full(pts.shape[0], np.nan)

    diff = pts - np.asarray(mean, dtype=np.float64)
    dr = diff[:, 0]
    dc = diff[:, 1]
    maha = (s_cc * dr * dr - 2.0 * s_rc * dr * dc + s_rr * dc * dc) / det
    return -np.log(2.0 * np.pi) - 0.5 * np.log(det) - 0.5 * maha


def gaussian_pdf_2d(points: np.ndarray, mean: np.ndarray,
                    covariance: np.ndarray) -> np.ndarray:
    """Bivariate Gaussian density at each row of ``points``.

    Parameters
    ----------
    points : np.ndarray
        ``(n, 2)`` array of ``(row, col)`` coordinates.
    mean : np.ndarray
        Length-2 mean vector.
    covariance : np.ndarray
        ``(2, 2)`` positive-definite covariance.

    Returns
    -------
    np.ndarray
        ``(n,)`` densities.
    """
    return np.exp(gaussian_logpdf_2d(points, mean, covariance))
