# -*- coding: utf-8 -*-
"""
Superpixel Regions - Per-region records and full parameter re-estimation.

A ``SuperpixelRegion`` holds everything known about one superpixel: its
member pixel coordinates, the Nakagami amplitude parameters (scale
``mu``, shape ``nu``) and the Gaussian position parameters (centroid,
covariance). A ``RegionSet`` maps the contiguous ids ``1..K`` to region
records and is rebuilt from the label map every round, so parameters are
always recomputed from the current members and never updated
incrementally.

Estimators
----------
For a region with member amplitudes ``a`` and coordinates ``x``::

    mu    = mean(a^2)
    nu    = ML Nakagami shape given mu (bounded by nu_max)
    c     = mean(x)
    Sigma = (x - c)^T (x - c) / n + jitter * I

The additive ``jitter`` keeps ``Sigma`` positive-definite for single-pixel
and collinear regions.

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
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

# Third-party
import numpy as np

# sarmix internal
from sarmix.exceptions import ProcessorError
from sarmix.image_processing.segmentation.distributions import (
    estimate_nakagami_shape,
)

#: Default upper bound of the Nakagami shape search.
DEFAULT_NU_MAX = 1000.0

#: Diagonal regularizer added to every spatial covariance.
COVARIANCE_JITTER = 0.001


def estimate_amplitude_params(
    amplitudes: np.ndarray, nu_max: float = DEFAULT_NU_MAX,
) -> Tuple[float, float]:
    """Nakagami ``(mu, nu)`` of a region's member amplitudes.

    Parameters
    ----------
    amplitudes : np.ndarray
        1D array of member amplitudes (non-empty).
    nu_max : float
        Upper bound of the shape search.

    Returns
    -------
    Tuple[float, float]
        Scale ``mu`` and shape ``nu``.
    """
    count = amplitudes.size
    mu = float(np.sum(amplitudes * amplitudes) / count)
    nu = estimate_nakagami_shape(amplitudes, mu, count, nu_max)
    return mu, nu


def estimate_position_params(
    rows: np.ndarray,
    cols: np.ndarray,
    jitter: float = COVARIANCE_JITTER,
) -> Tuple[np.ndarray, np.ndarray]:
    """Gaussian centroid and regularized covariance of member coordinates.

    Parameters
    ----------
    rows, cols : np.ndarray
        1D arrays of member row and column indices (non-empty).
    jitter : float
        Value added to the covariance diagonal.

    Returns
    -------
    centroid : np.ndarray
        ``(2,)`` mean ``(row, col)``.
    covariance : np.ndarray
        ``(2, 2)`` covariance normalized by the member count.
    """
    coords = np.column_stack([rows, cols]).astype(np.float64)
    centroid = coords.mean(axis=0)
    centered = coords - centroid
    covariance = centered.T @ centered / coords.shape[0]
    covariance += jitter * np.eye(2)
    return centroid, covariance


@dataclass
class SuperpixelRegion:
    """One active superpixel.

    Attributes
    ----------
    rows, cols : np.ndarray
        Member pixel coordinates, row-major order.
    mu, nu : float
        Nakagami scale and shape. ``nan`` until estimated.
    centroid : np.ndarray
        ``(2,)`` spatial mean ``(row, col)``.
    covariance : np.ndarray
        ``(2, 2)`` spatial covariance.
    """

    rows: np.ndarray
    cols: np.ndarray
    mu: float = float('nan')
    nu: float = float('nan')
    centroid: np.ndarray = field(default_factory=lambda: np.full(2, np.nan))
    covariance: np.ndarray = field(
        default_factory=lambda: np.full((2, 2), np.nan))

    @property
    def count(self) -> int:
        """Number of member pixels."""
        return int(self.rows.size)

    def estimate(
        self,
        amplitude: np.ndarray,
        nu_max: float = DEFAULT_NU_MAX,
        jitter: float = COVARIANCE_JITTER,
    ) -> None:
        """Recompute all parameters from the current members.

        Parameters
        ----------
        amplitude : np.ndarray
            2D amplitude field of the whole image.
        nu_max : float
            Upper bound of the shape search.
        jitter : float
            Covariance diagonal regularizer.

        Raises
        ------
        ProcessorError
            If the region is empty or an estimate is not finite.
        """
        if self.count == 0:
            raise ProcessorError("Cannot estimate parameters of an empty region")
        self.mu, self.nu = estimate_amplitude_params(
            amplitude[self.rows, self.cols], nu_max,
        )
        self.centroid, self.covariance = estimate_position_params(
            self.rows, self.cols, jitter,
        )
        if not (np.isfinite(self.mu) and np.isfinite(self.nu)
                and np.all(np.isfinite(self.centroid))
                and np.all(np.isfinite(self.covariance))):
            raise ProcessorError(
                f"Non-finite region parameters: mu={self.mu}, nu={self.nu}, "
                f"centroid={self.centroid.tolist()}"
            )


class RegionSet:
    """Active superpixels addressed by contiguous ids ``1..K``.

    Parameters
    ----------
    regions : Sequence[SuperpixelRegion]
        Region records; the i-th record gets id ``i + 1``.
    """

    def __init__(self, regions: Sequence[SuperpixelRegion]) -> None:
        self._regions: List[SuperpixelRegion] = list(regions)

    @classmethod
    def from_label_map(cls, labels: np.ndarray, n_regions: int) -> 'RegionSet':
        """Group pixels by label into ``n_regions`` member sets.

        Labels must lie in ``1..n_regions``. Ids with no pixels yield
        empty records.

        Parameters
        ----------
        labels : np.ndarray
            2D integer label map.
        n_regions : int
            Number of region ids.

        Returns
        -------
        RegionSet
        """
        ncols = labels.shape[1]
        flat = labels.ravel()
        order = np.argsort(flat, kind='stable')
        counts = np.bincount(flat, minlength=n_regions + 1)[1:n_regions + 1]
        # Label 0 never occurs, so members of id k start after ids < k.
        bounds = np.concatenate([[0], np.cumsum(counts)])
        regions = []
        for k in range(n_regions):
            idx = order[bounds[k]:bounds[k + 1]]
            rows, cols = np.divmod(idx, ncols)
            regions.append(SuperpixelRegion(rows=rows, cols=cols))
        return cls(regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[SuperpixelRegion]:
        return iter(self._regions)

    def __getitem__(self, region_id: int) -> SuperpixelRegion:
        if not 1 <= region_id <= len(self._regions):
            raise KeyError(f"No region with id {region_id}")
        return self._regions[region_id - 1]

    def items(self) -> Iterator[Tuple[int, SuperpixelRegion]]:
        """``(id, region)`` pairs in ascending id order."""
        return enumerate(self._regions, start=1)

    @property
    def counts(self) -> np.ndarray:
        """Member counts in id order."""
        return np.array([r.count for r in self._regions], dtype=np.int64)

    def estimate_parameters(
        self,
        amplitude: np.ndarray,
        nu_max: float = DEFAULT_NU_MAX,
        jitter: float = COVARIANCE_JITTER,
    ) -> None:
        """Re-estimate every region from its current members."""
        for region in self._regions:
            region.estimate(amplitude, nu_max, jitter)

    def __repr__(self) -> str:
        return f"RegionSet(n_regions={len(self._regions)})"
