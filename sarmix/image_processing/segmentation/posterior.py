# -*- coding: utf-8 -*-
"""
Windowed Posterior Evaluator - Local label posteriors around each region.

For every region a square window of side ``2 * radius + 1`` is centered
on the floor of the region's centroid and clipped to the image. Only
pixels inside that window are scored against the region; every other
pixel has zero posterior for it. Inside the window::

    wa = Nakagami(amplitude; nu, nu / mu)
    wp = Gaussian((row, col); centroid, covariance)
    w  = proportion * wa * wp

Scores are computed in the log domain,
``log(proportion) + log(wa) + log(wp)``, which preserves the argmax of
the product form while avoiding underflow; ``-inf`` stands for a zero
posterior.

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
import logging
from typing import Iterator, Tuple

# Third-party
import numpy as np

# sarmix internal
from sarmix.data_prep.base import ChipBase, ChipRegion
from sarmix.exceptions import ProcessorError
from sarmix.image_processing.segmentation.distributions import (
    gaussian_logpdf_2d,
    nakagami_logpdf,
)
from sarmix.image_processing.segmentation.regions import (
    RegionSet,
    SuperpixelRegion,
)

logger = logging.getLogger(__name__)


class WindowedPosterior:
    """Evaluate region posteriors restricted to centroid windows.

    Parameters
    ----------
    amplitude : np.ndarray
        2D amplitude field of the image.
    radius : int
        Window half-width, normally the seeding ``region_size``.

    Examples
    --------
    >>> evaluator = WindowedPosterior(amplitude, radius=10)
    >>> for region_id, window, log_post in evaluator.evaluate(regions, props):
    ...     block = labels[window.slices]
    """

    def __init__(self, amplitude: np.ndarray, radius: int) -> None:
        self._amplitude = amplitude
        self._extent = ChipBase(*amplitude.shape)
        self._radius = int(radius)

    @property
    def radius(self) -> int:
        return self._radius

    def window(self, region: SuperpixelRegion) -> ChipRegion:
        """Clipped evaluation window of *region*."""
        row, col = np.floor(region.centroid).astype(np.int64)
        return self._extent.window_around(row, col, self._radius)

    def region_log_posterior(
        self,
        region: SuperpixelRegion,
        proportion: float,
    ) -> Tuple[ChipRegion, np.ndarray]:
        """Unnormalized log posterior of *region* over its window.

        Parameters
        ----------
        region : SuperpixelRegion
            Region with estimated parameters.
        proportion : float
            Mixture proportion of the region.

        Returns
        -------
        window : ChipRegion
            Clipped evaluation window.
        log_post : np.ndarray
            Log posterior, shape ``window.shape``.

        Raises
        ------
        ProcessorError
            If any score is NaN.
        """
        win = self.window(region)
        amp = self._amplitude[win.slices]

        log_wa = nakagami_logpdf(amp, region.nu, region.nu / region.mu)

        rows, cols = win.coordinates()
        log_wp = gaussian_logpdf_2d(
            np.column_stack([rows, cols]), region.centroid, region.covariance,
        ).reshape(win.shape)

        with np.errstate(divide='ignore'):
            log_post = np.log(proportion) + log_wa + log_wp
        if np.isnan(log_post).any():
            raise ProcessorError(
                f"NaN posterior for region with mu={region.mu}, "
                f"nu={region.nu}, centroid={region.centroid.tolist()}"
            )
        return win, log_post

    def evaluate(
        self,
        regions: RegionSet,
        proportions: np.ndarray,
    ) -> Iterator[Tuple[int, ChipRegion, np.ndarray]]:
        """Yield ``(region_id, window, log_post)`` in ascending id order."""
        for region_id, region in regions.items():
            win, log_post = self.region_log_posterior(
                region, proportions[region_id - 1],
            )
            yield region_id, win, log_post

    def dense(
        self,
        regions: RegionSet,
        proportions: np.ndarray,
    ) -> np.ndarray:
        """Full posterior cube, zero outside each region's window.

        Allocates ``K x rows x cols`` floats; intended for inspecting
        small images.

        Returns
        -------
        np.ndarray
            float64 array of shape ``(K, rows, cols)`` holding
            ``proportion * wa * wp``.
        """
        cube = np.zeros((len(regions),) + self._extent.shape, dtype=np.float64)
        logger.debug("Dense posterior cube %s (%.1f MB)",
                     cube.shape, cube.nbytes / 1e6)
        for region_id, win, log_post in self.evaluate(regions, proportions):
            cube[(region_id - 1,) + win.slices] = np.exp(log_post)
        return cube
