# -*- coding: utf-8 -*-
"""
Hard Assignment and Pruning - Maximum-posterior labels and region compaction.

``hard_assign`` reduces the per-region window posteriors into a label map
by keeping, for every pixel, the region with the highest score. Regions
are visited in ascending id order and only a strictly greater score
replaces the current best, so ties go to the lowest id. Pixels that no
window reaches keep their previous label and are counted as uncovered.

``prune_empty`` drops region ids that received no pixels and renumbers
the survivors to ``1..K'`` preserving their order. It is the only
operation that reduces the region count.

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
from typing import Iterable, Tuple

# Third-party
import numpy as np

# sarmix internal
from sarmix.data_prep.base import ChipRegion


def hard_assign(
    previous_labels: np.ndarray,
    region_posteriors: Iterable[Tuple[int, ChipRegion, np.ndarray]],
) -> Tuple[np.ndarray, int]:
    """Assign every pixel to its maximum-posterior region.

    Parameters
    ----------
    previous_labels : np.ndarray
        2D label map of the previous round. Not modified.
    region_posteriors : Iterable[Tuple[int, ChipRegion, np.ndarray]]
        ``(region_id, window, log_post)`` triples in ascending id order,
        as produced by ``WindowedPosterior.evaluate``.

    Returns
    -------
    labels : np.ndarray
        New label map, same shape and dtype as ``previous_labels``.
    n_uncovered : int
        Number of pixels with no finite score from any region. These
        keep their previous label.
    """
    labels = previous_labels.copy()
    best = np.full(labels.shape, -np.inf, dtype=np.float64)

    for region_id, window, log_post in region_posteriors:
        best_view = best[window.slices]
        label_view = labels[window.slices]
        better = log_post > best_view
        best_view[better] = log_post[better]
        label_view[better] = region_id

    n_uncovered = int(np.count_nonzero(np.isneginf(best)))
    return labels, n_uncovered


def prune_empty(labels: np.ndarray, n_regions: int) -> Tuple[np.ndarray, int]:
    """Remove ids without pixels and renumber survivors contiguously.

    Parameters
    ----------
    labels : np.ndarray
        2D label map with values in ``1..n_regions``.
    n_regions : int
        Number of region ids before pruning.

    Returns
    -------
    labels : np.ndarray
        Compacted label map with values in ``1..K'``.
    n_kept : int
        Number of surviving regions ``K' <= n_regions``.

    Examples
    --------
    >>> labels = np.array([[1, 3], [3, 4]])
    >>> prune_empty(labels, 4)
    (array([[1, 2], [2, 3]]), 3)
    """
    counts = np.bincount(labels.ravel(), minlength=n_regions + 1)
    keep = counts > 0
    keep[0] = False
    remap = np.zeros(n_regions + 1, dtype=labels.dtype)
    remap[keep] = np.arange(1, int(keep.sum()) + 1, dtype=labels.dtype)
    return remap[labels], int(keep.sum())
