# -*- coding: utf-8 -*-
"""
Grid Partitioner - Regular seeding grid for superpixel initialization.

Splits an image into ``ceil(nrows / region_size)`` by
``ceil(ncols / region_size)`` non-overlapping tiles laid out row-major.
Interior tiles are ``region_size x region_size``; the last tile row and
column stop at the image border, so tiles never extend past the image
and never spill into an extra tile.

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
import math
from typing import List, Tuple

# Third-party
import numpy as np

# sarmix internal
from sarmix.data_prep.base import ChipBase, ChipRegion, _validate_positive_int


class GridPartitioner(ChipBase):
    """Partition an image into a regular grid of seed tiles.

    Parameters
    ----------
    nrows : int
        Number of rows in the image.
    ncols : int
        Number of columns in the image.
    region_size : int
        Nominal tile side length in pixels.

    Raises
    ------
    TypeError
        If any argument is not ``int``.
    ValueError
        If any argument is not positive.

    Examples
    --------
    >>> grid = GridPartitioner(nrows=5, ncols=4, region_size=2)
    >>> grid.grid_shape
    (3, 2)
    >>> grid.tiles()[-1]
    ChipRegion(row_start=4, col_start=2, row_end=5, col_end=4)
    """

    def __init__(self, nrows: int, ncols: int, region_size: int) -> None:
        super().__init__(nrows, ncols)
        _validate_positive_int(region_size, 'region_size')
        self._region_size = int(region_size)

    @property
    def region_size(self) -> int:
        """Nominal tile side length."""
        return self._region_size

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """Number of tile rows and tile columns."""
        return (math.ceil(self._nrows / self._region_size),
                math.ceil(self._ncols / self._region_size))

    @property
    def n_tiles(self) -> int:
        """Total number of tiles."""
        ms, ns = self.grid_shape
        return ms * ns

    def tiles(self) -> List[ChipRegion]:
        """All tiles in row-major order.

        Returns
        -------
        List[ChipRegion]
            ``n_tiles`` regions that cover the image exactly once.
        """
        rs = self._region_size
        ms, ns = self.grid_shape
        return [
            self._clip_region(i * rs, j * rs, (i + 1) * rs, (j + 1) * rs)
            for i in range(ms)
            for j in range(ns)
        ]

    def label_map(self) -> np.ndarray:
        """Tile label of every pixel, numbered ``1..n_tiles`` row-major.

        Returns
        -------
        np.ndarray
            int64 array of shape ``(nrows, ncols)``.
        """
        rs = self._region_size
        _, ns = self.grid_shape
        tile_row = np.arange(self._nrows) // rs
        tile_col = np.arange(self._ncols) // rs
        return (tile_row[:, np.newaxis] * ns + tile_col[np.newaxis, :] + 1
                ).astype(np.int64)

    def __repr__(self) -> str:
        return (
            f"GridPartitioner(nrows={self._nrows}, ncols={self._ncols}, "
            f"region_size={self._region_size})"
        )
