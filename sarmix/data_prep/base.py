# -*- coding: utf-8 -*-
"""
Data Preparation Base - Rectangular regions and image-extent clipping.

Defines the ``ChipRegion`` named tuple used as the standardized return
type for every rectangular region query (grid tiles, evaluation
windows) and the ``ChipBase`` class that holds image dimensions and
intersects requested rectangles with the image extent.

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
from typing import NamedTuple, Tuple

# Third-party
import numpy as np


class ChipRegion(NamedTuple):
    """Rectangular region within an image, defined by clipped pixel bounds.

    All indices are in image coordinates and within valid image bounds.
    Use directly for numpy slicing::

        chip = image[region.row_start:region.row_end,
                     region.col_start:region.col_end]

    Attributes
    ----------
    row_start : int
        First row (inclusive).
    col_start : int
        First column (inclusive).
    row_end : int
        Last row (exclusive).
    col_end : int
        Last column (exclusive).
    """

    row_start: int
    col_start: int
    row_end: int
    col_end: int

    @property
    def shape(self) -> Tuple[int, int]:
        """``(rows, cols)`` extent of the region."""
        return (self.row_end - self.row_start, self.col_end - self.col_start)

    @property
    def size(self) -> int:
        """Number of pixels covered by the region."""
        rows, cols = self.shape
        return rows * cols

    @property
    def slices(self) -> Tuple[slice, slice]:
        """``(row_slice, col_slice)`` for indexing a 2D array."""
        return (slice(self.row_start, self.row_end),
                slice(self.col_start, self.col_end))

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """Row and column indices of every covered pixel, row-major.

        Returns
        -------
        rows : np.ndarray
            1D int64 array of row indices.
        cols : np.ndarray
            1D int64 array of column indices, same length as ``rows``.
        """
        rr, cc = np.meshgrid(
            np.arange(self.row_start, self.row_end, dtype=np.int64),
            np.arange(self.col_start, self.col_end, dtype=np.int64),
            indexing='ij',
        )
        return rr.ravel(), cc.ravel()


class ChipBase:
    """Base class for region computations over a fixed image extent.

    Parameters
    ----------
    nrows : int
        Number of rows in the image.
    ncols : int
        Number of columns in the image.

    Raises
    ------
    TypeError
        If ``nrows`` or ``ncols`` is not ``int``.
    ValueError
        If ``nrows`` or ``ncols`` is not positive.
    """

    def __init__(self, nrows: int, ncols: int) -> None:
        _validate_positive_int(nrows, 'nrows')
        _validate_positive_int(ncols, 'ncols')
        self._nrows = nrows
        self._ncols = ncols

    @property
    def nrows(self) -> int:
        """Number of image rows."""
        return self._nrows

    @property
    def ncols(self) -> int:
        """Number of image columns."""
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        """Image dimensions as ``(nrows, ncols)``."""
        return (self._nrows, self._ncols)

    def _clip_region(
        self,
        row_start: int,
        col_start: int,
        row_end: int,
        col_end: int,
    ) -> ChipRegion:
        """Intersect a requested rectangle with the image extent.

        Unlike snapping, clipping never moves the rectangle: parts that
        overshoot the image are cut off. A rectangle lying entirely
        outside the image yields an empty region (zero size).

        Examples
        --------
        100 x 100 image, window overhanging the top-left corner:

        >>> base._clip_region(-5, -5, 6, 6)
        ChipRegion(row_start=0, col_start=0, row_end=6, col_end=6)
        """
        rs = min(max(row_start, 0), self._nrows)
        cs = min(max(col_start, 0), self._ncols)
        re = max(min(row_end, self._nrows), rs)
        ce = max(min(col_end, self._ncols), cs)
        return ChipRegion(int(rs), int(cs), int(re), int(ce))

    def window_around(
        self, row: int, col: int, radius: int
    ) -> ChipRegion:
        """Square window of side ``2 * radius + 1`` centered at a pixel.

        The window is clipped to the image extent, so it shrinks near
        image borders.

        Parameters
        ----------
        row, col : int
            Window center. May lie outside the image.
        radius : int
            Half-width of the window in pixels (>= 0).

        Returns
        -------
        ChipRegion
            Clipped window.

        Raises
        ------
        ValueError
            If ``radius`` is negative.
        """
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        row = int(row)
        col = int(col)
        return self._clip_region(
            row - radius, col - radius, row + radius + 1, col + radius + 1,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nrows={self._nrows}, ncols={self._ncols})"


def _validate_positive_int(value: int, name: str) -> None:
    """Validate that a value is a positive integer.

    Raises
    ------
    TypeError
        If ``value`` is not ``int``.
    ValueError
        If ``value`` is not positive.
    """
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
