# -*- coding: utf-8 -*-
"""
Segmentation Validation Helpers - Input image and parameter checks.

Every check runs before the first iteration so that invalid input is
rejected without partial computation.

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


def validate_sar_image(source: np.ndarray) -> np.ndarray:
    """Validate a grayscale intensity image and return it as float64.

    Parameters
    ----------
    source : np.ndarray
        Candidate image.

    Returns
    -------
    np.ndarray
        float64 copy of ``source``.

    Raises
    ------
    ValidationError
        If ``source`` is not a 2D, non-empty, real array of finite,
        non-negative values.
    """
    if not isinstance(source, np.ndarray):
        raise ValidationError(
            f"Expected numpy ndarray, got {type(source).__name__}"
        )
    if source.ndim != 2:
        raise ValidationError(
            f"Expected 2D grayscale image, got shape {source.shape}"
        )
    if source.size == 0:
        raise ValidationError(f"Image must not be empty, got shape {source.shape}")
    if np.iscomplexobj(source):
        raise ValidationError(
            "Expected real-valued intensity image, got complex dtype "
            f"{source.dtype}. Convert SLC data with np.abs(x) ** 2 first."
        )
    # Boolean masks are read as 0/1 intensities.
    if not np.issubdtype(source.dtype, np.number) and source.dtype != bool:
        raise ValidationError(f"Expected numeric image, got dtype {source.dtype}")

    image = source.astype(np.float64)
    if not np.all(np.isfinite(image)):
        raise ValidationError("Image contains non-finite values (NaN or inf)")
    if np.any(image < 0):
        raise ValidationError(
            f"Image intensities must be non-negative, got minimum {image.min()}"
        )
    return image


def validate_region_size(region_size: int) -> None:
    """Validate that ``region_size`` is a positive integer.

    Raises
    ------
    ValidationError
        If ``region_size`` is not an integer or is < 1.
    """
    if isinstance(region_size, bool) or not isinstance(
            region_size, (int, np.integer)):
        raise ValidationError(
            f"region_size must be an integer, got {type(region_size).__name__}"
        )
    if region_size < 1:
        raise ValidationError(f"region_size must be >= 1, got {region_size}")


def validate_alfa(alfa: float) -> None:
    """Validate that the concentration ``alfa`` is a finite positive number.

    Raises
    ------
    ValidationError
        If ``alfa`` is not a number, not finite, or not > 0.
    """
    if isinstance(alfa, bool) or not isinstance(
            alfa, (int, float, np.integer, np.floating)):
        raise ValidationError(f"alfa must be a number, got {type(alfa).__name__}")
    if not np.isfinite(alfa) or alfa <= 0:
        raise ValidationError(f"alfa must be a finite value > 0, got {alfa}")
