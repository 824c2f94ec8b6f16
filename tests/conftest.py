# -*- coding: utf-8 -*-
"""
Shared pytest fixtures - Synthetic SAR intensity images.

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

import numpy as np
import pytest


def _speckle(mean: np.ndarray, looks: int, seed: int) -> np.ndarray:
    """Multi-look gamma speckle with the given mean intensity."""
    rng = np.random.default_rng(seed)
    return mean * rng.gamma(looks, 1.0 / looks, size=mean.shape)


@pytest.fixture
def flat_image():
    """Constant 20x20 intensity image."""
    return np.full((20, 20), 100.0)


@pytest.fixture
def speckle_image():
    """Homogeneous 4-look speckle, 24x30, mean intensity 10."""
    return _speckle(np.full((24, 30), 10.0), looks=4, seed=0)


@pytest.fixture
def two_region_image():
    """30x40 speckle with a dark left half (mean 1) and bright right half (mean 100)."""
    mean = np.ones((30, 40))
    mean[:, 20:] = 100.0
    return _speckle(mean, looks=4, seed=1)
