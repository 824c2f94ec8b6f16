# -*- coding: utf-8 -*-
"""
sarmix - Mixture-based superpixel segmentation for SAR imagery.

Partitions grayscale SAR intensity images into compact, statistically
homogeneous superpixels, each modeled by a Nakagami amplitude
distribution and a bivariate Gaussian position distribution.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from sarmix.exceptions import (
    SarmixError,
    ValidationError,
    ProcessorError,
    SarmixWarning,
    UncoveredPixelWarning,
)
from sarmix.vocabulary import (
    ImageModality,
    ProcessorCategory,
    SegmentationType,
)
from sarmix.image_processing.segmentation import (
    MixtureSuperpixels,
    SegmentationState,
)

__all__ = [
    'SarmixError',
    'ValidationError',
    'ProcessorError',
    'SarmixWarning',
    'UncoveredPixelWarning',
    'ImageModality',
    'ProcessorCategory',
    'SegmentationType',
    'MixtureSuperpixels',
    'SegmentationState',
]
