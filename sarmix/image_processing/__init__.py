# -*- coding: utf-8 -*-
"""
Image Processing Module - Processor framework and SAR superpixel segmentation.

Sub-modules
-----------
base.py
    ``ImageProcessor`` and ``ImageTransform`` base classes.
params.py
    ``Range``, ``Options``, ``Desc`` constraint markers for tunable
    parameters via ``Annotated`` type hints.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
segmentation/
    Mixture-based superpixels (``MixtureSuperpixels``).

Usage
-----
    >>> from sarmix.image_processing import MixtureSuperpixels
    >>> labels = MixtureSuperpixels(region_size=12).apply(intensity)

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

from sarmix.image_processing.base import ImageProcessor, ImageTransform
from sarmix.image_processing.params import Desc, Options, ParamSpec, Range
from sarmix.image_processing.segmentation import (
    MixtureSuperpixels,
    SegmentationState,
)
from sarmix.image_processing.versioning import processor_tags, processor_version

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
    'processor_version',
    'processor_tags',
    'MixtureSuperpixels',
    'SegmentationState',
]
