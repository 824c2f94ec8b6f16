# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for sarmix processor tagging.

Controlled vocabularies for image modalities, processor categories and
segmentation types. Processors are tagged with these through
``@processor_tags`` so that tag values stay consistent and typo-free.

Author
------
Steven Siebert

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

from enum import Enum


class ImageModality(Enum):
    """Image modalities a processor is designed for."""

    SAR = "SAR"
    PAN = "PAN"
    EO = "EO"


class ProcessorCategory(Enum):
    """Functional grouping of a processor."""

    FILTERS = "filters"
    SEGMENTATION = "segmentation"
    ANALYZE = "analyze"


class SegmentationType(Enum):
    """Type of segmentation a segmentor processor produces.

    Superpixel label maps are ``INSTANCE`` segmentations: every region
    gets its own id and no class meaning is attached to it.
    """

    INSTANCE = "instance"
    SEMANTIC = "semantic"
    PANOPTIC = "panoptic"
