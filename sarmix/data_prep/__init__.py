# -*- coding: utf-8 -*-
"""
Data Preparation Module - Grid and window geometry.

Provides ``ChipRegion`` (clipped rectangle with its pixel coordinate
set), ``ChipBase`` (image-extent clipping and centered windows) and
``GridPartitioner`` (regular seeding grid for superpixel
initialization).

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

from sarmix.data_prep.base import ChipBase, ChipRegion
from sarmix.data_prep.grid import GridPartitioner

__all__ = [
    'ChipBase',
    'ChipRegion',
    'GridPartitioner',
]
