# -*- coding: utf-8 -*-
"""
Segmentation Module - Mixture-based superpixels for SAR imagery.

Sub-modules
-----------
misp.py
    ``MixtureSuperpixels`` processor and ``SegmentationState`` run context.
distributions.py
    Nakagami shape estimator and Nakagami / bivariate Gaussian densities.
regions.py
    ``SuperpixelRegion`` records, ``RegionSet`` and parameter estimators.
posterior.py
    ``WindowedPosterior`` local posterior evaluation.
assignment.py
    ``hard_assign`` and ``prune_empty``.
proportions.py
    Dirichlet MAP mixture-proportion update.

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

from sarmix.image_processing.segmentation.assignment import (
    hard_assign,
    prune_empty,
)
from sarmix.image_processing.segmentation.distributions import (
    estimate_nakagami_shape,
    gaussian_logpdf_2d,
    gaussian_pdf_2d,
    nakagami_logpdf,
    nakagami_pdf,
)
from sarmix.image_processing.segmentation.misp import (
    MixtureSuperpixels,
    SegmentationState,
    compute_amplitude,
)
from sarmix.image_processing.segmentation.posterior import WindowedPosterior
from sarmix.image_processing.segmentation.proportions import (
    uniform_proportions,
    update_proportions,
)
from sarmix.image_processing.segmentation.regions import (
    RegionSet,
    SuperpixelRegion,
    estimate_amplitude_params,
    estimate_position_params,
)

__all__ = [
    'MixtureSuperpixels',
    'SegmentationState',
    'compute_amplitude',
    'estimate_nakagami_shape',
    'nakagami_pdf',
    'nakagami_logpdf',
    'gaussian_pdf_2d',
    'gaussian_logpdf_2d',
    'SuperpixelRegion',
    'RegionSet',
    'estimate_amplitude_params',
    'estimate_position_params',
    'WindowedPosterior',
    'hard_assign',
    'prune_empty',
    'uniform_proportions',
    'update_proportions',
]
