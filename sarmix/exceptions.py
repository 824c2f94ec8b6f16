# -*- coding: utf-8 -*-
"""
sarmix Exception Hierarchy - Domain-specific exceptions and warnings.

Provides a small exception hierarchy that lets callers catch sarmix
errors distinctly from Python built-in exceptions. All sarmix exceptions
subclass both ``SarmixError`` and the appropriate built-in exception so
that existing ``except ValueError`` handlers keep working.

Numerical conditions that do not stop a segmentation run are reported
through ``SarmixWarning`` subclasses via :func:`warnings.warn`.

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


class SarmixError(Exception):
    """Base exception for all sarmix errors."""


class ValidationError(SarmixError, ValueError):
    """Invalid input image or parameters.

    Raised for non-2D or empty images, non-finite or negative pixel
    values, and out-of-range segmentation parameters. Always raised
    before any iteration starts.
    """


class ProcessorError(SarmixError, RuntimeError):
    """Numerical failure during the iterative estimation loop.

    Raised when region parameters or posteriors become non-finite
    (e.g. a diverging shape estimate) instead of letting NaN labels
    propagate into the output.
    """


class SarmixWarning(UserWarning):
    """Base class for warnings emitted by sarmix processors."""


class UncoveredPixelWarning(SarmixWarning):
    """Some pixels fell outside every region's evaluation window.

    Those pixels have an all-zero posterior row for the round and keep
    the label they held in the previous round.
    """
