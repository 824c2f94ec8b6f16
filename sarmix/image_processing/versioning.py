# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag class decorators.

Provides ``@processor_version`` for stamping a semantic version string on
a processor class and ``@processor_tags`` for attaching modality,
category and segmentation-type metadata used for processor discovery.

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

# Standard library
import importlib.metadata
from typing import Optional, Sequence, Type, TypeVar

# sarmix internal
from sarmix.vocabulary import ImageModality, ProcessorCategory, SegmentationType

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps ``__processor_version__`` on a processor.

    When *version* is omitted the installed ``sarmix`` package version
    is used, or ``'unknown'`` when the package metadata is unavailable.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MySegmenter(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> MySegmenter.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('sarmix')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    modalities: Optional[Sequence[ImageModality]] = None,
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
    segmentation_types: Optional[Sequence[SegmentationType]] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` on the class as a dict with keys
    ``modalities``, ``category``, ``description`` and
    ``segmentation_types``.

    Raises
    ------
    TypeError
        If any tag is not a member of the matching vocabulary enum.
    """
    for m in modalities or ():
        if not isinstance(m, ImageModality):
            raise TypeError(
                f"modalities must be ImageModality members, got {m!r}"
            )
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )
    for s in segmentation_types or ():
        if not isinstance(s, SegmentationType):
            raise TypeError(
                f"segmentation_types must be SegmentationType members, "
                f"got {s!r}"
            )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'modalities': tuple(modalities) if modalities else (),
            'category': category,
            'description': description,
            'segmentation_types': (
                tuple(segmentation_types) if segmentation_types else ()
            ),
        }
        return cls
    return decorator
