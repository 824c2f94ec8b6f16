# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for image processors.

Defines the ``ImageProcessor`` common base class and the ``ImageTransform``
ABC for dense raster transforms (a superpixel label map is a dense
raster). ``ImageProcessor`` provides version checking at first
instantiation, ``typing.Annotated``-based tunable parameter collection,
runtime parameter resolution through ``**kwargs`` and optional progress
reporting.

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
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# sarmix internal
from sarmix.image_processing.params import ParamSpec, collect_param_specs

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses that do not declare a
    version via ``@processor_version('x.y.z')`` trigger a ``UserWarning``
    at first instantiation. The check lives in ``__new__`` so that class
    decorators have been applied by the time it runs.

    **Tunable parameters**: subclasses declare parameters as
    ``typing.Annotated`` class-body fields with markers from
    :mod:`sarmix.image_processing.params`. ``__init_subclass__`` collects
    them into ``__param_specs__``; ``_resolve_params(kwargs)`` merges
    instance values with per-call overrides and validates them.
    """

    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _validate_params(self) -> None:
        """Validate the current instance value of every declared parameter."""
        for spec in type(self).__param_specs__:
            spec.validate(getattr(self, spec.name))

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        Keys of *kwargs* that are not declared parameters (e.g.
        ``progress_callback``) are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValueError
            If a value violates range or choices constraints.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs.get(spec.name, getattr(self, spec.name))
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(
        self, kwargs: Dict[str, Any], fraction: float
    ) -> None:
        """Call the optional ``progress_callback`` kwarg with *fraction*."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image transforms.

    Subclasses implement ``apply``, which takes a source image array and
    returns a dense output array of the same spatial shape.
    """

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Apply the transform to a source image array.

        Parameters
        ----------
        source : np.ndarray
            Input image, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Transformed image.
        """
        ...
