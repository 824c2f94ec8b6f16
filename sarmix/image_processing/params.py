# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Parameter constraints via typing.Annotated.

Provides constraint marker types (``Range``, ``Options``, ``Desc``) used
inside ``typing.Annotated`` annotations on ``ImageProcessor`` subclasses,
plus the ``ParamSpec`` record and the ``collect_param_specs`` utility
consumed by ``ImageProcessor.__init_subclass__``.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from sarmix.image_processing.params import Range, Options, Desc

    class MySegmenter(ImageTransform):
        region_size: Annotated[int, Range(min=1), Desc('Grid spacing')] = 10
        output: Annotated[str, Options('labels', 'mean'),
                          Desc('Output format')] = 'labels'

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
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# Third-party
import numpy as np

Number = Union[int, float]

_INT_TYPES = (int, np.integer)
_FLOAT_TYPES = (int, float, np.integer, np.floating)


# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types."""


class Range(ParamMeta):
    """Numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Lower bound. Inclusive unless ``min_exclusive`` is set.
    max : int or float, optional
        Upper bound (inclusive).
    min_exclusive : bool
        Treat ``min`` as a strict lower bound. Default ``False``.
    """

    __slots__ = ('min', 'max', 'min_exclusive')

    def __init__(
        self,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        min_exclusive: bool = False,
    ) -> None:
        self.min = min
        self.max = max
        self.min_exclusive = min_exclusive

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            op = 'gt' if self.min_exclusive else 'min'
            parts.append(f"{op}={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        return f"Range({', '.join(parts)})"


class Options(ParamMeta):
    """Discrete choice constraint."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

@dataclass(frozen=True)
class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type.
    default : Any
        Class-level default value.
    description : str
        Human-readable description.
    min_value, max_value : int, float or None
        Range bounds from ``Range``.
    min_exclusive : bool
        Whether ``min_value`` is a strict bound.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    name: str
    param_type: type
    default: Any = None
    description: str = ''
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None
    min_exclusive: bool = False
    choices: Optional[Tuple] = None

    def validate(self, value: Any) -> None:
        """Validate *value* against type, range and choices.

        NumPy integer and floating scalars are accepted like their
        Python counterparts, and ``int`` where ``float`` is declared.
        ``bool`` is never accepted as a number.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValueError
            If *value* violates a range or choices constraint.
        """
        is_bool = isinstance(value, bool)
        if self.param_type is float:
            ok = isinstance(value, _FLOAT_TYPES) and not is_bool
        elif self.param_type is int:
            ok = isinstance(value, _INT_TYPES) and not is_bool
        else:
            ok = isinstance(value, self.param_type)
        if not ok:
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None:
            if self.min_exclusive and not value > self.min_value:
                raise ValueError(
                    f"Parameter '{self.name}' value {value!r} "
                    f"must be greater than {self.min_value!r}"
                )
            if value < self.min_value:
                raise ValueError(
                    f"Parameter '{self.name}' value {value!r} "
                    f"is below minimum {self.min_value!r}"
                )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )


# =====================================================================
# Annotation collection
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` class fields of *cls* into ``ParamSpec`` records.

    Only fields carrying at least one ``ParamMeta`` marker are collected.
    Parent-class fields come first, each class in declaration order.

    Raises
    ------
    TypeError
        If a field combines ``Range`` and ``Options``.
    """
    hints = get_type_hints(cls, include_extras=True)

    ordered = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in ordered:
                ordered.append(name)

    specs = []
    for name in ordered:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        rng = next((m for m in metas if isinstance(m, Range)), None)
        opts = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if rng is not None and opts is not None:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=getattr(cls, name, None),
            description=desc.text if desc else '',
            min_value=rng.min if rng else None,
            max_value=rng.max if rng else None,
            min_exclusive=rng.min_exclusive if rng else False,
            choices=opts.choices if opts else None,
        ))
    return tuple(specs)
