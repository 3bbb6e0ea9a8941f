from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Pattern, Union

import numpy as np

DTypeLike = Union[str, type, np.dtype]

# C-family spellings accepted in job specs.
SCALAR_TYPES: Dict[str, np.dtype] = {
    'int': np.dtype(np.int32),
    'long': np.dtype(np.int64),
    'float': np.dtype(np.float32),
    'double': np.dtype(np.float64),
}

_int_re = re.compile(r'[+-]?[0-9]+')
_float_re = re.compile(
    r'[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)',
    re.IGNORECASE | re.ASCII,
)


def scalar_dtype(scalar: DTypeLike) -> np.dtype:
    """Resolve a scalar name (``int``, ``double``...) or numpy dtype-like."""
    if isinstance(scalar, str) and scalar.lower() in SCALAR_TYPES:
        return SCALAR_TYPES[scalar.lower()]
    try:
        dtype = np.dtype(scalar)
    except TypeError as exc:
        raise ValueError(f'unknown scalar type {scalar!r}') from exc
    if dtype.kind not in 'if':
        raise ValueError(f'scalar type must be a signed integer or floating point type, got {dtype}')
    return dtype


def scalar_name(dtype: np.dtype) -> str:
    for name, candidate in SCALAR_TYPES.items():
        if candidate == dtype:
            return name
    return dtype.name


@dataclass(frozen=True)
class PointKind:
    """Scalar type and dimension shared by every point of a source."""

    dtype: np.dtype
    size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'dtype', scalar_dtype(self.dtype))
        if isinstance(self.size, bool) or not isinstance(self.size, (int, np.integer)):
            raise TypeError(f'dimension must be an integer, got {self.size!r}')
        if self.size < 1:
            raise ValueError(f'dimension must be at least 1, got {self.size}')
        object.__setattr__(self, 'size', int(self.size))

    @classmethod
    def from_names(cls, scalar: DTypeLike, size: int) -> 'PointKind':
        return cls(scalar_dtype(scalar), size)

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind == 'i'

    @property
    def literal(self) -> Pattern[str]:
        return _int_re if self.is_integer else _float_re

    def convert(self, text: str):
        """Convert a matched literal to a scalar of this kind.

        Raises OverflowError when the value does not fit the dtype.
        """
        if self.is_integer:
            value = int(text)
            info = np.iinfo(self.dtype)
            if value < info.min or value > info.max:
                raise OverflowError(f'value {text} out of range for {self.dtype}')
            return self.dtype.type(value)
        value = float(text)
        with np.errstate(over='ignore'):
            scalar = self.dtype.type(value)
        if np.isinf(scalar) and 'inf' not in text.lower():
            raise OverflowError(f'value {text} out of range for {self.dtype}')
        return scalar

    def origin(self):
        from .point import Point

        return Point.origin(self)

    def __str__(self) -> str:
        return f'{scalar_name(self.dtype)}[{self.size}]'
