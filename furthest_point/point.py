"""Fixed-dimension numeric points and the bracketed record grammar.

A record is ``( v1 v2 ... vN )``: a literal ``(``, exactly N whitespace
separated scalars of the point's dtype and a literal ``)``. Whitespace,
including newlines, is insignificant between tokens.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from .errors import EmptyStreamError, InvalidSymbolError, ParseFailure, PointError
from .logging_utils import debug_log_call
from .scalars import PointKind, scalar_name
from .stream import Position, TextCursor

logger = logging.getLogger(__name__)

Source = Union[TextCursor, io.TextIOBase, str]


def as_cursor(source: Source) -> TextCursor:
    if isinstance(source, TextCursor):
        return source
    if isinstance(source, str):
        return TextCursor.from_text(source)
    return TextCursor(source)


def _token_position(cur: TextCursor) -> Position:
    cur.skip_ws()
    return cur.position


def _check_integer_range(components: np.ndarray, kind: PointKind) -> None:
    """Reject integer arrays that would wrap when narrowed to the kind's dtype."""
    if components.dtype.kind not in 'iu' or np.can_cast(components.dtype, kind.dtype, 'safe'):
        return
    info = np.iinfo(kind.dtype)
    if components.size and (components.min() < info.min or components.max() > info.max):
        raise OverflowError(f'components out of range for {scalar_name(kind.dtype)}')


class Point:
    """An immutable point with exactly ``kind.size`` components of ``kind.dtype``.

    Points compare by magnitude with ``>``/``<`` (distance from the origin) and
    by value with ``==``. Distances are computed in the point's own dtype, so
    integer points whose sum of squares overflows the dtype get a wrapped norm
    (``nan`` when the wrapped sum is negative, which never compares greater).
    """

    __slots__ = ('kind', '_components', '_norm')

    def __init__(self, components: Iterable, kind: Optional[PointKind] = None):
        if not isinstance(components, np.ndarray):
            components = list(components)
        if kind is None:
            inferred = np.asarray(components)
            kind = PointKind(inferred.dtype, inferred.size)
        if isinstance(components, np.ndarray) and kind.is_integer:
            _check_integer_range(components, kind)
        arr = np.array(components, dtype=kind.dtype)
        if arr.shape != (kind.size,):
            raise ValueError(f'expected {kind.size} components, got shape {arr.shape}')
        arr.setflags(write=False)
        self.kind = kind
        self._components = arr
        self._norm: Optional[float] = None

    @classmethod
    def origin(cls, kind: PointKind) -> 'Point':
        return cls(np.zeros(kind.size, dtype=kind.dtype), kind)

    @classmethod
    def from_text(cls, source: Source, kind: PointKind) -> 'Point':
        """Read one record from *source*, advancing it past what was consumed.

        Raises EmptyStreamError if input is exhausted before the record starts
        and InvalidSymbolError for a malformed or truncated record.
        """
        cur = as_cursor(source)
        pos = _token_position(cur)
        ch = cur.read_char()
        if ch is None:
            raise EmptyStreamError(position=pos)
        if ch != '(':
            raise InvalidSymbolError(f"expected '(', got {ch!r}", pos)

        values = []
        for idx in range(kind.size):
            pos = _token_position(cur)
            tok = cur.match(kind.literal)
            if tok is None:
                if cur.at_end():
                    raise InvalidSymbolError(f'unable to read value {idx + 1}: unexpected end of input', pos)
                raise InvalidSymbolError(f'unable to read value {idx + 1}: got {cur.peek()!r}', pos)
            try:
                values.append(kind.convert(tok))
            except OverflowError:
                raise InvalidSymbolError(f'value {tok} out of range for {scalar_name(kind.dtype)}', pos) from None

        pos = _token_position(cur)
        ch = cur.read_char()
        if ch is None:
            raise InvalidSymbolError("expected ')', got end of input", pos)
        if ch != ')':
            raise InvalidSymbolError(f"expected ')', got {ch!r}", pos)
        return cls(values, kind)

    @classmethod
    def parse(cls, text: str, kind: PointKind) -> 'Point':
        """Parse a string holding exactly one record."""
        cur = TextCursor.from_text(text)
        point = cls.from_text(cur, kind)
        if not cur.at_end():
            raise InvalidSymbolError(f'unexpected trailing input {cur.peek()!r}', cur.position)
        return point

    @property
    def components(self) -> np.ndarray:
        return self._components

    def values(self) -> Tuple:
        return tuple(self._components.tolist())

    def _check_kind(self, other: 'Point') -> None:
        if other.kind != self.kind:
            raise ValueError(f'cannot compare {self.kind} point with {other.kind} point')

    def distance(self, other: 'Point') -> float:
        self._check_kind(other)
        dtype = self.kind.dtype
        with np.errstate(over='ignore', invalid='ignore'):
            diff = self._components - other._components
            sum_of_squares = np.sum(diff * diff, dtype=dtype)
            return float(np.sqrt(np.float64(sum_of_squares)))

    def norm(self) -> float:
        if self._norm is None:
            self._norm = self.distance(Point.origin(self.kind))
        return self._norm

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_kind(other)
        return self.norm() > other.norm()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_kind(other)
        return self.norm() < other.norm()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.kind == other.kind and bool(np.array_equal(self._components, other._components))

    def __hash__(self) -> int:
        return hash((self.kind, self.values()))

    def __len__(self) -> int:
        return self.kind.size

    def __iter__(self) -> Iterator:
        return iter(self.values())

    def __getitem__(self, idx: int):
        return self._components[idx].item()

    def to_text(self) -> str:
        # numpy scalars print in their own precision (float32 0.1 stays 0.1)
        return '( ' + ''.join(str(value) + ' ' for value in self._components) + ')'

    __str__ = to_text

    def __repr__(self) -> str:
        return f'Point({scalar_name(self.kind.dtype)}, {self.values()!r})'


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one read: either a point or a failure, plus where the cursor stopped."""

    point: Optional[Point]
    failure: Optional[ParseFailure]
    position: Position

    @property
    def ok(self) -> bool:
        return self.failure is None


@debug_log_call(logger)
def read_point(source: Source, kind: PointKind) -> ParseResult:
    """Read one record without raising for malformed or missing input.

    Stream level failures (``OSError``, decoding errors, an unknown codec
    error policy surfacing as ``LookupError``) are reported as
    ``ErrorKind.UNRECOVERABLE``.
    """
    cur = as_cursor(source)
    try:
        point = Point.from_text(cur, kind)
    except (PointError, OSError, UnicodeError, LookupError) as exc:
        return ParseResult(None, ParseFailure.from_error(exc, cur.position), cur.position)
    return ParseResult(point, None, cur.position)


def distance(p: Point, q: Point) -> float:
    return p.distance(q)
