from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .stream import Position


class ErrorKind(Enum):
    EMPTY_STREAM = 'empty_stream'
    INVALID_SYMBOL = 'invalid_symbol'
    UNRECOVERABLE = 'unrecoverable'


class PointError(ValueError):
    """Base class for record parse failures."""

    kind: ErrorKind = ErrorKind.UNRECOVERABLE
    default_description = 'unable to read point'

    def __init__(self, description: Optional[str] = None, position: Optional[Position] = None):
        self.description = description or self.default_description
        self.position = position
        if position is not None:
            super().__init__(f'{position} {self.description}')
        else:
            super().__init__(self.description)


class EmptyStreamError(PointError):
    kind = ErrorKind.EMPTY_STREAM
    default_description = 'empty stream'


class InvalidSymbolError(PointError):
    kind = ErrorKind.INVALID_SYMBOL
    default_description = 'invalid symbol'


@dataclass(frozen=True)
class ParseFailure:
    kind: ErrorKind
    description: str
    position: Optional[Position] = None

    @classmethod
    def from_error(cls, exc: BaseException, position: Optional[Position] = None) -> 'ParseFailure':
        if isinstance(exc, PointError):
            return cls(exc.kind, exc.description, exc.position or position)
        return cls(ErrorKind.UNRECOVERABLE, f'{type(exc).__name__}: {exc}', position)

    def __str__(self) -> str:
        if self.position is None:
            return f'{self.description} ({self.kind.value})'
        return f'{self.position} {self.description} ({self.kind.value})'
