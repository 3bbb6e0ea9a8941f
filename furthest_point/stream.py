"""Line-buffered character cursor over a text stream."""

import io
import re
from dataclasses import dataclass
from typing import Optional, Pattern, TextIO, Union

WS = ' \t\r\n\f\v'


@dataclass(frozen=True)
class Position:
    offset: int
    line: int
    col: int

    def __str__(self) -> str:
        return f'[line {self.line}, col {self.col}]'


class TextCursor:
    """Stateful read cursor with stream-extraction style helpers.

    Text is pulled from the underlying stream one line at a time, so records
    may span lines but a single token never does. Reads always leave the
    cursor in a usable state: a failed match consumes nothing beyond the
    leading whitespace, and there is no error flag to reset.
    """

    def __init__(self, stream: TextIO, name: Optional[str] = None):
        self.stream = stream
        self.name = name if name is not None else getattr(stream, 'name', '<stream>')
        self.buf = ''
        self.i = 0
        self.line_no = 0
        self.consumed = 0  # characters in fully consumed lines
        self.eof = False

    @classmethod
    def from_text(cls, text: str, name: str = '<string>') -> 'TextCursor':
        return cls(io.StringIO(text), name=name)

    @property
    def position(self) -> Position:
        return Position(self.consumed + self.i, max(self.line_no, 1), self.i + 1)

    def tell(self) -> int:
        return self.consumed + self.i

    def _fill(self) -> bool:
        """Make sure at least one unread character is buffered."""
        while self.i >= len(self.buf):
            if self.eof:
                return False
            line = self.stream.readline()
            if not line:
                self.eof = True
                return False
            self.consumed += len(self.buf)
            self.buf = line
            self.i = 0
            self.line_no += 1
        return True

    def skip_ws(self) -> bool:
        """Skip whitespace; return False when input is exhausted."""
        while self._fill():
            ch = self.buf[self.i]
            if ch not in WS:
                return True
            self.i += 1
        return False

    def at_end(self) -> bool:
        return not self.skip_ws()

    def peek(self) -> Optional[str]:
        if not self.skip_ws():
            return None
        return self.buf[self.i]

    def read_char(self) -> Optional[str]:
        """Read the next non-whitespace character, or None at end of input."""
        ch = self.peek()
        if ch is not None:
            self.i += 1
        return ch

    def match(self, pattern: Union[str, Pattern[str]]) -> Optional[str]:
        """Consume and return the longest token matching *pattern*, if any."""
        if not self.skip_ws():
            return None
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        m = pattern.match(self.buf, self.i)
        if not m or m.end() == self.i:
            return None
        self.i = m.end()
        return m.group(0)

    def skip_line(self) -> str:
        """Discard the rest of the current line, terminator included."""
        if not self._fill():
            return ''
        rest = self.buf[self.i:]
        self.i = len(self.buf)
        return rest

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> 'TextCursor':
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f'TextCursor(name={self.name!r}, position={self.position})'
