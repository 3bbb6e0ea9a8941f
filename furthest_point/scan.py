"""Streaming search for the point furthest from the origin."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import ErrorKind, ParseFailure
from .logging_utils import apply_debug_logging
from .point import Point, Source, as_cursor, read_point
from .scalars import PointKind

logger = logging.getLogger(__name__)


class ScanStatus(Enum):
    COMPLETE = "complete"
    FIRST_RECORD_FAILED = "first_record_failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class ScanEvent:
    """A parse failure seen while scanning, tagged with the source it came from."""

    source: str
    failure: ParseFailure

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    def __str__(self) -> str:
        return f"{self.source}: {self.failure}"


@dataclass
class ScanResult:
    source: str
    kind: PointKind
    status: ScanStatus = ScanStatus.COMPLETE
    maximum: Optional[Point] = None
    records: int = 0
    skipped: int = 0
    events: List[ScanEvent] = field(default_factory=list)
    error: Optional[ParseFailure] = None

    @property
    def found(self) -> bool:
        return self.maximum is not None and self.status is ScanStatus.COMPLETE


def _report(result: ScanResult, failure: ParseFailure, level: int, what: str, read_at: int) -> None:
    """Log a failure with the cursor offset after the read and the failing token's location."""
    result.events.append(ScanEvent(result.source, failure))
    logger.log(
        level,
        "%s (%s): %s; reading from %s at position %d %s",
        what,
        failure.kind.value,
        failure.description,
        result.source,
        read_at,
        failure.position if failure.position is not None else "",
    )


def find_max(source: Source, kind: PointKind, *, name: Optional[str] = None) -> ScanResult:
    """Scan *source* and return the point with the greatest norm.

    The first record must parse; otherwise the scan ends with
    ``FIRST_RECORD_FAILED``. After that, malformed records are skipped up to
    the end of their line and the scan continues until input is exhausted.
    Stream failures end the scan with ``ABORTED``. Ties keep the earlier point.
    """
    cur = as_cursor(source)
    result = ScanResult(source=name or cur.name, kind=kind)

    first = read_point(cur, kind)
    if not first.ok:
        result.status = ScanStatus.FIRST_RECORD_FAILED
        result.error = first.failure
        _report(result, first.failure, logging.ERROR, "unable to read first element", cur.tell())
        return result
    result.maximum = first.point
    result.records = 1

    while True:
        attempt = read_point(cur, kind)
        if attempt.ok:
            result.records += 1
            if attempt.point > result.maximum:
                result.maximum = attempt.point
            continue

        failure = attempt.failure
        if failure.kind is ErrorKind.EMPTY_STREAM:
            break
        if failure.kind is ErrorKind.INVALID_SYMBOL:
            result.skipped += 1
            _report(result, failure, logging.WARNING, "ignoring invalid element", cur.tell())
            try:
                cur.skip_line()
            except (OSError, UnicodeError, LookupError) as exc:
                failure = ParseFailure.from_error(exc, cur.position)
            else:
                continue

        result.status = ScanStatus.ABORTED
        result.error = failure
        _report(result, failure, logging.ERROR, "unable to recover", cur.tell())
        break

    logger.debug(
        "Scanned %s: %d record(s), %d skipped, status=%s",
        result.source,
        result.records,
        result.skipped,
        result.status.value,
    )
    return result


apply_debug_logging(globals(), logger=logger)
