from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from .config import ScanConfig, get_scan_config
from .errors import ParseFailure
from .logging_utils import apply_debug_logging
from .scalars import PointKind, scalar_name
from .scan import ScanEvent, ScanResult, ScanStatus, find_max
from .stream import TextCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Job:
    """One source to scan: scalar type, dimension and file path."""

    scalar: str
    size: int
    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @property
    def kind(self) -> PointKind:
        return PointKind.from_names(self.scalar, self.size)

    @classmethod
    def parse(cls, spec: str) -> "Job":
        """Parse ``TYPE:DIM:PATH``; the path may contain further colons."""
        parts = spec.split(":", 2)
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"expected TYPE:DIM:PATH, got {spec!r}")
        scalar, size_text, path = parts
        try:
            size = int(size_text)
        except ValueError:
            raise ValueError(f"dimension must be an integer, got {size_text!r}") from None
        PointKind.from_names(scalar, size)
        return cls(scalar, size, Path(path))

    def __str__(self) -> str:
        return f"{self.scalar}:{self.size}:{self.path}"


def format_report(result: ScanResult) -> str:
    return f"the point furthest from {result.kind.origin()} in {result.source} is {result.maximum}"


def scan_file(path: Union[str, Path], kind: PointKind, *, config: Optional[ScanConfig] = None) -> ScanResult:
    """Scan one file; the file is closed on every exit path."""
    config = config or get_scan_config()
    source = str(path)
    try:
        with open(path, "r", encoding=config.encoding, errors=config.errors, newline=config.newline) as fin:
            return find_max(TextCursor(fin, name=source), kind, name=source)
    except (OSError, LookupError) as exc:
        # LookupError: unknown encoding passed to open()
        failure = ParseFailure.from_error(exc)
        logger.error("unable to open %s: %s", source, exc)
        return ScanResult(
            source=source,
            kind=kind,
            status=ScanStatus.ABORTED,
            events=[ScanEvent(source, failure)],
            error=failure,
        )


def print_max(job: Job, *, out: Optional[TextIO] = None, config: Optional[ScanConfig] = None) -> ScanResult:
    out = out or sys.stdout
    kind = job.kind
    logger.info("Scanning %s as %s[%d]", job.path, scalar_name(kind.dtype), kind.size)
    result = scan_file(job.path, kind, config=config)
    if result.found:
        print(format_report(result) + "\n", file=out)
    else:
        logger.error("no maximum found in %s (%s)", result.source, result.status.value)
    return result


def run_jobs(
    jobs: Iterable[Job], *, out: Optional[TextIO] = None, config: Optional[ScanConfig] = None
) -> List[ScanResult]:
    return [print_max(job, out=out, config=config) for job in jobs]


apply_debug_logging(globals(), logger=logger, skip={"format_report"})
