import argparse
import codecs
import logging
import sys
from typing import List, Optional, Sequence

from furthest_point import Job, get_scan_config, run_jobs
from furthest_point.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _parse_job(value: str) -> Job:
    try:
        return Job.parse(value)
    except (TypeError, ValueError) as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="furthest-point",
        description="Report the point furthest from the origin in each input file",
    )
    parser.add_argument(
        "jobs",
        nargs="+",
        type=_parse_job,
        metavar="TYPE:DIM:PATH",
        help="Scalar type (int, long, float, double), dimension and file to scan",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--encoding",
        type=_parse_encoding,
        help="Text encoding of the input files (default: utf-8)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any file yields no maximum",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    config = get_scan_config().with_overrides(encoding=args.encoding)
    jobs: List[Job] = args.jobs
    logger.info("Scanning %d file(s)", len(jobs))
    results = run_jobs(jobs, config=config)

    missing = [result.source for result in results if not result.found]
    if missing:
        logger.warning("No maximum found for %d of %d file(s)", len(missing), len(results))
        if args.strict:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
