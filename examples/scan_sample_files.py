"""Example: scan the bundled sample files the same way the CLI does."""

from pathlib import Path

from furthest_point import Job, run_jobs
from furthest_point.logging_utils import configure_logging

HERE = Path(__file__).parent

JOBS = [
    Job("int", 1, HERE / "input-int-1.txt"),
    Job("int", 2, HERE / "input-int-2.txt"),
    Job("int", 5, HERE / "input-int-5.txt"),
    Job("double", 2, HERE / "input-double-2.txt"),
    Job("double", 3, HERE / "input-double-3.txt"),
    Job("int", 3, HERE / "input-int-3-bad.txt"),
    Job("int", 4, HERE / "input-int-4-very-bad.txt"),
]


def main() -> None:
    configure_logging("WARNING")
    results = run_jobs(JOBS)
    found = sum(1 for result in results if result.found)
    print(f"{found} of {len(results)} file(s) produced a maximum")


if __name__ == "__main__":
    main()
