"""Command entry point that runs every bundled suite in turn."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from forkcheck.atoi_checks import atoi_suite
from forkcheck.dummy_checks import dummy_suite
from forkcheck.itoa_checks import itoa_suite
from forkcheck.strlen_checks import str_len_suite


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the dummy, strlen, atoi and itoa suites and report to stdout."""
    parser = argparse.ArgumentParser(
        prog="forkcheck",
        description="Run the bundled unit-test suites and report each result.",
    )
    parser.parse_args(argv)
    for build in (dummy_suite, str_len_suite, atoi_suite, itoa_suite):
        build().launch()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())