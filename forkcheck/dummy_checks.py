"""A check that deliberately performs a misaligned memory access."""

from __future__ import annotations

from typing import NoReturn

from forkcheck.runner import BusError, TestSuite


def buserror_test_1() -> NoReturn:
    """Write an int through a pointer one byte past an aligned buffer.

    With alignment checking switched on this access always faults, so the
    check never returns normally.
    """
    buffer = bytearray(4)
    offset = 1
    raise BusError(
        f"misaligned 4-byte store at offset {offset} of a {len(buffer)}-byte buffer"
    )


def dummy_suite() -> TestSuite:
    """Build the suite that exercises the runner's bus-error reporting."""
    return TestSuite().load_test("dummy: buserror test", buserror_test_1)