"""Checks for ft_itoa."""

from __future__ import annotations

from forkcheck.libft import ft_itoa, ft_strcmp
from forkcheck.runner import TestSuite


def _matches(expected: str, n: int) -> int:
    return int(ft_strcmp(expected, ft_itoa(n)) == 0)


def itoa_test_1() -> int:
    """The largest 32-bit integer renders exactly."""
    return _matches("2147483647", 2147483647)


def itoa_test_2() -> int:
    """The smallest 32-bit integer renders exactly."""
    return _matches("-2147483648", -2147483648)


def itoa_test_3() -> int:
    """A negative number renders with its sign."""
    return _matches("-12345", -12345)


def itoa_test_4() -> int:
    """Zero renders as a single digit."""
    return _matches("0", 0)


def itoa_test_5() -> int:
    """Deliberately wrong expectation; this check is meant to fail."""
    return _matches("999", 123)


def itoa_suite() -> TestSuite:
    """Build the ft_itoa suite in its fixed order."""
    return (
        TestSuite()
        .load_test("ITOA: basic test", itoa_test_1)
        .load_test("ITOA: wrong test", itoa_test_2)
        .load_test("ITOA: empty test", itoa_test_3)
        .load_test("ITOA: 0 test", itoa_test_4)
        .load_test("ITOA: long test", itoa_test_5)
    )