"""Checks for ft_atoi."""

from __future__ import annotations

from forkcheck.libft import ft_atoi
from forkcheck.runner import TestSuite


def atoi_test_1() -> int:
    """The largest 32-bit integer parses exactly."""
    return int(ft_atoi("2147483647") == 2147483647)


def atoi_test_2() -> int:
    """The smallest 32-bit integer parses exactly."""
    return int(ft_atoi("-2147483648") == -2147483648)


def atoi_test_3() -> int:
    """Deliberately wrong expectation; this check is meant to fail."""
    return int(ft_atoi("123") == 999)


def atoi_test_4() -> int:
    """A negative number keeps its sign."""
    return int(ft_atoi("-12345") == -12345)


def atoi_test_5() -> int:
    """Leading zeros are ignored."""
    return int(ft_atoi("000042") == 42)


def atoi_suite() -> TestSuite:
    """Build the ft_atoi suite in its fixed order."""
    return (
        TestSuite()
        .load_test("atoi: max test", atoi_test_1)
        .load_test("atoi: min test", atoi_test_2)
        .load_test("atoi: fail test", atoi_test_3)
        .load_test("atoi: negative test", atoi_test_4)
        .load_test("atoi: spaces test", atoi_test_5)
    )