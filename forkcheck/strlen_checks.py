"""Checks for ft_strlen."""

from __future__ import annotations

from forkcheck.libft import ft_strlen
from forkcheck.runner import TestSuite


def str_len_test_1() -> int:
    """A short word has the expected length."""
    return int(ft_strlen("hallo") == 5)


def str_len_test_2() -> int:
    """Deliberately wrong expectation; this check is meant to fail."""
    return int(ft_strlen("hallo") == 1)


def str_len_test_3() -> int:
    """The empty string has length zero."""
    return int(ft_strlen("") == 0)


def str_len_test_4() -> int:
    """Measuring a missing string is an invalid access."""
    return int(not ft_strlen(None))


def str_len_test_5() -> int:
    """A longer mixed string has the expected length."""
    return int(ft_strlen("12234351643246823sdgfd") == 22)


def str_len_suite() -> TestSuite:
    """Build the ft_strlen suite in its fixed order."""
    return (
        TestSuite()
        .load_test("STRLEN: basic test", str_len_test_1)
        .load_test("STRLEN: wrong test", str_len_test_2)
        .load_test("STRLEN: empty test", str_len_test_3)
        .load_test("STRLEN: segfault test", str_len_test_4)
        .load_test("STRLEN: long test", str_len_test_5)
    )