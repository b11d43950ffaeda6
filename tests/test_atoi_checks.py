import io

import pytest

from forkcheck.atoi_checks import (
    atoi_suite,
    atoi_test_1,
    atoi_test_2,
    atoi_test_3,
    atoi_test_4,
    atoi_test_5,
)
from forkcheck.libft import ft_atoi
from forkcheck.runner import Outcome


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("-12345", -12345),
        ("000042", 42),
    ],
)
def test_source_cases_parse(text, expected):
    assert ft_atoi(text) == expected


def test_fail_case_really_differs():
    assert ft_atoi("123") != 999
    assert ft_atoi("123") == 123


@pytest.mark.parametrize("check", [atoi_test_1, atoi_test_2, atoi_test_4, atoi_test_5])
def test_passing_checks_return_one(check):
    assert check() == 1


def test_fail_check_returns_zero():
    assert atoi_test_3() == 0


def test_suite_order_and_names():
    names = [test.name for test in atoi_suite()]
    assert names == [
        "atoi: max test",
        "atoi: min test",
        "atoi: fail test",
        "atoi: negative test",
        "atoi: spaces test",
    ]


def test_suite_outcomes():
    suite = atoi_suite()
    outcomes = [suite.run_one(test) for test in suite]
    assert outcomes == [
        Outcome.OK,
        Outcome.OK,
        Outcome.KO,
        Outcome.OK,
        Outcome.OK,
    ]


def test_suite_launch_report():
    out = io.StringIO()
    assert atoi_suite().launch(stream=out) == (4, 5)
    text = out.getvalue()
    assert "atoi: fail test \033[31m[KO]\033[0m\n" in text
    assert text.endswith("\n4/5 tests checked\n")