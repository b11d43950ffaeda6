import io

import pytest

from forkcheck.dummy_checks import buserror_test_1, dummy_suite
from forkcheck.runner import BusError, Outcome


def test_buserror_check_raises_bus_error():
    with pytest.raises(BusError):
        buserror_test_1()


def test_suite_holds_single_named_check():
    suite = dummy_suite()
    assert [test.name for test in suite] == ["dummy: buserror test"]
    assert [test.fct for test in suite] == [buserror_test_1]


def test_run_one_reports_bus_error():
    suite = dummy_suite()
    (test,) = list(suite)
    assert suite.run_one(test) is Outcome.BUSERROR


def test_launch_counts_no_successes():
    stream = io.StringIO()
    assert dummy_suite().launch(stream) == (0, 1)
    output = stream.getvalue()
    assert output.startswith("dummy: buserror test ")
    assert "[BUSERROR]" in output
    assert output.endswith("\n0/1 tests checked\n")