"""A minimal runner for check functions that report success with a status of 1."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

from forkcheck.printf import ft_printf


class SegmentationFault(Exception):
    """Raised by a check to report an invalid memory access."""


class BusError(Exception):
    """Raised by a check to report a misaligned memory access."""


class Outcome(enum.Enum):
    """How a single check finished."""

    OK = "ok"
    KO = "ko"
    EXITED = "exited"
    SEGFAULT = "segfault"
    BUSERROR = "buserror"
    SIGNALED = "signaled"

    @property
    def banner(self) -> str:
        """Text printed after the check's name."""
        return _BANNERS[self]


_BANNERS = {
    Outcome.OK: " \033[32m[OK]\033[0m\n",
    Outcome.KO: "\033[31m[KO]\033[0m\n",
    Outcome.EXITED: "",
    Outcome.SEGFAULT: "\033[31m[SEGFAULT]\033[0m\n",
    Outcome.BUSERROR: "\033[31m[BUSERROR]\033[0m\n",
    Outcome.SIGNALED: "exited because of some other signal.\n",
}


@dataclass(frozen=True)
class UnitTest:
    """A named check; the callable returns a true value (1) on success."""

    name: str
    fct: Callable[[], Any]


def _exit_code(code: Any) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code & 0xFF
    return 1


def _status_outcome(status: int) -> Outcome:
    if status == 1:
        return Outcome.OK
    if status == 0:
        return Outcome.KO
    return Outcome.EXITED


class TestSuite:
    """An ordered collection of checks run one after another."""

    __test__ = False

    def __init__(self, tests: Iterable[UnitTest] = ()) -> None:
        self._tests: list[UnitTest] = list(tests)

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[UnitTest]:
        return iter(self._tests)

    def load_test(self, name: str, fct: Callable[[], Any]) -> "TestSuite":
        """Append a check to the end of the suite and return the suite."""
        self._tests.append(UnitTest(name, fct))
        return self

    def run_one(self, test: UnitTest) -> Outcome:
        """Run one check and classify how it finished."""
        try:
            result = test.fct()
        except SystemExit as stop:
            return _status_outcome(_exit_code(stop.code))
        except (SegmentationFault, TypeError, AttributeError):
            return Outcome.SEGFAULT
        except BusError:
            return Outcome.BUSERROR
        except Exception:
            return Outcome.SIGNALED
        status = 0 if result is None else operator.index(result) & 0xFF
        return _status_outcome(status)

    def launch(self, stream: Optional[TextIO] = None) -> tuple[int, int]:
        """Run every check, report each, and return (successes, total)."""
        successes = 0
        total = 0
        for test in self._tests:
            total += 1
            ft_printf("%s ", test.name, stream=stream)
            outcome = self.run_one(test)
            if outcome is Outcome.OK:
                successes += 1
            ft_printf("%s", outcome.banner, stream=stream)
        ft_printf("\n%d/%d tests checked\n", successes, total, stream=stream)
        return successes, total