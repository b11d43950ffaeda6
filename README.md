# forkcheck

forkcheck is a small runner for unit checks. A check is a function that takes
no arguments. The runner calls each check and prints its name and one result:

- `[OK]`: the check returned `1` (or `True`), or exited with status 1
- `[KO]`: the check returned `0`, `False` or `None`, or exited with status 0
- `[SEGFAULT]`: the check raised `forkcheck.runner.SegmentationFault`,
  `TypeError` or `AttributeError`
- `[BUSERROR]`: the check raised `forkcheck.runner.BusError`
- `exited because of some other signal.`: the check raised any other exception

If a check exits with any other status, nothing is printed after its name.
Each suite ends with a summary line such as `3/5 tests checked`.

The package also ships the functions that are checked and a small
`printf`-style formatter. It also ships a suite of checks for each function.
Some of those checks are meant to fail, and one is meant to report a bus
error, so that every kind of result appears in a run.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Running the suites

```
forkcheck
```

This runs the dummy, strlen, atoi and itoa suites in that order and writes the
report to standard output. The command takes no options apart from `--help`.
`forkcheck.cli.main(argv=None)` does the same from Python and returns `0`.

The suites can also be built one at a time:

| Function | Suite |
|----------|-------|
| `forkcheck.dummy_checks.dummy_suite()` | one check that always reports a bus error |
| `forkcheck.strlen_checks.str_len_suite()` | five `ft_strlen` checks |
| `forkcheck.atoi_checks.atoi_suite()` | five `ft_atoi` checks |
| `forkcheck.itoa_checks.itoa_suite()` | five `ft_itoa` checks |

## Writing your own suite

```python
import sys

from forkcheck.runner import TestSuite


def adds_up():
    return 1 + 1 == 2


suite = TestSuite()
suite.load_test("math: addition", adds_up)
successes, total = suite.launch(sys.stdout)
```

- `TestSuite.load_test(name, fct)` adds a check to the end of the suite and
  returns the suite, so that calls can be chained.
- `TestSuite.run_one(test)` runs one `UnitTest` and returns an `Outcome`:
  `OK`, `KO`, `EXITED`, `SEGFAULT`, `BUSERROR` or `SIGNALED`.
- `TestSuite.launch(stream=None)` runs every check in order and prints the
  report to `stream`, or to standard output if no stream is given. It returns
  `(successes, total)`.

## String helpers

`forkcheck.libft` provides:

- `ft_strlen(s)`: the number of characters before the first NUL. Passing
  `None` raises `TypeError`.
- `ft_atoi(s)`: skips leading whitespace and reads one optional sign and then
  digits. It stops at the first character that is not a digit. The result
  wraps around as a 32-bit signed integer.
- `ft_itoa(n)`: a 32-bit signed integer as decimal text.
- `ft_strcmp(s1, s2)`: compares the strings only up to the end of the shorter
  one. It returns the code-point difference at the first mismatch, or `0`.

## Formatting

`forkcheck.printf.format_printf(fmt, *args)` returns the formatted text. A
`fmt` of `None` gives an empty string. `forkcheck.printf.ft_printf(fmt, *args,
stream=None)` writes the text to `stream`, or to standard output if no stream
is given. It returns the length of the text in UTF-8 bytes.

| Conversion | Output |
|------------|--------|
| `%d`, `%i` | 32-bit signed integer; with a space after `%`, a leading blank for values that are not negative |
| `%u` | 32-bit unsigned integer |
| `%x`, `%X` | 32-bit unsigned hexadecimal, in lower or upper case |
| `%p` | `0x` followed by lowercase hex; `None` or `0` gives `(nil)` on Linux and `0x0` elsewhere |
| `%c` | a one-character string, or an integer code |
| `%s` | a string; `None` gives `(null)` |
| `%%` | a literal percent sign |

A tab after `%` is written as it is. An unknown conversion such as `%k` is
written as `%k`, except on macOS, where it is written as `k`. If there are not
enough arguments, `TypeError` is raised. The helpers `format_int`,
`format_uint`, `format_hex` and `format_pointer` can also be called directly.

```python
from forkcheck.printf import format_printf

format_printf("%d/%d tests checked\n", 3, 5)   # '3/5 tests checked\n'
```

## Tracking objects

`forkcheck.gc.GarbageCollector(finalizer=None)` keeps objects in the order
they were tracked:

- `track(obj)` registers an object and returns it. Tracking `None` writes
  `Fatal: malloc fail` to standard error and exits with status 1.
- `release(obj)` drops that object and ignores objects that are not tracked.
- `clear()` drops everything, oldest first.
- `exit(status)` clears and then raises `SystemExit(status)`.

The finalizer, if one is given, is called on every object as it is dropped.
When used as a context manager, the collector clears itself on leaving the
block.

## What it does not do

Checks run inside the same Python process as the runner. They do not run in
child processes of their own. Crashes are recognised only through the
exceptions listed above. A check that really crashes the interpreter, or that
never returns, stops the whole run.

## Development

```
pip install -e ".[test]"
pytest
```