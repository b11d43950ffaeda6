"""Run unit checks and report them as OK, KO or crash results; with string helpers, a printf-style formatter and an object tracker."""

__version__ = "0.1.0"