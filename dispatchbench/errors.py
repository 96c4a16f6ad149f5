"""
Benchmark Errors

Exception hierarchy surfaced to the command line.
"""


class BenchmarkError(Exception):
    """Base class for all dispatchbench errors."""


class ConfigError(BenchmarkError):
    """Raised when settings cannot be loaded or are invalid."""
