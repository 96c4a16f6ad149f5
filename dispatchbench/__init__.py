"""
dispatchbench

Microbenchmark measuring indirectly dispatched increment calls per millisecond.
"""

from .counter import ICounter, Counter
from .errors import BenchmarkError, ConfigError

__version__ = "1.0.0"

__all__ = [
    "ICounter",
    "Counter",
    "BenchmarkError",
    "ConfigError",
    "__version__",
]
