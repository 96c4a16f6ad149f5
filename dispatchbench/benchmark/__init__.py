"""
Benchmark Package

Runs the fixed dispatch-throughput scenario and writes optional reports.
"""

from .models import TrialRecord, BenchmarkSummary
from .runner import BenchmarkRunner, compute_score, LIMIT, TRIALS
from .reporting import ReportGenerator

__all__ = [
    "TrialRecord",
    "BenchmarkSummary",
    "BenchmarkRunner",
    "ReportGenerator",
    "compute_score",
    "LIMIT",
    "TRIALS",
]
