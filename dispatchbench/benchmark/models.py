from dataclasses import dataclass, field, asdict
from typing import Dict, List, Any


@dataclass
class TrialRecord:
    """Single timed trial."""
    index: int
    timestamp: str

    # Counter value read back after the loop
    count: int = 0

    # Timings (milliseconds)
    elapsed_ms: int = 0
    divisor: int = 1  # elapsed_ms, clamped to 1 when zero

    # Calls per millisecond, integer division
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class BenchmarkSummary:
    """Complete benchmark summary."""
    timestamp: str
    duration: float
    limit: int

    trials: List[TrialRecord] = field(default_factory=list)
    best_score: int = 0

    @property
    def best_trial(self) -> int:
        """Index of the first trial that reached the best score, or -1."""
        for t in self.trials:
            if t.score == self.best_score:
                return t.index
        return -1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "duration": self.duration,
            "limit": self.limit,
            "best_score": self.best_score,
            "best_trial": self.best_trial,
            "trials": [t.to_dict() for t in self.trials],
        }
