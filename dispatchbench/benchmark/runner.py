import time
import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..counter import ICounter
from .models import TrialRecord, BenchmarkSummary

LIMIT = 10_000_000
TRIALS = 10


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


def effective_divisor(elapsed_ms: int) -> int:
    """Elapsed milliseconds, with zero clamped to 1."""
    return elapsed_ms if elapsed_ms != 0 else 1


def divide(count: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(count) // abs(divisor)
    return quotient if (count < 0) == (divisor < 0) else -quotient


def compute_score(count: int, elapsed_ms: int) -> int:
    """Calls per millisecond. A zero elapsed time is treated as 1ms."""
    return divide(count, effective_divisor(elapsed_ms))


class BenchmarkRunner:
    """
    Times a fixed number of increment calls through the ICounter interface,
    repeated over several trials, and keeps the best throughput.
    """

    def __init__(
        self,
        counter: ICounter,
        limit: int = LIMIT,
        trials: int = TRIALS,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.counter = counter
        self.limit = limit
        self.trials = trials
        self.clock = clock or _wall_clock_ms

        self.logger = logging.getLogger("Benchmark")
        self.records: List[TrialRecord] = []

    def run_loop(self) -> None:
        """Call increment() exactly `limit` times."""
        counter = self.counter
        for _ in range(self.limit):
            counter.increment()

    def run_trial(self, index: int) -> TrialRecord:
        """Reset, time one loop and compute its score."""
        self.counter.reset()

        before = self.clock()
        self.run_loop()
        after = self.clock()

        elapsed = after - before
        if elapsed == 0:
            self.logger.debug(f"Trial {index}: elapsed time is 0ms, dividing by 1")

        divisor = effective_divisor(elapsed)
        count = self.counter.read()
        record = TrialRecord(
            index=index,
            timestamp=datetime.now().isoformat(),
            count=count,
            elapsed_ms=elapsed,
            divisor=divisor,
            score=divide(count, divisor),
        )
        self.logger.debug(
            f"Trial {index}: count={record.count} elapsed={record.elapsed_ms}ms "
            f"divisor={record.divisor} score={record.score}"
        )
        return record

    def run(self) -> BenchmarkSummary:
        """Run all trials, printing each score and then the best one."""
        t0 = time.time()
        self.records = []
        best = 0

        self.logger.info(f"Running {self.trials} trials of {self.limit} calls")
        for i in range(self.trials):
            record = self.run_trial(i)
            self.records.append(record)

            print(f"Current score: {record.score}")
            if record.score > best:
                best = record.score

        print(f"Calls per millisecond: {best}")

        return BenchmarkSummary(
            timestamp=datetime.now().isoformat(),
            duration=time.time() - t0,
            limit=self.limit,
            trials=self.records,
            best_score=best,
        )
