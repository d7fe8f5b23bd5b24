"""Process-local counters and timers for analysis runs.

The analyzer records into the module-level ``metrics``; ``stillpoint -v``
logs the totals once the command finishes.
"""

import time
from collections import Counter, defaultdict
from contextlib import contextmanager

import structlog

logger = structlog.get_logger().bind(source="observability")


class Metrics:
    """Named counters plus per-name duration samples (seconds)."""

    def __init__(self):
        self._counts: Counter = Counter()
        self._durations: defaultdict[str, list[float]] = defaultdict(list)

    def counter(self, name: str, value: int = 1):
        self._counts[name] += value

    @contextmanager
    def timer(self, name: str):
        """Record how long the block took, even if it raised."""
        started = time.perf_counter()
        try:
            yield
        finally:
            self._durations[name].append(time.perf_counter() - started)

    def summary(self) -> dict:
        """Counters as-is; timers as count, total, avg and max in milliseconds."""
        timers = {}
        for name, samples in self._durations.items():
            total_ms = sum(samples) * 1000
            timers[name] = {
                "count": len(samples),
                "total_ms": round(total_ms, 3),
                "avg_ms": round(total_ms / len(samples), 3),
                "max_ms": round(max(samples) * 1000, 3),
            }
        return {"counters": dict(self._counts), "timers": timers}

    def reset(self):
        self._counts.clear()
        self._durations.clear()


metrics = Metrics()


def log_run_summary():
    """Emit one ``run_summary`` event with everything recorded so far."""
    logger.info("run_summary", **metrics.summary())
