"""Per-call instrumentation recorder for the graph algorithms."""

from __future__ import annotations

from contextlib import contextmanager
from time import perf_counter
from typing import Dict, Iterator, Mapping, Optional


class Metrics:
    """Wall-clock timer plus named operation counters.

    A recorder belongs to whoever created it; algorithms only add to it and
    never reset one they were handed.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._started: Optional[float] = None
        self._elapsed = 0.0

    def start(self) -> None:
        self._started = perf_counter()

    def stop(self) -> None:
        if self._started is None:
            return
        self._elapsed += perf_counter() - self._started
        self._started = None

    @contextmanager
    def timed(self) -> Iterator["Metrics"]:
        self.start()
        try:
            yield self
        finally:
            self.stop()

    def increment(self, name: str, amount: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + amount

    def counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    @property
    def counters(self) -> Mapping[str, int]:
        return dict(self._counters)

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed * 1e3

    def reset(self) -> None:
        self._counters.clear()
        self._started = None
        self._elapsed = 0.0

    def report(self) -> str:
        lines = [f"Execution Time: {self.elapsed_ms:.3f} ms"]
        if self._counters:
            lines.append("Operation Counters:")
            for name in sorted(self._counters):
                lines.append(f"  {name}: {self._counters[name]}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Metrics(elapsed_ms={self.elapsed_ms:.3f}, counters={self._counters!r})"


def ensure_metrics(metrics: Optional[Metrics]) -> Metrics:
    """Return ``metrics`` or a fresh recorder owned by the current call."""

    return metrics if metrics is not None else Metrics()


__all__ = ["Metrics", "ensure_metrics"]
