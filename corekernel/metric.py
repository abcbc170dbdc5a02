"""Counters and timings for named operations."""

from __future__ import annotations

import threading
import time


class Metric:
    """Success, failure and accumulated-time counters for one kind of operation."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._time = 0
        self._count = 0
        self._fail = 0

    def record(self, start: float, failed: bool) -> None:
        """Add the time elapsed since ``start`` and count one success or failure.

        ``start`` is a reading of :func:`time.perf_counter`.
        """
        elapsed = max(0, int((time.perf_counter() - start) * 1_000_000_000))
        with self._lock:
            self._time += elapsed
            if failed:
                self._fail += 1
            else:
                self._count += 1

    def stats(self) -> str:
        """Describe totals and the average time of a successful run."""
        with self._lock:
            elapsed, count, fail = self._time, self._count, self._fail
        total = count + fail
        if total == 0:
            return "Chưa có dữ liệu"
        average = elapsed // count if count > 0 else 0
        return (
            f"Tổng: {total} lần ({count} thành công, {fail} thất bại), "
            f"Thời gian trung bình: {average}ns"
        )

    def rate(self) -> float:
        """Failures per success; 0.0 when nothing succeeded yet."""
        with self._lock:
            count, fail = self._count, self._fail
        if count == 0:
            return 0.0
        return fail / count


class Registry:
    """Holds one :class:`Metric` per operation name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._metrics: dict[str, Metric] = {}

    def _entry(self, name: str) -> Metric:
        with self._lock:
            metric = self._metrics.get(name)
            if metric is None:
                metric = self._metrics[name] = Metric()
            return metric

    def record(self, name: str, failed: bool) -> None:
        """Count one run of ``name`` as a success or a failure."""
        start = time.perf_counter()
        self._entry(name).record(start, failed)

    def get(self, name: str) -> Metric:
        """Return the metric for ``name``, creating it when absent."""
        return self._entry(name)

    def stats(self) -> str:
        """One ``name: stats`` line per metric."""
        with self._lock:
            items = list(self._metrics.items())
        return "\n".join(f"{name}: {metric.stats()}" for name, metric in items)