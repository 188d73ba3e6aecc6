"""Per-interface network counters and transfer rates."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import psutil

_LOOPBACK = frozenset({"lo", "lo0"})


@dataclass
class NetworkMetrics:
    """Counters for one interface, with byte rates since the last sample."""

    interface: str
    bytes_sent: int = 0
    bytes_recv: int = 0
    packets_sent: int = 0
    packets_recv: int = 0
    bytes_sent_rate: float = 0.0
    bytes_recv_rate: float = 0.0


class NetworkMonitor:
    """Tracks interface counters between calls to compute rates."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last_stats: dict[str, Any] = {}
        self._last_time = clock()

    def get_metrics(self) -> list[NetworkMetrics]:
        """Return counters for every non-loopback interface."""
        stats = psutil.net_io_counters(pernic=True)
        now = self._clock()
        elapsed = now - self._last_time

        metrics = []
        for name, stat in stats.items():
            if name in _LOOPBACK:
                continue
            metric = NetworkMetrics(
                interface=name,
                bytes_sent=int(stat.bytes_sent),
                bytes_recv=int(stat.bytes_recv),
                packets_sent=int(stat.packets_sent),
                packets_recv=int(stat.packets_recv),
            )
            previous = self._last_stats.get(name)
            if previous is not None and elapsed > 0:
                metric.bytes_sent_rate = _rate(stat.bytes_sent, previous.bytes_sent, elapsed)
                metric.bytes_recv_rate = _rate(stat.bytes_recv, previous.bytes_recv, elapsed)
            metrics.append(metric)
            self._last_stats[name] = stat

        self._last_time = now
        return metrics


def _rate(current: int, previous: int, elapsed: float) -> float:
    # A counter that went backwards was reset; report no traffic rather than a negative rate.
    return max(current - previous, 0) / elapsed