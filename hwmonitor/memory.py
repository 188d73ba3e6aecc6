"""Virtual memory usage."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


@dataclass
class MemoryMetrics:
    """System memory figures in bytes, with the used share in percent."""

    total: int = 0
    used: int = 0
    free: int = 0
    used_percent: float = 0.0


class MemoryMonitor:
    """Reports system memory usage."""

    def get_metrics(self) -> MemoryMetrics:
        """Read the current virtual memory statistics."""
        stats = psutil.virtual_memory()
        return MemoryMetrics(
            total=int(stats.total),
            used=int(stats.used),
            free=int(stats.free),
            used_percent=float(stats.percent),
        )