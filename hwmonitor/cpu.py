"""CPU utilisation sampling."""

from __future__ import annotations

from dataclasses import dataclass, field

import psutil


@dataclass
class CPUMetrics:
    """CPU utilisation, overall and per logical core, in percent."""

    usage_per_core: list[float] = field(default_factory=list)
    total_usage: float = 0.0
    core_count: int = 0


class CPUMonitor:
    """Reports CPU utilisation since the previous sample."""

    def get_metrics(self) -> CPUMetrics:
        """Sample per-core and total CPU usage without blocking."""
        per_core = [float(value) for value in psutil.cpu_percent(interval=None, percpu=True)]
        total = float(psutil.cpu_percent(interval=None))
        return CPUMetrics(
            usage_per_core=per_core,
            total_usage=total,
            core_count=len(per_core),
        )