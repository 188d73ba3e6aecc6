"""Disk usage of mounted partitions."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


@dataclass
class DiskMetrics:
    """Usage of one mounted filesystem, in bytes and percent."""

    mount_point: str
    total: int = 0
    used: int = 0
    free: int = 0
    used_percent: float = 0.0


class DiskMonitor:
    """Reports usage for every physical mounted partition."""

    def get_metrics(self) -> list[DiskMetrics]:
        """Return usage per partition, skipping any that cannot be read."""
        metrics = []
        for partition in psutil.disk_partitions(all=False):
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except (OSError, psutil.Error):
                continue
            metrics.append(
                DiskMetrics(
                    mount_point=partition.mountpoint,
                    total=int(usage.total),
                    used=int(usage.used),
                    free=int(usage.free),
                    used_percent=float(usage.percent),
                )
            )
        return metrics