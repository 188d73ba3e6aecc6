"""Aggregate snapshot of all hardware metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import psutil

from hwmonitor.battery import BatteryMetrics, BatteryMonitor
from hwmonitor.cpu import CPUMetrics, CPUMonitor
from hwmonitor.disk import DiskMetrics, DiskMonitor
from hwmonitor.memory import MemoryMetrics, MemoryMonitor
from hwmonitor.network import NetworkMetrics, NetworkMonitor
from hwmonitor.temperature import TemperatureMetrics, TemperatureMonitor

_ERRORS = (OSError, psutil.Error)


class MonitorError(Exception):
    """Raised when a required metric cannot be collected."""


@dataclass
class Metrics:
    """One snapshot of every metric the monitor collects."""

    timestamp: datetime = field(default_factory=datetime.now)
    cpu: CPUMetrics = field(default_factory=CPUMetrics)
    memory: MemoryMetrics = field(default_factory=MemoryMetrics)
    disk: list[DiskMetrics] = field(default_factory=list)
    battery: BatteryMetrics = field(default_factory=BatteryMetrics)
    network: list[NetworkMetrics] = field(default_factory=list)
    temperature: TemperatureMetrics = field(default_factory=TemperatureMetrics)


class Monitor:
    """Collects metrics from each hardware monitor."""

    def __init__(
        self,
        *,
        cpu=None,
        memory=None,
        disk=None,
        battery=None,
        network=None,
        temperature=None,
    ) -> None:
        self._cpu = cpu or CPUMonitor()
        self._memory = memory or MemoryMonitor()
        self._disk = disk or DiskMonitor()
        self._battery = battery or BatteryMonitor()
        self._network = network or NetworkMonitor()
        self._temperature = temperature or TemperatureMonitor()

    def get_all_metrics(self) -> Metrics:
        """Collect a full snapshot; battery and temperature failures are tolerated."""
        metrics = Metrics(timestamp=datetime.now())

        metrics.cpu = _required("CPU", self._cpu)
        metrics.memory = _required("memory", self._memory)
        metrics.disk = _required("disk", self._disk)

        try:
            metrics.battery = self._battery.get_metrics()
        except _ERRORS:
            pass

        metrics.network = _required("network", self._network)

        try:
            metrics.temperature = self._temperature.get_metrics()
        except _ERRORS:
            pass

        return metrics


def _required(name, source):
    try:
        return source.get_metrics()
    except _ERRORS as exc:
        raise MonitorError(f"failed to get {name} metrics: {exc}") from exc