"""CPU temperature readings."""

from __future__ import annotations

from dataclasses import dataclass

import psutil

_CPU_SENSOR_KEYS = frozenset({"coretemp", "cpu", "CPU", "Package id 0"})


@dataclass
class TemperatureMetrics:
    """CPU temperature in degrees Celsius, when a sensor is available."""

    cpu_temp: float = 0.0
    is_available: bool = False


class TemperatureMonitor:
    """Reports the CPU temperature from the platform's sensors."""

    def get_metrics(self) -> TemperatureMetrics:
        """Return a CPU sensor reading, or the mean of all sensors."""
        reader = getattr(psutil, "sensors_temperatures", None)
        if reader is None:
            return TemperatureMetrics()
        try:
            groups = reader()
        except (OSError, psutil.Error, RuntimeError):
            return TemperatureMetrics()

        readings = [
            (name, entry.label, float(entry.current))
            for name, entries in (groups or {}).items()
            for entry in entries
        ]

        for name, label, current in readings:
            if name in _CPU_SENSOR_KEYS or label in _CPU_SENSOR_KEYS:
                return TemperatureMetrics(cpu_temp=current, is_available=True)

        if readings:
            mean = sum(current for _, _, current in readings) / len(readings)
            return TemperatureMetrics(cpu_temp=mean, is_available=True)

        return TemperatureMetrics()