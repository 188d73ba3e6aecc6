"""Battery charge and charging state."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


@dataclass
class BatteryMetrics:
    """Battery state; is_available is False when no battery is reported."""

    charge_percent: float = 0.0
    is_charging: bool = False
    is_available: bool = False


class BatteryMonitor:
    """Reports battery status where the platform exposes it."""

    def get_metrics(self) -> BatteryMetrics:
        """Read the battery state, or report it as unavailable."""
        reader = getattr(psutil, "sensors_battery", None)
        if reader is None:
            return BatteryMetrics()
        try:
            battery = reader()
        except (OSError, psutil.Error, RuntimeError):
            return BatteryMetrics()
        if battery is None:
            return BatteryMetrics()
        return BatteryMetrics(
            charge_percent=float(battery.percent),
            is_charging=bool(battery.power_plugged),
            is_available=True,
        )