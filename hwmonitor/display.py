"""Terminal rendering of hardware metrics."""

from __future__ import annotations

import os
import subprocess
import sys
from datetime import datetime
from typing import TextIO

from termcolor import colored

from hwmonitor.battery import BatteryMetrics
from hwmonitor.cpu import CPUMetrics
from hwmonitor.disk import DiskMetrics
from hwmonitor.memory import MemoryMetrics
from hwmonitor.monitor import Metrics
from hwmonitor.network import NetworkMetrics
from hwmonitor.temperature import TemperatureMetrics

GOOD = "good"
NORMAL = "normal"
WARNING = "warning"
CRITICAL = "critical"

_TITLE = "title"
_HEADER = "header"

_STYLES: dict[str, tuple[str, tuple[str, ...]]] = {
    _TITLE: ("cyan", ("bold",)),
    _HEADER: ("yellow", ("bold",)),
    NORMAL: ("white", ()),
    WARNING: ("yellow", ()),
    CRITICAL: ("red", ("bold",)),
    GOOD: ("green", ()),
}

_UNITS = "KMGTPE"
_CLEAR_SCREEN = "\033[H\033[2J"


def format_bytes(num: int) -> str:
    """Format a byte count with binary units, e.g. ``1.5 KB``."""
    if num < 0:
        raise ValueError(f"byte count must not be negative: {num}")
    if num < 1024:
        return f"{num} B"
    div, exp = 1024, 0
    n = num // 1024
    while n >= 1024 and exp < len(_UNITS) - 1:
        div *= 1024
        exp += 1
        n //= 1024
    return f"{num / div:.1f} {_UNITS[exp]}B"


class Display:
    """Writes a full-screen report of a metrics snapshot."""

    def __init__(self, color_enabled: bool = True, stream: TextIO | None = None) -> None:
        self.color_enabled = color_enabled
        self._stream = stream

    def render(self, metrics: Metrics) -> None:
        """Clear the screen and print every section of the snapshot."""
        self._clear_screen()

        self._title("System Monitor", metrics.timestamp)
        self._write("\n")

        self._cpu(metrics.cpu)
        self._write("\n")

        self._memory(metrics.memory)
        self._write("\n")

        self._disks(metrics.disk)
        self._write("\n")

        self._network(metrics.network)
        self._write("\n")

        if metrics.battery.is_available:
            self._battery(metrics.battery)
            self._write("\n")

        if metrics.temperature.is_available:
            self._temperature(metrics.temperature)
            self._write("\n")

        self._out().flush()

    def bar(self, percent: float, width: int) -> str:
        """Return a bracketed progress bar of ``width`` cells."""
        filled = min(max(int(percent * width / 100), 0), width)
        empty = width - filled
        if self.color_enabled:
            fill = self._paint(self.color_for_percent(percent), "█" * filled)
        else:
            fill = "=" * filled
        return f"[{fill}{' ' * empty}]"

    def color_for_percent(self, percent: float) -> str:
        """Return the severity level used to colour a percentage."""
        if not self.color_enabled:
            return NORMAL
        if percent >= 90:
            return CRITICAL
        if percent >= 75:
            return WARNING
        if percent < 50:
            return GOOD
        return NORMAL

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out().write(text)

    def _paint(self, level: str, text: str) -> str:
        if not self.color_enabled or not text:
            return text
        color, attrs = _STYLES[level]
        return colored(text, color, attrs=list(attrs) or None)

    def _clear_screen(self) -> None:
        if os.name == "nt":
            self._out().flush()
            subprocess.run(["cmd", "/c", "cls"], check=False)
        else:
            self._write(_CLEAR_SCREEN)

    def _title(self, title: str, timestamp: datetime) -> None:
        self._write(self._paint(_TITLE, f"=== {title} === {timestamp:%H:%M:%S} ===") + "\n")

    def _header(self, text: str) -> None:
        self._write(self._paint(_HEADER, text) + "\n")

    def _cpu(self, cpu: CPUMetrics) -> None:
        self._header("CPU Usage:")
        level = self.color_for_percent(cpu.total_usage)
        self._write(
            "  Total: "
            + self._paint(level, f"{cpu.total_usage:.1f}%")
            + " "
            + self.bar(cpu.total_usage, 30)
            + "\n"
        )
        for index, usage in enumerate(cpu.usage_per_core):
            level = self.color_for_percent(usage)
            self._write(
                f"  Core {index}: "
                + self._paint(level, f"{usage:5.1f}%")
                + " "
                + self.bar(usage, 25)
                + "\n"
            )

    def _memory(self, mem: MemoryMetrics) -> None:
        self._header("Memory Usage:")
        level = self.color_for_percent(mem.used_percent)
        text = f"{format_bytes(mem.used)} / {format_bytes(mem.total)} ({mem.used_percent:.1f}%)"
        self._write(
            "  RAM: " + self._paint(level, text) + " " + self.bar(mem.used_percent, 30) + "\n"
        )

    def _disks(self, disks: list[DiskMetrics]) -> None:
        self._header("Disk Usage:")
        for disk in disks:
            level = self.color_for_percent(disk.used_percent)
            text = (
                f"{format_bytes(disk.used)} / {format_bytes(disk.total)} "
                f"({disk.used_percent:.1f}%)"
            )
            self._write(
                f"  {disk.mount_point}: "
                + self._paint(level, text)
                + " "
                + self.bar(disk.used_percent, 20)
                + "\n"
            )

    def _network(self, networks: list[NetworkMetrics]) -> None:
        self._header("Network Usage:")
        for net in networks:
            recv_rate = format_bytes(max(int(net.bytes_recv_rate), 0))
            sent_rate = format_bytes(max(int(net.bytes_sent_rate), 0))
            self._write(f"  {net.interface}:\n")
            self._write(self._paint(NORMAL, f"    ↓ {recv_rate}/s"))
            self._write("  ")
            self._write(self._paint(NORMAL, f"↑ {sent_rate}/s"))
            self._write(
                f"  (Total: ↓ {format_bytes(net.bytes_recv)} ↑ {format_bytes(net.bytes_sent)})\n"
            )

    def _battery(self, battery: BatteryMetrics) -> None:
        self._header("Battery:")
        if battery.charge_percent < 20:
            level = CRITICAL
        elif battery.charge_percent < 50:
            level = WARNING
        else:
            level = GOOD
        status = "Charging" if battery.is_charging else "Discharging"
        self._write(
            "  "
            + self._paint(level, f"{battery.charge_percent:.1f}% ({status})")
            + " "
            + self.bar(battery.charge_percent, 30)
            + "\n"
        )

    def _temperature(self, temp: TemperatureMetrics) -> None:
        self._header("Temperature:")
        if temp.cpu_temp > 80:
            level = CRITICAL
        elif temp.cpu_temp > 70:
            level = WARNING
        elif temp.cpu_temp < 50:
            level = GOOD
        else:
            level = NORMAL
        self._write("  CPU: " + self._paint(level, f"{temp.cpu_temp:.1f}°C") + "\n")