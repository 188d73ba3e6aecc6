import pytest

from hwmonitor.battery import BatteryMetrics
from hwmonitor.cpu import CPUMetrics
from hwmonitor.disk import DiskMetrics
from hwmonitor.memory import MemoryMetrics
from hwmonitor.monitor import Metrics, Monitor, MonitorError
from hwmonitor.network import NetworkMetrics
from hwmonitor.temperature import TemperatureMetrics


class Stub:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def get_metrics(self):
        if self.error is not None:
            raise self.error
        return self.result


CPU = CPUMetrics([20.0, 30.0], 25.0, 2)
MEMORY = MemoryMetrics(100, 40, 60, 40.0)
DISKS = [DiskMetrics("/", 10, 5, 5, 50.0)]
BATTERY = BatteryMetrics(80.0, True, True)
NETWORK = [NetworkMetrics("eth0", 1, 2, 3, 4)]
TEMPERATURE = TemperatureMetrics(55.0, True)


def _monitor(**overrides):
    parts = {
        "cpu": Stub(CPU),
        "memory": Stub(MEMORY),
        "disk": Stub(DISKS),
        "battery": Stub(BATTERY),
        "network": Stub(NETWORK),
        "temperature": Stub(TEMPERATURE),
    }
    parts.update(overrides)
    return Monitor(**parts)


def test_collects_all_parts():
    metrics = _monitor().get_all_metrics()
    assert metrics.cpu == CPU
    assert metrics.memory == MEMORY
    assert metrics.disk == DISKS
    assert metrics.battery == BATTERY
    assert metrics.network == NETWORK
    assert metrics.temperature == TEMPERATURE


@pytest.mark.parametrize(
    "part, label",
    [("cpu", "CPU"), ("memory", "memory"), ("disk", "disk"), ("network", "network")],
)
def test_required_failure_raises(part, label):
    monitor = _monitor(**{part: Stub(error=OSError("boom"))})
    with pytest.raises(MonitorError, match=f"failed to get {label} metrics: boom"):
        monitor.get_all_metrics()


def test_optional_failures_fall_back_to_defaults():
    monitor = _monitor(
        battery=Stub(error=OSError("no battery")),
        temperature=Stub(error=OSError("no sensors")),
    )
    metrics = monitor.get_all_metrics()
    assert metrics.battery.is_available is False
    assert metrics.temperature.is_available is False
    assert metrics.cpu == CPU


def test_error_chain_kept():
    original = OSError("root cause")
    with pytest.raises(MonitorError) as info:
        _monitor(cpu=Stub(error=original)).get_all_metrics()
    assert info.value.__cause__ is original


def test_timestamps_increase():
    monitor = _monitor()
    first = monitor.get_all_metrics()
    second = monitor.get_all_metrics()
    assert second.timestamp >= first.timestamp


def test_default_metrics_empty():
    metrics = Metrics()
    assert metrics.disk == []
    assert metrics.network == []


def test_live_snapshot_is_consistent():
    metrics = Monitor().get_all_metrics()
    assert metrics.cpu.core_count == len(metrics.cpu.usage_per_core)
    assert metrics.memory.total > 0
    assert all(m.interface not in ("lo", "lo0") for m in metrics.network)