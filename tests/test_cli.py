from unittest.mock import patch

import pytest

from hwmonitor.cli import display_metrics, main, parse_interval
from hwmonitor.monitor import Metrics, MonitorError


class _FakeMonitor:
    def __init__(self, metrics=None, error=None):
        self._metrics = metrics
        self._error = error

    def get_all_metrics(self):
        if self._error is not None:
            raise self._error
        return self._metrics


class _RecordingDisplay:
    def __init__(self):
        self.rendered = []

    def render(self, metrics):
        self.rendered.append(metrics)


def test_parse_interval_seconds():
    assert parse_interval("1s") == 1.0


def test_parse_interval_equivalent_forms():
    assert parse_interval("1000ms") == pytest.approx(parse_interval("1s"))
    assert parse_interval("2m") == pytest.approx(parse_interval("120s"))
    assert parse_interval("1h") == pytest.approx(parse_interval("60m"))
    assert parse_interval("1m30s") == pytest.approx(parse_interval("90s"))
    assert parse_interval("1.5s") == pytest.approx(parse_interval("1500ms"))


def test_parse_interval_ordering():
    assert parse_interval("500ms") < parse_interval("1s") < parse_interval("1m")
    assert parse_interval("1us") < parse_interval("1ms")
    assert parse_interval("1ns") < parse_interval("1us")


@pytest.mark.parametrize("text", ["", "abc", "5", "1x", "s", "1s2", "-1s", "0s", "1s garbage"])
def test_parse_interval_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_interval(text)


def test_display_metrics_renders_snapshot():
    metrics = Metrics()
    display = _RecordingDisplay()
    result = display_metrics(_FakeMonitor(metrics=metrics), display)
    assert result is metrics
    assert display.rendered == [metrics]


def test_display_metrics_propagates_monitor_error():
    display = _RecordingDisplay()
    with pytest.raises(MonitorError):
        display_metrics(_FakeMonitor(error=MonitorError("boom")), display)
    assert display.rendered == []


@pytest.mark.parametrize(
    "argv", [["-interval", "bogus"], ["--interval", "0s"], ["-color=maybe"]]
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2


def test_main_stops_on_interrupt(capsys):
    with patch("time.sleep", side_effect=KeyboardInterrupt):
        code = main(["-interval", "10ms", "-color=false"])
    out = capsys.readouterr().out
    assert code == 0
    assert "System Monitor" in out
    assert "CPU Usage:" in out
    assert "Shutting down..." in out
    assert "█" not in out


def test_main_refreshes_until_interrupted(capsys):
    calls = iter([None, KeyboardInterrupt()])

    def fake_sleep(seconds):
        item = next(calls)
        if item is not None:
            raise item

    with patch("time.sleep", side_effect=fake_sleep):
        code = main(["--interval", "10ms", "--color=false"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("CPU Usage:") == 2