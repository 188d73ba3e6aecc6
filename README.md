# hwmonitor

A small terminal dashboard for the machine it runs on. On every refresh it
clears the screen and shows:

- total CPU usage and the usage of each logical core
- RAM usage
- usage of every mounted physical partition (partitions that cannot be read
  are skipped)
- traffic on each network interface except loopback (`lo`, `lo0`), with
  per-second rates since the previous refresh
- battery charge and whether it is charging, if the platform reports a
  battery
- CPU temperature, if sensors can be read: a CPU sensor (`coretemp`, `cpu`,
  `CPU` or `Package id 0`) is used when present, otherwise the mean of all
  sensors

Percentages are coloured by level: below 50 % green, from 50 % white, from
75 % yellow and from 90 % red. Each one also gets a bar. Battery charge is red
below 20 % and yellow below 50 %; the temperature is red above 80 °C, yellow
above 70 °C and green below 50 °C.

## Installation

```
pip install .
```

## Usage

```
hardware-monitor
hardware-monitor -interval 2s
hardware-monitor -color=false
```

Options (each may also be written with two dashes):

- `-interval` sets the refresh interval as a duration made of one or more
  number-and-unit parts, for example `500ms`, `1s` or `1m30s`. Units are
  `ns`, `us` (or `µs`), `ms`, `s`, `m` and `h`. The interval must be
  positive. The default is `1s`.
- `-color` turns coloured output on or off. It takes `1`, `t`, `true`,
  `TRUE`, `True` or `0`, `f`, `false`, `FALSE`, `False`; given alone it
  means true. The default is true. When colour is off, the bars are drawn
  with `=`.

Press Ctrl+C to stop; SIGTERM also stops it. If a refresh fails because a
required figure cannot be read, the error is logged and the next refresh
goes ahead.

## Using it as a library

```python
from hwmonitor.monitor import Monitor
from hwmonitor.display import Display, format_bytes

monitor = Monitor()
metrics = monitor.get_all_metrics()
print(metrics.cpu.total_usage, format_bytes(metrics.memory.used))

Display(color_enabled=False).render(metrics)
```

- `Monitor.get_all_metrics()` returns a `Metrics` snapshot with `timestamp`,
  `cpu`, `memory`, `disk`, `battery`, `network` and `temperature`. It raises
  `MonitorError` when CPU, memory, disk or network figures cannot be read.
  Battery and temperature readings are never required; when they are
  missing they are reported with `is_available` set to false.
- `Monitor` takes optional keyword arguments `cpu`, `memory`, `disk`,
  `battery`, `network` and `temperature`, each an object with a
  `get_metrics()` method, in place of the default monitors.
- `NetworkMonitor(clock=...)` takes the clock used to compute rates
  (`time.monotonic` by default). A counter that goes backwards gives a rate
  of 0.
- `Display(color_enabled=True, stream=None)` writes to `stream`, or to
  standard output. `Display.bar(percent, width)` returns a bracketed bar and
  `Display.color_for_percent(percent)` returns the level name (`good`,
  `normal`, `warning`, `critical`).
- `format_bytes(num)` formats a byte count in binary units, e.g. `1.5 KB`;
  it raises `ValueError` for a negative count.
- `hwmonitor.cli.parse_interval(text)` turns a duration string into seconds
  and raises `ValueError` for a malformed or non-positive one.

## Tests

```
pip install .[test]
pytest
```