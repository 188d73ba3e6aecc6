"""Command-line entry point that refreshes the hardware report."""

from __future__ import annotations

import argparse
import logging
import re
import signal
import threading
import time

from hwmonitor.display import Display
from hwmonitor.monitor import Metrics, Monitor, MonitorError

logger = logging.getLogger(__name__)

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def parse_interval(text: str) -> float:
    """Parse a duration such as ``1s``, ``500ms`` or ``1m30s`` into seconds."""
    body = text.strip()
    sign = 1.0
    if body[:1] in "+-" and body:
        sign = -1.0 if body[0] == "-" else 1.0
        body = body[1:]
    if not body:
        raise ValueError(f"invalid duration: {text!r}")

    total = 0.0
    position = 0
    for match in _COMPONENT.finditer(body):
        if match.start() != position:
            raise ValueError(f"invalid duration: {text!r}")
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()
    if position != len(body):
        raise ValueError(f"invalid duration: {text!r}")

    seconds = sign * total
    if seconds <= 0:
        raise ValueError(f"interval must be positive: {text!r}")
    return seconds


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {text!r}")


def _interval_arg(text: str) -> float:
    try:
        return parse_interval(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def display_metrics(monitor: Monitor, display: Display) -> Metrics:
    """Collect one snapshot, render it and return it."""
    metrics = monitor.get_all_metrics()
    display.render(metrics)
    return metrics


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hardware-monitor", description="Live terminal view of system hardware usage."
    )
    parser.add_argument(
        "-interval",
        "--interval",
        type=_interval_arg,
        default=1.0,
        help="refresh interval, e.g. 1s or 500ms (default 1s)",
    )
    parser.add_argument(
        "-color",
        "--color",
        type=_parse_bool,
        nargs="?",
        const=True,
        default=True,
        help="enable colored output (default true)",
    )
    return parser


def _refresh(monitor: Monitor, display: Display) -> None:
    try:
        display_metrics(monitor, display)
    except MonitorError as exc:
        logger.error("Error displaying metrics: failed to get metrics: %s", exc)


def _stop_handler(stop: threading.Event):
    """Return a signal handler that asks the refresh loop to stop."""

    def handler(signum, frame):
        stop.set()

    return handler


def main(argv: list[str] | None = None) -> int:
    """Run the refresh loop until interrupted."""
    args = _build_parser().parse_args(argv)
    interval: float = args.interval

    monitor = Monitor()
    display = Display(color_enabled=args.color)

    stop = threading.Event()
    in_main_thread = threading.current_thread() is threading.main_thread()
    previous_handler = None
    if in_main_thread:
        previous_handler = signal.signal(signal.SIGTERM, _stop_handler(stop))

    try:
        _refresh(monitor, display)
        next_tick = time.monotonic() + interval
        while not stop.wait(max(0.0, next_tick - time.monotonic())):
            _refresh(monitor, display)
            now = time.monotonic()
            next_tick += interval
            if next_tick <= now:
                next_tick = now + interval
    except KeyboardInterrupt:
        pass
    finally:
        if in_main_thread and previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    print("\n\nShutting down...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())