"""Live hardware metrics for the terminal: CPU, memory, disks, network, battery and temperature."""

__version__ = "0.1.0"