[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwmonitor"
version = "0.1.0"
description = "Terminal dashboard for CPU, memory, disk, network, battery and temperature metrics"
requires-python = ">=3.10"
keywords = ["monitoring", "system", "cpu", "memory", "disk", "network", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hardware-monitor = "hwmonitor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hwmonitor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
