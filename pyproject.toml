[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genesis"
version = "0.1.0"
description = "A small application framework: event loop, timers, signals and slots, service registry, message logging and utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["framework", "event-loop", "timers", "signals", "slots", "logging", "services", "crc", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genesis-demo = "genesis.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["genesis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
