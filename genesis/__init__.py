"""Application framework: event loop, timers, signals and slots, services, message logging, scheduling and utilities."""

__version__ = "0.1.0"