"""Zenith Tasker: a single-user task calendar with an optional AI workload summary."""

__version__ = "1.1.0"
