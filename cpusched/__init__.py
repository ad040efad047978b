"""Simulator of CPU scheduling algorithms on workloads with I/O bursts."""

__version__ = "0.1.0"
__all__ = ["process", "state", "evaluation", "schedule", "cli"]