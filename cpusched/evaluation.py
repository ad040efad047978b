"""Waiting and turnaround time statistics."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from cpusched.process import Process


def _out(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _require_processes(processes: Sequence[Process]) -> None:
    if not processes:
        raise ValueError("at least one process is required")


def average_waiting_time(
    processes: Sequence[Process], out: Optional[TextIO] = None
) -> float:
    """Print each waiting time and return their mean."""
    _require_processes(processes)
    stream = _out(out)
    print("\n======== Waiting Times ========", file=stream)
    for p in processes:
        print(f"Waiting Time of Process {p.pid}: {p.waiting_time}", file=stream)
    return sum(p.waiting_time for p in processes) / len(processes)


def average_turnaround_time(
    processes: Sequence[Process], out: Optional[TextIO] = None
) -> float:
    """Print each turnaround time and return their mean."""
    _require_processes(processes)
    stream = _out(out)
    print("\n======== Turnaround Times ========", file=stream)
    for p in processes:
        print(f"Turnaround Time of Process {p.pid}: {p.turnaround_time}", file=stream)
    return sum(p.turnaround_time for p in processes) / len(processes)


def print_average_results(
    algo_name: str, processes: Sequence[Process], out: Optional[TextIO] = None
) -> None:
    """Print per-process times followed by the averages for one algorithm."""
    stream = _out(out)
    avg_wait = average_waiting_time(processes, stream)
    avg_turn = average_turnaround_time(processes, stream)
    print(f"\n======== [{algo_name}] Average Times ========", file=stream)
    print(f"Average Waiting Time: {avg_wait:.2f}", file=stream)
    print(f"Average Turnaround Time: {avg_turn:.2f}", file=stream)