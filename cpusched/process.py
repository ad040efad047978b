"""Process records and random workload generation."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

ARRIVAL_SPAN = 10
MIN_BURST = 5
BURST_SPAN = 10
MAX_IO_REQUESTS = 3
MAX_IO_BURST = 3


@dataclass
class IORequest:
    """An I/O request issued after ``request_time`` units of CPU execution."""

    request_time: int
    burst_time: int
    requested: bool = False


@dataclass(eq=False)
class Process:
    """A simulated process with CPU burst, priority and I/O requests.

    Processes compare by identity, so two processes with equal fields are
    still distinct entries in a queue.
    """

    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    io_requests: List[IORequest] = field(default_factory=list)
    initial_arrival_time: Optional[int] = None
    remaining_time: Optional[int] = None
    waiting_time: int = 0
    turnaround_time: int = 0

    def __post_init__(self) -> None:
        if self.initial_arrival_time is None:
            self.initial_arrival_time = self.arrival_time
        if self.remaining_time is None:
            self.remaining_time = self.burst_time

    @property
    def io_count(self) -> int:
        return len(self.io_requests)

    def executed_time(self) -> int:
        """CPU time already consumed by this process."""
        return self.burst_time - self.remaining_time

    def reset(self) -> None:
        """Restore the process to its state before any scheduling."""
        self.arrival_time = self.initial_arrival_time
        self.remaining_time = self.burst_time
        self.waiting_time = 0
        self.turnaround_time = 0
        for request in self.io_requests:
            request.requested = False

    def clone(self) -> "Process":
        """Return an independent, freshly reset copy of this process."""
        return Process(
            pid=self.pid,
            arrival_time=self.initial_arrival_time,
            burst_time=self.burst_time,
            priority=self.priority,
            io_requests=[
                IORequest(r.request_time, r.burst_time) for r in self.io_requests
            ],
            initial_arrival_time=self.initial_arrival_time,
        )

    def describe(self) -> str:
        """Human-readable summary of the process and its I/O requests."""
        lines = [
            f"[Process {self.pid}] Arrival Time: {self.arrival_time}, "
            f"CPU Burst Time: {self.burst_time}, Priority: {self.priority}, "
            f"IO Count: {self.io_count}"
        ]
        lines.extend(
            f"    └─ IO Request {index}: Time = {r.request_time}, Burst = {r.burst_time}"
            for index, r in enumerate(self.io_requests, start=1)
        )
        return "\n".join(lines)


def create_processes(
    n: int,
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> List[Process]:
    """Generate ``n`` random processes and print their descriptions."""
    if n < 0:
        raise ValueError(f"number of processes must not be negative: {n}")
    if rng is None:
        rng = random.Random()
    if out is None:
        out = sys.stdout

    processes = []
    for pid in range(1, n + 1):
        arrival = rng.randrange(ARRIVAL_SPAN)
        burst = MIN_BURST + rng.randrange(BURST_SPAN)
        priority = 1 + rng.randrange(n)
        io_count = 1 + rng.randrange(MAX_IO_REQUESTS)

        used: set[int] = set()
        requests: List[IORequest] = []
        while len(requests) < io_count:
            offset = rng.randrange(burst)
            if offset not in used:
                used.add(offset)
                requests.append(IORequest(offset + 1, 1 + rng.randrange(MAX_IO_BURST)))

        process = Process(
            pid=pid,
            arrival_time=arrival,
            burst_time=burst,
            priority=priority,
            io_requests=requests,
        )
        print(process.describe(), file=out)
        processes.append(process)
    return processes


def clone_processes(processes: Iterable[Process]) -> List[Process]:
    """Return reset, independent copies of ``processes``."""
    return [process.clone() for process in processes]