"""Ready and waiting queues shared by the scheduling algorithms."""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Optional, TextIO, Tuple

from cpusched.process import Process


class SchedulerState:
    """Ready queue, I/O waiting queue and the event log of one simulation."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out
        self.current_time = 0
        self._ready: Deque[Process] = deque()
        self._waiting: Deque[Process] = deque()

    def emit(self, message: str) -> None:
        """Write one line of simulation output."""
        print(message, file=self.out if self.out is not None else sys.stdout)

    def enqueue_ready(self, process: Process) -> None:
        self._ready.append(process)

    def pop_ready(self) -> Optional[Process]:
        """Remove and return the front of the ready queue, or None if empty."""
        return self._ready.popleft() if self._ready else None

    def remove_ready(self, process: Process) -> None:
        """Remove the first occurrence of ``process``; absent processes are ignored."""
        try:
            self._ready.remove(process)
        except ValueError:
            pass

    def has_ready(self) -> bool:
        return bool(self._ready)

    def ready_processes(self) -> Tuple[Process, ...]:
        return tuple(self._ready)

    def waiting_processes(self) -> Tuple[Process, ...]:
        return tuple(self._waiting)

    def ready_queue_state(self, time: int) -> str:
        """Describe the ready queue contents at ``time``."""
        prefix = f"time {time}: [Ready Queue] "
        if not self._ready:
            return prefix + "(empty)"
        return prefix + "".join(
            f"P{p.pid}(RT={p.remaining_time}, Pri={p.priority}) " for p in self._ready
        )

    def print_ready_queue_state(self, time: int) -> None:
        self.emit(self.ready_queue_state(time))

    def clean_ready_queue(self) -> None:
        """Drop finished processes from the ready queue."""
        self._ready = deque(p for p in self._ready if p.remaining_time != 0)

    def check_io_request(self, current: Process, time: int) -> bool:
        """Move ``current`` to the waiting queue if it issues I/O now."""
        if current.remaining_time <= 0:
            return False
        executed = current.executed_time()
        for request in current.io_requests:
            if request.request_time == executed and not request.requested:
                self.emit(
                    f"time {time}: Process {current.pid} requests "
                    f"I/O(duration {request.burst_time})"
                )
                current.arrival_time = time + request.burst_time
                request.requested = True
                self._waiting.append(current)
                return True
        return False

    def update_waiting_queue(self, time: int) -> None:
        """Return processes whose I/O has finished to the ready queue."""
        still_waiting: Deque[Process] = deque()
        for process in self._waiting:
            if process.arrival_time <= time:
                if process.remaining_time > 0:
                    self._ready.append(process)
                    self.emit(
                        f"time {time}: Process {process.pid} completes I/O "
                        "and returns to Ready Queue"
                    )
            else:
                still_waiting.append(process)
        self._waiting = still_waiting

    def _find_shortest(self) -> Optional[Process]:
        shortest = None
        for process in self._ready:
            if process.remaining_time > 0 and (
                shortest is None or process.remaining_time < shortest.remaining_time
            ):
                shortest = process
        return shortest

    def shortest_ready(self, time: int) -> Optional[Process]:
        """Return the unfinished ready process with least remaining time."""
        shortest = self._find_shortest()
        if shortest is not None:
            self.emit(
                f"time {time}: Selected P{shortest.pid} as shortest job "
                f"(RT={shortest.remaining_time})"
            )
        return shortest

    def pop_shortest_ready(self, time: int) -> Optional[Process]:
        """Like :meth:`shortest_ready`, also removing it from the queue."""
        shortest = self.shortest_ready(time)
        if shortest is not None:
            self.remove_ready(shortest)
        return shortest

    def highest_priority_ready(self) -> Optional[Process]:
        """Return the unfinished ready process with the lowest priority number."""
        highest = None
        for process in self._ready:
            if process.remaining_time > 0 and (
                highest is None or process.priority < highest.priority
            ):
                highest = process
        return highest