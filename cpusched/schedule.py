"""CPU scheduling algorithms simulated one time unit at a time."""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO

from cpusched.process import Process
from cpusched.state import SchedulerState

TIME_QUANTUM = 2


class _Simulation:
    """Shared time loop; subclasses decide which process gets the CPU."""

    def __init__(self, processes: Iterable[Process], out: Optional[TextIO]) -> None:
        self.processes: List[Process] = list(processes)
        self.state = SchedulerState(out)
        self.current: Optional[Process] = None

    def run(self) -> List[Process]:
        state = self.state
        completed = 0
        time = 0
        while completed < len(self.processes):
            state.current_time = time
            for process in self.processes:
                if process.arrival_time == time and process.initial_arrival_time == time:
                    state.emit(f"time {time}: Process {process.pid} arrived")
                    state.enqueue_ready(process)

            state.update_waiting_queue(time)
            self.before_report()
            state.print_ready_queue_state(time)

            if self.current is not None and state.check_io_request(self.current, time):
                self.current = None
                self.on_io()

            self.dispatch(time)

            current = self.current
            if current is not None:
                current.remaining_time -= 1
                self.on_tick()
                if current.remaining_time == 0:
                    current.turnaround_time = time + 1 - current.initial_arrival_time
                    state.emit(
                        f"time {time + 1}: Process {current.pid} completed"
                        f"(turnaround: {current.turnaround_time}, "
                        f"waiting: {current.waiting_time})"
                    )
                    completed += 1
                    self.current = None
                    self.on_complete()
            else:
                state.emit(f"time {time}: CPU is idle")
            time += 1
        return self.processes

    def start(self, process: Process, time: int, show_priority: bool = False) -> None:
        """Give ``process`` the CPU, charging the time it spent in the ready queue."""
        self.current = process
        if time > process.arrival_time:
            process.waiting_time += time - process.arrival_time
        suffix = f" (Priority {process.priority})" if show_priority else ""
        self.state.emit(f"time {time}: Process {process.pid} starts executing{suffix}")

    def requeue_current(self) -> None:
        if self.current is not None and self.current.remaining_time > 0:
            self.state.enqueue_ready(self.current)

    def before_report(self) -> None:
        pass

    def on_io(self) -> None:
        pass

    def on_tick(self) -> None:
        pass

    def on_complete(self) -> None:
        pass

    def dispatch(self, time: int) -> None:
        raise NotImplementedError


class _FCFS(_Simulation):
    def dispatch(self, time: int) -> None:
        if self.current is None and self.state.has_ready():
            process = self.state.pop_ready()
            if process.remaining_time > 0:
                self.start(process, time)


class _SJF(_Simulation):
    def dispatch(self, time: int) -> None:
        if self.current is None and self.state.has_ready():
            process = self.state.pop_shortest_ready(time)
            if process is not None:
                self.start(process, time)


class _PreemptiveSJF(_Simulation):
    def before_report(self) -> None:
        self.state.clean_ready_queue()

    def dispatch(self, time: int) -> None:
        shortest = self.state.shortest_ready(time)
        if shortest is not None and shortest is not self.current:
            self.requeue_current()
            self.state.remove_ready(shortest)
            self.start(shortest, time)


class _Priority(_Simulation):
    def dispatch(self, time: int) -> None:
        if self.current is None and self.state.has_ready():
            highest = self.state.highest_priority_ready()
            if highest is not None:
                self.state.remove_ready(highest)
                self.start(highest, time, show_priority=True)


class _PreemptivePriority(_Simulation):
    def dispatch(self, time: int) -> None:
        highest = self.state.highest_priority_ready()
        if highest is not None and (
            self.current is None or highest.priority < self.current.priority
        ):
            self.requeue_current()
            self.state.remove_ready(highest)
            self.start(highest, time, show_priority=True)


class _RoundRobin(_Simulation):
    def __init__(self, processes: Iterable[Process], out: Optional[TextIO]) -> None:
        super().__init__(processes, out)
        self.quantum = 0

    def on_io(self) -> None:
        self.quantum = 0

    def on_tick(self) -> None:
        self.quantum -= 1

    def on_complete(self) -> None:
        self.quantum = 0

    def dispatch(self, time: int) -> None:
        if (self.current is None or self.quantum == 0) and self.state.has_ready():
            current = self.current
            if current is not None and current.remaining_time > 0:
                if self.quantum == 0:
                    self.state.emit(
                        f"time {time}: Time quantum expired. "
                        f"Switching from Process {current.pid}"
                    )
                self.state.enqueue_ready(current)
            process = self.state.pop_ready()
            self.quantum = TIME_QUANTUM
            self.start(process, time)


def run_fcfs(processes: Iterable[Process], out: Optional[TextIO] = None) -> List[Process]:
    """First-come, first-served scheduling."""
    return _FCFS(processes, out).run()


def run_sjf(processes: Iterable[Process], out: Optional[TextIO] = None) -> List[Process]:
    """Non-preemptive shortest-job-first scheduling."""
    return _SJF(processes, out).run()


def run_preemptive_sjf(
    processes: Iterable[Process], out: Optional[TextIO] = None
) -> List[Process]:
    """Shortest-remaining-time-first scheduling."""
    return _PreemptiveSJF(processes, out).run()


def run_priority(
    processes: Iterable[Process], out: Optional[TextIO] = None
) -> List[Process]:
    """Non-preemptive priority scheduling; lower numbers run first."""
    return _Priority(processes, out).run()


def run_preemptive_priority(
    processes: Iterable[Process], out: Optional[TextIO] = None
) -> List[Process]:
    """Preemptive priority scheduling; lower numbers run first."""
    return _PreemptivePriority(processes, out).run()


def run_rr(processes: Iterable[Process], out: Optional[TextIO] = None) -> List[Process]:
    """Round-robin scheduling with a fixed time quantum."""
    return _RoundRobin(processes, out).run()