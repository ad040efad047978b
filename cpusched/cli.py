"""Command line entry point: run every algorithm on one random workload."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Dict, List, Optional, Sequence, TextIO

from cpusched.evaluation import print_average_results
from cpusched.process import Process, clone_processes, create_processes
from cpusched.schedule import (
    TIME_QUANTUM,
    run_fcfs,
    run_preemptive_priority,
    run_preemptive_sjf,
    run_priority,
    run_rr,
    run_sjf,
)

_ALGORITHMS = (
    ("FCFS", "\n================ FCFS Scheduling ================", run_fcfs),
    (
        "Non-preemptive SJF",
        "\n================ Non-preemptive SJF Scheduling ================",
        run_sjf,
    ),
    (
        "Preemptive SJF",
        "\n================ Preemptive SJF Scheduling ================\n",
        run_preemptive_sjf,
    ),
    (
        "Non-preemptive Priotiry",
        "\n================ Non-preemptive Priotiry Scheduling ================",
        run_priority,
    ),
    (
        "Preemptive Priority",
        "\n================ Preemptive Priority Scheduling ================",
        run_preemptive_priority,
    ),
    (
        "Round Robin",
        f"\n========= Round Robin Scheduling (Time Quantum = {TIME_QUANTUM}) =========",
        run_rr,
    ),
)


def run_all(
    processes: Sequence[Process], out: Optional[TextIO] = None
) -> Dict[str, List[Process]]:
    """Run each algorithm on its own copy of ``processes`` and report results."""
    stream = sys.stdout if out is None else out
    results: Dict[str, List[Process]] = {}
    for name, header, runner in _ALGORITHMS:
        copies = clone_processes(processes)
        print(header, file=stream)
        runner(copies, stream)
        print_average_results(name, copies, stream)
        results[name] = copies
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cpusched",
        description="Simulate CPU scheduling algorithms on a random workload.",
    )
    parser.add_argument("count", nargs="?", type=int, help="number of processes")
    parser.add_argument("--seed", type=int, help="seed for the random workload")
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        try:
            count = int(input("Enter number of processes: "))
        except (ValueError, EOFError):
            parser.error("expected an integer number of processes")
    if count < 1:
        parser.error("number of processes must be at least 1")

    processes = create_processes(count, random.Random(args.seed), sys.stdout)
    run_all(processes, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())