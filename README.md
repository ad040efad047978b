# cpusched

A discrete-time simulator of six CPU scheduling algorithms. It runs them on
the same workload so that you can compare how they behave:

- First-Come, First-Served (`run_fcfs`)
- Shortest Job First, non-preemptive (`run_sjf`) and preemptive (`run_preemptive_sjf`)
- Priority scheduling, non-preemptive (`run_priority`) and preemptive
  (`run_preemptive_priority`). A lower number means a higher priority.
- Round Robin with a time quantum of 2 (`run_rr`, `cpusched.schedule.TIME_QUANTUM`)

Each process has an arrival time, a CPU burst, a priority and a list of I/O
requests. Each I/O request is issued after a set amount of executed CPU time.
During the I/O the process sits in the waiting queue, and when the I/O is done
it returns to the ready queue. The simulator advances one time unit at a time
and logs each event:

- arrivals
- the state of the ready queue
- dispatches
- I/O requests and I/O completions
- idle CPU time
- process completions

At the end it reports each process's waiting and turnaround time, and the
averages over all processes.

## Installation

```
pip install .
```

## Command line

```
cpusched [count] [--seed SEED]
```

- `count` is the number of processes. If you leave it out, the program asks
  for it with `Enter number of processes:`. It must be a whole number of at
  least 1.
- `--seed` makes the random workload reproducible.

The program does the following:

1. It generates a random workload. Each process gets:
   - an arrival time of 0–9
   - a CPU burst of 5–14
   - a priority of 1–n
   - one to three I/O requests, each lasting 1–3 time units
2. It prints the workload.
3. It runs all six algorithms on identical fresh copies of the workload. For
   each algorithm it prints the event log and the averages.

`python -m cpusched.cli` works the same way.

## Library use

```python
import random
import sys

from cpusched.process import create_processes, clone_processes
from cpusched.schedule import run_rr
from cpusched.evaluation import print_average_results

base = create_processes(4, random.Random(1), sys.stdout)
rr = clone_processes(base)
run_rr(rr, sys.stdout)
print_average_results("Round Robin", rr, sys.stdout)
```

You can also build a workload by hand:

```python
from cpusched.process import IORequest, Process
from cpusched.schedule import run_preemptive_sjf

procs = [
    Process(pid=1, arrival_time=0, burst_time=6, priority=2,
            io_requests=[IORequest(request_time=3, burst_time=2)]),
    Process(pid=2, arrival_time=1, burst_time=4, priority=1),
]
run_preemptive_sjf(procs)
print([(p.pid, p.waiting_time, p.turnaround_time) for p in procs])
```

### What each module provides

- `cpusched.process`:
  - `Process` and `IORequest`
  - `Process.reset()`, `Process.clone()` and `Process.describe()`
  - `create_processes(n, rng, out)`, which generates a random workload
  - `clone_processes(processes)`
- `cpusched.state`: `SchedulerState`, which holds the ready queue and the I/O
  waiting queue that the schedulers share.
- `cpusched.schedule`: the six `run_*` functions.
  - Each one takes the processes and an optional output stream.
  - Each one fills in `waiting_time` and `turnaround_time` on the processes,
    and returns them as a list.
- `cpusched.evaluation`:
  - `average_waiting_time` and `average_turnaround_time` print the
    per-process values and return their mean. Both raise `ValueError` for an
    empty list.
  - `print_average_results` prints the per-process values and both averages.
- `cpusched.cli`:
  - `run_all(processes, out)` runs every algorithm on its own copy of the
    workload. It returns a dict that maps each algorithm's name to its
    finished processes.
  - `main` is the command above.

Output goes to standard output unless you pass a stream as `out`.

## Limitations

- Workloads are either random or built in code. They cannot be loaded from
  or saved to files.
- Results are printed as text only. There is no chart or Gantt view.