import io

from cpusched.process import IORequest, Process
from cpusched.state import SchedulerState


def make(pid, burst=5, priority=1, arrival=0, requests=()):
    return Process(
        pid=pid,
        arrival_time=arrival,
        burst_time=burst,
        priority=priority,
        io_requests=[IORequest(t, b) for t, b in requests],
    )


def new_state():
    out = io.StringIO()
    return SchedulerState(out), out


def test_fifo_order():
    state, _ = new_state()
    a, b, c = make(1), make(2), make(3)
    for p in (a, b, c):
        state.enqueue_ready(p)
    assert state.has_ready()
    assert state.pop_ready() is a
    assert state.pop_ready() is b
    assert state.pop_ready() is c
    assert state.pop_ready() is None
    assert not state.has_ready()


def test_remove_ready_by_identity():
    state, _ = new_state()
    a, b, c = make(1), make(1), make(3)
    for p in (a, b, c):
        state.enqueue_ready(p)
    state.remove_ready(b)
    assert state.ready_processes() == (a, c)
    state.remove_ready(make(9))
    assert state.ready_processes() == (a, c)


def test_ready_queue_state_empty():
    state, out = new_state()
    assert state.ready_queue_state(0) == "time 0: [Ready Queue] (empty)"
    state.print_ready_queue_state(0)
    assert out.getvalue() == "time 0: [Ready Queue] (empty)\n"


def test_ready_queue_state_lists_processes():
    state, _ = new_state()
    state.enqueue_ready(make(1, burst=5, priority=2))
    state.enqueue_ready(make(2, burst=8, priority=1))
    assert (
        state.ready_queue_state(4)
        == "time 4: [Ready Queue] P1(RT=5, Pri=2) P2(RT=8, Pri=1) "
    )


def test_clean_ready_queue_drops_finished():
    state, _ = new_state()
    a, b, c = make(1), make(2), make(3)
    b.remaining_time = 0
    for p in (a, b, c):
        state.enqueue_ready(p)
    state.clean_ready_queue()
    assert state.ready_processes() == (a, c)


def test_check_io_request_moves_to_waiting():
    state, out = new_state()
    p = make(1, burst=5, requests=[(2, 3)])
    p.remaining_time = 3
    assert state.check_io_request(p, 10) is True
    assert p.arrival_time == 10 + 3
    assert p.io_requests[0].requested is True
    assert state.waiting_processes() == (p,)
    assert out.getvalue() == "time 10: Process 1 requests I/O(duration 3)\n"
    assert state.check_io_request(p, 10) is False
    assert state.waiting_processes() == (p,)


def test_check_io_request_wrong_moment_or_finished():
    state, _ = new_state()
    p = make(1, burst=5, requests=[(2, 1)])
    p.remaining_time = 4
    assert state.check_io_request(p, 1) is False
    p.remaining_time = 0
    assert state.check_io_request(p, 1) is False
    assert state.waiting_processes() == ()


def test_update_waiting_queue_returns_finished_io():
    state, out = new_state()
    p = make(1, burst=5, requests=[(2, 3)])
    p.remaining_time = 3
    state.check_io_request(p, 10)
    out.truncate(0)
    out.seek(0)
    state.update_waiting_queue(12)
    assert state.waiting_processes() == (p,)
    assert not state.has_ready()
    state.update_waiting_queue(13)
    assert state.waiting_processes() == ()
    assert state.ready_processes() == (p,)
    assert out.getvalue() == (
        "time 13: Process 1 completes I/O and returns to Ready Queue\n"
    )


def test_update_waiting_queue_keeps_order_of_pending():
    state, _ = new_state()
    ps = [make(i, burst=5, requests=[(1, d)]) for i, d in ((1, 3), (2, 1), (3, 3))]
    for p in ps:
        p.remaining_time = 4
        state.check_io_request(p, 0)
    state.update_waiting_queue(1)
    assert state.ready_processes() == (ps[1],)
    assert state.waiting_processes() == (ps[0], ps[2])


def test_shortest_ready_picks_first_minimum():
    state, out = new_state()
    done = make(1, burst=1)
    done.remaining_time = 0
    a, b, c = make(2, burst=6), make(3, burst=4), make(4, burst=4)
    for p in (done, a, b, c):
        state.enqueue_ready(p)
    assert state.shortest_ready(7) is b
    assert state.ready_processes() == (done, a, b, c)
    assert out.getvalue() == "time 7: Selected P3 as shortest job (RT=4)\n"


def test_pop_shortest_ready_removes():
    state, _ = new_state()
    a, b = make(1, burst=9), make(2, burst=6)
    state.enqueue_ready(a)
    state.enqueue_ready(b)
    assert state.pop_shortest_ready(0) is b
    assert state.ready_processes() == (a,)


def test_shortest_ready_empty():
    state, out = new_state()
    assert state.pop_shortest_ready(0) is None
    assert out.getvalue() == ""


def test_highest_priority_ready():
    state, _ = new_state()
    finished = make(1, priority=0)
    finished.remaining_time = 0
    a, b, c = make(2, priority=3), make(3, priority=1), make(4, priority=1)
    for p in (finished, a, b, c):
        state.enqueue_ready(p)
    assert state.highest_priority_ready() is b
    assert SchedulerState(io.StringIO()).highest_priority_ready() is None