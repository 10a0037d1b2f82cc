import pytest

from task_scheduler.models import InvalidWorkloadError, Process, clone_processes, validate_processes


def test_new_process_defaults():
    p = Process("P1", arrival_time=2, burst_time=4)
    assert p.remaining_time == 4
    assert p.priority == 0
    assert (p.start_time, p.completion_time, p.turnaround_time, p.waiting_time) == (0, 0, 0, 0)


def test_finish_derives_turnaround_and_waiting():
    p = Process("P1", arrival_time=2, burst_time=4)
    p.finish(10)
    assert p.remaining_time == 0
    assert p.turnaround_time == 8
    assert p.waiting_time == 4


def test_clone_drops_computed_fields():
    p = Process("P1", arrival_time=1, burst_time=3, priority=5)
    p.start_time = 4
    p.finish(7)

    copy = p.clone()
    assert copy is not p
    assert (copy.name, copy.arrival_time, copy.burst_time, copy.priority) == ("P1", 1, 3, 5)
    assert copy.remaining_time == 3
    assert copy.completion_time == 0


def test_reset():
    p = Process("P1", arrival_time=1, burst_time=3)
    p.start_time = 2
    p.finish(5)
    p.reset()
    assert p == Process("P1", arrival_time=1, burst_time=3)


def test_validate_rejects_bad_processes():
    with pytest.raises(InvalidWorkloadError, match="burst_time"):
        validate_processes([Process("A", 0, -2)])
    with pytest.raises(InvalidWorkloadError, match="arrival_time"):
        validate_processes([Process("A", -1, 2)])
    with pytest.raises(InvalidWorkloadError, match="Duplicate"):
        validate_processes([Process("A", 0, 2), Process("A", 1, 2)])


def test_clone_processes_keeps_order():
    procs = [Process("B", 3, 1), Process("A", 0, 2)]
    clones = clone_processes(procs)
    assert [p.name for p in clones] == ["B", "A"]
    assert all(c is not p for c, p in zip(clones, procs))
