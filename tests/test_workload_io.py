from pathlib import Path

import pytest

from task_scheduler.models import InvalidWorkloadError, Process
from task_scheduler.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"name":"A","arrival_time":0,"burst_time":3,"priority":1},'
                 '{"name":"B","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].priority == 1
    assert procs[1].priority == 0
    assert procs[1].arrival_time == 1


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("name,arrival_time,burst_time,priority\nA,0,3,1\nB,1,2,\n")
    procs = load_workload(p)
    assert procs[0].name == "A"
    assert procs[1].priority == 0


def test_pid_column_is_accepted(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\nP1,0,3\n")
    assert load_workload(p)[0].name == "P1"


def test_invalid_entries(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"name":"A","arrival_time":"soon","burst_time":3}]')
    with pytest.raises(ValueError, match="Invalid process entry"):
        load_workload(p)

    p.write_text('{"name":"A"}')
    with pytest.raises(ValueError, match="must be a list"):
        load_workload(p)


def test_non_positive_burst_is_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("name,arrival_time,burst_time\nA,0,0\n")
    with pytest.raises(InvalidWorkloadError):
        load_workload(p)


def test_unsupported_format(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("A 0 3")
    with pytest.raises(ValueError, match="Unsupported workload format"):
        load_workload(p)
