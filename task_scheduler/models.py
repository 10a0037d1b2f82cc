from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


class InvalidWorkloadError(ValueError):
    """Raised when a process list cannot be scheduled."""


@dataclass
class Process:
    """
    One schedulable unit of work.

    ``name``, ``arrival_time``, ``burst_time`` and ``priority`` describe the
    workload and are never touched by a scheduler. The remaining fields are
    written by whichever scheduler owns the instance. ``start_time`` of 0
    doubles as the "not started yet" value.
    """

    name: str
    arrival_time: int
    burst_time: int
    priority: int = 0
    remaining_time: Optional[int] = None
    start_time: int = 0
    completion_time: int = 0
    turnaround_time: int = 0
    waiting_time: int = 0

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            self.remaining_time = self.burst_time

    @property
    def response_time(self) -> int:
        return self.start_time - self.arrival_time

    def clone(self) -> "Process":
        """
        Fresh copy with only the workload fields carried over.
        """
        return Process(
            name=self.name,
            arrival_time=self.arrival_time,
            burst_time=self.burst_time,
            priority=self.priority,
        )

    def reset(self) -> None:
        self.remaining_time = self.burst_time
        self.start_time = 0
        self.completion_time = 0
        self.turnaround_time = 0
        self.waiting_time = 0

    def finish(self, completion_time: int) -> None:
        self.remaining_time = 0
        self.completion_time = completion_time
        self.turnaround_time = completion_time - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    name: str
    start_time: int
    end_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


def validate_processes(processes: Iterable[Process]) -> List[Process]:
    """
    Reject workloads no scheduler can run: non-positive bursts, negative
    arrivals and duplicate names.
    """
    checked: List[Process] = []
    seen: set[str] = set()

    for p in processes:
        if p.burst_time <= 0:
            raise InvalidWorkloadError(f"Process {p.name!r}: burst_time must be positive, got {p.burst_time}")
        if p.arrival_time < 0:
            raise InvalidWorkloadError(f"Process {p.name!r}: arrival_time must not be negative, got {p.arrival_time}")
        if p.name in seen:
            raise InvalidWorkloadError(f"Duplicate process name {p.name!r}")
        seen.add(p.name)
        checked.append(p)

    return checked


def clone_processes(processes: Iterable[Process]) -> List[Process]:
    return [p.clone() for p in validate_processes(processes)]
