from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Dict, Iterable, List, Optional, Type

from .models import Process, ScheduledSlice, clone_processes

logger = logging.getLogger(__name__)


class Scheduler(ABC):
    """
    Base class for the scheduling algorithms.

    A scheduler owns its processes: the constructor validates the input and
    keeps clones of it, so the caller's list is never mutated and two
    schedulers never share a Process. ``schedule()`` fills in the computed
    fields of every held process in place.
    """

    name = "Scheduler"

    def __init__(self, processes: Iterable[Process]) -> None:
        self._processes: List[Process] = clone_processes(processes)
        self.timeline: List[ScheduledSlice] = []

    def processes(self) -> List[Process]:
        return self._processes

    def schedule(self) -> None:
        self.timeline = []
        for p in self._processes:
            p.reset()
        self._schedule()
        logger.info("%s finished %d process(es) at t=%d", self.name, len(self._processes), self._makespan())

    @abstractmethod
    def _schedule(self) -> None:
        """Run the algorithm over ``self._processes``."""

    def _run(self, p: Process, time: int, run_time: int) -> int:
        """Execute ``p`` for ``run_time`` units from ``time``; return the new clock."""
        end_time = time + run_time
        self.timeline.append(ScheduledSlice(name=p.name, start_time=time, end_time=end_time))
        p.remaining_time -= run_time
        logger.debug("t=%d: dispatch %s for %d unit(s)", time, p.name, run_time)
        return end_time

    def _makespan(self) -> int:
        return max((s.end_time for s in self.timeline), default=0)


class FCFS(Scheduler):
    """
    First-Come First-Serve (non-preemptive).

    Processes run in the order they were given; the list is not re-sorted by
    arrival time.
    """

    name = "FCFS"

    def _schedule(self) -> None:
        time = 0

        for p in self._processes:
            if time < p.arrival_time:
                time = p.arrival_time

            p.start_time = time
            time = self._run(p, time, p.burst_time)
            p.finish(time)


class _NonPreemptiveScheduler(Scheduler):
    """
    Shared loop for SJF and Priority.

    At each decision point, among pending processes that have arrived, run the
    one with the smallest ``_selection_key`` to completion. ``min`` returns the
    first minimum it sees, so ties go to the earlier process in pending order.
    The held list ends up in completion order.
    """

    _selection_key: Callable[[Process], int]

    def _schedule(self) -> None:
        pending: List[Process] = list(self._processes)
        completed: List[Process] = []
        time = 0

        while pending:
            ready = [p for p in pending if p.arrival_time <= time]

            if not ready:
                # CPU is idle until the next arrival.
                time = min(p.arrival_time for p in pending)
                continue

            p = min(ready, key=self._selection_key)
            pending.remove(p)

            p.start_time = time
            time = self._run(p, time, p.burst_time)
            p.finish(time)

            completed.append(p)

        self._processes[:] = completed


class SJF(_NonPreemptiveScheduler):
    """
    Shortest Job First (non-preemptive).
    """

    name = "SJF (non-preemptive)"

    @staticmethod
    def _selection_key(p: Process) -> int:
        return p.burst_time


class PriorityScheduler(_NonPreemptiveScheduler):
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority.
    """

    name = "Priority (non-preemptive)"

    @staticmethod
    def _selection_key(p: Process) -> int:
        return p.priority


class RoundRobin(Scheduler):
    """
    Round Robin scheduling with a fixed time quantum.

    Every process is queued up front in input order, whatever its arrival
    time. When the head of the queue has not arrived yet the clock jumps to
    its arrival, even if a process further back is already waiting.
    """

    name = "Round Robin"

    def __init__(self, processes: Iterable[Process], time_quantum: int) -> None:
        if time_quantum is None or time_quantum <= 0:
            raise ValueError("Round Robin requires a positive quantum (use --quantum)")
        super().__init__(processes)
        self.time_quantum = time_quantum

    def _schedule(self) -> None:
        queue: Deque[Process] = deque(self._processes)
        started: set[str] = set()
        time = 0

        while queue:
            p = queue.popleft()

            if p.arrival_time > time:
                time = p.arrival_time

            if p.name not in started:
                started.add(p.name)
                p.start_time = time

            time = self._run(p, time, min(self.time_quantum, p.remaining_time))

            if p.remaining_time > 0:
                queue.append(p)
            else:
                p.finish(time)


ALGORITHMS: Dict[str, Type[Scheduler]] = {
    "fcfs": FCFS,
    "sjf": SJF,
    "rr": RoundRobin,
    "priority": PriorityScheduler,
}


def create_scheduler(name: str, processes: Iterable[Process], quantum: Optional[int] = None) -> Scheduler:
    """
    Build the requested scheduler. The quantum is only used by round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    if name == "rr":
        return RoundRobin(processes, time_quantum=quantum)
    return ALGORITHMS[name](processes)


def run_algorithm(name: str, processes: Iterable[Process], quantum: Optional[int] = None) -> Scheduler:
    scheduler = create_scheduler(name, processes, quantum=quantum)
    scheduler.schedule()
    return scheduler
