from __future__ import annotations

from typing import List

from .models import Process, ScheduledSlice, SystemMetrics


def compute_system_metrics(processes: List[Process], timeline: List[ScheduledSlice]) -> SystemMetrics:
    """
    Compute throughput and CPU utilization given scheduled processes and
    their timeline slices.
    """
    if not processes:
        return SystemMetrics(cpu_busy_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)

    makespan = max(p.completion_time for p in processes)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in timeline)

    throughput = len(processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )


def summarize_processes(processes: List[Process]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
        "avg_response": sum(p.response_time for p in processes) / n,
    }
