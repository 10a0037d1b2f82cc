from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import ALGORITHMS, Scheduler, run_algorithm
from .gantt import build_rich_gantt
from .metrics import compute_system_metrics, summarize_processes
from .models import Process
from .workload_io import load_workload

logger = logging.getLogger(__name__)

DEMO_PROCESSES = [
    Process("P1", arrival_time=0, burst_time=5, priority=2),
    Process("P2", arrival_time=2, burst_time=3, priority=1),
    Process("P3", arrival_time=4, burst_time=2, priority=3),
    Process("P4", arrival_time=6, burst_time=4, priority=2),
    Process("P5", arrival_time=8, burst_time=6, priority=1),
]

BASE_COLORS = {
    "fcfs": "#6A0DAD",
    "sjf": "#FFD700",
    "rr": "#32CD32",
    "priority": "#FF4500",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-scheduler",
        description="CPU scheduling simulator (FCFS, SJF, Round Robin, Priority).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING). DEBUG traces every dispatch.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a scheduling algorithm on a workload file.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        help="Algorithm to use (fcfs, sjf, rr, priority).",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=None,
        help="Time quantum for round-robin (ignored by FCFS, SJF, Priority).",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run multiple algorithms on the same workload and compare average metrics.",
    )
    compare_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        default=list(ALGORITHMS),
        help="Algorithms to compare (default: fcfs sjf rr priority).",
    )
    compare_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=2,
        help="Time quantum used for RR when included (default: 2).",
    )

    demo_parser = subparsers.add_parser(
        "demo",
        help="Run every algorithm on a built-in five-process workload.",
    )
    demo_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=2,
        help="Time quantum for round-robin (default: 2).",
    )

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_result(console: Console, scheduler: Scheduler, quantum: Optional[int], base_color: Optional[str] = None) -> None:
    processes = scheduler.processes()

    console.print(f"[bold]Algorithm:[/bold] {scheduler.name}")
    if quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {quantum}")

    console.print()

    panel, time_marks = build_rich_gantt(scheduler.timeline, base_color=base_color)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()

    headers = [
        "Name",
        "Arrive",
        "Burst",
        "Priority",
        "Start",
        "Complete",
        "Wait",
        "Turnaround",
    ]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h in {"Name", "Priority"} else "right"
        proc_table.add_column(h, justify=justify)

    for p in processes:
        proc_table.add_row(
            p.name,
            str(p.arrival_time),
            str(p.burst_time),
            str(p.priority),
            str(p.start_time),
            str(p.completion_time),
            str(p.waiting_time),
            str(p.turnaround_time),
        )

    console.print(proc_table)
    console.print()

    summary = summarize_processes(processes)
    system = compute_system_metrics(processes, scheduler.timeline)

    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
    sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
    sys_table.add_row("Avg response", f"{summary['avg_response']:.2f}")
    sys_table.add_row("Makespan", str(system.makespan))
    sys_table.add_row("Throughput (proc/time)", f"{system.throughput:.3f}")
    sys_table.add_row("CPU utilization", f"{system.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def _print_comparison(console: Console, processes: List[Process], algorithms: List[str], quantum: int) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Avg response", justify="right")

    for alg in algorithms:
        q = quantum if alg.lower() == "rr" else None
        # Each scheduler clones the workload, so one list serves every run.
        scheduler = run_algorithm(alg, processes, quantum=q)
        summary = summarize_processes(scheduler.processes())
        summary_table.add_row(
            scheduler.name,
            "" if q is None else str(q),
            f"{summary['avg_waiting']:.2f}",
            f"{summary['avg_turnaround']:.2f}",
            f"{summary['avg_response']:.2f}",
        )

    console.print(summary_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    console = Console()

    try:
        if args.command == "run":
            processes = load_workload(Path(args.workload))
            scheduler = run_algorithm(args.algorithm, processes, quantum=args.quantum)
            quantum = args.quantum if args.algorithm.lower() == "rr" else None
            _print_result(console, scheduler, quantum, base_color=BASE_COLORS.get(args.algorithm.lower()))
            return 0

        if args.command == "compare":
            processes = load_workload(Path(args.workload))
            _print_comparison(console, processes, args.algorithms, args.quantum)
            return 0

        if args.command == "demo":
            for alg in ALGORITHMS:
                q = args.quantum if alg == "rr" else None
                scheduler = run_algorithm(alg, DEMO_PROCESSES, quantum=q)
                console.rule(scheduler.name)
                _print_result(console, scheduler, q, base_color=BASE_COLORS[alg])
            return 0
    except (OSError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
