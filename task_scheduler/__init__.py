"""
Task scheduler package.

Simulates CPU scheduling (FCFS, SJF, Round Robin, Priority) over a fixed
process list and reports per-process timing metrics, with a small
command-line front end for running and comparing the algorithms.
"""

__all__ = ["algorithms", "cli", "models"]
