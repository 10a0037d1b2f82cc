from __future__ import annotations

from typing import Dict, List, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

PALETTE = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def generate_shades(base_color: str, count: int) -> List[str]:
    """
    Derive ``count`` hex colors from ``base_color`` (``#rrggbb``), each one
    20 points brighter per channel than the previous, clamped to 0-255.
    """
    r, g, b = (int(base_color[i : i + 2], 16) for i in (1, 3, 5))

    shades = []
    for i in range(count):
        adjustment = (i + 1) * 20
        shades.append(
            "#{:02x}{:02x}{:02x}".format(
                min(255, max(0, r + adjustment)),
                min(255, max(0, g + adjustment)),
                min(255, max(0, b + adjustment)),
            )
        )
    return shades


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart renderer.
    """
    if not slices:
        return "(no execution)"

    slices = sorted(slices, key=lambda s: (s.start_time, s.end_time))

    line = "|"
    labels = ""
    time_marks = "0"
    last_time = 0

    for sl in slices:
        idle_gap = sl.start_time - last_time
        if idle_gap > 0:
            line += "." * idle_gap
            labels += " " * idle_gap
            last_time = sl.start_time
            time_marks += f"{last_time:>3}"

        width = max(1, sl.end_time - sl.start_time)
        line += "=" * width
        labels += sl.name[:width].ljust(width)
        last_time = sl.end_time
        time_marks += f"{last_time:>3}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels,
            time_marks,
        ]
    )


def build_rich_gantt(slices: List[ScheduledSlice], base_color: Optional[str] = None) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.

    With a ``base_color`` every process gets its own shade of it; otherwise
    colors cycle through a fixed palette.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    slices = sorted(slices, key=lambda s: (s.start_time, s.end_time))

    names = list(dict.fromkeys(s.name for s in slices))
    if base_color:
        colors = generate_shades(base_color, len(names))
    else:
        colors = [PALETTE[i % len(PALETTE)] for i in range(len(names))]
    name_to_color: Dict[str, str] = dict(zip(names, colors))

    timeline = Text()
    labels = Text()
    time_marks = "0"
    last_time = 0

    for sl in slices:
        idle_gap = sl.start_time - last_time
        if idle_gap > 0:
            timeline.append(" " * idle_gap)
            labels.append(" " * idle_gap)
            last_time = sl.start_time
            time_marks += f"{last_time:>3}"

        width = max(1, sl.end_time - sl.start_time)

        timeline.append(" " * width, style=f"on {name_to_color[sl.name]}")
        labels.append(sl.name[:width].ljust(width), style="bold")

        last_time = sl.end_time
        time_marks += f"{last_time:>3}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
