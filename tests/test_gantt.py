from task_scheduler.gantt import build_rich_gantt, generate_shades, render_gantt
from task_scheduler.models import ScheduledSlice


def test_generate_shades():
    assert generate_shades("#6A0DAD", 2) == ["#7e21c1", "#9235d5"]


def test_generate_shades_clamps_to_white():
    assert generate_shades("#FFD700", 1) == ["#ffeb14"]


def test_render_gantt_with_idle_gap():
    chart = render_gantt([ScheduledSlice("P1", 0, 2), ScheduledSlice("P2", 4, 5)])
    assert chart.splitlines() == ["Gantt Chart:", "|==..=|", "P1  P", "0  2  4  5"]


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_build_rich_gantt_time_marks():
    _, marks = build_rich_gantt([ScheduledSlice("P1", 0, 3), ScheduledSlice("P2", 3, 5)], base_color="#32CD32")
    assert marks == "0  3  5"


def test_build_rich_gantt_empty():
    _, marks = build_rich_gantt([])
    assert marks == ""
