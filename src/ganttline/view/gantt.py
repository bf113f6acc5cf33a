# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from ganttline.model.granularity_type import GranularityType
from ganttline.model.layout import GanttBar, GanttLayout
from ganttline.model.time_bucket import TimeBucket
from ganttline.timeline.strategy import get_strategy
from ganttline.view.header import header

BAR_CHAR = "█"
LOCATION_COLUMN_WIDTH = 6
# Browser exports size the project column in pixels
PIXELS_PER_CHARACTER = 5
MIN_LEFT_COLUMN_WIDTH = 10


def left_column_width_for(project_column_width: int) -> int:
    """Terminal width of the project column for a width given in pixels."""
    return max(MIN_LEFT_COLUMN_WIDTH, project_column_width // PIXELS_PER_CHARACTER)


def gantt_view(
    source_name: str,
    layout: GanttLayout,
    left_column_width: int = 40,
    console: Optional[Console] = None,
) -> None:
    """
    Display a gantt layout as a terminal chart.

    Each bucket becomes a fixed number of character cells. When the
    timeline is too wide for the terminal, buckets shrink to a single cell and
    only the labels that fit are printed, preferring period boundaries.

    Args:
        source_name: Name of the project file shown in the header
        layout: Layout produced by build_gantt_layout
        left_column_width: Width of the location and project name column
        console: Console to print to (defaults to a new Console)
    """
    header(source_name, f"{layout['granularity']} chart", len(layout["bars"]))

    if console is None:
        console = Console()

    buckets = layout["buckets"]
    granularity = layout["granularity"]

    if len(buckets) == 0:
        console.print(
            "\n[dim]No projects to display. Add a project to get started.[/dim]\n"
        )
        return

    available_width = max(len(buckets), console.width - left_column_width)
    cell_width = _calculate_cell_width(buckets, available_width)
    labels_to_show = _determine_labels_to_show(buckets, granularity, cell_width)

    strategy = get_strategy(granularity)
    span_end = strategy.period_end(buckets[-1]["date"])
    date_range_str = (
        f"{buckets[0]['date'].format('YYYY-MM-DD')} to {span_end.format('YYYY-MM-DD')}"
    )
    console.print(f"\n[bold]{date_range_str}[/bold] (granularity: {granularity})\n")

    chart_elements: list[Text] = []
    chart_elements.append(
        _build_label_row(buckets, labels_to_show, cell_width, left_column_width)
    )

    separator = Text("─" * left_column_width, style="dim")
    separator.append("─" * (cell_width * len(buckets)), style="dim")
    chart_elements.append(separator)

    for bar in layout["bars"]:
        chart_elements.append(
            _build_bar_row(bar, len(buckets), cell_width, left_column_width)
        )

    chart = Group(*chart_elements)
    console.print(Padding(chart, (0, 0, 1, 0)))


def _calculate_cell_width(buckets: list[TimeBucket], available_width: int) -> int:
    """Widest cell that still fits every bucket, capped at label width plus a gap."""
    label_width = max(len(bucket["label"]) for bucket in buckets) + 1
    return max(1, min(label_width, available_width // len(buckets)))


def _is_boundary(bucket: TimeBucket, granularity: GranularityType) -> bool:
    date = bucket["date"]
    if granularity == "day":
        return date.day == 1
    elif granularity == "week":
        return date.day <= 7
    elif granularity == "month":
        return date.month == 1
    elif granularity == "quarter":
        return date.month == 1
    return True


def _determine_labels_to_show(
    buckets: list[TimeBucket],
    granularity: GranularityType,
    cell_width: int,
) -> set[int]:
    """
    Pick the bucket indices whose labels can be printed without overlapping.

    Labels are placed greedily: the first bucket, then period boundaries
    (month starts for days and weeks, year starts for months and quarters),
    then everything else.
    """
    total_width = cell_width * len(buckets)
    occupied = [False] * total_width

    boundaries = [
        i
        for i, bucket in enumerate(buckets)
        if i > 0 and _is_boundary(bucket, granularity)
    ]
    boundary_set = set(boundaries)
    others = [i for i in range(1, len(buckets)) if i not in boundary_set]

    labels_to_show: set[int] = set()
    for i in [0] + boundaries + others:
        start = i * cell_width
        label_width = len(buckets[i]["label"])
        if start + label_width > total_width:
            continue
        # Keep one free cell after each label
        end = start + label_width + 1
        if any(occupied[start : min(end, total_width)]):
            continue
        for pos in range(start, min(end, total_width)):
            occupied[pos] = True
        labels_to_show.add(i)

    return labels_to_show


def _build_label_row(
    buckets: list[TimeBucket],
    labels_to_show: set[int],
    cell_width: int,
    left_column_width: int,
) -> Text:
    total_width = cell_width * len(buckets)
    label_chars = [" "] * total_width
    for i in sorted(labels_to_show):
        start = i * cell_width
        for j, char in enumerate(buckets[i]["label"]):
            if start + j < total_width:
                label_chars[start + j] = char

    row = Text()
    row.append(" " * left_column_width)
    row.append("".join(label_chars), style="bold cyan")
    return row


def _build_bar_row(
    bar: GanttBar,
    bucket_count: int,
    cell_width: int,
    left_column_width: int,
) -> Text:
    project = bar["project"]
    position = bar["position"]
    color = project["color"] or "white"

    location = project["location"][:LOCATION_COLUMN_WIDTH]
    location = location.ljust(LOCATION_COLUMN_WIDTH)
    left_col = f"{location} {project['name']}"
    if len(left_col) > left_column_width:
        left_col = left_col[: left_column_width - 3] + "..."
    else:
        left_col = left_col.ljust(left_column_width)

    row = Text()
    row.append(left_col, style="bold")

    for i in range(bucket_count):
        bg_style = "on grey15" if i % 2 == 1 else ""
        if position.start_index <= i <= position.end_index:
            row.append(BAR_CHAR * cell_width, style=f"{color} {bg_style}".strip())
        else:
            row.append(" " * cell_width, style=bg_style)

    return row
