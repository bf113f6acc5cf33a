# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from ganttline.model.layout import GanttLayout
from ganttline.time import date_to_display_str
from ganttline.view.header import header


def buckets_view(
    source_name: str,
    layout: GanttLayout,
    console: Optional[Console] = None,
) -> None:
    header(source_name, f"{layout['granularity']} buckets", len(layout["bars"]))

    buckets_table = Table(box=box.SIMPLE)
    buckets_table.add_column("index", justify="right")
    buckets_table.add_column("date")
    buckets_table.add_column("label")

    for i, bucket in enumerate(layout["buckets"]):
        buckets_table.add_row(str(i), bucket["date"].isoformat(), bucket["label"])

    if console is None:
        console = Console()
    console.print(buckets_table)


def positions_view(
    source_name: str,
    layout: GanttLayout,
    use_color: bool = True,
    console: Optional[Console] = None,
) -> None:
    header(source_name, f"{layout['granularity']} positions", len(layout["bars"]))

    positions_table = Table(box=box.SIMPLE)
    positions_table.add_column("location")
    positions_table.add_column("project")
    positions_table.add_column("start")
    positions_table.add_column("end")
    positions_table.add_column("start index", justify="right")
    positions_table.add_column("end index", justify="right")
    positions_table.add_column("width", justify="right")
    positions_table.add_column("left px", justify="right")
    positions_table.add_column("width px", justify="right")

    for bar in layout["bars"]:
        project = bar["project"]
        position = bar["position"]
        name = project["name"]
        if use_color and project["color"]:
            name = f"[{project['color']}]{name}[/{project['color']}]"
        positions_table.add_row(
            project["location"],
            name,
            date_to_display_str(project["start"]),
            date_to_display_str(project["end"]),
            str(position.start_index),
            str(position.end_index),
            str(position.width),
            str(bar["left"]),
            str(bar["width"]),
        )

    if console is None:
        console = Console()
    console.print(positions_table)
