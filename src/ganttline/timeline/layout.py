# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Hashable, Optional, Sequence

from ganttline.model.granularity_type import GranularityType
from ganttline.model.layout import GanttBar, GanttLayout
from ganttline.model.project import Project
from ganttline.timeline.generator import generate_timeline
from ganttline.timeline.position import calculate_bar_position


def build_gantt_layout(
    projects: Sequence[Project],
    granularity: GranularityType,
    column_width: int,
    week_starts_on: str = "monday",
    strict: bool = False,
) -> GanttLayout:
    """
    Compute buckets and bar geometry for a project collection in one pass.

    Bars are returned in the order of the input projects. Pixel offsets are
    bucket indices multiplied by column_width.
    """
    if column_width <= 0:
        raise ValueError(f"column width must be positive, got {column_width}")

    buckets = generate_timeline(projects, granularity, week_starts_on)

    bars: list[GanttBar] = []
    for project in projects:
        position = calculate_bar_position(
            project, buckets, granularity, week_starts_on, strict
        )
        bars.append(
            {
                "project": project,
                "position": position,
                "left": position.start_index * column_width,
                "width": position.width * column_width,
            }
        )

    return {
        "granularity": granularity,
        "column_width": column_width,
        "buckets": buckets,
        "bars": bars,
    }


def layout_key(
    projects: Sequence[Project],
    granularity: GranularityType,
    column_width: int,
    week_starts_on: str = "monday",
    strict: bool = False,
) -> Hashable:
    return (
        tuple(
            (
                project["id"],
                project["name"],
                project["location"],
                project["start"],
                project["end"],
                project["color"],
            )
            for project in projects
        ),
        granularity,
        column_width,
        week_starts_on.lower(),
        strict,
    )


class LayoutCache:
    """Keeps the most recent layout and rebuilds only when its inputs change."""

    def __init__(self) -> None:
        self._key: Optional[Hashable] = None
        self._layout: Optional[GanttLayout] = None
        self.builds = 0

    def get_layout(
        self,
        projects: Sequence[Project],
        granularity: GranularityType,
        column_width: int,
        week_starts_on: str = "monday",
        strict: bool = False,
    ) -> GanttLayout:
        key = layout_key(projects, granularity, column_width, week_starts_on, strict)
        if self._layout is None or key != self._key:
            self._layout = build_gantt_layout(
                projects, granularity, column_width, week_starts_on, strict
            )
            self._key = key
            self.builds += 1
        return deepcopy(self._layout)

    def clear(self) -> None:
        self._key = None
        self._layout = None
