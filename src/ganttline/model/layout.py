# SPDX-License-Identifier: MIT

from typing import TypedDict

from ganttline.model.granularity_type import GranularityType
from ganttline.model.position_range import PositionRange
from ganttline.model.project import Project
from ganttline.model.time_bucket import TimeBucket


class GanttBar(TypedDict):
    project: Project
    position: PositionRange
    left: int
    width: int


class GanttLayout(TypedDict):
    granularity: GranularityType
    column_width: int
    buckets: list[TimeBucket]
    bars: list[GanttBar]
