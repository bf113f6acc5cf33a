# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

from ganttline.errors import EmptyTimelineError, TimelineMismatchError
from ganttline.model.granularity_type import GranularityType
from ganttline.model.position_range import PositionRange
from ganttline.model.project import Project
from ganttline.model.time_bucket import TimeBucket
from ganttline.timeline.strategy import GranularityStrategy, get_strategy

logger = logging.getLogger(__name__)


def calculate_bar_position(
    project: Project,
    buckets: Sequence[TimeBucket],
    granularity: GranularityType,
    week_starts_on: str = "monday",
    strict: bool = False,
) -> PositionRange:
    """
    Map a project's inclusive date range onto bucket indices.

    The buckets must come from generate_timeline for the same granularity and
    project snapshot. An end date with no matching bucket falls back to the
    last bucket and an unmatched start to the first one. Indices are clamped
    so that 0 <= start_index <= end_index < len(buckets); an inverted or
    single-day range therefore gets a one-bucket bar.

    Args:
        project: The project to place
        buckets: Bucket sequence produced for the same inputs
        granularity: "day", "week", "month", "quarter", or "year"
        week_starts_on: First weekday used when the buckets were generated
        strict: Raise TimelineMismatchError instead of falling back when the
            project lies outside the bucket span

    Returns:
        PositionRange with clamped start and end indices
    """
    if len(buckets) == 0:
        raise EmptyTimelineError("cannot position a bar on an empty timeline")

    strategy = get_strategy(granularity, week_starts_on)
    last_index = len(buckets) - 1

    outside = _outside_span_message(project, buckets, strategy)
    if outside is not None:
        if strict:
            raise TimelineMismatchError(project["name"], outside)
        logger.warning("%s: %s, clamping to the timeline", project["name"], outside)

    start_index = strategy.index_of(buckets, project["start"], "start")
    end_index = strategy.index_of(buckets, project["end"], "end")

    if start_index is None:
        start_index = 0
    if end_index is None:
        end_index = last_index

    start_index = min(max(0, start_index), last_index)
    end_index = min(max(start_index, end_index), last_index)

    return PositionRange(start_index, end_index)


def _outside_span_message(
    project: Project,
    buckets: Sequence[TimeBucket],
    strategy: GranularityStrategy,
) -> Optional[str]:
    span_start = buckets[0]["date"]
    span_end = strategy.period_end(buckets[-1]["date"])

    for edge, date in (("start", project["start"]), ("end", project["end"])):
        if date < span_start or date > span_end:
            return (
                f"{edge} date {date.isoformat()} is outside the timeline "
                f"{span_start.isoformat()} to {span_end.isoformat()}"
            )
    return None
