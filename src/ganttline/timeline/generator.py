# SPDX-License-Identifier: MIT

import logging
from typing import Sequence

from ganttline.model.granularity_type import GranularityType
from ganttline.model.project import Project
from ganttline.model.time_bucket import TimeBucket
from ganttline.timeline.strategy import get_strategy

logger = logging.getLogger(__name__)


def generate_timeline(
    projects: Sequence[Project],
    granularity: GranularityType,
    week_starts_on: str = "monday",
) -> list[TimeBucket]:
    """
    Generate the ordered bucket sequence covering every project.

    The span runs from the aligned start of the earliest project start to the
    aligned end of the latest project end. Day granularity aligns to whole
    weeks so its grid lines up with the week view.

    Args:
        projects: Projects to cover; an empty collection yields no buckets
        granularity: "day", "week", "month", "quarter", or "year"
        week_starts_on: First weekday used by day and week alignment

    Returns:
        List of buckets, each holding its period start date and label
    """
    strategy = get_strategy(granularity, week_starts_on)

    if len(projects) == 0:
        return []

    min_date = min(project["start"] for project in projects)
    max_date = max(project["end"] for project in projects)

    # Inverted ranges (start after end) still have to be covered
    min_date = min(min_date, min(project["end"] for project in projects))
    max_date = max(max_date, max(project["start"] for project in projects))
    aligned_start, aligned_end = strategy.align_range(min_date, max_date)

    buckets: list[TimeBucket] = []
    current = aligned_start
    while current <= aligned_end:
        buckets.append({"date": current, "label": strategy.label(current)})
        current = strategy.step(current)

    logger.debug(
        "generated %d %s buckets from %s to %s",
        len(buckets),
        granularity,
        aligned_start,
        aligned_end,
    )
    return buckets
