# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from ganttline.model.granularity_type import GRANULARITIES, GranularityType
from ganttline.service.exchange import GRANULARITY_BY_TIME_SCALE
from ganttline.time import WEEKDAYS

GRANULARITY_ALIASES: dict[str, GranularityType] = {
    "d": "day",
    "w": "week",
    "m": "month",
    "q": "quarter",
    "y": "year",
}


def parse_granularity(granularity_param: Optional[str]) -> Optional[GranularityType]:
    """
    Parse a granularity name.

    Accepts "day", "week", "month", "quarter", "year", their plural forms and
    single-letter shortcuts (d, w, m, q, y).
    """
    if granularity_param is None:
        return None

    granularity = granularity_param.strip().lower()
    if granularity in GRANULARITIES:
        return granularity  # type: ignore[return-value]
    if granularity in GRANULARITY_BY_TIME_SCALE:
        return GRANULARITY_BY_TIME_SCALE[granularity]
    if granularity in GRANULARITY_ALIASES:
        return GRANULARITY_ALIASES[granularity]
    choices = ", ".join(GRANULARITIES)
    raise typer.BadParameter(
        f"Granularity must be one of {choices}, got '{granularity_param}'"
    )


def parse_weekday(weekday_param: Optional[str]) -> Optional[str]:
    if weekday_param is None:
        return None

    weekday = weekday_param.strip().lower()
    if weekday not in WEEKDAYS:
        raise typer.BadParameter(
            f"Weekday must be one of {', '.join(WEEKDAYS)}, got '{weekday_param}'"
        )
    return weekday

