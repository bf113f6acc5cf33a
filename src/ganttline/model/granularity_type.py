# SPDX-License-Identifier: MIT

from typing import Literal

GranularityType = Literal["day", "week", "month", "quarter", "year"]

GRANULARITIES: tuple[GranularityType, ...] = (
    "day",
    "week",
    "month",
    "quarter",
    "year",
)
