# SPDX-License-Identifier: MIT

import math
from abc import ABC, abstractmethod
from typing import Literal, Optional, Sequence

import pendulum

from ganttline import time
from ganttline.errors import UnknownGranularityError
from ganttline.model.granularity_type import GranularityType
from ganttline.model.time_bucket import TimeBucket

EdgeType = Literal["start", "end"]


class GranularityStrategy(ABC):
    """
    Calendar rules for one timeline granularity.

    A strategy knows how to snap a date range outward to its period
    boundaries, how to advance one period, how to label a bucket and how to
    find the bucket holding a given date.
    """

    name: GranularityType

    @abstractmethod
    def align_range(
        self, min_date: pendulum.Date, max_date: pendulum.Date
    ) -> tuple[pendulum.Date, pendulum.Date]: ...

    @abstractmethod
    def step(self, date: pendulum.Date) -> pendulum.Date: ...

    @abstractmethod
    def label(self, date: pendulum.Date) -> str: ...

    @abstractmethod
    def period_end(self, bucket_date: pendulum.Date) -> pendulum.Date: ...

    @abstractmethod
    def index_of(
        self,
        buckets: Sequence[TimeBucket],
        target: pendulum.Date,
        edge: EdgeType,
    ) -> Optional[int]: ...

    def contains(self, bucket_date: pendulum.Date, target: pendulum.Date) -> bool:
        return bucket_date <= target <= self.period_end(bucket_date)


class _WeekAlignedStrategy(GranularityStrategy):
    def __init__(self, week_starts_on: str = "monday") -> None:
        # Fail on an unknown weekday before any date arithmetic runs
        time.weekday_index(week_starts_on)
        self.week_starts_on = week_starts_on

    def align_range(
        self, min_date: pendulum.Date, max_date: pendulum.Date
    ) -> tuple[pendulum.Date, pendulum.Date]:
        return (
            time.start_of_week(min_date, self.week_starts_on),
            time.end_of_week(max_date, self.week_starts_on),
        )


class DayStrategy(_WeekAlignedStrategy):
    name: GranularityType = "day"

    def step(self, date: pendulum.Date) -> pendulum.Date:
        return date.add(days=1)

    def label(self, date: pendulum.Date) -> str:
        return date.format("ddd DD")

    def period_end(self, bucket_date: pendulum.Date) -> pendulum.Date:
        return bucket_date

    def index_of(
        self,
        buckets: Sequence[TimeBucket],
        target: pendulum.Date,
        edge: EdgeType,
    ) -> Optional[int]:
        if not buckets:
            return None
        return time.days_between(buckets[0]["date"], target)


class WeekStrategy(_WeekAlignedStrategy):
    name: GranularityType = "week"

    def step(self, date: pendulum.Date) -> pendulum.Date:
        return date.add(weeks=1)

    def label(self, date: pendulum.Date) -> str:
        return date.format("MMM DD")

    def period_end(self, bucket_date: pendulum.Date) -> pendulum.Date:
        return bucket_date.add(days=6)

    def index_of(
        self,
        buckets: Sequence[TimeBucket],
        target: pendulum.Date,
        edge: EdgeType,
    ) -> Optional[int]:
        """
        Start edges round down and end edges round up, so a bar starting
        mid-week begins in that week's column and a bar ending mid-week runs
        through it.
        """
        if not buckets:
            return None
        diff = time.days_between(buckets[0]["date"], target)
        if edge == "start":
            return math.floor(diff / 7)
        return math.ceil(diff / 7)


class _PeriodMatchStrategy(GranularityStrategy):
    def index_of(
        self,
        buckets: Sequence[TimeBucket],
        target: pendulum.Date,
        edge: EdgeType,
    ) -> Optional[int]:
        for i, bucket in enumerate(buckets):
            if self.same_period(bucket["date"], target):
                return i
        return None

    @abstractmethod
    def same_period(self, a: pendulum.Date, b: pendulum.Date) -> bool: ...


class MonthStrategy(_PeriodMatchStrategy):
    name: GranularityType = "month"

    def align_range(
        self, min_date: pendulum.Date, max_date: pendulum.Date
    ) -> tuple[pendulum.Date, pendulum.Date]:
        return min_date.start_of("month"), max_date.end_of("month")

    def step(self, date: pendulum.Date) -> pendulum.Date:
        return date.add(months=1)

    def label(self, date: pendulum.Date) -> str:
        return date.format("MMM YYYY")

    def period_end(self, bucket_date: pendulum.Date) -> pendulum.Date:
        return bucket_date.end_of("month")

    def same_period(self, a: pendulum.Date, b: pendulum.Date) -> bool:
        return a.year == b.year and a.month == b.month


class QuarterStrategy(_PeriodMatchStrategy):
    name: GranularityType = "quarter"

    def align_range(
        self, min_date: pendulum.Date, max_date: pendulum.Date
    ) -> tuple[pendulum.Date, pendulum.Date]:
        return time.start_of_quarter(min_date), time.end_of_quarter(max_date)

    def step(self, date: pendulum.Date) -> pendulum.Date:
        return date.add(months=3)

    def label(self, date: pendulum.Date) -> str:
        return f"Q{time.quarter_of(date)} {date.format('YYYY')}"

    def period_end(self, bucket_date: pendulum.Date) -> pendulum.Date:
        return time.end_of_quarter(bucket_date)

    def same_period(self, a: pendulum.Date, b: pendulum.Date) -> bool:
        return a.year == b.year and time.quarter_of(a) == time.quarter_of(b)


class YearStrategy(_PeriodMatchStrategy):
    name: GranularityType = "year"

    def align_range(
        self, min_date: pendulum.Date, max_date: pendulum.Date
    ) -> tuple[pendulum.Date, pendulum.Date]:
        return min_date.start_of("year"), max_date.end_of("year")

    def step(self, date: pendulum.Date) -> pendulum.Date:
        return date.add(years=1)

    def label(self, date: pendulum.Date) -> str:
        return date.format("YYYY")

    def period_end(self, bucket_date: pendulum.Date) -> pendulum.Date:
        return bucket_date.end_of("year")

    def same_period(self, a: pendulum.Date, b: pendulum.Date) -> bool:
        return a.year == b.year


def get_strategy(
    granularity: str, week_starts_on: str = "monday"
) -> GranularityStrategy:
    if granularity == "day":
        return DayStrategy(week_starts_on)
    elif granularity == "week":
        return WeekStrategy(week_starts_on)
    elif granularity == "month":
        return MonthStrategy()
    elif granularity == "quarter":
        return QuarterStrategy()
    elif granularity == "year":
        return YearStrategy()
    raise UnknownGranularityError(granularity)
