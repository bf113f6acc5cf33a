# SPDX-License-Identifier: MIT

import pendulum
import pytest

from ganttline.errors import UnknownGranularityError
from ganttline.model.time_bucket import TimeBucket
from ganttline.timeline.strategy import (
    DayStrategy,
    MonthStrategy,
    QuarterStrategy,
    WeekStrategy,
    YearStrategy,
    get_strategy,
)


def _buckets(*dates: pendulum.Date) -> list[TimeBucket]:
    return [{"date": date, "label": ""} for date in dates]


class TestDispatch:
    @pytest.mark.parametrize(
        "granularity, strategy_class",
        [
            ("day", DayStrategy),
            ("week", WeekStrategy),
            ("month", MonthStrategy),
            ("quarter", QuarterStrategy),
            ("year", YearStrategy),
        ],
    )
    def test_get_strategy(self, granularity: str, strategy_class: type) -> None:
        strategy = get_strategy(granularity)
        assert isinstance(strategy, strategy_class)
        assert strategy.name == granularity

    def test_unknown_granularity(self) -> None:
        with pytest.raises(UnknownGranularityError) as exc_info:
            get_strategy("fortnight")
        assert exc_info.value.granularity == "fortnight"
        assert isinstance(exc_info.value, ValueError)

    def test_unknown_week_start(self) -> None:
        with pytest.raises(ValueError):
            get_strategy("week", "someday")


class TestAlignRange:
    def test_day_aligns_to_whole_weeks(self) -> None:
        start, end = DayStrategy().align_range(
            pendulum.date(2025, 1, 15), pendulum.date(2025, 1, 15)
        )
        assert start == pendulum.date(2025, 1, 13)
        assert end == pendulum.date(2025, 1, 19)

    def test_week_with_sunday_start(self) -> None:
        start, end = WeekStrategy("sunday").align_range(
            pendulum.date(2025, 1, 15), pendulum.date(2025, 5, 30)
        )
        assert start == pendulum.date(2025, 1, 12)
        assert end == pendulum.date(2025, 5, 31)

    def test_month(self) -> None:
        start, end = MonthStrategy().align_range(
            pendulum.date(2025, 1, 15), pendulum.date(2025, 2, 3)
        )
        assert start == pendulum.date(2025, 1, 1)
        assert end == pendulum.date(2025, 2, 28)

    def test_quarter(self) -> None:
        start, end = QuarterStrategy().align_range(
            pendulum.date(2025, 3, 1), pendulum.date(2025, 4, 15)
        )
        assert start == pendulum.date(2025, 1, 1)
        assert end == pendulum.date(2025, 6, 30)

    def test_year(self) -> None:
        start, end = YearStrategy().align_range(
            pendulum.date(2024, 11, 1), pendulum.date(2026, 2, 1)
        )
        assert start == pendulum.date(2024, 1, 1)
        assert end == pendulum.date(2026, 12, 31)


class TestStepAndLabel:
    def test_day(self) -> None:
        strategy = DayStrategy()
        assert strategy.step(pendulum.date(2025, 2, 28)) == pendulum.date(2025, 3, 1)
        assert strategy.label(pendulum.date(2025, 1, 13)) == "Mon 13"
        assert strategy.label(pendulum.date(2025, 1, 5)) == "Sun 05"

    def test_week(self) -> None:
        strategy = WeekStrategy()
        assert strategy.step(pendulum.date(2025, 1, 27)) == pendulum.date(2025, 2, 3)
        assert strategy.label(pendulum.date(2025, 1, 13)) == "Jan 13"

    def test_month(self) -> None:
        strategy = MonthStrategy()
        assert strategy.step(pendulum.date(2025, 12, 1)) == pendulum.date(2026, 1, 1)
        assert strategy.label(pendulum.date(2025, 2, 1)) == "Feb 2025"

    def test_quarter(self) -> None:
        strategy = QuarterStrategy()
        assert strategy.step(pendulum.date(2025, 10, 1)) == pendulum.date(2026, 1, 1)
        assert strategy.label(pendulum.date(2025, 1, 1)) == "Q1 2025"
        assert strategy.label(pendulum.date(2025, 10, 1)) == "Q4 2025"

    def test_year(self) -> None:
        strategy = YearStrategy()
        assert strategy.step(pendulum.date(2025, 1, 1)) == pendulum.date(2026, 1, 1)
        assert strategy.label(pendulum.date(2025, 1, 1)) == "2025"


class TestPeriodEnd:
    def test_period_ends(self) -> None:
        assert DayStrategy().period_end(pendulum.date(2025, 1, 13)) == pendulum.date(
            2025, 1, 13
        )
        assert WeekStrategy().period_end(
            pendulum.date(2025, 1, 13)
        ) == pendulum.date(2025, 1, 19)
        assert MonthStrategy().period_end(
            pendulum.date(2024, 2, 1)
        ) == pendulum.date(2024, 2, 29)
        assert QuarterStrategy().period_end(
            pendulum.date(2025, 7, 1)
        ) == pendulum.date(2025, 9, 30)
        assert YearStrategy().period_end(
            pendulum.date(2025, 1, 1)
        ) == pendulum.date(2025, 12, 31)

    def test_contains(self) -> None:
        strategy = MonthStrategy()
        bucket_date = pendulum.date(2025, 1, 1)
        assert strategy.contains(bucket_date, pendulum.date(2025, 1, 31))
        assert not strategy.contains(bucket_date, pendulum.date(2025, 2, 1))


class TestIndexOf:
    def test_day_is_offset_from_first_bucket(self) -> None:
        buckets = _buckets(pendulum.date(2025, 1, 13), pendulum.date(2025, 1, 14))
        strategy = DayStrategy()
        assert strategy.index_of(buckets, pendulum.date(2025, 1, 15), "start") == 2
        assert strategy.index_of(buckets, pendulum.date(2025, 1, 12), "end") == -1

    def test_week_rounds_start_down_and_end_up(self) -> None:
        buckets = _buckets(pendulum.date(2025, 1, 13), pendulum.date(2025, 1, 20))
        strategy = WeekStrategy()
        # Thursday of the second week
        target = pendulum.date(2025, 1, 23)
        assert strategy.index_of(buckets, target, "start") == 1
        assert strategy.index_of(buckets, target, "end") == 2

    def test_week_on_week_start(self) -> None:
        buckets = _buckets(pendulum.date(2025, 1, 13), pendulum.date(2025, 1, 20))
        strategy = WeekStrategy()
        target = pendulum.date(2025, 1, 20)
        assert strategy.index_of(buckets, target, "start") == 1
        assert strategy.index_of(buckets, target, "end") == 1

    def test_month_matches_same_month_only(self) -> None:
        buckets = _buckets(pendulum.date(2025, 1, 1), pendulum.date(2025, 2, 1))
        strategy = MonthStrategy()
        assert strategy.index_of(buckets, pendulum.date(2025, 2, 15), "end") == 1
        assert strategy.index_of(buckets, pendulum.date(2026, 2, 15), "end") is None

    def test_quarter_matches_same_quarter(self) -> None:
        buckets = _buckets(pendulum.date(2025, 1, 1), pendulum.date(2025, 4, 1))
        strategy = QuarterStrategy()
        assert strategy.index_of(buckets, pendulum.date(2025, 3, 31), "start") == 0
        assert strategy.index_of(buckets, pendulum.date(2025, 6, 30), "end") == 1
        assert strategy.index_of(buckets, pendulum.date(2025, 7, 1), "end") is None

    def test_year_matches_calendar_year(self) -> None:
        buckets = _buckets(pendulum.date(2024, 1, 1), pendulum.date(2025, 1, 1))
        strategy = YearStrategy()
        assert strategy.index_of(buckets, pendulum.date(2025, 12, 31), "end") == 1
        assert strategy.index_of(buckets, pendulum.date(2023, 12, 31), "start") is None

    def test_empty_buckets(self) -> None:
        assert DayStrategy().index_of([], pendulum.date(2025, 1, 1), "start") is None
        assert WeekStrategy().index_of([], pendulum.date(2025, 1, 1), "end") is None
