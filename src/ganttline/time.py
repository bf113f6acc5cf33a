# SPDX-License-Identifier: MIT

import datetime

import pendulum

WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def weekday_index(week_starts_on: str) -> int:
    try:
        return WEEKDAYS[week_starts_on.lower()]
    except KeyError:
        raise ValueError(f"unknown weekday: {week_starts_on!r}") from None


def start_of_week(date: pendulum.Date, week_starts_on: str = "monday") -> pendulum.Date:
    """
    Snap a date back to the first day of its week.

    pendulum numbers weekdays Monday=0 through Sunday=6, which is also the
    numbering used by WEEKDAYS.
    """
    offset = (int(date.day_of_week) - weekday_index(week_starts_on)) % 7
    return date.subtract(days=offset)


def end_of_week(date: pendulum.Date, week_starts_on: str = "monday") -> pendulum.Date:
    return start_of_week(date, week_starts_on).add(days=6)


def quarter_of(date: datetime.date) -> int:
    return (date.month - 1) // 3 + 1


def start_of_quarter(date: pendulum.Date) -> pendulum.Date:
    first_month = 3 * (quarter_of(date) - 1) + 1
    return pendulum.date(date.year, first_month, 1)


def end_of_quarter(date: pendulum.Date) -> pendulum.Date:
    return start_of_quarter(date).add(months=2).end_of("month")


def days_between(origin: datetime.date, target: datetime.date) -> int:
    """Signed number of whole days from origin to target."""
    return target.toordinal() - origin.toordinal()


def as_date(value: datetime.date) -> pendulum.Date:
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pendulum.date(value.year, value.month, value.day)


def date_from_str(date: str) -> pendulum.Date:
    """
    Parse an ISO-8601 date or timestamp.

    Timestamps keep the calendar date they were written with; no timezone
    conversion is applied.
    """
    parsed = pendulum.parse(date, exact=True)
    if isinstance(parsed, datetime.datetime):
        return as_date(parsed)
    if isinstance(parsed, datetime.date):
        return as_date(parsed)
    raise ValueError(f"not a date: {date!r}")


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.isoformat()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMM DD, YYYY")
