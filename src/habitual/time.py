# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union

import pendulum

Reference = Union[pendulum.DateTime, pendulum.Date, datetime.datetime, datetime.date]


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def to_local_datetime(reference: Reference) -> pendulum.DateTime:
    """Coerce a date or datetime into a local pendulum.DateTime.

    Bare dates are treated as local midnight. Naive datetimes are interpreted
    in local time.
    """
    if isinstance(reference, datetime.datetime):
        return pendulum.instance(reference, tz="local").in_tz("local")
    return pendulum.datetime(
        reference.year, reference.month, reference.day, tz="local"
    )


def to_local_date(reference: Reference) -> pendulum.Date:
    """Normalize a date or datetime to its local calendar day."""
    return to_local_datetime(reference).date()


def start_of_week(reference: Reference) -> pendulum.DateTime:
    """Monday 00:00:00.000000 local of the week containing reference."""
    return to_local_datetime(reference).start_of("week")


def end_of_week(reference: Reference) -> pendulum.DateTime:
    """Sunday 23:59:59.999999 local of the week containing reference."""
    return to_local_datetime(reference).end_of("week")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a timestamp: {datetime}")
    return parsed


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def date_to_str(date: pendulum.Date) -> str:
    """Format a calendar day as 'YYYY-MM-DD'."""
    return date.format("YYYY-MM-DD")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string (or a longer ISO timestamp) into a calendar day."""
    year, month, day = map(int, date_str[:10].split("-"))
    return pendulum.date(year, month, day)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


def days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return start.diff(end).in_days()
