# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

EPOCH = pendulum.datetime(1970, 1, 1, tz="UTC")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    return datetime.in_tz("local").date()


def today_local() -> pendulum.Date:
    return local_date(now_utc())


def milliseconds_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Signed number of milliseconds from start to end."""
    return int(round((end.timestamp() - start.timestamp()) * 1000))


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_display_local_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD[T]HH:mm:ssZ")


def date_to_str(date: pendulum.Date) -> str:
    """Convert a pendulum.Date to 'YYYY-MM-DD'."""
    return date.isoformat()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string, raising ValueError for anything else."""
    parsed = pendulum.parse(date_str.strip(), exact=True, strict=True)
    if not isinstance(parsed, pendulum.Date) or isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a calendar date: {date_str!r}")
    return parsed


def fmt_duration(ms: int) -> str:
    """Compact duration: '01h01m01s', seconds omitted when zero."""
    total_seconds = ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    if seconds == 0:
        return f"{hours:02}h{minutes:02}m"
    return f"{hours:02}h{minutes:02}m{seconds:02}s"


def fmt_hms_ms(ms: int) -> str:
    """Precise duration: 'HH:MM:SS.mmm'."""
    total_seconds = ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    fraction = ms % 1000
    return f"{hours:02}:{minutes:02}:{seconds:02}.{fraction:03}"
