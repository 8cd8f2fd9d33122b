# SPDX-License-Identifier: MIT

from typing import Callable

import pendulum

from timelog.model.period import Period

DateRange = tuple[pendulum.Date, pendulum.Date]


def _first_of_month(year: int, month: int) -> pendulum.Date:
    return pendulum.date(year, month, 1)


def _monday_of_week(today: pendulum.Date) -> pendulum.Date:
    return today.subtract(days=today.isoweekday() - 1)


def today_range(today: pendulum.Date) -> DateRange:
    return today, today


def yesterday_range(today: pendulum.Date) -> DateRange:
    yesterday = today.subtract(days=1)
    return yesterday, yesterday


def this_week_range(today: pendulum.Date) -> DateRange:
    return _monday_of_week(today), today


def last_week_range(today: pendulum.Date) -> DateRange:
    this_week_start = _monday_of_week(today)
    return this_week_start.subtract(days=7), this_week_start.subtract(days=1)


def this_month_range(today: pendulum.Date) -> DateRange:
    return _first_of_month(today.year, today.month), today


def last_month_range(today: pendulum.Date) -> DateRange:
    if today.month == 1:
        year, month = today.year - 1, 12
    else:
        year, month = today.year, today.month - 1
    start = _first_of_month(year, month)
    end = start.add(months=1).subtract(days=1)
    return start, end


def ytd_range(today: pendulum.Date) -> DateRange:
    return pendulum.date(today.year, 1, 1), today


def last_year_range(today: pendulum.Date) -> DateRange:
    return pendulum.date(today.year - 1, 1, 1), pendulum.date(today.year - 1, 12, 31)


PERIOD_RANGES: dict[Period, Callable[[pendulum.Date], DateRange]] = {
    Period.TODAY: today_range,
    Period.YESTERDAY: yesterday_range,
    Period.THIS_WEEK: this_week_range,
    Period.LAST_WEEK: last_week_range,
    Period.THIS_MONTH: this_month_range,
    Period.LAST_MONTH: last_month_range,
    Period.YTD: ytd_range,
    Period.LAST_YEAR: last_year_range,
}


def period_range(period: Period, today: pendulum.Date) -> DateRange:
    """Inclusive (start, end) local calendar dates for a period."""
    return PERIOD_RANGES[period](today)
