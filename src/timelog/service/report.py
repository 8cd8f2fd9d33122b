# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from timelog.model.period import Period
from timelog.model.record import Record
from timelog.service.period import period_range


class Report(TypedDict):
    period: Period
    start: pendulum.Date
    end: pendulum.Date
    project: Optional[str]
    records: list[Record]
    total_ms: int


def filter_records(
    records: list[Record],
    start: pendulum.Date,
    end: pendulum.Date,
    project: Optional[str] = None,
) -> list[Record]:
    """
    Records dated within [start, end], optionally restricted to one project.

    Records without a project never match a project filter. The result is
    sorted by date, then task name.
    """
    filtered = [
        record
        for record in records
        if start <= record["date"] <= end
        and (project is None or record["project"] == project)
    ]
    filtered.sort(key=lambda record: (record["date"], record["task"]))
    return filtered


def build_report(
    records: list[Record],
    period: Period,
    today: pendulum.Date,
    project: Optional[str] = None,
) -> Report:
    start, end = period_range(period, today)
    rows = filter_records(records, start, end, project)
    return {
        "period": period,
        "start": start,
        "end": end,
        "project": project,
        "records": rows,
        "total_ms": sum(record["duration_ms"] for record in rows),
    }
