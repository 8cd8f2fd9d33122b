# SPDX-License-Identifier: MIT

from rich.markup import escape

from timelog.model.record import Record
from timelog.service.amend import Amendment
from timelog.time import date_to_str, fmt_hms_ms
from timelog.view.message import info


def record_line(record: Record) -> str:
    project_info = ""
    if record["project"] is not None:
        project_info = f" (project: {escape(record['project'])})"
    return (
        f"  {date_to_str(record['date'])} - {escape(record['task'])} - "
        f"{fmt_hms_ms(record['duration_ms'])}{project_info}"
    )


def candidates(records: list[Record]) -> None:
    for record in records:
        info(record_line(record))


def amendment(amendment: Amendment) -> None:
    info("Found record to amend:")
    info(record_line(amendment["original"]))
    info("")
    info("Changes to apply:")
    for change in amendment["changes"]:
        info(f"  {escape(change)}")

    if not amendment["applied"]:
        info("Dry run mode - no changes were made")
        return

    info(
        f"Successfully amended record for {date_to_str(amendment['amended']['date'])}"
        f" - {escape(amendment['amended']['task'])}"
    )
