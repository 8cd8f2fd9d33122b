# SPDX-License-Identifier: MIT

from rich import box
from rich.markup import escape
from rich.table import Table

from timelog.service.report import Report
from timelog.time import date_to_str, fmt_duration
from timelog.view.message import console, emph
from timelog.view.views.header import header


def report_title(report: Report) -> str:
    title = (
        f"{report['period'].display_title} report "
        f"({date_to_str(report['start'])}..{date_to_str(report['end'])})"
    )
    if report["project"] is not None:
        title += f" for project {emph(report['project'])}"
    return title


def report_table(report: Report) -> None:
    header(report_title(report))

    table = Table(box=box.SIMPLE, show_footer=True)
    table.add_column("TASK", footer="TOTAL")
    table.add_column("PROJECT")
    table.add_column("DATE", no_wrap=True)
    table.add_column(
        "DURATION",
        justify="right",
        no_wrap=True,
        footer=fmt_duration(report["total_ms"]),
    )

    for record in report["records"]:
        table.add_row(
            escape(record["task"]),
            escape(record["project"]) if record["project"] is not None else "-",
            date_to_str(record["date"]),
            fmt_duration(record["duration_ms"]),
        )

    console.print(table)
