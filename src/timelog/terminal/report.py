# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from timelog.model.period import Period
from timelog.repository.record import RecordRepository
from timelog.service.error import RecordsNotFoundError, TimelogError
from timelog.service.report import build_report
from timelog.terminal.completion import complete_project
from timelog.time import today_local
from timelog.view.message import die, warn
from timelog.view.views import report as report_view


def report(
    period: Annotated[Period, typer.Argument(help="period to report on")],
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="only include records of this project",
            autocompletion=complete_project,
        ),
    ] = None,
) -> None:
    """
    report recorded time for a period
    """
    try:
        records = RecordRepository().load_all()
    except RecordsNotFoundError as e:
        warn(str(e))
        return
    except TimelogError as e:
        die(str(e))

    period_report = build_report(records, period, today_local(), project)
    if len(period_report["records"]) == 0:
        warn("no records in selected period")
        return

    report_view.report_table(period_report)
