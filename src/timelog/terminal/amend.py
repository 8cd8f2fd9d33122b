# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from timelog.repository.record import RecordRepository
from timelog.service.amend import amend_record
from timelog.service.error import AmbiguousMatchError, TimelogError
from timelog.terminal.completion import complete_project
from timelog.terminal.parse import parse_date
from timelog.view.message import die, warn
from timelog.view.views import amend as amend_view


def amend(
    date: Annotated[
        pendulum.Date,
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, or day offset like -1",
        ),
    ],
    task: Annotated[
        str,
        typer.Option(
            "--task", "-t", help="substring of the task name, case-sensitive"
        ),
    ],
    new_task: Annotated[Optional[str], typer.Option("--new-task", "-nt")] = None,
    new_duration: Annotated[
        Optional[int],
        typer.Option("--new-duration", "-nd", help="duration in whole minutes"),
    ] = None,
    new_project: Annotated[
        Optional[str],
        typer.Option(
            "--new-project",
            "-np",
            help='new project label; "" removes the project',
            autocompletion=complete_project,
        ),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="show the changes without saving")
    ] = False,
) -> None:
    """
    amend a recorded task
    """
    try:
        amendment = amend_record(
            RecordRepository(),
            date,
            task,
            new_task=new_task,
            new_duration_minutes=new_duration,
            new_project=new_project,
            dry_run=dry_run,
        )
    except AmbiguousMatchError as e:
        warn(
            f"Found {len(e.candidates)} matching records. "
            "Please be more specific with your task pattern:"
        )
        amend_view.candidates(e.candidates)
        die(str(e))
    except TimelogError as e:
        die(str(e))

    amend_view.amendment(amendment)
