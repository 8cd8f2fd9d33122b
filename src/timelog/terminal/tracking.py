# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from timelog.repository.record import RecordRepository
from timelog.repository.state import StateRepository
from timelog.service import tracking
from timelog.service.error import TimelogError
from timelog.terminal.completion import complete_project
from timelog.view.message import die
from timelog.view.views import tracking as tracking_view


def start(
    task: Annotated[str, typer.Argument(help="name of the task to track")],
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="project label for the task",
            autocompletion=complete_project,
        ),
    ] = None,
) -> None:
    """
    start tracking a task
    """
    try:
        state = tracking.start(StateRepository(), task, project)
    except TimelogError as e:
        die(str(e))
    tracking_view.started(state)


def pause() -> None:
    """
    pause the active task
    """
    try:
        status = tracking.pause(StateRepository())
    except TimelogError as e:
        die(str(e))
    tracking_view.paused(status)


def resume() -> None:
    """
    resume the paused task
    """
    try:
        state = tracking.resume(StateRepository())
    except TimelogError as e:
        die(str(e))
    tracking_view.resumed(state)


def stop() -> None:
    """
    stop the task in progress and record it
    """
    try:
        record = tracking.stop(StateRepository(), RecordRepository())
    except TimelogError as e:
        die(str(e))
    tracking_view.stopped(record)


def status() -> None:
    """
    show the task in progress and its elapsed time
    """
    try:
        current = tracking.status(StateRepository())
    except TimelogError as e:
        die(str(e))
    tracking_view.status_line(current)
