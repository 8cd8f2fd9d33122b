# SPDX-License-Identifier: MIT

from timelog.model.record import Record
from timelog.model.tracked_state import TrackedState
from timelog.service.tracking import Status
from timelog.time import date_to_str, datetime_to_display_local_str, fmt_hms_ms
from timelog.view.message import emph, info, project_suffix


def started(state: TrackedState) -> None:
    info(f"started {emph(state['task'])}{project_suffix(state['project'])}")


def paused(status: Status) -> None:
    info(
        f"paused {emph(status['state']['task'])}  "
        f"(elapsed {fmt_hms_ms(status['elapsed_ms'])})"
    )


def resumed(state: TrackedState) -> None:
    info(f"resumed {emph(state['task'])}")


def stopped(record: Record) -> None:
    info(
        f"recorded {emph(record['task'])}{project_suffix(record['project'])}  "
        f"{fmt_hms_ms(record['duration_ms'])} on {date_to_str(record['date'])}"
    )


def status_line(status: Status) -> None:
    state = status["state"]
    if status["active"] and state["started"] is not None:
        info(
            f"{emph('active')}  {fmt_hms_ms(status['elapsed_ms'])}  "
            f"since {datetime_to_display_local_str(state['started'])}  "
            f"-  task: {emph(state['task'])}{project_suffix(state['project'])}"
        )
    else:
        info(
            f"{emph('paused')}  accumulated {fmt_hms_ms(status['elapsed_ms'])}  "
            f"-  task: {emph(state['task'])}{project_suffix(state['project'])}"
        )
