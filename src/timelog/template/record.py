# SPDX-License-Identifier: MIT

from timelog.model.record import Record
from timelog.time import today_local


def get_record_template() -> Record:
    return {
        "task": "",
        "duration_ms": 0,
        "date": today_local(),
        "project": None,
    }
