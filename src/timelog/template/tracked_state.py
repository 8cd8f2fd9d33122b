# SPDX-License-Identifier: MIT

from timelog.model.tracked_state import TrackedState
from timelog.time import now_utc


def get_tracked_state_template() -> TrackedState:
    return {
        "task": "",
        "project": None,
        "started": now_utc(),
        "accumulated_ms": 0,
    }
