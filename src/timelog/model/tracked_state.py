# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class TrackedState(TypedDict):
    task: str
    project: Optional[str]
    # Start of the current running segment; None while paused
    started: Optional[pendulum.DateTime]
    # Elapsed time banked from earlier running segments
    accumulated_ms: int
