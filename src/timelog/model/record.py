# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Record(TypedDict):
    task: str
    duration_ms: int
    date: pendulum.Date  # Local calendar date the task was stopped on
    project: Optional[str]
