# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, TypedDict

import pendulum

from timelog.model.record import Record
from timelog.service.error import (
    AmbiguousMatchError,
    InvalidDurationError,
    NoChangesError,
    RecordNotFoundError,
)
from timelog.service.store import RecordStore
from timelog.time import date_to_str, fmt_hms_ms


class Amendment(TypedDict):
    index: int
    original: Record
    amended: Record
    changes: list[str]
    applied: bool


def find_matching_indices(
    records: list[Record], date: pendulum.Date, pattern: str
) -> list[int]:
    """Indices of records on the given date whose task contains pattern."""
    return [
        index
        for index, record in enumerate(records)
        if record["date"] == date and pattern in record["task"]
    ]


def amend_record(
    store: RecordStore,
    date: pendulum.Date,
    pattern: str,
    new_task: Optional[str] = None,
    new_duration_minutes: Optional[int] = None,
    new_project: Optional[str] = None,
    dry_run: bool = False,
) -> Amendment:
    """
    Rewrite the single record selected by date and task substring.

    Only supplied fields change. An empty new_project clears the project.
    Nothing is persisted when the match is missing or ambiguous, when no
    change was requested, or in dry-run mode.
    """
    records = store.load_all()

    matching_indices = find_matching_indices(records, date, pattern)
    if len(matching_indices) == 0:
        raise RecordNotFoundError(date_to_str(date), pattern)
    if len(matching_indices) > 1:
        raise AmbiguousMatchError([deepcopy(records[i]) for i in matching_indices])

    record_index = matching_indices[0]
    original = deepcopy(records[record_index])
    amended = deepcopy(original)
    changes: list[str] = []

    if new_task is not None:
        amended["task"] = new_task
        changes.append(f"task: '{original['task']}' → '{new_task}'")

    if new_duration_minutes is not None:
        if new_duration_minutes <= 0:
            raise InvalidDurationError()
        amended["duration_ms"] = new_duration_minutes * 60 * 1000
        changes.append(
            f"duration: {fmt_hms_ms(original['duration_ms'])} → "
            f"{fmt_hms_ms(amended['duration_ms'])}"
        )

    if new_project is not None:
        amended["project"] = new_project if new_project != "" else None
        old_project = original["project"] or "(none)"
        changes.append(f"project: {old_project} → {amended['project'] or '(none)'}")

    if len(changes) == 0:
        raise NoChangesError()

    if not dry_run:
        records[record_index] = amended
        store.save_all(records)

    return {
        "index": record_index,
        "original": original,
        "amended": amended,
        "changes": changes,
        "applied": not dry_run,
    }
