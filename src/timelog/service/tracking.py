# SPDX-License-Identifier: MIT

import logging
from typing import Optional, TypedDict

import pendulum

from timelog.model.record import Record
from timelog.model.tracked_state import TrackedState
from timelog.service import elapsed
from timelog.service.error import (
    AlreadyActiveError,
    AlreadyInProgressError,
    AlreadyPausedError,
    InvalidTaskError,
    NoActiveTaskError,
    NoPausedTaskError,
    NoTaskInProgressError,
)
from timelog.service.store import RecordStore, StateStore
from timelog.template.record import get_record_template
from timelog.template.tracked_state import get_tracked_state_template
from timelog.time import local_date, now_utc

logger = logging.getLogger(__name__)


class Status(TypedDict):
    state: TrackedState
    active: bool
    elapsed_ms: int


def start(
    store: StateStore,
    task: str,
    project: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
) -> TrackedState:
    if task.strip() == "":
        raise InvalidTaskError()
    if store.exists():
        raise AlreadyInProgressError()

    state = get_tracked_state_template()
    state["task"] = task
    state["project"] = project if project else None
    state["started"] = now if now is not None else now_utc()
    store.save(state)
    logger.debug("started %r at %s", task, state["started"])
    return state


def pause(store: StateStore, now: Optional[pendulum.DateTime] = None) -> Status:
    """Bank the elapsed time of the active task; returns the paused status."""
    if not store.exists():
        raise NoActiveTaskError()
    state = store.load()
    if not elapsed.is_active(state):
        raise AlreadyPausedError()

    now = now if now is not None else now_utc()
    paused_state = elapsed.paused(state, now)
    store.save(paused_state)
    logger.debug("paused %r with %d ms banked", state["task"], paused_state["accumulated_ms"])
    return {
        "state": paused_state,
        "active": False,
        "elapsed_ms": paused_state["accumulated_ms"],
    }


def resume(store: StateStore, now: Optional[pendulum.DateTime] = None) -> TrackedState:
    if not store.exists():
        raise NoPausedTaskError()
    state = store.load()
    if elapsed.is_active(state):
        raise AlreadyActiveError()

    resumed_state = elapsed.resumed(state, now if now is not None else now_utc())
    store.save(resumed_state)
    logger.debug("resumed %r", state["task"])
    return resumed_state


def stop(
    state_store: StateStore,
    record_store: RecordStore,
    now: Optional[pendulum.DateTime] = None,
) -> Record:
    """
    Finish the task in progress, active or paused.

    The record is appended before the state is deleted so that a failed
    write leaves the task in progress rather than losing it.
    """
    if not state_store.exists():
        raise NoTaskInProgressError("no task to stop")
    state = state_store.load()

    now = now if now is not None else now_utc()
    record = get_record_template()
    record["task"] = state["task"]
    record["duration_ms"] = elapsed.clamp_nonneg(elapsed.elapsed_ms(state, now))
    record["date"] = local_date(now)
    record["project"] = state["project"]

    record_store.append(record)
    state_store.delete()
    logger.debug("recorded %r: %d ms on %s", record["task"], record["duration_ms"], record["date"])
    return record


def status(store: StateStore, now: Optional[pendulum.DateTime] = None) -> Status:
    if not store.exists():
        raise NoTaskInProgressError("no task to provide status")
    state = store.load()

    now = now if now is not None else now_utc()
    return {
        "state": state,
        "active": elapsed.is_active(state),
        "elapsed_ms": elapsed.clamp_nonneg(elapsed.elapsed_ms(state, now)),
    }
